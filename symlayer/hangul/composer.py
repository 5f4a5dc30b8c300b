"""HangulComposer: 2-beolsik jamo automaton.

Latin keys are mapped to jamo and assembled into syllable blocks. The
syllable being typed is shown as composing text on the sink and finalized
when the next key cannot extend it.

States, by which slots are filled::

    EMPTY -> CHO -> CHO+JUNG -> CHO+JUNG+JONG

A vowel typed after a final moves the final (or the second half of a
compound final) to the start of the next syllable, e.g. ``dkssud``::

    ㅇ  아  안  안ㄴ  안녀  안녕
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from symlayer.hangul import jamo
from symlayer.hangul.jamo import NONE

if TYPE_CHECKING:
    from symlayer.sink import TextSink

logger = logging.getLogger(__name__)


class HangulComposer:
    def __init__(self, sink: "TextSink"):
        self.sink = sink
        self.cho = NONE
        self.jung = NONE
        self.jong = NONE
        self._composing = ""

    def __repr__(self) -> str:
        return f"<HangulComposer cho={self.cho} jung={self.jung} jong={self.jong}>"

    @property
    def composing_text(self) -> str:
        return self._composing

    def is_composing(self) -> bool:
        return self.cho != NONE or self.jung != NONE or self.jong != NONE

    def reset(self) -> None:
        """Drop composition state; text already shown to the user is kept."""
        self._clear_slots()
        self.sink.finish_composing_text()

    def input_latin_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        j = jamo.latin_to_jamo(ch)
        if j is None:
            self._commit_current()
            self.sink.commit_text(ch)
            return
        if j.is_vowel:
            self._input_jung(j)
        else:
            self._input_cho(j)
        self._update_composing()

    def handle_space_or_enter(self, text: str) -> None:
        if self.is_composing():
            self._commit_current()
        self.sink.commit_text(text)

    def backspace(self) -> bool:
        """Remove the last typed jamo. Returns False if nothing was composing."""
        if not self.is_composing():
            return False
        if self.jong != NONE:
            split = jamo.split_jong(self.jong)
            self.jong = split[0] if split else NONE
        elif self.jung != NONE:
            split = jamo.split_jung(self.jung)
            self.jung = split[0] if split else NONE
        else:
            self.cho = NONE
        self._update_composing()
        return True

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _input_cho(self, j: jamo.Jamo) -> None:
        if self.cho == NONE:
            self.cho = j.cho
            return
        if self.jung == NONE:
            combined = jamo.combine_double_cho(self.cho, j.cho)
            if combined != NONE:
                self.cho = combined
            else:
                self._commit_current()
                self.cho = j.cho
            return
        if self.jong == NONE:
            self.jong = j.jong
            return
        combined = jamo.combine_jong(self.jong, j.jong)
        if combined != NONE:
            self.jong = combined
        else:
            self._commit_current()
            self.cho = j.cho

    def _input_jung(self, j: jamo.Jamo) -> None:
        if self.cho == NONE:
            self.cho = jamo.CHO_NG
        if self.jung == NONE:
            self.jung = j.jung
        elif self.jong == NONE:
            combined = jamo.combine_jung(self.jung, j.jung)
            if combined != NONE:
                self.jung = combined
            else:
                self._commit_current()
                self.cho = jamo.CHO_NG
                self.jung = j.jung
        else:
            # Final consonant moves to the next syllable
            split = jamo.split_jong(self.jong)
            if split is not None:
                self.jong, moved = split
            else:
                moved, self.jong = self.jong, NONE
            self._commit_current()
            self.cho = jamo.jong_to_cho(moved)
            self.jung = j.jung

    # ------------------------------------------------------------------
    # Sink helpers
    # ------------------------------------------------------------------

    def _compose(self) -> str:
        return jamo.compose(self.cho, self.jung, self.jong)

    def _update_composing(self) -> None:
        if not self.is_composing():
            self._composing = ""
            self.sink.set_composing_text("")
            self.sink.finish_composing_text()
            return
        self._composing = self._compose()
        self.sink.set_composing_text(self._composing)

    def _commit_current(self) -> None:
        if not self.is_composing():
            return
        text = self._compose()
        logger.debug("commit %r", text)
        self.sink.set_composing_text(text)
        self.sink.finish_composing_text()
        self._clear_slots()

    def _clear_slots(self) -> None:
        self.cho = NONE
        self.jung = NONE
        self.jong = NONE
        self._composing = ""
