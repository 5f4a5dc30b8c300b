"""Text-commit sink: where composed text ends up.

The host implements :class:`TextSink` on top of its text field.
:class:`RecordingSink` keeps everything in memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextSink(ABC):
    @abstractmethod
    def set_composing_text(self, text: str) -> None:
        """Show *text* as in-progress, replacing any previous in-progress text."""

    @abstractmethod
    def finish_composing_text(self) -> None:
        """Turn the in-progress text into finalized text (no-op if none)."""

    @abstractmethod
    def commit_text(self, text: str) -> None:
        """Append finalized *text*, bypassing the in-progress slot."""


class RecordingSink(TextSink):
    """In-memory text field.

    ``committed`` is the finalized text, ``composing`` the in-progress
    text, ``calls`` every sink call in order as ``(method, arg)`` tuples.
    """

    def __init__(self):
        self.committed = ""
        self.composing = ""
        self.calls: list[tuple[str, str | None]] = []

    @property
    def text(self) -> str:
        """What the user sees: finalized text followed by in-progress text."""
        return self.committed + self.composing

    def set_composing_text(self, text: str) -> None:
        self.calls.append(("set_composing_text", text))
        self.composing = text

    def finish_composing_text(self) -> None:
        self.calls.append(("finish_composing_text", None))
        self.committed += self.composing
        self.composing = ""

    def commit_text(self, text: str) -> None:
        self.calls.append(("commit_text", text))
        self.committed += text

    def clear(self) -> None:
        self.committed = ""
        self.composing = ""
        self.calls.clear()
