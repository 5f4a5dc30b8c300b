"""Tests for HangulComposer."""

from __future__ import annotations

import pytest

from symlayer.hangul import jamo
from symlayer.hangul.composer import HangulComposer


@pytest.fixture
def composer(sink):
    return HangulComposer(sink)


def type_keys(composer, keys):
    for ch in keys:
        composer.input_latin_char(ch)


def test_initial_and_medial(composer, sink):
    type_keys(composer, "rk")
    assert composer.composing_text == "가"
    assert sink.composing == "가"
    assert sink.committed == ""


def test_initial_medial_final(composer, sink):
    type_keys(composer, "rks")
    assert composer.composing_text == "간"
    assert sink.text == "간"


def test_double_initial(composer, sink):
    type_keys(composer, "rr")
    assert composer.cho == jamo.CHO_GG
    assert composer.jung == jamo.NONE
    assert sink.composing == "ㄲ"
    assert sink.committed == ""


def test_uncombinable_initials_commit(composer, sink):
    type_keys(composer, "rs")
    assert sink.committed == "ㄱ"
    assert sink.composing == "ㄴ"


def test_lone_vowel_gets_null_initial(composer, sink):
    type_keys(composer, "k")
    assert composer.cho == jamo.CHO_NG
    assert sink.composing == "아"


def test_compound_medial(composer, sink):
    type_keys(composer, "dhk")
    assert sink.composing == "와"
    type_keys(composer, "l")
    # ㅘ + ㅣ does not combine: new syllable with ㅇ
    assert sink.committed == "와"
    assert sink.composing == "이"


def test_compound_final(composer, sink):
    type_keys(composer, "dlfr")
    assert composer.jong == jamo.JONG_LG
    assert sink.composing == "읽"


def test_uncombinable_final_starts_new_syllable(composer, sink):
    type_keys(composer, "rksr")
    assert sink.committed == "간"
    assert sink.composing == "ㄱ"


def test_final_moves_to_next_syllable(composer, sink):
    type_keys(composer, "dkssud")
    assert sink.committed == "안"
    assert sink.composing == "녕"


def test_compound_final_splits_on_vowel(composer, sink):
    type_keys(composer, "dlfrj")
    assert sink.committed == "일"
    assert sink.composing == "거"


def test_phrase(composer, sink):
    type_keys(composer, "dkssudgktpdy")
    composer.handle_space_or_enter(" ")
    assert sink.committed == "안녕하세요 "
    assert sink.composing == ""


def test_tense_consonant_as_final(composer, sink):
    type_keys(composer, "rkE")
    # ㄸ has no final form; it lands as ㄷ
    assert composer.jong == jamo.JONG_D
    assert sink.composing == "갇"


def test_unmapped_char_commits_and_passes_through(composer, sink):
    type_keys(composer, "rk1")
    assert sink.committed == "가1"
    assert sink.composing == ""
    assert not composer.is_composing()


def test_unmapped_char_when_empty(composer, sink):
    composer.input_latin_char("?")
    assert sink.committed == "?"
    assert sink.calls == [("commit_text", "?")]


def test_rejects_multi_char_input(composer):
    with pytest.raises(ValueError):
        composer.input_latin_char("rk")


def test_space_commits_then_appends(composer, sink):
    type_keys(composer, "rk")
    composer.handle_space_or_enter(" ")
    assert sink.committed == "가 "
    assert not composer.is_composing()
    assert composer.composing_text == ""


def test_enter_when_not_composing(composer, sink):
    composer.handle_space_or_enter("\n")
    assert sink.calls == [("commit_text", "\n")]


def test_backspace_sequence(composer, sink):
    type_keys(composer, "rks")
    assert composer.backspace() is True
    assert sink.composing == "가"
    assert composer.backspace() is True
    assert sink.composing == "ㄱ"
    assert composer.backspace() is True
    assert not composer.is_composing()
    assert sink.text == ""
    calls = len(sink.calls)
    assert composer.backspace() is False
    assert len(sink.calls) == calls


def test_backspace_splits_compound_final(composer, sink):
    type_keys(composer, "dlfr")
    composer.backspace()
    assert composer.jong == jamo.JONG_L
    assert sink.composing == "일"


def test_backspace_splits_compound_medial(composer, sink):
    type_keys(composer, "dnj")
    assert sink.composing == "워"
    composer.backspace()
    assert composer.jung == jamo.JUNG_U
    assert sink.composing == "우"


def test_backspace_does_not_touch_committed_text(composer, sink):
    type_keys(composer, "rksr")
    composer.backspace()
    assert sink.text == "간"
    assert sink.committed == "간"
    assert composer.backspace() is False


def test_final_only_set_with_medial(composer):
    for ch in "rrkfkrtnqw":
        composer.input_latin_char(ch)
        if composer.jong != jamo.NONE:
            assert composer.jung != jamo.NONE
        if composer.jung != jamo.NONE:
            assert composer.cho != jamo.NONE


def test_reset_keeps_shown_text(composer, sink):
    type_keys(composer, "rk")
    composer.reset()
    assert not composer.is_composing()
    assert composer.composing_text == ""
    assert sink.committed == "가"


def test_reset_when_empty(composer, sink):
    composer.reset()
    assert not composer.is_composing()
    assert sink.text == ""
