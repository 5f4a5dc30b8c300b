"""Hangul jamo indices and combination tables.

Indices follow Unicode order for the precomposed syllable block:
19 initials (choseong), 21 medials (jungseong), 27 finals (jongseong).
A syllable is ``SYLLABLE_BASE + (cho * 21 + jung) * 28 + (jong + 1)``
with ``jong == JONG_NONE`` for no final.

Names are romanized (``R`` for initial ㄹ, ``L`` for final ㄹ, ``NG`` for ㅇ).
"""

from __future__ import annotations

from typing import NamedTuple

SYLLABLE_BASE = 0xAC00
JUNG_COUNT = 21
JONG_COUNT = 28  # including "no final"

NONE = -1

# Choseong
CHO_G, CHO_GG, CHO_N, CHO_D, CHO_DD, CHO_R, CHO_M, CHO_B, CHO_BB, CHO_S = range(10)
CHO_SS, CHO_NG, CHO_J, CHO_JJ, CHO_CH, CHO_K, CHO_T, CHO_P, CHO_H = range(10, 19)

# Jungseong
JUNG_A, JUNG_AE, JUNG_YA, JUNG_YAE, JUNG_EO, JUNG_E, JUNG_YEO = range(7)
JUNG_YE, JUNG_O, JUNG_WA, JUNG_WAE, JUNG_OE, JUNG_YO, JUNG_U = range(7, 14)
JUNG_WEO, JUNG_WE, JUNG_WI, JUNG_YU, JUNG_EU, JUNG_UI, JUNG_I = range(14, 21)

# Jongseong
JONG_NONE = NONE
JONG_G, JONG_GG, JONG_GS, JONG_N, JONG_NJ, JONG_NH, JONG_D = range(7)
JONG_L, JONG_LG, JONG_LM, JONG_LB, JONG_LS, JONG_LT, JONG_LP = range(7, 14)
JONG_LH, JONG_M, JONG_B, JONG_BS, JONG_S, JONG_SS, JONG_NG = range(14, 21)
JONG_J, JONG_CH, JONG_K, JONG_T, JONG_P, JONG_H = range(21, 27)

# Compatibility jamo shown for an initial typed without a vowel
COMPAT_CHO = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"

# Final form of each initial. ㄸ ㅃ ㅉ have no final form and fall back
# to their plain consonant.
CHO_TO_JONG: tuple[int, ...] = (
    JONG_G, JONG_GG, JONG_N, JONG_D, JONG_D, JONG_L, JONG_M, JONG_B, JONG_B,
    JONG_S, JONG_SS, JONG_NG, JONG_J, JONG_J, JONG_CH, JONG_K, JONG_T, JONG_P,
    JONG_H,
)

# Initial form of each non-compound final, used when a final moves to the
# next syllable.
JONG_TO_CHO: dict[int, int] = {
    JONG_G: CHO_G, JONG_GG: CHO_GG, JONG_N: CHO_N, JONG_D: CHO_D,
    JONG_L: CHO_R, JONG_M: CHO_M, JONG_B: CHO_B, JONG_S: CHO_S,
    JONG_SS: CHO_SS, JONG_NG: CHO_NG, JONG_J: CHO_J, JONG_CH: CHO_CH,
    JONG_K: CHO_K, JONG_T: CHO_T, JONG_P: CHO_P, JONG_H: CHO_H,
}

# Combination tables: (first, second) -> combined. Split tables are the
# exact inverses.
DOUBLE_CHO: dict[tuple[int, int], int] = {
    (CHO_G, CHO_G): CHO_GG,
    (CHO_D, CHO_D): CHO_DD,
    (CHO_B, CHO_B): CHO_BB,
    (CHO_S, CHO_S): CHO_SS,
    (CHO_J, CHO_J): CHO_JJ,
}

COMPOUND_JUNG: dict[tuple[int, int], int] = {
    (JUNG_O, JUNG_A): JUNG_WA,
    (JUNG_O, JUNG_AE): JUNG_WAE,
    (JUNG_O, JUNG_I): JUNG_OE,
    (JUNG_U, JUNG_EO): JUNG_WEO,
    (JUNG_U, JUNG_E): JUNG_WE,
    (JUNG_U, JUNG_I): JUNG_WI,
    (JUNG_EU, JUNG_I): JUNG_UI,
}

COMPOUND_JONG: dict[tuple[int, int], int] = {
    (JONG_G, JONG_S): JONG_GS,
    (JONG_N, JONG_J): JONG_NJ,
    (JONG_N, JONG_H): JONG_NH,
    (JONG_L, JONG_G): JONG_LG,
    (JONG_L, JONG_M): JONG_LM,
    (JONG_L, JONG_B): JONG_LB,
    (JONG_L, JONG_S): JONG_LS,
    (JONG_L, JONG_T): JONG_LT,
    (JONG_L, JONG_P): JONG_LP,
    (JONG_L, JONG_H): JONG_LH,
    (JONG_B, JONG_S): JONG_BS,
}

SPLIT_CHO: dict[int, tuple[int, int]] = {v: k for k, v in DOUBLE_CHO.items()}
SPLIT_JUNG: dict[int, tuple[int, int]] = {v: k for k, v in COMPOUND_JUNG.items()}
SPLIT_JONG: dict[int, tuple[int, int]] = {v: k for k, v in COMPOUND_JONG.items()}


def combine_double_cho(first: int, second: int) -> int:
    return DOUBLE_CHO.get((first, second), NONE)


def combine_jung(first: int, second: int) -> int:
    return COMPOUND_JUNG.get((first, second), NONE)


def combine_jong(first: int, second: int) -> int:
    return COMPOUND_JONG.get((first, second), NONE)


def split_jung(jung: int) -> tuple[int, int] | None:
    return SPLIT_JUNG.get(jung)


def split_jong(jong: int) -> tuple[int, int] | None:
    return SPLIT_JONG.get(jong)


def jong_to_cho(jong: int) -> int:
    return JONG_TO_CHO[jong]


class Jamo(NamedTuple):
    """A key's phonetic value: a consonant (cho + jong form) or a vowel."""

    cho: int = NONE
    jung: int = NONE
    jong: int = NONE

    @property
    def is_vowel(self) -> bool:
        return self.jung != NONE


def consonant(cho: int) -> Jamo:
    return Jamo(cho=cho, jong=CHO_TO_JONG[cho])


def vowel(jung: int) -> Jamo:
    return Jamo(jung=jung)


# 2-beolsik layout on QWERTY. Upper case only where Shift gives a
# different jamo; other upper-case letters are not mapped.
LATIN_TO_JAMO: dict[str, Jamo] = {
    # top row
    "q": consonant(CHO_B), "Q": consonant(CHO_BB),
    "w": consonant(CHO_J), "W": consonant(CHO_JJ),
    "e": consonant(CHO_D), "E": consonant(CHO_DD),
    "r": consonant(CHO_G), "R": consonant(CHO_GG),
    "t": consonant(CHO_S), "T": consonant(CHO_SS),
    "y": vowel(JUNG_YO),
    "u": vowel(JUNG_YEO),
    "i": vowel(JUNG_YA),
    "o": vowel(JUNG_AE), "O": vowel(JUNG_YAE),
    "p": vowel(JUNG_E), "P": vowel(JUNG_YE),
    # home row
    "a": consonant(CHO_M),
    "s": consonant(CHO_N),
    "d": consonant(CHO_NG),
    "f": consonant(CHO_R),
    "g": consonant(CHO_H),
    "h": vowel(JUNG_O),
    "j": vowel(JUNG_EO),
    "k": vowel(JUNG_A),
    "l": vowel(JUNG_I),
    # bottom row
    "z": consonant(CHO_K),
    "x": consonant(CHO_T),
    "c": consonant(CHO_CH),
    "v": consonant(CHO_P),
    "b": vowel(JUNG_YU),
    "n": vowel(JUNG_U),
    "m": vowel(JUNG_EU),
}


def latin_to_jamo(ch: str) -> Jamo | None:
    return LATIN_TO_JAMO.get(ch)


def compose(cho: int, jung: int, jong: int = JONG_NONE) -> str:
    """Text for the given slots: a syllable block, or a lone initial."""
    if jung == NONE:
        return COMPAT_CHO[cho]
    return chr(SYLLABLE_BASE + (cho * JUNG_COUNT + jung) * JONG_COUNT + (jong + 1))
