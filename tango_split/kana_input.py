"""
Romaji to kana conversion for typing practice.

The learner types romaji and sees kana as they type, so the conversion has
to cope with unfinished input: a trailing "n" or a lone consonant is kept
as Latin text until the next keystroke decides it.
"""

from types import MappingProxyType
from typing import Optional

from tango_split.characters import (
    SOKUON,
    SOKUON_KATAKANA,
    SYLLABIC_N,
    SYLLABIC_N_KATAKANA,
    as_katakana,
    is_katakana,
)
from tango_split.vocabulary import canonical_form

MODE_HIRAGANA = "hiragana"
MODE_KATAKANA = "katakana"

HIRAGANA_INPUT_MAP = MappingProxyType({
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    "sa": "さ", "shi": "し", "su": "す", "se": "せ", "so": "そ",
    "ta": "た", "chi": "ち", "tsu": "つ", "te": "て", "to": "と",
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    "ha": "は", "hi": "ひ", "fu": "ふ", "he": "へ", "ho": "ほ",
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    "ya": "や", "yu": "ゆ", "yo": "よ",
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    "wa": "わ", "wo": "を", "nn": "ん",
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    "za": "ざ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    "kya": "きゃ", "kyu": "きゅ", "kyo": "きょ",
    "sha": "しゃ", "shu": "しゅ", "sho": "しょ",
    "cha": "ちゃ", "chu": "ちゅ", "cho": "ちょ",
    "nya": "にゃ", "nyu": "にゅ", "nyo": "にょ",
    "hya": "ひゃ", "hyu": "ひゅ", "hyo": "ひょ",
    "mya": "みゃ", "myu": "みゅ", "myo": "みょ",
    "rya": "りゃ", "ryu": "りゅ", "ryo": "りょ",
    "gya": "ぎゃ", "gyu": "ぎゅ", "gyo": "ぎょ",
    "ja": "じゃ", "ju": "じゅ", "jo": "じょ",
    "bya": "びゃ", "byu": "びゅ", "byo": "びょ",
    "pya": "ぴゃ", "pyu": "ぴゅ", "pyo": "ぴょ",
    "-": "ー",
})

KATAKANA_INPUT_MAP = MappingProxyType({
    romaji: as_katakana(kana) for romaji, kana in HIRAGANA_INPUT_MAP.items()
})

# Doubling any of these (except n) produces a small tsu
_DOUBLING_CONSONANTS = frozenset("bcdfghjklmpqrstvwxyz")

_N_FOLLOWERS_KEEPING_N = frozenset("aiueoy")


def to_kana(romaji: str, mode: str = MODE_HIRAGANA) -> str:
    """
    Convert typed romaji to kana.

    Args:
        romaji: Text as typed so far
        mode: "hiragana" or "katakana"

    Returns:
        Kana with any unconverted characters left in place

    Raises:
        ValueError: If mode is not "hiragana" or "katakana"

    Example:
        >>> to_kana("kippu")
        'きっぷ'
        >>> to_kana("kohi-", mode="katakana")
        'コヒー'
    """
    if mode == MODE_HIRAGANA:
        table, sokuon, syllabic_n = HIRAGANA_INPUT_MAP, SOKUON, SYLLABIC_N
    elif mode == MODE_KATAKANA:
        table, sokuon, syllabic_n = KATAKANA_INPUT_MAP, SOKUON_KATAKANA, SYLLABIC_N_KATAKANA
    else:
        raise ValueError(f"mode must be 'hiragana' or 'katakana', got {mode!r}")

    rest = romaji.lower()
    kana = []

    while rest:
        # Doubled consonant: small tsu, then convert the second letter normally
        if len(rest) > 1 and rest[0] in _DOUBLING_CONSONANTS and rest[0] == rest[1]:
            kana.append(sokuon)
            rest = rest[1:]
            continue

        for length in (3, 2, 1):
            chunk = rest[:length]
            if len(chunk) == length and chunk in table:
                kana.append(table[chunk])
                rest = rest[length:]
                break
        else:
            if rest[0] == "n" and len(rest) > 1 and rest[1] not in _N_FOLLOWERS_KEEPING_N:
                kana.append(syllabic_n)
            else:
                kana.append(rest[0])
            rest = rest[1:]

    return "".join(kana)


def detect_mode(reading: str) -> str:
    """Pick the typing mode for an expected reading."""
    return MODE_KATAKANA if is_katakana(reading) else MODE_HIRAGANA


def check_answer(typed: str, expected: str, mode: Optional[str] = None) -> bool:
    """
    Check typed romaji against a vocabulary reading.

    Args:
        typed: Romaji typed by the learner
        expected: Hiragana field of the vocabulary entry (alternatives allowed)
        mode: Typing mode; detected from the expected reading if omitted

    Returns:
        True if the converted input equals the canonical reading
    """
    answer = canonical_form(expected)
    if not typed or not answer:
        return False
    if mode is None:
        mode = detect_mode(answer)
    return to_kana(typed.strip(), mode) == answer
