"""
Kana tables and character helpers for tango-split.

Provides the hiragana/katakana pairing used to fold katakana before
romanization, the kana -> romaji table used by the phonetic transducer,
and small classification helpers.
"""

import re
from types import MappingProxyType
from typing import Dict

# ============================================================================
# Kana Character Tables
# ============================================================================

SOKUON = "っ"
SOKUON_KATAKANA = "ッ"
LONG_VOWEL_MARK = "ー"
SYLLABIC_N = "ん"
SYLLABIC_N_KATAKANA = "ン"

VOWELS = frozenset("aeiou")

# Hiragana/katakana pairs, grouped by sound
KANA_PAIRS = (
    "あア", "いイ", "うウ", "えエ", "おオ",
    "かカ", "きキ", "くク", "けケ", "こコ",
    "さサ", "しシ", "すス", "せセ", "そソ",
    "たタ", "ちチ", "つツ", "てテ", "とト",
    "なナ", "にニ", "ぬヌ", "ねネ", "のノ",
    "はハ", "ひヒ", "ふフ", "へヘ", "ほホ",
    "まマ", "みミ", "むム", "めメ", "もモ",
    "やヤ", "ゆユ", "よヨ",
    "らラ", "りリ", "るル", "れレ", "ろロ",
    "わワ", "ゐヰ", "ゑヱ", "をヲ", "んン",
    # Voiced (dakuten)
    "がガ", "ぎギ", "ぐグ", "げゲ", "ごゴ",
    "ざザ", "じジ", "ずズ", "ぜゼ", "ぞゾ",
    "だダ", "ぢヂ", "づヅ", "でデ", "どド",
    "ばバ", "びビ", "ぶブ", "べベ", "ぼボ",
    "ゔヴ",
    # Semi-voiced (handakuten)
    "ぱパ", "ぴピ", "ぷプ", "ぺペ", "ぽポ",
    # Small kana
    "ぁァ", "ぃィ", "ぅゥ", "ぇェ", "ぉォ",
    "ゃャ", "ゅュ", "ょョ", "ゎヮ", "っッ",
    "ゕヵ", "ゖヶ",
)

KATAKANA_TO_HIRAGANA: Dict[str, str] = {kata: hira for hira, kata in KANA_PAIRS}
HIRAGANA_TO_KATAKANA: Dict[str, str] = {hira: kata for hira, kata in KANA_PAIRS}

# The long-vowel mark and middle dot are shared by both scripts
_KATAKANA_PATTERN = re.compile(r"[ァ-ヺヽヾ]")
_HIRAGANA_PATTERN = re.compile(r"[ぁ-ゟ]")
_KANA_ONLY_PATTERN = re.compile(r"^[ぁ-ゟ゠-ヿ]+$")


# ============================================================================
# Romanization Table
# ============================================================================

_ROMANIZATION: Dict[str, str] = {
    # Basic syllables
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "i", "ゑ": "e", "を": "o", "ん": "n",
    # Voiced and semi-voiced
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ゔ": "vu",
    # Small kana on their own
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
    "ゕ": "ka", "ゖ": "ke",
    # Palatalized digraphs
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo",
    "ぢゃ": "ja", "ぢゅ": "ju", "ぢょ": "jo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    # Extended digraphs (mostly loanwords)
    "しぇ": "she", "じぇ": "je", "ちぇ": "che",
    "てぃ": "ti", "でぃ": "di", "とぅ": "tu", "どぅ": "du",
    "つぁ": "tsa", "つぃ": "tsi", "つぇ": "tse", "つぉ": "tso",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo", "ふゅ": "fyu",
    "うぃ": "wi", "うぇ": "we", "うぉ": "wo",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
    "いぇ": "ye",
    # Punctuation
    "。": ".", "、": ",", "！": "!", "？": "?", "「": "`", "」": "`",
}

ROMANIZATION_TABLE = MappingProxyType(_ROMANIZATION)


# ============================================================================
# Helpers
# ============================================================================

def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana, leaving every other character alone.

    Example:
        >>> as_hiragana("コーヒー")
        'こーひー'
    """
    return "".join(KATAKANA_TO_HIRAGANA.get(char, char) for char in text)


def as_katakana(text: str) -> str:
    """Convert hiragana to katakana, leaving every other character alone."""
    return "".join(HIRAGANA_TO_KATAKANA.get(char, char) for char in text)


def is_katakana(text: str) -> bool:
    """True if text contains at least one katakana character."""
    return bool(_KATAKANA_PATTERN.search(text))


def is_hiragana(text: str) -> bool:
    """True if text contains at least one hiragana character."""
    return bool(_HIRAGANA_PATTERN.search(text))


def is_kana(text: str) -> bool:
    """True if text is non-empty and made only of kana."""
    return bool(_KANA_ONLY_PATTERN.match(text))
