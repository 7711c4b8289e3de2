"""
Romanization for tango-split.

A token is romanized by, in order:
1. the two particles whose pronunciation differs from their spelling
   (は -> wa, へ -> e),
2. the authored romaji of the loaded vocabulary,
3. a character-level transducer over the kana table.
"""

from types import MappingProxyType
from typing import Iterable, List, Tuple

from tango_split.characters import (
    LONG_VOWEL_MARK,
    ROMANIZATION_TABLE,
    SOKUON,
    VOWELS,
    as_hiragana,
)
from tango_split.dictionary import RomajiDictionary
from tango_split.vocabulary import VocabularyEntry

# Always applied, whatever the vocabulary says
IRREGULAR_PARTICLES = MappingProxyType({
    "は": "wa",
    "へ": "e",
})

_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")


# =============================================================================
# Phonetic Transducer
# =============================================================================

def _lookup(text: str, pos: int) -> Tuple[str, int]:
    """Romanize the syllable at pos; returns (romaji, characters consumed)."""
    pair = text[pos:pos + 2]
    if len(pair) == 2 and pair in ROMANIZATION_TABLE:
        return ROMANIZATION_TABLE[pair], 2

    char = text[pos]
    return ROMANIZATION_TABLE.get(char, char), 1


def _following_sound(text: str, pos: int) -> str:
    if pos >= len(text) or text[pos] in (SOKUON, LONG_VOWEL_MARK):
        return ""
    return _lookup(text, pos)[0]


def romanize_kana(text: str) -> str:
    """
    Romanize kana character by character.

    Katakana is folded to hiragana first. Small tsu doubles the consonant
    of the next syllable, the long-vowel mark repeats the previous vowel,
    and characters outside the kana table pass through unchanged.

    Example:
        >>> romanize_kana("きっぷ")
        'kippu'
        >>> romanize_kana("コーヒー")
        'koohii'
    """
    text = as_hiragana(text)
    parts: List[str] = []
    pos = 0

    while pos < len(text):
        char = text[pos]

        if char == SOKUON:
            following = _following_sound(text, pos + 1)
            if following and following[0] in _CONSONANTS:
                parts.append(following[0])
            pos += 1
            continue

        if char == LONG_VOWEL_MARK:
            if parts and parts[-1][-1] in VOWELS:
                parts.append(parts[-1][-1])
            pos += 1
            continue

        romaji, width = _lookup(text, pos)
        parts.append(romaji)
        pos += width

    return "".join(parts)


# =============================================================================
# Romanizer
# =============================================================================

class Romanizer:
    """
    Romanization function bound to one vocabulary snapshot.

    Accepts token strings or Token objects. Never returns an empty string
    for non-empty input: when the transducer produces nothing (a lone small
    tsu or long-vowel mark) the token is returned as it is.
    """

    __slots__ = ("dictionary",)

    def __init__(self, dictionary: RomajiDictionary):
        self.dictionary = dictionary

    @classmethod
    def from_vocabulary(cls, vocabulary: Iterable[VocabularyEntry] = ()) -> "Romanizer":
        return cls(RomajiDictionary.build(vocabulary))

    def romanize(self, token) -> str:
        surface = getattr(token, "surface", token)
        if not surface:
            return ""

        irregular = IRREGULAR_PARTICLES.get(surface)
        if irregular is not None:
            return irregular

        authored = self.dictionary.get(surface)
        if authored is not None:
            return authored

        return romanize_kana(surface) or surface

    def __call__(self, token) -> str:
        return self.romanize(token)

    def __repr__(self) -> str:
        return f"Romanizer({self.dictionary!r})"
