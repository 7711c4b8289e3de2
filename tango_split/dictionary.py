"""
Token and romaji dictionaries for tango-split.

Both dictionaries are derived from the currently loaded vocabulary and are
rebuilt, never mutated, whenever that vocabulary changes.

The token dictionary stores its candidates in a marisa_trie.Trie, so the
longest candidate that prefixes the rest of a sentence is found with one
Trie.prefixes() call instead of a scan over every candidate. Readings the
trie cannot store, and sentences it cannot encode, use the scan.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import marisa_trie

from tango_split.vocabulary import VocabularyEntry, canonical_form

logger = logging.getLogger(__name__)


# ============================================================================
# Token Kinds
# ============================================================================

KIND_WORD = "word"
KIND_EXCEPTION = "exception"
KIND_PARTICLE = "particle"
KIND_ENDING = "ending"
KIND_PUNCTUATION = "punctuation"
KIND_BLANK = "blank"
KIND_UNKNOWN = "unknown"

TOKEN_KINDS = (
    KIND_WORD, KIND_EXCEPTION, KIND_PARTICLE, KIND_ENDING,
    KIND_PUNCTUATION, KIND_BLANK, KIND_UNKNOWN,
)


# ============================================================================
# Fixed Tables
# ============================================================================

# Stands in for the word removed from a fill-in-the-blank sentence.
# Full-width low lines never occur in the generated Japanese text.
BLANK_MARKER = "＿＿＿"

# Greetings and set phrases that must never be split
WORD_EXCEPTIONS = (
    "こんにちは", "ありがとう", "どうぞよろしく", "おやすみなさい", "はじめまして",
)

PARTICLES = (
    "は", "が", "を", "に", "へ", "と", "も", "の", "で", "か", "ね", "よ",
    "から", "まで",
)

# Verb and politeness endings
ENDINGS = (
    "ます", "ません", "ました", "ませんでした", "ましょう",
    "です", "でした", "ですか", "でしたか", "ではありません", "じゃありません",
    "ください", "なさい",
)

PUNCTUATION = ("。", "、", "！", "？", "「", "」")

# Romanizations for endings that unit files rarely list themselves
COMMON_ENDING_ROMAJI = MappingProxyType({
    "です": "desu",
    "ます": "masu",
    "ました": "mashita",
    "ません": "masen",
    "ください": "kudasai",
})


# ============================================================================
# Token Dictionary
# ============================================================================

def _trie_storable(surface: str) -> bool:
    if "\x00" in surface:
        return False
    try:
        surface.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class TokenDictionary:
    """
    Segmentation candidates for one vocabulary snapshot.

    Candidates are the canonical readings of the vocabulary, the fixed
    exceptions, particles, endings and punctuation. The blank marker is
    handled separately and always wins at its position.
    """

    __slots__ = ("_kinds", "_candidates", "_trie", "_unindexed", "_max_len")

    def __init__(self, kinds: Mapping[str, str]):
        # Insertion order of kinds is the tie-break among equal lengths
        self._kinds = MappingProxyType(dict(kinds))
        self._candidates: Tuple[str, ...] = tuple(
            sorted(self._kinds, key=len, reverse=True)
        )
        self._max_len = max((len(c) for c in self._candidates), default=0)

        # The trie stores UTF-8 keys and truncates at NUL; anything it
        # cannot hold exactly is matched by a scan instead
        self._unindexed: Tuple[str, ...] = tuple(
            c for c in self._candidates if not _trie_storable(c)
        )
        self._trie = marisa_trie.Trie(
            [c for c in self._candidates if _trie_storable(c)]
        )

    @classmethod
    def build(cls, vocabulary: Iterable[VocabularyEntry] = ()) -> "TokenDictionary":
        """
        Build the dictionary for a vocabulary snapshot.

        Args:
            vocabulary: Loaded entries (may be empty)

        Returns:
            A new TokenDictionary
        """
        kinds: Dict[str, str] = {}

        for entry in vocabulary:
            word = canonical_form(entry.hiragana)
            if word:
                kinds.setdefault(word, KIND_WORD)

        for group, kind in (
            (WORD_EXCEPTIONS, KIND_EXCEPTION),
            (PARTICLES, KIND_PARTICLE),
            (ENDINGS, KIND_ENDING),
            (PUNCTUATION, KIND_PUNCTUATION),
        ):
            for surface in group:
                kinds.setdefault(surface, kind)

        # The marker is matched before the trie; keep it out of the candidates
        kinds.pop(BLANK_MARKER, None)

        dictionary = cls(kinds)
        logger.debug(f"Built token dictionary with {len(dictionary)} candidates")
        return dictionary

    @property
    def candidates(self) -> Tuple[str, ...]:
        """Candidates in match order: longest first, insertion order on ties."""
        return self._candidates

    def kind_of(self, surface: str) -> str:
        """Get the token kind for a surface form."""
        if surface == BLANK_MARKER:
            return KIND_BLANK
        return self._kinds.get(surface, KIND_UNKNOWN)

    def longest_match(self, text: str, start: int = 0) -> Optional[str]:
        """
        Find the candidate to emit at a position.

        Args:
            text: Whitespace-free sentence
            start: Cursor position

        Returns:
            The blank marker if it starts here, else the longest candidate
            prefixing text[start:], else None
        """
        if text.startswith(BLANK_MARKER, start):
            return BLANK_MARKER

        window = text[start:start + self._max_len]
        try:
            prefixes: List[str] = self._trie.prefixes(window)
        except UnicodeEncodeError:
            # Lone surrogates in the sentence
            return self._scan(text, start, self._candidates)

        best = max(prefixes, key=len) if prefixes else None
        if self._unindexed:
            longer = [c for c in self._unindexed if len(c) > len(best or "")]
            best = self._scan(text, start, longer) or best
        return best

    @staticmethod
    def _scan(text: str, start: int, candidates: Iterable[str]) -> Optional[str]:
        """First candidate prefixing text[start:]; candidates are longest first."""
        for candidate in candidates:
            if text.startswith(candidate, start):
                return candidate
        return None

    def __contains__(self, surface: object) -> bool:
        return surface in self._kinds

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return f"TokenDictionary({len(self)} candidates)"


# ============================================================================
# Romaji Dictionary
# ============================================================================

class RomajiDictionary:
    """
    Authored romanizations keyed by canonical reading and by kanji form.

    The first entry to define a key wins.
    """

    __slots__ = ("_romaji",)

    def __init__(self, romaji: Mapping[str, str]):
        self._romaji = MappingProxyType(dict(romaji))

    @classmethod
    def build(cls, vocabulary: Iterable[VocabularyEntry] = ()) -> "RomajiDictionary":
        romaji: Dict[str, str] = {}

        for entry in vocabulary:
            reading = canonical_form(entry.hiragana)
            romaji_base = canonical_form(entry.romaji)
            if not romaji_base:
                continue
            if reading:
                romaji.setdefault(reading, romaji_base)
            if entry.japanese and entry.japanese != entry.hiragana:
                romaji.setdefault(entry.japanese, romaji_base)

        for surface, value in COMMON_ENDING_ROMAJI.items():
            romaji.setdefault(surface, value)

        dictionary = cls(romaji)
        logger.debug(f"Built romaji dictionary with {len(dictionary)} entries")
        return dictionary

    def get(self, surface: str) -> Optional[str]:
        return self._romaji.get(surface)

    def __contains__(self, surface: object) -> bool:
        return surface in self._romaji

    def __len__(self) -> int:
        return len(self._romaji)

    def __repr__(self) -> str:
        return f"RomajiDictionary({len(self)} entries)"
