"""
tango-split: Vocabulary-driven Japanese tokenizer and romanizer

Splits unspaced Japanese sentences into the words of the vocabulary a
learner is studying, plus particles, polite endings and punctuation, and
romanizes each piece. Built for review games: sentence unscrambling,
fill-in-the-blank and typing practice.

Basic Usage:
    import tango_split

    vocabulary = tango_split.load_vocabulary("unit1.json")
    tokenizer = tango_split.build_tokenizer(vocabulary)
    romanizer = tango_split.build_romanizer(vocabulary)

    for token in tokenizer("わたしはがくせいです"):
        print(f"{token.surface} -> {romanizer(token)} ({token.kind})")
"""

from dataclasses import dataclass
from typing import Iterable, List

__version__ = "0.1.0"


# =============================================================================
# Token Data Structure
# =============================================================================

@dataclass(frozen=True, slots=True)
class Token:
    """
    A segment of a sentence.

    Attributes:
        surface: The text as it appears in the sentence
        kind: word, exception, particle, ending, punctuation, blank or unknown
        start: Start position in the whitespace-stripped sentence
        end: End position in the whitespace-stripped sentence
    """
    surface: str
    kind: str
    start: int
    end: int

    @property
    def is_blank(self) -> bool:
        return self.kind == "blank"

    def __str__(self) -> str:
        return self.surface

    def __repr__(self) -> str:
        return f"Token({self.surface!r}, kind={self.kind!r})"


from tango_split.dictionary import (  # noqa: E402
    BLANK_MARKER,
    ENDINGS,
    PARTICLES,
    PUNCTUATION,
    WORD_EXCEPTIONS,
    RomajiDictionary,
    TokenDictionary,
)
from tango_split.kana_input import check_answer, to_kana  # noqa: E402
from tango_split.romanizer import Romanizer, romanize_kana  # noqa: E402
from tango_split.sentences import (  # noqa: E402
    FillInBlankItem,
    blank_out,
    build_fill_in_blank,
    clean_scramble_sentence,
    romanize_tokens,
)
from tango_split.tokenizer import Tokenizer  # noqa: E402
from tango_split.vocabulary import (  # noqa: E402
    VocabularyEntry,
    VocabularyError,
    canonical_form,
    load_vocabularies,
    load_vocabulary,
)


# =============================================================================
# Main API
# =============================================================================

def build_tokenizer(vocabulary: Iterable[VocabularyEntry] = ()) -> Tokenizer:
    """
    Build a segmentation function for a vocabulary snapshot.

    Build a new tokenizer whenever the loaded vocabulary changes; existing
    tokenizers are never updated in place.

    Args:
        vocabulary: Loaded entries (may be empty)

    Returns:
        Tokenizer, callable as tokenizer(sentence) -> List[Token]

    Example:
        >>> tokenizer = tango_split.build_tokenizer([])
        >>> [t.surface for t in tokenizer("ありがとうございます")]
        ['ありがとう', 'ご', 'ざ', 'い', 'ます']
    """
    return Tokenizer.from_vocabulary(vocabulary)


def build_romanizer(vocabulary: Iterable[VocabularyEntry] = ()) -> Romanizer:
    """
    Build a romanization function for a vocabulary snapshot.

    Args:
        vocabulary: Loaded entries (may be empty)

    Returns:
        Romanizer, callable as romanizer(token) -> str
    """
    return Romanizer.from_vocabulary(vocabulary)


def tokenize(sentence: str, vocabulary: Iterable[VocabularyEntry] = ()) -> List[Token]:
    """
    Segment one sentence.

    Builds a throwaway dictionary; use build_tokenizer() for repeated calls.
    """
    return build_tokenizer(vocabulary).segment(sentence)


def romanize(text: str, vocabulary: Iterable[VocabularyEntry] = ()) -> str:
    """
    Romanize one token.

    Example:
        >>> tango_split.romanize("きっぷ")
        'kippu'
    """
    return build_romanizer(vocabulary).romanize(text)


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "Token",
    "VocabularyEntry",
    "FillInBlankItem",
    # Factories and callables
    "build_tokenizer",
    "build_romanizer",
    "Tokenizer",
    "Romanizer",
    "TokenDictionary",
    "RomajiDictionary",
    # Convenience API
    "tokenize",
    "romanize",
    "romanize_kana",
    "to_kana",
    "check_answer",
    "canonical_form",
    "load_vocabulary",
    "load_vocabularies",
    "get_version",
    # Sentence helpers
    "blank_out",
    "build_fill_in_blank",
    "clean_scramble_sentence",
    "romanize_tokens",
    # Fixed tables
    "BLANK_MARKER",
    "WORD_EXCEPTIONS",
    "PARTICLES",
    "ENDINGS",
    "PUNCTUATION",
    # Exceptions
    "VocabularyError",
    # Version
    "__version__",
]
