"""
Tokenizer module for tango-split.

Japanese sentences have no spaces, so they are split with a greedy
longest-prefix match against the token dictionary of the loaded vocabulary.
There is no backtracking: the longest candidate at the cursor is always
taken. Text the dictionary does not know (kanji, names, words from other
units) falls back to one token per character.
"""

import re
from typing import TYPE_CHECKING, Iterable, List

from tango_split.dictionary import KIND_UNKNOWN, TokenDictionary
from tango_split.vocabulary import VocabularyEntry

if TYPE_CHECKING:
    from tango_split import Token

# Whitespace carries no meaning in Japanese text (includes U+3000)
_WHITESPACE = re.compile(r"\s+")


def strip_whitespace(text: str) -> str:
    """Remove all whitespace, including ideographic spaces."""
    return _WHITESPACE.sub("", text)


# =============================================================================
# Segmentation
# =============================================================================

def segment_text(dictionary: TokenDictionary, sentence: str) -> List["Token"]:
    """
    Segment a sentence into tokens.

    Args:
        dictionary: Token dictionary to match against
        sentence: Japanese sentence (whitespace is ignored)

    Returns:
        List of Token objects whose surfaces concatenate to the sentence
        with whitespace removed
    """
    from tango_split import Token

    text = strip_whitespace(sentence)
    tokens = []
    pos = 0

    while pos < len(text):
        surface = dictionary.longest_match(text, pos)

        if surface:
            kind = dictionary.kind_of(surface)
        else:
            surface = text[pos]
            kind = KIND_UNKNOWN

        tokens.append(Token(
            surface=surface,
            kind=kind,
            start=pos,
            end=pos + len(surface),
        ))
        pos += len(surface)

    return tokens


class Tokenizer:
    """
    Segmentation function bound to one vocabulary snapshot.

    Instances are immutable and may be shared. Calling an instance is the
    same as calling segment().

    Example:
        >>> tokenizer = Tokenizer.from_vocabulary(entries)
        >>> [t.surface for t in tokenizer("わたしはがくせいです")]
        ['わたし', 'は', 'がくせい', 'です']
    """

    __slots__ = ("dictionary",)

    def __init__(self, dictionary: TokenDictionary):
        self.dictionary = dictionary

    @classmethod
    def from_vocabulary(cls, vocabulary: Iterable[VocabularyEntry] = ()) -> "Tokenizer":
        return cls(TokenDictionary.build(vocabulary))

    def segment(self, sentence: str) -> List["Token"]:
        return segment_text(self.dictionary, sentence)

    def surfaces(self, sentence: str) -> List[str]:
        """Segment and return only the token surfaces."""
        return [token.surface for token in self.segment(sentence)]

    def __call__(self, sentence: str) -> List["Token"]:
        return self.segment(sentence)

    def __repr__(self) -> str:
        return f"Tokenizer({self.dictionary!r})"
