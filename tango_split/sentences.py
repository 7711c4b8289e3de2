"""
Sentence helpers for the game modes.

Generated sentences go through these before they reach a game: the
unscramble game drops parenthesised readings, the fill-in-the-blank game
replaces the answer with the blank marker and shows a romaji line under the
blanked sentence.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from tango_split.dictionary import BLANK_MARKER

_PARENTHESES = re.compile(r"[()（）]")


def clean_scramble_sentence(sentence: str) -> str:
    """Drop ASCII and full-width parentheses from a generated sentence."""
    return _PARENTHESES.sub("", sentence)


def blank_out(sentence: str, answer: str) -> Optional[str]:
    """
    Replace the first occurrence of answer with the blank marker.

    Returns:
        The blanked sentence, or None if answer is empty or not in sentence
    """
    if not answer or answer not in sentence:
        return None
    return sentence.replace(answer, BLANK_MARKER, 1)


def romanize_tokens(
    tokens: Iterable,
    romanizer: Callable[[str], str],
    separator: str = " ",
) -> str:
    """
    Build the romaji display line for a token sequence.

    The blank marker is kept as it is so the learner sees where the
    missing word goes.
    """
    parts = []
    for token in tokens:
        surface = getattr(token, "surface", token)
        parts.append(surface if surface == BLANK_MARKER else romanizer(surface))
    return separator.join(parts)


@dataclass(frozen=True, slots=True)
class FillInBlankItem:
    """
    A fill-in-the-blank question built from a generated sentence.

    Attributes:
        sentence: Original sentence
        answer: Word removed from the sentence
        sentence_with_blank: Sentence with the answer replaced by the marker
        tokens: Segmentation of sentence_with_blank
        romaji_with_blank: Romaji line for sentence_with_blank
    """
    sentence: str
    answer: str
    sentence_with_blank: str
    tokens: tuple
    romaji_with_blank: str

    @property
    def surfaces(self) -> List[str]:
        return [token.surface for token in self.tokens]


def build_fill_in_blank(
    sentence: str,
    answer: str,
    tokenizer: Callable[[str], list],
    romanizer: Callable[[str], str],
) -> Optional[FillInBlankItem]:
    """
    Blank the answer out of a sentence and prepare its display strings.

    Returns:
        The question, or None if the answer does not occur in the sentence
    """
    sentence_with_blank = blank_out(sentence, answer)
    if sentence_with_blank is None:
        return None

    tokens = tuple(tokenizer(sentence_with_blank))
    return FillInBlankItem(
        sentence=sentence,
        answer=answer,
        sentence_with_blank=sentence_with_blank,
        tokens=tokens,
        romaji_with_blank=romanize_tokens(tokens, romanizer),
    )
