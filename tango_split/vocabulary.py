"""
Vocabulary records for tango-split.

Vocabulary comes from per-unit JSON files. Each record carries a kanji form,
a kana reading and an authored romanization. Readings and romanizations may
list alternatives ("はし / ばし", "kirei (na)"); only the first segment is
used by the tokenizer and the romanizer.
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

logger = logging.getLogger(__name__)


class VocabularyError(ValueError):
    """Raised when a vocabulary file or record is malformed."""
    pass


# ============================================================================
# Canonical Forms
# ============================================================================

# First "/", "(" or whitespace ends the canonical segment
_ALTERNATIVE_SEPARATOR = re.compile(r"[/／(（\s]")


def canonical_form(text: str) -> str:
    """
    Return the canonical segment of a reading or romanization.

    Args:
        text: Field value, possibly listing alternatives

    Returns:
        Text before the first separator, trimmed (may be empty)

    Example:
        >>> canonical_form("にほんご (日本語)")
        'にほんご'
        >>> canonical_form("kirei/kirei na")
        'kirei'
    """
    if not text:
        return ""
    return _ALTERNATIVE_SEPARATOR.split(text, maxsplit=1)[0].strip()


# ============================================================================
# Vocabulary Entry
# ============================================================================

@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    """
    One vocabulary or grammar item from a unit file.

    Attributes:
        unit: Textbook unit number
        category: "Vocabulary", "Grammar", ...
        sub_category: Grouping inside the category
        japanese: Kanji or mixed-script form
        hiragana: Kana reading (may list alternatives)
        romaji: Authored romanization (may list alternatives)
        english: English gloss
    """
    unit: int = 0
    category: str = ""
    sub_category: str = ""
    japanese: str = ""
    hiragana: str = ""
    romaji: str = ""
    english: str = ""

    @property
    def canonical_hiragana(self) -> str:
        return canonical_form(self.hiragana)

    @property
    def canonical_romaji(self) -> str:
        return canonical_form(self.romaji)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VocabularyEntry":
        """
        Build an entry from a JSON object using the unit-file keys.

        Raises:
            VocabularyError: If data is not a mapping or Unit is not an integer
        """
        if not isinstance(data, Mapping):
            raise VocabularyError(f"Vocabulary record must be an object, got {type(data).__name__}")

        unit = data.get("Unit", 0)
        if isinstance(unit, bool) or not isinstance(unit, (int, str)):
            raise VocabularyError(f"Invalid Unit value: {unit!r}")
        try:
            unit = int(unit)
        except ValueError:
            raise VocabularyError(f"Invalid Unit value: {unit!r}") from None

        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            unit=unit,
            category=text("Category"),
            sub_category=text("SubCategory"),
            japanese=text("Japanese"),
            hiragana=text("Hiragana"),
            romaji=text("Romaji"),
            english=text("English"),
        )

    def to_dict(self) -> dict:
        """Serialize back to the unit-file keys."""
        return {
            "Unit": self.unit,
            "Category": self.category,
            "SubCategory": self.sub_category,
            "Japanese": self.japanese,
            "Hiragana": self.hiragana,
            "Romaji": self.romaji,
            "English": self.english,
        }


# ============================================================================
# Loading
# ============================================================================

def parse_vocabulary(data: Any) -> List[VocabularyEntry]:
    """
    Parse decoded JSON into entries.

    Accepts a list of records or an object with a "contentItems" list.
    """
    if isinstance(data, Mapping):
        if "contentItems" not in data:
            raise VocabularyError("Vocabulary object has no 'contentItems' list")
        data = data["contentItems"]

    if not isinstance(data, list):
        raise VocabularyError(f"Vocabulary must be a list, got {type(data).__name__}")

    return [VocabularyEntry.from_dict(item) for item in data]


def load_vocabulary(path: Union[str, Path]) -> List[VocabularyEntry]:
    """
    Load a unit file.

    Args:
        path: Path to a JSON unit file

    Returns:
        Entries in file order

    Raises:
        VocabularyError: If the file cannot be read or has the wrong shape
    """
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise VocabularyError(f"Cannot read vocabulary file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise VocabularyError(f"Invalid JSON in {path}: {e}") from e

    try:
        entries = parse_vocabulary(data)
    except VocabularyError as e:
        raise VocabularyError(f"{path}: {e}") from e

    logger.debug(f"Loaded {len(entries)} vocabulary entries from {path}")
    return entries


def load_vocabularies(paths: Iterable[Union[str, Path]]) -> List[VocabularyEntry]:
    """Load several unit files and concatenate their entries in order."""
    entries: List[VocabularyEntry] = []
    for path in paths:
        entries.extend(load_vocabulary(path))
    return entries
