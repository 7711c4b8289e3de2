"""
Pytest configuration and fixtures for tango-split tests.
"""

import json

import pytest

from tango_split import VocabularyEntry, build_romanizer, build_tokenizer


@pytest.fixture
def vocabulary():
    """A small unit worth of vocabulary, alternatives included."""
    return [
        VocabularyEntry(1, "Vocabulary", "People", "私", "わたし", "watashi", "I"),
        VocabularyEntry(1, "Vocabulary", "People", "学生", "がくせい", "gakusei", "student"),
        VocabularyEntry(1, "Vocabulary", "Animals", "猫", "ねこ", "neko", "cat"),
        VocabularyEntry(1, "Vocabulary", "Things", "切符", "きっぷ", "kippu", "ticket"),
        VocabularyEntry(1, "Vocabulary", "Food", "コーヒー", "コーヒー", "koohii", "coffee"),
        VocabularyEntry(2, "Vocabulary", "Adjectives", "綺麗", "きれい (な)", "kirei (na)", "pretty"),
        VocabularyEntry(2, "Vocabulary", "Places", "日本", "にほん/にっぽん", "nihon/nippon", "Japan"),
    ]


@pytest.fixture
def tokenizer(vocabulary):
    return build_tokenizer(vocabulary)


@pytest.fixture
def romanizer(vocabulary):
    return build_romanizer(vocabulary)


@pytest.fixture
def vocab_file(tmp_path, vocabulary):
    """The vocabulary fixture written as a unit file."""
    path = tmp_path / "unit1.json"
    path.write_text(
        json.dumps({"contentItems": [e.to_dict() for e in vocabulary]}, ensure_ascii=False),
        encoding="utf-8",
    )
    return path
