"""
Tests for the vocabulary proofreading script.
"""

import importlib.util
from pathlib import Path

import pytest

from tango_split import VocabularyEntry

SCRIPT = Path(__file__).parent.parent / "scripts" / "check_vocabulary.py"


@pytest.fixture(scope="module")
def check_vocabulary():
    spec = importlib.util.spec_from_file_location("check_vocabulary", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCheckEntries:

    def test_clean_file(self, check_vocabulary, vocabulary):
        report = check_vocabulary.check_entries("unit1.json", vocabulary)
        assert report.entries == len(vocabulary)
        assert report.empty_readings == []
        assert report.mismatches == []

    def test_mismatch_reported(self, check_vocabulary):
        entries = [VocabularyEntry(japanese="学校", hiragana="がっこう", romaji="gakko", english="school")]
        report = check_vocabulary.check_entries("unit1.json", entries)
        assert len(report.mismatches) == 1
        assert report.mismatches[0].computed == "gakkou"
        assert report.mismatches[0].authored == "gakko"

    def test_spacing_and_case_ignored(self, check_vocabulary):
        entries = [VocabularyEntry(hiragana="おちゃ", romaji="O-cha")]
        assert check_vocabulary.check_entries("u.json", entries).mismatches == []

    def test_empty_reading(self, check_vocabulary):
        entries = [VocabularyEntry(japanese="〜さん", hiragana="(suffix)", romaji="san")]
        report = check_vocabulary.check_entries("u.json", entries)
        assert report.empty_readings == ["〜さん"]
        assert report.mismatches == []

    def test_common_endings_skipped(self, check_vocabulary):
        entries = [VocabularyEntry(hiragana="です", romaji="desu (polite)")]
        assert check_vocabulary.check_entries("u.json", entries).mismatches == []
