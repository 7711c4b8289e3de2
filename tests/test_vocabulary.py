"""
Tests for vocabulary records and unit-file loading.
"""

import json

import pytest

from tango_split import VocabularyEntry, VocabularyError, canonical_form, load_vocabularies, load_vocabulary
from tango_split.vocabulary import parse_vocabulary


class TestCanonicalForm:

    @pytest.mark.parametrize("text, expected", [
        ("ねこ", "ねこ"),
        ("にほん/にっぽん", "にほん"),
        ("はし / ばし", "はし"),
        ("にほんご (日本語)", "にほんご"),
        ("きれい（な）", "きれい"),
        ("たべる／たべます", "たべる"),
        ("kirei na", "kirei"),
        ("  ねこ  ", ""),
        ("", ""),
        ("(note)", ""),
    ])
    def test_first_segment(self, text, expected):
        assert canonical_form(text) == expected

    def test_entry_properties(self):
        entry = VocabularyEntry(hiragana="にほん/にっぽん", romaji="nihon/nippon")
        assert entry.canonical_hiragana == "にほん"
        assert entry.canonical_romaji == "nihon"


class TestFromDict:

    def test_all_fields(self):
        entry = VocabularyEntry.from_dict({
            "Unit": 3,
            "Category": "Vocabulary",
            "SubCategory": "Animals",
            "Japanese": "猫",
            "Hiragana": "ねこ",
            "Romaji": "neko",
            "English": "cat",
        })
        assert entry == VocabularyEntry(3, "Vocabulary", "Animals", "猫", "ねこ", "neko", "cat")

    def test_defaults(self):
        entry = VocabularyEntry.from_dict({"Hiragana": "ねこ", "Romaji": None})
        assert entry.unit == 0
        assert entry.hiragana == "ねこ"
        assert entry.romaji == ""
        assert entry.japanese == ""

    def test_numeric_string_unit(self):
        assert VocabularyEntry.from_dict({"Unit": "3"}).unit == 3

    @pytest.mark.parametrize("unit", ["x", 1.5, True, None])
    def test_invalid_unit(self, unit):
        with pytest.raises(VocabularyError, match="Unit"):
            VocabularyEntry.from_dict({"Unit": unit})

    def test_non_mapping(self):
        with pytest.raises(VocabularyError):
            VocabularyEntry.from_dict(["ねこ"])

    def test_to_dict_uses_file_keys(self, vocabulary):
        data = vocabulary[2].to_dict()
        assert data["Hiragana"] == "ねこ"
        assert VocabularyEntry.from_dict(data) == vocabulary[2]


class TestLoadVocabulary:

    def test_content_items_file(self, vocab_file, vocabulary):
        assert load_vocabulary(vocab_file) == vocabulary

    def test_plain_list_file(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"Unit": 1, "Hiragana": "ねこ"}]), encoding="utf-8")
        entries = load_vocabulary(str(path))
        assert [e.hiragana for e in entries] == ["ねこ"]

    def test_several_files_in_order(self, vocab_file, tmp_path, vocabulary):
        extra = tmp_path / "unit2.json"
        extra.write_text(json.dumps([{"Unit": 2, "Hiragana": "いぬ"}]), encoding="utf-8")
        entries = load_vocabularies([vocab_file, extra])
        assert entries[:-1] == vocabulary
        assert entries[-1].hiragana == "いぬ"

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.json"
        with pytest.raises(VocabularyError, match="missing.json"):
            load_vocabulary(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(VocabularyError, match="Invalid JSON"):
            load_vocabulary(path)

    def test_object_without_content_items(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"items": []}), encoding="utf-8")
        with pytest.raises(VocabularyError, match="contentItems"):
            load_vocabulary(path)

    def test_wrong_shape(self):
        with pytest.raises(VocabularyError, match="list"):
            parse_vocabulary("ねこ")

    def test_bad_record_names_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"Unit": "x"}]), encoding="utf-8")
        with pytest.raises(VocabularyError, match="bad.json"):
            load_vocabulary(path)
