"""
Tests for the tango-split command line.
"""

import io
import json

import pytest

from tango_split import __version__
from tango_split.cli import main


SENTENCE = "わたしはがくせいです"


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


class TestOutputFormats:

    def test_default(self, capsys, vocab_file):
        out = run(capsys, "--vocab", str(vocab_file), SENTENCE)
        assert out.strip() == "わたし | は | がくせい | です"

    def test_romaji(self, capsys, vocab_file):
        out = run(capsys, "--vocab", str(vocab_file), "--romaji", SENTENCE)
        lines = out.strip().split("\n")
        assert lines == ["わたし | は | がくせい | です", "watashi | wa | gakusei | desu"]

    def test_json(self, capsys, vocab_file):
        out = run(capsys, "-V", str(vocab_file), "--json", SENTENCE)
        data = json.loads(out)
        assert data[0] == {"surface": "わたし", "kind": "word", "start": 0, "end": 3, "romaji": "watashi"}
        assert [item["kind"] for item in data] == ["word", "particle", "word", "ending"]

    def test_simple(self, capsys, vocab_file):
        out = run(capsys, "--vocab", str(vocab_file), "--simple", SENTENCE)
        lines = out.strip().split("\n")
        assert lines[1] == "は\tparticle\t3\t4\twa"
        assert len(lines) == 4

    def test_without_vocabulary(self, capsys):
        out = run(capsys, "ありがとう。")
        assert out.strip() == "ありがとう | 。"

    def test_output_flags_are_exclusive(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--json", "--simple", SENTENCE])
        assert exc_info.value.code == 2

    def test_stdin(self, capsys, monkeypatch, vocab_file):
        monkeypatch.setattr("sys.stdin", io.StringIO(SENTENCE + "\n"))
        out = run(capsys, "--vocab", str(vocab_file))
        assert out.strip() == "わたし | は | がくせい | です"


class TestKanaMode:

    def test_hiragana(self, capsys):
        assert run(capsys, "--kana", "kippu").strip() == "きっぷ"

    def test_katakana(self, capsys):
        assert run(capsys, "--kana", "ko-hi-", "--katakana").strip() == "コーヒー"


class TestErrors:

    def test_bad_vocabulary_path(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--vocab", str(tmp_path / "missing.json"), SENTENCE])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_empty_text(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["   "])
        assert exc_info.value.code == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
