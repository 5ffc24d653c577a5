"""
Tests for Corpus Handling
=========================
Tests for text splitting, corpus files and the built-in corpora in
namekit/corpus.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.corpus import (
    COMMON_DELIMITERS,
    TRAINING_CORPUS,
    get_corpus,
    list_categories,
    load_corpus,
    split_words,
)


class TestSplitWords:
    """Tests for split_words()."""

    def test_common_delimiters(self):
        text = "Aldric, Brannoc-Caelith! O'Neil.\r\nTamsin\tRowan"
        assert split_words(text) == [
            "aldric", "brannoc", "caelith", "o", "neil", "tamsin", "rowan",
        ]

    def test_non_letters_dropped(self):
        assert split_words("R2D2 zoë C-3PO") == ["rd", "zo", "c", "po"]

    def test_custom_delimiters(self):
        assert split_words("ann;amy|bo", ";|") == ["ann", "amy", "bo"]

    def test_runs_of_delimiters_produce_no_empty_words(self):
        assert split_words(",,, ann ,,,  amy ,,,") == ["ann", "amy"]

    def test_empty_text(self):
        assert split_words("") == []

    def test_delimiter_constant(self):
        for ch in " !.,-'\r\n\t":
            assert ch in COMMON_DELIMITERS


class TestLoadCorpus:
    """Tests for load_corpus()."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("Elowen, Isolde\nKestrel\n", encoding="utf-8")
        assert load_corpus(path) == ["elowen", "isolde", "kestrel"]

    def test_custom_delimiters(self, tmp_path):
        path = tmp_path / "names.csv"
        path.write_text("elowen;isolde;kestrel", encoding="utf-8")
        assert load_corpus(path, ";") == ["elowen", "isolde", "kestrel"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_corpus(tmp_path / "missing.txt")


class TestBuiltinCorpora:
    """Tests for the bundled name sets."""

    def test_categories(self):
        assert list_categories() == sorted(TRAINING_CORPUS)
        assert "fantasy" in list_categories()

    def test_get_single_category(self):
        words = get_corpus(["norse"])
        assert len(words) == len(TRAINING_CORPUS["norse"])
        assert all(w == w.lower() for w in words)

    def test_get_all(self):
        total = sum(len(names) for names in TRAINING_CORPUS.values())
        assert len(get_corpus()) == total

    def test_unknown_category(self):
        with pytest.raises(ValueError, match="Available corpora"):
            get_corpus(["klingon"])

    def test_words_survive_splitting(self):
        """Built-in names are plain letters, so splitting keeps them intact."""
        for word in get_corpus():
            assert split_words(word) == [word]
