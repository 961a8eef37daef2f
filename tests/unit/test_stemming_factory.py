"""
Unit tests for environment-configured stemmer creation.
"""

import pytest

pytestmark = pytest.mark.unit
from src.stemming import (
    NoStemListStemmer,
    Stemmer,
    StemmerFactory,
    UnknownLanguageError,
    get_stemmer,
)
from src.stemming.factory import load_nostem_words


class TestLoadNostemWords:
    """Test exception word file parsing"""

    def test_load(self, tmp_path):
        path = tmp_path / "nostem.txt"
        path.write_text("# brands\nkubernetes\n\n  postgres  \n#ignored\nrunning\n", encoding="utf-8")
        assert load_nostem_words(path) == {"kubernetes", "postgres", "running"}

    def test_encoding(self, tmp_path):
        path = tmp_path / "nostem.txt"
        path.write_text("café\nnaïve\n", encoding="latin-1")
        assert load_nostem_words(path, encoding="latin-1") == {"café", "naïve"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_nostem_words(tmp_path / "missing.txt")


class TestStemmerFactory:
    """Test StemmerFactory.create"""

    def test_disabled_when_unset(self):
        assert StemmerFactory.create() is None

    def test_disabled_when_empty(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "")
        assert StemmerFactory.create() is None

    def test_plain_stemmer(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "en")
        stemmer = StemmerFactory.create()
        assert isinstance(stemmer, Stemmer)
        assert stemmer.describe() == 'Stemmer("english")'

    def test_nostem_words_env(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "english")
        monkeypatch.setenv("STEM_NOSTEM_WORDS", "running, kubernetes,,")
        stemmer = StemmerFactory.create()
        assert isinstance(stemmer, NoStemListStemmer)
        assert stemmer.words == frozenset({"running", "kubernetes"})
        assert stemmer.stem("running") == "running"
        assert stemmer.stem("runs") == "run"

    def test_nostem_file_env(self, monkeypatch, tmp_path):
        path = tmp_path / "nostem.txt"
        path.write_text("postgres\n", encoding="utf-8")
        monkeypatch.setenv("STEM_LANGUAGE", "en")
        monkeypatch.setenv("STEM_NOSTEM_WORDS", "running")
        monkeypatch.setenv("STEM_NOSTEM_FILE", str(path))
        stemmer = StemmerFactory.create()
        assert stemmer.words == frozenset({"running", "postgres"})

    def test_unknown_language(self, monkeypatch, caplog):
        monkeypatch.setenv("STEM_LANGUAGE", "xx")
        with pytest.raises(UnknownLanguageError):
            StemmerFactory.create()
        assert "Failed to create stemmer (xx)" in caplog.text

    def test_missing_nostem_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STEM_LANGUAGE", "en")
        monkeypatch.setenv("STEM_NOSTEM_FILE", str(tmp_path / "missing.txt"))
        with pytest.raises(FileNotFoundError):
            StemmerFactory.create()

    def test_cached(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "en")
        first = StemmerFactory.create()
        monkeypatch.setenv("STEM_LANGUAGE", "fr")
        assert StemmerFactory.create() is first

    def test_force_reload(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "en")
        first = StemmerFactory.create()
        monkeypatch.setenv("STEM_LANGUAGE", "fr")
        second = StemmerFactory.create(force_reload=True)
        assert second is not first
        assert second.describe() == 'Stemmer("french")'

    def test_cleanup(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "en")
        first = StemmerFactory.create()
        StemmerFactory.cleanup()
        assert StemmerFactory.create() is not first

    def test_get_stemmer(self, monkeypatch):
        monkeypatch.setenv("STEM_LANGUAGE", "de")
        assert get_stemmer() is StemmerFactory.create()
        assert get_stemmer().describe() == 'Stemmer("german")'
