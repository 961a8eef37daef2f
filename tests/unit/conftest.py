"""Unit test configuration - isolate env config and shared algorithm instances"""

import pytest

from src.stemming.base import StemmingAlgorithm
from src.stemming.factory import StemmerFactory
from src.stemming.registry import AlgorithmRegistry


class SuffixAlgorithm(StemmingAlgorithm):
    """Tiny deterministic algorithm: strips 'ing' then 's'. Counts calls."""

    def __init__(self, name: str = "suffix"):
        self.name = name
        self.calls = []

    def transform(self, word: str) -> str:
        self.calls.append(word)
        if word.endswith("ing") and len(word) > 5:
            word = word[:-3]
            if len(word) > 2 and word[-1] == word[-2]:
                word = word[:-1]
        elif word.endswith("s") and len(word) > 3:
            word = word[:-1]
        return word

    def describe(self) -> str:
        return self.name


@pytest.fixture
def suffix_algorithm():
    return SuffixAlgorithm()


@pytest.fixture(autouse=True)
def clean_stemming_environment(monkeypatch):
    """
    Every unit test starts with:
    - no STEM_* env vars
    - no cached factory instance
    - a fresh per-variant algorithm cache (mocked backends don't leak)
    """
    for name in ("STEM_LANGUAGE", "STEM_NOSTEM_WORDS", "STEM_NOSTEM_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(AlgorithmRegistry, "_instances", {})
    StemmerFactory.cleanup()
    yield
    StemmerFactory.cleanup()
