"""
Abstract base class for stemming algorithms.

Every per-language algorithm implements this interface so the registry,
Stemmer and NoStemListStemmer can treat them interchangeably.
"""

from abc import ABC, abstractmethod


class StemmingAlgorithm(ABC):
    """
    Single-word stemming capability.

    Implementations must be pure: the same word always yields the same stem
    and no per-call state is mutated, so one instance can be shared by any
    number of stemmers.
    """

    @abstractmethod
    def transform(self, word: str) -> str:
        """
        Reduce a word to its stem.

        Args:
            word: Non-empty word to stem

        Returns:
            Stemmed word
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short name of the algorithm for diagnostics (e.g. 'english')"""
        pass

    def __call__(self, word: str) -> str:
        return self.transform(word)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"
