"""
Language-selectable stemmer.

Usage:
    stemmer = Stemmer("en")
    stemmer.stem("running")  # 'run'

    Stemmer("")            # valid, but no algorithm: check is_available first
    Stemmer("xx")          # raises UnknownLanguageError
"""

from typing import Iterable, List, Optional
import logging

from .algorithms import AlgorithmVariant
from .base import StemmingAlgorithm
from .errors import NoAlgorithmSelectedError
from .registry import AlgorithmRegistry

logger = logging.getLogger(__name__)


class Stemmer:
    """
    Owns zero or one stemming algorithm and applies it to words.

    The algorithm is chosen at construction and never changes. Algorithm
    instances come from the registry and are shared between stemmers.
    """

    def __init__(self, language: str = ""):
        """
        Select the algorithm for a language.

        Args:
            language: Identifier accepted by AlgorithmRegistry (e.g. 'en',
                'english', 'german2'). Empty string selects no algorithm.

        Raises:
            UnknownLanguageError: language is non-empty and not supported
        """
        self._algorithm: Optional[StemmingAlgorithm] = AlgorithmRegistry.create(language)
        if self._algorithm is None:
            logger.debug("Stemmer created with no algorithm selected")

    @classmethod
    def from_algorithm(cls, algorithm: Optional[StemmingAlgorithm]) -> "Stemmer":
        """Wrap an algorithm supplied directly instead of resolved by name."""
        stemmer = cls()
        stemmer._algorithm = algorithm
        return stemmer

    @property
    def algorithm(self) -> Optional[StemmingAlgorithm]:
        return self._algorithm

    @property
    def variant(self) -> Optional[AlgorithmVariant]:
        return getattr(self._algorithm, "variant", None)

    @property
    def is_available(self) -> bool:
        """True if an algorithm was selected and stem() may be called."""
        return self._algorithm is not None

    def stem(self, word: str) -> str:
        """
        Stem a single word.

        The empty word stems to itself without touching the algorithm.

        Raises:
            NoAlgorithmSelectedError: no algorithm was selected
        """
        if not word:
            return word
        if self._algorithm is None:
            raise NoAlgorithmSelectedError()
        return self._algorithm.transform(word)

    def __call__(self, word: str) -> str:
        return self.stem(word)

    def stem_words(self, words: Iterable[str]) -> List[str]:
        return [self.stem(word) for word in words]

    def describe(self) -> str:
        if self._algorithm is None:
            return "Stemmer(none)"
        return f'Stemmer("{self._algorithm.describe()}")'

    def __repr__(self) -> str:
        return self.describe()

    @staticmethod
    def available_languages() -> str:
        """Space separated list of every supported language identifier."""
        return AlgorithmRegistry.available_languages()
