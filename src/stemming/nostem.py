"""
Exception list layered on top of any stemmer.

Words in the list are returned unchanged; everything else goes to the
wrapped stemmer. Useful for product names, acronyms and other terms the
algorithm would mangle ("kubernetes" -> "kubernet").

The word set is read on every call, so add()/discard() take effect
immediately. It is not locked: build it before stemming from several
threads.
"""

from typing import Callable, FrozenSet, Iterable, Set, Tuple, Union
import logging

from .base import StemmingAlgorithm
from .errors import NullStemmerError
from .stemmer import Stemmer

logger = logging.getLogger(__name__)


class NoStemListStemmer:
    """
    Stemmer decorator that leaves listed words alone.

    Wraps a Stemmer, a StemmingAlgorithm, or anything else with a
    stem(word) method (including another NoStemListStemmer).
    """

    def __init__(
        self,
        stemmer: Union[Stemmer, StemmingAlgorithm, "NoStemListStemmer"],
        nostem_words: Iterable[str] = (),
    ):
        """
        Args:
            stemmer: Stemmer to delegate to. A Stemmer contributes its
                algorithm directly; it must have one selected.
            nostem_words: Initial exception words (exact, case-sensitive)

        Raises:
            NullStemmerError: stemmer is None, has no algorithm selected,
                or offers no way to stem
        """
        self.stemmer, self._stem_fn = self._init_stemmer(stemmer)
        self._words: Set[str] = set(nostem_words)
        logger.debug(f"NoStemListStemmer created around {self.stemmer!r} with {len(self._words)} words")

    @staticmethod
    def _init_stemmer(stemmer) -> Tuple[object, Callable[[str], str]]:
        if stemmer is None:
            raise NullStemmerError()
        if isinstance(stemmer, Stemmer):
            algorithm = stemmer.algorithm
            if algorithm is None:
                raise NullStemmerError("Stemmer with no algorithm selected was supplied to NoStemListStemmer")
            return algorithm, algorithm.transform
        if isinstance(stemmer, StemmingAlgorithm):
            return stemmer, stemmer.transform
        stem = getattr(stemmer, "stem", None)
        if not callable(stem):
            raise NullStemmerError(
                f"{type(stemmer).__name__} has no stem() method and cannot be used by NoStemListStemmer"
            )
        return stemmer, stem

    def stem(self, word: str) -> str:
        if not word:
            return word
        if word in self._words:
            return word
        return self._stem_fn(word)

    def __call__(self, word: str) -> str:
        return self.stem(word)

    def add(self, word: str) -> None:
        self._words.add(word)

    def discard(self, word: str) -> None:
        self._words.discard(word)

    def update(self, words: Iterable[str]) -> None:
        self._words.update(words)

    def clear(self) -> None:
        self._words.clear()

    @property
    def words(self) -> FrozenSet[str]:
        """Snapshot of the current exception words."""
        return frozenset(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def describe(self) -> str:
        """
        Wrapped stemmer description plus the exception words, sorted.

        Example:
            'NoStemListStemmer(english, [kubernetes, postgres])'
        """
        inner = self.stemmer.describe() if hasattr(self.stemmer, "describe") else repr(self.stemmer)
        return f"NoStemListStemmer({inner}, [{', '.join(sorted(self._words))}])"

    def __repr__(self) -> str:
        return self.describe()
