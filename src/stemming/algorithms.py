"""
Concrete stemming algorithms, one per AlgorithmVariant.

The linguistic work is done by third-party libraries:
- NLTK Snowball stemmers for most languages (same backend as the BM25 stemmer)
- NLTK PorterStemmer in ORIGINAL_ALGORITHM mode for 'porter'
- snowballstemmer (>= 3.0) for Snowball algorithms NLTK does not ship (turkish, kraaij_pohlmann)
- Whoosh for Lovins

Backends load lazily on first transform(), so resolving a language never
pays import or table-building cost.
"""

from enum import Enum
from typing import Callable, Optional
import logging

from .base import StemmingAlgorithm
from .errors import BackendUnavailableError

logger = logging.getLogger(__name__)


class AlgorithmVariant(Enum):
    """Supported stemming algorithms. Value is the canonical lowercase name."""

    DANISH = "danish"
    DUTCH = "dutch"
    ENGLISH = "english"
    FINNISH = "finnish"
    FRENCH = "french"
    GERMAN = "german"
    GERMAN2 = "german2"
    HUNGARIAN = "hungarian"
    ITALIAN = "italian"
    KRAAIJ_POHLMANN = "kraaij_pohlmann"
    LOVINS = "lovins"
    NORWEGIAN = "norwegian"
    PORTER = "porter"
    PORTUGUESE = "portuguese"
    ROMANIAN = "romanian"
    RUSSIAN = "russian"
    SPANISH = "spanish"
    SWEDISH = "swedish"
    TURKISH = "turkish"


class _LazyAlgorithm(StemmingAlgorithm):
    """Loads its backend stem function once, on first use."""

    def __init__(self, variant: AlgorithmVariant):
        self.variant = variant
        self._stem_fn: Optional[Callable[[str], str]] = None  # Lazy loading

    @property
    def loaded(self) -> bool:
        return self._stem_fn is not None

    def _load(self) -> Callable[[str], str]:
        raise NotImplementedError

    def _ensure_loaded(self) -> Callable[[str], str]:
        if self._stem_fn is None:
            logger.info(f"Loading stemming backend: {self.variant.value}")
            try:
                self._stem_fn = self._load()
            except Exception as e:
                logger.error(f"Failed to load stemming backend {self.variant.value}: {e}")
                raise
        return self._stem_fn

    def transform(self, word: str) -> str:
        return self._ensure_loaded()(word)

    def describe(self) -> str:
        return self.variant.value


class NltkSnowballAlgorithm(_LazyAlgorithm):
    """Snowball stemmer from nltk.stem.snowball"""

    def _load(self):
        from nltk.stem.snowball import SnowballStemmer

        return SnowballStemmer(self.variant.value).stem


class PorterAlgorithm(_LazyAlgorithm):
    """
    Original Porter (1980) algorithm.

    NLTK defaults to its own extensions; ORIGINAL_ALGORITHM mode keeps the
    published rules so output differs from the english (Porter2) variant.
    """

    def __init__(self):
        super().__init__(AlgorithmVariant.PORTER)

    def _load(self):
        from nltk.stem.porter import PorterStemmer

        return PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM).stem


_GERMAN_VOWELS = frozenset("aeiouyäöü")
_UMLAUT_FOLDS = {"ae": "ä", "oe": "ö", "ue": "ü"}


def fold_umlauts(word: str) -> str:
    """
    Rewrite transliterated umlauts the way the German2 prelude does.

    'ae', 'oe', 'ue' become 'ä', 'ö', 'ü'. 'qu' is skipped, and a 'u' between
    two vowels is a consonant, so its 'ue' is kept.

    Examples:
        >>> fold_umlauts("schoen")
        'schön'
        >>> fold_umlauts("quelle")
        'quelle'
        >>> fold_umlauts("bauer")
        'bauer'
    """
    out = []
    i = 0
    while i < len(word):
        pair = word[i:i + 2]
        if pair == "qu":
            out.append(pair)
            i += 2
            continue
        if pair in _UMLAUT_FOLDS:
            if pair == "ue" and i > 0 and word[i - 1] in _GERMAN_VOWELS:
                out.append("u")
                i += 1
                continue
            out.append(_UMLAUT_FOLDS[pair])
            i += 2
            continue
        out.append(word[i])
        i += 1
    return "".join(out)


class German2Algorithm(_LazyAlgorithm):
    """German stemmer that also accepts 'ae'/'oe'/'ue' spellings of umlauts"""

    def __init__(self):
        super().__init__(AlgorithmVariant.GERMAN2)

    def _load(self):
        from nltk.stem.snowball import SnowballStemmer

        german = SnowballStemmer("german").stem

        # NLTK German lowercases internally; fold after lowering so 'AE' matches too
        def stem(word: str) -> str:
            return german(fold_umlauts(word.lower()))

        return stem


class SnowballstemmerAlgorithm(_LazyAlgorithm):
    """
    Algorithms taken from the snowballstemmer package.

    Since snowballstemmer 3.0 its 'dutch' module is the Kraaij-Pohlmann
    algorithm (the older Porter-style one moved to 'dutch_porter').
    """

    BACKEND_NAMES = {
        AlgorithmVariant.KRAAIJ_POHLMANN: "dutch",
    }

    @property
    def backend_name(self) -> str:
        return self.BACKEND_NAMES.get(self.variant, self.variant.value)

    def _load(self):
        import snowballstemmer

        try:
            stemmer = snowballstemmer.stemmer(self.backend_name)
        except KeyError as e:
            raise BackendUnavailableError(
                self.variant.value,
                f"snowballstemmer has no '{self.backend_name}' "
                f"(available: {', '.join(snowballstemmer.algorithms())})",
            ) from e
        return stemmer.stemWord


class LovinsAlgorithm(_LazyAlgorithm):
    """Lovins (1968) stemmer from whoosh.lang.lovins"""

    def __init__(self):
        super().__init__(AlgorithmVariant.LOVINS)

    def _load(self):
        from whoosh.lang.lovins import stem

        return stem


def create_algorithm(variant: AlgorithmVariant) -> StemmingAlgorithm:
    """
    Build a new (not yet loaded) algorithm instance for a variant.

    Args:
        variant: Algorithm to build

    Returns:
        StemmingAlgorithm whose describe() is variant.value
    """
    if variant is AlgorithmVariant.PORTER:
        return PorterAlgorithm()
    if variant is AlgorithmVariant.GERMAN2:
        return German2Algorithm()
    if variant is AlgorithmVariant.LOVINS:
        return LovinsAlgorithm()
    if variant in (AlgorithmVariant.TURKISH, AlgorithmVariant.KRAAIJ_POHLMANN):
        return SnowballstemmerAlgorithm(variant)
    return NltkSnowballAlgorithm(variant)
