"""
Language-selectable stemming for the indexing pipeline.

Usage:
    # Get stemmer (auto-configured from env):
    from src.stemming import get_stemmer

    stemmer = get_stemmer()
    if stemmer:
        stem = stemmer.stem("running")

    # Or pick a language directly:
    from src.stemming import Stemmer, NoStemListStemmer

    stemmer = NoStemListStemmer(Stemmer("en"), {"kubernetes"})
    stemmer.stem("kubernetes")  # 'kubernetes'
    stemmer.stem("deployments")  # 'deploy'
"""

from typing import Optional, Union
from .algorithms import AlgorithmVariant
from .base import StemmingAlgorithm
from .errors import (
    BackendUnavailableError,
    NoAlgorithmSelectedError,
    NullStemmerError,
    StemmingError,
    UnknownLanguageError,
)
from .registry import AlgorithmRegistry
from .stemmer import Stemmer
from .nostem import NoStemListStemmer
from .factory import StemmerFactory


def get_stemmer(force_reload: bool = False) -> Optional[Union[Stemmer, NoStemListStemmer]]:
    """
    Get configured stemmer instance (factory convenience function).

    Returns None if stemming disabled (STEM_LANGUAGE unset or empty)
    """
    return StemmerFactory.create(force_reload=force_reload)


__all__ = [
    'AlgorithmVariant',
    'AlgorithmRegistry',
    'StemmingAlgorithm',
    'Stemmer',
    'NoStemListStemmer',
    'StemmerFactory',
    'StemmingError',
    'UnknownLanguageError',
    'NullStemmerError',
    'NoAlgorithmSelectedError',
    'BackendUnavailableError',
    'get_stemmer',
]
