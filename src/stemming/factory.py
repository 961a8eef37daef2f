"""
Factory to create the process-wide stemmer from environment configuration.
"""

from pathlib import Path
from typing import Optional, Set, Union
import logging
import os

from .nostem import NoStemListStemmer
from .stemmer import Stemmer

logger = logging.getLogger(__name__)


def load_nostem_words(path: Union[str, Path], encoding: str = "utf-8") -> Set[str]:
    """
    Read exception words from a file, one per line.

    Blank lines and lines starting with '#' are ignored; surrounding
    whitespace is stripped.

    Args:
        path: Path to a text file
        encoding: File encoding

    Returns:
        Set of exception words
    """
    words = set()
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                words.add(word)
    logger.info(f"Loaded {len(words)} no-stem words from {path}")
    return words


class StemmerFactory:
    """Factory to create stemmer instances based on configuration."""

    _instance: Optional[Union[Stemmer, NoStemListStemmer]] = None  # Singleton cache

    @classmethod
    def create(cls, force_reload: bool = False) -> Optional[Union[Stemmer, NoStemListStemmer]]:
        """
        Create stemmer based on environment configuration.

        Config (env vars):
            STEM_LANGUAGE: Language identifier ('en', 'german2', ...). Unset or
                empty disables stemming.
            STEM_NOSTEM_WORDS: Comma-separated words that must not be stemmed
            STEM_NOSTEM_FILE: File with one word per line that must not be stemmed

        Args:
            force_reload: If True, recreate instance even if cached

        Returns:
            Stemmer (NoStemListStemmer if exception words are configured),
            or None if disabled

        Raises:
            UnknownLanguageError: STEM_LANGUAGE is not a supported identifier
        """
        if cls._instance is not None and not force_reload:
            logger.debug(f"Returning cached stemmer instance: {cls._instance}")
            return cls._instance

        language = os.getenv("STEM_LANGUAGE", "")
        if not language:
            logger.info("Stemming disabled (STEM_LANGUAGE not set)")
            cls._instance = None
            return None

        nostem_words = set()
        words_value = os.getenv("STEM_NOSTEM_WORDS", "")
        nostem_words.update(w.strip() for w in words_value.split(",") if w.strip())
        words_file = os.getenv("STEM_NOSTEM_FILE")

        try:
            stemmer = Stemmer(language)
            if words_file:
                nostem_words.update(load_nostem_words(words_file))
        except Exception as e:
            logger.error(f"Failed to create stemmer ({language}): {e}")
            raise

        if nostem_words:
            logger.info(f"Creating stemmer: {language} with {len(nostem_words)} no-stem words")
            cls._instance = NoStemListStemmer(stemmer, nostem_words)
        else:
            logger.info(f"Creating stemmer: {language}")
            cls._instance = stemmer

        return cls._instance

    @classmethod
    def cleanup(cls):
        """Drop cached stemmer instance."""
        if cls._instance is not None:
            logger.info("Cleaning up stemmer instance")
            cls._instance = None
