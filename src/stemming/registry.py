"""
Language identifier -> algorithm resolution.

The alias table is built once at import and never mutated. Keys are exact,
case-sensitive strings: no trimming, no case folding, no partial matches.

Aliases per variant (canonical name first):
    danish da | dutch | english en | finnish fi | french fr | german de |
    german2 | hungarian hu | italian it | kraaij_pohlmann | lovins |
    norwegian no | porter | portuguese pt | romanian ro | russian ru |
    spanish es | swedish sv | turkish tr

'german2' is its own variant, not an alias of 'german'. 'dutch' has no
short code.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
import logging

from .algorithms import AlgorithmVariant, create_algorithm
from .base import StemmingAlgorithm
from .errors import UnknownLanguageError

logger = logging.getLogger(__name__)


# Ordered: catalog output and duplicate handling both follow this order
VARIANT_ALIASES: Tuple[Tuple[AlgorithmVariant, Tuple[str, ...]], ...] = (
    (AlgorithmVariant.DANISH, ("danish", "da")),
    (AlgorithmVariant.DUTCH, ("dutch",)),
    (AlgorithmVariant.ENGLISH, ("english", "en")),
    (AlgorithmVariant.FINNISH, ("finnish", "fi")),
    (AlgorithmVariant.FRENCH, ("french", "fr")),
    (AlgorithmVariant.GERMAN, ("german", "de")),
    (AlgorithmVariant.GERMAN2, ("german2",)),
    (AlgorithmVariant.HUNGARIAN, ("hungarian", "hu")),
    (AlgorithmVariant.ITALIAN, ("italian", "it")),
    (AlgorithmVariant.KRAAIJ_POHLMANN, ("kraaij_pohlmann",)),
    (AlgorithmVariant.LOVINS, ("lovins",)),
    (AlgorithmVariant.NORWEGIAN, ("norwegian", "no")),
    (AlgorithmVariant.PORTER, ("porter",)),
    (AlgorithmVariant.PORTUGUESE, ("portuguese", "pt")),
    (AlgorithmVariant.ROMANIAN, ("romanian", "ro")),
    (AlgorithmVariant.RUSSIAN, ("russian", "ru")),
    (AlgorithmVariant.SPANISH, ("spanish", "es")),
    (AlgorithmVariant.SWEDISH, ("swedish", "sv")),
    (AlgorithmVariant.TURKISH, ("turkish", "tr")),
)


def build_alias_table(
    entries: Iterable[Tuple[AlgorithmVariant, Tuple[str, ...]]]
) -> Mapping[str, AlgorithmVariant]:
    """
    Flatten (variant, aliases) entries into a read-only lookup table.

    If an alias appears twice the first entry wins and the duplicate is
    logged as a table error.

    Args:
        entries: (variant, aliases) pairs in priority order

    Returns:
        Read-only mapping alias -> variant
    """
    table: Dict[str, AlgorithmVariant] = {}
    for variant, aliases in entries:
        for alias in aliases:
            existing = table.get(alias)
            if existing is not None:
                if existing is not variant:
                    logger.error(
                        f"Alias table error: '{alias}' maps to both {existing.value} and "
                        f"{variant.value}; keeping {existing.value}"
                    )
                continue
            table[alias] = variant
    return MappingProxyType(table)


class AlgorithmRegistry:
    """Static lookup from language identifier to algorithm."""

    _table: Mapping[str, AlgorithmVariant] = build_alias_table(VARIANT_ALIASES)
    _instances: Dict[AlgorithmVariant, StemmingAlgorithm] = {}  # Shared per variant

    @classmethod
    def resolve(cls, identifier: str) -> Optional[AlgorithmVariant]:
        """
        Resolve a language identifier to its algorithm variant.

        Args:
            identifier: ISO code or English language name, e.g. 'en' or 'english'.
                The empty string selects no algorithm.

        Returns:
            AlgorithmVariant, or None for the empty identifier

        Raises:
            UnknownLanguageError: identifier is non-empty and not in the table
        """
        if not identifier:
            return None
        variant = cls._table.get(identifier)
        if variant is None:
            raise UnknownLanguageError(identifier)
        return variant

    @classmethod
    def create(cls, identifier: str) -> Optional[StemmingAlgorithm]:
        """
        Resolve an identifier and return the shared algorithm instance.

        All aliases of a variant return the same object.

        Returns:
            StemmingAlgorithm, or None for the empty identifier
        """
        variant = cls.resolve(identifier)
        if variant is None:
            return None
        return cls.get_algorithm(variant)

    @classmethod
    def get_algorithm(cls, variant: AlgorithmVariant) -> StemmingAlgorithm:
        algorithm = cls._instances.get(variant)
        if algorithm is None:
            logger.debug(f"Creating algorithm instance: {variant.value}")
            algorithm = cls._instances.setdefault(variant, create_algorithm(variant))
        return algorithm

    @classmethod
    def is_supported(cls, identifier: str) -> bool:
        return identifier in cls._table

    @classmethod
    def variants(cls) -> List[AlgorithmVariant]:
        return [variant for variant, _ in VARIANT_ALIASES]

    @classmethod
    def aliases(cls, variant: AlgorithmVariant) -> List[str]:
        """All identifiers that resolve to a variant, canonical name first."""
        return [alias for alias, target in cls._table.items() if target is variant]

    @classmethod
    def available_languages(cls) -> str:
        """
        Space separated catalog of every accepted identifier.

        Grouped per variant, canonical name first, e.g.
        'danish da dutch english en ... turkish tr'.
        """
        return " ".join(cls._table.keys())
