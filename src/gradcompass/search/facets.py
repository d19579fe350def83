"""
Facets Module - Distinct facet values derived from the program catalog.
=======================================================================

A facet is one of the five categorical fields of a program that search
works on: degree type, specialization, country, city and university.

The FacetIndex is computed once when a catalog is loaded and handed to
the suggestion engine and the query resolver. It is never updated in
place; a changed catalog needs a new index.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import Program

logger = get_logger(__name__)


class Facet(str, Enum):
    """Searchable program fields. Values are Program attribute names."""

    DEGREE_TYPE = "degree_type"
    SPECIALIZATION = "specialization"
    COUNTRY = "country"
    CITY = "city"
    UNIVERSITY = "university"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Facet"]:
        # Accept the camelCase names used by the web client ("degreeType")
        if isinstance(value, str):
            normalized = re.sub(r"(?<!^)(?=[A-Z])", "_", value.strip()).lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @property
    def label(self) -> str:
        """Human-readable facet name."""
        return _FACET_LABELS[self]


_FACET_LABELS = {
    Facet.DEGREE_TYPE: "Degree",
    Facet.SPECIALIZATION: "Specialization",
    Facet.COUNTRY: "Country",
    Facet.CITY: "City",
    Facet.UNIVERSITY: "University",
}

# Order in which single-facet matches are listed
FACET_ORDER: tuple[Facet, ...] = (
    Facet.DEGREE_TYPE,
    Facet.SPECIALIZATION,
    Facet.COUNTRY,
    Facet.CITY,
    Facet.UNIVERSITY,
)

# Facets whose values are presented alphabetically
SORTED_FACETS = frozenset({Facet.COUNTRY})


def distinct_values(catalog: Sequence[Program], facet: Facet | str) -> list[str]:
    """
    Project the catalog onto one facet and drop duplicates.

    Values keep the order in which they first appear in the catalog,
    except for facets in SORTED_FACETS, which are sorted.

    Args:
        catalog: Programs to project
        facet: Facet (or its snake_case / camelCase name)

    Returns:
        Duplicate-free list of values (empty for an empty catalog)

    Raises:
        ValueError: If the facet name is not recognised
    """
    facet = Facet(facet)
    values = list(dict.fromkeys(str(getattr(program, facet.value)) for program in catalog))
    if facet in SORTED_FACETS:
        values.sort()
    return values


@dataclass(frozen=True)
class FacetIndex:
    """
    Distinct values of every facet in a catalog.

    Example:
        >>> index = FacetIndex.from_catalog(programs)
        >>> index.values(Facet.COUNTRY)
        ('Canada', 'Germany', 'India', 'UK', 'USA')
    """

    degree_types: tuple[str, ...] = ()
    specializations: tuple[str, ...] = ()
    countries: tuple[str, ...] = ()
    cities: tuple[str, ...] = ()
    universities: tuple[str, ...] = ()

    @classmethod
    def from_catalog(cls, catalog: Sequence[Program]) -> "FacetIndex":
        """Build the index for a catalog."""
        index = cls(
            degree_types=tuple(distinct_values(catalog, Facet.DEGREE_TYPE)),
            specializations=tuple(distinct_values(catalog, Facet.SPECIALIZATION)),
            countries=tuple(distinct_values(catalog, Facet.COUNTRY)),
            cities=tuple(distinct_values(catalog, Facet.CITY)),
            universities=tuple(distinct_values(catalog, Facet.UNIVERSITY)),
        )
        logger.debug(
            f"Facet index built from {len(catalog)} programs: "
            f"{len(index.degree_types)} degrees, {len(index.specializations)} specializations, "
            f"{len(index.countries)} countries, {len(index.cities)} cities, "
            f"{len(index.universities)} universities"
        )
        return index

    def values(self, facet: Facet | str) -> tuple[str, ...]:
        """Get the distinct values of one facet."""
        facet = Facet(facet)
        if facet is Facet.DEGREE_TYPE:
            return self.degree_types
        if facet is Facet.SPECIALIZATION:
            return self.specializations
        if facet is Facet.COUNTRY:
            return self.countries
        if facet is Facet.CITY:
            return self.cities
        return self.universities

    def matching(self, facet: Facet | str, query: str) -> list[str]:
        """
        Values of a facet that contain the query (case-insensitive).

        Args:
            facet: Facet to search
            query: Text the value must contain

        Returns:
            Matching values in index order
        """
        needle = query.lower()
        return [value for value in self.values(facet) if needle in value.lower()]

    def find_in_query(self, facet: Facet | str, query: str) -> Optional[str]:
        """
        First facet value that appears inside the query (case-insensitive).

        This is the inverse of `matching`: the query must contain the value.
        Longer values are tried first so "MSc" wins over "MS"; equal lengths
        keep index order.

        Args:
            facet: Facet to search
            query: Free-text query, e.g. "MBA in Germany"

        Returns:
            The matched value, or None
        """
        haystack = query.lower()
        for value in sorted(self.values(facet), key=len, reverse=True):
            if value and value.lower() in haystack:
                return value
        return None
