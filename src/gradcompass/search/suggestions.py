"""
Suggestions Module - Live search suggestions for free-text queries.
===================================================================

Turns what the user has typed so far into a short ranked list of hints:

1. Single-facet matches: facet values containing the query
   ("germ" -> Germany).
2. Combined matches: several facet values found inside the query
   ("MBA in Germany" -> degree MBA + country Germany).

Combined suggestions pre-fill more filters, so they always rank above
single-facet ones. Ranking is an explicit integer per suggestion with a
stable sort, so suggestions of equal rank keep their generation order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from gradcompass.search.facets import FACET_ORDER, Facet, FacetIndex
from gradcompass.search.filters import FilterPatch
from gradcompass.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_QUERY_LENGTH = 2
DEFAULT_MAX_SUGGESTIONS = 8

# Every combined template ranks below this
SINGLE_FACET_RANK = 100


class SuggestionType(str, Enum):
    """Kind of suggestion shown in the dropdown."""

    DEGREE = "Degree"
    SPECIALIZATION = "Specialization"
    COUNTRY = "Country"
    CITY = "City"
    UNIVERSITY = "University"
    COMBINED = "Combined"


FACET_SUGGESTION_TYPES: dict[Facet, SuggestionType] = {
    Facet.DEGREE_TYPE: SuggestionType.DEGREE,
    Facet.SPECIALIZATION: SuggestionType.SPECIALIZATION,
    Facet.COUNTRY: SuggestionType.COUNTRY,
    Facet.CITY: SuggestionType.CITY,
    Facet.UNIVERSITY: SuggestionType.UNIVERSITY,
}


class Suggestion(BaseModel):
    """
    A transient search hint.

    `data` maps facet names (Program attribute names) to the values the
    suggestion would apply. Lower `rank` sorts first.
    """

    type: SuggestionType
    label: str
    sub_label: Optional[str] = None
    data: dict[str, str] = Field(default_factory=dict)
    rank: int = SINGLE_FACET_RANK

    @property
    def is_combined(self) -> bool:
        return self.type is SuggestionType.COMBINED

    @property
    def description(self) -> str:
        """Secondary line for display: the sub-label, else the type."""
        return self.sub_label or self.type.value

    def to_patch(self) -> FilterPatch:
        """Filter patch carrying this suggestion's facet values."""
        return FilterPatch(
            degree_type=self.data.get(Facet.DEGREE_TYPE.value, ""),
            specialization=self.data.get(Facet.SPECIALIZATION.value, ""),
            country=self.data.get(Facet.COUNTRY.value, ""),
            city=self.data.get(Facet.CITY.value, ""),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Combined Templates
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CombinedTemplate:
    """A degree plus one or two other facets inferred from one phrase."""

    facets: tuple[Facet, ...]
    sub_label: str
    rank: int

    def build(self, found: dict[Facet, str]) -> Optional[Suggestion]:
        """Build the suggestion if every facet of the template was found."""
        if not all(found.get(facet) for facet in self.facets):
            return None
        return Suggestion(
            type=SuggestionType.COMBINED,
            label=" in ".join(found[facet] for facet in self.facets),
            sub_label=self.sub_label,
            data={facet.value: found[facet] for facet in self.facets},
            rank=self.rank,
        )


COMBINED_TEMPLATES: tuple[CombinedTemplate, ...] = (
    CombinedTemplate((Facet.DEGREE_TYPE, Facet.SPECIALIZATION, Facet.COUNTRY), "Exact Match", 0),
    CombinedTemplate((Facet.DEGREE_TYPE, Facet.CITY), "Degree + City", 1),
    CombinedTemplate((Facet.DEGREE_TYPE, Facet.SPECIALIZATION), "Degree + Specialization", 2),
    CombinedTemplate((Facet.DEGREE_TYPE, Facet.COUNTRY), "Degree + Country", 3),
)

# Facets looked up inside the query for combined suggestions
COMBINED_FACETS: tuple[Facet, ...] = (
    Facet.DEGREE_TYPE,
    Facet.COUNTRY,
    Facet.SPECIALIZATION,
    Facet.CITY,
)


# ─────────────────────────────────────────────────────────────────────────────
# Generation
# ─────────────────────────────────────────────────────────────────────────────


def find_facets_in_query(
    index: FacetIndex,
    query: str,
    facets: tuple[Facet, ...] = FACET_ORDER,
) -> dict[Facet, str]:
    """
    Look up which facet values the query mentions.

    Args:
        index: Facet index to search
        query: Free-text query
        facets: Facets to look up

    Returns:
        Facet -> matched value, for the facets that matched
    """
    found = {}
    for facet in facets:
        value = index.find_in_query(facet, query)
        if value is not None:
            found[facet] = value
    return found


def generate_suggestions(
    query: str,
    index: FacetIndex,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
) -> list[Suggestion]:
    """
    Generate ranked suggestions for a partially typed query.

    Args:
        query: Raw query text
        index: Facet index of the catalog
        max_suggestions: Maximum number of suggestions returned
        min_query_length: Queries shorter than this (after stripping)
            produce no suggestions

    Returns:
        Combined suggestions first, then single-facet matches in facet
        order, truncated to `max_suggestions`

    Example:
        >>> [s.label for s in generate_suggestions("MBA in Germany", index)]
        ['MBA in Germany']
    """
    text = query.strip()
    if len(text) < min_query_length:
        return []

    suggestions: list[Suggestion] = []

    for facet in FACET_ORDER:
        for value in index.matching(facet, text):
            suggestions.append(
                Suggestion(
                    type=FACET_SUGGESTION_TYPES[facet],
                    label=value,
                    data={facet.value: value},
                )
            )

    found = find_facets_in_query(index, text, COMBINED_FACETS)
    for template in COMBINED_TEMPLATES:
        combined = template.build(found)
        if combined is not None:
            suggestions.append(combined)

    suggestions.sort(key=lambda s: s.rank)
    return suggestions[:max_suggestions]


class SuggestionEngine:
    """
    Suggestion generator bound to one catalog's facet index.

    Example:
        >>> engine = SuggestionEngine(FacetIndex.from_catalog(programs))
        >>> engine.suggest("data")[0].label
        'Data Science'
    """

    def __init__(
        self,
        index: FacetIndex,
        max_suggestions: Optional[int] = None,
        min_query_length: Optional[int] = None,
    ):
        """
        Initialize the engine.

        Args:
            index: Facet index of the catalog
            max_suggestions: Suggestion limit (default from config)
            min_query_length: Minimum query length (default from config)
        """
        from gradcompass.shared.config import get_settings

        settings = get_settings()
        self.index = index
        self.max_suggestions = (
            max_suggestions
            if max_suggestions is not None
            else settings.get_effective_max_suggestions()
        )
        self.min_query_length = (
            min_query_length
            if min_query_length is not None
            else settings.search.min_query_length
        )

    def suggest(self, query: str) -> list[Suggestion]:
        """Generate suggestions for the current query text."""
        suggestions = generate_suggestions(
            query,
            self.index,
            max_suggestions=self.max_suggestions,
            min_query_length=self.min_query_length,
        )
        logger.debug(f"{len(suggestions)} suggestions for {query!r}")
        return suggestions
