"""
Resolver Module - Turn a search interaction into a navigation target.
=====================================================================

Two ways a search ends:
- the user picks a suggestion from the dropdown (`select`)
- the user presses Enter on the raw query (`commit`)

A university always wins and leads to its detail page. Anything else
becomes a filter patch for the program finder.
"""

from gradcompass.search.facets import FACET_ORDER, Facet, FacetIndex
from gradcompass.search.filters import FilterPatch
from gradcompass.search.navigation import NavigationTarget
from gradcompass.search.suggestions import Suggestion, SuggestionType, find_facets_in_query
from gradcompass.shared.logging import get_logger

logger = get_logger(__name__)


class QueryResolver:
    """
    Resolves suggestion selections and Enter-key commits.

    Example:
        >>> resolver = QueryResolver(FacetIndex.from_catalog(programs))
        >>> resolver.commit("Stanford").path
        '/university/Stanford'
        >>> resolver.commit("MBA in Germany").patch.country
        'Germany'
    """

    def __init__(self, index: FacetIndex):
        self.index = index

    def select(self, suggestion: Suggestion) -> NavigationTarget:
        """
        Resolve a chosen suggestion.

        Args:
            suggestion: Suggestion picked from the dropdown

        Returns:
            University target for University suggestions, otherwise a
            finder target whose patch resets facets the suggestion lacks
        """
        university = suggestion.data.get(Facet.UNIVERSITY.value)
        if suggestion.type is SuggestionType.UNIVERSITY and university:
            logger.info(f"Suggestion resolved to university: {university}")
            return NavigationTarget.to_university(university)

        patch = suggestion.to_patch()
        logger.info(f"Suggestion resolved to filter patch: {patch.model_dump()}")
        return NavigationTarget.to_finder(patch)

    def commit(self, query: str) -> NavigationTarget:
        """
        Resolve the raw query when the user presses Enter.

        Every facet is looked up inside the query against the full value
        sets. A university mention takes priority over everything else.

        Args:
            query: Raw query text

        Returns:
            University target, or a finder target with the found values
            (facets not mentioned are empty)
        """
        found = find_facets_in_query(self.index, query, FACET_ORDER)

        university = found.get(Facet.UNIVERSITY)
        if university:
            logger.info(f"Query {query!r} resolved to university: {university}")
            return NavigationTarget.to_university(university)

        patch = FilterPatch(
            degree_type=found.get(Facet.DEGREE_TYPE, ""),
            specialization=found.get(Facet.SPECIALIZATION, ""),
            country=found.get(Facet.COUNTRY, ""),
            city=found.get(Facet.CITY, ""),
        )
        logger.info(f"Query {query!r} resolved to filter patch: {patch.model_dump()}")
        return NavigationTarget.to_finder(patch)
