"""
Search Module - Program discovery engine.
=========================================

- facets: Distinct facet values derived from the catalog (FacetIndex)
- suggestions: Ranked live suggestions for free-text queries
- resolver: Suggestion selection and Enter-key commit resolution
- filters: Structured exact-match filtering with a tuition ceiling
- navigation: Routes and navigation targets

Search Flow:
    Query → FacetIndex → Suggestions → Selection/Commit → Filter patch → Results
"""

from gradcompass.search.facets import Facet, FacetIndex, distinct_values
from gradcompass.search.filters import FilterPatch, ProgramFilter, apply_filter
from gradcompass.search.navigation import NavigationTarget, Route, program_path, university_path
from gradcompass.search.resolver import QueryResolver
from gradcompass.search.suggestions import (
    Suggestion,
    SuggestionEngine,
    SuggestionType,
    generate_suggestions,
)

__all__ = [
    # Facets
    "Facet",
    "FacetIndex",
    "distinct_values",
    # Filters
    "FilterPatch",
    "ProgramFilter",
    "apply_filter",
    # Navigation
    "NavigationTarget",
    "Route",
    "program_path",
    "university_path",
    # Resolver
    "QueryResolver",
    # Suggestions
    "Suggestion",
    "SuggestionEngine",
    "SuggestionType",
    "generate_suggestions",
]
