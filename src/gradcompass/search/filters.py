"""
Filters Module - Structured program filtering.
==============================================

A ProgramFilter holds one optional value per facet plus a tuition
ceiling. Evaluation is a plain conjunction of exact-match predicates
over the catalog: no scoring, no fuzzy matching, catalog order kept.
"""

from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from gradcompass.search.facets import Facet
from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import Program

logger = get_logger(__name__)

DEFAULT_MAX_TUITION = 100000

# Facets a FilterPatch sets; university is reached by navigation instead
PATCH_FACETS: tuple[Facet, ...] = (
    Facet.DEGREE_TYPE,
    Facet.SPECIALIZATION,
    Facet.COUNTRY,
    Facet.CITY,
)

FILTER_FACETS: tuple[Facet, ...] = PATCH_FACETS + (Facet.UNIVERSITY,)

_camel_config = {"alias_generator": to_camel, "populate_by_name": True}


class FilterPatch(BaseModel):
    """
    Facet values produced by a search selection.

    All four fields are always present; an empty string clears the
    corresponding filter when the patch is merged.
    """

    model_config = _camel_config

    degree_type: str = ""
    specialization: str = ""
    country: str = ""
    city: str = ""

    def is_empty(self) -> bool:
        """True if the patch sets no facet."""
        return not any(getattr(self, facet.value) for facet in PATCH_FACETS)


class ProgramFilter(BaseModel):
    """
    Filter state of the program finder.

    Unset (empty) facets impose no constraint; `max_tuition` always does.
    """

    model_config = _camel_config

    degree_type: str = ""
    specialization: str = ""
    country: str = ""
    city: str = ""
    university: str = ""
    max_tuition: float = Field(default=DEFAULT_MAX_TUITION, ge=0)

    @classmethod
    def default(cls) -> "ProgramFilter":
        """Filter with no facets and the configured tuition ceiling."""
        from gradcompass.shared.config import get_settings

        return cls(max_tuition=get_settings().search.default_max_tuition)

    def merge(self, patch: FilterPatch | dict[str, Any]) -> "ProgramFilter":
        """
        Return a copy with the patch's facet values applied.

        A FilterPatch overwrites all four of its facets; a dict only
        overwrites the keys it contains (camelCase keys are accepted).
        `max_tuition` is kept unless a dict patch sets it.
        """
        if isinstance(patch, FilterPatch):
            return self.model_copy(update=patch.model_dump())
        return ProgramFilter.model_validate({**self.model_dump(), **_snake_keys(patch)})

    def reset(self) -> "ProgramFilter":
        """Return the default filter ("Clear All")."""
        return ProgramFilter.default()

    def active_facets(self) -> dict[str, str]:
        """Facet name -> value for every facet that is set."""
        return {
            facet.value: getattr(self, facet.value)
            for facet in FILTER_FACETS
            if getattr(self, facet.value)
        }

    def is_active(self, default_max_tuition: Optional[float] = None) -> bool:
        """
        True if any facet is set or the ceiling is below the default.

        Args:
            default_max_tuition: Ceiling of the default filter (default from config)
        """
        if default_max_tuition is None:
            from gradcompass.shared.config import get_settings

            default_max_tuition = get_settings().search.default_max_tuition
        return bool(self.active_facets()) or self.max_tuition < default_max_tuition

    def matches(self, program: Program) -> bool:
        """True if the program satisfies every predicate of this filter."""
        if program.tuition > self.max_tuition:
            return False
        for facet in FILTER_FACETS:
            wanted = getattr(self, facet.value)
            if wanted and getattr(program, facet.value) != wanted:
                return False
        return True


def _snake_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase filter keys to field names."""
    fields = {to_camel(name): name for name in ProgramFilter.model_fields}
    return {fields.get(key, key): value for key, value in data.items()}


def apply_filter(
    catalog: Sequence[Program],
    program_filter: Optional[ProgramFilter] = None,
) -> list[Program]:
    """
    Select the programs that satisfy a filter.

    Args:
        catalog: Programs to filter
        program_filter: Filter to apply (default filter if None)

    Returns:
        Matching programs in catalog order (possibly empty)

    Example:
        >>> apply_filter(programs, ProgramFilter(country="India", max_tuition=20000))
        []
    """
    if program_filter is None:
        program_filter = ProgramFilter()

    results = [program for program in catalog if program_filter.matches(program)]
    logger.debug(
        f"Filter {program_filter.active_facets()} max_tuition={program_filter.max_tuition}: "
        f"{len(results)}/{len(catalog)} programs"
    )
    return results
