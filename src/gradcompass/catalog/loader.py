"""
Loader Module - Load and validate the program catalog.
======================================================

The catalog is a JSON list of program records (camelCase keys). It is
loaded once, validated with Pydantic and kept read-only. The facet
index is derived from it on first use.
"""

import json
import random
from functools import cached_property
from pathlib import Path
from typing import Iterator, Optional, Sequence

from pydantic import ValidationError

from gradcompass.search.facets import FacetIndex
from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import Program
from gradcompass.shared.utils import load_models_from_json

logger = get_logger(__name__)

DEFAULT_POPULAR_COUNT = 8
DEFAULT_RECOMMENDED_COUNT = 3


class CatalogError(ValueError):
    """Raised when catalog data cannot be loaded or is inconsistent."""


def load_programs(path: Path) -> list[Program]:
    """
    Load program records from a JSON file.

    Args:
        path: Path to a JSON list of program records

    Returns:
        Validated programs in file order

    Raises:
        CatalogError: If the file is missing, malformed, or a record is invalid
    """
    path = Path(path)
    try:
        programs = load_models_from_json(path, Program)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file is not valid JSON: {path}: {e}") from e
    except ValidationError as e:
        raise CatalogError(f"Invalid program record in {path}: {e}") from e

    logger.info(f"Loaded {len(programs)} programs from {path}")
    return programs


class Catalog:
    """
    Read-only, ordered collection of programs.

    Example:
        >>> catalog = Catalog.from_file(Path("data/programs.json"))
        >>> catalog.get("p1").university
        'Stanford University'
    """

    def __init__(self, programs: Sequence[Program]):
        """
        Initialize the catalog.

        Args:
            programs: Programs in display order

        Raises:
            CatalogError: If two programs share an id
        """
        self._programs: tuple[Program, ...] = tuple(programs)
        self._by_id: dict[str, Program] = {}
        for program in self._programs:
            if program.id in self._by_id:
                raise CatalogError(f"Duplicate program id: {program.id}")
            self._by_id[program.id] = program

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "Catalog":
        """Load the catalog from a file (configured catalog file if None)."""
        if path is None:
            from gradcompass.shared.config import get_settings

            path = get_settings().resolved_paths.catalog_file
        return cls(load_programs(path))

    def __len__(self) -> int:
        return len(self._programs)

    def __iter__(self) -> Iterator[Program]:
        return iter(self._programs)

    @property
    def programs(self) -> tuple[Program, ...]:
        return self._programs

    @cached_property
    def facet_index(self) -> FacetIndex:
        """Facet value sets, derived once per catalog."""
        return FacetIndex.from_catalog(self._programs)

    def get(self, program_id: str) -> Optional[Program]:
        """Look up a program by id."""
        return self._by_id.get(program_id)

    def by_university(self, name: str) -> list[Program]:
        """
        All programs offered by a university, in catalog order.

        The first program carries the university's details (city, country,
        ranking) for the university page.
        """
        return [p for p in self._programs if p.university == name]

    def universities(self) -> list[str]:
        """Distinct university names in catalog order."""
        return list(self.facet_index.universities)

    def popular(self, count: int = DEFAULT_POPULAR_COUNT, seed: Optional[int] = None) -> list[Program]:
        """
        A random selection of programs for the home page.

        Args:
            count: Number of programs
            seed: Random seed for a reproducible selection

        Returns:
            Up to `count` shuffled programs
        """
        rng = random.Random(seed)
        shuffled = list(self._programs)
        rng.shuffle(shuffled)
        return shuffled[:count]

    def recommended(self, count: int = DEFAULT_RECOMMENDED_COUNT) -> list[Program]:
        """The first `count` programs, shown as recommendations."""
        return list(self._programs[:count])
