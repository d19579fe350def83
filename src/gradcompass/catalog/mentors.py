"""
Mentors Module - Mentor directory.
==================================

Loads mentor records and filters them by category the way the mentors
page does: "All" shows everyone, and the Resume tab also lists Study
Abroad mentors since they review resumes as part of their packages.
"""

import json
from pathlib import Path
from typing import Iterator, Optional, Sequence

from pydantic import ValidationError

from gradcompass.catalog.loader import CatalogError
from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import Mentor, MentorCategory
from gradcompass.shared.utils import load_models_from_json

logger = get_logger(__name__)

ALL_CATEGORIES = "All"

# Tabs shown on the mentors page, in order
MENTOR_FILTERS: tuple[str, ...] = (
    ALL_CATEGORIES,
    MentorCategory.STUDY_ABROAD.value,
    MentorCategory.ESSAY.value,
    MentorCategory.RESUME.value,
    MentorCategory.TEST_PREP.value,
)

# Extra categories listed under a filter tab
_FILTER_EXTRAS: dict[str, tuple[str, ...]] = {
    MentorCategory.RESUME.value: (MentorCategory.STUDY_ABROAD.value,),
}


def load_mentors(path: Path) -> list[Mentor]:
    """
    Load mentor records from a JSON file.

    Raises:
        CatalogError: If the file is missing, malformed, or a record is invalid
    """
    path = Path(path)
    try:
        mentors = load_models_from_json(path, Mentor)
    except FileNotFoundError as e:
        raise CatalogError(f"Mentors file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Mentors file is not valid JSON: {path}: {e}") from e
    except ValidationError as e:
        raise CatalogError(f"Invalid mentor record in {path}: {e}") from e

    logger.info(f"Loaded {len(mentors)} mentors from {path}")
    return mentors


class MentorDirectory:
    """Mentors with category filtering and lookup by id."""

    categories = MENTOR_FILTERS

    def __init__(self, mentors: Sequence[Mentor]):
        self._mentors = tuple(mentors)

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "MentorDirectory":
        """Load the directory from a file (configured mentors file if None)."""
        if path is None:
            from gradcompass.shared.config import get_settings

            path = get_settings().resolved_paths.mentors_file
        return cls(load_mentors(path))

    def __len__(self) -> int:
        return len(self._mentors)

    def __iter__(self) -> Iterator[Mentor]:
        return iter(self._mentors)

    def filter(self, category: str = ALL_CATEGORIES) -> list[Mentor]:
        """
        Mentors listed under a category tab.

        Args:
            category: "All" or a mentor category name

        Returns:
            Matching mentors in directory order
        """
        if category == ALL_CATEGORIES:
            return list(self._mentors)
        wanted = {category, *_FILTER_EXTRAS.get(category, ())}
        return [m for m in self._mentors if m.category in wanted]

    def get(self, mentor_id: str) -> Optional[Mentor]:
        """Look up a mentor by id."""
        for mentor in self._mentors:
            if mentor.id == mentor_id:
                return mentor
        return None
