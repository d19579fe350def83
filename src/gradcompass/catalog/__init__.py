"""
Catalog Module - Program and mentor data.
=========================================

- loader: Program catalog loading, validation and lookup
- mentors: Mentor directory with category filtering
"""

from gradcompass.catalog.loader import Catalog, CatalogError, load_programs
from gradcompass.catalog.mentors import MENTOR_FILTERS, MentorDirectory, load_mentors

__all__ = [
    "Catalog",
    "CatalogError",
    "load_programs",
    "MENTOR_FILTERS",
    "MentorDirectory",
    "load_mentors",
]
