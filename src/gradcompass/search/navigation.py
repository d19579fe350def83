"""
Navigation Module - Routes and navigation targets.
==================================================

The search core never navigates itself. It returns a NavigationTarget
describing where the presentation layer should go and with what
payload: a university detail page, or the program finder with a
filter patch.
"""

from enum import Enum
from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel

from gradcompass.search.filters import FilterPatch

# Characters encodeURIComponent leaves alone beyond quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


class Route(str, Enum):
    """Application routes."""

    HOME = "/"
    COLLEGE_FINDER = "/colleges"
    COLLEGE_DETAIL = "/university/:name"
    PROGRAM_DETAIL = "/program/:id"
    MY_JOURNEY = "/journey"
    PROFILE_BUILDER = "/profile-builder"
    MENTORS = "/mentors"
    MENTOR_DETAIL = "/mentor/:id"
    ACCOUNT = "/account"
    LOGIN = "/login"
    REGISTER = "/register"
    SHORTLIST = "/shortlist"
    WORKSPACE = "/workspace/:programId"


def university_path(name: str) -> str:
    """Path of a university detail page."""
    return "/university/" + quote(name, safe=_URI_COMPONENT_SAFE)


def program_path(program_id: str) -> str:
    """Path of a program detail page."""
    return "/program/" + quote(program_id, safe=_URI_COMPONENT_SAFE)


class NavigationTarget(BaseModel):
    """Where a search selection leads."""

    route: Route
    university: Optional[str] = None
    patch: Optional[FilterPatch] = None

    @classmethod
    def to_university(cls, name: str) -> "NavigationTarget":
        return cls(route=Route.COLLEGE_DETAIL, university=name)

    @classmethod
    def to_finder(cls, patch: FilterPatch) -> "NavigationTarget":
        return cls(route=Route.COLLEGE_FINDER, patch=patch)

    @property
    def is_university(self) -> bool:
        return self.route is Route.COLLEGE_DETAIL

    @property
    def path(self) -> str:
        """Concrete path to navigate to."""
        if self.is_university and self.university is not None:
            return university_path(self.university)
        return self.route.value
