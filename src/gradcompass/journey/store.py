"""
Store Module - Profile persistence.
===================================

Each user has one row in the ``profiles`` table:

    id | email | full_name | profile_data (JSON) | updated_at

The whole UserProfile is written to ``profile_data`` on every save.
Deployments created before that column existed only have the basic
columns; writes that fail because of the missing column are repeated
without it.

Stores:
- SupabaseProfileStore: PostgREST over HTTP
- LocalProfileStore: JSON file keyed by user id (offline use, tests)
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import requests
from pydantic import BaseModel

from gradcompass.journey.supabase import SupabaseClient, error_message
from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import UserProfile
from gradcompass.shared.utils import load_json, save_json

logger = get_logger(__name__)

PROFILE_DATA_COLUMN = "profile_data"


class ProfileStoreError(RuntimeError):
    """Raised when a profile cannot be read or written."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def missing_profile_data(self) -> bool:
        """True if the failure is about the profile_data column."""
        return PROFILE_DATA_COLUMN in str(self)


class ProfileRecord(BaseModel):
    """A row of the profiles table."""

    id: str
    email: str = ""
    full_name: str = ""
    profile_data: Optional[dict[str, Any]] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_profile(
        cls,
        user_id: str,
        email: str,
        profile: UserProfile,
        stamp: bool = True,
    ) -> "ProfileRecord":
        """Build the row that stores a whole profile."""
        return cls(
            id=user_id,
            email=email,
            full_name=profile.name,
            profile_data=profile.to_json_dict(),
            updated_at=datetime.now(timezone.utc) if stamp else None,
        )

    def without_profile_data(self) -> "ProfileRecord":
        """Copy with only the basic columns."""
        return self.model_copy(update={PROFILE_DATA_COLUMN: None})

    def to_row(self) -> dict[str, Any]:
        """JSON-ready row; unset columns are omitted."""
        return self.model_dump(mode="json", exclude_none=True)


# ─────────────────────────────────────────────────────────────────────────────
# Abstract Base Class
# ─────────────────────────────────────────────────────────────────────────────


class ProfileStore(ABC):
    """
    Abstract base class for profile stores.

    `upsert` and `insert` repeat a write without profile_data when the
    backend rejects that column.
    """

    @abstractmethod
    def fetch(self, user_id: str) -> Optional[ProfileRecord]:
        """
        Get a user's profile row.

        Returns:
            The row, or None if the user has none

        Raises:
            ProfileStoreError: If the row cannot be read
        """
        pass

    @abstractmethod
    def _write(self, record: ProfileRecord, insert: bool) -> None:
        """Write a row (insert or merge into an existing one)."""
        pass

    def authorize(self, access_token: Optional[str]) -> None:
        """Act on behalf of a signed-in user (None for anonymous)."""

    def upsert(self, record: ProfileRecord) -> None:
        """
        Insert the row, or update the columns it carries if it exists.

        Raises:
            ProfileStoreError: If the write fails
        """
        self._write_with_fallback(record, insert=False)

    def insert(self, record: ProfileRecord) -> None:
        """
        Insert a new row.

        Raises:
            ProfileStoreError: If the write fails (including an existing id)
        """
        self._write_with_fallback(record, insert=True)

    def _write_with_fallback(self, record: ProfileRecord, insert: bool) -> None:
        try:
            self._write(record, insert)
        except ProfileStoreError as e:
            if record.profile_data is None or not e.missing_profile_data:
                raise
            logger.warning(f"Profile write failed on {PROFILE_DATA_COLUMN}, retrying basic columns: {e}")
            self._write(record.without_profile_data(), insert)


# ─────────────────────────────────────────────────────────────────────────────
# Supabase Store
# ─────────────────────────────────────────────────────────────────────────────


class SupabaseProfileStore(ProfileStore):
    """
    Profile store backed by the Supabase REST API.

    Example:
        >>> store = SupabaseProfileStore()
        >>> store.authorize(session.access_token)
        >>> record = store.fetch(session.user_id)
    """

    def __init__(self, client: Optional[SupabaseClient] = None, table: Optional[str] = None):
        """
        Initialize the store.

        Args:
            client: Supabase client (created from settings if None)
            table: Profiles table name (default from config)
        """
        from gradcompass.shared.config import get_settings

        self.client = client or SupabaseClient()
        self.table = table or get_settings().supabase.profiles_table

    @property
    def path(self) -> str:
        return f"/rest/v1/{self.table}"

    def authorize(self, access_token: Optional[str]) -> None:
        self.client.set_access_token(access_token)

    def fetch(self, user_id: str) -> Optional[ProfileRecord]:
        try:
            response = self.client.request(
                "GET",
                self.path,
                params={"id": f"eq.{user_id}", "select": "*"},
            )
        except requests.RequestException as e:
            raise ProfileStoreError(f"Failed to fetch profile {user_id}: {e}") from e

        if not response.ok:
            raise ProfileStoreError(
                f"Failed to fetch profile {user_id}: {error_message(response)}",
                status_code=response.status_code,
            )

        rows = response.json()
        if not rows:
            logger.debug(f"No profile row for {user_id}")
            return None
        return ProfileRecord.model_validate(rows[0])

    def _write(self, record: ProfileRecord, insert: bool) -> None:
        prefer = "return=minimal" if insert else "resolution=merge-duplicates,return=minimal"
        try:
            response = self.client.request(
                "POST",
                self.path,
                headers={"Prefer": prefer},
                json=[record.to_row()],
            )
        except requests.RequestException as e:
            raise ProfileStoreError(f"Failed to save profile {record.id}: {e}") from e

        if not response.ok:
            raise ProfileStoreError(
                f"Failed to save profile {record.id}: {error_message(response)}",
                status_code=response.status_code,
            )
        logger.debug(f"Saved profile {record.id} ({'insert' if insert else 'upsert'})")


# ─────────────────────────────────────────────────────────────────────────────
# Local Store
# ─────────────────────────────────────────────────────────────────────────────


class LocalProfileStore(ProfileStore):
    """
    Profile store in a local JSON file ({user_id: row}).

    Example:
        >>> store = LocalProfileStore(Path("data/local/profiles.json"))
        >>> store.upsert(ProfileRecord(id="u1", email="a@b.c"))
    """

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            from gradcompass.shared.config import get_settings

            path = get_settings().resolved_paths.profiles_file
        self.path = Path(path)

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            rows = load_json(self.path)
        except ValueError as e:
            raise ProfileStoreError(f"Corrupt profiles file {self.path}: {e}") from e

        if not isinstance(rows, dict):
            raise ProfileStoreError(
                f"Corrupt profiles file {self.path}: expected an object keyed by user id, "
                f"got {type(rows).__name__}"
            )
        return rows

    def fetch(self, user_id: str) -> Optional[ProfileRecord]:
        row = self._load().get(user_id)
        if row is None:
            return None
        return ProfileRecord.model_validate(row)

    def _write(self, record: ProfileRecord, insert: bool) -> None:
        rows = self._load()
        if insert and record.id in rows:
            raise ProfileStoreError(f"Profile {record.id} already exists", status_code=409)

        # Merge like a PostgREST upsert: columns not sent are kept
        rows[record.id] = {**rows.get(record.id, {}), **record.to_row()}
        save_json(self.path, rows)
        logger.debug(f"Saved profile {record.id} to {self.path}")
