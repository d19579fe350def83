"""
Session Module - The student's journey state.
=============================================

JourneySession owns everything that changes while a student uses the
app: who is signed in, their profile (with the saved shortlist), the
guest shortlist and the application set.

Signed-in changes are persisted by upserting the whole profile; local
state only changes once the write succeeded. Guests keep a shortlist in
memory, capped at the configured guest limit.
"""

from typing import Optional

from pydantic import ValidationError

from gradcompass.journey.auth import AuthClient, AuthSession
from gradcompass.journey.store import ProfileRecord, ProfileStore, ProfileStoreError
from gradcompass.shared.config import get_settings
from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import (
    INITIAL_PROFILE,
    ApplicationSetItem,
    AppStatus,
    Program,
    Tier,
    UserProfile,
)

logger = get_logger(__name__)


class GuestShortlistLimitError(ValueError):
    """Raised when a guest shortlists more programs than allowed."""

    def __init__(self, limit: int):
        super().__init__(
            f"Guest limit reached ({limit} items). "
            "Please login to shortlist more and save your progress permanently."
        )
        self.limit = limit


class JourneySession:
    """
    State of one student's session.

    Example:
        >>> session = JourneySession(LocalProfileStore(), auth=SupabaseAuthClient())
        >>> session.login("student@example.com", "secret")
        >>> session.add_to_shortlist(catalog.get("p1"))
        True
        >>> session.move_to_app_set(catalog.get("p1"), Tier.REACH).status
        'Planning'
    """

    def __init__(
        self,
        store: ProfileStore,
        auth: Optional[AuthClient] = None,
        guest_limit: Optional[int] = None,
    ):
        """
        Initialize a signed-out session.

        Args:
            store: Profile persistence
            auth: Authentication provider (required for login/register)
            guest_limit: Maximum guest shortlist size (default from config)
        """
        self.settings = get_settings()
        self.store = store
        self.auth = auth
        self.guest_limit = (
            guest_limit if guest_limit is not None else self.settings.shortlist.guest_limit
        )

        self.profile: UserProfile = INITIAL_PROFILE
        self.auth_session: Optional[AuthSession] = None
        self.guest_shortlist: list[Program] = []
        self.application_set: list[ApplicationSetItem] = []

    @property
    def is_logged_in(self) -> bool:
        return self.auth_session is not None and self.auth_session.is_active

    def _require_auth(self) -> AuthClient:
        if self.auth is None:
            raise RuntimeError("No auth client configured for this session")
        return self.auth

    # ─────────────────────────────────────────────────────────────────────────
    # Authentication
    # ─────────────────────────────────────────────────────────────────────────

    def login(self, email: str, password: str) -> UserProfile:
        """
        Sign in and load the stored profile.

        Raises:
            AuthError: If the credentials are rejected
        """
        self.auth_session = self._require_auth().sign_in(email, password)
        self.store.authorize(self.auth_session.access_token)
        return self.fetch_profile()

    def register(self, name: str, email: str, password: str) -> UserProfile:
        """
        Create an account and its profile row.

        A failed profile insert is logged; the account still exists and
        the next save creates the row.

        Raises:
            AuthError: If sign-up is rejected
        """
        auth_session = self._require_auth().sign_up(name, email, password)
        if auth_session is None:
            return self.profile

        new_profile = INITIAL_PROFILE.model_copy(update={"name": name, "email": email})
        if auth_session.is_active:
            self.auth_session = auth_session
            self.store.authorize(auth_session.access_token)

        record = ProfileRecord.from_profile(auth_session.user_id, email, new_profile, stamp=False)
        try:
            self.store.insert(record)
        except ProfileStoreError as e:
            logger.error(f"Initial profile insert failed: {e}")

        self.profile = new_profile
        return self.profile

    def logout(self) -> None:
        """Sign out and return to the initial profile."""
        if self.auth is not None and self.auth_session is not None:
            self.auth.sign_out(self.auth_session)
        self.store.authorize(None)
        self.auth_session = None
        self.profile = INITIAL_PROFILE
        logger.info("Signed out")

    # ─────────────────────────────────────────────────────────────────────────
    # Profile Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def fetch_profile(self) -> UserProfile:
        """
        Load the signed-in user's profile from the store.

        The stored profile_data is laid over the initial profile; name
        and email come from the row's own columns. Without a row (or if
        the read fails) the profile is the initial one with the session
        email.
        """
        if self.auth_session is None:
            return self.profile

        user_id = self.auth_session.user_id
        email = self.auth_session.email

        try:
            record = self.store.fetch(user_id)
        except ProfileStoreError as e:
            logger.error(f"Error fetching profile: {e}")
            record = None

        if record is None:
            self.profile = INITIAL_PROFILE.model_copy(update={"email": email})
            return self.profile

        merged = {
            **INITIAL_PROFILE.to_json_dict(),
            **(record.profile_data or {}),
            "name": record.full_name or "",
            "email": record.email or email or "",
        }
        try:
            self.profile = UserProfile.model_validate(merged)
        except ValidationError as e:
            logger.warning(f"Stored profile for {user_id} is invalid, using basic columns: {e}")
            self.profile = INITIAL_PROFILE.model_copy(
                update={"name": merged["name"], "email": merged["email"]}
            )
        return self.profile

    def save_profile(self, profile: UserProfile) -> bool:
        """
        Persist a whole profile for the signed-in user.

        Returns:
            True if saved; False if signed out or the write failed (the
            local profile is left unchanged)
        """
        if not self.is_logged_in:
            return False

        record = ProfileRecord.from_profile(
            self.auth_session.user_id, self.auth_session.email, profile
        )
        try:
            self.store.upsert(record)
        except ProfileStoreError as e:
            logger.error(f"Error updating profile: {e}")
            return False

        self.profile = profile
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Shortlist
    # ─────────────────────────────────────────────────────────────────────────

    def current_shortlist(self) -> list[Program]:
        """Shortlisted programs (saved for users, in memory for guests)."""
        if self.is_logged_in:
            return list(self.profile.saved_shortlist)
        return list(self.guest_shortlist)

    @property
    def shortlist_count(self) -> int:
        return len(self.current_shortlist())

    def is_shortlisted(self, program_id: str) -> bool:
        return any(p.id == program_id for p in self.current_shortlist())

    def add_to_shortlist(self, program: Program) -> bool:
        """
        Shortlist a program.

        Returns:
            True if the shortlist changed; False if the program was already
            on it or the save failed

        Raises:
            GuestShortlistLimitError: If a guest's shortlist is full
        """
        if self.is_shortlisted(program.id):
            return False

        if self.is_logged_in:
            updated = self.profile.model_copy(
                update={"saved_shortlist": [*self.profile.saved_shortlist, program]}
            )
            return self.save_profile(updated)

        if len(self.guest_shortlist) >= self.guest_limit:
            raise GuestShortlistLimitError(self.guest_limit)
        self.guest_shortlist.append(program)
        return True

    def remove_from_shortlist(self, program_id: str) -> bool:
        """Remove a program; True if the shortlist changed."""
        if not self.is_shortlisted(program_id):
            return False

        if self.is_logged_in:
            updated = self.profile.model_copy(
                update={
                    "saved_shortlist": [
                        p for p in self.profile.saved_shortlist if p.id != program_id
                    ]
                }
            )
            return self.save_profile(updated)

        self.guest_shortlist = [p for p in self.guest_shortlist if p.id != program_id]
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Application Set
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def has_application_set(self) -> bool:
        return len(self.application_set) > 0

    def get_application(self, program_id: str) -> Optional[ApplicationSetItem]:
        for item in self.application_set:
            if item.id == program_id:
                return item
        return None

    def move_to_app_set(self, program: Program, tier: Optional[Tier | str] = None) -> ApplicationSetItem:
        """
        Commit to applying for a program.

        A program already in the set is returned unchanged.

        Args:
            program: Program to apply for
            tier: Ambition tier (default from config)

        Returns:
            The application set item
        """
        existing = self.get_application(program.id)
        if existing is not None:
            return existing

        shortlist_config = self.settings.shortlist
        item = ApplicationSetItem.model_validate(
            {
                **program.model_dump(exclude={"total_annual_cost"}),
                "status": AppStatus.PLANNING,
                "round": shortlist_config.default_round,
                "app_deadline": program.deadline or shortlist_config.default_deadline,
                "tier": Tier(tier or shortlist_config.default_tier),
            }
        )
        self.application_set.append(item)
        logger.info(f"Added {program.program_name} ({program.university}) to application set as {item.tier}")
        return item

    def update_application_status(self, program_id: str, status: AppStatus | str) -> ApplicationSetItem:
        """
        Change the status of an application.

        Raises:
            KeyError: If the program is not in the application set
            ValueError: If the status is unknown
        """
        new_status = AppStatus(status)
        for i, item in enumerate(self.application_set):
            if item.id == program_id:
                updated = item.model_copy(update={"status": new_status.value})
                self.application_set[i] = updated
                return updated
        raise KeyError(f"Program {program_id} is not in the application set")
