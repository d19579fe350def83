"""
Journey Module - Profile, shortlist and applications.
=====================================================

- supabase: HTTP client for the hosted auth/database service
- store: Profile persistence (Supabase or local JSON file)
- auth: Email/password authentication
- session: Journey state (profile, shortlist, application set)
"""

from gradcompass.journey.auth import (
    AuthClient,
    AuthError,
    AuthSession,
    LocalAuthClient,
    SupabaseAuthClient,
)
from gradcompass.journey.session import GuestShortlistLimitError, JourneySession
from gradcompass.journey.store import (
    LocalProfileStore,
    ProfileRecord,
    ProfileStore,
    ProfileStoreError,
    SupabaseProfileStore,
)
from gradcompass.journey.supabase import SupabaseClient

__all__ = [
    # Auth
    "AuthClient",
    "AuthError",
    "AuthSession",
    "LocalAuthClient",
    "SupabaseAuthClient",
    # Session
    "GuestShortlistLimitError",
    "JourneySession",
    # Store
    "LocalProfileStore",
    "ProfileRecord",
    "ProfileStore",
    "ProfileStoreError",
    "SupabaseProfileStore",
    # Client
    "SupabaseClient",
]
