"""
Auth Module - Email/password authentication.
============================================

Sign-in, sign-up and sign-out against Supabase Auth (GoTrue), or against
accounts kept in a local JSON file for offline use. The session only
carries what the journey needs: the user id, the email and the bearer
token used for profile reads and writes.
"""

import secrets
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import bcrypt
import requests
from pydantic import BaseModel

from gradcompass.journey.supabase import SupabaseClient, error_message
from gradcompass.shared.logging import get_logger
from gradcompass.shared.utils import load_json, save_json

logger = get_logger(__name__)


class AuthError(RuntimeError):
    """Raised when sign-in or sign-up is rejected."""


class AuthSession(BaseModel):
    """An authenticated (or pending-confirmation) user."""

    user_id: str
    email: str = ""
    access_token: str = ""
    refresh_token: str = ""

    @property
    def is_active(self) -> bool:
        """False while the email still awaits confirmation."""
        return bool(self.access_token)


class AuthClient(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            AuthError: If the credentials are rejected
        """
        pass

    @abstractmethod
    def sign_up(self, name: str, email: str, password: str) -> Optional[AuthSession]:
        """
        Create an account.

        Returns:
            Session for the new user (inactive if confirmation is
            pending), or None if no user was created

        Raises:
            AuthError: If sign-up is rejected
        """
        pass

    @abstractmethod
    def sign_out(self, session: AuthSession) -> None:
        """End a session."""
        pass


def _session_from_payload(payload: dict[str, Any], email: str) -> Optional[AuthSession]:
    # Sign-in returns {access_token, user}; sign-up without auto-confirm
    # returns the bare user object.
    user = payload.get("user") or (payload if "id" in payload else None)
    if not user or not user.get("id"):
        return None
    return AuthSession(
        user_id=user["id"],
        email=user.get("email") or email,
        access_token=payload.get("access_token") or "",
        refresh_token=payload.get("refresh_token") or "",
    )


class SupabaseAuthClient(AuthClient):
    """
    Supabase Auth over HTTP.

    Example:
        >>> auth = SupabaseAuthClient()
        >>> session = auth.sign_in("student@example.com", "secret")
        >>> session.user_id
        '4f1c...'
    """

    def __init__(self, client: Optional[SupabaseClient] = None):
        self.client = client or SupabaseClient()

    def _post(self, path: str, payload: dict[str, Any], action: str) -> dict[str, Any]:
        try:
            response = self.client.request("POST", path, json=payload)
        except requests.RequestException as e:
            raise AuthError(f"{action} failed: {e}") from e

        if not response.ok:
            raise AuthError(f"{action} failed: {error_message(response)}")
        return response.json()

    def sign_in(self, email: str, password: str) -> AuthSession:
        payload = self._post(
            "/auth/v1/token?grant_type=password",
            {"email": email, "password": password},
            "Sign in",
        )
        session = _session_from_payload(payload, email)
        if session is None or not session.is_active:
            raise AuthError("Sign in failed: no session returned")

        logger.info(f"Signed in: {session.email}")
        return session

    def sign_up(self, name: str, email: str, password: str) -> Optional[AuthSession]:
        payload = self._post(
            "/auth/v1/signup",
            {"email": email, "password": password, "data": {"full_name": name}},
            "Sign up",
        )
        session = _session_from_payload(payload, email)
        if session is None:
            logger.warning(f"Sign up for {email} returned no user")
        elif not session.is_active:
            logger.info(f"Account created for {email}, awaiting email confirmation")
        else:
            logger.info(f"Account created and signed in: {email}")
        return session

    def sign_out(self, session: AuthSession) -> None:
        if not session.is_active:
            return

        self.client.set_access_token(session.access_token)
        try:
            response = self.client.request("POST", "/auth/v1/logout")
            if not response.ok:
                logger.warning(f"Sign out failed: {error_message(response)}")
        except requests.RequestException as e:
            logger.warning(f"Sign out failed: {e}")
        finally:
            self.client.set_access_token(None)


# ─────────────────────────────────────────────────────────────────────────────
# Local Accounts
# ─────────────────────────────────────────────────────────────────────────────


class LocalAuthClient(AuthClient):
    """
    Accounts in a local JSON file ({email: account}) for offline use.

    Passwords are stored as bcrypt hashes. Every successful sign-in or
    sign-up returns an active session with a fresh random token.

    Example:
        >>> auth = LocalAuthClient(Path("data/local/accounts.json"))
        >>> auth.sign_up("Asha", "asha@example.com", "secret").is_active
        True
    """

    def __init__(self, path: Optional[Path] = None, rounds: int = 12):
        """
        Initialize the client.

        Args:
            path: Accounts file (default from config)
            rounds: bcrypt cost factor for new password hashes
        """
        if path is None:
            from gradcompass.shared.config import get_settings

            path = get_settings().resolved_paths.accounts_file
        self.path = Path(path)
        self.rounds = rounds

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            accounts = load_json(self.path)
        except ValueError as e:
            raise AuthError(f"Corrupt accounts file {self.path}: {e}") from e

        if not isinstance(accounts, dict):
            raise AuthError(f"Corrupt accounts file {self.path}: expected an object keyed by email")
        return accounts

    def sign_in(self, email: str, password: str) -> AuthSession:
        account = self._load().get(email.strip().lower())
        if account is None or not bcrypt.checkpw(
            password.encode("utf-8"), account["password_hash"].encode("utf-8")
        ):
            raise AuthError("Sign in failed: Invalid login credentials")

        logger.info(f"Signed in locally: {account['email']}")
        return AuthSession(
            user_id=account["id"],
            email=account["email"],
            access_token=secrets.token_urlsafe(16),
        )

    def sign_up(self, name: str, email: str, password: str) -> Optional[AuthSession]:
        if not password:
            raise AuthError("Sign up failed: Password is required")

        accounts = self._load()
        key = email.strip().lower()
        if key in accounts:
            raise AuthError("Sign up failed: User already registered")

        user_id = str(uuid.uuid4())
        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))
        accounts[key] = {
            "id": user_id,
            "email": email.strip(),
            "full_name": name,
            "password_hash": password_hash.decode("utf-8"),
        }
        save_json(self.path, accounts)

        logger.info(f"Local account created: {email}")
        return AuthSession(
            user_id=user_id,
            email=email.strip(),
            access_token=secrets.token_urlsafe(16),
        )

    def sign_out(self, session: AuthSession) -> None:
        logger.info(f"Signed out locally: {session.email}")
