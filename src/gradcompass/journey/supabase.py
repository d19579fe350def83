"""
Supabase Module - HTTP access to the hosted auth/database service.
==================================================================

A thin requests wrapper shared by the profile store and the auth client:
- Project URL and anon key from settings
- Bearer token swapped in after sign-in (row level security)
- Automatic retries with exponential backoff on connection errors
"""

from typing import Any, Optional

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from gradcompass.shared.config import get_settings
from gradcompass.shared.logging import get_logger

logger = get_logger(__name__)


def error_message(response: requests.Response) -> str:
    """Best-effort error text from a Supabase error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return str(body)


class SupabaseClient:
    """
    Minimal Supabase REST client.

    Example:
        >>> client = SupabaseClient()
        >>> response = client.request("GET", "/rest/v1/profiles", params={"select": "*"})
    """

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
    ):
        """
        Initialize the client.

        Args:
            url: Project URL (default from SUPABASE_URL or config)
            api_key: Anon key (default from SUPABASE_ANON_KEY)
            timeout: Request timeout in seconds
            max_retries: Maximum attempts per request
        """
        settings = get_settings()
        supabase_config = settings.supabase

        self.url = (url or settings.get_effective_supabase_url()).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_anon_key
        self.timeout = timeout if timeout is not None else supabase_config.timeout
        self.max_retries = max_retries if max_retries is not None else supabase_config.max_retries
        self.retry_min_wait = supabase_config.retry_min_wait
        self.retry_max_wait = supabase_config.retry_max_wait

        self._access_token: Optional[str] = None
        self._session: Optional[requests.Session] = None

    @property
    def is_configured(self) -> bool:
        """True if both the project URL and the anon key are set."""
        return bool(self.url and self.api_key)

    @property
    def session(self) -> requests.Session:
        """Get or create the requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(
                {
                    "apikey": self.api_key,
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                }
            )
        return self._session

    def set_access_token(self, access_token: Optional[str]) -> None:
        """Authenticate requests as a signed-in user (None reverts to anon)."""
        self._access_token = access_token

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._access_token or self.api_key}"}

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Send a request to the project with retries.

        Args:
            method: HTTP method
            path: Path below the project URL, e.g. "/rest/v1/profiles"
            headers: Extra headers for this request
            **kwargs: Passed through to requests (params, json, ...)

        Returns:
            The response (any status code)

        Raises:
            requests.RequestException: If the request fails after all retries
        """
        if not self.url:
            raise requests.ConnectionError("Supabase URL is not configured (set SUPABASE_URL)")

        url = f"{self.url}{path}"
        request_headers = {**self._auth_headers(), **(headers or {})}

        @retry(
            retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(min=self.retry_min_wait, max=self.retry_max_wait),
            before_sleep=lambda retry_state: logger.warning(
                f"Retry {retry_state.attempt_number}/{self.max_retries} for {method} {path}"
            ),
            reraise=True,
        )
        def _request_with_retry() -> requests.Response:
            return self.session.request(
                method, url, headers=request_headers, timeout=self.timeout, **kwargs
            )

        response = _request_with_retry()
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response
