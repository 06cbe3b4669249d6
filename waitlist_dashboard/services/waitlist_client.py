"""HTTP client for the upstream waitlist listing endpoint."""

import logging
from typing import List, Optional, Tuple

import httpx
from pydantic import ValidationError

from waitlist_dashboard.schemas import WaitlistEntry, WaitlistListResponse
from waitlist_dashboard.utils.sanitization import sanitize_for_log

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch waitlist"


class WaitlistFetchError(Exception):
    """Raised when the waitlist could not be fetched or parsed."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or DEFAULT_ERROR_MESSAGE)

    @property
    def message(self) -> str:
        return self.args[0]


class WaitlistClient:
    """Fetches waitlist entries from a fixed listing endpoint."""

    def __init__(self, url: str, timeout: Optional[float] = 10.0):
        self.url = url
        self.timeout = timeout

    async def fetch_entries(self) -> Tuple[WaitlistEntry, ...]:
        """
        GET the listing endpoint and return its entries in server order.

        Redirects are followed; only the final response is checked. A missing
        or null ``data`` field yields an empty tuple. Transport errors, an
        unusable URL, non-2xx responses and malformed bodies all raise
        WaitlistFetchError.
        """
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(self.url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(f"Error requesting waitlist from {self.url!r}: {e}")
                raise WaitlistFetchError(str(e)) from e

        if not response.is_success:
            # Status detail is logged only, the user sees the generic message
            logger.warning(
                f"Waitlist endpoint {response.url} returned HTTP {response.status_code}: "
                f"{sanitize_for_log(response.text, max_length=200)}"
            )
            raise WaitlistFetchError(DEFAULT_ERROR_MESSAGE)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Unparseable waitlist response from {self.url}: {e}")
            raise WaitlistFetchError(str(e)) from e

        try:
            body = WaitlistListResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Invalid waitlist response from {self.url}: {e}")
            raise WaitlistFetchError(
                f"Invalid waitlist response ({e.error_count()} validation errors)"
            ) from e

        entries = tuple(body.data or ())
        duplicates = _duplicate_ids(entries)
        if duplicates:
            logger.warning(f"Waitlist response contains duplicate ids: {duplicates}")
        return entries


def _duplicate_ids(entries: Tuple[WaitlistEntry, ...]) -> List[int]:
    seen = set()
    duplicates = []
    for entry in entries:
        if entry.id in seen and entry.id not in duplicates:
            duplicates.append(entry.id)
        seen.add(entry.id)
    return duplicates
