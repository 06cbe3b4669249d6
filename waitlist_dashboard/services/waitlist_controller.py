"""Fetch lifecycle for the waitlist shown on the dashboard."""
import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from waitlist_dashboard.config import settings
from waitlist_dashboard.schemas import WaitlistEntry, WaitlistStats
from waitlist_dashboard.services.waitlist_client import (
    DEFAULT_ERROR_MESSAGE,
    WaitlistClient,
    WaitlistFetchError,
)
from waitlist_dashboard.services.waitlist_stats import derive_stats
from waitlist_dashboard.utils.sanitization import sanitize_for_log

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaitlistState:
    """Base for the controller states. Entries are never mutated in place."""
    status: ClassVar[str] = "idle"
    view: ClassVar[str] = "loading"

    entries: Tuple[WaitlistEntry, ...] = ()

    @property
    def loading(self) -> bool:
        return False

    @property
    def error(self) -> Optional[str]:
        return None

    @property
    def stats(self) -> WaitlistStats:
        return derive_stats(self.entries)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status,
            "loading": self.loading,
            "error": self.error,
            "entries": [entry.model_dump() for entry in self.entries],
            "stats": self.stats.model_dump(),
        }


@dataclass(frozen=True)
class Idle(WaitlistState):
    """Nothing fetched yet."""


@dataclass(frozen=True)
class Loading(WaitlistState):
    """A fetch is in flight; entries are the ones held before it started."""
    status: ClassVar[str] = "loading"
    view: ClassVar[str] = "loading"

    @property
    def loading(self) -> bool:
        return True


@dataclass(frozen=True)
class Loaded(WaitlistState):
    """The last fetch succeeded."""
    status: ClassVar[str] = "loaded"
    view: ClassVar[str] = "dashboard"


@dataclass(frozen=True)
class Failed(WaitlistState):
    """The last fetch failed; entries are kept from the previous load."""
    status: ClassVar[str] = "failed"
    view: ClassVar[str] = "error"

    message: str = ""

    @property
    def error(self) -> Optional[str]:
        return self.message


class WaitlistController:
    """
    Owns the loading/error/entries lifecycle of one waitlist endpoint.

    Every fetch is tagged with a sequence number. When fetches overlap, only
    the completion of the most recently started one is applied; earlier
    completions are dropped.
    """

    def __init__(self, client: WaitlistClient):
        self.client = client
        self._state: WaitlistState = Idle()
        self._sequence = 0
        self._mounted = False

    @property
    def state(self) -> WaitlistState:
        return self._state

    @property
    def entries(self) -> Tuple[WaitlistEntry, ...]:
        return self._state.entries

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def stats(self) -> WaitlistStats:
        return self._state.stats

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> WaitlistState:
        """Run the initial fetch. Only the first call fetches."""
        if self._mounted:
            return self._state
        self._mounted = True
        return await self.fetch_waitlist()

    async def refresh(self) -> WaitlistState:
        """User-triggered refetch ("Refresh" / "Try Again")."""
        self._mounted = True
        return await self.fetch_waitlist()

    async def fetch_waitlist(self) -> WaitlistState:
        """Fetch the waitlist and record the outcome as the new state."""
        self._sequence += 1
        sequence = self._sequence
        previous = self._state.entries
        self._state = Loading(entries=previous)
        logger.info(
            f"Fetching waitlist from {sanitize_for_log(self.client.url)} (request #{sequence})"
        )

        try:
            entries = await self.client.fetch_entries()
        except WaitlistFetchError as e:
            if sequence != self._sequence:
                logger.debug(f"Discarding failure of stale waitlist request #{sequence}")
                return self._state
            logger.error(f"Error fetching waitlist: {sanitize_for_log(e.message)}")
            self._state = Failed(entries=previous, message=e.message)
            return self._state
        except Exception:
            if sequence != self._sequence:
                logger.debug(f"Discarding failure of stale waitlist request #{sequence}")
                return self._state
            logger.exception(f"Unexpected error fetching waitlist from {self.client.url!r}")
            self._state = Failed(entries=previous, message=DEFAULT_ERROR_MESSAGE)
            return self._state

        if sequence != self._sequence:
            logger.debug(f"Discarding result of stale waitlist request #{sequence}")
            return self._state

        self._state = Loaded(entries=entries)
        logger.info(f"Loaded {len(entries)} waitlist entries")
        return self._state


def build_controller() -> WaitlistController:
    """Create a controller for the configured waitlist endpoint."""
    client = WaitlistClient(settings.waitlist_api_url, timeout=settings.request_timeout_seconds)
    return WaitlistController(client)
