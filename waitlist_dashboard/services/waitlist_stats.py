"""Statistics derived from a waitlist entry collection."""
from typing import Iterable

from waitlist_dashboard.schemas import WaitlistEntry, WaitlistRole, WaitlistStats


def derive_stats(entries: Iterable[WaitlistEntry]) -> WaitlistStats:
    """
    Count entries by role.

    Entries whose role is neither event-planner nor vendor are included in
    the total only.
    """
    total = 0
    event_planners = 0
    vendors = 0
    for entry in entries:
        total += 1
        if entry.role == WaitlistRole.EVENT_PLANNER.value:
            event_planners += 1
        elif entry.role == WaitlistRole.VENDOR.value:
            vendors += 1

    return WaitlistStats(total=total, event_planners=event_planners, vendors=vendors)
