"""Display helpers for waitlist entries."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from waitlist_dashboard.schemas import WaitlistRole

INVALID_DATE = "Invalid Date"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def role_label(role: Optional[str]) -> str:
    """
    Human readable label for a role.

    Anything other than event-planner is labelled "Vendor", including roles
    that derive_stats does not count as vendors.
    """
    if role == WaitlistRole.EVENT_PLANNER.value:
        return "Event Planner"
    return "Vendor"


def mailto_link(email: str) -> str:
    """Build a mailto: URL for an email address."""
    return f"mailto:{quote(email.strip(), safe='@+.')}"


def _resolve_timezone(tz_name: Optional[str]):
    if not tz_name:
        return None
    if tz_name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def format_joined_date(created_at: Optional[str], tz_name: Optional[str] = "UTC") -> str:
    """
    Format an ISO-8601 timestamp as e.g. "Jan 5, 2025, 03:04 PM".

    Aware timestamps are converted to ``tz_name``; naive ones are shown as
    given. Values that do not parse render as "Invalid Date".
    """
    if not created_at:
        return INVALID_DATE

    value = created_at.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return INVALID_DATE

    tz = _resolve_timezone(tz_name)
    if moment.tzinfo is not None and tz is not None:
        moment = moment.astimezone(tz)

    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{_MONTHS[moment.month - 1]} {moment.day}, {moment.year}, "
        f"{hour:02d}:{moment.minute:02d} {meridiem}"
    )
