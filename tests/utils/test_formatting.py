import pytest

from waitlist_dashboard.utils.formatting import (
    INVALID_DATE,
    format_joined_date,
    mailto_link,
    role_label,
)


@pytest.mark.unit
class TestRoleLabel:
    def test_known_roles(self):
        assert role_label("event-planner") == "Event Planner"
        assert role_label("vendor") == "Vendor"

    @pytest.mark.parametrize("role", ["sponsor", "", None, "EVENT-PLANNER"])
    def test_other_roles_fall_through_to_vendor(self, role):
        assert role_label(role) == "Vendor"


@pytest.mark.unit
class TestMailtoLink:
    def test_plain_address(self):
        assert mailto_link("ada@example.com") == "mailto:ada@example.com"

    def test_plus_address_and_whitespace(self):
        assert mailto_link(" ada+waitlist@example.com ") == "mailto:ada+waitlist@example.com"

    def test_unsafe_characters_are_quoted(self):
        assert mailto_link("a b@example.com") == "mailto:a%20b@example.com"
        assert "?" not in mailto_link("ada@example.com?subject=hi")


@pytest.mark.unit
class TestFormatJoinedDate:
    def test_utc_afternoon(self):
        assert format_joined_date("2025-01-05T15:04:00Z") == "Jan 5, 2025, 03:04 PM"

    def test_midnight_and_noon(self):
        assert format_joined_date("2024-12-31T00:07:00+00:00") == "Dec 31, 2024, 12:07 AM"
        assert format_joined_date("2024-06-01T12:30:00+00:00") == "Jun 1, 2024, 12:30 PM"

    def test_offset_converted_to_display_timezone(self):
        assert format_joined_date("2025-03-10T08:15:00-05:00", "UTC") == "Mar 10, 2025, 01:15 PM"

    def test_naive_timestamp_shown_as_given(self):
        assert format_joined_date("2025-03-10 08:15:00.123456") == "Mar 10, 2025, 08:15 AM"

    def test_unknown_timezone_keeps_given_offset(self):
        result = format_joined_date("2025-03-10T08:15:00-05:00", "Not/AZone")
        assert result == "Mar 10, 2025, 08:15 AM"

    @pytest.mark.parametrize("value", ["", None, "yesterday", "2025-13-01T00:00:00"])
    def test_invalid_dates(self, value):
        assert format_joined_date(value) == INVALID_DATE
