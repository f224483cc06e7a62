"""Unit tests for frequency conversion."""

import pytest

from paycheck_allocation.frequency import to_monthly, to_weekly, weekly_allowance


class TestToWeekly:
    def test_weekly_unchanged(self):
        assert to_weekly(500, "Weekly") == pytest.approx(500)

    def test_monthly(self):
        assert to_weekly(4330, "Monthly") == pytest.approx(1000)

    def test_annual(self):
        assert to_weekly(12 * 4330, "Annual") == pytest.approx(1000)

    def test_unknown_frequency_treated_as_annual(self):
        assert to_weekly(12 * 4330, "Quarterly") == pytest.approx(1000)

    def test_case_insensitive(self):
        assert to_weekly(4330, "monthly") == pytest.approx(1000)

    @pytest.mark.parametrize("frequency", [7, None, ["Weekly"]])
    def test_non_string_frequency_treated_as_annual(self, frequency):
        assert to_weekly(12 * 4330, frequency) == pytest.approx(1000)

    def test_malformed_amount(self):
        assert to_weekly("abc", "Weekly") == 0.0


class TestToMonthly:
    def test_weekly_to_monthly(self):
        assert to_monthly(1000, "Weekly") == pytest.approx(4330)

    def test_monthly_roundtrip(self):
        assert to_monthly(2500, "Monthly") == pytest.approx(2500)


class TestWeeklyAllowance:
    def test_only_flexible_expenses_count(self):
        expenses = [
            {"name": "Groceries", "amount": 1500, "frequency": "Weekly", "is_flexible": True},
            {"name": "Dining", "amount": 4330, "frequency": "Monthly", "is_flexible": True},
            {"name": "Rent", "amount": 8000, "frequency": "Monthly", "is_flexible": False},
        ]
        assert weekly_allowance(expenses) == pytest.approx(2500)

    def test_empty(self):
        assert weekly_allowance([]) == 0
