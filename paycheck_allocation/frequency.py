"""Weekly, monthly and annual amount conversion."""

from collections.abc import Iterable
from typing import Any

from paycheck_allocation.engine._common import WEEKS_PER_MONTH, coerce_amount

MONTHS_PER_YEAR = 12


def to_weekly(amount: Any, frequency: Any) -> float:
    """Convert an amount billed at ``frequency`` to its weekly equivalent.

    Parameters
    ----------
    amount : Any
        Amount per period; coerced to zero when not a finite number.
    frequency : Any
        ``"Weekly"``, ``"Monthly"`` or ``"Annual"`` (case-insensitive).
        Anything else, including non-strings, is treated as annual.

    Returns
    -------
    float
    """
    value = coerce_amount(amount)
    period = frequency.strip().lower() if isinstance(frequency, str) else ""
    if period == "weekly":
        return value
    if period == "monthly":
        return value / WEEKS_PER_MONTH
    return value / MONTHS_PER_YEAR / WEEKS_PER_MONTH


def to_monthly(amount: Any, frequency: Any) -> float:
    """Convert an amount billed at ``frequency`` to its monthly equivalent."""
    return to_weekly(amount, frequency) * WEEKS_PER_MONTH


def weekly_allowance(expenses: Iterable[dict[str, Any]]) -> float:
    """Sum the weekly cost of every flexible expense.

    Used as the default spending allowance reserved before allocation.

    Parameters
    ----------
    expenses : Iterable[dict[str, Any]]
        Each dict has ``amount``, ``frequency`` and ``is_flexible``.

    Returns
    -------
    float
    """
    return sum(
        to_weekly(expense.get("amount"), expense.get("frequency", ""))
        for expense in expenses
        if expense.get("is_flexible")
    )
