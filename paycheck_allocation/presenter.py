"""Display-ready views of an allocation.

Groups items for the "suggested so far / target" cards and builds the weekly
transfer checklist. Nothing here changes engine numbers; amounts are rounded
to whole units only at this layer.
"""

import math
from dataclasses import dataclass, field

from paycheck_allocation.engine import SATISFIED_THRESHOLD, AllocationResult, FundingItem

DEFAULT_CURRENCY = "₱"


def round_currency(amount: float) -> int:
    """Round half up to the nearest whole unit."""
    return int(math.floor(amount + 0.5))


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format a rounded amount with thousands separators, e.g. ``₱1,848``."""
    return f"{currency}{round_currency(amount):,}"


@dataclass
class PresentedItem:
    """One row of a category card."""

    id: str
    name: str
    priority: str
    suggested: int
    target: int


@dataclass
class AllocationSummary:
    """Everything the worksheet view shows for one allocation.

    Parameters
    ----------
    base_allowance : int
        Spending allowance reserved up front.
    income_surplus : int
        Pool left after all items were satisfied.
    total_pocket_money : int
        Allowance plus surplus.
    shortfall : int
        Amount by which the allowance exceeds income.
    has_shortfall : bool
        Whether the pocket-money figure should be flagged.
    total_suggested : int
        Sum of all suggestions.
    groups : dict[str, list[PresentedItem]]
        Items grouped by category.
    checklist : list[str]
        Transfer instructions, ending with the daily spending line.
    """

    base_allowance: int
    income_surplus: int
    total_pocket_money: int
    shortfall: int
    has_shortfall: bool
    total_suggested: int
    groups: dict[str, list[PresentedItem]] = field(default_factory=dict)
    checklist: list[str] = field(default_factory=list)


def group_by_category(items: list[FundingItem], result: AllocationResult) -> dict[str, list[PresentedItem]]:
    """Split items into ``"fixed"`` and ``"savings"`` rows, keeping input order."""
    groups: dict[str, list[PresentedItem]] = {"fixed": [], "savings": []}
    for item in items:
        groups[item.category].append(
            PresentedItem(
                id=item.id,
                name=item.name,
                priority=item.priority,
                suggested=round_currency(result.suggestions.get(item.id, 0.0)),
                target=round_currency(item.monthly_target),
            )
        )
    return groups


def build_checklist(
    items: list[FundingItem],
    result: AllocationResult,
    currency: str = DEFAULT_CURRENCY,
) -> list[str]:
    """Build the weekly transfer checklist.

    Parameters
    ----------
    items : list[FundingItem]
        Items in display order.
    result : AllocationResult
        Engine output for the same items.
    currency : str
        Symbol prefixed to every amount.

    Returns
    -------
    list[str]
        ``"Move <amount> to <name>"`` for every item with a suggestion above
        the satisfied threshold, followed by
        ``"Keep <amount> for Daily Spending"``.
    """
    lines = [
        f"Move {format_currency(result.suggestions[item.id], currency)} to {item.name}"
        for item in items
        if result.suggestions.get(item.id, 0.0) > SATISFIED_THRESHOLD
    ]
    lines.append(f"Keep {format_currency(result.total_pocket_money, currency)} for Daily Spending")
    return lines


def summarize(
    items: list[FundingItem],
    result: AllocationResult,
    spending_allowance: float,
    currency: str = DEFAULT_CURRENCY,
) -> AllocationSummary:
    """Collect the totals, groups and checklist for one allocation."""
    return AllocationSummary(
        base_allowance=round_currency(spending_allowance),
        income_surplus=round_currency(result.final_surplus),
        total_pocket_money=round_currency(result.total_pocket_money),
        shortfall=round_currency(result.shortfall),
        has_shortfall=result.shortfall > 0,
        total_suggested=round_currency(sum(result.suggestions.values())),
        groups=group_by_category(items, result),
        checklist=build_checklist(items, result, currency),
    )
