"""Paycheck allocation engine.

Provides the funding item model, normalization of obligations and goals, the
``AllocationEngine`` protocol and its water-filling implementation.

Convenience function ``allocate`` wraps normalization + the waterfall engine
in a single call.
"""

from collections.abc import Callable, Iterable

from paycheck_allocation.engine._common import (
    PROGRESS_THRESHOLD,
    SATISFIED_THRESHOLD,
    WEEKS_PER_MONTH,
    coerce_amount,
    water_fill,
)
from paycheck_allocation.engine._types import (
    AllocationEngine,
    AllocationResult,
    FundingItem,
    GoalRecord,
    ObligationRecord,
)
from paycheck_allocation.engine.items import (
    coerce_priority,
    goal_category,
    normalize,
    planned_or_full_target,
    planned_or_remaining,
)
from paycheck_allocation.engine.waterfall import WaterfallEngine

__all__ = [
    "AllocationEngine",
    "AllocationResult",
    "FundingItem",
    "GoalRecord",
    "ObligationRecord",
    "PROGRESS_THRESHOLD",
    "SATISFIED_THRESHOLD",
    "WEEKS_PER_MONTH",
    "WaterfallEngine",
    "allocate",
    "coerce_amount",
    "coerce_priority",
    "goal_category",
    "normalize",
    "planned_or_full_target",
    "planned_or_remaining",
    "water_fill",
]


def allocate(
    actual_income: float,
    spending_allowance: float,
    obligations: Iterable[ObligationRecord] = (),
    goals: Iterable[GoalRecord] = (),
    goal_target_func: Callable[[GoalRecord], float] = planned_or_remaining,
) -> AllocationResult:
    """Normalize obligations and goals and split one paycheck across them.

    Parameters
    ----------
    actual_income : float
        Income received this cycle.
    spending_allowance : float
        Amount reserved for daily spending.
    obligations : Iterable[ObligationRecord]
        Fixed bills with ``id``, ``name``, ``amount``, ``priority``.
    goals : Iterable[GoalRecord]
        Savings goals with ``id``, ``name``, ``target_amount``,
        ``current_amount``, ``monthly_plan``, ``priority``.
    goal_target_func : Callable[[GoalRecord], float], optional
        Derives a goal's monthly target. Default: plan if set, else remaining.

    Returns
    -------
    AllocationResult
    """
    items = normalize(obligations, goals, goal_target_func)
    engine = WaterfallEngine()
    return engine(items, coerce_amount(actual_income), coerce_amount(spending_allowance))
