"""Normalization of obligations and goals into funding items.

Obligations and goals come from different collections with different field
shapes. This module turns both into :class:`FundingItem` so the engine only
ever sees one type.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from paycheck_allocation.engine._common import coerce_amount
from paycheck_allocation.engine._types import PRIORITIES, FundingItem, GoalRecord, ObligationRecord

logger = logging.getLogger(__name__)

OBLIGATION_DEFAULT_PRIORITY = "high"
GOAL_DEFAULT_PRIORITY = "medium"


def planned_or_remaining(goal: GoalRecord) -> float:
    """Monthly target of a goal: its plan if set, else what is left to save.

    Parameters
    ----------
    goal : GoalRecord
        Source goal record.

    Returns
    -------
    float
        ``monthly_plan`` when positive, otherwise
        ``max(0, target_amount - current_amount)``.
    """
    monthly_plan = coerce_amount(goal.get("monthly_plan"))
    if monthly_plan > 0:
        return monthly_plan
    remaining = coerce_amount(goal.get("target_amount")) - coerce_amount(goal.get("current_amount"))
    return max(0.0, remaining)


def planned_or_full_target(goal: GoalRecord) -> float:
    """Monthly target of a goal: the larger of its plan and its full target.

    Parameters
    ----------
    goal : GoalRecord
        Source goal record.

    Returns
    -------
    float
        ``max(monthly_plan, target_amount)``, never negative.
    """
    return max(0.0, coerce_amount(goal.get("monthly_plan")), coerce_amount(goal.get("target_amount")))


def coerce_priority(value: Any, default: str) -> str:
    """Return a recognized priority, falling back to ``default``.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in PRIORITIES:
            return candidate
    if value is not None:
        logger.debug("Unrecognized priority %r, using %s", value, default)
    return default


def goal_category(goal: GoalRecord, priority: str) -> str:
    """Return ``"fixed"`` for goals that behave like bills, else ``"savings"``.

    A goal behaves like a bill when it is refreshed monthly or carries high
    priority (loans, recurring set-asides).
    """
    refresh_type = goal.get("refresh_type")
    if isinstance(refresh_type, str) and refresh_type.strip().lower() == "monthly":
        return "fixed"
    if priority == "high":
        return "fixed"
    return "savings"


class _IdFactory:
    """Synthesizes item IDs prefixed by source kind."""

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def __call__(self, kind: str, source_id: Any, position: int) -> str:
        if source_id is None or source_id == "":
            item_id = f"{kind}-unsaved-{position}"
        else:
            item_id = f"{kind}-{source_id}"
        count = self._seen.get(item_id, 0) + 1
        self._seen[item_id] = count
        if count > 1:
            logger.debug("Duplicate source id %s, renaming occurrence %d", item_id, count)
            return f"{item_id}#{count}"
        return item_id


def normalize(
    obligations: Iterable[ObligationRecord] = (),
    goals: Iterable[GoalRecord] = (),
    goal_target_func: Callable[[GoalRecord], float] = planned_or_remaining,
) -> list[FundingItem]:
    """Convert obligations and goals to funding items.

    Does not mutate input. Never raises on malformed records: missing or
    non-numeric amounts count as zero and unknown priorities fall back to the
    default for their kind.

    Parameters
    ----------
    obligations : Iterable[ObligationRecord]
        Fixed bills; each becomes a ``"fixed"`` item whose monthly target is
        its ``amount``.
    goals : Iterable[GoalRecord]
        Savings goals. Goals refreshed monthly or marked high priority
        behave like bills and become ``"fixed"`` items; the rest are
        ``"savings"``.
    goal_target_func : Callable[[GoalRecord], float], optional
        Derives a goal's monthly target. Default: :func:`planned_or_remaining`.

    Returns
    -------
    list[FundingItem]
        Obligations first, then goals, each in input order.
    """
    make_id = _IdFactory()
    items: list[FundingItem] = []

    for position, obligation in enumerate(obligations):
        items.append(
            FundingItem(
                id=make_id("obligation", obligation.get("id"), position),
                name=str(obligation.get("name") or ""),
                monthly_target=max(0.0, coerce_amount(obligation.get("amount"))),
                priority=coerce_priority(obligation.get("priority"), OBLIGATION_DEFAULT_PRIORITY),
                category="fixed",
            )
        )

    for position, goal in enumerate(goals):
        priority = coerce_priority(goal.get("priority"), GOAL_DEFAULT_PRIORITY)
        items.append(
            FundingItem(
                id=make_id("goal", goal.get("id"), position),
                name=str(goal.get("name") or ""),
                monthly_target=max(0.0, coerce_amount(goal_target_func(goal))),
                priority=priority,
                category=goal_category(goal, priority),
            )
        )

    return items
