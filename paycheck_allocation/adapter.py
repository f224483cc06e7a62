"""ALLOCATE component: paycheck allocation for the budgeting app."""

import logging
from collections.abc import Callable
from dataclasses import asdict
from typing import Any, Protocol

from paycheck_allocation.engine import (
    AllocationEngine,
    GoalRecord,
    WaterfallEngine,
    coerce_amount,
    normalize,
    planned_or_remaining,
)
from paycheck_allocation.frequency import weekly_allowance
from paycheck_allocation.presenter import DEFAULT_CURRENCY, summarize

logger = logging.getLogger(__name__)

DEFAULT_SPENDING_ALLOWANCE = 2000.0


class PipelineComponent(Protocol):
    """Structural interface for pipeline stage components."""

    def execute(self, event: dict) -> dict:
        """Process event and return result."""
        ...


_FIELD_MAP_IN: dict[str, str] = {
    "targetAmount": "target_amount",
    "currentAmount": "current_amount",
    "monthlyPlan": "monthly_plan",
    "accountId": "account_id",
    "createdAt": "created_at",
    "isFlexible": "is_flexible",
    "refreshType": "refresh_type",
}


def _to_engine_format(record: dict[str, Any]) -> dict[str, Any]:
    """Map a client record to engine field names.

    Parameters
    ----------
    record : dict[str, Any]
        Record with client (camelCase) or engine (snake_case) field names.

    Returns
    -------
    dict[str, Any]
        Record with engine field names. Unknown keys are kept as is.
    """
    return {_FIELD_MAP_IN.get(key, key): value for key, value in record.items()}


class PaycheckAllocateComponent(PipelineComponent):
    """Suggest how to split a paycheck via a pluggable allocation engine.

    Handles field mapping and normalization of obligations and goals, then
    delegates the split to the configured engine and attaches a
    presentation summary.

    Parameters
    ----------
    engine : AllocationEngine, optional
        Allocation engine to use. Defaults to :class:`WaterfallEngine`.
    default_spending_allowance : float
        Allowance reserved when the event carries neither
        ``spending_allowance`` nor ``expenses``.
    goal_target_func : Callable[[GoalRecord], float], optional
        Derives a goal's monthly target. Default: plan if set, else remaining.
    currency : str
        Symbol used in the checklist text.
    """

    def __init__(
        self,
        engine: AllocationEngine | None = None,
        default_spending_allowance: float = DEFAULT_SPENDING_ALLOWANCE,
        goal_target_func: Callable[[GoalRecord], float] = planned_or_remaining,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._engine = engine or WaterfallEngine()
        self.default_spending_allowance = default_spending_allowance
        self._goal_target_func = goal_target_func
        self.currency = currency

    def _spending_allowance(self, event: dict) -> float:
        if event.get("spending_allowance") is not None:
            return coerce_amount(event["spending_allowance"])
        if event.get("expenses"):
            expenses = [_to_engine_format(e) for e in event["expenses"]]
            return weekly_allowance(expenses)
        return self.default_spending_allowance

    def execute(self, event: dict) -> dict:
        """Run allocation and return an ``AllocationResult`` dict with presentation.

        Parameters
        ----------
        event : dict
            Must contain ``actual_income``. May contain
            ``spending_allowance``, ``expenses`` (used to derive the
            allowance when it is not given), ``obligations`` and ``goals``.

        Returns
        -------
        dict
            Serialized ``AllocationResult`` with ``suggestions``,
            ``final_surplus``, ``shortfall``, ``total_pocket_money``,
            ``detail`` and ``presentation``.
        """
        actual_income = coerce_amount(event["actual_income"])
        spending_allowance = self._spending_allowance(event)

        obligations = [_to_engine_format(o) for o in event.get("obligations") or []]
        goals = [_to_engine_format(g) for g in event.get("goals") or []]
        items = normalize(obligations, goals, self._goal_target_func)

        result = self._engine(items, actual_income, spending_allowance)

        if result.shortfall > 0:
            logger.warning(
                "Paycheck short by %.2f; keeping allowance of %.2f",
                result.shortfall,
                spending_allowance,
            )
        else:
            logger.info(
                "Paycheck allocated: items=%d, pocket_money=%.2f",
                len(items),
                result.total_pocket_money,
            )

        output = asdict(result)
        output["presentation"] = asdict(summarize(items, result, spending_allowance, self.currency))
        return output
