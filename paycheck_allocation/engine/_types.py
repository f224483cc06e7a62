"""Type definitions for source records, funding items and the engine contract."""

import math
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, TypedDict

from paycheck_allocation.engine._common import WEEKS_PER_MONTH

Priority = Literal["high", "medium", "low"]
Category = Literal["fixed", "savings"]

PRIORITIES: tuple[str, ...] = ("high", "medium", "low")
CATEGORIES: tuple[str, ...] = ("fixed", "savings")


class ObligationRecord(TypedDict, total=False):
    """Fixed monthly obligation as read from the obligations collection.

    Parameters
    ----------
    id : int | str
        Source identifier.
    name : str
        Display label.
    amount : float
        Monthly bill amount.
    priority : str
        ``"high"``, ``"medium"`` or ``"low"``. Defaults to ``"high"``.
    """

    id: Any
    name: str
    amount: float
    priority: str


class GoalRecord(TypedDict, total=False):
    """Savings goal as read from the goals collection.

    Parameters
    ----------
    id : int | str
        Source identifier.
    name : str
        Display label.
    target_amount : float
        Total amount the goal is saving toward.
    current_amount : float
        Amount already saved.
    monthly_plan : float
        Planned monthly contribution, ``0`` when unset.
    priority : str
        ``"high"``, ``"medium"`` or ``"low"``. Defaults to ``"medium"``.
    account_id : int | None
        Linked account, not used by the engine.
    refresh_type : str
        ``"monthly"`` for goals reset every month, ``"none"`` otherwise.
    """

    id: Any
    name: str
    target_amount: float
    current_amount: float
    monthly_plan: float
    priority: str
    account_id: Any
    refresh_type: str


@dataclass(frozen=True)
class FundingItem:
    """A single obligation or goal competing for the paycheck.

    Parameters
    ----------
    id : str
        Identifier, unique within one allocation run (e.g. ``"goal-7"``).
    name : str
        Display label.
    monthly_target : float
        Full amount the item wants funded this cycle.
    priority : {"high", "medium", "low"}
        Only ``"high"`` items take part in the survival pass.
    category : {"fixed", "savings"}
        Presentation grouping only.
    """

    id: str
    name: str
    monthly_target: float
    priority: Priority
    category: Category

    def __post_init__(self) -> None:
        """Validate amount and enumerations."""
        if not math.isfinite(self.monthly_target) or self.monthly_target < 0:
            raise ValueError("monthly_target must be a finite non-negative number")
        if self.priority not in PRIORITIES:
            raise ValueError(f"priority must be one of {PRIORITIES}, got {self.priority!r}")
        if self.category not in CATEGORIES:
            raise ValueError(f"category must be one of {CATEGORIES}, got {self.category!r}")

    @property
    def weekly_minimum(self) -> float:
        """Portion of the monthly target attributable to one week."""
        return self.monthly_target / WEEKS_PER_MONTH


@dataclass
class AllocationResult:
    """Suggested split of one paycheck.

    Parameters
    ----------
    suggestions : dict[str, float]
        Amount suggested for each funding item, keyed by item ID.
    final_surplus : float
        Pool left after every item is satisfied.
    shortfall : float
        Amount by which the spending allowance exceeds income.
    total_pocket_money : float
        Spending allowance plus surplus.
    detail : dict[str, Any]
        Engine diagnostics, opaque to callers.
    """

    suggestions: dict[str, float]
    final_surplus: float
    shortfall: float
    total_pocket_money: float
    detail: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate that every reported amount is finite and non-negative."""
        totals = (self.final_surplus, self.shortfall, self.total_pocket_money)
        if not all(math.isfinite(amount) for amount in (*self.suggestions.values(), *totals)):
            raise ValueError("allocation amounts must be finite")
        if any(amount < 0 for amount in self.suggestions.values()):
            raise ValueError("suggestions must be non-negative")
        if self.final_surplus < 0 or self.shortfall < 0:
            raise ValueError("final_surplus and shortfall must be non-negative")


class AllocationEngine(Protocol):
    """Protocol for paycheck allocation engines.

    Implementations receive normalized funding items together with the income
    and spending allowance, and return an :class:`AllocationResult`.
    """

    def __call__(
        self,
        items: list[FundingItem],
        actual_income: float,
        spending_allowance: float,
    ) -> AllocationResult: ...
