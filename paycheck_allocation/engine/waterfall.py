"""Balanced waterfall allocation.

Distributes the disposable pool (income minus the spending allowance) in two
passes. The survival pass funds the weekly minimum of every high-priority
item; the growth pass then works every item toward its full monthly target.
Both passes use equal-share water-filling, so no item is left short while
another item of the same pass has already been topped up.
"""

import logging

from paycheck_allocation.engine._common import coerce_amount, water_fill
from paycheck_allocation.engine._types import AllocationResult, FundingItem

logger = logging.getLogger(__name__)


def _weekly_cap(item: FundingItem) -> float:
    return item.weekly_minimum


def _monthly_cap(item: FundingItem) -> float:
    return item.monthly_target


class WaterfallEngine:
    """Two-pass water-filling allocation engine.

    Stateless; a single instance can be reused for any number of calls.
    """

    def __call__(
        self,
        items: list[FundingItem],
        actual_income: float,
        spending_allowance: float,
    ) -> AllocationResult:
        """Allocate one paycheck across the funding items.

        Parameters
        ----------
        items : list[FundingItem]
            Normalized items with unique IDs.
        actual_income : float
            Income received this cycle.
        spending_allowance : float
            Amount reserved for daily spending before anything is allocated.

        Returns
        -------
        AllocationResult

        Raises
        ------
        ValueError
            If two items share an ID.
        """
        ids = [item.id for item in items]
        if len(set(ids)) != len(ids):
            raise ValueError("Funding item IDs must be unique within one allocation")

        actual_income = coerce_amount(actual_income)
        spending_allowance = coerce_amount(spending_allowance)
        start_pool = actual_income - spending_allowance
        if start_pool < 0:
            logger.warning(
                "Spending allowance exceeds income by %.2f; nothing allocated",
                -start_pool,
            )

        allocated = {item_id: 0.0 for item_id in ids}
        high = [item for item in items if item.priority == "high"]
        allocated, pool, survival_rounds = water_fill(start_pool, high, _weekly_cap, allocated)
        allocated, pool, growth_rounds = water_fill(pool, items, _monthly_cap, allocated)

        if start_pool >= 0:
            # float residue from the last round
            pool = max(pool, 0.0)

        final_surplus = max(pool, 0.0)
        shortfall = max(-pool, 0.0)

        logger.info(
            "Allocation complete: funded=%d of %d items, surplus=%.2f",
            sum(1 for amount in allocated.values() if amount > 0),
            len(items),
            final_surplus,
        )

        return AllocationResult(
            suggestions=allocated,
            final_surplus=final_surplus,
            shortfall=shortfall,
            total_pocket_money=spending_allowance + final_surplus,
            detail={
                "pool": start_pool,
                "survival_rounds": survival_rounds,
                "growth_rounds": growth_rounds,
            },
        )
