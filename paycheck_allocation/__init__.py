"""Paycheck allocation for the budgeting app."""

from paycheck_allocation.adapter import PaycheckAllocateComponent
from paycheck_allocation.engine import AllocationResult, FundingItem, WaterfallEngine, allocate, normalize
from paycheck_allocation.presenter import build_checklist, group_by_category, summarize

__all__ = [
    "AllocationResult",
    "FundingItem",
    "PaycheckAllocateComponent",
    "WaterfallEngine",
    "allocate",
    "build_checklist",
    "group_by_category",
    "normalize",
    "summarize",
]
