"""Shared constants and helpers for allocation engines.

Contains the weekly/monthly conversion factor, the convergence thresholds of
the water-filling loops, and numeric coercion of untrusted source fields.
"""

import math
from collections.abc import Callable, Sequence
from typing import Any

# Average number of weeks per month.
WEEKS_PER_MONTH = 4.33

# Remaining need at or below this is treated as satisfied.
SATISFIED_THRESHOLD = 0.5

# A round that moves less than this ends the loop.
PROGRESS_THRESHOLD = 0.1


def coerce_amount(value: Any) -> float:
    """Convert a source field to a finite float, defaulting to zero.

    Parameters
    ----------
    value : Any
        Raw field value. ``None``, non-numeric strings, booleans, ``NaN`` and
        infinities all become ``0.0``.

    Returns
    -------
    float
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def water_fill(
    pool: float,
    items: Sequence[Any],
    cap: Callable[[Any], float],
    allocated: dict[str, float],
) -> tuple[dict[str, float], float, int]:
    """Split ``pool`` across ``items`` in equal shares until caps are reached.

    Every round gives each still-active item ``pool / len(active)``, bounded
    by what it still needs. Items whose remaining need drops to
    ``SATISFIED_THRESHOLD`` or below leave the active set, so the rest of the
    pool flows to the others on the next round. Does not mutate ``allocated``.

    Parameters
    ----------
    pool : float
        Money available to distribute.
    items : Sequence
        Candidate items, each with an ``id`` attribute.
    cap : Callable
        Maps an item to the total it may receive in this pass.
    allocated : dict[str, float]
        Amounts already given to each item in earlier passes.

    Returns
    -------
    tuple[dict[str, float], float, int]
        ``(allocated, pool, rounds)`` after the pass.
    """
    allocated = dict(allocated)
    active = [item for item in items if cap(item) - allocated[item.id] > SATISFIED_THRESHOLD]
    rounds = 0
    while pool > SATISFIED_THRESHOLD and active:
        share = pool / len(active)
        consumed = 0.0
        for item in active:
            give = min(share, cap(item) - allocated[item.id])
            allocated[item.id] += give
            consumed += give
        pool -= consumed
        rounds += 1
        active = [item for item in active if cap(item) - allocated[item.id] > SATISFIED_THRESHOLD]
        if consumed < PROGRESS_THRESHOLD:
            break
    return allocated, pool, rounds
