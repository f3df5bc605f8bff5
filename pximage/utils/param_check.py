"""Small parameter validation helpers.

Used by the configuration builders of both command-line tools. Messages
name the offending flag and value so they can be shown to users verbatim.
"""

from __future__ import annotations

from numbers import Integral
from typing import Sequence


def check_int_in_range(
    value: int,
    *,
    name: str,
    low: int | None = None,
    high: int | None = None,
) -> int:
    """Return ``value`` as int after checking ``low <= value < high``.

    Parameters
    ----------
    value:
        The integer to validate (bools are rejected).
    name:
        Flag or field name used in error messages.
    low / high:
        Optional bounds; ``low`` is inclusive, ``high`` exclusive.
    """

    if not isinstance(value, Integral) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    v = int(value)
    if low is not None and v < int(low):
        raise ValueError(f"{name} must be >= {int(low)}, got {v}")
    if high is not None and v >= int(high):
        raise ValueError(f"{name} must be < {int(high)}, got {v}")
    return v


def check_all_positive(values: Sequence[int], *, name: str) -> tuple[int, ...]:
    """Return ``values`` as a tuple of ints, rejecting empty input and values < 1."""

    out = tuple(int(v) for v in values)
    if not out:
        raise ValueError(f"{name} must contain at least one value")
    bad = [v for v in out if v < 1]
    if bad:
        raise ValueError(f"No nonpositive numbers are allowed in {name}, got {list(out)}")
    return out
