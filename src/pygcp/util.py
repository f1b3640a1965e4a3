import math
from typing import Any, Callable, List, Optional, TypeVar

import numpy as np

T = TypeVar("T")


def from_str(x: Any) -> str:
    assert isinstance(x, str)
    return x


def from_bool(x: Any) -> bool:
    assert isinstance(x, bool)
    return x


def from_list(f: Callable[[Any], T], x: Any) -> List[T]:
    assert isinstance(x, list) or isinstance(x, tuple) or isinstance(x, np.ndarray)
    return [f(y) for y in x]


def from_none(x: Any) -> Any:
    assert x is None
    return x


def from_union(fs, x):
    for f in fs:
        try:
            return f(x)
        except Exception:
            pass
    assert False


def from_float(x: Any) -> float:
    assert isinstance(x, (float, int, np.floating, np.integer)) and not isinstance(  # type: ignore
        x, bool
    )
    return float(x)


def from_optional_float(x: Any) -> float:
    """Converts a number or None, which becomes NaN"""
    if x is None:
        return math.nan
    return from_float(x)


def to_float(x: Any) -> float:
    assert isinstance(x, (float, np.floating))
    return float(x)


def to_number(x: Any) -> int | float:
    """Integral floats are returned as int so they serialize without a fraction"""
    x = to_float(x)
    if math.isfinite(x) and x.is_integer():
        return int(x)
    return x


def to_real(x: Any) -> Optional[float]:
    """Returns the finite float value of a number or numeric string, None otherwise.

    Booleans are not numbers here, and strings are accepted only when they parse
    completely, e.g. " 12.5 " is numeric but "12abc" is not. Digit separators
    ("1_000") and non ASCII digits are not accepted either.
    """
    if isinstance(x, bool):
        return None
    if isinstance(x, str):
        if "_" in x or not x.isascii():
            return None
        try:
            value = float(x)
        except ValueError:
            return None
    elif isinstance(x, (int, float, np.integer, np.floating)):
        value = float(x)
    else:
        return None
    return value if math.isfinite(value) else None


def is_numeric(values: Any) -> bool:
    return all(to_real(v) is not None for v in values)


def is_between(value: float, min_value: float, max_value: float) -> bool:
    return min_value <= value <= max_value


def vector_from_list(
    x: Any,
    min_size: int = -1,
    max_size: int = -1,
    item: Callable[[Any], float] = from_float,
) -> np.ndarray:
    if max_size != -1 and len(x) > max_size:
        raise ValueError("Invalid array length")
    if min_size != -1 and len(x) < min_size:
        raise ValueError("Invalid array length")

    return np.array(from_list(item, x), dtype=np.float64)


def format_number(x: Any) -> str:
    """Formats a number in plain positional notation.

    Integral values have no fractional part, so 10.0 is written as "10" and
    12.5 as "12.5". Scientific notation is never used.
    """
    return np.format_float_positional(float(x), trim="-")


def format_fixed(x: Any, precision: int) -> str:
    return f"{float(x):.{precision}f}"
