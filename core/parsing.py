import math
from typing import Any, Optional


def to_float(x: Any) -> Optional[float]:
    """Lenient numeric read of a form value; None for blanks, text, NaN and bools."""
    if x is None or isinstance(x, bool):
        return None
    try:
        v = float(str(x).strip().replace(",", ".")) if isinstance(x, str) else float(x)
    except (TypeError, ValueError):
        return None
    if math.isnan(v) or math.isinf(v):
        return None
    return v


def to_int(x: Any) -> Optional[int]:
    v = to_float(x)
    return None if v is None else int(v)
