# catalog/utils/numbers.py
import math
from typing import Any


def is_number(value: Any) -> bool:
    """True for JSON numbers only: int/float, not bool, not NaN or infinity."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints of any size are finite, and too big for math.isfinite
    return isinstance(value, int) or math.isfinite(value)
