"""Number formatting shared by every line the demo prints."""

import math


def format_number(value: float) -> str:
    """Render a number the way the forecast output expects it.

    Integral values drop the fractional part (``20.0`` -> ``"20"``); anything
    else uses the shortest repr that parses back to the same float. Negative
    zero keeps its sign.
    """
    if isinstance(value, int):
        return str(value)
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer():
        return str(int(value))
    return repr(value)
