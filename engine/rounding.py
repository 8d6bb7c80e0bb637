"""Currency rounding and form-input coercion"""
import math

from config.default_params import ROUNDING_UNIT, CURRENCY


def round_up_to_thousand(amount: float, unit: int = ROUNDING_UNIT) -> float:
    """Ceiling of amount to the next multiple of unit"""
    if amount <= 0:
        return 0.0
    return float(math.ceil(amount / unit) * unit)

def format_vnd(amount: float) -> str:
    """Display string with the amount rounded up to the nearest thousand"""
    return f"{round_up_to_thousand(amount):,.0f} {CURRENCY}"

def coerce_amount(value) -> float:
    """Form value to a non-negative amount; missing or unparsable input becomes 0"""
    if value is None or value == "":
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return max(0.0, amount)
