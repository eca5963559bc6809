# vehicle_stats/utils/pricing.py
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

CENTS = Decimal("0.01")
USD_SUFFIX = re.compile(r"\s*usd\s*$", re.IGNORECASE)

def parse_price(raw: str) -> Optional[float]:
    """'32,500 USD' -> 32500.0; None when the text is not a finite number."""
    text = USD_SUFFIX.sub("", raw).replace(",", "").strip()
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value

def round_price(value: float) -> float:
    # Decimal(float) is exact, so ties are decided on the stored binary value
    return float(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))

def average(prices: Iterable[float]) -> float:
    values = list(prices)
    if not values:
        return 0
    return round_price(sum(values) / len(values))
