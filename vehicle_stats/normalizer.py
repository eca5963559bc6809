# vehicle_stats/normalizer.py
import logging
from datetime import datetime
from typing import Mapping, Optional

from vehicle_stats.models import Listing, REQUIRED_FIELDS
from vehicle_stats.utils.pricing import parse_price

logger = logging.getLogger(__name__)

class InvalidListingError(ValueError):
    pass

def parse_timestamp(value: str) -> datetime:
    # Offsets are kept as written; the calendar date is the wall-clock date.
    return datetime.fromisoformat(value.strip())

def normalize_condition(raw: str) -> str:
    return raw.lower()

def normalize_row(row: Mapping[str, Optional[str]]) -> Listing:
    missing = [f for f in REQUIRED_FIELDS if row.get(f) is None]
    if missing:
        raise InvalidListingError(f"missing fields: {', '.join(missing)}")

    try:
        listed_at = parse_timestamp(row["timestamp"])
    except ValueError as e:
        raise InvalidListingError(f"bad timestamp {row['timestamp']!r}") from e

    price = parse_price(row["price"])
    if price is None:
        logger.warning("Unparsable price %r; row kept without a price", row["price"])

    return Listing(
        brand=row["brand"],
        product_type=row["product_type"],
        condition=row["condition"],
        price_raw=row["price"],
        price=price,
        listed_at=listed_at,
        raw=dict(row),
    )
