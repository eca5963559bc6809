# vehicle_stats/models.py
from datetime import date, datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from vehicle_stats.utils.bucketing import bucket_key

REQUIRED_FIELDS = ("brand", "product_type", "condition", "price", "timestamp")

class Listing(BaseModel):
    """One CSV row, typed. ``raw`` is the row exactly as read."""

    model_config = ConfigDict(frozen=True)

    brand: str
    product_type: str
    condition: str
    price_raw: str
    price: Optional[float] = None
    listed_at: datetime
    raw: Dict[str, Optional[str]]

    @property
    def listed_on(self) -> date:
        return self.listed_at.date()

    @property
    def bucket(self) -> str:
        return bucket_key(self.listed_on)

    @property
    def is_priced(self) -> bool:
        return self.price is not None
