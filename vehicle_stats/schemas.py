# vehicle_stats/schemas.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ConditionCounts(ApiModel):
    label: List[str] = []
    val: List[int] = []

class ConditionAveragePrices(ApiModel):
    label: List[str] = []
    avg_price: List[float] = []

class DailyNewSummary(ApiModel):
    date: str
    new_avg_price: float = 0
    new_inventory_count: int = 0

class TotalStats(ApiModel):
    new_count: int = 0
    used_count: int = 0
    cpo_count: int = 0
    new_msrp: float = 0
    used_msrp: float = 0
    cpo_msrp: float = 0

class Health(ApiModel):
    ok: bool = True
    loaded: bool
    listings: int
    loaded_at: Optional[datetime] = None
