# vehicle_stats/services/aggregations.py
"""Read-only queries over a listings snapshot.

Every function takes the full table and recomputes from it; nothing is
cached between calls. Conditions match exactly in the bucketed queries and
case-insensitively in the "new"-by-date and total-stats queries.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from vehicle_stats.models import Listing
from vehicle_stats.normalizer import normalize_condition
from vehicle_stats.schemas import ConditionAveragePrices, ConditionCounts, DailyNewSummary, TotalStats
from vehicle_stats.utils.pricing import average

TRACKED_CONDITIONS = ("new", "used", "cpo")

def all_rows(listings: Sequence[Listing]) -> List[dict]:
    return [l.raw for l in listings]

def rows_by_brand(listings: Sequence[Listing], brand: str) -> List[dict]:
    return [l.raw for l in listings if l.brand == brand]

def rows_by_product_type(listings: Sequence[Listing], product_type: str) -> List[dict]:
    return [l.raw for l in listings if l.product_type == product_type]

def _with_condition(listings: Sequence[Listing], condition: Optional[str]) -> List[Listing]:
    if condition is None:
        return []
    return [l for l in listings if l.condition == condition]

def count_by_bucket(listings: Sequence[Listing], condition: Optional[str]) -> ConditionCounts:
    counts: Dict[str, int] = defaultdict(int)
    for l in _with_condition(listings, condition):
        counts[l.bucket] += 1

    labels = sorted(counts)
    return ConditionCounts(label=labels, val=[counts[k] for k in labels])

def average_price_by_bucket(listings: Sequence[Listing], condition: Optional[str]) -> ConditionAveragePrices:
    prices: Dict[str, List[float]] = {}
    for l in _with_condition(listings, condition):
        bucket = prices.setdefault(l.bucket, [])
        if l.is_priced:
            bucket.append(l.price)

    labels = sorted(prices)
    return ConditionAveragePrices(label=labels, avg_price=[average(prices[k]) for k in labels])

def new_condition_by_date(listings: Sequence[Listing], page: int, limit: int) -> List[DailyNewSummary]:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be >= 1")
    # Pages walk the distinct dates of the whole table, not only the "new" rows.
    dates = sorted({l.listed_on.isoformat() for l in listings})
    start = (page - 1) * limit
    page_dates = dates[start:start + limit]
    if not page_dates:
        return []

    wanted = set(page_dates)
    counts: Dict[str, int] = defaultdict(int)
    prices: Dict[str, List[float]] = defaultdict(list)
    for l in listings:
        day = l.listed_on.isoformat()
        if day not in wanted or normalize_condition(l.condition) != "new":
            continue
        counts[day] += 1
        if l.is_priced:
            prices[day].append(l.price)

    return [
        DailyNewSummary(date=day, new_avg_price=average(prices[day]), new_inventory_count=counts[day])
        for day in page_dates
    ]

def total_stats(listings: Sequence[Listing]) -> TotalStats:
    counts = dict.fromkeys(TRACKED_CONDITIONS, 0)
    priced = dict.fromkeys(TRACKED_CONDITIONS, 0)
    sums = dict.fromkeys(TRACKED_CONDITIONS, 0.0)

    for l in listings:
        condition = normalize_condition(l.condition)
        if condition not in counts:
            continue
        counts[condition] += 1
        if l.is_priced:
            priced[condition] += 1
            sums[condition] += l.price

    # averages are left unrounded here, unlike the bucketed queries
    msrp = {c: (sums[c] / priced[c]) if priced[c] > 0 else 0 for c in TRACKED_CONDITIONS}
    return TotalStats(
        new_count=counts["new"],
        used_count=counts["used"],
        cpo_count=counts["cpo"],
        new_msrp=msrp["new"],
        used_msrp=msrp["used"],
        cpo_msrp=msrp["cpo"],
    )
