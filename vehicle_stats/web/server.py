# vehicle_stats/web/server.py
from typing import Dict, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from vehicle_stats.config import settings
from vehicle_stats.schemas import ConditionAveragePrices, ConditionCounts, DailyNewSummary, Health, TotalStats
from vehicle_stats.services import aggregations
from vehicle_stats.store import DatasetStore

RawRow = Dict[str, Optional[str]]

def positive_int(value: Optional[str], default: int) -> int:
    """Lenient query-string int: junk falls back to the default, < 1 clamps to 1."""
    if value is None:
        return default
    try:
        number = int(value.strip())
    except ValueError:
        return default
    return max(number, 1)

def create_app(store: DatasetStore) -> FastAPI:
    app = FastAPI(title="Vehicle Listing Stats")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return "Welcome to the CSV API"

    @app.get("/healthz", response_model=Health)
    async def healthz():
        return Health(loaded=store.is_loaded, listings=len(store), loaded_at=store.loaded_at)

    @app.get("/api/data", response_model=List[RawRow])
    async def list_all():
        return aggregations.all_rows(store.snapshot())

    @app.get("/api/data/brand/{brand}", response_model=List[RawRow])
    async def by_brand(brand: str):
        return aggregations.rows_by_brand(store.snapshot(), brand)

    @app.get("/api/data/product_type/{product_type}", response_model=List[RawRow])
    async def by_product_type(product_type: str):
        return aggregations.rows_by_product_type(store.snapshot(), product_type)

    @app.get("/api/data/avg-prices-by-date", response_model=List[DailyNewSummary])
    async def avg_prices_by_date(page: Optional[str] = None, limit: Optional[str] = None):
        return aggregations.new_condition_by_date(
            store.snapshot(),
            page=positive_int(page, settings.DEFAULT_PAGE),
            limit=positive_int(limit, settings.DEFAULT_PAGE_LIMIT),
        )

    @app.get("/api/data/total-stats", response_model=TotalStats)
    async def total_stats():
        return aggregations.total_stats(store.snapshot())

    @app.get("/api/data/condition/average-price/{condition}", response_model=ConditionAveragePrices)
    async def average_price_by_condition(condition: str):
        return aggregations.average_price_by_bucket(store.snapshot(), condition)

    @app.get("/api/data/condition/{condition}", response_model=ConditionCounts)
    async def count_by_condition(condition: str):
        return aggregations.count_by_bucket(store.snapshot(), condition)

    # a missing path segment filters on nothing and matches nothing
    @app.get("/api/data/brand", response_model=List[RawRow])
    @app.get("/api/data/product_type", response_model=List[RawRow])
    async def missing_filter_value():
        return []

    @app.get("/api/data/condition", response_model=ConditionCounts)
    async def missing_condition():
        return aggregations.count_by_bucket(store.snapshot(), None)

    return app
