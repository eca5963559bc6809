import pytest
from fastapi.testclient import TestClient

from vehicle_stats.normalizer import normalize_row
from vehicle_stats.store import DatasetStore
from vehicle_stats.web.server import create_app


def make_row(condition="new", price="10,000 USD", timestamp="2024-01-01", brand="Ford", product_type="SUV", **extra):
    row = {
        "brand": brand,
        "product_type": product_type,
        "condition": condition,
        "price": price,
        "timestamp": timestamp,
    }
    row.update(extra)
    return row


SAMPLE_ROWS = [
    make_row("new", "10,000 USD", "2024-01-01", brand="Ford", product_type="SUV"),
    make_row("New", "20,000 USD", "2024-01-03", brand="Ford", product_type="Truck"),
    make_row("used", "8,500 USD", "2024-01-03", brand="Toyota", product_type="Sedan"),
    make_row("used", "9,500 USD", "2024-01-12", brand="Toyota", product_type="SUV"),
    make_row("cpo", "15,250 USD", "2024-01-12T09:30:00", brand="Honda", product_type="SUV"),
    make_row("new", "30,001 USD", "2024-01-15", brand="Honda", product_type="Sedan"),
    make_row("salvage", "1,000 USD", "2024-01-20", brand="Ford", product_type="SUV"),
]


@pytest.fixture
def listings():
    return [normalize_row(r) for r in SAMPLE_ROWS]


@pytest.fixture
def store(listings):
    s = DatasetStore()
    s.replace(listings)
    return s


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "data.csv"
    lines = ["brand,product_type,condition,price,timestamp,vin"]
    for i, r in enumerate(SAMPLE_ROWS):
        lines.append(f'{r["brand"]},{r["product_type"]},{r["condition"]},"{r["price"]}",{r["timestamp"]},VIN{i}')
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
