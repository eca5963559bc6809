from datetime import date

import pytest
from pydantic import ValidationError

from vehicle_stats.normalizer import InvalidListingError, normalize_condition, normalize_row, parse_timestamp
from conftest import make_row


def test_normalize_row_types_fields():
    listing = normalize_row(make_row("New", "32,500 USD", "2024-01-12T09:30:00", vin="ABC"))
    assert listing.condition == "New"
    assert listing.price == 32500.0
    assert listing.price_raw == "32,500 USD"
    assert listing.listed_on == date(2024, 1, 12)
    assert listing.bucket == "2024-01-08"
    assert listing.raw["vin"] == "ABC"


def test_timestamp_offset_keeps_written_date():
    assert parse_timestamp("2024-01-12T23:30:00-05:00").date() == date(2024, 1, 12)
    assert parse_timestamp("2024-01-12T00:10:00Z").date() == date(2024, 1, 12)
    assert parse_timestamp(" 2024-01-12 ").date() == date(2024, 1, 12)


def test_bad_timestamp_rejected():
    with pytest.raises(InvalidListingError):
        normalize_row(make_row(timestamp="yesterday"))


def test_missing_field_rejected():
    row = make_row()
    del row["condition"]
    with pytest.raises(InvalidListingError, match="condition"):
        normalize_row(row)


def test_malformed_price_kept_without_price():
    listing = normalize_row(make_row(price="call for price"))
    assert listing.price is None
    assert not listing.is_priced


def test_normalize_condition():
    assert normalize_condition("CPO") == "cpo"
    assert normalize_condition("Salvage") == "salvage"


def test_listing_is_immutable():
    listing = normalize_row(make_row())
    with pytest.raises(ValidationError):
        listing.brand = "Other"
