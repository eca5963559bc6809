# vehicle_stats/services/ingest.py
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from vehicle_stats.models import Listing, REQUIRED_FIELDS
from vehicle_stats.normalizer import InvalidListingError, normalize_row

logger = logging.getLogger(__name__)

Row = Dict[str, Optional[str]]

class DatasetLoadError(Exception):
    pass

def _skip_bad_line(fields: List[str]) -> None:
    logger.warning("Skipping malformed CSV line with %d fields: %r", len(fields), fields)
    return None

def read_rows(path: Union[str, Path]) -> List[Row]:
    try:
        # every cell stays a string; blank cells stay "" instead of NaN
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise DatasetLoadError(f"cannot read {path}: {e}") from e

    missing = [c for c in REQUIRED_FIELDS if c not in df.columns]
    if missing:
        raise DatasetLoadError(f"{path} is missing columns: {', '.join(missing)}")

    # short rows still come back as NaN
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")

def build_listings(rows: Iterable[Row]) -> Tuple[List[Listing], int]:
    listings: List[Listing] = []
    rejected = 0
    for i, row in enumerate(rows, start=1):
        try:
            listings.append(normalize_row(row))
        except InvalidListingError as e:
            rejected += 1
            logger.warning("Skipping row %d: %s", i, e)
    return listings, rejected

def load_listings(path: Union[str, Path]) -> List[Listing]:
    listings, rejected = build_listings(read_rows(path))
    unpriced = sum(1 for l in listings if not l.is_priced)
    logger.info(
        "Loaded %d listings from %s (%d rejected, %d without a price)",
        len(listings), path, rejected, unpriced,
    )
    return listings
