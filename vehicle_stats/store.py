# vehicle_stats/store.py
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from vehicle_stats.models import Listing
from vehicle_stats.services.ingest import DatasetLoadError, load_listings

logger = logging.getLogger(__name__)

class DatasetStore:
    """Holds the listings table in memory.

    The table is an immutable tuple replaced in a single assignment, so a
    request that took a snapshot keeps a consistent view while a reload
    runs. Until the first load succeeds the table is empty.
    """

    def __init__(self, source: Optional[Union[str, Path]] = None):
        self.source = source
        self._listings: Tuple[Listing, ...] = ()
        self._loaded_at: Optional[datetime] = None
        self._load_lock = threading.Lock()

    def snapshot(self) -> Tuple[Listing, ...]:
        return self._listings

    def __len__(self) -> int:
        return len(self._listings)

    @property
    def is_loaded(self) -> bool:
        return self._loaded_at is not None

    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._loaded_at

    def replace(self, listings: Iterable[Listing]) -> None:
        table = tuple(listings)
        self._listings = table
        self._loaded_at = datetime.now(timezone.utc)

    def load(self, source: Optional[Union[str, Path]] = None) -> int:
        """Read the CSV and swap it in; on failure the current table is kept."""
        path = source if source is not None else self.source
        if path is None:
            raise ValueError("no dataset source configured")

        with self._load_lock:
            try:
                listings = load_listings(path)
            except DatasetLoadError:
                logger.exception("Error reading CSV file %s; keeping %d listings", path, len(self._listings))
                return len(self._listings)
            self.replace(listings)
            if source is not None:
                self.source = source
            logger.info("CSV file successfully processed")
            return len(self._listings)

    def reload(self) -> int:
        return self.load()
