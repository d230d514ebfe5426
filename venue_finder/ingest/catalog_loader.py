"""Load venue and rating files into in-memory records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from venue_finder.common.errors import CatalogError
from venue_finder.common.models import RatingRecord, VenueRecord

logger = logging.getLogger(__name__)

VENUE_COLUMNS = ("id", "name", "latitude", "longitude", "open_hour", "close_hour")
RATING_COLUMNS = ("venue_id", "rating")


class CatalogLoader:
    """Reads CSV or JSON-lines dumps of venues and ratings."""

    def __init__(self, venues_path: str, ratings_path: str) -> None:
        self.venues_path = venues_path
        self.ratings_path = ratings_path

    def load_venues(self) -> List[VenueRecord]:
        """Return venues with coordinates and hours, rejecting duplicate ids."""

        df = self._read(self.venues_path, VENUE_COLUMNS)
        cleaned = (
            df.loc[:, list(VENUE_COLUMNS)]
            .dropna(subset=list(VENUE_COLUMNS))
            .astype(
                {
                    "id": "int64",
                    "name": "str",
                    "latitude": "float64",
                    "longitude": "float64",
                    "open_hour": "float64",
                    "close_hour": "float64",
                }
            )
        )
        duplicated = cleaned.loc[cleaned["id"].duplicated(), "id"]
        if not duplicated.empty:
            raise CatalogError(
                f"Duplicate venue ids in {self.venues_path}: {sorted(set(duplicated.tolist()))}"
            )
        venues = [
            VenueRecord(
                id=int(row.id),
                name=row.name,
                latitude=float(row.latitude),
                longitude=float(row.longitude),
                open_hour=float(row.open_hour),
                close_hour=float(row.close_hour),
            )
            for row in cleaned.itertuples(index=False)
        ]
        _log_dropped(self.venues_path, len(df), len(venues))
        return venues

    def load_ratings(self) -> List[RatingRecord]:
        df = self._read(self.ratings_path, RATING_COLUMNS)
        cleaned = (
            df.loc[:, list(RATING_COLUMNS)]
            .dropna(subset=list(RATING_COLUMNS))
            .astype({"venue_id": "int64", "rating": "float64"})
        )
        ratings = [
            RatingRecord(venue_id=int(row.venue_id), rating=float(row.rating))
            for row in cleaned.itertuples(index=False)
        ]
        _log_dropped(self.ratings_path, len(df), len(ratings))
        return ratings

    @staticmethod
    def _read(path: str, required: Sequence[str]) -> pd.DataFrame:
        suffix = Path(path).suffix.lower()
        if suffix == ".csv":
            df = pd.read_csv(path)
        elif suffix in (".json", ".jsonl"):
            df = pd.read_json(path, lines=True)
        else:
            raise CatalogError(f"Unsupported catalog format for {path}; expected .csv, .json or .jsonl.")

        missing = [column for column in required if column not in df.columns]
        if missing:
            raise CatalogError(f"{path} is missing required columns: {', '.join(missing)}")
        return df


def _log_dropped(path: str, total: int, kept: int) -> None:
    if kept < total:
        logger.warning("Dropped %d incomplete rows from %s", total - kept, path)
