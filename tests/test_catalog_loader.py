import json

import pytest

from venue_finder.common.errors import CatalogError
from venue_finder.common.models import RatingRecord, VenueRecord
from venue_finder.ingest.catalog_loader import CatalogLoader
from venue_finder.query.engine import QueryEngine


def _write_csv(path, header, rows):
    lines = [",".join(header)] + [",".join(str(value) for value in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_loads_csv_catalog(tmp_path):
    venues_path = tmp_path / "venues.csv"
    ratings_path = tmp_path / "ratings.csv"
    _write_csv(
        venues_path,
        ["id", "name", "latitude", "longitude", "open_hour", "close_hour"],
        [
            [2, "Fatburger", 34.0466919, -118.2602324, 10, 2],
            [5, "Chipotle Mexican Grill", 34.0466919, -118.2602324, 10.5, 22],
            [9, "Raymond's", "", -118.3402324, 10, 19],
        ],
    )
    _write_csv(ratings_path, ["venue_id", "rating"], [[2, 4], [5, 3]])

    loader = CatalogLoader(str(venues_path), str(ratings_path))
    venues = loader.load_venues()
    ratings = loader.load_ratings()

    assert venues == [
        VenueRecord(2, "Fatburger", 34.0466919, -118.2602324, 10.0, 2.0),
        VenueRecord(5, "Chipotle Mexican Grill", 34.0466919, -118.2602324, 10.5, 22.0),
    ]
    assert ratings == [RatingRecord(2, 4.0), RatingRecord(5, 3.0)]

    engine = QueryEngine(venues, ratings)
    assert [result.id for result in engine.find(34.0, -118.3, 9, dining_hour=1)] == [2]


def test_loads_json_lines(tmp_path):
    venues_path = tmp_path / "venues.jsonl"
    ratings_path = tmp_path / "ratings.jsonl"
    venues_path.write_text(
        json.dumps({"id": 1, "name": "Denny's", "latitude": 34.04, "longitude": -118.26, "open_hour": 7, "close_hour": 7})
        + "\n",
        encoding="utf-8",
    )
    ratings_path.write_text(json.dumps({"venue_id": 1, "rating": 2}) + "\n", encoding="utf-8")

    loader = CatalogLoader(str(venues_path), str(ratings_path))

    assert loader.load_venues()[0].name == "Denny's"
    assert loader.load_ratings() == [RatingRecord(1, 2.0)]


def test_duplicate_venue_ids_are_rejected(tmp_path):
    venues_path = tmp_path / "venues.csv"
    _write_csv(
        venues_path,
        ["id", "name", "latitude", "longitude", "open_hour", "close_hour"],
        [[1, "A", 34.0, -118.0, 7, 23], [1, "B", 34.1, -118.1, 8, 22]],
    )

    with pytest.raises(CatalogError, match="Duplicate venue ids"):
        CatalogLoader(str(venues_path), str(venues_path)).load_venues()


def test_missing_columns_are_reported(tmp_path):
    ratings_path = tmp_path / "ratings.csv"
    _write_csv(ratings_path, ["venue", "stars"], [[1, 5]])

    with pytest.raises(CatalogError, match="venue_id"):
        CatalogLoader(str(ratings_path), str(ratings_path)).load_ratings()


def test_unknown_format_is_rejected(tmp_path):
    path = tmp_path / "venues.parquet"
    path.write_bytes(b"")

    with pytest.raises(CatalogError, match="Unsupported"):
        CatalogLoader(str(path), str(path)).load_venues()
