"""Command-line entry point for radius queries."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from venue_finder.common.config import AppConfig, default_config, load_config
from venue_finder.common.models import ResultRecord
from venue_finder.ingest.catalog_loader import CatalogLoader
from venue_finder.ingest.sample_catalog import sample_ratings, sample_venues
from venue_finder.query.engine import QueryEngine

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["rating", "id", "distance", "name", "open", "close"]


def build_engine(config: AppConfig) -> QueryEngine:
    if config.catalog.uses_sample:
        logger.info("No catalog files configured, using the bundled sample catalog.")
        return QueryEngine(sample_venues(), sample_ratings())

    loader = CatalogLoader(config.catalog.venues_path, config.catalog.ratings_path)
    return QueryEngine(loader.load_venues(), loader.load_ratings())


def format_results(results: List[ResultRecord]) -> str:
    if not results:
        return "No venues found."
    frame = pd.DataFrame([result.as_dict() for result in results], columns=RESULT_COLUMNS)
    frame["rating"] = pd.Series(
        [result.rating if result.rating is not None else "-" for result in results],
        dtype=object,
    )
    return frame.to_string(index=False)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Find venues near a coordinate.")
    parser.add_argument("--config", default="config/local.yaml", help="Path to YAML config.")
    parser.add_argument("--lat", type=float, required=True, help="Query latitude in degrees.")
    parser.add_argument("--lon", type=float, required=True, help="Query longitude in degrees.")
    parser.add_argument("--radius", type=float, default=None, help="Radius in kilometres.")
    parser.add_argument("--hour", type=float, default=None, help="Only venues open at this hour (0-24).")
    parser.add_argument(
        "--sort-by-rating",
        action="store_true",
        default=None,
        help="Order results highest rated first.",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config) if Path(args.config).exists() else default_config()
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    radius = args.radius if args.radius is not None else config.query.radius_km
    sort_by_rating = args.sort_by_rating if args.sort_by_rating is not None else config.query.sort_by_rating

    engine = build_engine(config)
    results = engine.find(args.lat, args.lon, radius, dining_hour=args.hour, sort_by_rating=sort_by_rating)
    print(format_results(results))


if __name__ == "__main__":
    main()
