"""Configuration helpers for the venue finder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml


@dataclass(frozen=True)
class CatalogConfig:
    """Paths to venue/rating files. Unset paths select the bundled sample catalog."""

    venues_path: Optional[str] = None
    ratings_path: Optional[str] = None

    @property
    def uses_sample(self) -> bool:
        return not self.venues_path or not self.ratings_path


@dataclass(frozen=True)
class QueryConfig:
    """Defaults applied when the CLI omits a query option."""

    radius_km: float = 10.0
    sort_by_rating: bool = False


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """Aggregated configuration model."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config() -> AppConfig:
    return AppConfig()


def load_config(path: str | Path) -> AppConfig:
    """Parse a YAML config file into an AppConfig dataclass."""

    raw = _load_yaml(path)
    catalog_cfg = raw.get("catalog", {})
    query_cfg = raw.get("query", {})
    logging_cfg = raw.get("logging", {})

    catalog = CatalogConfig(
        venues_path=_optional_str(catalog_cfg.get("venues_path")),
        ratings_path=_optional_str(catalog_cfg.get("ratings_path")),
    )
    query = QueryConfig(
        radius_km=float(query_cfg.get("radius_km", 10.0)),
        sort_by_rating=bool(query_cfg.get("sort_by_rating", False)),
    )
    logging_settings = LoggingConfig(level=str(logging_cfg.get("level", "INFO")).upper())
    return AppConfig(catalog=catalog, query=query, logging=logging_settings)


def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value else None


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a top-level mapping.")
    return data
