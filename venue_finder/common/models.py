"""Dataclasses shared between the catalog loaders and the query engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class VenueRecord:
    """A venue with a location and daily opening hours on a [0, 24) clock."""

    id: int
    name: str
    latitude: float
    longitude: float
    open_hour: float
    close_hour: float

    def is_open(self, hour: float) -> bool:
        """Return True when the venue is open at ``hour``.

        Equal open and close hours mean the venue never closes. A close hour
        below the open hour means the venue closes after midnight, so it is
        only closed strictly between closing and the next opening.
        """

        if self.open_hour == self.close_hour:
            return True
        if self.open_hour <= hour <= self.close_hour:
            return True
        if self.close_hour < self.open_hour:
            return not (self.close_hour < hour < self.open_hour)
        return False


@dataclass(frozen=True)
class RatingRecord:
    venue_id: int
    rating: float


@dataclass(frozen=True)
class ResultRecord:
    """One row of a ``QueryEngine.find`` response."""

    rating: Optional[float]
    id: int
    distance: float
    name: str
    open: float
    close: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
