"""In-memory radius, opening-hour and rating queries over a venue catalog."""

from __future__ import annotations

import bisect
import logging
import math
from numbers import Real
from typing import Dict, Iterable, List, Optional

from venue_finder.common.errors import InvalidQueryError
from venue_finder.common.geo import distance_km
from venue_finder.common.models import RatingRecord, ResultRecord, VenueRecord

logger = logging.getLogger(__name__)


class QueryEngine:
    """Answers ``find`` queries over a static set of venues and ratings."""

    def __init__(
        self,
        venues: Iterable[VenueRecord] = (),
        ratings: Iterable[RatingRecord] = (),
    ) -> None:
        self.venues: List[VenueRecord] = sorted(venues, key=lambda venue: venue.id)
        self.ratings: List[RatingRecord] = sorted(ratings, key=lambda rating: rating.venue_id)
        self._venue_ids = [venue.id for venue in self.venues]

        # First entry per venue in stored order wins when venue ids repeat.
        self._rating_by_venue: Dict[int, float] = {}
        for rating in self.ratings:
            self._rating_by_venue.setdefault(rating.venue_id, rating.rating)

        logger.debug("Loaded %d venues and %d ratings", len(self.venues), len(self.ratings))

    @staticmethod
    def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        return distance_km(lat1, lon1, lat2, lon2)

    @staticmethod
    def is_open(venue: VenueRecord, hour: float) -> bool:
        return venue.is_open(hour)

    def find_by_id(self, venue_id: int) -> Optional[VenueRecord]:
        """Binary search the id-sorted venues. Returns None when absent."""

        index = bisect.bisect_left(self._venue_ids, venue_id)
        if index < len(self._venue_ids) and self._venue_ids[index] == venue_id:
            return self.venues[index]
        return None

    def rating_of(self, venue_id: int) -> Optional[float]:
        return self._rating_by_venue.get(venue_id)

    def find(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
        dining_hour: Optional[float] = None,
        sort_by_rating: bool = False,
    ) -> List[ResultRecord]:
        """Return venues closer than ``radius_km`` to the given point.

        latitude, longitude: query point in degrees.
        radius_km: exclusive radius in kilometres.
        dining_hour: when set, only venues open at this hour are kept. ``0``
            filters on midnight; ``None`` disables the filter.
        sort_by_rating: order the matches highest rated first, unrated last.
            Equally rated venues are ordered nearest first, then by
            descending id.
        """

        _require_number("latitude", latitude)
        _require_number("longitude", longitude)
        _require_number("radius_km", radius_km)
        if radius_km < 0:
            raise InvalidQueryError(f"radius_km must not be negative, got {radius_km}.")
        if dining_hour is not None:
            _require_number("dining_hour", dining_hour)
            if not 0 <= dining_hour < 24:
                raise InvalidQueryError(f"dining_hour must be within [0, 24), got {dining_hour}.")

        logger.info(
            "Venues %s km from %s, %s, open at %s. Rating sort: %s.",
            radius_km,
            latitude,
            longitude,
            dining_hour,
            sort_by_rating,
        )

        matches: List[VenueRecord] = []
        for venue in self.venues:
            if self.distance(latitude, longitude, venue.latitude, venue.longitude) >= radius_km:
                continue
            if dining_hour is not None and not venue.is_open(dining_hour):
                continue
            matches.append(venue)

        logger.debug("Matched %d of %d venues", len(matches), len(self.venues))
        results = [self._project(venue, latitude, longitude) for venue in matches]
        if sort_by_rating:
            results.sort(key=_rating_sort_key)
        return results

    def _project(self, venue: VenueRecord, latitude: float, longitude: float) -> ResultRecord:
        return ResultRecord(
            rating=self.rating_of(venue.id),
            id=venue.id,
            distance=self.distance(latitude, longitude, venue.latitude, venue.longitude),
            name=venue.name,
            open=venue.open_hour,
            close=venue.close_hour,
        )


def _rating_sort_key(result: ResultRecord):
    # Rating descending with unrated last, then nearest first, then higher id first.
    if result.rating is None:
        return (1, 0, result.distance, -result.id)
    return (0, -result.rating, result.distance, -result.id)


def _require_number(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidQueryError(f"{name} must be a finite number, got {value!r}.")
