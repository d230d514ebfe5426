"""Bundled Los Angeles catalog used by the CLI when no files are configured."""

from __future__ import annotations

from typing import List

from venue_finder.common.models import RatingRecord, VenueRecord


def sample_venues() -> List[VenueRecord]:
    return [
        VenueRecord(3, "Big Wangs", 34.0566919, -118.2602324, 7, 23),
        VenueRecord(5, "Chipotle Mexican Grill", 34.0466919, -118.2602324, 10.5, 22),
        VenueRecord(0, "Domino's Pizza", 34.0077, -118.326, 7, 23),
        VenueRecord(1, "Denny's", 34.0466919, -118.2602324, 7, 7),
        VenueRecord(2, "Fatburger", 34.0466919, -118.2602324, 10, 2),
        VenueRecord(7, "Vim Thai Restaurant", 34.0808571, -118.3320727, 11, 22),
        VenueRecord(4, "The Original Pantry Cafe", 34.0466919, -118.2602324, 7, 7),
        VenueRecord(6, "Philz Coffee", 34.0466919, -118.2602324, 6, 21),
        VenueRecord(9, "Raymond's", 34.0966919, -118.3402324, 10, 19),
        VenueRecord(8, "JoJo Pops", 34.0966919, -118.3402324, 8, 23),
    ]


def sample_ratings() -> List[RatingRecord]:
    return [
        RatingRecord(6, 5),
        RatingRecord(2, 4),
        RatingRecord(0, 3),
        RatingRecord(4, 2),
        RatingRecord(1, 2),
        RatingRecord(5, 3),
        RatingRecord(3, 5),
        RatingRecord(7, 4),
        RatingRecord(8, 5),
        RatingRecord(9, 1),
    ]
