#!/usr/bin/env python3
"""
Location Resolver - Parse free-text locations into {city, state, country}.

Resolution policy, first hit wins:
1. Gazetteer: a known city key appears as whole words in the text
   ("Sector 62, Noida" -> Noida, Uttar Pradesh, India). Longer keys are
   tried first so "Navi Mumbai" is not resolved as "Mumbai".
2. Comma split: "city, state[, country]"; country defaults when absent.
3. Fallback: the whole (trimmed) string is the city, default country.

Empty input resolves to an empty ParsedLocation.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import re

from talent_match.matcher.tables import (
    DEFAULT_COUNTRY, GAZETTEER, METRO_INDEX, TRAVEL_HOURS
)

logger = logging.getLogger(__name__)

_NON_LETTER_RE = re.compile(r'[^a-z]')
_NON_WORD_RE = re.compile(r'[^a-z\s]')
_WHITESPACE_RE = re.compile(r'\s+')

_GAZETTEER_KEYS = tuple(sorted(GAZETTEER, key=len, reverse=True))


def normalize_location_name(name: Optional[str]) -> str:
    """Lowercase and strip everything that is not a letter ('Navi Mumbai' -> 'navimumbai')."""
    return _NON_LETTER_RE.sub('', (name or '').lower().strip())


@dataclass(frozen=True)
class ParsedLocation:
    """Structured location; fields are None when unknown."""
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    source: str = 'empty'

    @property
    def city_key(self) -> str:
        return normalize_location_name(self.city)

    @property
    def state_key(self) -> str:
        return normalize_location_name(self.state)

    @property
    def country_key(self) -> str:
        return normalize_location_name(self.country)

    @property
    def is_empty(self) -> bool:
        return not (self.city or self.state or self.country)


class LocationResolver:
    """Resolve free-text locations against the gazetteer with explicit fallbacks."""

    def __init__(self, default_country: str = DEFAULT_COUNTRY):
        self.default_country = default_country

    def parse(self, location: Optional[str]) -> ParsedLocation:
        if not location or not location.strip():
            return ParsedLocation()

        words = _WHITESPACE_RE.sub(' ', _NON_WORD_RE.sub(' ', location.lower())).strip()
        padded = f" {words} "
        for key in _GAZETTEER_KEYS:
            if f" {key} " in padded:
                city, state, country = GAZETTEER[key]
                return ParsedLocation(city=city, state=state, country=country, source='gazetteer')

        parts = [p.strip() for p in location.split(',') if p.strip()]
        if len(parts) >= 2:
            return ParsedLocation(
                city=parts[0],
                state=parts[1],
                country=parts[2] if len(parts) > 2 else self.default_country,
                source='comma-split'
            )

        logger.debug(f"Unknown location '{location}', treating as city in {self.default_country}")
        return ParsedLocation(city=location.strip(), country=self.default_country, source='fallback')

    @staticmethod
    def metro_area(location: ParsedLocation) -> Optional[str]:
        """Name of the metro cluster containing the city, if any."""
        areas = METRO_INDEX.get(location.city_key)
        if not areas:
            return None
        return sorted(areas)[0]

    @staticmethod
    def same_metro_area(loc_a: ParsedLocation, loc_b: ParsedLocation) -> bool:
        areas_a = METRO_INDEX.get(loc_a.city_key)
        areas_b = METRO_INDEX.get(loc_b.city_key)
        if not areas_a or not areas_b:
            return False
        return not areas_a.isdisjoint(areas_b)

    @staticmethod
    def travel_hours(loc_a: ParsedLocation, loc_b: ParsedLocation) -> Optional[float]:
        """Travel time between two cities from the fixed table, None if unlisted."""
        if not loc_a.city_key or not loc_b.city_key:
            return None
        return TRAVEL_HOURS.get(frozenset((loc_a.city_key, loc_b.city_key)))

    def locations_match(self, loc_a: ParsedLocation, loc_b: ParsedLocation) -> bool:
        """Same city or same metro area."""
        if loc_a.city_key and loc_a.city_key == loc_b.city_key:
            return True
        return self.same_metro_area(loc_a, loc_b)
