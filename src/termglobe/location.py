"""
IP geolocation lookup.

One GET against an IP-geolocation JSON API, decoded into a Location.
No retry and no caching: a failed lookup raises LocationError and the
caller decides what to keep.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://ip-api.com/json/"
DEFAULT_TIMEOUT = 10.0
UNKNOWN = "Unknown"


class LocationError(Exception):
    """Raised when the location lookup fails for any reason."""


# =============================================================================
# DATA MODEL
# =============================================================================

@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    city: str = UNKNOWN
    country: str = UNKNOWN

    def describe(self) -> str:
        """Status line text for this location."""
        return (
            f"Location: {self.city}, {self.country} | "
            f"Lat: {self.latitude:.4f}°, Lon: {self.longitude:.4f}°"
        )


@dataclass(frozen=True)
class LocationResponse:
    """Wire shape of the geolocation API body. Extra fields are ignored."""

    lat: float
    lon: float
    city: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> "LocationResponse":
        if not isinstance(data, dict):
            raise LocationError(f"expected a JSON object, got {type(data).__name__}")

        try:
            lat = _number(data, "lat")
            lon = _number(data, "lon")
        except KeyError as exc:
            raise LocationError(f"missing field {exc.args[0]!r}") from exc

        return cls(
            lat=lat,
            lon=lon,
            city=_text(data, "city"),
            country=_text(data, "country"),
        )

    def to_location(self) -> Location:
        return Location(
            latitude=self.lat,
            longitude=self.lon,
            city=self.city if self.city is not None else UNKNOWN,
            country=self.country if self.country is not None else UNKNOWN,
        )


def _number(data: Dict[str, Any], key: str) -> float:
    value = data[key]
    # bool is an int subclass; true/false is not a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LocationError(f"field {key!r} is not a number: {value!r}")
    return float(value)


def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise LocationError(f"field {key!r} is not a string: {value!r}")
    return value


# =============================================================================
# FETCH
# =============================================================================

def fetch_location(
    session: Optional[requests.Session] = None,
    url: str = DEFAULT_ENDPOINT,
    timeout: float = DEFAULT_TIMEOUT,
) -> Location:
    """
    Look up the caller's location from its public IP.

    Single attempt. Network errors, HTTP error statuses, undecodable bodies
    and bodies without lat/lon all raise LocationError.
    """
    http = session or requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise LocationError(f"request to {url} failed: {exc}") from exc

    try:
        data = response.json()
    except ValueError as exc:
        raise LocationError(f"invalid JSON from {url}: {exc}") from exc

    location = LocationResponse.from_json(data).to_location()
    logger.debug("Located at %s, %s (%s, %s)",
                 location.latitude, location.longitude, location.city, location.country)
    return location
