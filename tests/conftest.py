from __future__ import annotations

from typing import List, Union

import pytest

from termglobe.location import Location, LocationError
from termglobe.worldmap import load_outline


SAN_FRANCISCO = Location(
    latitude=37.7749,
    longitude=-122.4194,
    city="San Francisco",
    country="United States",
)


class FetcherStub:
    """Hands out queued results in order; the last one repeats."""

    def __init__(self, results: List[Union[Location, Exception]]) -> None:
        self._results = list(results)
        self.calls = 0

    def __call__(self) -> Location:
        self.calls += 1
        index = min(self.calls, len(self._results)) - 1
        result = self._results[index]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def san_francisco() -> Location:
    return SAN_FRANCISCO


@pytest.fixture
def offline() -> LocationError:
    return LocationError("network unreachable")


@pytest.fixture(autouse=True)
def clear_outline_cache():
    load_outline.cache_clear()
    yield
    load_outline.cache_clear()
