"""
World outline from Natural Earth coastlines.

cartopy fetches and caches the shapefiles on first use; shapely flattens
the line geometries into plain (lon, lat) vertices for the canvas.
"""

import logging
from functools import lru_cache
from typing import Tuple

logger = logging.getLogger(__name__)

RESOLUTIONS = ("110m", "50m", "10m")
DEFAULT_RESOLUTION = "50m"

Outline = Tuple[Tuple[float, float], ...]


class WorldMapError(Exception):
    """Raised when the coastline data cannot be loaded."""


@lru_cache(maxsize=None)
def load_outline(resolution: str = DEFAULT_RESOLUTION) -> Outline:
    """All coastline vertices at the given Natural Earth scale."""
    if resolution not in RESOLUTIONS:
        raise WorldMapError(
            f"unknown resolution {resolution!r}, expected one of {', '.join(RESOLUTIONS)}"
        )

    try:
        import cartopy.feature as cfeature
        import shapely

        feature = cfeature.NaturalEarthFeature("physical", "coastline", resolution)
        coords = shapely.get_coordinates(list(feature.geometries()))
    except Exception as exc:  # shapefile readers raise their own error types
        raise WorldMapError(f"could not load {resolution} coastlines: {exc}") from exc

    outline = tuple((float(lon), float(lat)) for lon, lat in coords.tolist())
    logger.debug("Loaded %d coastline vertices at %s", len(outline), resolution)
    return outline
