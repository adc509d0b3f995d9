"""Application state shared by the renderer and the event loop."""

import logging
import time
from typing import Callable, Optional

from .location import Location, LocationError

logger = logging.getLogger(__name__)

ROTATION_SPEED = 10.0  # degrees per second


class AppState:
    """
    Last known location plus the tick bookkeeping.

    `rotation` is advanced on every tick but nothing draws it yet.
    """

    def __init__(self, now: Optional[float] = None):
        self.location: Optional[Location] = None
        self.last_update: float = time.monotonic() if now is None else now
        self.rotation: float = 0.0

    def update(self, now: Optional[float] = None) -> None:
        if now is None:
            now = time.monotonic()
        elapsed = max(0.0, now - self.last_update)
        self.rotation += elapsed * ROTATION_SPEED
        self.last_update = now

    def refresh(self, fetcher: Callable[[], Location]) -> bool:
        """Replace the location with a fresh lookup. Keeps the old one on failure."""
        try:
            location = fetcher()
        except LocationError as exc:
            logger.debug("Location refresh failed: %s", exc)
            return False
        self.location = location
        return True
