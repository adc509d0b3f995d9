#!/usr/bin/env python3
"""
TermGlobe - Where am I, on a terminal world map

FEATURES:
- Approximate location from an IP geolocation lookup
- Braille world map with a marker and city label
- Reference dots every 30 degrees of latitude/longitude

CONTROLS:
- r: Refresh location
- q / Escape: Quit
"""

import logging
from functools import partial
from typing import Callable, Optional

import requests
from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Static

from .config import GlobeConfig
from .location import Location, fetch_location
from .render import render_globe, status_text
from .state import AppState
from .worldmap import Outline, WorldMapError, load_outline

logger = logging.getLogger(__name__)

FOREGROUND = Style(color="white")


# =============================================================================
# UI COMPONENTS
# =============================================================================

class StatusWidget(Static):
    """One centered line: the current location, or a waiting message."""

    def __init__(self, state: AppState, **kwargs):
        super().__init__(**kwargs)
        self.state = state
        self.border_title = "GPS Globe"

    def render(self) -> Text:
        return Text(status_text(self.state), style=FOREGROUND, justify="center")


class GlobeWidget(Static):
    """
    World map canvas.

    x spans longitude -180..180 and y latitude -90..90 over whatever
    area the widget currently has.
    """

    def __init__(self, state: AppState, **kwargs):
        super().__init__(**kwargs)
        self.state = state
        self.outline: Outline = ()
        self.border_title = "Globe"

    def render(self) -> Text:
        size = self.content_size
        canvas = render_globe(size.width, size.height, self.state, self.outline)
        return canvas.to_text(FOREGROUND)


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class GlobeApp(App):
    """
    TermGlobe application.

    Lookups block the app while they run, both the one at startup and
    the manual refresh.
    """

    TITLE = "TermGlobe"

    CSS = """
    Screen {
        background: #000000;
    }

    #frame {
        margin: 1;
        height: 1fr;
    }

    #status {
        height: 3;
        border: solid white;
        border-title-color: white;
        color: white;
    }

    #globe {
        height: 1fr;
        border: solid white;
        border-title-color: white;
        color: white;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("r", "refresh_location", "Refresh"),
    ]

    def __init__(
        self,
        config: Optional[GlobeConfig] = None,
        fetcher: Optional[Callable[[], Location]] = None,
        outline_loader: Optional[Callable[[], Outline]] = None,
    ):
        super().__init__()
        self.config = config or GlobeConfig()
        if fetcher is None:
            fetcher = partial(
                fetch_location,
                session=requests.Session(),
                url=self.config.endpoint,
                timeout=self.config.timeout,
            )
        self.fetcher = fetcher
        self.outline_loader = outline_loader or partial(load_outline, self.config.resolution)
        self.state = AppState()

    def compose(self) -> ComposeResult:
        self.status_bar = StatusWidget(self.state, id="status")
        self.globe = GlobeWidget(self.state, id="globe")
        with Container(id="frame"):
            yield self.status_bar
            yield self.globe

    def on_mount(self) -> None:
        """Load the outline, do the first lookup, then start ticking."""
        try:
            self.globe.outline = self.outline_loader()
        except WorldMapError as exc:
            logger.warning("Drawing without a world outline: %s", exc)

        self.state.refresh(self.fetcher)
        self.set_interval(self.config.tick_rate, self.tick)
        self._refresh_display()

    def tick(self) -> None:
        self.state.update()
        self._refresh_display()

    def _refresh_display(self) -> None:
        self.status_bar.refresh()
        self.globe.refresh()

    # === ACTIONS ===

    def action_refresh_location(self) -> None:
        """Look the location up again. The old one stays if this fails."""
        self.state.refresh(self.fetcher)
        self._refresh_display()
