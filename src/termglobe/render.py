"""Frame content: status line text and the painted map canvas."""

from typing import Iterable, List, Tuple

from .canvas import BrailleCanvas
from .state import AppState

FETCHING = "Fetching location..."
MARKER = "●"
GRID_DOT = "·"
LABEL_OFFSET = 5.0
GRID_STEP = 30

X_BOUNDS = (-180.0, 180.0)
Y_BOUNDS = (-90.0, 90.0)


def status_text(state: AppState) -> str:
    if state.location is None:
        return FETCHING
    return state.location.describe()


def grid_points() -> List[Tuple[float, float]]:
    """Reference dots every 30 degrees, both ends inclusive."""
    return [
        (float(lon), float(lat))
        for lat in range(-90, 91, GRID_STEP)
        for lon in range(-180, 181, GRID_STEP)
    ]


def paint_globe(
    canvas: BrailleCanvas,
    state: AppState,
    outline: Iterable[Tuple[float, float]] = (),
) -> BrailleCanvas:
    """
    Draw outline, then the location marker and label, then the grid.

    The grid goes last, so a grid dot can land on top of the marker.
    """
    canvas.points(outline)

    location = state.location
    if location is not None:
        x, y = location.longitude, location.latitude
        canvas.print(x, y, MARKER)
        canvas.print(x + LABEL_OFFSET, y + LABEL_OFFSET, location.city)

    for lon, lat in grid_points():
        canvas.print(lon, lat, GRID_DOT)

    return canvas


def render_globe(
    width: int,
    height: int,
    state: AppState,
    outline: Iterable[Tuple[float, float]] = (),
) -> BrailleCanvas:
    canvas = BrailleCanvas(width, height, x_bounds=X_BOUNDS, y_bounds=Y_BOUNDS)
    return paint_globe(canvas, state, outline)
