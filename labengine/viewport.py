"""Editor viewports laid out in a quad arrangement."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .geometry import Rect


class ViewScreenLocation(Enum):
    """Quadrant of the window a viewport occupies."""

    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()


@dataclass
class ViewportArea:
    """The screen rectangle and depth range a viewport renders into."""

    top_left_x: float = 0.0
    top_left_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    min_depth: float = 0.0
    max_depth: float = 1.0


@dataclass
class Viewport:
    """A viewport tied to one quadrant of the window."""

    location: Optional[ViewScreenLocation] = None
    area: ViewportArea = field(default_factory=ViewportArea)

    def resize_to_swapchain(self, width: float, height: float) -> None:
        """Fill this viewport's quadrant of a back buffer of the given size."""
        half_width = float(width) * 0.5
        half_height = float(height) * 0.5
        origins = {
            ViewScreenLocation.TOP_LEFT: (0.0, 0.0),
            ViewScreenLocation.TOP_RIGHT: (half_width, 0.0),
            ViewScreenLocation.BOTTOM_LEFT: (0.0, half_height),
            ViewScreenLocation.BOTTOM_RIGHT: (half_width, half_height),
        }
        origin = origins.get(self.location)
        if origin is not None:
            self.area.top_left_x, self.area.top_left_y = origin
            self.area.width = half_width
            self.area.height = half_height
        self.area.min_depth = 0.0
        self.area.max_depth = 1.0

    def resize_to_splitters(self, top: Rect, bottom: Rect, left: Rect, right: Rect) -> None:
        """Take the area from the splitter panes bounding this quadrant."""
        panes = {
            ViewScreenLocation.TOP_LEFT: (left, top),
            ViewScreenLocation.TOP_RIGHT: (right, top),
            ViewScreenLocation.BOTTOM_LEFT: (left, bottom),
            ViewScreenLocation.BOTTOM_RIGHT: (right, bottom),
        }
        pair = panes.get(self.location)
        if pair is None:
            return
        horizontal, vertical = pair
        self.area.top_left_x = horizontal.left_top_x
        self.area.top_left_y = vertical.left_top_y
        self.area.width = horizontal.width
        self.area.height = vertical.height

    def resize_to_rect(self, rect: Rect) -> None:
        """Cover exactly the given rectangle."""
        self.area.top_left_x = rect.left_top_x
        self.area.top_left_y = rect.left_top_y
        self.area.width = rect.width
        self.area.height = rect.height