"""
True Size Overlay - Map Adapter

Converts between screen pixels and geographic coordinates and performs map
panning. The gesture controller and the overlay canvas only talk to the map
through the MapAdapter interface; WebMercatorMapAdapter is the built-in
implementation used by the desktop app and the tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from constants import (
    DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM, MAX_MAP_ZOOM, MIN_MAP_ZOOM,
    TILE_SIZE, WEB_MERCATOR_MAX_LAT,
)
from utils.coordinate_transforms import (
    lnglat_to_world_pixels, screen_to_world_pixels,
    world_pixels_to_lnglat, world_pixels_to_screen,
)

logger = logging.getLogger(__name__)


class OutOfProjectionRangeError(ValueError):
    """Raised when a screen point has no geographic coordinate (outside the
    valid latitude range of the projection)."""


class MapAdapter(ABC):
    """Abstract map interface.

    Subclasses must implement:
    - screen_to_geo(): Screen pixel -> (lng, lat), or raise OutOfProjectionRangeError
    - geo_to_screen(): (lng, lat) -> screen pixel
    - pan_by(): Move the view by a pixel delta
    - set_default_panning_enabled(): Toggle the map's own drag-to-pan
    - viewport_size(): (width, height) in pixels
    """

    @abstractmethod
    def screen_to_geo(self, x: float, y: float) -> Tuple[float, float]:
        pass

    @abstractmethod
    def geo_to_screen(self, lng: float, lat: float) -> Tuple[float, float]:
        pass

    @abstractmethod
    def pan_by(self, dx: float, dy: float):
        pass

    @abstractmethod
    def set_default_panning_enabled(self, enabled: bool):
        pass

    @abstractmethod
    def viewport_size(self) -> Tuple[float, float]:
        pass


class WebMercatorMapAdapter(MapAdapter):
    """Web Mercator (256-px tile) viewport.

    State is the geographic point shown at the viewport center, an integer
    zoom level and the viewport size. Panning moves the center in world pixels
    so it stays exact at any zoom.
    """

    def __init__(self, width: float, height: float,
                 center: Tuple[float, float] = DEFAULT_MAP_CENTER,
                 zoom: int = DEFAULT_MAP_ZOOM, tile_size: int = TILE_SIZE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {(width, height)}")
        self.width = float(width)
        self.height = float(height)
        self.tile_size = tile_size
        self.zoom = max(MIN_MAP_ZOOM, min(MAX_MAP_ZOOM, int(zoom)))
        self.default_panning_enabled = True
        self._center_world = lnglat_to_world_pixels(center[0], center[1], self.zoom, tile_size)

    # ========================================
    # MapAdapter interface
    # ========================================

    def screen_to_geo(self, x, y):
        world_x, world_y = screen_to_world_pixels(x, y, self._center_world, self.viewport_size())
        lng, lat = world_pixels_to_lnglat(world_x, world_y, self.zoom, self.tile_size)
        if abs(lat) > WEB_MERCATOR_MAX_LAT:
            raise OutOfProjectionRangeError(
                f"Screen point ({x}, {y}) is outside the projection (lat {lat:.4f})"
            )
        return lng, lat

    def geo_to_screen(self, lng, lat):
        world_x, world_y = lnglat_to_world_pixels(lng, lat, self.zoom, self.tile_size)
        return world_pixels_to_screen(world_x, world_y, self._center_world, self.viewport_size())

    def pan_by(self, dx, dy):
        """Move the view so content shifts by (-dx, -dy) on screen."""
        self._center_world = (self._center_world[0] + dx, self._center_world[1] + dy)
        logger.debug(f"Panned by ({dx}, {dy})")

    def set_default_panning_enabled(self, enabled):
        self.default_panning_enabled = bool(enabled)

    def viewport_size(self):
        return self.width, self.height

    # ========================================
    # Viewport control
    # ========================================

    @property
    def center(self) -> Tuple[float, float]:
        """(lng, lat) at the viewport center"""
        return world_pixels_to_lnglat(self._center_world[0], self._center_world[1],
                                      self.zoom, self.tile_size)

    def set_center(self, lng: float, lat: float):
        self._center_world = lnglat_to_world_pixels(lng, lat, self.zoom, self.tile_size)

    def set_zoom(self, zoom: int):
        """Change zoom keeping the same geographic center (clamped to 2..18)."""
        lng, lat = self.center
        self.zoom = max(MIN_MAP_ZOOM, min(MAX_MAP_ZOOM, int(zoom)))
        self.set_center(lng, lat)

    def zoom_in(self):
        self.set_zoom(self.zoom + 1)

    def zoom_out(self):
        self.set_zoom(self.zoom - 1)

    def resize(self, width: float, height: float):
        if width <= 0 or height <= 0:
            return
        self.width = float(width)
        self.height = float(height)
