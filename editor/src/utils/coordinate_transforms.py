"""Coordinate transformation utilities for the map viewport.

Provides conversion between different coordinate systems:
- Geographic degrees (lng, lat)
- Web Mercator world pixels at a zoom level (origin top-left, Y-down)
- Widget screen pixels (origin top-left of the viewport, Y-down)
- Screen angles (Y-down) and geographic angles (Y-up)
"""

import math

from constants import TILE_SIZE, WEB_MERCATOR_MAX_LAT


def world_size(zoom, tile_size=TILE_SIZE):
	"""Edge length of the square Web Mercator world in pixels at a zoom level."""
	return tile_size * (2 ** zoom)


def lnglat_to_world_pixels(lng, lat, zoom, tile_size=TILE_SIZE):
	"""Convert geographic degrees to Web Mercator world pixels.

	Latitude is clamped to the Web Mercator limit (~85.0511) so the poles map
	to the top/bottom world edge instead of infinity.

	Args:
		lng: Longitude in degrees (not wrapped; 190 lies right of 180)
		lat: Latitude in degrees
		zoom: Map zoom level
		tile_size: Tile edge in pixels

	Returns:
		(world_x, world_y): Pixel position, Y-down
	"""
	scale = world_size(zoom, tile_size)
	lat = max(-WEB_MERCATOR_MAX_LAT, min(WEB_MERCATOR_MAX_LAT, lat))
	world_x = (lng + 180.0) / 360.0 * scale
	sin_lat = math.sin(math.radians(lat))
	world_y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * scale
	return world_x, world_y


def world_pixels_to_lnglat(world_x, world_y, zoom, tile_size=TILE_SIZE):
	"""Convert Web Mercator world pixels back to geographic degrees.

	No clamping: pixels above/below the world square return latitudes beyond
	the projection limit, which callers must reject.

	Returns:
		(lng, lat): Geographic degrees
	"""
	scale = world_size(zoom, tile_size)
	lng = world_x / scale * 360.0 - 180.0
	n = math.pi - 2.0 * math.pi * world_y / scale
	lat = math.degrees(math.atan(math.sinh(n)))
	return lng, lat


def screen_to_world_pixels(screen_x, screen_y, center_world, viewport_size):
	"""Convert viewport pixels to world pixels.

	Args:
		screen_x, screen_y: Position within the viewport (top-left origin)
		center_world: (world_x, world_y) shown at the viewport center
		viewport_size: (width, height) in pixels
	"""
	width, height = viewport_size
	return (
		center_world[0] - width / 2.0 + screen_x,
		center_world[1] - height / 2.0 + screen_y,
	)


def world_pixels_to_screen(world_x, world_y, center_world, viewport_size):
	"""Convert world pixels to viewport pixels (inverse of screen_to_world_pixels)."""
	width, height = viewport_size
	return (
		world_x - center_world[0] + width / 2.0,
		world_y - center_world[1] + height / 2.0,
	)


def screen_angle(from_x, from_y, to_x, to_y):
	"""Angle of the screen vector from -> to, in the Y-up convention.

	Screen Y grows downward, so the vertical component is negated: a vector
	turning counter-clockwise on screen gives an increasing angle, matching
	positive (counter-clockwise) rotation in the lng/lat plane.

	Returns:
		Angle in radians in (-pi, pi]
	"""
	return math.atan2(-(to_y - from_y), to_x - from_x)
