"""Geometry transform utilities for GeoJSON-style coordinate trees.

A coordinate tree is any nesting of lists whose leaves are ``[lng, lat]``
points (Polygon rings, MultiPolygon parts, ...). Every transform here is a
pure leaf-wise map: the returned tree has exactly the same nesting depth and
ring/point counts as its input, and the input is never modified.

All angles are radians in the longitude/latitude plane, positive
counter-clockwise. Screen-space angles (Y-down) must be negated by the caller.
"""

import math
from numbers import Real

import numpy as np

from constants import KM2_TO_MI2, MERCATOR_SCALE_LAT_LIMIT
from models.transform import Bounds


class InvalidGeometryError(ValueError):
	"""Raised when a coordinate tree is empty or malformed."""


def is_point(node):
	"""Return True if ``node`` is a leaf point (a sequence starting with a number)."""
	return (
		isinstance(node, (list, tuple))
		and len(node) > 0
		and isinstance(node[0], Real)
		and not isinstance(node[0], bool)
	)


def iter_points(coordinates):
	"""Yield every leaf point of a coordinate tree, depth first.

	Raises:
		InvalidGeometryError: If a node is neither a point nor a list of nodes
	"""
	if is_point(coordinates):
		if len(coordinates) < 2 or not isinstance(coordinates[1], Real):
			raise InvalidGeometryError(f"Malformed point: {coordinates!r}")
		yield coordinates
		return
	if not isinstance(coordinates, (list, tuple)):
		raise InvalidGeometryError(f"Malformed coordinate node: {coordinates!r}")
	for child in coordinates:
		yield from iter_points(child)


def _points_array(coordinates):
	"""Collect all leaf points into an Nx2 float array of finite values."""
	points = [(p[0], p[1]) for p in iter_points(coordinates)]
	if not points:
		raise InvalidGeometryError("Coordinate tree contains no points")
	array = np.asarray(points, dtype=float)
	if not np.isfinite(array).all():
		raise InvalidGeometryError("Coordinate tree contains non-finite values")
	return array


def calculate_centroid(coordinates):
	"""Arithmetic mean of all leaf points of a coordinate tree.

	Args:
		coordinates: Nested coordinate tree

	Returns:
		[lng, lat] mean position

	Raises:
		InvalidGeometryError: If the tree has no points
	"""
	points = _points_array(coordinates)
	mean = points.mean(axis=0)
	return [float(mean[0]), float(mean[1])]


def get_mercator_scale_factor(lat_degrees):
	"""Mercator scale factor (how much larger things appear) at a latitude.

	sec(lat), with the latitude clamped to +/-85 degrees so the poles do not
	produce infinity.
	"""
	lat = max(-MERCATOR_SCALE_LAT_LIMIT, min(MERCATOR_SCALE_LAT_LIMIT, lat_degrees))
	return 1.0 / math.cos(math.radians(lat))


def translate_coordinates(coordinates, delta_lng, delta_lat):
	"""Translate every leaf of a coordinate tree by (delta_lng, delta_lat)."""
	if is_point(coordinates):
		return [coordinates[0] + delta_lng, coordinates[1] + delta_lat, *coordinates[2:]]
	return [translate_coordinates(c, delta_lng, delta_lat) for c in coordinates]


def scale_coordinates(coordinates, center_lng, center_lat, scale_factor):
	"""Scale every leaf of a coordinate tree uniformly about a center point."""
	if is_point(coordinates):
		new_lng = center_lng + (coordinates[0] - center_lng) * scale_factor
		new_lat = center_lat + (coordinates[1] - center_lat) * scale_factor
		return [new_lng, new_lat, *coordinates[2:]]
	return [scale_coordinates(c, center_lng, center_lat, scale_factor) for c in coordinates]


def rotate_coordinates(coordinates, center_lng, center_lat, angle_rad):
	"""Rotate every leaf of a coordinate tree about a center point.

	Args:
		coordinates: Nested coordinate tree
		center_lng, center_lat: Center of rotation
		angle_rad: Counter-clockwise angle in the lng/lat plane
	"""
	cos_angle = math.cos(angle_rad)
	sin_angle = math.sin(angle_rad)
	return _rotate(coordinates, center_lng, center_lat, cos_angle, sin_angle)


def _rotate(coordinates, center_lng, center_lat, cos_angle, sin_angle):
	if is_point(coordinates):
		dx = coordinates[0] - center_lng
		dy = coordinates[1] - center_lat
		new_lng = center_lng + dx * cos_angle - dy * sin_angle
		new_lat = center_lat + dx * sin_angle + dy * cos_angle
		return [new_lng, new_lat, *coordinates[2:]]
	return [_rotate(c, center_lng, center_lat, cos_angle, sin_angle) for c in coordinates]


def get_bounds(coordinates):
	"""Axis-aligned bounds of a coordinate tree.

	Raises:
		InvalidGeometryError: If the tree has no points
	"""
	points = _points_array(coordinates)
	mins = points.min(axis=0)
	maxs = points.max(axis=0)
	return Bounds(
		min_lng=float(mins[0]), max_lng=float(maxs[0]),
		min_lat=float(mins[1]), max_lat=float(maxs[1]),
	)


def clone_geometry(coordinates):
	"""Deep copy of a coordinate tree; the copy shares no lists with the source."""
	if is_point(coordinates):
		return list(coordinates)
	return [clone_geometry(c) for c in coordinates]


def format_area(area_km2):
	"""Format an area for display in km² and mi².

	Returns:
		dict with 'km2' and 'mi2' strings grouped by thousands
		(km² to at most 3 decimals, mi² rounded to a whole number)
	"""
	area_mi2 = area_km2 * KM2_TO_MI2
	return {
		'km2': f"{area_km2:,.3f}".rstrip('0').rstrip('.'),
		'mi2': f"{int(math.floor(area_mi2 + 0.5)):,}",
	}


def wrap_angle(angle_rad):
	"""Wrap an angle into [-pi, pi)."""
	return (angle_rad + math.pi) % (2 * math.pi) - math.pi


def unwrap_angle(previous_rad, current_rad):
	"""Return the angle equivalent to ``current_rad`` (mod 2pi) closest to ``previous_rad``.

	Used to follow an atan2 angle continuously across the +/-pi branch cut.
	"""
	return previous_rad + wrap_angle(current_rad - previous_rad)
