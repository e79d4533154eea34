"""Overlay entity and the read-only snapshot handed to the presentation layer."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from constants import DEFAULT_MERCATOR_SCALE, DEFAULT_ROTATION

# Fields that transforms may change after creation
MUTABLE_FIELDS = frozenset({'offset', 'geometry', 'centroid', 'rotation', 'mercator_scale'})


def freeze_coordinates(coordinates):
    """Convert a coordinate tree into nested tuples so it cannot be mutated."""
    if isinstance(coordinates, (list, tuple)):
        return tuple(freeze_coordinates(c) for c in coordinates)
    return coordinates


@dataclass
class Overlay:
    """A draggable, rotatable copy of a boundary.

    Owned by OverlayRegistry. ``original_geometry`` and ``original_centroid``
    are fixed at creation (nested tuples); ``geometry``, ``centroid`` and
    ``mercator_scale`` are always derived from them plus ``offset`` and
    ``rotation``.
    """
    id: str
    name: str
    code: str
    country: str
    area_km2: float
    color: str
    geometry_type: str
    original_geometry: Tuple
    original_centroid: Tuple[float, float]
    geometry: List = field(default_factory=list)
    centroid: List[float] = field(default_factory=lambda: [0.0, 0.0])
    offset: List[float] = field(default_factory=lambda: [0.0, 0.0])
    rotation: float = DEFAULT_ROTATION
    mercator_scale: float = DEFAULT_MERCATOR_SCALE


@dataclass(frozen=True)
class OverlaySnapshot:
    """Immutable view of an overlay for rendering and reporting.

    Display rounding (percentages, degrees) is left to the presentation layer.
    """
    id: str
    name: str
    code: str
    country: str
    area_km2: float
    color: str
    geometry_type: str
    offset: Tuple[float, float]
    rotation: float
    mercator_scale: float
    centroid: Tuple[float, float]
    geometry: Any
    selected: bool = False
    edit_enabled: bool = False

    def to_geojson(self) -> Dict[str, Any]:
        """Current geometry as a GeoJSON Feature."""
        return {
            'type': 'Feature',
            'properties': {
                'name': self.name,
                'code': self.code,
                'country': self.country,
                'area_km2': self.area_km2,
                'offset': list(self.offset),
                'rotation': self.rotation,
                'mercator_scale': self.mercator_scale,
            },
            'geometry': {
                'type': self.geometry_type,
                'coordinates': self.geometry,
            },
        }
