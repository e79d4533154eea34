"""Boundary feature - the immutable input an overlay is created from."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BoundaryFeature:
    """A country subdivision boundary as supplied by a data source.

    Attributes:
        geometry: GeoJSON geometry dict ({'type': ..., 'coordinates': [...]})
        name: Display name (e.g. "Texas")
        code: Region code (e.g. "TX")
        country: Country tag (e.g. "US")
        area_km2: Reference area from the static area table
    """
    geometry: Dict[str, Any]
    name: str
    code: str
    country: str
    area_km2: float

    @property
    def coordinates(self):
        return self.geometry.get('coordinates', [])

    @classmethod
    def from_geojson(cls, feature: Dict[str, Any]) -> 'BoundaryFeature':
        """Build from a GeoJSON Feature whose properties are already normalized
        to {name, code, country, area_km2}.

        Raises:
            ValueError: If the feature has no geometry or name
        """
        geometry = feature.get('geometry')
        if not isinstance(geometry, dict) or 'coordinates' not in geometry:
            raise ValueError("Feature has no geometry")
        props = feature.get('properties') or {}
        name = props.get('name')
        if not name:
            raise ValueError("Feature has no name")
        return cls(
            geometry=geometry,
            name=name,
            code=props.get('code') or name[:2].upper(),
            country=props.get('country', ''),
            area_km2=props.get('area_km2', props.get('areaKm2', 0)),
        )

    def to_geojson(self) -> Dict[str, Any]:
        return {
            'type': 'Feature',
            'properties': {
                'name': self.name,
                'code': self.code,
                'country': self.country,
                'area_km2': self.area_km2,
            },
            'geometry': self.geometry,
        }
