"""Preview transform - uncommitted gesture result drawn over the authoritative overlay."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class PreviewTransform:
    """Transient geometry for one overlay while a gesture is in progress.

    Built from OverlayRegistry.compute_transform(), so it is derived from the
    original geometry exactly like a committed update. It is committed with
    OverlayRegistry.update_overlay(**as_fields()) at gesture end, or thrown
    away when the gesture is cancelled.
    """
    overlay_id: str
    offset: Tuple[float, float]
    rotation: float
    centroid: Tuple[float, float]
    mercator_scale: float
    geometry: List

    @classmethod
    def from_fields(cls, overlay_id: str, fields: Dict[str, Any]) -> 'PreviewTransform':
        return cls(
            overlay_id=overlay_id,
            offset=tuple(fields['offset']),
            rotation=fields['rotation'],
            centroid=tuple(fields['centroid']),
            mercator_scale=fields['mercator_scale'],
            geometry=fields['geometry'],
        )

    def as_fields(self) -> Dict[str, Any]:
        return {
            'offset': list(self.offset),
            'rotation': self.rotation,
            'centroid': list(self.centroid),
            'mercator_scale': self.mercator_scale,
            'geometry': self.geometry,
        }
