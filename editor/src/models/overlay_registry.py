"""
True Size Overlay - Overlay Registry

THE MODEL for overlays. Owns every Overlay and all operations on them.

This class handles:
- Overlay creation from boundary features (id, palette color, original centroid)
- Removal and bulk clear (with synchronous removal hooks so a gesture lock on
  a removed overlay is released in the same call)
- Transform updates restricted to the derived/mutable fields
- Recomputing geometry from the untouched original (never incrementally)
- Reset to the original geometry
- Single selection and per-overlay edit-enabled flags
- Read-only snapshots for the presentation layer

The registry is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No gesture state (that's GestureController)

Usage:
    registry = OverlayRegistry()
    overlay_id = registry.add_overlay(feature)
    registry.apply_transform(overlay_id, offset=[0.0, 8.5], rotation=0.3)
    snapshot = registry.snapshot(overlay_id)
    registry.reset_overlay(overlay_id)
"""

import logging
import uuid as uuid_module
from typing import Any, Callable, Dict, List, Optional

from constants import DEFAULT_MERCATOR_SCALE, DEFAULT_ROTATION
from models.boundary import BoundaryFeature
from models.overlay import MUTABLE_FIELDS, Overlay, OverlaySnapshot, freeze_coordinates
from utils.color_utils import ColorCycle
from utils.geo_utils import (
    InvalidGeometryError,
    calculate_centroid,
    clone_geometry,
    get_mercator_scale_factor,
    rotate_coordinates,
    translate_coordinates,
)

# Change notifications sent to listeners as (event, overlay_id)
EVENT_ADDED = 'added'
EVENT_UPDATED = 'updated'
EVENT_REMOVED = 'removed'
EVENT_RESET = 'reset'
EVENT_SELECTED = 'selected'
EVENT_EDIT_TOGGLED = 'edit_toggled'
EVENT_CLEARED = 'cleared'


class OverlayRegistry:
    """Collection of overlays with the full operation API

    Listeners:
        add_listener(cb) - cb(event, overlay_id) after every change
        add_removal_hook(cb) - cb(ids) before overlays are dropped; the
            gesture controller uses it to release its lock atomically
    """

    def __init__(self, palette=None):
        self._logger = logging.getLogger('OverlayRegistry')
        self._overlays: Dict[str, Overlay] = {}
        self._selected_id: Optional[str] = None
        self._edit_enabled: set = set()
        self._colors = ColorCycle(palette)
        self._listeners: List[Callable[[str, Optional[str]], None]] = []
        self._removal_hooks: List[Callable[[List[str]], None]] = []

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[[str, Optional[str]], None]):
        self._listeners.append(callback)

    def add_removal_hook(self, callback: Callable[[List[str]], None]):
        self._removal_hooks.append(callback)

    def _notify(self, event: str, overlay_id: Optional[str] = None):
        for callback in list(self._listeners):
            callback(event, overlay_id)

    # ========================================
    # Queries
    # ========================================

    def __len__(self):
        return len(self._overlays)

    def __contains__(self, overlay_id):
        return overlay_id in self._overlays

    @property
    def overlay_ids(self) -> List[str]:
        """Overlay ids in creation order"""
        return list(self._overlays)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def get_overlay(self, overlay_id: str) -> Overlay:
        """Get overlay by id

        Raises:
            ValueError: If id not found
        """
        overlay = self._overlays.get(overlay_id)
        if overlay is None:
            raise ValueError(f"Overlay with id '{overlay_id}' not found")
        return overlay

    def get_selected_overlay(self) -> Optional[Overlay]:
        if self._selected_id is None:
            return None
        return self._overlays.get(self._selected_id)

    def is_selected(self, overlay_id: str) -> bool:
        return overlay_id is not None and overlay_id == self._selected_id

    def is_edit_enabled(self, overlay_id: str) -> bool:
        return overlay_id in self._edit_enabled

    def snapshot(self, overlay_id: str) -> OverlaySnapshot:
        """Read-only copy of an overlay's current state"""
        o = self.get_overlay(overlay_id)
        return OverlaySnapshot(
            id=o.id,
            name=o.name,
            code=o.code,
            country=o.country,
            area_km2=o.area_km2,
            color=o.color,
            geometry_type=o.geometry_type,
            offset=(o.offset[0], o.offset[1]),
            rotation=o.rotation,
            mercator_scale=o.mercator_scale,
            centroid=(o.centroid[0], o.centroid[1]),
            geometry=clone_geometry(o.geometry),
            selected=self.is_selected(o.id),
            edit_enabled=self.is_edit_enabled(o.id),
        )

    def snapshots(self) -> List[OverlaySnapshot]:
        return [self.snapshot(overlay_id) for overlay_id in self._overlays]

    # ========================================
    # Creation / Removal
    # ========================================

    def add_overlay(self, feature) -> str:
        """Create an overlay from a boundary feature and select it

        Args:
            feature: BoundaryFeature or a normalized GeoJSON Feature dict

        Returns:
            New overlay id

        Raises:
            InvalidGeometryError: If the feature geometry is empty or malformed
        """
        if not isinstance(feature, BoundaryFeature):
            try:
                feature = BoundaryFeature.from_geojson(feature)
            except ValueError as e:
                raise InvalidGeometryError(str(e)) from e

        original = freeze_coordinates(clone_geometry(feature.coordinates))
        # Raises InvalidGeometryError before anything is stored
        centroid = calculate_centroid(original)

        overlay_id = f"{feature.code}-{uuid_module.uuid4().hex[:12]}"
        overlay = Overlay(
            id=overlay_id,
            name=feature.name,
            code=feature.code,
            country=feature.country,
            area_km2=feature.area_km2,
            color=self._colors.next_color(),
            geometry_type=feature.geometry.get('type', 'Polygon'),
            original_geometry=original,
            original_centroid=(centroid[0], centroid[1]),
            geometry=clone_geometry(original),
            centroid=list(centroid),
        )
        self._overlays[overlay_id] = overlay
        self._logger.info(f"Added overlay {overlay_id} ({feature.name}) at centroid {centroid}")
        self._notify(EVENT_ADDED, overlay_id)

        self.select_overlay(overlay_id)
        return overlay_id

    def remove_overlay(self, overlay_id: str):
        """Remove an overlay

        Raises:
            ValueError: If id not found
        """
        self.get_overlay(overlay_id)
        for hook in list(self._removal_hooks):
            hook([overlay_id])

        del self._overlays[overlay_id]
        self._edit_enabled.discard(overlay_id)
        if self._selected_id == overlay_id:
            self._selected_id = None
        self._logger.info(f"Removed overlay {overlay_id}")
        self._notify(EVENT_REMOVED, overlay_id)

    def clear_all(self):
        """Remove every overlay and restart the color palette"""
        ids = list(self._overlays)
        if ids:
            for hook in list(self._removal_hooks):
                hook(ids)
        self._overlays.clear()
        self._edit_enabled.clear()
        self._selected_id = None
        self._colors.reset()
        self._logger.info(f"Cleared {len(ids)} overlays")
        self._notify(EVENT_CLEARED)

    # ========================================
    # Transform Operations
    # ========================================

    def update_overlay(self, overlay_id: str, **fields):
        """Merge new values for transform-derived fields

        Only offset, geometry, centroid, rotation and mercator_scale may change.

        Raises:
            ValueError: If id not found or any other field is given (nothing is applied)
        """
        overlay = self.get_overlay(overlay_id)
        rejected = set(fields) - MUTABLE_FIELDS
        if rejected:
            raise ValueError(f"Cannot update immutable overlay fields: {sorted(rejected)}")

        for name, value in fields.items():
            if name in ('offset', 'centroid'):
                value = [float(value[0]), float(value[1])]
            setattr(overlay, name, value)
        self._notify(EVENT_UPDATED, overlay_id)

    def compute_transform(self, overlay_id: str, offset, rotation: float) -> Dict[str, Any]:
        """Derive geometry, centroid and scale for an offset/rotation

        Always starts from the original geometry so repeated calls never
        accumulate error. Nothing is stored.

        Returns:
            Dict of mutable fields suitable for update_overlay()
        """
        overlay = self.get_overlay(overlay_id)
        orig_lng, orig_lat = overlay.original_centroid
        d_lng, d_lat = float(offset[0]), float(offset[1])
        centroid = [orig_lng + d_lng, orig_lat + d_lat]

        coords = translate_coordinates(overlay.original_geometry, d_lng, d_lat)
        if rotation:
            coords = rotate_coordinates(coords, centroid[0], centroid[1], rotation)

        scale = get_mercator_scale_factor(centroid[1]) / get_mercator_scale_factor(orig_lat)
        return {
            'offset': [d_lng, d_lat],
            'rotation': float(rotation),
            'geometry': coords,
            'centroid': centroid,
            'mercator_scale': scale,
        }

    def apply_transform(self, overlay_id: str, offset, rotation: float):
        """Recompute and commit the derived fields for an offset/rotation"""
        fields = self.compute_transform(overlay_id, offset, rotation)
        self.update_overlay(overlay_id, **fields)
        self._logger.debug(
            f"Transformed {overlay_id}: offset={fields['offset']} "
            f"rotation={fields['rotation']:.4f} scale={fields['mercator_scale']:.4f}"
        )

    def reset_overlay(self, overlay_id: str):
        """Restore the original geometry and default transform"""
        overlay = self.get_overlay(overlay_id)
        overlay.geometry = clone_geometry(overlay.original_geometry)
        overlay.centroid = list(overlay.original_centroid)
        overlay.offset = [0.0, 0.0]
        overlay.rotation = DEFAULT_ROTATION
        overlay.mercator_scale = DEFAULT_MERCATOR_SCALE
        self._logger.debug(f"Reset overlay {overlay_id}")
        self._notify(EVENT_RESET, overlay_id)

    # ========================================
    # Selection / Edit Mode
    # ========================================

    def select_overlay(self, overlay_id: Optional[str]):
        """Select one overlay (or none with None)

        Raises:
            ValueError: If id not found
        """
        if overlay_id is not None:
            self.get_overlay(overlay_id)
        self._selected_id = overlay_id
        self._notify(EVENT_SELECTED, overlay_id)

    def set_edit_enabled(self, overlay_id: str, enabled: bool):
        self.get_overlay(overlay_id)
        if enabled:
            self._edit_enabled.add(overlay_id)
        else:
            self._edit_enabled.discard(overlay_id)
        self._logger.debug(f"Edit mode {'on' if enabled else 'off'} for {overlay_id}")
        self._notify(EVENT_EDIT_TOGGLED, overlay_id)

    def toggle_edit_enabled(self, overlay_id: str) -> bool:
        """Flip the edit-enabled flag

        Returns:
            The new flag value
        """
        enabled = not self.is_edit_enabled(overlay_id)
        self.set_edit_enabled(overlay_id, enabled)
        return enabled
