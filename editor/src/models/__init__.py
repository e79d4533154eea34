"""
True Size Overlay - Data Models

This module contains the data model classes for overlays.
This is the MODEL in MVC architecture.

Public API: Import OverlayRegistry from models.overlay_registry
"""

from .boundary import BoundaryFeature
from .overlay import Overlay, OverlaySnapshot
from .overlay_registry import OverlayRegistry
from .transform import Bounds, Vec2

__all__ = ['BoundaryFeature', 'Overlay', 'OverlaySnapshot', 'OverlayRegistry', 'Bounds', 'Vec2']
