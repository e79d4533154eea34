"""UI components for True Size Overlay

- gesture: gesture state values, pointer events, preview and edge-pan timer
- gesture_controller: drag/rotate state machine
- overlay_canvas: map surface that paints overlays and routes input
"""

from .gesture_controller import GestureController
from .overlay_canvas import OverlayCanvas

__all__ = [
    'GestureController',
    'OverlayCanvas',
]
