"""Gesture building blocks: state values, pointer events, preview and edge-pan"""

from .edge_pan import EdgePanner
from .events import BUTTON_NONE, BUTTON_PRIMARY, BUTTON_SECONDARY, PointerEvent
from .gesture_state import Dragging, Idle, Rotating, is_active
from .preview import PreviewTransform

__all__ = [
    'EdgePanner',
    'PointerEvent',
    'BUTTON_PRIMARY',
    'BUTTON_SECONDARY',
    'BUTTON_NONE',
    'Idle',
    'Dragging',
    'Rotating',
    'is_active',
    'PreviewTransform',
]
