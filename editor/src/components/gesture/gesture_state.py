"""Gesture state variants for the overlay gesture controller.

The controller holds exactly one of these immutable values. Transitions build
a new value instead of flipping flags, so there is never a half-updated drag.
"""

from dataclasses import dataclass
from typing import Optional

from models.transform import Vec2


@dataclass(frozen=True)
class Idle:
    """No gesture in progress; no overlay is locked."""

    @property
    def overlay_id(self):
        return None


@dataclass(frozen=True)
class Dragging:
    """Single-pointer translation of one overlay.

    All moves are measured against this fixed start snapshot.
    """
    overlay_id: str
    start_geo: Vec2        # Geographic position under the pointer at press
    start_offset: Vec2     # Overlay offset at press
    start_rotation: float  # Overlay rotation at press


@dataclass(frozen=True)
class Rotating:
    """Rotation of one overlay, from two contacts or pointer-around-pivot.

    ``last_angle`` follows the contact angle continuously (unwrapped across
    the +/-pi branch cut when enabled); ``start_angle`` never changes.
    """
    overlay_id: str
    start_angle: float
    start_rotation: float
    last_angle: float
    pivot_geo: Optional[Vec2] = None  # Geographic pivot for the single-pointer variant


def is_active(state) -> bool:
    """True while an overlay holds the gesture lock."""
    return isinstance(state, (Dragging, Rotating))
