"""Toolkit-neutral pointer events consumed by the gesture controller."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

BUTTON_PRIMARY = 'primary'
BUTTON_SECONDARY = 'secondary'
BUTTON_NONE = None


@dataclass(frozen=True)
class PointerEvent:
    """A press/move/release carrying every active contact point.

    Attributes:
        points: Screen (x, y) of each active contact; one for a mouse
        target_id: Overlay under the primary contact at press time (or None)
        button: 'primary', 'secondary' or None (touch / move)
        modifiers: Held modifiers, e.g. {'shift'}
    """
    points: Tuple[Tuple[float, float], ...]
    target_id: Optional[str] = None
    button: Optional[str] = BUTTON_PRIMARY
    modifiers: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def primary(self) -> Tuple[float, float]:
        return self.points[0]

    @classmethod
    def mouse(cls, x, y, target_id=None, button=BUTTON_PRIMARY, modifiers=()):
        return cls(points=((x, y),), target_id=target_id, button=button,
                   modifiers=frozenset(modifiers))

    @classmethod
    def touch(cls, *points, target_id=None):
        return cls(points=tuple((p[0], p[1]) for p in points), target_id=target_id,
                   button=BUTTON_NONE)
