"""Transform data structures for coordinate and state representation."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Screen pixels (top-left origin, Y-down)
    - Geographic degrees (x = longitude, y = latitude)
    - Offsets between geographic positions
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def to_list(self):
        return [self.x, self.y]


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned geographic bounds of a coordinate tree."""
    min_lng: float
    max_lng: float
    min_lat: float
    max_lat: float

    @property
    def center(self) -> Vec2:
        return Vec2((self.min_lng + self.max_lng) / 2, (self.min_lat + self.max_lat) / 2)
