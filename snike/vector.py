import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """Mutable 2D point / velocity.

    ``add`` and ``scale`` change the vector in place and return it so calls
    can be chained. Use ``copy`` whenever a position is stored somewhere that
    must not move along with the source vector (trail segments, particle origins).
    """

    x: float = 0.0
    y: float = 0.0

    def add(self, other):
        self.x += other.x
        self.y += other.y
        return self

    def scale(self, n):
        self.x *= n
        self.y *= n
        return self

    def copy(self):
        return Vector2(self.x, self.y)

    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self):
        return (self.x, self.y)
