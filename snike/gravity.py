from dataclasses import dataclass


@dataclass(frozen=True)
class GravityDirection:
    """One of the four gravity pulls, with the glyph shown in the HUD."""

    name: str
    x: int
    y: int
    icon: str
    rotation: int  # degrees applied to the HUD icon


# Order defines the rotation cycle and must not change.
GRAVITY_DIRECTIONS = (
    GravityDirection('DOWN', 0, 1, '↓', 0),
    GravityDirection('UP', 0, -1, '↑', 180),
    GravityDirection('LEFT', -1, 0, '←', 90),
    GravityDirection('RIGHT', 1, 0, '→', -90),
)


class GravityField:
    """Cyclic selector over GRAVITY_DIRECTIONS, starting at DOWN."""

    def __init__(self):
        self.reset()

    def current(self):
        return GRAVITY_DIRECTIONS[self.index]

    def advance(self):
        """Rotate to the next direction and return it."""
        self.index = (self.index + 1) % len(GRAVITY_DIRECTIONS)
        return self.current()

    def reset(self):
        """Back to DOWN."""
        self.index = 0
