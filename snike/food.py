import random
from config import *
from snike.vector import Vector2


class Food:
    """The single pickup in the arena."""

    def __init__(self, width, height, rng=None):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.phase = 0.0
        self.spawn()

    def _margin(self, size):
        # arenas narrower than two margins shrink the pad to the centre line
        return min(FOOD_SPAWN_MARGIN, size / 2)

    def spawn(self):
        """Move to a random spot inside the padded arena."""
        pad_x = self._margin(self.width)
        pad_y = self._margin(self.height)
        self.position = Vector2(
            pad_x + self.rng.random() * (self.width - pad_x * 2),
            pad_y + self.rng.random() * (self.height - pad_y * 2),
        )
        return self.position

    def in_bounds(self):
        pad_x = self._margin(self.width)
        pad_y = self._margin(self.height)
        return (pad_x <= self.position.x <= self.width - pad_x and
                pad_y <= self.position.y <= self.height - pad_y)

    def resize(self, width, height):
        """Adopt new arena bounds, respawning if the food is now outside them."""
        self.width = width
        self.height = height
        if not self.in_bounds():
            self.spawn()

    def update(self, step=1.0):
        """Advance the idle bounce animation."""
        self.phase += FOOD_PHASE_STEP * step

    def check_collision(self, snake_head):
        """Check if the snake head is close enough to eat the food."""
        return snake_head.distance_to(self.position) < FOOD_SIZE + SNAKE_WIDTH
