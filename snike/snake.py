from collections import deque
import math
from config import *
from snike.vector import Vector2


def normalize_angle(angle):
    """Wrap an angle difference into (-pi, pi]."""
    while angle <= -math.pi:
        angle += math.pi * 2
    while angle > math.pi:
        angle -= math.pi * 2
    return angle


class Snake:
    """Continuously steered snake pulled sideways by the active gravity."""

    def __init__(self, x, y, self_collision_ignore=SELF_COLLISION_IGNORE):
        self.self_collision_ignore = self_collision_ignore
        self.reset(x, y)

    def reset(self, x, y):
        """Place the snake at (x, y) facing up with its starting body below it."""
        self.position = Vector2(x, y)
        self.heading = -math.pi / 2
        self.velocity = Vector2(0.0, 0.0)
        self.target_length = INITIAL_LENGTH
        self.speed = INITIAL_SNAKE_SPEED
        self.trail = deque(
            Vector2(x, y + i * INITIAL_SEGMENT_SPACING) for i in range(INITIAL_LENGTH)
        )

    @property
    def head(self):
        return self.position

    def update(self, movement, gravity, step=1.0):
        """Advance one tick: steer, apply gravity, move and extend the trail."""
        dx = int(movement.right) - int(movement.left)
        dy = int(movement.down) - int(movement.up)

        if dx != 0 or dy != 0:
            target_heading = math.atan2(dy, dx)
            diff = normalize_angle(target_heading - self.heading)
            # Exponential steering, never a snap turn
            self.heading += diff * TURN_RATE

        self.velocity = Vector2(math.cos(self.heading), math.sin(self.heading)).scale(self.speed)
        self.velocity.add(Vector2(gravity.x, gravity.y).scale(GRAVITY_FORCE))

        self.position.add(self.velocity.copy().scale(step))

        self.trail.appendleft(self.position.copy())
        while len(self.trail) > self.target_length:
            self.trail.pop()

    def grow(self):
        """Lengthen the body and speed up, once per food eaten."""
        self.target_length += GROWTH_RATE
        self.speed = min(self.speed + SPEED_INCREMENT, MAX_SPEED)

    def check_wall_collision(self, width, height):
        """Check if the head has left the arena."""
        x, y = self.position.x, self.position.y
        return x < 0 or x > width or y < 0 or y > height

    def check_self_collision(self):
        """Check if the head touches its own body beyond the ignored neck."""
        threshold = SNAKE_WIDTH * SELF_COLLISION_FACTOR
        if len(self.trail) <= self.self_collision_ignore:
            return False

        for i in range(self.self_collision_ignore, len(self.trail)):
            if self.position.distance_to(self.trail[i]) < threshold:
                return True
        return False

    def check_collision(self, width, height):
        return self.check_wall_collision(width, height) or self.check_self_collision()
