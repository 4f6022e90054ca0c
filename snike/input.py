from dataclasses import dataclass


@dataclass(frozen=True)
class InputSnapshot:
    """Input state for one frame from one source.

    The four directions are held states; ``toggle_gravity`` and ``pause`` are
    edge-triggered and set only on the frame the command was issued.
    """

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    toggle_gravity: bool = False
    pause: bool = False

    @classmethod
    def merge(cls, snapshots):
        """OR every field across sources; no source overrides another."""
        merged = cls()
        for snap in snapshots:
            merged = cls(
                left=merged.left or snap.left,
                right=merged.right or snap.right,
                up=merged.up or snap.up,
                down=merged.down or snap.down,
                toggle_gravity=merged.toggle_gravity or snap.toggle_gravity,
                pause=merged.pause or snap.pause,
            )
        return merged

    @classmethod
    def towards(cls, origin, target, dead_zone=0):
        """Directions that steer from ``origin`` toward ``target``.

        Each axis only counts once the offset exceeds ``dead_zone`` so a
        pointer resting near the head does not jitter the steering.
        """
        if origin is None or target is None:
            return cls()
        dx = target[0] - origin[0]
        dy = target[1] - origin[1]
        return cls(
            left=dx < -dead_zone,
            right=dx > dead_zone,
            up=dy < -dead_zone,
            down=dy > dead_zone,
        )
