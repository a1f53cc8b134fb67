"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Shape:
    """Square entity shared by the player, enemies and bullets.

    x/y is the centre in screen space (y grows downwards), size is the side
    of the bounding box.
    """
    x: float
    y: float
    size: float
    speed: float
    collided: bool = False  # set once, never cleared

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def rect(self) -> Tuple[float, float, float, float]:
        """Bounding box as (left, top, width, height)"""
        return (self.x - self.size / 2.0, self.y - self.size / 2.0, self.size, self.size)


@dataclass
class InputSnapshot:
    """Input sampled once per frame.

    Directions are "held" states, the rest are pressed-this-frame edges.
    """
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False
    pause: bool = False
    confirm: bool = False


def enemy_sprite_kind(size: float) -> str:
    """Pick the enemy sprite tier for a given size"""
    if 16.0 <= size < 32.0:
        return "enemy_small"
    if 32.0 <= size < 48.0:
        return "enemy_medium"
    return "enemy_large"
