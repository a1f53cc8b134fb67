"""
Probabilistic enemy spawner, scaled by level
"""

from __future__ import annotations

import random
from typing import Optional

from .entities import Shape
from .config import SPAWN_CONFIG


class Spawner:
    """Rolls once per frame and maybe creates one enemy above the screen"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        spawn_chance: int = 5,
        spawn_outcomes: int = 100,
        min_size: float = 16.0,
        max_size: float = 64.0,
        min_speed: float = 50.0,
        max_speed: float = 150.0,
    ):
        assert 0 <= spawn_chance <= spawn_outcomes, "spawn_chance must fit in spawn_outcomes"
        self.rng = rng if rng is not None else random.Random()
        self.spawn_chance = spawn_chance
        self.spawn_outcomes = spawn_outcomes
        self.min_size = min_size
        self.max_size = max_size
        self.min_speed = min_speed
        self.max_speed = max_speed

    @classmethod
    def from_config(cls, rng: Optional[random.Random] = None) -> "Spawner":
        return cls(rng=rng, **SPAWN_CONFIG)

    @property
    def threshold(self) -> int:
        """Draws at or above this value spawn an enemy"""
        return self.spawn_outcomes - self.spawn_chance

    def roll(self) -> int:
        return self.rng.randrange(self.spawn_outcomes)

    def maybe_spawn(self, level: int, screen_width: float) -> Optional[Shape]:
        if self.roll() < self.threshold:
            return None
        return self.spawn(level, screen_width)

    def spawn(self, level: int, screen_width: float) -> Shape:
        size = self.rng.uniform(self.min_size, self.max_size)

        # Difficulty steps up at every level
        speed_modifier = level / 2.0
        speed = self.rng.uniform(self.min_speed * speed_modifier, self.max_speed * speed_modifier)

        x = self.rng.uniform(size / 2.0, screen_width - size / 2.0)

        # Start fully above the screen so it scrolls in
        return Shape(x=x, y=-size, size=size, speed=speed)
