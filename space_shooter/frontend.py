"""
Collaborator interface consumed by the game core.

The core hands out logical parameters only (positions, sizes, sprite kinds,
sound ids). The base Frontend is headless: it draws nothing and plays nothing,
but it still ages the explosion effects it hands out so that their
`emitting` flag turns false like the real ones do.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

# Sound ids
SOUND_THEME = "theme"
SOUND_LASER = "laser"
SOUND_EXPLOSION = "explosion"


class ExplosionBurst:
    """One-shot particle burst.

    Particles fly outwards from the spawn point and the burst stops emitting
    once its lifetime is over.
    """

    def __init__(
        self,
        particle_count: int,
        lifetime: float = 0.6,
        lifetime_randomness: float = 0.3,
        initial_velocity: float = 400.0,
        velocity_randomness: float = 0.8,
        size: float = 16.0,
        rng: Optional[np.random.Generator] = None,
    ):
        rng = rng if rng is not None else np.random.default_rng()
        n = max(0, int(particle_count))
        self.size = size
        self.lifetime = lifetime
        self.age = 0.0

        angles = rng.uniform(0.0, 2.0 * math.pi, n)
        speeds = initial_velocity * (1.0 - velocity_randomness * rng.random(n))
        self.velocities = np.stack([np.cos(angles) * speeds, np.sin(angles) * speeds], axis=1)
        self.lifetimes = lifetime * (1.0 - lifetime_randomness * rng.random(n))
        self.offsets = np.zeros((n, 2), dtype=np.float64)

    @property
    def emitting(self) -> bool:
        return self.age < self.lifetime

    def update(self, dt: float):
        if not self.emitting:
            return
        self.age += dt
        alive = self.lifetimes > self.age
        self.offsets[alive] += self.velocities[alive] * dt

    def live_particles(self) -> np.ndarray:
        """Offsets of the particles still alive, relative to the spawn point"""
        return self.offsets[self.lifetimes > self.age]

    def particle_alpha(self) -> np.ndarray:
        alive = self.lifetimes > self.age
        return np.clip(1.0 - self.age / self.lifetimes[alive], 0.0, 1.0)


class Frontend:
    """Headless collaborator: audio, effects, drawing and menu no-ops"""

    def __init__(self, explosion_lifetime: float = 0.6, rng: Optional[np.random.Generator] = None):
        self.explosion_lifetime = explosion_lifetime
        self.rng = rng if rng is not None else np.random.default_rng()
        self._bursts: List[ExplosionBurst] = []

    # ----------------------------
    # Audio
    # ----------------------------

    def play_sound(self, sound_id: str):
        """Start a looped sound (music)"""

    def play_sound_once(self, sound_id: str):
        """Play a one-shot sound effect"""

    # ----------------------------
    # Effects
    # ----------------------------

    def spawn_explosion_effect(self, position: Tuple[float, float], particle_count: int) -> ExplosionBurst:
        burst = ExplosionBurst(particle_count, lifetime=self.explosion_lifetime, rng=self.rng)
        self._bursts.append(burst)
        return burst

    def advance(self, dt: float):
        """Age every effect handed out; finished ones are forgotten"""
        for burst in self._bursts:
            burst.update(dt)
        self._bursts = [b for b in self._bursts if b.emitting]

    # ----------------------------
    # Drawing / UI
    # ----------------------------

    def draw_entity(self, position: Tuple[float, float], size: float, sprite_kind: str):
        pass

    def draw_effect(self, handle: ExplosionBurst, position: Tuple[float, float]):
        pass

    def draw_text(self, text: str, position: Tuple[float, float], font_size: int = 25,
                  color: str = "white", anchor: str = "left"):
        pass

    def show_menu(self, options: Sequence[str]) -> Optional[str]:
        """Show the menu and return the option picked this frame, if any"""
        return None
