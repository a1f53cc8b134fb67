"""
Per-frame simulation step
-------------------------
Runs once per frame while playing:
  1. move the player (clamped to the screen), fire, move enemies and bullets
  2. maybe spawn one enemy
  3. prune entities that left the screen or were marked collided
  4. resolve bullet/enemy collisions (marks take effect next frame)
  5. check the player against the remaining enemies
  6. drop explosion records that stopped emitting

The step never talks to audio or rendering directly: it returns the effects
it wants and the caller dispatches them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .config import LEVEL_STEP
from .collision import CollisionResolver, Hit, collides
from .entities import InputSnapshot, Shape
from .frontend import SOUND_EXPLOSION, SOUND_LASER
from .spawner import Spawner
from .utils import clamp


@dataclass
class SoundRequest:
    sound_id: str


@dataclass
class ExplosionRequest:
    position: Tuple[float, float]
    particle_count: int


@dataclass
class StepResult:
    game_over: bool
    score: int
    level: int
    high_score: int
    hits: int = 0
    effects: List[Any] = field(default_factory=list)


class Simulation:
    """Owns the entities and the score/level counters of one session"""

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        high_score: int = 0,
        spawner: Optional[Spawner] = None,
        resolver: Optional[CollisionResolver] = None,
        player_size: float = 32.0,
        player_speed: float = 200.0,
        bullet_size: float = 32.0,
        bullet_offset: float = 24.0,
    ):
        self.width = width
        self.height = height
        self.spawner = spawner if spawner is not None else Spawner.from_config()
        self.resolver = resolver if resolver is not None else CollisionResolver()

        self.player_size = player_size
        self.player_speed = player_speed
        self.bullet_size = bullet_size
        self.bullet_offset = bullet_offset

        self.high_score = high_score

        # World state
        self.player: Shape = None  # type: ignore
        self.enemies: List[Shape] = []
        self.bullets: List[Shape] = []
        self.explosions: List[Tuple[Any, Tuple[float, float]]] = []

        self.reset()

    def reset(self):
        """Start a new session"""
        self.enemies.clear()
        self.bullets.clear()
        self.explosions.clear()
        self.player = Shape(
            x=self.width / 2.0,
            y=self.height / 2.0,
            size=self.player_size,
            speed=self.player_speed,
        )
        self.score = 0
        self.level = 1

        # Cosmetic state for the frontend
        self.player_direction = "idle"
        self.direction_modifier = 0.0

    # ----------------------------
    # Step
    # ----------------------------

    def step(self, dt: float, snapshot: InputSnapshot) -> StepResult:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        effects: List[Any] = []

        # 1. Movement
        self._apply_move(dt, snapshot)
        if snapshot.fire:
            self.fire()
            effects.append(SoundRequest(SOUND_LASER))
        self._update_enemies(dt)
        self._update_bullets(dt)

        # 2. Spawning
        self._spawn_logic()

        # 3. Pruning
        self._prune()

        # 4. Collisions
        hits = self.resolver.resolve(self.enemies, self.bullets)
        for hit in hits:
            self._score_hit(hit, effects)

        # 5. Player vs enemies
        game_over = self.player_hit()

        # 6. Finished explosions
        self.explosions = [(h, pos) for h, pos in self.explosions if h.emitting]

        return StepResult(
            game_over=game_over,
            score=self.score,
            level=self.level,
            high_score=self.high_score,
            hits=len(hits),
            effects=effects,
        )

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _apply_move(self, dt: float, snapshot: InputSnapshot):
        p = self.player
        distance = p.speed * dt
        self.player_direction = "idle"

        if snapshot.up:
            p.y -= distance
        if snapshot.left:
            p.x -= distance
            self.direction_modifier -= 5.0 * dt
            self.player_direction = "left"
        if snapshot.down:
            p.y += distance
        if snapshot.right:
            p.x += distance
            self.direction_modifier += 5.0 * dt
            self.player_direction = "right"

        # Keep in bounds
        p.x = clamp(p.x, 0.0, self.width)
        p.y = clamp(p.y, 0.0, self.height)

    def fire(self) -> Shape:
        bullet = Shape(
            x=self.player.x,
            y=self.player.y - self.bullet_offset,
            size=self.bullet_size,
            speed=self.player.speed * 2.0,
        )
        self.bullets.append(bullet)
        return bullet

    def _update_enemies(self, dt: float):
        for e in self.enemies:
            e.y += e.speed * dt

    def _update_bullets(self, dt: float):
        for b in self.bullets:
            b.y -= b.speed * dt

    def _spawn_logic(self):
        enemy = self.spawner.maybe_spawn(self.level, self.width)
        if enemy is not None:
            self.enemies.append(enemy)

    def _prune(self):
        self.enemies = [
            e for e in self.enemies
            if e.y < self.height + e.size and not e.collided
        ]
        self.bullets = [
            b for b in self.bullets
            if b.y > -b.size / 2.0 and not b.collided
        ]

    def _score_hit(self, hit: Hit, effects: List[Any]):
        points = hit.points
        self.score += points

        # Enemy speed goes up every LEVEL_STEP points
        new_level = self.score // LEVEL_STEP + 1
        if new_level > self.level:
            self.level = new_level

        self.high_score = max(self.high_score, self.score)

        effects.append(ExplosionRequest(position=hit.enemy.position, particle_count=points * 4))
        effects.append(SoundRequest(SOUND_EXPLOSION))

    def player_hit(self) -> bool:
        return any(collides(self.player, e) for e in self.enemies)
