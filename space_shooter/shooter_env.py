"""
ShooterEnv - Gymnasium wrapper around the game core
---------------------------------------------------
- Headless: no window, no audio, no persisted high score
- 1 agent that moves + shoots
- Enemies descend in straight lines and end the episode on contact
- Vector observation: player state + top-K nearest enemies
- Discrete MultiDiscrete action space: [move(5), fire(2)]

Quick test:
    python -m space_shooter.shooter_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .collision import CollisionResolver
from .entities import InputSnapshot
from .frontend import Frontend
from .highscore import HighScoreStore
from .spawner import Spawner
from .state_machine import Command, Game, GameState
from .utils import clamp


class ShooterEnv(gym.Env):
    """Vertical space shooter as a Gymnasium environment"""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        death_penalty: float = 100.0,
        single_hit: bool = False,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        # Arena
        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps

        self.k_enemies = k_enemies
        self.death_penalty = death_penalty
        self.single_hit = single_hit

        # Action space:
        # move: 0 stay, 1 up, 2 down, 3 left, 4 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([5, 2])

        # Observation space (vector)
        # Player: pos(2) level(1)
        # Each enemy: rel pos(2) size(1) speed(1)
        obs_dim = 2 + 1 + (self.k_enemies * 4)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.game: Game = None  # type: ignore
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self.game = Game(
            width=self.width,
            height=self.height,
            store=HighScoreStore(None),
            frontend=Frontend(rng=np.random.default_rng(seed)),
            spawner=Spawner.from_config(rng=random.Random(seed)),
            resolver=CollisionResolver(single_hit=self.single_hit),
        )
        self.game.handle(Command.START)

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        snapshot = InputSnapshot(
            up=move == 1,
            down=move == 2,
            left=move == 3,
            right=move == 4,
            fire=fire == 1,
        )

        prev_score = self.game.score
        self.game.frontend.advance(self.dt)
        self.game.update(self.dt, snapshot)

        terminated = self.game.state is GameState.GAME_OVER
        reward = float(self.game.score - prev_score)
        if terminated:
            reward -= self.death_penalty

        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        sim = self.game.simulation
        p = sim.player

        obs_parts = [
            (p.x / self.width) * 2 - 1,
            (p.y / self.height) * 2 - 1,
            clamp(sim.level / 10.0 * 2 - 1, -1, 1),
        ]

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            sim.enemies,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - p.x) / self.width, -1, 1),
                    clamp((e.y - p.y) / self.height, -1, 1),
                    clamp(e.size / 64.0, -1, 1),
                    clamp(e.speed / 600.0, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        sim = self.game.simulation
        return {
            "score": sim.score,
            "level": sim.level,
            "high_score": sim.high_score,
            "num_enemies": len(sim.enemies),
            "num_bullets": len(sim.bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode != "rgb_array":
            return None

        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        sim = self.game.simulation
        for e in sim.enemies:
            self._fill_square(frame, e.x, e.y, e.size, (220, 80, 80))
        for b in sim.bullets:
            self._fill_square(frame, b.x, b.y, b.size / 4.0, (180, 180, 220))
        self._fill_square(frame, sim.player.x, sim.player.y, sim.player.size, (80, 200, 120))
        return frame

    def _fill_square(self, frame: np.ndarray, x: float, y: float, size: float, color):
        half = size / 2.0
        x0 = int(clamp(x - half, 0, self.width))
        x1 = int(clamp(x + half, 0, self.width))
        y0 = int(clamp(y - half, 0, self.height))
        y1 = int(clamp(y + half, 0, self.height))
        frame[y0:y1, x0:x1] = color


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(seed: Optional[int] = None, **env_kwargs) -> Dict[str, Any]:
    """Run one episode with a random policy"""
    env = ShooterEnv(**env_kwargs)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    env.close()
    return {
        "return": total,
        "score": info["score"],
        "level": info["level"],
        "length": info["step"],
        "terminated": terminated,
    }


if __name__ == "__main__":
    result = run_random_episode(seed=42)
    print(f"Random episode: score={result['score']} level={result['level']} "
          f"length={result['length']} return={result['return']:.1f}")
