"""Vertical space shooter - game core, Gymnasium environment and arcade frontend"""

from .entities import InputSnapshot, Shape
from .highscore import HighScoreStore
from .simulation import Simulation, StepResult
from .state_machine import Command, Game, GameState
from .shooter_env import ShooterEnv, run_random_episode

__all__ = [
    "InputSnapshot",
    "Shape",
    "HighScoreStore",
    "Simulation",
    "StepResult",
    "Command",
    "Game",
    "GameState",
    "ShooterEnv",
    "run_random_episode",
]
