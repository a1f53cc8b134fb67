"""Shared fixtures: scripted randomness and a frontend that records calls"""

import pytest

from space_shooter.collision import CollisionResolver
from space_shooter.frontend import Frontend
from space_shooter.highscore import HighScoreStore
from space_shooter.simulation import Simulation
from space_shooter.spawner import Spawner
from space_shooter.state_machine import Game


class ScriptedRandom:
    """Stands in for random.Random with queued results.

    With nothing queued, randrange returns 0 (never spawns) and uniform
    returns its lower bound.
    """

    def __init__(self, draws=(), uniforms=()):
        self.draws = list(draws)
        self.uniforms = list(uniforms)

    def randrange(self, n):
        return self.draws.pop(0) if self.draws else 0

    def uniform(self, a, b):
        return self.uniforms.pop(0) if self.uniforms else a


class FakeEffect:
    def __init__(self):
        self.emitting = True


class RecordingFrontend(Frontend):
    def __init__(self):
        super().__init__()
        self.calls = []
        self.menu_pick = None
        self.font_sizes = {}

    def play_sound(self, sound_id):
        self.calls.append(("play_sound", sound_id))

    def play_sound_once(self, sound_id):
        self.calls.append(("play_sound_once", sound_id))

    def spawn_explosion_effect(self, position, particle_count):
        self.calls.append(("explosion", position, particle_count))
        return FakeEffect()

    def draw_entity(self, position, size, sprite_kind):
        self.calls.append(("draw_entity", position, size, sprite_kind))

    def draw_text(self, text, position, font_size=25, color="white", anchor="left"):
        self.calls.append(("draw_text", text))
        self.font_sizes[text] = font_size

    def show_menu(self, options):
        pick, self.menu_pick = self.menu_pick, None
        return pick

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def quiet_spawner():
    return Spawner(rng=ScriptedRandom())


@pytest.fixture
def sim(quiet_spawner):
    return Simulation(width=800, height=600, spawner=quiet_spawner)


@pytest.fixture
def frontend():
    return RecordingFrontend()


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(str(tmp_path / "highscore.dat"))


@pytest.fixture
def game(store, frontend, quiet_spawner):
    return Game(
        width=800,
        height=600,
        store=store,
        frontend=frontend,
        spawner=quiet_spawner,
        resolver=CollisionResolver(),
    )
