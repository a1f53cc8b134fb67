"""
Top-level game mode: main menu, playing, paused, game over.

Commands that are not valid in the current state are ignored.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional

from .collision import CollisionResolver
from .entities import InputSnapshot, enemy_sprite_kind
from .frontend import Frontend, SOUND_THEME
from .highscore import HighScoreStore
from .simulation import ExplosionRequest, Simulation, SoundRequest, StepResult
from .spawner import Spawner

logger = logging.getLogger(__name__)


class GameState(Enum):
    MAIN_MENU = "main_menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(Enum):
    START = "start"
    QUIT = "quit"
    PAUSE = "pause"
    RESUME = "resume"
    ACKNOWLEDGE = "acknowledge"


TRANSITIONS = {
    (GameState.MAIN_MENU, Command.START): GameState.PLAYING,
    (GameState.PLAYING, Command.PAUSE): GameState.PAUSED,
    (GameState.PAUSED, Command.RESUME): GameState.PLAYING,
    (GameState.GAME_OVER, Command.ACKNOWLEDGE): GameState.MAIN_MENU,
}

MENU_PLAY = "Play"
MENU_QUIT = "Quit"
MENU_OPTIONS = (MENU_PLAY, MENU_QUIT)


class Game:
    """Dispatches each frame to the active mode"""

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        player_size: float = 32.0,
        player_speed: float = 200.0,
        bullet_size: float = 32.0,
        bullet_offset: float = 24.0,
        highscore_path: Optional[str] = "highscore.dat",
        store: Optional[HighScoreStore] = None,
        frontend: Optional[Frontend] = None,
        spawner: Optional[Spawner] = None,
        resolver: Optional[CollisionResolver] = None,
    ):
        self.width = width
        self.height = height
        self.store = store if store is not None else HighScoreStore(highscore_path)
        self.frontend = frontend if frontend is not None else Frontend()

        self.simulation = Simulation(
            width=width,
            height=height,
            high_score=self.store.load(),
            spawner=spawner,
            resolver=resolver,
            player_size=player_size,
            player_speed=player_speed,
            bullet_size=bullet_size,
            bullet_offset=bullet_offset,
        )

        self.state = GameState.MAIN_MENU
        self.quit_requested = False
        self._record_to_beat = self.simulation.high_score

        self.frontend.play_sound(SOUND_THEME)

    @property
    def score(self) -> int:
        return self.simulation.score

    @property
    def level(self) -> int:
        return self.simulation.level

    @property
    def high_score(self) -> int:
        return self.simulation.high_score

    # ----------------------------
    # Transitions
    # ----------------------------

    def handle(self, command: Command) -> GameState:
        if command is Command.QUIT:
            if self.state is GameState.MAIN_MENU:
                self.quit_requested = True
            return self.state

        next_state = TRANSITIONS.get((self.state, command))
        if next_state is None:
            return self.state

        if command is Command.START:
            self.simulation.reset()
            self._record_to_beat = self.simulation.high_score

        self.state = next_state
        return self.state

    def _end_session(self):
        sim = self.simulation
        # A tie counts as a record
        if sim.score >= self._record_to_beat:
            self.store.save(sim.high_score)
        logger.info("Game over: score=%d level=%d high_score=%d", sim.score, sim.level, sim.high_score)
        self.state = GameState.GAME_OVER

    # ----------------------------
    # Frame
    # ----------------------------

    def update(self, dt: float, snapshot: InputSnapshot) -> Optional[StepResult]:
        """Advance one frame. Returns the step result while playing."""
        if self.state is GameState.MAIN_MENU:
            choice = self.frontend.show_menu(MENU_OPTIONS)
            if choice == MENU_PLAY:
                self.handle(Command.START)
            elif choice == MENU_QUIT:
                self.handle(Command.QUIT)
            return None

        if self.state is GameState.PAUSED:
            if snapshot.pause:
                self.handle(Command.RESUME)
            return None

        if self.state is GameState.GAME_OVER:
            if snapshot.confirm:
                self.handle(Command.ACKNOWLEDGE)
            return None

        result = self.simulation.step(dt, snapshot)
        self._dispatch(result.effects)

        if result.game_over:
            self._end_session()
        elif snapshot.pause:
            self.handle(Command.PAUSE)
        return result

    def _dispatch(self, effects: List[Any]):
        for effect in effects:
            if isinstance(effect, ExplosionRequest):
                handle = self.frontend.spawn_explosion_effect(effect.position, effect.particle_count)
                self.simulation.explosions.append((handle, effect.position))
            elif isinstance(effect, SoundRequest):
                self.frontend.play_sound_once(effect.sound_id)

    # ----------------------------
    # Drawing
    # ----------------------------

    def draw(self):
        fe = self.frontend
        sim = self.simulation

        if self.state is GameState.PLAYING:
            for handle, position in sim.explosions:
                fe.draw_effect(handle, position)
            for e in sim.enemies:
                fe.draw_entity(e.position, e.size, enemy_sprite_kind(e.size))
            for b in sim.bullets:
                fe.draw_entity(b.position, b.size, "bullet")
            fe.draw_entity(sim.player.position, sim.player.size, f"player_{sim.player_direction}")

            fe.draw_text(f"Score: {sim.score}", (10.0, 35.0))
            fe.draw_text(f"High Score: {sim.high_score}", (self.width - 10.0, 35.0), anchor="right")

        elif self.state is GameState.PAUSED:
            fe.draw_text("Paused", (self.width / 2.0, self.height / 2.0), font_size=50, anchor="center")

        elif self.state is GameState.GAME_OVER:
            fe.draw_text("GAME OVER!", (self.width / 2.0, self.height / 2.0),
                         font_size=50, color="red", anchor="center")
