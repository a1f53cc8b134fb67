"""
Arcade frontend: window, frame loop, sprites, sounds and menu.

The game core works in screen space with y growing downwards; arcade's y
grows upwards, so every draw call flips y against the window height.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import arcade

from .config import ASSET_FILES, FRONTEND_CONFIG
from .entities import InputSnapshot
from .frontend import ExplosionBurst, Frontend, SOUND_EXPLOSION
from .state_machine import Game, GameState


class ResourceLoadError(RuntimeError):
    """An asset could not be loaded; the game must not start"""


# First animation frame of each sprite sheet, as (left, bottom, width, height)
SPRITE_FRAMES = {
    "enemy_small": ("enemy_small", (0, 0, 17, 16)),
    "enemy_medium": ("enemy_medium", (0, 0, 32, 16)),
    "enemy_large": ("enemy_large", (0, 0, 32, 32)),
    "bullet": ("bullet", (0, 0, 16, 16)),
    "explosion": ("explosion", (0, 0, 16, 16)),
    "player_idle": ("player", (0, 0, 16, 24)),
    "player_left": ("player", (0, 48, 16, 24)),
    "player_right": ("player", (0, 96, 16, 24)),
}

# Fallback colors when running without assets
SHAPE_COLORS = {
    "enemy_small": (220, 80, 80),
    "enemy_medium": (230, 120, 60),
    "enemy_large": (200, 60, 160),
    "bullet": (180, 180, 220),
    "player_idle": (80, 200, 120),
    "player_left": (80, 200, 120),
    "player_right": (80, 200, 120),
}

TEXT_COLORS = {
    "white": arcade.color.WHITE,
    "red": arcade.color.RED,
}


@dataclass(frozen=True)
class Resources:
    """Read-only assets, loaded once and handed to the frontend"""
    sprites: Dict[str, arcade.Texture] = field(default_factory=dict)
    sounds: Dict[str, arcade.Sound] = field(default_factory=dict)

    @classmethod
    def load(cls, assets_dir: str) -> "Resources":
        """Load every asset or raise ResourceLoadError"""
        sheets = {}
        for name, filename in ASSET_FILES["textures"].items():
            sheets[name] = cls._load(assets_dir, filename, arcade.load_spritesheet)

        sprites = {}
        for kind, (sheet_name, (left, bottom, w, h)) in SPRITE_FRAMES.items():
            try:
                sprites[kind] = sheets[sheet_name].get_texture(arcade.LBWH(left, bottom, w, h))
            except Exception as e:
                raise ResourceLoadError(f"Bad sprite frame for {kind}: {e}") from e

        sounds = {}
        for name, filename in ASSET_FILES["sounds"].items():
            sounds[name] = cls._load(assets_dir, filename, arcade.load_sound)

        return cls(sprites=sprites, sounds=sounds)

    @staticmethod
    def _load(assets_dir: str, filename: str, loader):
        path = os.path.join(assets_dir, filename)
        if not os.path.isfile(path):
            raise ResourceLoadError(f"Missing asset: {path}")
        try:
            return loader(path)
        except Exception as e:
            raise ResourceLoadError(f"Could not load {path}: {e}") from e


class ArcadeFrontend(Frontend):
    """Draws and plays what the game core asks for"""

    def __init__(
        self,
        height: float,
        resources: Optional[Resources] = None,
        hud_font_size: int = 20,
        banner_font_size: int = 40,
        music_volume: float = 0.5,
        explosion_volume: float = 0.4,
        explosion_lifetime: float = 0.6,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__(explosion_lifetime=explosion_lifetime, rng=rng)
        self.height = height
        self.resources = resources if resources is not None else Resources()
        self.hud_font_size = hud_font_size
        self.banner_font_size = banner_font_size
        self.music_volume = music_volume
        self.explosion_volume = explosion_volume

        # Menu state
        self.menu_options: Sequence[str] = ()
        self.menu_cursor = 0
        self._menu_pick: Optional[str] = None

    def _flip(self, position: Tuple[float, float]) -> Tuple[float, float]:
        return position[0], self.height - position[1]

    # ----------------------------
    # Audio
    # ----------------------------

    def play_sound(self, sound_id: str):
        sound = self.resources.sounds.get(sound_id)
        if sound is not None:
            arcade.play_sound(sound, volume=self.music_volume, loop=True)

    def play_sound_once(self, sound_id: str):
        sound = self.resources.sounds.get(sound_id)
        if sound is None:
            return
        volume = self.explosion_volume if sound_id == SOUND_EXPLOSION else 1.0
        arcade.play_sound(sound, volume=volume)

    # ----------------------------
    # Drawing
    # ----------------------------

    def draw_entity(self, position: Tuple[float, float], size: float, sprite_kind: str):
        x, y = self._flip(position)
        texture = self.resources.sprites.get(sprite_kind)
        if texture is not None:
            arcade.draw_texture_rect(texture, arcade.XYWH(x, y, size, size), pixelated=True)
            return
        half = size / 2.0
        color = SHAPE_COLORS.get(sprite_kind, arcade.color.WHITE)
        if sprite_kind == "bullet":
            half = size / 8.0
        arcade.draw_lrbt_rectangle_filled(x - half, x + half, y - half, y + half, color)

    def draw_effect(self, handle: ExplosionBurst, position: Tuple[float, float]):
        x, y = self._flip(position)
        offsets = handle.live_particles()
        alphas = handle.particle_alpha()
        texture = self.resources.sprites.get("explosion")
        radius = handle.size / 4.0
        for (ox, oy), a in zip(offsets, alphas):
            if texture is not None:
                rect = arcade.XYWH(x + ox, y - oy, handle.size, handle.size)
                arcade.draw_texture_rect(texture, rect, alpha=int(255 * a), pixelated=True)
            else:
                arcade.draw_circle_filled(x + ox, y - oy, radius, (255, 170, 60, int(255 * a)))

    def draw_text(self, text: str, position: Tuple[float, float], font_size: int = 25,
                  color: str = "white", anchor: str = "left"):
        x, y = self._flip(position)
        arcade.draw_text(
            text, x, y, TEXT_COLORS.get(color, arcade.color.WHITE), font_size,
            anchor_x=anchor, anchor_y="center",
        )

    # ----------------------------
    # Menu
    # ----------------------------

    def show_menu(self, options: Sequence[str]) -> Optional[str]:
        self.menu_options = tuple(options)
        pick, self._menu_pick = self._menu_pick, None
        return pick

    def menu_key(self, key: int):
        if not self.menu_options:
            return
        if key in (arcade.key.UP, arcade.key.W, arcade.key.K):
            self.menu_cursor = (self.menu_cursor - 1) % len(self.menu_options)
        elif key in (arcade.key.DOWN, arcade.key.S, arcade.key.J):
            self.menu_cursor = (self.menu_cursor + 1) % len(self.menu_options)
        elif key in (arcade.key.ENTER, arcade.key.RETURN, arcade.key.SPACE):
            self._menu_pick = self.menu_options[self.menu_cursor]

    def draw_menu(self, width: float):
        cx = width / 2.0
        top = self.height / 2.0 + 60
        arcade.draw_text("Main Menu", cx, top + 60, arcade.color.WHITE, self.banner_font_size,
                         anchor_x="center", anchor_y="center")
        for i, option in enumerate(self.menu_options):
            label = f"> {option} <" if i == self.menu_cursor else option
            arcade.draw_text(label, cx, top - i * 60, arcade.color.WHITE, self.hud_font_size + 8,
                             anchor_x="center", anchor_y="center")


class ShooterWindow(arcade.Window):
    """Arcade window that samples input and drives the game once per frame"""

    UP_KEYS = (arcade.key.W, arcade.key.K, arcade.key.UP)
    DOWN_KEYS = (arcade.key.S, arcade.key.J, arcade.key.DOWN)
    LEFT_KEYS = (arcade.key.A, arcade.key.H, arcade.key.LEFT)
    RIGHT_KEYS = (arcade.key.D, arcade.key.L, arcade.key.RIGHT)
    PAUSE_KEYS = (arcade.key.ESCAPE, arcade.key.P)
    CONFIRM_KEYS = (arcade.key.SPACE, arcade.key.ENTER, arcade.key.RETURN)

    def __init__(self, game: Game, frontend: ArcadeFrontend, title: str, star_count: int = 120):
        super().__init__(int(game.width), int(game.height), title)
        self.game = game
        self.frontend = frontend
        self.background_color = arcade.color.BLACK

        self._held = set()
        self._fire = False
        self._pause = False
        self._confirm = False

        # Starfield, in window coordinates
        rng = frontend.rng
        self._stars = rng.uniform((0, 0), (game.width, game.height), (star_count, 2))
        self._star_speed = rng.uniform(20.0, 80.0, star_count)

    def _any_held(self, keys) -> bool:
        return any(k in self._held for k in keys)

    def on_key_press(self, key, modifiers):
        self._held.add(key)
        if self.game.state is GameState.MAIN_MENU:
            self.frontend.menu_key(key)
            return
        if key == arcade.key.SPACE:
            self._fire = True
        if key in self.PAUSE_KEYS:
            self._pause = True
        if key in self.CONFIRM_KEYS:
            self._confirm = True

    def on_key_release(self, key, modifiers):
        self._held.discard(key)

    def on_update(self, delta_time: float):
        snapshot = InputSnapshot(
            up=self._any_held(self.UP_KEYS),
            down=self._any_held(self.DOWN_KEYS),
            left=self._any_held(self.LEFT_KEYS),
            right=self._any_held(self.RIGHT_KEYS),
            fire=self._fire,
            pause=self._pause,
            confirm=self._confirm,
        )
        self._fire = self._pause = self._confirm = False

        self.frontend.advance(delta_time)
        self.game.update(delta_time, snapshot)

        # Stars scroll down the screen and skew with the player's strafing
        self._stars[:, 1] -= self._star_speed * delta_time
        self._stars[:, 0] -= self.game.simulation.direction_modifier * delta_time * 10.0
        self._stars[:, 0] %= self.game.width
        self._stars[:, 1] %= self.game.height

        if self.game.quit_requested:
            self.close()

    def on_draw(self):
        self.clear()
        for x, y in self._stars:
            arcade.draw_point(x, y, arcade.color.LIGHT_GRAY, 2)

        self.game.draw()
        if self.game.state is GameState.MAIN_MENU:
            self.frontend.draw_menu(self.game.width)


def make_frontend(height: float, resources: Optional[Resources] = None,
                  seed: Optional[int] = None) -> ArcadeFrontend:
    return ArcadeFrontend(
        height=height,
        resources=resources,
        hud_font_size=FRONTEND_CONFIG["hud_font_size"],
        banner_font_size=FRONTEND_CONFIG["banner_font_size"],
        music_volume=FRONTEND_CONFIG["music_volume"],
        explosion_volume=FRONTEND_CONFIG["explosion_volume"],
        explosion_lifetime=FRONTEND_CONFIG["explosion_lifetime"],
        rng=np.random.default_rng(seed),
    )
