"""
Game configuration
Plain dictionaries splatted into the constructors, overridden from the CLI.
"""

# Core game parameters
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "player_size": 32.0,
    "player_speed": 200.0,     # px/s, bullets fly at twice this
    "bullet_size": 32.0,
    "bullet_offset": 24.0,     # bullets spawn this far above the player
    "highscore_path": "highscore.dat",
}

# ==============================================================================
# ENEMY SPAWNING
# Speed range is scaled by level / 2 at spawn time
# ==============================================================================

SPAWN_CONFIG = {
    "spawn_chance": 5,         # successful outcomes...
    "spawn_outcomes": 100,     # ...out of this many per frame
    "min_size": 16.0,
    "max_size": 64.0,
    "min_speed": 50.0,
    "max_speed": 150.0,
}

# Points needed per level
LEVEL_STEP = 1000

# ==============================================================================
# FRONTEND
# ==============================================================================

FRONTEND_CONFIG = {
    "title": "Space Shooter",
    "hud_font_size": 20,
    "banner_font_size": 40,
    "music_volume": 0.5,
    "explosion_volume": 0.4,
    "explosion_lifetime": 0.6,   # seconds
}

# Asset file names, relative to the assets folder
ASSET_FILES = {
    "textures": {
        "enemy_small": "enemy-small.png",
        "enemy_medium": "enemy-medium.png",
        "enemy_large": "enemy-large.png",
        "bullet": "laser-bolts.png",
        "explosion": "explosion.png",
        "player": "player.png",
    },
    "sounds": {
        "theme": "8bit-spaceshooter.ogg",
        "explosion": "explosion.wav",
        "laser": "laser.wav",
    },
}

# ==============================================================================
# GYMNASIUM ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "width": 800,
    "height": 600,
    "dt": 1 / 60,
    "max_steps": 3600,         # 60s at 60 FPS
    "k_enemies": 5,
    "death_penalty": 100.0,
}
