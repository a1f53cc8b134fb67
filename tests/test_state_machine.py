from space_shooter.entities import InputSnapshot, Shape
from space_shooter.frontend import SOUND_LASER, SOUND_THEME
from space_shooter.highscore import HighScoreStore
from space_shooter.state_machine import Command, Game, GameState, MENU_PLAY, MENU_QUIT

IDLE = InputSnapshot()


def start(game):
    game.handle(Command.START)
    assert game.state is GameState.PLAYING


def test_starts_in_main_menu_and_plays_theme(game, frontend):
    assert game.state is GameState.MAIN_MENU
    assert ("play_sound", SOUND_THEME) in frontend.calls


def test_menu_play_starts_session(game, frontend):
    frontend.menu_pick = MENU_PLAY
    game.update(1 / 60, IDLE)
    assert game.state is GameState.PLAYING


def test_menu_quit_requests_exit(game, frontend):
    frontend.menu_pick = MENU_QUIT
    game.update(1 / 60, IDLE)
    assert game.quit_requested
    assert game.state is GameState.MAIN_MENU


def test_quit_ignored_outside_main_menu(game):
    start(game)
    game.handle(Command.QUIT)
    assert not game.quit_requested
    assert game.state is GameState.PLAYING


def test_invalid_commands_are_ignored(game):
    assert game.handle(Command.PAUSE) is GameState.MAIN_MENU
    assert game.handle(Command.RESUME) is GameState.MAIN_MENU
    assert game.handle(Command.ACKNOWLEDGE) is GameState.MAIN_MENU
    start(game)
    assert game.handle(Command.START) is GameState.PLAYING
    assert game.handle(Command.ACKNOWLEDGE) is GameState.PLAYING


def test_start_resets_session(game):
    start(game)
    sim = game.simulation
    sim.score, sim.level = 1500, 2
    sim.enemies.append(Shape(x=10, y=10, size=20.0, speed=0.0))
    sim.player.x = 10.0
    game.state = GameState.MAIN_MENU

    start(game)
    assert sim.score == 0 and sim.level == 1
    assert sim.enemies == [] and sim.bullets == [] and sim.explosions == []
    assert sim.player.position == (400.0, 300.0)


def test_pause_and_resume_via_input(game):
    start(game)
    game.update(1 / 60, InputSnapshot(pause=True))
    assert game.state is GameState.PAUSED

    game.update(1 / 60, InputSnapshot(pause=True))
    assert game.state is GameState.PLAYING


def test_fire_while_paused_does_nothing(game):
    start(game)
    game.handle(Command.PAUSE)

    result = game.update(1 / 60, InputSnapshot(fire=True))

    assert result is None
    assert game.simulation.bullets == []
    assert game.state is GameState.PAUSED


def test_paused_world_does_not_move(game):
    start(game)
    game.simulation.enemies.append(Shape(x=100, y=50, size=20.0, speed=100.0))
    game.handle(Command.PAUSE)
    game.update(1.0, InputSnapshot(right=True))
    assert game.simulation.enemies[0].y == 50
    assert game.simulation.player.x == 400.0


def test_fire_plays_laser(game, frontend):
    start(game)
    game.update(0.0, InputSnapshot(fire=True))
    assert len(game.simulation.bullets) == 1
    assert ("play_sound_once", SOUND_LASER) in frontend.calls


def test_hit_dispatches_explosion(game, frontend):
    start(game)
    sim = game.simulation
    sim.enemies.append(Shape(x=100, y=100, size=16.0, speed=0.0))
    sim.bullets.append(Shape(x=100, y=100, size=32.0, speed=0.0))

    game.update(0.0, IDLE)

    assert frontend.named("explosion") == [("explosion", (100, 100), 64)]
    assert ("play_sound_once", "explosion") in frontend.calls
    assert len(sim.explosions) == 1
    assert sim.explosions[0][1] == (100, 100)


def test_enemy_on_player_ends_game_and_saves(game, store):
    start(game)
    sim = game.simulation
    sim.player.x, sim.player.y = 100.0, 100.0
    sim.enemies.append(Shape(x=100, y=100, size=32.0, speed=0.0))

    result = game.update(0.0, IDLE)

    assert result.game_over
    assert game.state is GameState.GAME_OVER
    # 0 >= 0 counts as a record
    assert store.load() == 0
    with open(store.path) as f:
        assert f.read() == "0"


def end_session(game, score):
    sim = game.simulation
    sim.score = score
    sim.high_score = max(sim.high_score, score)
    sim.enemies.append(Shape(x=sim.player.x, y=sim.player.y, size=32.0, speed=0.0))
    game.update(0.0, IDLE)
    assert game.state is GameState.GAME_OVER


def make_game(store, frontend, quiet_spawner):
    return Game(store=store, frontend=frontend, spawner=quiet_spawner)


def test_lower_score_is_not_saved(store, frontend, quiet_spawner):
    store.save(50)
    game = make_game(store, frontend, quiet_spawner)
    assert game.high_score == 50

    start(game)
    end_session(game, 30)
    assert store.load() == 50


def test_tie_is_saved(store, frontend, quiet_spawner, monkeypatch):
    store.save(50)
    game = make_game(store, frontend, quiet_spawner)
    saved = []
    monkeypatch.setattr(store, "save", lambda value: saved.append(value) or True)

    start(game)
    end_session(game, 50)
    assert saved == [50]


def test_new_record_saved_once(store, frontend, quiet_spawner, monkeypatch):
    store.save(50)
    game = make_game(store, frontend, quiet_spawner)
    saved = []
    monkeypatch.setattr(store, "save", lambda value: saved.append(value) or True)

    start(game)
    end_session(game, 120)
    game.update(0.0, IDLE)
    game.update(0.0, IDLE)
    assert saved == [120]


def test_failed_save_does_not_stop_game(tmp_path, frontend, quiet_spawner):
    store = HighScoreStore(str(tmp_path))  # a directory, cannot be written as a file
    game = make_game(store, frontend, quiet_spawner)
    start(game)
    end_session(game, 10)
    assert game.state is GameState.GAME_OVER


def test_acknowledge_returns_to_menu(game):
    start(game)
    end_session(game, 0)

    game.update(0.0, InputSnapshot(fire=True))
    assert game.state is GameState.GAME_OVER

    game.update(0.0, InputSnapshot(confirm=True))
    assert game.state is GameState.MAIN_MENU


def test_high_score_survives_sessions(game):
    start(game)
    end_session(game, 300)
    game.handle(Command.ACKNOWLEDGE)
    start(game)
    assert game.score == 0
    assert game.high_score == 300


def test_draw_while_playing(game, frontend):
    start(game)
    game.simulation.enemies.append(Shape(x=100, y=50, size=40.0, speed=0.0))
    game.draw()

    kinds = [c[3] for c in frontend.named("draw_entity")]
    texts = [c[1] for c in frontend.named("draw_text")]
    assert kinds == ["enemy_medium", "player_idle"]
    assert texts == ["Score: 0", "High Score: 0"]


def test_draw_overlays(game, frontend):
    start(game)
    game.handle(Command.PAUSE)
    game.draw()
    assert frontend.named("draw_text")[-1] == ("draw_text", "Paused")
    assert frontend.named("draw_entity") == []

    game.handle(Command.RESUME)
    end_session(game, 0)
    game.draw()
    assert frontend.named("draw_text")[-1] == ("draw_text", "GAME OVER!")


def test_banner_text_sizes_reach_frontend(game, frontend):
    start(game)
    game.draw()
    assert frontend.font_sizes["Score: 0"] == 25

    game.handle(Command.PAUSE)
    game.draw()
    assert frontend.font_sizes["Paused"] == 50
