from space_shooter.highscore import HighScoreStore
from space_shooter.state_machine import Game


def test_missing_file_loads_zero(tmp_path):
    assert HighScoreStore(str(tmp_path / "nope.dat")).load() == 0


def test_round_trip(tmp_path):
    path = str(tmp_path / "highscore.dat")
    assert HighScoreStore(path).save(4321)
    assert HighScoreStore(path).load() == 4321


def test_file_holds_plain_decimal(tmp_path):
    path = tmp_path / "highscore.dat"
    HighScoreStore(str(path)).save(77)
    assert path.read_text() == "77"


def test_corrupt_file_loads_zero(tmp_path):
    path = tmp_path / "highscore.dat"
    path.write_text("not a number")
    assert HighScoreStore(str(path)).load() == 0

    path.write_text("-5")
    assert HighScoreStore(str(path)).load() == 0


def test_write_failure_is_swallowed(tmp_path):
    store = HighScoreStore(str(tmp_path))
    assert store.save(10) is False


def test_unreadable_slot_loads_zero(tmp_path):
    assert HighScoreStore(str(tmp_path)).load() == 0


def test_no_path_persists_nothing():
    store = HighScoreStore(None)
    assert store.save(10) is False
    assert store.load() == 0


def test_undecodable_file_loads_zero(tmp_path):
    path = tmp_path / "highscore.dat"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert HighScoreStore(str(path)).load() == 0


def test_game_starts_with_undecodable_file(tmp_path):
    path = tmp_path / "highscore.dat"
    path.write_bytes(b"\x80")
    game = Game(highscore_path=str(path))
    assert game.high_score == 0
