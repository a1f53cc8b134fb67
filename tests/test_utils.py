from space_shooter.entities import Shape, enemy_sprite_kind
from space_shooter.utils import clamp, rects_overlap, round_half_up


def test_clamp():
    assert clamp(-5.0, 0.0, 10.0) == 0.0
    assert clamp(15.0, 0.0, 10.0) == 10.0
    assert clamp(3.0, 0.0, 10.0) == 3.0


def test_rects_overlap_touching_edges_count():
    assert rects_overlap((0, 0, 10, 10), (10, 0, 10, 10))
    assert not rects_overlap((0, 0, 10, 10), (10.5, 0, 10, 10))
    assert rects_overlap((0, 0, 10, 10), (2, 2, 2, 2))


def test_round_half_up():
    assert round_half_up(10.5) == 11
    assert round_half_up(10.49) == 10
    assert round_half_up(16.0) == 16
    assert round_half_up(-2.5) == -3


def test_shape_rect_is_centred():
    s = Shape(x=100.0, y=50.0, size=20.0, speed=0.0)
    assert s.rect() == (90.0, 40.0, 20.0, 20.0)
    assert s.position == (100.0, 50.0)


def test_enemy_sprite_tiers():
    assert enemy_sprite_kind(16.0) == "enemy_small"
    assert enemy_sprite_kind(31.9) == "enemy_small"
    assert enemy_sprite_kind(32.0) == "enemy_medium"
    assert enemy_sprite_kind(47.9) == "enemy_medium"
    assert enemy_sprite_kind(48.0) == "enemy_large"
    assert enemy_sprite_kind(64.0) == "enemy_large"
