import numpy as np

from space_shooter.frontend import ExplosionBurst, Frontend


def test_burst_stops_emitting_after_lifetime():
    burst = ExplosionBurst(40, lifetime=0.6, rng=np.random.default_rng(0))
    assert burst.emitting
    assert len(burst.live_particles()) == 40

    burst.update(0.3)
    assert burst.emitting
    burst.update(0.31)
    assert not burst.emitting
    assert len(burst.live_particles()) == 0


def test_burst_particles_move_outwards():
    burst = ExplosionBurst(10, rng=np.random.default_rng(1))
    burst.update(0.05)
    distances = np.linalg.norm(burst.live_particles(), axis=1)
    assert np.all(distances > 0)
    assert np.all((burst.particle_alpha() >= 0) & (burst.particle_alpha() <= 1))


def test_headless_frontend_ages_effects():
    fe = Frontend(explosion_lifetime=0.1)
    burst = fe.spawn_explosion_effect((10.0, 10.0), 8)
    fe.advance(0.05)
    assert burst.emitting
    fe.advance(0.06)
    assert not burst.emitting
    assert fe.show_menu(["Play", "Quit"]) is None


def test_seeded_frontend_bursts_are_reproducible():
    a = Frontend(rng=np.random.default_rng(5)).spawn_explosion_effect((0.0, 0.0), 16)
    b = Frontend(rng=np.random.default_rng(5)).spawn_explosion_effect((0.0, 0.0), 16)
    assert np.array_equal(a.velocities, b.velocities)
    assert np.array_equal(a.lifetimes, b.lifetimes)
