from __future__ import annotations

from pytest import approx

from flocking.sim.core.bounds import WorldBounds
from flocking.sim.systems.motion import advance, limit_velocity, wrap_position

BOUNDS = WorldBounds(min_x=-100.0, max_x=100.0, min_y=-50.0, max_y=50.0)


def test_wrap_teleports_to_opposite_edge(make_boid):
    past_right = make_boid(100.0 + 1e-6, 0.0)
    past_left = make_boid(-100.5, 0.0)
    past_top = make_boid(0.0, 51.0)
    past_bottom = make_boid(0.0, -50.0001)

    for boid in (past_right, past_left, past_top, past_bottom):
        wrap_position(boid, BOUNDS)

    assert past_right.position.x == -100.0
    assert past_left.position.x == 100.0
    assert past_top.position.y == -50.0
    assert past_bottom.position.y == 50.0


def test_wrap_handles_both_axes(make_boid):
    boid = make_boid(150.0, -60.0)

    wrap_position(boid, BOUNDS)

    assert (boid.position.x, boid.position.y) == (-100.0, 50.0)


def test_wrap_leaves_inside_and_edge_positions(make_boid):
    inside = make_boid(12.5, -7.25)
    on_edge = make_boid(100.0, -50.0)

    wrap_position(inside, BOUNDS)
    wrap_position(on_edge, BOUNDS)

    assert (inside.position.x, inside.position.y) == (12.5, -7.25)
    assert (on_edge.position.x, on_edge.position.y) == (100.0, -50.0)


def test_limit_velocity_clamps_only_fast_boids(make_boid):
    fast = make_boid(0.0, 0.0, vx=30.0, vy=40.0)
    slow = make_boid(0.0, 0.0, vx=3.0, vy=4.0)

    limit_velocity(fast, 10.0)
    limit_velocity(slow, 10.0)

    assert fast.velocity.length() == approx(10.0)
    assert fast.velocity.x == approx(6.0)
    assert fast.velocity.y == approx(8.0)
    assert (slow.velocity.x, slow.velocity.y) == (3.0, 4.0)


def test_advance_is_euler_step(make_boid):
    boid = make_boid(1.0, 2.0, vx=0.5, vy=-1.5)

    advance(boid)

    assert boid.position.x == approx(1.5)
    assert boid.position.y == approx(0.5)
    assert (boid.velocity.x, boid.velocity.y) == (0.5, -1.5)
