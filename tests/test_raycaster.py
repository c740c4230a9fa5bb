import itertools
import math

import pytest
from pygame.math import Vector2

from engine import (Player, Ray, Raycaster, make_boundary, make_ray, intersect,
                    luminosity, resolve_nearest_hit, draw_ray)
from utils.colors import COLOR_RAY
from utils.constants import AMBIENT_LUMINOSITY, UNBOUNDED_RAY_LENGTH


def test_ray_straight_ahead_hits_right_wall(centred_player, square_boundaries):
    ray = make_ray(centred_player, 0.0)
    right = square_boundaries[2]

    point, lam, lum = intersect(ray, right)

    assert point == Vector2(100, 50)
    assert lam == pytest.approx(50.0)
    assert lum == pytest.approx(5000 / 10 ** 2 + 0.2)


def test_nearest_hit_in_square_arena(centred_player, square_boundaries):
    hit = resolve_nearest_hit(make_ray(centred_player, 0.0), square_boundaries)

    assert hit.point == Vector2(100, 50)
    assert hit.length == pytest.approx(50.0)
    assert hit.luminosity == pytest.approx(50.2)


def test_parallel_ray_is_no_hit():
    boundary = make_boundary((0, 10), (100, 10))
    ray = Ray(origin=Vector2(0, 0), dir=Vector2(1, 0))
    assert intersect(ray, boundary) is None


def test_collinear_ray_is_no_hit():
    boundary = make_boundary((0, 0), (100, 0))
    ray = Ray(origin=Vector2(-10, 0), dir=Vector2(1, 0))
    assert intersect(ray, boundary) is None


def test_hit_behind_ray_is_rejected(centred_player, square_boundaries):
    left = square_boundaries[0]
    assert intersect(make_ray(centred_player, 0.0), left) is None


def test_on_boundary_line_but_outside_segment_is_no_hit():
    boundary = make_boundary((0, 0), (100, 0))
    player = Player(pos=(150, 0), look_dir=(0, 1))
    assert intersect(make_ray(player, 0.0), boundary) is None


def test_segment_end_is_exclusive():
    boundary = make_boundary((0, -10), (0, 10))
    at_start = Ray(origin=Vector2(-5, -10), dir=Vector2(1, 0))
    at_end = Ray(origin=Vector2(-5, 10), dir=Vector2(1, 0))

    assert intersect(at_start, boundary) is not None
    assert intersect(at_end, boundary) is None


@pytest.mark.parametrize("angle", [i * 0.1 for i in range(63)])
def test_valid_hits_lie_on_segment_and_in_front(angle, square_boundaries):
    player = Player(pos=(30, 70), look_dir=(1, 0))
    ray = make_ray(player, angle)
    for boundary in square_boundaries:
        found = intersect(ray, boundary)
        if found is None:
            continue
        point, lam, _ = found
        k = (point - boundary.origin).dot(boundary.dir)
        assert lam >= 0
        assert -1e-9 <= k < boundary.length
        assert (point - ray.origin).dot(ray.dir) == pytest.approx(lam)


def test_every_ray_in_closed_arena_hits_something(square_boundaries):
    player = Player(pos=(20, 40), look_dir=(0, 1))
    for i in range(360):
        hit = resolve_nearest_hit(make_ray(player, math.radians(i)), square_boundaries)
        assert hit is not None


def test_no_boundaries_means_no_hit(centred_player):
    assert resolve_nearest_hit(make_ray(centred_player, 0.3), []) is None


def test_nearest_hit_prefers_closer_inner_wall(centred_player, square_boundaries):
    inner = make_boundary((70, 0), (70, 100))
    hit = resolve_nearest_hit(make_ray(centred_player, 0.0), square_boundaries + [inner])

    assert hit.point == Vector2(70, 50)
    assert hit.length == pytest.approx(20.0)


@pytest.mark.parametrize("angle", [0.0, 0.4, -0.9, 2.5])
def test_nearest_hit_is_order_independent(angle, centred_player, square_boundaries):
    walls = square_boundaries + [
        make_boundary((70, 0), (70, 100)),
        make_boundary((20, 80), (90, 20)),
    ]
    ray = make_ray(centred_player, angle)
    expected = resolve_nearest_hit(ray, walls)

    for order in itertools.permutations(walls):
        hit = resolve_nearest_hit(ray, order)
        assert hit.length == pytest.approx(expected.length)
        assert hit.point.distance_to(expected.point) == pytest.approx(0.0, abs=1e-9)


def test_luminosity_is_non_increasing_with_distance():
    values = [luminosity(lam) for lam in (0.5, 1, 5, 10, 50, 100, 1000, 1e6)]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_luminosity_approaches_ambient_floor():
    assert luminosity(1e9) == pytest.approx(AMBIENT_LUMINOSITY)
    assert luminosity(1e9) > AMBIENT_LUMINOSITY


def test_luminosity_at_zero_distance_is_infinite():
    assert luminosity(0.0) == math.inf


def test_make_ray_rotates_and_normalizes_look_dir():
    player = Player(pos=(1, 2), look_dir=(1, 0))
    ray = make_ray(player, math.pi / 2)

    assert ray.origin == Vector2(1, 2)
    assert ray.dir.x == pytest.approx(0.0, abs=1e-12)
    assert ray.dir.y == pytest.approx(1.0)
    assert ray.dir.length() == pytest.approx(1.0)


def test_make_ray_does_not_alias_player_position():
    player = Player(pos=(1, 2))
    ray = make_ray(player, 0.0)
    player.pos.x = 50
    assert ray.origin == Vector2(1, 2)


def test_draw_ray_to_hit_point(surface, centred_player, square_boundaries):
    ray = make_ray(centred_player, 0.0)
    draw_ray(surface, ray, resolve_nearest_hit(ray, square_boundaries))

    (call,) = surface.of_kind('line')
    assert call[1] == (50.0, 50.0)
    assert call[2] == (100.0, 50.0)
    assert call[4] == COLOR_RAY


def test_draw_ray_without_hit_is_unbounded(surface, centred_player):
    ray = make_ray(centred_player, 0.0)
    draw_ray(surface, ray, None)

    (call,) = surface.of_kind('line')
    assert call[2] == (50.0 + UNBOUNDED_RAY_LENGTH, 50.0)


@pytest.mark.parametrize("pos,look", [
    ((50, 50), (1, 0)),
    ((10, 90), (0.3, -0.7)),
    ((99, 1), (-1, 1)),
])
def test_jit_cast_matches_scalar_cast(pos, look, square_boundaries):
    walls = square_boundaries + [make_boundary((60, 10), (60, 80))]
    player = Player(pos=pos, look_dir=look)
    angles = [i * 0.01 - 0.5 for i in range(101)]

    scalar = Raycaster(use_jit=False).cast_all_rays(player, angles, walls)
    batch = Raycaster(use_jit=True).cast_all_rays(player, angles, walls)

    assert len(scalar) == len(batch) == len(angles)
    for (ray_a, hit_a), (ray_b, hit_b) in zip(scalar, batch):
        assert ray_a == ray_b
        assert (hit_a is None) == (hit_b is None)
        if hit_a is not None:
            assert hit_b.length == pytest.approx(hit_a.length)
            assert hit_b.point.x == pytest.approx(hit_a.point.x)
            assert hit_b.point.y == pytest.approx(hit_a.point.y)
            assert hit_b.luminosity == pytest.approx(hit_a.luminosity)


def test_jit_cast_reports_misses():
    wall = make_boundary((10, -5), (10, 5))
    player = Player(pos=(0, 0), look_dir=(-1, 0))

    cast = Raycaster(use_jit=True).cast_all_rays(player, [0.0, 0.1], [wall])

    assert [hit for _, hit in cast] == [None, None]


def test_jit_cast_with_no_boundaries():
    cast = Raycaster(use_jit=True).cast_all_rays(Player(), [0.0], [])
    assert cast[0][1] is None


def test_jit_cast_sees_boundaries_added_between_frames(centred_player, square_boundaries):
    walls = list(square_boundaries)
    raycaster = Raycaster(use_jit=True)

    _, hit = raycaster.cast_all_rays(centred_player, [0.0], walls)[0]
    assert hit.length == pytest.approx(50.0)

    walls.append(make_boundary((70, 0), (70, 100)))
    _, hit = raycaster.cast_all_rays(centred_player, [0.0], walls)[0]
    assert hit.length == pytest.approx(20.0)

    walls.pop()
    _, hit = raycaster.cast_all_rays(centred_player, [0.0], walls)[0]
    assert hit.length == pytest.approx(50.0)
