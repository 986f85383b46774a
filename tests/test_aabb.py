import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

UNIT_BOX = AABB(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))


def random_box(rng):
    a = Vector3.random(rng, -10.0, 10.0)
    b = Vector3.random(rng, -10.0, 10.0)
    return AABB(Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
                Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)))


def test_surrounding_box_is_commutative_and_associative(rng):
    for _ in range(50):
        a, b, c = random_box(rng), random_box(rng), random_box(rng)
        assert AABB.surrounding_box(a, b) == AABB.surrounding_box(b, a)
        left = AABB.surrounding_box(AABB.surrounding_box(a, b), c)
        right = AABB.surrounding_box(a, AABB.surrounding_box(b, c))
        assert left == right


def test_surrounding_box_contains_both():
    a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
    b = AABB(Vector3(-2, 0.5, 3), Vector3(-1, 4, 5))
    assert AABB.surrounding_box(a, b) == AABB(Vector3(-2, 0, 0), Vector3(1, 4, 5))


def test_hit_and_miss():
    toward = Ray(Vector3(0.5, 0.5, -5.0), Vector3(0.0, 0.05, 1.0))
    assert UNIT_BOX.hit(toward, 0.001, float("inf"))
    away = Ray(Vector3(0.5, 0.5, -5.0), Vector3(0.0, 0.0, -1.0))
    assert not UNIT_BOX.hit(away, 0.001, float("inf"))
    beside = Ray(Vector3(3.0, 0.5, -5.0), Vector3(0.0, 0.0, 1.0))
    assert not UNIT_BOX.hit(beside, 0.001, float("inf"))


def test_negative_direction():
    ray = Ray(Vector3(5.0, 0.5, 0.5), Vector3(-1.0, 0.0, 0.0))
    assert UNIT_BOX.hit(ray, 0.001, float("inf"))


def test_interval_limits_are_respected():
    ray = Ray(Vector3(0.5, 0.5, -5.0), Vector3(0.0, 0.0, 1.0))
    assert not UNIT_BOX.hit(ray, 0.001, 4.0)
    assert UNIT_BOX.hit(ray, 0.001, 5.5)


@pytest.mark.parametrize("origin_x", [0.0, 1.0, 0.5])
def test_axis_parallel_ray_on_boundary_plane_hits(origin_x):
    ray = Ray(Vector3(origin_x, 0.5, -1.0), Vector3(0.0, 0.0, 1.0))
    assert UNIT_BOX.hit(ray, 0.001, float("inf"))


def test_axis_parallel_ray_outside_slab_misses():
    ray = Ray(Vector3(-0.1, 0.5, -1.0), Vector3(0.0, 0.0, 1.0))
    assert not UNIT_BOX.hit(ray, 0.001, float("inf"))


def test_flat_padded_box_is_hit():
    flat = AABB(Vector3(0.0, 0.0, -0.0001), Vector3(1.0, 1.0, 0.0001))
    ray = Ray(Vector3(0.5, 0.5, 3.0), Vector3(0.0, 0.0, -1.0))
    assert flat.hit(ray, 0.001, float("inf"))
