import pytest

from labengine.geometry import Vector3
from labengine.gizmo import CircleGizmo, GizmoType


def test_ray_through_ring_returns_parameter():
    ring = CircleGizmo(inner_radius=0.5)
    origin = Vector3(0.7, 5.0, 0.0)
    direction = Vector3(0.0, -1.0, 0.0)
    dist = ring.intersects_ray(origin, direction)
    assert dist == pytest.approx(origin.y)
    hit = origin + direction * dist
    assert hit.y == pytest.approx(0.0)


def test_ray_parallel_to_plane_misses():
    ring = CircleGizmo(inner_radius=0.5)
    assert ring.intersects_ray(Vector3(0.7, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)) is None


def test_ray_through_hole_misses():
    ring = CircleGizmo(inner_radius=0.5)
    assert ring.intersects_ray(Vector3(0.0, 2.0, 0.0), Vector3(0.0, -1.0, 0.0)) is None


def test_ray_outside_ring_misses():
    ring = CircleGizmo(inner_radius=0.5)
    assert ring.intersects_ray(Vector3(3.0, 2.0, 0.0), Vector3(0.0, -1.0, 0.0)) is None


def test_default_inner_radius_never_hits():
    ring = CircleGizmo()
    assert ring.inner_radius == 1.0
    for x in (0.0, 0.5, 0.9, 1.5):
        assert ring.intersects_ray(Vector3(x, 1.0, 0.0), Vector3(0.0, -1.0, 0.0)) is None


def test_oblique_ray_hit_lies_in_plane_within_ring():
    ring = CircleGizmo(inner_radius=0.3, gizmo_type=GizmoType.CIRCLE_Y)
    origin = Vector3(-1.0, 2.0, 0.5)
    direction = Vector3(0.8, -2.0, -0.2)
    dist = ring.intersects_ray(origin, direction)
    hit = origin + direction * dist
    assert hit.y == pytest.approx(0.0)
    assert ring.inner_radius ** 2 < hit.magnitude() < 1
    assert ring.gizmo_type is GizmoType.CIRCLE_Y