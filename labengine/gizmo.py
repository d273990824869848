"""Transform gizmo parts and their ray picking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .geometry import Vector3


class GizmoType(IntEnum):
    """Which handle of the transform gizmo a component is."""

    ARROW_X = 0
    ARROW_Y = 1
    ARROW_Z = 2
    CIRCLE_X = 3
    CIRCLE_Y = 4
    CIRCLE_Z = 5
    SCALE_X = 6
    SCALE_Y = 7
    SCALE_Z = 8


@dataclass
class CircleGizmo:
    """A rotation ring lying in the local y = 0 plane with outer radius 1."""

    inner_radius: float = 1.0
    gizmo_type: Optional[GizmoType] = None

    def intersects_ray(self, ray_origin: Vector3, ray_dir: Vector3) -> Optional[float]:
        """Ray parameter where the ray crosses the ring, or None on a miss.

        The crossing point's length is compared with the squared inner radius
        and with 1, as the ring's picking test does.
        """
        if ray_dir.y == 0:
            return None
        dist = -ray_origin.y / ray_dir.y
        point = ray_origin + ray_dir * dist
        length = point.magnitude()
        if self.inner_radius * self.inner_radius < length < 1:
            return dist
        return None