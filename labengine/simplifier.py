"""Quadric-error mesh simplification by repeated edge collapse."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set, Tuple

from .geometry import Vector3
from .meshdata import ObjInfo

_QUADRIC_SIZE = 10

Triangle = Tuple[int, int, int]
Edge = Tuple[int, int]


@dataclass
class Quadric:
    """Upper triangle of a symmetric 4x4 plane-distance error matrix.

    The ten entries are, in order: xx, xy, xz, xd, yy, yz, yd, zz, zd, dd.
    """

    data: List[float] = field(default_factory=lambda: [0.0] * _QUADRIC_SIZE)

    def __post_init__(self) -> None:
        self.data = [float(value) for value in self.data]
        if len(self.data) != _QUADRIC_SIZE:
            raise ValueError(f"a quadric holds {_QUADRIC_SIZE} values, got {len(self.data)}")

    @classmethod
    def from_plane(cls, normal: Vector3, d: float) -> Quadric:
        """Quadric of the plane ``normal . p + d = 0``."""
        nx, ny, nz = normal
        return cls(
            [
                nx * nx, nx * ny, nx * nz, nx * d,
                ny * ny, ny * nz, ny * d,
                nz * nz, nz * d,
                d * d,
            ]
        )

    def add(self, other: Quadric) -> None:
        """Accumulate another quadric into this one."""
        self.data = [mine + theirs for mine, theirs in zip(self.data, other.data)]


def compute_collapse_cost(q1: Quadric, q2: Quadric, new_pos: Vector3) -> float:
    """Error of placing the merged vertex at ``new_pos``: p^T (Q1 + Q2) p."""
    q = Quadric(list(q1.data))
    q.add(q2)
    a = q.data
    x, y, z = new_pos
    return (
        a[0] * x * x + 2.0 * a[1] * x * y + 2.0 * a[2] * x * z + 2.0 * a[3] * x
        + a[4] * y * y + 2.0 * a[5] * y * z + 2.0 * a[6] * y
        + a[7] * z * z + 2.0 * a[8] * z
        + a[9]
    )


def _triangles(indices: Sequence[int]) -> List[Triangle]:
    """Complete index triples; a trailing partial triple is ignored."""
    it = iter(indices)
    return list(zip(it, it, it))


def _vertex_quadrics(obj: ObjInfo) -> List[Quadric]:
    quadrics = [Quadric() for _ in obj.vertices]
    for v0, v1, v2 in _triangles(obj.vertex_indices):
        p0, p1, p2 = obj.vertices[v0], obj.vertices[v1], obj.vertices[v2]
        normal = (p1 - p0).cross(p2 - p0).normalized()
        plane = Quadric.from_plane(normal, -normal.dot(p0))
        for corner in (v0, v1, v2):
            quadrics[corner].add(plane)
    return quadrics


def _edges(triangles: Iterable[Triangle]) -> Set[Edge]:
    edges: Set[Edge] = set()
    for triangle in triangles:
        for start, end in zip(triangle, triangle[1:] + triangle[:1]):
            edges.add((min(start, end), max(start, end)))
    return edges


def _collapse_queue(obj: ObjInfo, quadrics: List[Quadric], edges: Set[Edge]) -> List[Tuple[float, int, int]]:
    queue = []
    for low, high in edges:
        midpoint = (obj.vertices[low] + obj.vertices[high]) * 0.5
        cost = compute_collapse_cost(quadrics[low], quadrics[high], midpoint)
        queue.append((cost, low, high))
    heapq.heapify(queue)
    return queue


def _drop_degenerate_faces(obj: ObjInfo) -> None:
    """Remove faces with a repeated vertex from all three index lists."""
    whole = len(obj.vertex_indices) // 3 * 3
    keep = [len(set(tri)) == 3 for tri in _triangles(obj.vertex_indices)]
    for seq in (obj.vertex_indices, obj.normal_indices, obj.texture_indices):
        kept = [
            index
            for tri, wanted in zip(_triangles(seq[:whole]), keep)
            if wanted
            for index in tri
        ]
        seq[:] = kept + seq[whole:]


def simplify(obj: ObjInfo, target_vertex_count: int) -> None:
    """Collapse edges of ``obj`` in place until it has at most the target vertex count.

    The cheapest edge by quadric error at its midpoint goes first. Its higher
    vertex is removed and references to it move to the lower one; faces that
    become degenerate are dropped and all costs are recomputed. Stops early
    when no edge is left. A negative target leaves the mesh untouched.
    """
    if target_vertex_count < 0:
        return
    lengths = {len(obj.vertex_indices), len(obj.normal_indices), len(obj.texture_indices)}
    if len(lengths) != 1:
        raise ValueError("vertex, normal and texture index lists differ in length")

    quadrics = _vertex_quadrics(obj)
    queue = _collapse_queue(obj, quadrics, _edges(_triangles(obj.vertex_indices)))

    while len(obj.vertices) > target_vertex_count and queue:
        _, keep, drop = heapq.heappop(queue)
        del obj.vertices[drop]
        obj.vertex_indices[:] = [
            keep if index == drop else index - 1 if index > drop else index
            for index in obj.vertex_indices
        ]
        _drop_degenerate_faces(obj)
        quadrics = _vertex_quadrics(obj)
        queue = _collapse_queue(obj, quadrics, _edges(_triangles(obj.vertex_indices)))