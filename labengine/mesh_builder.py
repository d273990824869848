"""Cooking raw OBJ data into renderable static meshes."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from .geometry import Vector3
from .meshdata import ObjInfo, StaticMeshRenderData, VertexSimple
from .obj_parser import MISSING_INDEX

FLT_MAX = 3.4028234663852886e38
"""Largest finite single-precision float; seeds an empty bounding box."""


def _material_slot(mesh: StaticMeshRenderData, position: int) -> int:
    for subset in mesh.material_subsets:
        if subset.index_start <= position < subset.index_start + subset.index_count:
            return subset.material_index
    return 0


def convert_to_static_mesh(raw: ObjInfo, mesh: StaticMeshRenderData) -> StaticMeshRenderData:
    """Build unique vertices and an index list from ``raw`` into ``mesh``.

    Corners sharing the same vertex/texture/normal triple become one vertex.
    Texture V is flipped. The mesh's material subsets decide each new
    vertex's material slot. The bounding box is recomputed. Returns ``mesh``.
    """
    counts = {
        len(raw.vertex_indices),
        len(raw.texture_indices),
        len(raw.normal_indices),
    }
    if len(counts) != 1:
        raise ValueError("vertex, texture and normal index lists differ in length")

    mesh.object_name = raw.object_name
    mesh.path_name = raw.path_name
    mesh.display_name = raw.display_name

    seen: Dict[Tuple[int, int, int], int] = {}
    corners = zip(raw.vertex_indices, raw.texture_indices, raw.normal_indices)
    for position, key in enumerate(corners):
        index = seen.get(key)
        if index is None:
            v_idx, t_idx, n_idx = key
            point = raw.vertices[v_idx]
            vertex = VertexSimple(x=point.x, y=point.y, z=point.z, r=1.0, g=1.0, b=1.0, a=1.0)
            if t_idx != MISSING_INDEX and t_idx < len(raw.uvs):
                uv = raw.uvs[t_idx]
                vertex.u = uv.x
                vertex.v = -uv.y
            if n_idx != MISSING_INDEX and n_idx < len(raw.normals):
                normal = raw.normals[n_idx]
                vertex.nx, vertex.ny, vertex.nz = normal.x, normal.y, normal.z
            vertex.material_index = _material_slot(mesh, position)
            index = len(mesh.vertices)
            mesh.vertices.append(vertex)
            seen[key] = index
        mesh.indices.append(index)

    mesh.bounding_box_min, mesh.bounding_box_max = compute_bounding_box(mesh.vertices)
    return mesh


def compute_bounding_box(vertices: Iterable[VertexSimple]) -> Tuple[Vector3, Vector3]:
    """Smallest and largest corner of the box around the vertices.

    With no vertices the box is inverted: (FLT_MAX, ...) to (-FLT_MAX, ...).
    """
    low = [FLT_MAX] * 3
    high = [-FLT_MAX] * 3
    for vertex in vertices:
        for axis, value in enumerate((vertex.x, vertex.y, vertex.z)):
            low[axis] = min(low[axis], value)
            high[axis] = max(high[axis], value)
    return Vector3(*low), Vector3(*high)


def combine_material_index(mesh: StaticMeshRenderData) -> None:
    """Point each material subset at the first material of the same name."""
    for subset in mesh.material_subsets:
        for slot, material in enumerate(mesh.materials):
            if material.mtl_name == subset.material_name:
                subset.material_index = slot
                break