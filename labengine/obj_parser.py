"""Reading Wavefront OBJ geometry and MTL material files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence, Union

from .geometry import Vector2, Vector3
from .meshdata import MaterialSubset, ObjInfo, ObjMaterialInfo, StaticMeshRenderData

MISSING_INDEX = 0xFFFFFFFF
"""Index stored when a face corner has no texture or normal reference."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = Union[str, Path]


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid index {text!r}")
    return int(match.group(1))


def _parse_floats(tokens: Sequence[str], count: int) -> List[float]:
    """Read up to ``count`` numbers; anything missing or unreadable is 0."""
    values: List[float] = []
    for token in tokens[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (count - len(values)))
    return values


def _face_index(piece: str) -> int:
    return (_parse_int(piece) - 1) & 0xFFFFFFFF


def _lines(path: PathLike):
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            line = line.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            tokens = line.split()
            if tokens:
                yield tokens[0], tokens[1:]


def _close_last_subset(info: ObjInfo) -> None:
    if info.material_subsets:
        last = info.material_subsets[-1]
        last.index_count = len(info.vertex_indices) - last.index_start


def parse_obj(path: PathLike) -> ObjInfo:
    """Read an OBJ file into raw mesh data.

    Quads are split into two triangles; faces with other corner counts are
    skipped. Raises OSError if the file cannot be opened.
    """
    text_path = str(path)
    cut = max(text_path.rfind("\\"), text_path.rfind("/")) + 1
    info = ObjInfo(path_name=text_path[:cut], object_name=text_path[cut:])
    dot = info.object_name.rfind(".")
    info.display_name = info.object_name[:dot] if dot != -1 else info.object_name

    for token, rest in _lines(path):
        if token == "mtllib":
            info.mat_name = rest[0] if rest else ""
        elif token == "usemtl":
            _close_last_subset(info)
            info.material_subsets.append(
                MaterialSubset(
                    material_name=rest[0] if rest else "",
                    index_start=len(info.vertex_indices),
                    index_count=0,
                )
            )
        elif token in ("g", "o"):
            info.group_name.append(rest[0] if rest else "")
            info.num_of_group += 1
        elif token == "v":
            info.vertices.append(Vector3(*_parse_floats(rest, 3)))
        elif token == "vn":
            info.normals.append(Vector3(*_parse_floats(rest, 3)))
        elif token == "vt":
            info.uvs.append(Vector2(*_parse_floats(rest, 2)))
        elif token == "f":
            _parse_face(info, rest)

    _close_last_subset(info)
    return info


def _parse_face(info: ObjInfo, corners: Sequence[str]) -> None:
    vertex_ids: List[int] = []
    texture_ids: List[int] = []
    normal_ids: List[int] = []
    for corner in corners:
        pieces = corner.split("/")
        vertex_ids.append(_face_index(pieces[0]) if pieces[0] else 0)
        texture_ids.append(
            _face_index(pieces[1]) if len(pieces) > 1 and pieces[1] else MISSING_INDEX
        )
        normal_ids.append(
            _face_index(pieces[2]) if len(pieces) > 2 and pieces[2] else MISSING_INDEX
        )

    if len(vertex_ids) == 4:
        order = (0, 1, 2, 0, 2, 3)
    elif len(vertex_ids) == 3:
        order = (0, 1, 2)
    else:
        return
    info.vertex_indices.extend(vertex_ids[i] for i in order)
    info.texture_indices.extend(texture_ids[i] for i in order)
    info.normal_indices.extend(normal_ids[i] for i in order)


def parse_material(obj_info: ObjInfo, mesh: StaticMeshRenderData) -> None:
    """Read the OBJ's MTL library into ``mesh.materials``.

    Also copies the material subsets onto the mesh. Raises OSError if the
    library cannot be opened, and ValueError for a property that comes
    before any ``newmtl``.
    """
    mesh.material_subsets = list(obj_info.material_subsets)
    mtl_path = obj_info.path_name + obj_info.mat_name

    for token, rest in _lines(mtl_path):
        if token == "newmtl":
            mesh.materials.append(ObjMaterialInfo(mtl_name=rest[0] if rest else ""))
            continue
        if token not in _MATERIAL_TOKENS:
            continue
        if not mesh.materials:
            raise ValueError(f"{token!r} appears before any newmtl")
        material = mesh.materials[-1]
        if token == "Kd":
            material.diffuse = Vector3(*_parse_floats(rest, 3))
        elif token == "Ks":
            material.specular = Vector3(*_parse_floats(rest, 3))
        elif token == "Ka":
            material.ambient = Vector3(*_parse_floats(rest, 3))
        elif token == "Ke":
            material.emissive = Vector3(*_parse_floats(rest, 3))
        elif token == "Ns":
            material.specular_scalar = _parse_floats(rest, 1)[0]
        elif token == "Ni":
            material.density_scalar = _parse_floats(rest, 1)[0]
        elif token in ("d", "Tr"):
            material.transparency_scalar = _parse_floats(rest, 1)[0]
            material.transparent = True
        elif token == "illum":
            material.illuminance_model = _parse_int(rest[0]) if rest else 0
        elif token == "map_Kd":
            material.diffuse_texture_name = rest[0] if rest else ""
            material.diffuse_texture_path = (
                obj_info.path_name + material.diffuse_texture_name
            )
            material.has_texture = True


_MATERIAL_TOKENS = frozenset(
    {"Kd", "Ks", "Ka", "Ke", "Ns", "Ni", "d", "Tr", "illum", "map_Kd"}
)