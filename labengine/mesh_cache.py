"""Binary caching of cooked meshes and the registry of loaded assets."""

from __future__ import annotations

import copy
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from .geometry import Vector3
from .mesh_builder import combine_material_index, convert_to_static_mesh
from .meshdata import MaterialSubset, ObjMaterialInfo, StaticMeshRenderData, VertexSimple
from .obj_parser import parse_material, parse_obj

PathLike = Union[str, Path]

_U32 = struct.Struct("<I")
_VERTEX = struct.Struct("<12fI")
_MATERIAL_VALUES = struct.Struct("<??12f3fI")
_SUBSET_VALUES = struct.Struct("<3I")
_VEC3 = struct.Struct("<3f")

_TEXTURE_FIELDS = ("diffuse", "ambient", "specular", "bump", "alpha")


class _Writer:
    def __init__(self) -> None:
        self.parts = []

    def pack(self, layout: struct.Struct, *values) -> None:
        self.parts.append(layout.pack(*values))

    def narrow(self, text: str) -> None:
        data = text.encode("utf-8")
        self.pack(_U32, len(data))
        self.parts.append(data)

    def wide(self, text: str) -> None:
        data = text.encode("utf-16-le")
        self.pack(_U32, len(data) // 2)
        self.parts.append(data)

    def getvalue(self) -> bytes:
        return b"".join(self.parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise ValueError("mesh cache file is truncated")
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple:
        return layout.unpack(self.take(layout.size))

    def count(self) -> int:
        return self.unpack(_U32)[0]

    def narrow(self) -> str:
        return self.take(self.count()).decode("utf-8")

    def wide(self) -> str:
        return self.take(self.count() * 2).decode("utf-16-le")


def _encode(mesh: StaticMeshRenderData) -> bytes:
    out = _Writer()
    out.wide(mesh.object_name)
    out.wide(mesh.path_name)
    out.narrow(mesh.display_name)

    out.pack(_U32, len(mesh.vertices))
    for v in mesh.vertices:
        out.pack(
            _VERTEX, v.x, v.y, v.z, v.r, v.g, v.b, v.a, v.nx, v.ny, v.nz, v.u, v.v,
            v.material_index,
        )

    out.pack(_U32, len(mesh.indices))
    for index in mesh.indices:
        out.pack(_U32, index)

    out.pack(_U32, len(mesh.materials))
    for m in mesh.materials:
        out.narrow(m.mtl_name)
        out.pack(
            _MATERIAL_VALUES,
            m.has_texture,
            m.transparent,
            *m.diffuse,
            *m.specular,
            *m.ambient,
            *m.emissive,
            m.specular_scalar,
            m.density_scalar,
            m.transparency_scalar,
            m.illuminance_model,
        )
        for kind in _TEXTURE_FIELDS:
            out.narrow(getattr(m, f"{kind}_texture_name"))
            out.wide(getattr(m, f"{kind}_texture_path"))

    out.pack(_U32, len(mesh.material_subsets))
    for s in mesh.material_subsets:
        out.narrow(s.material_name)
        out.pack(_SUBSET_VALUES, s.index_start, s.index_count, s.material_index)

    out.pack(_VEC3, *mesh.bounding_box_min)
    out.pack(_VEC3, *mesh.bounding_box_max)
    return out.getvalue()


def _decode(data: bytes) -> StaticMeshRenderData:
    src = _Reader(data)
    mesh = StaticMeshRenderData(
        object_name=src.wide(), path_name=src.wide(), display_name=src.narrow()
    )

    for _ in range(src.count()):
        values = src.unpack(_VERTEX)
        mesh.vertices.append(VertexSimple(*values))

    mesh.indices = [src.unpack(_U32)[0] for _ in range(src.count())]

    for _ in range(src.count()):
        material = ObjMaterialInfo(mtl_name=src.narrow())
        values = src.unpack(_MATERIAL_VALUES)
        material.has_texture, material.transparent = values[0], values[1]
        material.diffuse = Vector3(*values[2:5])
        material.specular = Vector3(*values[5:8])
        material.ambient = Vector3(*values[8:11])
        material.emissive = Vector3(*values[11:14])
        (
            material.specular_scalar,
            material.density_scalar,
            material.transparency_scalar,
            material.illuminance_model,
        ) = values[14:18]
        for kind in _TEXTURE_FIELDS:
            setattr(material, f"{kind}_texture_name", src.narrow())
            setattr(material, f"{kind}_texture_path", src.wide())
        mesh.materials.append(material)

    for _ in range(src.count()):
        name = src.narrow()
        start, count, slot = src.unpack(_SUBSET_VALUES)
        mesh.material_subsets.append(
            MaterialSubset(index_start=start, index_count=count, material_index=slot, material_name=name)
        )

    mesh.bounding_box_min = Vector3(*src.unpack(_VEC3))
    mesh.bounding_box_max = Vector3(*src.unpack(_VEC3))
    return mesh


def save_static_mesh(path: PathLike, mesh: StaticMeshRenderData) -> None:
    """Write a cooked mesh to a binary cache file.

    Numbers are little-endian 32-bit; strings carry a 32-bit length.
    """
    Path(path).write_bytes(_encode(mesh))


def load_static_mesh(path: PathLike) -> StaticMeshRenderData:
    """Read a cooked mesh written by :func:`save_static_mesh`.

    Raises OSError if the file cannot be read and ValueError if it is cut short.
    """
    return _decode(Path(path).read_bytes())


@dataclass
class MeshManager:
    """Loads OBJ assets once and keeps their meshes and materials by name."""

    render_data: Dict[str, StaticMeshRenderData] = field(default_factory=dict)
    static_meshes: Dict[str, StaticMeshRenderData] = field(default_factory=dict)
    materials: Dict[str, ObjMaterialInfo] = field(default_factory=dict)

    def load_static_mesh_asset(self, path: PathLike) -> Optional[StaticMeshRenderData]:
        """Cooked mesh for an OBJ file, or None if it cannot be read.

        A ``.bin`` cache next to the file is used when present; otherwise the
        OBJ and its materials are parsed and the cache is written.
        """
        key = str(path)
        cached = self.render_data.get(key)
        if cached is not None:
            return cached

        binary_path = Path(key + ".bin")
        if binary_path.is_file():
            try:
                mesh = load_static_mesh(binary_path)
            except (OSError, ValueError, UnicodeDecodeError):
                mesh = None
            if mesh is not None:
                mesh.path_name = key
                self.render_data[key] = mesh
                return mesh

        try:
            raw = parse_obj(key)
        except OSError:
            return None

        mesh = StaticMeshRenderData()
        if raw.material_subsets:
            try:
                parse_material(raw, mesh)
            except (OSError, ValueError):
                return None
            combine_material_index(mesh)
            for material in mesh.materials:
                self.create_material(material)

        try:
            convert_to_static_mesh(raw, mesh)
        except (IndexError, ValueError):
            return None

        try:
            save_static_mesh(binary_path, mesh)
        except OSError:
            pass
        self.render_data[key] = mesh
        return mesh

    def create_material(self, material_info: ObjMaterialInfo) -> ObjMaterialInfo:
        """Register a material by name; an existing one of that name is kept."""
        existing = self.materials.get(material_info.mtl_name)
        if existing is not None:
            return existing
        material = copy.deepcopy(material_info)
        self.materials[material_info.mtl_name] = material
        return material

    def get_material(self, name: str) -> Optional[ObjMaterialInfo]:
        """The material registered under ``name``, or None."""
        return self.materials.get(name)

    def create_static_mesh(self, path: PathLike) -> Optional[StaticMeshRenderData]:
        """Load an asset and register it under its object name."""
        mesh = self.load_static_mesh_asset(path)
        if mesh is None:
            return None
        existing = self.get_static_mesh(mesh.object_name)
        if existing is not None:
            return existing
        self.static_meshes[mesh.object_name] = mesh
        return mesh

    def get_static_mesh(self, name: str) -> Optional[StaticMeshRenderData]:
        """The mesh registered under an object name such as ``cube.obj``, or None."""
        return self.static_meshes.get(name)