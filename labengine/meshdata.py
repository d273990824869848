"""Raw and cooked mesh data produced by the OBJ loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .geometry import Vector2, Vector3


@dataclass
class VertexSimple:
    """A renderable vertex: position, colour, normal, UV and material slot."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
    nx: float = 0.0
    ny: float = 0.0
    nz: float = 0.0
    u: float = 0.0
    v: float = 0.0
    material_index: int = 0


@dataclass
class MaterialSubset:
    """A run of indices drawn with one material."""

    index_start: int = 0
    index_count: int = 0
    material_index: int = 0
    material_name: str = ""


@dataclass
class ObjInfo:
    """Raw data read from an OBJ file."""

    object_name: str = ""
    path_name: str = ""
    display_name: str = ""
    mat_name: str = ""
    num_of_group: int = 0
    group_name: List[str] = field(default_factory=list)
    vertices: List[Vector3] = field(default_factory=list)
    normals: List[Vector3] = field(default_factory=list)
    uvs: List[Vector2] = field(default_factory=list)
    faces: List[int] = field(default_factory=list)
    vertex_indices: List[int] = field(default_factory=list)
    normal_indices: List[int] = field(default_factory=list)
    texture_indices: List[int] = field(default_factory=list)
    material_subsets: List[MaterialSubset] = field(default_factory=list)


@dataclass
class ObjMaterialInfo:
    """One material as described by an MTL file."""

    mtl_name: str = ""
    has_texture: bool = False
    transparent: bool = False
    diffuse: Vector3 = field(default_factory=Vector3)
    specular: Vector3 = field(default_factory=Vector3)
    ambient: Vector3 = field(default_factory=Vector3)
    emissive: Vector3 = field(default_factory=Vector3)
    specular_scalar: float = 0.0
    density_scalar: float = 0.0
    transparency_scalar: float = 0.0
    illuminance_model: int = 0
    diffuse_texture_name: str = ""
    diffuse_texture_path: str = ""
    ambient_texture_name: str = ""
    ambient_texture_path: str = ""
    specular_texture_name: str = ""
    specular_texture_path: str = ""
    bump_texture_name: str = ""
    bump_texture_path: str = ""
    alpha_texture_name: str = ""
    alpha_texture_path: str = ""

    def texture_paths(self) -> List[str]:
        """Non-empty texture paths: diffuse, ambient, specular, bump, alpha."""
        candidates = (
            self.diffuse_texture_path,
            self.ambient_texture_path,
            self.specular_texture_path,
            self.bump_texture_path,
            self.alpha_texture_path,
        )
        return [path for path in candidates if path]


@dataclass
class StaticMeshRenderData:
    """Cooked mesh ready for rendering."""

    object_name: str = ""
    path_name: str = ""
    display_name: str = ""
    vertices: List[VertexSimple] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    materials: List[ObjMaterialInfo] = field(default_factory=list)
    material_subsets: List[MaterialSubset] = field(default_factory=list)
    bounding_box_min: Vector3 = field(default_factory=Vector3)
    bounding_box_max: Vector3 = field(default_factory=Vector3)