import pytest

from labengine.geometry import Vector2, Vector3
from labengine.meshdata import StaticMeshRenderData
from labengine.obj_parser import MISSING_INDEX, parse_material, parse_obj

QUAD_OBJ = """# a quad
mtllib quad.mtl
o Plane
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0.5 0.25
vn 0 0 1
usemtl Red
f 1/1/1 2/1/1 3/1/1 4/1/1
usemtl Blue
f 1 3 4
"""

QUAD_MTL = """newmtl Red
Kd 1 0 0
Ns 32
d 0.5
illum 2
map_Kd red.png
newmtl Blue
Ka 0 0 1
"""


@pytest.fixture
def quad_file(tmp_path):
    obj_path = tmp_path / "quad.obj"
    obj_path.write_text(QUAD_OBJ)
    (tmp_path / "quad.mtl").write_text(QUAD_MTL)
    return obj_path


def test_names_from_path(quad_file, tmp_path):
    info = parse_obj(quad_file)
    assert info.object_name == "quad.obj"
    assert info.display_name == "quad"
    assert info.path_name == str(tmp_path) + "/"
    assert info.mat_name == "quad.mtl"


def test_geometry_lists(quad_file):
    info = parse_obj(quad_file)
    assert info.vertices[2] == Vector3(1.0, 1.0, 0.0)
    assert info.uvs == [Vector2(0.5, 0.25)]
    assert info.normals == [Vector3(0.0, 0.0, 1.0)]
    assert info.group_name == ["Plane"]
    assert info.num_of_group == 1


def test_quad_is_split_into_two_triangles(quad_file):
    info = parse_obj(quad_file)
    assert info.vertex_indices[:6] == [0, 1, 2, 0, 2, 3]
    assert info.texture_indices[:6] == [0] * 6
    assert info.vertex_indices[6:] == [0, 2, 3]
    assert info.normal_indices[6:] == [MISSING_INDEX] * 3


def test_index_lists_stay_aligned(quad_file):
    info = parse_obj(quad_file)
    assert len(info.vertex_indices) == len(info.texture_indices) == len(info.normal_indices)
    assert len(info.vertex_indices) % 3 == 0


def test_material_subsets_cover_indices(quad_file):
    info = parse_obj(quad_file)
    names = [s.material_name for s in info.material_subsets]
    assert names == ["Red", "Blue"]
    red, blue = info.material_subsets
    assert (red.index_start, red.index_count) == (0, 6)
    assert (blue.index_start, blue.index_count) == (6, 3)


def test_pentagon_face_is_ignored(tmp_path):
    path = tmp_path / "p.obj"
    path.write_text("v 0 0 0\nf 1 1 1 1 1\n")
    info = parse_obj(path)
    assert info.vertex_indices == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_obj(tmp_path / "absent.obj")


def test_parse_material(quad_file):
    info = parse_obj(quad_file)
    mesh = StaticMeshRenderData()
    parse_material(info, mesh)
    assert [m.mtl_name for m in mesh.materials] == ["Red", "Blue"]
    red = mesh.materials[0]
    assert red.diffuse == Vector3(1.0, 0.0, 0.0)
    assert red.specular_scalar == 32.0
    assert red.transparency_scalar == 0.5 and red.transparent is True
    assert red.illuminance_model == 2
    assert red.has_texture is True
    assert red.diffuse_texture_path == info.path_name + "red.png"
    assert mesh.materials[1].ambient == Vector3(0.0, 0.0, 1.0)
    assert mesh.material_subsets == info.material_subsets


def test_parse_material_missing_library(tmp_path):
    path = tmp_path / "m.obj"
    path.write_text("mtllib nowhere.mtl\nusemtl X\n")
    info = parse_obj(path)
    with pytest.raises(OSError):
        parse_material(info, StaticMeshRenderData())


def test_property_before_newmtl_raises(tmp_path):
    path = tmp_path / "m.obj"
    path.write_text("mtllib bad.mtl\n")
    (tmp_path / "bad.mtl").write_text("Kd 1 1 1\n")
    info = parse_obj(path)
    with pytest.raises(ValueError):
        parse_material(info, StaticMeshRenderData())