import pytest

from labengine.geometry import Vector2, Vector3
from labengine.mesh_builder import (
    FLT_MAX,
    combine_material_index,
    compute_bounding_box,
    convert_to_static_mesh,
)
from labengine.meshdata import (
    MaterialSubset,
    ObjInfo,
    ObjMaterialInfo,
    StaticMeshRenderData,
    VertexSimple,
)
from labengine.obj_parser import MISSING_INDEX


def _quad_info():
    return ObjInfo(
        object_name="quad.obj",
        path_name="assets/",
        display_name="quad",
        vertices=[
            Vector3(0.0, 0.0, 0.0),
            Vector3(1.0, 0.0, 0.0),
            Vector3(1.0, 2.0, 0.0),
            Vector3(0.0, 2.0, -3.0),
        ],
        normals=[Vector3(0.0, 0.0, 1.0)],
        uvs=[Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(1.0, 0.5), Vector2(0.0, 0.5)],
        vertex_indices=[0, 1, 2, 0, 2, 3],
        texture_indices=[0, 1, 2, 0, 2, 3],
        normal_indices=[0, 0, 0, 0, 0, 0],
    )


def test_shared_corners_become_one_vertex():
    mesh = convert_to_static_mesh(_quad_info(), StaticMeshRenderData())
    assert len(mesh.vertices) == 4
    assert mesh.indices == [0, 1, 2, 0, 2, 3]


def test_names_are_copied():
    mesh = convert_to_static_mesh(_quad_info(), StaticMeshRenderData())
    assert (mesh.object_name, mesh.path_name, mesh.display_name) == (
        "quad.obj",
        "assets/",
        "quad",
    )


def test_vertex_attributes():
    raw = _quad_info()
    mesh = convert_to_static_mesh(raw, StaticMeshRenderData())
    third = mesh.vertices[2]
    assert (third.x, third.y, third.z) == (1.0, 2.0, 0.0)
    assert (third.r, third.g, third.b, third.a) == (1.0, 1.0, 1.0, 1.0)
    assert third.u == raw.uvs[2].x
    assert third.v == -raw.uvs[2].y
    assert (third.nx, third.ny, third.nz) == (0.0, 0.0, 1.0)


def test_missing_texture_and_normal_leave_zeros():
    raw = _quad_info()
    raw.vertex_indices = [0, 1, 2]
    raw.texture_indices = [MISSING_INDEX] * 3
    raw.normal_indices = [MISSING_INDEX, 7, MISSING_INDEX]
    mesh = convert_to_static_mesh(raw, StaticMeshRenderData())
    for vertex in mesh.vertices:
        assert (vertex.u, vertex.v, vertex.nx, vertex.ny, vertex.nz) == (0, 0, 0, 0, 0)


def test_material_slot_from_subsets():
    mesh = StaticMeshRenderData(
        material_subsets=[
            MaterialSubset(index_start=0, index_count=3, material_index=2),
            MaterialSubset(index_start=3, index_count=3, material_index=1),
        ]
    )
    convert_to_static_mesh(_quad_info(), mesh)
    slots = [v.material_index for v in mesh.vertices]
    assert slots == [2, 2, 2, 1]


def test_bounding_box_after_convert():
    mesh = convert_to_static_mesh(_quad_info(), StaticMeshRenderData())
    assert mesh.bounding_box_min == Vector3(0.0, 0.0, -3.0)
    assert mesh.bounding_box_max == Vector3(1.0, 2.0, 0.0)


def test_mismatched_index_lists_raise():
    raw = _quad_info()
    raw.normal_indices = [0, 0]
    with pytest.raises(ValueError):
        convert_to_static_mesh(raw, StaticMeshRenderData())


def test_empty_bounding_box_is_inverted():
    low, high = compute_bounding_box([])
    assert low == Vector3(FLT_MAX, FLT_MAX, FLT_MAX)
    assert high == Vector3(-FLT_MAX, -FLT_MAX, -FLT_MAX)


def test_bounding_box_contains_every_vertex():
    vertices = [VertexSimple(x=-1.0, y=4.0, z=2.0), VertexSimple(x=3.0, y=-5.0, z=2.0)]
    low, high = compute_bounding_box(vertices)
    for v in vertices:
        assert low.x <= v.x <= high.x
        assert low.y <= v.y <= high.y
        assert low.z <= v.z <= high.z
    assert low == Vector3(-1.0, -5.0, 2.0)
    assert high == Vector3(3.0, 4.0, 2.0)


def test_combine_material_index():
    mesh = StaticMeshRenderData(
        materials=[ObjMaterialInfo(mtl_name="blue"), ObjMaterialInfo(mtl_name="red")],
        material_subsets=[
            MaterialSubset(material_name="red"),
            MaterialSubset(material_name="blue"),
            MaterialSubset(material_name="green", material_index=9),
        ],
    )
    combine_material_index(mesh)
    assert [s.material_index for s in mesh.material_subsets] == [1, 0, 9]