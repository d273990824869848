# labengine

Building blocks for a small 3D editor, written in plain Python with no
third-party dependencies.

## What is in the package

- `labengine.obj_parser`
  - `parse_obj(path)` reads a Wavefront OBJ file into an `ObjInfo`. It
    handles vertices (`v`), normals (`vn`), texture coordinates (`vt`),
    groups (`g`/`o`), the material library name (`mtllib`) and `usemtl`
    material subsets.
  - Triangle faces are read as they are. Quad faces are split into the two
    triangles 0-1-2 and 0-2-3. Faces with any other number of corners are
    skipped.
  - A face corner without a texture or normal reference stores
    `MISSING_INDEX`.
  - `parse_material(obj_info, mesh)` reads the `.mtl` file that sits next to
    the OBJ. It fills `mesh.materials` from the `Kd`, `Ks`, `Ka`, `Ke`,
    `Ns`, `Ni`, `d`/`Tr`, `illum` and `map_Kd` lines, and copies the
    material subsets onto the mesh.
- `labengine.mesh_builder`
  - `convert_to_static_mesh(raw, mesh)` merges repeated `v/vt/vn`
    combinations into one vertex each, which gives a vertex list and an
    index list. It flips the texture V coordinate, assigns each vertex the
    material slot of its subset and computes the bounding box.
  - `compute_bounding_box(vertices)` returns the minimum and maximum corners
    of the box around the vertices.
  - `combine_material_index(mesh)` points each subset at the material of the
    same name.
- `labengine.mesh_cache`
  - `save_static_mesh(path, mesh)` writes a cooked mesh in a compact binary
    form: little-endian 32-bit values and length-prefixed strings.
  - `load_static_mesh(path)` reads that form back.
  - `MeshManager` loads each OBJ asset once and keeps it for reuse. If a file
    named `<asset>.bin` is present it is read instead of the OBJ. Otherwise
    the OBJ is parsed and the `.bin` file is written.
  - `MeshManager` also keeps meshes by object name (`create_static_mesh`,
    `get_static_mesh`) and materials by name (`create_material`,
    `get_material`).
- `labengine.simplifier`
  - `simplify(obj, target_vertex_count)` removes vertices from an `ObjInfo`
    in place, one edge collapse at a time, until it has no more than
    `target_vertex_count` vertices.
  - Each step collapses the edge whose quadric error at its midpoint is
    lowest. `Quadric` and `compute_collapse_cost` are also available on their
    own.
- `labengine.meshdata`
  - Data classes: `VertexSimple`, `MaterialSubset`, `ObjInfo`,
    `ObjMaterialInfo` and `StaticMeshRenderData`.
- `labengine.geometry`
  - `Vector3` (arithmetic, dot product, cross product, magnitude,
    normalisation), `Vector2`, `Rect` and `Point`.
  - `BoundingBox.intersect`, a ray/box test that returns the hit distance or
    `None`.
- `labengine.viewport`
  - `Viewport` places a view in one quadrant, given by `ViewScreenLocation`.
    The size can come from the back-buffer size, from the splitter panes or
    from a plain `Rect`.
- `labengine.gizmo`
  - `GizmoType` lists the handle types.
  - `CircleGizmo.intersects_ray` is the hit test for a rotation ring.
- `labengine.console`
  - `Console` is a log with filtering by level and by text
    (`visible_entries`), an input history and the commands `clear`, `help`
    and `stat fps` / `stat memory` / `stat none`. The `stat` commands set
    flags on `StatOverlay`.
- `labengine.engine_types`
  - Shared enumerations: `ViewModeIndex`, `LevelTick`, `LevelViewportType`,
    `EditorState`, `EndPlayReason` and `WorldType`.

## Installation

```
pip install .
```

## Example

```python
from labengine.mesh_cache import MeshManager

manager = MeshManager()
mesh = manager.load_static_mesh_asset("Assets/cube.obj")
if mesh is not None:
    print(len(mesh.vertices), len(mesh.indices))
    print(mesh.bounding_box_min, mesh.bounding_box_max)
```

Ray picking against a box:

```python
from labengine.geometry import BoundingBox, Vector3

box = BoundingBox(Vector3(-1, -1, -1), Vector3(1, 1, 1))
print(box.intersect(Vector3(-5, 0, 0), Vector3(1, 0, 0)))  # 4.0
print(box.intersect(Vector3(-5, 5, 0), Vector3(1, 0, 0)))  # None
```

## What it does not do

- There is no renderer, window or GUI.
- Texture files named in materials are recorded by path but never loaded.
- The console keeps state and runs commands, but it does not draw itself or
  measure frame rate or memory.
- The package provides no scene, actor or world management and no command-line
  program.
- `simplify` rewrites only vertex positions and vertex indices. Normal and
  texture index lists keep their values, and only the entries that belong to
  dropped degenerate faces are removed.

## Running the tests

```
pip install .[test]
pytest
```