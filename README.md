# enginecommon

Building blocks for a small 3D game engine: a scene graph of entities, a
list of loaded models, loaders for binary mesh files and Oolite `.dat` ship
models, and a few path, text and logging helpers. Everything is plain
Python with no third-party dependencies.

## Modules

- `enginecommon.entity`: `EntityList`, `Entity`, `ChildType` and
  `EntityError`.
  - A new `EntityList` already holds entity 0, which holds entities.
  - `create(child_type)` returns an index. Deleted slots are reused, most
    recently deleted first.
  - `delete(index)` frees an entity.
  - `link_child` and `unlink_child` manage an entity's children. A parent of
    type `ChildType.MODEL` checks the child against a `ModelList`.
  - `set_position` takes a mapping with `x`, `y` and `z`, or a sequence of
    three numbers.
  - `set_orientation` takes `w`, `x`, `y` and `z` and normalises the
    quaternion.
  - `set_scale` sets the entity's scale.
  - `describe(index)` returns a text dump of the entity.
  - `len()` counts slots, deleted ones included.
- `enginecommon.models`: `Model`, a dataclass for geometry, render arrays and
  collision data, and `ModelList`.
  - `create()` returns `(index, model)`.
  - The list also has `remove_last()`, `is_valid_index(index)`, `clear()`,
    `len()` and indexing.
- `enginecommon.mesh`: readers for the binary mesh formats.
  - `parse_cmsh(data)` reads the collision format and returns a
    `CollisionMesh`.
  - `parse_rmsh(data)` reads the render format and returns a `RenderMesh`.
  - Both mesh classes have `describe()`.
  - Malformed data raises `MeshFormatError`.
  - `load_cmsh(models, root, path)` adds a new model to a `ModelList` and
    also prints the mesh dump to standard output.
  - `load_rmsh(models, root, path)` adds a new model to a `ModelList`.
  - `load_mesh(models, root, path_root)` reads `path_root.cmsh` and
    `path_root.rmsh` into one model.
  - Each loader returns the new model's index.
- `enginecommon.oolite`: Oolite `.dat` models.
  - `parse_oolite_dat(text, name)` returns a `Model` with vertices, faces,
    texture coordinates, surface normals and flat render arrays.
  - `load_oolite_dat(models, root, path)` reads a file under `root` and adds
    the model to a `ModelList`. If the file does not parse, nothing is added.
  - Errors raise `OoliteError`.
- `enginecommon.fileutil`: path helpers and a binary reader.
  - `get_extension`, `concatenate_path` and `resolve_relative_paths`, which
    drops `..` together with the component it cancels.
  - `ByteReader`, which reads little-endian `uint8`, `uint32`, `float`,
    `double` and vector values and raises `ParseError` when the data runs
    out.
- `enginecommon.textutil`: text helpers.
  - `remove_line_comments`.
  - `remove_whitespace`, whose config letters `l`, `m`, `e` and `t` choose
    what to strip.
  - `tokenize`, `replace_char` and `describe`.
- `enginecommon.log`: coloured logging.
  - `LogLevel` runs from `INFO` to `NOTHING`.
  - `Logger(level, out, err)` writes info to `out` and everything else to
    `err`.
  - `set_level` clamps out-of-range values and warns.
  - `out_of_memory` prints at every level.
  - `script_message` writes a message marked as coming from a script,
    whatever the level.
  - `format_message` builds one log line.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from enginecommon.entity import ChildType, EntityList
from enginecommon.models import ModelList
from enginecommon.mesh import parse_cmsh

models = ModelList()
entities = EntityList()           # entity 0 is created for you
ship = entities.create(ChildType.ENTITY)
entities.link_child(0, ship, models)
entities.set_position(ship, {"x": 1.0, "y": 2.0, "z": 3.0})
entities.set_orientation(ship, {"w": 1.0, "x": 0.0, "y": 0.0, "z": 0.0})
print(entities.describe(ship))

with open("hull.cmsh", "rb") as f:
    mesh = parse_cmsh(f.read())
print(mesh.describe())
```

Errors are raised as exceptions (`ParseError`, `MeshFormatError`,
`OoliteError`, `EntityError`) instead of being returned as status codes.

## What it does not do

This is a library with no command-line program. It does not cover:

- rendering, materials or textures beyond keeping their indices on models;
- networking;
- a scripting runtime or a configuration-variable system;
- an archive-backed virtual file system. The loaders read files from an
  ordinary directory given as `root`.

## Tests

```
pytest
```