import struct

import pytest

from enginecommon.mesh import (
    CollisionMesh,
    MeshFormatError,
    RenderMesh,
    load_cmsh,
    load_mesh,
    load_rmsh,
    parse_cmsh,
    parse_rmsh,
)
from enginecommon.models import ModelList


def floats(values):
    return struct.pack(f"<{len(values)}f", *values)


def cmsh_bytes(version, mins, maxs, verts, magic=b"CMSH"):
    return (
        magic
        + struct.pack("<I", version)
        + floats(mins)
        + floats(maxs)
        + struct.pack("<I", len(verts))
        + floats(verts)
    )


def rmsh_bytes(version, mins, maxs, verts, normals, tex, magic=b"RMSH"):
    return (
        magic
        + struct.pack("<I", version)
        + floats(mins)
        + floats(maxs)
        + struct.pack("<3I", len(verts), len(normals), len(tex))
        + floats(verts)
        + floats(normals)
        + floats(tex)
    )


VERTS = [1.0, 2.0, 3.0, -1.5, 0.5, 0.25]
MINS = (-1.5, 0.5, 0.25)
MAXS = (1.0, 2.0, 3.0)


def test_parse_cmsh_round_trip():
    mesh = parse_cmsh(cmsh_bytes(1, MINS, MAXS, VERTS))
    assert mesh == CollisionMesh(1, MINS, MAXS, VERTS, b"CMSH")


def test_parse_cmsh_bad_magic():
    with pytest.raises(MeshFormatError, match="CMSH"):
        parse_cmsh(cmsh_bytes(1, MINS, MAXS, VERTS, magic=b"RMSH"))


def test_parse_cmsh_truncated():
    data = cmsh_bytes(1, MINS, MAXS, VERTS)
    with pytest.raises(MeshFormatError):
        parse_cmsh(data[:-1])


def test_parse_rmsh_round_trip():
    normals = [0.0, 0.0, 1.0, 0.0, 1.0, 0.0]
    tex = [0.0, 1.0, 0.5, 0.5]
    mesh = parse_rmsh(rmsh_bytes(2, MINS, MAXS, VERTS, normals, tex))
    assert mesh == RenderMesh(2, MINS, MAXS, VERTS, normals, tex, b"RMSH")


def test_parse_rmsh_bad_magic_and_truncation():
    good = rmsh_bytes(2, MINS, MAXS, VERTS, [], [])
    with pytest.raises(MeshFormatError, match="RMSH"):
        parse_rmsh(b"CMSH" + good[4:])
    with pytest.raises(MeshFormatError):
        parse_rmsh(good[:10])


def test_collision_describe():
    text = parse_cmsh(cmsh_bytes(1, MINS, MAXS, VERTS)).describe()
    lines = text.splitlines()
    assert lines[0] == "cmsh {"
    assert "  magic: CMSH" in lines
    assert "  vertices[6] {" in lines
    assert lines[-1] == "}"


def test_render_describe_sections():
    text = parse_rmsh(rmsh_bytes(1, MINS, MAXS, VERTS, [], [0.0, 1.0])).describe()
    assert text.startswith("rmsh {")
    assert "  vertexNormals[0] {" in text
    assert "  vertexTextureCoords[2] {" in text


def test_load_cmsh(tmp_path, capsys):
    (tmp_path / "rock.cmsh").write_bytes(cmsh_bytes(1, MINS, MAXS, VERTS))
    models = ModelList()
    index = load_cmsh(models, tmp_path, "rock.cmsh")
    model = models[index]
    assert model.collision_vertices == VERTS
    assert model.collision_aabb_mins == MINS
    assert model.collision_bb_maxs == MAXS
    assert "magic: CMSH" in capsys.readouterr().out


def test_load_rmsh(tmp_path):
    (tmp_path / "rock.rmsh").write_bytes(rmsh_bytes(1, MINS, MAXS, VERTS, VERTS, []))
    models = ModelList()
    index = load_rmsh(models, tmp_path, "rock.rmsh")
    model = models[index]
    assert model.gl_vertices == VERTS
    assert model.gl_normals == VERTS
    assert model.num_bindable_materials == 1


def test_load_mesh(tmp_path):
    (tmp_path / "ship.cmsh").write_bytes(cmsh_bytes(1, MINS, MAXS, VERTS))
    (tmp_path / "ship.rmsh").write_bytes(rmsh_bytes(1, MINS, MAXS, VERTS, [], []))
    models = ModelList()
    index = load_mesh(models, tmp_path, "ship")
    assert index == 0
    model = models[0]
    assert model.collision_vertices == VERTS
    assert model.gl_vertices == VERTS
    assert model.default_materials == [0]
    assert model.bounding_sphere == 1.0


def test_load_mesh_missing_part(tmp_path):
    (tmp_path / "ship.cmsh").write_bytes(cmsh_bytes(1, MINS, MAXS, VERTS))
    models = ModelList()
    with pytest.raises(FileNotFoundError):
        load_mesh(models, tmp_path, "ship")
    assert len(models) == 0