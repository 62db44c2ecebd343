"""Binary collision (CMSH) and render (RMSH) mesh formats and their loaders."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .fileutil import ByteReader, ParseError
from .models import ModelList, Vec3

_CMSH_MAGIC = b"CMSH"
_RMSH_MAGIC = b"RMSH"


class MeshFormatError(ValueError):
    """Raised when a mesh file is malformed."""


@dataclass
class CollisionMesh:
    """Contents of a CMSH file: a flat list of collision vertex components."""

    version: int
    mins: Vec3
    maxs: Vec3
    vertices: list[float] = field(default_factory=list)
    magic: bytes = _CMSH_MAGIC

    def describe(self) -> str:
        """Return a readable dump of the mesh."""
        lines = [
            "cmsh {",
            *_header(self.magic, self.version, self.mins, self.maxs),
            f"  vertices[{len(self.vertices)}] {{",
            *_rows(self.vertices, 3),
            "  }",
            "}",
        ]
        return "\n".join(lines)


@dataclass
class RenderMesh:
    """Contents of an RMSH file: flat vertex, normal and texture arrays."""

    version: int
    mins: Vec3
    maxs: Vec3
    vertices: list[float] = field(default_factory=list)
    vertex_normals: list[float] = field(default_factory=list)
    vertex_texture_coords: list[float] = field(default_factory=list)
    magic: bytes = _RMSH_MAGIC

    def describe(self) -> str:
        """Return a readable dump of the mesh."""
        lines = [
            "rmsh {",
            *_header(self.magic, self.version, self.mins, self.maxs),
            f"  vertices[{len(self.vertices)}] {{",
            *_rows(self.vertices, 3),
            "  }",
            f"  vertexNormals[{len(self.vertex_normals)}] {{",
            *_rows(self.vertex_normals, 3),
            "  }",
            f"  vertexTextureCoords[{len(self.vertex_texture_coords)}] {{",
            *_rows(self.vertex_texture_coords, 2),
            "  }",
            "}",
        ]
        return "\n".join(lines)


def _triple(v: Vec3) -> str:
    return "{" + ", ".join(f"{c:f}" for c in v) + "}"


def _header(magic: bytes, version: int, mins: Vec3, maxs: Vec3) -> list[str]:
    return [
        f"  magic: {magic.decode('latin-1')}",
        f"  version: {version}",
        f"  mins: {_triple(mins)}",
        f"  maxs: {_triple(maxs)}",
    ]


def _rows(values: list[float], width: int) -> Iterator[str]:
    for start in range(0, len(values), width):
        chunk = values[start:start + width]
        yield "    " + ", ".join(f"{v:f}" for v in chunk) + ","


def _read_magic(reader: ByteReader, expected: bytes) -> bytes:
    magic = bytes(reader.read_uint8() for _ in range(len(expected)))
    if magic != expected:
        raise MeshFormatError(f"Magic number is not {expected.decode()}.")
    return magic


def parse_cmsh(data: bytes) -> CollisionMesh:
    """Parse the bytes of a CMSH file."""
    reader = ByteReader(data)
    try:
        magic = _read_magic(reader, _CMSH_MAGIC)
        version = reader.read_uint32()
        mins = reader.read_vec3()
        maxs = reader.read_vec3()
        count = reader.read_uint32()
        vertices = reader.read_vec_array(count)
    except ParseError as exc:
        raise MeshFormatError(f"truncated CMSH data: {exc}") from exc
    return CollisionMesh(version, mins, maxs, vertices, magic)


def parse_rmsh(data: bytes) -> RenderMesh:
    """Parse the bytes of an RMSH file."""
    reader = ByteReader(data)
    try:
        magic = _read_magic(reader, _RMSH_MAGIC)
        version = reader.read_uint32()
        mins = reader.read_vec3()
        maxs = reader.read_vec3()
        vertex_count = reader.read_uint32()
        normal_count = reader.read_uint32()
        tex_count = reader.read_uint32()
        vertices = reader.read_vec_array(vertex_count)
        normals = reader.read_vec_array(normal_count)
        tex_coords = reader.read_vec_array(tex_count)
    except ParseError as exc:
        raise MeshFormatError(f"truncated RMSH data: {exc}") from exc
    return RenderMesh(version, mins, maxs, vertices, normals, tex_coords, magic)


def _read_cmsh(root: str | os.PathLike, path: str) -> CollisionMesh:
    return parse_cmsh(Path(root, path).read_bytes())


def _read_rmsh(root: str | os.PathLike, path: str) -> RenderMesh:
    return parse_rmsh(Path(root, path).read_bytes())


def _apply_collision(model, cmsh: CollisionMesh) -> None:
    model.collision_vertices = cmsh.vertices
    model.collision_bb_mins = cmsh.mins
    model.collision_bb_maxs = cmsh.maxs
    # With no rotation applied yet, the axis-aligned box equals the bounding box.
    model.collision_aabb_mins = cmsh.mins
    model.collision_aabb_maxs = cmsh.maxs


def _apply_render(model, rmsh: RenderMesh) -> None:
    # A placeholder radius keeps the renderer's culling happy.
    model.bounding_sphere = 1.0
    model.gl_vertices = rmsh.vertices
    model.gl_normals = rmsh.vertex_normals
    model.gl_tex_coords = rmsh.vertex_texture_coords
    # Only one material may be bound; index 0 is the default material.
    model.num_bindable_materials = 1
    model.default_materials = [0]


def load_cmsh(models: ModelList, root: str | os.PathLike, path: str) -> int:
    """Load a CMSH file under ``root`` into a new model and return its index.

    The parsed mesh is printed to standard output.
    """
    cmsh = _read_cmsh(root, path)
    print(cmsh.describe())
    index, model = models.create()
    _apply_collision(model, cmsh)
    return index


def load_rmsh(models: ModelList, root: str | os.PathLike, path: str) -> int:
    """Load an RMSH file under ``root`` into a new model and return its index."""
    rmsh = _read_rmsh(root, path)
    index, model = models.create()
    _apply_render(model, rmsh)
    return index


def load_mesh(models: ModelList, root: str | os.PathLike, path_root: str) -> int:
    """Load ``path_root.cmsh`` and ``path_root.rmsh`` into one new model."""
    cmsh = _read_cmsh(root, f"{path_root}.cmsh")
    rmsh = _read_rmsh(root, f"{path_root}.rmsh")
    index, model = models.create()
    _apply_collision(model, cmsh)
    _apply_render(model, rmsh)
    return index