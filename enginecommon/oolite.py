"""Loader for Oolite ``.dat`` ship models."""

from __future__ import annotations

import enum
import math
import os
import re
from dataclasses import fields
from pathlib import Path

from .models import Model, ModelList, Vec3
from .textutil import remove_line_comments, remove_whitespace

_MAX_ARGS = 10

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class OoliteError(ValueError):
    """Raised when an Oolite model file is malformed or incomplete."""


class _Mode(enum.Enum):
    START = enum.auto()
    NVERTS = enum.auto()
    NFACES = enum.auto()
    VERTEX = enum.auto()
    FACES = enum.auto()
    TEXTURES = enum.auto()
    NAMES = enum.auto()
    NORMALS = enum.auto()
    END = enum.auto()


# Sections that must all be completed for a model to count as defined.
_REQUIRED = frozenset(
    {
        _Mode.START,
        _Mode.NVERTS,
        _Mode.NFACES,
        _Mode.VERTEX,
        _Mode.FACES,
        _Mode.TEXTURES,
        _Mode.END,
    }
)


def _to_int(text: str) -> int:
    """Parse the leading decimal integer of ``text``; 0 if there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    """Parse the leading floating-point number of ``text``; 0.0 if none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _subtract(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _clean(line: str) -> str:
    line = remove_line_comments(line, "//")
    line = remove_whitespace(line, "melt")
    return "".join(" " if ch.isspace() else ch for ch in line)


def _require_args(args: list[str], count: int, where: str, what: str) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise OoliteError(f"{where} {what} requires {count} {noun}")


def parse_oolite_dat(text: str, name: str = "<string>") -> Model:
    """Parse the text of an Oolite ``.dat`` file into a new model.

    ``name`` is used in error messages only.
    """
    model = Model()
    vertex_count = 0
    face_count = 0
    progress = {_Mode.START}
    mode = _Mode.START
    element = 0

    lines = text.replace("\r", "\n").split("\n")
    for line_number, raw in enumerate(lines, start=1):
        line = _clean(raw)
        if not line:
            continue
        args = line.split(" ")
        where = f'"{name}":{line_number}'
        if len(args) > _MAX_ARGS:
            raise OoliteError(
                f'Line {line_number} of file "{name}" has too many arguments. '
                f"{len(args)} > maxArgs({_MAX_ARGS})"
            )

        command = args[0]
        if command == "NVERTS":
            _require_args(args, 2, where, '"NVERTS"')
            vertex_count = _to_int(args[1])
            model.vertices = [(0.0, 0.0, 0.0)] * max(vertex_count, 0)
            mode = _Mode.NVERTS
            progress.add(_Mode.NVERTS)
            continue
        if command == "NFACES":
            _require_args(args, 2, where, '"NFACES"')
            face_count = _to_int(args[1])
            size = max(face_count, 0)
            model.faces = [(0, 0, 0)] * size
            model.tex_coords = [((0.0, 0.0), (0.0, 0.0), (0.0, 0.0))] * size
            model.tex_coords_textures = [0] * size
            mode = _Mode.NFACES
            progress.add(_Mode.NFACES)
            continue
        if command == "VERTEX":
            _require_args(args, 1, where, '"VERTEX"')
            if _Mode.NVERTS not in progress:
                raise OoliteError(f"{where} NVERTS has not been declared")
            element = 0
            mode = _Mode.VERTEX
            continue
        if command in ("FACES", "TEXTURES"):
            _require_args(args, 1, where, f'"{command}"')
            if _Mode.NFACES not in progress:
                raise OoliteError(f"{where} NFACES has not been declared")
            element = 0
            mode = _Mode.FACES if command == "FACES" else _Mode.TEXTURES
            continue
        if command == "NAMES":
            _require_args(args, 2, where, '"NAMES"')
            element = 0
            mode = _Mode.NAMES
            continue
        if command == "NORMALS":
            _require_args(args, 1, where, '"NORMALS"')
            element = 0
            mode = _Mode.NORMALS
            continue
        if command == "END":
            _require_args(args, 1, where, '"END"')
            progress.add(_Mode.END)
            mode = _Mode.END
            break

        if mode is _Mode.VERTEX:
            if len(args) != 3:
                raise OoliteError(f'{where} mode "vertex" requires 3 arguments')
            if element >= vertex_count:
                raise OoliteError(
                    f"{where} Vertex list is longer than declared by "
                    f"NVERTS({vertex_count})"
                )
            x, y, z = (_to_float(a) for a in args)
            model.vertices[element] = (x, y, z)
            model.bounding_sphere = max(
                model.bounding_sphere, math.sqrt(x * x + y * y + z * z)
            )
            element += 1
            if element == vertex_count:
                progress.add(_Mode.VERTEX)
        elif mode is _Mode.FACES:
            if len(args) != 10:
                raise OoliteError(f'{where} mode "faces" requires 10 arguments')
            if element >= face_count:
                raise OoliteError(
                    f"{where} Face list is longer than declared by "
                    f"NFACES({face_count})"
                )
            a, b, c = (int(_to_float(arg)) for arg in args[7:10])
            model.faces[element] = (a, b, c)
            element += 1
            if element == face_count:
                progress.add(_Mode.FACES)
        elif mode is _Mode.TEXTURES:
            if len(args) != 9:
                raise OoliteError(f'{where} mode "textures" requires 9 arguments')
            if element >= face_count:
                raise OoliteError(
                    f"{where} Texture list is longer than declared by "
                    f"NFACES({face_count})"
                )
            texture = _to_int(args[0])
            model.tex_coords_textures[element] = texture
            model.num_bindable_materials = max(model.num_bindable_materials, texture)
            coords = [_to_float(a) for a in args[3:9]]
            model.tex_coords[element] = (
                (coords[0], coords[1]),
                (coords[2], coords[3]),
                (coords[4], coords[5]),
            )
            element += 1
            if element == face_count:
                progress.add(_Mode.TEXTURES)
                model.num_bindable_materials += 1
        # Lines in the other sections carry nothing that is used.

    if progress != _REQUIRED:
        raise OoliteError(f'"{name}" Model not fully defined by file')

    _build_geometry(model)
    return model


def _build_geometry(model: Model) -> None:
    vertex_total = len(model.vertices)
    normals: list[Vec3] = []
    for number, face in enumerate(model.faces):
        if any(not 0 <= i < vertex_total for i in face):
            raise OoliteError(f"Face {number} refers to a missing vertex")
        v0, v1, v2 = (model.vertices[i] for i in face)
        normal = _cross(_subtract(v1, v0), _subtract(v2, v0))
        length = math.sqrt(sum(c * c for c in normal))
        if length == 0.0 or not math.isfinite(length):
            raise OoliteError(f"Cannot create normal due to invalid face {number}")
        normals.append((normal[0] / length, normal[1] / length, normal[2] / length))
    model.surface_normals = normals

    gl_vertices: list[float] = []
    gl_normals: list[float] = []
    gl_tex: list[float] = []
    for face, normal, tex in zip(model.faces, normals, model.tex_coords):
        for corner, uv in zip(face, tex):
            gl_vertices.extend(model.vertices[corner])
            # Every corner of a face shares the face normal.
            gl_normals.extend(normal)
            gl_tex.extend(uv)
    model.gl_vertices = gl_vertices
    model.gl_normals = gl_normals
    model.gl_tex_coords = gl_tex


def load_oolite_dat(models: ModelList, root: str | os.PathLike, path: str) -> int:
    """Load an Oolite model file under ``root`` into ``models``.

    Returns the index of the new model. Nothing is added if loading fails.
    """
    text = Path(root, path).read_bytes().decode("latin-1")
    parsed = parse_oolite_dat(text, path)
    index, model = models.create()
    for f in fields(Model):
        setattr(model, f.name, getattr(parsed, f.name))
    return index