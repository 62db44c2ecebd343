"""Path helpers and a little-endian reader for binary asset files."""

from __future__ import annotations

import struct


class ParseError(ValueError):
    """Raised when a binary buffer ends before a value could be read."""


def get_extension(filename: str) -> str | None:
    """Return the text after the last dot, or None if there is no usable dot.

    A dot in the first position does not count, so ``".bashrc"`` has no
    extension.
    """
    position = filename.rfind(".")
    if position <= 0:
        return None
    return filename[position + 1:]


def concatenate_path(destination: str, source: str) -> str:
    """Join two path parts with a single slash."""
    return f"{destination}/{source}"


def resolve_relative_paths(path: str) -> str:
    """Remove ``..`` components together with the components they cancel.

    ``..`` components that have nothing left to cancel are dropped.
    """
    kept: list[str] = []
    pending = 0
    for token in reversed(path.split("/")):
        if token == "..":
            pending += 1
        elif pending:
            pending -= 1
        else:
            kept.append(token)
    return "/".join(reversed(kept))


_UINT8 = struct.Struct("<B")
_UINT32 = struct.Struct("<I")
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


class ByteReader:
    """Reads little-endian values from a byte buffer, advancing ``index``."""

    def __init__(self, data: bytes, index: int = 0) -> None:
        self.data = bytes(data)
        self.index = index

    def _read(self, fmt: struct.Struct):
        end = self.index + fmt.size
        if end > len(self.data):
            raise ParseError(
                f"need {fmt.size} bytes at offset {self.index}, "
                f"buffer holds {len(self.data)}"
            )
        (value,) = fmt.unpack_from(self.data, self.index)
        self.index = end
        return value

    def read_uint8(self) -> int:
        """Read one unsigned byte."""
        return self._read(_UINT8)

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer."""
        return self._read(_UINT32)

    def read_float(self) -> float:
        """Read a single-precision float."""
        return self._read(_FLOAT)

    def read_double(self) -> float:
        """Read a double-precision float."""
        return self._read(_DOUBLE)

    def read_vec(self) -> float:
        """Read one vector component, stored as a single-precision float."""
        return self.read_float()

    def read_vec_array(self, count: int) -> list[float]:
        """Read ``count`` vector components."""
        return [self.read_vec() for _ in range(count)]

    def read_vec3(self) -> tuple[float, float, float]:
        """Read three vector components."""
        x, y, z = self.read_vec_array(3)
        return (x, y, z)