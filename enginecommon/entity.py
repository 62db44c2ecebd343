"""Scene entities: positioned, oriented nodes that hold other entities or models."""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real

from .models import ModelList, Vec3

Quaternion = tuple[float, float, float, float]


class ChildType(enum.IntEnum):
    """What the children of an entity refer to."""

    NONE = 0
    ENTITY = 1
    MODEL = 2


class EntityError(ValueError):
    """Raised when an entity operation refers to something invalid."""


@dataclass
class Entity:
    """One node of the scene graph.

    ``orientation`` is a unit quaternion stored as ``(w, x, y, z)``.
    ``children`` holds entity or model indices depending on ``child_type``.
    """

    child_type: ChildType = ChildType.NONE
    children: list[int] = field(default_factory=list)
    position: Vec3 = (0.0, 0.0, 0.0)
    orientation: Quaternion = (1.0, 0.0, 0.0, 0.0)
    scale: float = 1.0
    in_use: bool = True
    shown: bool = True
    materials: list[int] = field(default_factory=list)


def _number(value: object, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise EntityError(f"Key {key} must be a number")
    return float(value)


def _components(value: object, keys: str) -> tuple[float, ...]:
    """Read the components named by ``keys`` from a mapping or a sequence."""
    if isinstance(value, Mapping):
        missing = [k for k in keys if k not in value]
        if missing:
            raise EntityError(f"Key {missing[0]} must be a number")
        return tuple(_number(value[k], k) for k in keys)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != len(keys):
            raise EntityError(f"Expected {len(keys)} components ({', '.join(keys)})")
        return tuple(_number(v, k) for v, k in zip(value, keys))
    raise EntityError(f"Expected a mapping or sequence of {', '.join(keys)}")


class EntityList:
    """All entities, addressed by stable indices.

    Deleted slots are remembered and handed out again, most recently deleted
    first. A new list starts with entity 0, which holds entities.
    """

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._deleted: list[int] = []
        self.create(ChildType.ENTITY)

    def create(self, child_type: ChildType | int) -> int:
        """Create an entity whose children are of ``child_type``; return its index."""
        entity = Entity(child_type=ChildType(child_type))
        if self._deleted:
            index = self._deleted.pop()
            self._entities[index] = entity
        else:
            index = len(self._entities)
            self._entities.append(entity)
        return index

    def delete(self, index: int) -> None:
        """Release an entity; its index may be reused by a later ``create``."""
        if not self.is_valid_index(index):
            raise EntityError(f"{index} is not a valid entity index.")
        entity = self._entities[index]
        entity.children = []
        entity.materials = []
        entity.in_use = False
        self._deleted.append(index)

    def is_valid_index(self, index: int) -> bool:
        """Return True if ``index`` refers to a live entity."""
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if not 0 <= index < len(self._entities):
            return False
        return index not in self._deleted

    def _require(self, index: int, what: str = "Index") -> Entity:
        if not self.is_valid_index(index):
            raise EntityError(f"{what} ({index}) references an invalid entity.")
        return self._entities[index]

    def link_child(
        self, parent_index: int, child_index: int, models: ModelList | None = None
    ) -> None:
        """Append ``child_index`` to the children of a parent entity.

        The child must be a live entity or, for model parents, a model in
        ``models``.
        """
        parent = self._require(parent_index, "Parent index")
        if parent.child_type is ChildType.ENTITY:
            if not self.is_valid_index(child_index):
                raise EntityError(
                    f"Child index ({child_index}) references an invalid entity."
                )
        elif parent.child_type is ChildType.MODEL:
            if models is None or not models.is_valid_index(child_index):
                raise EntityError(
                    f"Child index ({child_index}) references an invalid model."
                )
        else:
            raise EntityError(
                'Parent cannot have children because it is set to type "none"'
            )
        parent.children.append(child_index)

    def unlink_child(self, parent_index: int, child_index: int) -> None:
        """Remove the first link from a parent to ``child_index``."""
        parent = self._require(parent_index, "Parent index")
        if not parent.children:
            raise EntityError("Cannot unlink child. Parent has no children.")
        try:
            parent.children.remove(child_index)
        except ValueError:
            raise EntityError(
                f"Entity {parent_index} has no child {child_index}."
            ) from None

    def set_position(self, index: int, position) -> None:
        """Set the position from a mapping with x, y, z or a 3-sequence."""
        entity = self._require(index)
        x, y, z = _components(position, "xyz")
        entity.position = (x, y, z)

    def set_orientation(self, index: int, orientation) -> None:
        """Set the orientation from w, x, y, z and normalise it."""
        entity = self._require(index)
        w, x, y, z = _components(orientation, "wxyz")
        norm = math.sqrt(w * w + x * x + y * y + z * z)
        if norm == 0.0 or not math.isfinite(norm):
            raise EntityError("Cannot normalize a zero-length quaternion.")
        entity.orientation = (w / norm, x / norm, y / norm, z / norm)

    def set_scale(self, index: int, scale) -> None:
        """Set the uniform scale of an entity."""
        entity = self._require(index)
        if isinstance(scale, bool) or not isinstance(scale, Real):
            raise EntityError("Argument 2 must be a float.")
        entity.scale = float(scale)

    def describe(self, index: int) -> str:
        """Return a readable dump of an entity."""
        if not self.is_valid_index(index):
            raise EntityError(f"{index} is not a valid entity index.")
        entity = self._entities[index]
        w, x, y, z = entity.orientation
        children = ", ".join(str(c) for c in entity.children)
        position = ", ".join(f"{c:f}" for c in entity.position)
        lines = [
            f"ENTITY #{index}",
            f"\tchildren {{{children}}}",
            f"\tchildren_length {len(entity.children)}",
            f"\tchildType {int(entity.child_type)}",
            f"\tposition {{{position}}}",
            f"\torientation {{{x:f}, {y:f}, {z:f}, {w:f}}}",
        ]
        return "\n".join(lines)

    def __getitem__(self, index: int) -> Entity:
        if not self.is_valid_index(index):
            raise IndexError(f"{index} is not a valid entity index")
        return self._entities[index]

    def __len__(self) -> int:
        """Number of slots, deleted ones included."""
        return len(self._entities)