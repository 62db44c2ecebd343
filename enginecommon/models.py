"""The list of loaded models that entities refer to by index."""

from __future__ import annotations

from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]


def _zero3() -> Vec3:
    return (0.0, 0.0, 0.0)


@dataclass
class Model:
    """Geometry of one loaded model.

    ``vertices``, ``faces`` and ``surface_normals`` describe indexed triangle
    geometry. The ``gl_*`` lists are flat arrays ready for rendering, and the
    ``collision_*`` fields describe the collision mesh and its bounding boxes.
    """

    vertices: list[Vec3] = field(default_factory=list)
    faces: list[tuple[int, int, int]] = field(default_factory=list)
    surface_normals: list[Vec3] = field(default_factory=list)

    gl_vertices: list[float] = field(default_factory=list)
    gl_normals: list[float] = field(default_factory=list)
    gl_tex_coords: list[float] = field(default_factory=list)
    bounding_sphere: float = 0.0

    tex_coords: list[tuple[Vec2, Vec2, Vec2]] = field(default_factory=list)
    tex_coords_textures: list[int] = field(default_factory=list)
    num_bindable_materials: int = 0
    default_materials: list[int] = field(default_factory=list)

    collision_vertices: list[float] = field(default_factory=list)
    collision_bb_mins: Vec3 = field(default_factory=_zero3)
    collision_bb_maxs: Vec3 = field(default_factory=_zero3)
    collision_aabb_mins: Vec3 = field(default_factory=_zero3)
    collision_aabb_maxs: Vec3 = field(default_factory=_zero3)


class ModelList:
    """An indexed collection of models; a model's index never changes."""

    def __init__(self) -> None:
        self._models: list[Model] = []

    def create(self) -> tuple[int, Model]:
        """Append a fresh model and return its index together with it."""
        model = Model()
        self._models.append(model)
        return len(self._models) - 1, model

    def remove_last(self) -> None:
        """Discard the most recently created model."""
        if not self._models:
            raise IndexError("model list is empty")
        self._models.pop()

    def is_valid_index(self, index: int) -> bool:
        """Return True if ``index`` refers to a model in the list."""
        return 0 <= index < len(self._models)

    def clear(self) -> None:
        """Drop every model."""
        self._models.clear()

    def __len__(self) -> int:
        return len(self._models)

    def __getitem__(self, index: int) -> Model:
        if not self.is_valid_index(index):
            raise IndexError(f"{index} is not a valid model index")
        return self._models[index]