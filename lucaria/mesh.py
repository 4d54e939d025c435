"""Mesh geometry prepared for drawing, and wireframe meshes for guizmos."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Future
from enum import Enum
from os import PathLike
from typing import Any

from lucaria.data import GeometryData, Mat4, UVec3, Vec3
from lucaria.fetch import Fetcher

logger = logging.getLogger(__name__)

PathType = str | PathLike[str]
UVec2 = tuple[int, int]


class MeshAttribute(Enum):
    """Vertex attributes a mesh may carry, in the order they are set up."""

    POSITION = "position"
    COLOR = "color"
    NORMAL = "normal"
    TANGENT = "tangent"
    BITANGENT = "bitangent"
    TEXCOORD = "texcoord"
    BONES = "bones"
    WEIGHTS = "weights"


MESH_ATTRIBUTE_SIZES: dict[MeshAttribute, int] = {
    MeshAttribute.POSITION: 3,
    MeshAttribute.COLOR: 3,
    MeshAttribute.NORMAL: 3,
    MeshAttribute.TANGENT: 3,
    MeshAttribute.BITANGENT: 3,
    MeshAttribute.TEXCOORD: 2,
    MeshAttribute.BONES: 4,
    MeshAttribute.WEIGHTS: 4,
}

_GEOMETRY_FIELDS: dict[MeshAttribute, str] = {
    MeshAttribute.POSITION: "positions",
    MeshAttribute.COLOR: "colors",
    MeshAttribute.NORMAL: "normals",
    MeshAttribute.TANGENT: "tangents",
    MeshAttribute.BITANGENT: "bitangents",
    MeshAttribute.TEXCOORD: "texcoords",
    MeshAttribute.BONES: "bones",
    MeshAttribute.WEIGHTS: "weights",
}


def generate_line_indices(triangle_indices: Iterable[Iterable[int]]) -> list[UVec2]:
    """Return the unique edges of the triangles, each as (low, high), sorted."""
    edges: set[UVec2] = set()
    for triangle in triangle_indices:
        x, y, z = triangle
        for a, b in ((x, y), (y, z), (z, x)):
            edges.add((min(a, b), max(a, b)))
    return sorted(edges)


def load_geometry_data(data: bytes) -> GeometryData:
    """Decode encoded geometry bytes."""
    return GeometryData.from_bytes(data)


class Mesh:
    """Triangle mesh with the vertex attributes its geometry provides."""

    def __init__(self, geometry: GeometryData) -> None:
        self._indices: list[UVec3] = [tuple(index) for index in geometry.indices]
        self._indices_count = 3 * len(self._indices)
        self._invposes: list[Mat4] = list(geometry.invposes)
        self._attributes: dict[MeshAttribute, list[tuple[Any, ...]]] = {}
        for attribute, field_name in _GEOMETRY_FIELDS.items():
            values = getattr(geometry, field_name)
            if values:
                self._attributes[attribute] = [tuple(value) for value in values]
                logger.info("Creating %s attribute", field_name)

    @property
    def indices(self) -> list[UVec3]:
        return list(self._indices)

    @property
    def indices_count(self) -> int:
        """Number of element indices drawn, three per triangle."""
        return self._indices_count

    @property
    def invposes(self) -> list[Mat4]:
        return list(self._invposes)

    @property
    def attributes(self) -> dict[MeshAttribute, list[tuple[Any, ...]]]:
        """The attributes present in this mesh and their per-vertex values."""
        return {key: list(values) for key, values in self._attributes.items()}

    def __contains__(self, attribute: MeshAttribute) -> bool:
        return attribute in self._attributes


class GuizmoMesh:
    """Line mesh drawn as a wireframe overlay."""

    def __init__(self, positions: Iterable[Iterable[float]], indices: Iterable[Iterable[int]]) -> None:
        self._positions: list[Vec3] = []
        self._indices: list[UVec2] = []
        self.update(positions, indices)

    @classmethod
    def from_geometry(cls, geometry: GeometryData) -> GuizmoMesh:
        """Build the wireframe of a triangle geometry."""
        return cls(geometry.positions, generate_line_indices(geometry.indices))

    def update(self, positions: Iterable[Iterable[float]], indices: Iterable[Iterable[int]]) -> None:
        """Replace the positions and line indices."""
        self._positions = [tuple(position) for position in positions]
        self._indices = [tuple(pair) for pair in indices]

    @property
    def positions(self) -> list[Vec3]:
        return list(self._positions)

    @property
    def indices(self) -> list[UVec2]:
        return list(self._indices)

    @property
    def indices_count(self) -> int:
        """Number of element indices drawn, two per line."""
        return 2 * len(self._indices)


def fetch_mesh(fetcher: Fetcher, path: PathType) -> Future[Mesh]:
    """Fetch and decode a geometry file into a mesh.

    The future stays pending if the file cannot be fetched, and fails if
    the file cannot be decoded.
    """
    future: Future[Mesh] = Future()

    def on_data(data: bytes) -> None:
        try:
            mesh = Mesh(load_geometry_data(data))
        except ValueError as error:
            future.set_exception(error)
            return
        future.set_result(mesh)

    fetcher.fetch_file(path, on_data)
    return future