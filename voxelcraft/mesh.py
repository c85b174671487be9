"""Vertex and triangle-mesh containers for chunk geometry."""

from __future__ import annotations

from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass
class Vertex:
    """One chunk-mesh vertex: 10 floats of data."""

    position: Vec3 = (0.0, 0.0, 0.0)
    tex_coord: Vec2 = (0.0, 0.0)
    tex_index: float = 0.0
    normal: Vec3 = (0.0, 0.0, 0.0)
    ao: float = 1.0


@dataclass
class MeshData:
    """Vertices and triangle indices of a mesh."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def empty(self) -> bool:
        """True when the mesh holds no vertices."""
        return not self.vertices

    def clear(self) -> None:
        """Drop all vertices and indices."""
        self.vertices.clear()
        self.indices.clear()