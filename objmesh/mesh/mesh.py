# -*- coding: utf-8 -*-
"""
Результат загрузки OBJ – неизменяемый «снимок» меша.

Вершины хранятся раздельными numpy‑массивами (позиции / нормали /
texcoords), индексы – uint32, плюс список `MeshChunk` – диапазонов
индексного буфера, рисуемых одним материалом.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

from objmesh.assets.material import MaterialDefinition


class Vertex(NamedTuple):
    """Вершина PNT: position, normal, texcoord."""
    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    texcoord: tuple[float, float]


class MeshChunk:
    """Непрерывный кусок индексного буфера с одним материалом."""

    __slots__ = ("start_index", "index_count", "material")

    def __init__(self, start_index: int = 0, index_count: int = 0,
                 material: MaterialDefinition | None = None):
        self.start_index = start_index
        self.index_count = index_count
        self.material = material

    @property
    def end_index(self) -> int:
        return self.start_index + self.index_count

    @property
    def triangle_count(self) -> int:
        return self.index_count // 3

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeshChunk):
            return NotImplemented
        return (self.start_index, self.index_count, self.material) == \
               (other.start_index, other.index_count, other.material)

    def __repr__(self) -> str:
        name = self.material.name if self.material is not None else None
        return f"MeshChunk(start={self.start_index}, count={self.index_count}, material={name!r})"


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class ObjMesh:
    """Индексированный меш, готовый к загрузке в GPU‑буферы."""

    def __init__(self,
                 positions: np.ndarray,
                 normals: np.ndarray,
                 texcoords: np.ndarray,
                 indices: np.ndarray,
                 chunks: Sequence[MeshChunk] = ()):
        self.positions = _frozen(np.array(positions, dtype=np.float32).reshape(-1, 3))
        self.normals = _frozen(np.array(normals, dtype=np.float32).reshape(-1, 3))
        self.texcoords = _frozen(np.array(texcoords, dtype=np.float32).reshape(-1, 2))
        self.indices = _frozen(np.array(indices, dtype=np.uint32).reshape(-1))
        # копии чанков – вызывающий код не должен делить их с парсером
        self.chunks = tuple(MeshChunk(c.start_index, c.index_count, c.material) for c in chunks)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def is_empty(self) -> bool:
        """Нечего рисовать: нет вершин или нет индексов."""
        return self.vertex_count == 0 or self.index_count == 0

    @property
    def triangles(self) -> np.ndarray:
        """Индексы в виде `(T, 3)`."""
        return self.indices.reshape(-1, 3)

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(
            Vertex(tuple(p.tolist()), tuple(n.tolist()), tuple(t.tolist()))
            for p, n, t in zip(self.positions, self.normals, self.texcoords)
        )

    def interleaved(self) -> np.ndarray:
        """Интерлив‑буфер `(N, 8)` float32: pos(3) + normal(3) + uv(2)."""
        return np.column_stack([self.positions, self.normals, self.texcoords]).astype(np.float32)

    def __repr__(self) -> str:
        return (f"ObjMesh(vertices={self.vertex_count}, triangles={self.triangle_count}, "
                f"chunks={len(self.chunks)})")
