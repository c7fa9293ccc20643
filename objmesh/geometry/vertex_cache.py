# -*- coding: utf-8 -*-
"""
Кэш дедупликации вершин.

Угол грани ссылается на тройку (позиция, texcoord, нормаль).  Одинаковые
тройки должны давать одну и ту же вершину в итоговом буфере, поэтому
ключ – значение (`VertexKey`) со структурным сравнением и собственным
хэшем, а кэш – обычный dict «ключ → индекс вершины».
"""

from __future__ import annotations

from typing import Sequence

from objmesh.geometry.face import ABSENT

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B9

ZERO2 = (0.0, 0.0)
ZERO3 = (0.0, 0.0, 0.0)


class VertexKey:
    """Тройка 0‑based индексов; `ABSENT` (-1) – атрибута нет."""

    __slots__ = ("position", "texcoord", "normal")

    def __init__(self, position: int, texcoord: int = ABSENT, normal: int = ABSENT):
        self.position = position
        self.texcoord = texcoord
        self.normal = normal

    def __eq__(self, other) -> bool:
        if not isinstance(other, VertexKey):
            return NotImplemented
        return (self.position == other.position
                and self.texcoord == other.texcoord
                and self.normal == other.normal)

    def __hash__(self) -> int:
        seed = self.position & _MASK
        for value in (self.texcoord, self.normal):
            seed ^= ((value & _MASK) + _GOLDEN + (seed << 6) + (seed >> 2)) & _MASK
        return seed

    def __repr__(self) -> str:
        return f"VertexKey({self.position}, {self.texcoord}, {self.normal})"


class VertexCache:
    """
    Выдаёт стабильный индекс вершины для `VertexKey`.

    При первом обращении вершина собирается из исходных списков атрибутов
    и дописывается в `positions/normals/texcoords`; отсутствующие
    texcoord/нормаль – нулевые векторы.
    """

    def __init__(self,
                 positions: Sequence[tuple],
                 texcoords: Sequence[tuple],
                 normals: Sequence[tuple]):
        self._src_positions = positions
        self._src_texcoords = texcoords
        self._src_normals = normals
        self._index: dict[VertexKey, int] = {}

        self.positions: list[tuple] = []
        self.normals: list[tuple] = []
        self.texcoords: list[tuple] = []

        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, key: VertexKey) -> bool:
        return key in self._index

    def resolve(self, key: VertexKey) -> int:
        """Индекс вершины для `key` (создаёт вершину при первом обращении)."""
        found = self._index.get(key)
        if found is not None:
            self.hits += 1
            return found

        self.misses += 1
        self.positions.append(self._src_positions[key.position])
        self.texcoords.append(
            self._src_texcoords[key.texcoord] if key.texcoord != ABSENT else ZERO2)
        self.normals.append(
            self._src_normals[key.normal] if key.normal != ABSENT else ZERO3)

        new_index = len(self.positions) - 1
        self._index[key] = new_index
        return new_index
