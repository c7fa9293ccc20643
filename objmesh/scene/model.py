"""
Model – OBJ‑меш + список draw‑call'ов, готовый для рендера.

Один draw‑call на каждый непустой чанк: диапазон индексов, параметры
шейдинга и (если есть) хэндл diffuse‑текстуры.  Ошибка загрузки
текстуры не роняет модель – она попадает в `warnings`, а чанк рисуется
без карты.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from objmesh.assets.material import DEFAULT_DIFFUSE, DEFAULT_SHININESS
from objmesh.assets.texture_manager import TextureManager
from objmesh.errors import TextureLoadError
from objmesh.mesh.mesh import ObjMesh
from objmesh.utils.loader import load_obj_mesh
from objmesh.utils.logger import logger


class DrawCall:
    """Параметры одного glDrawElements‑вызова."""

    __slots__ = ("start_index", "index_count", "diffuse_color", "shininess", "texture")

    def __init__(self, start_index: int, index_count: int,
                 diffuse_color=DEFAULT_DIFFUSE, shininess: float = DEFAULT_SHININESS,
                 texture: Any = None):
        self.start_index = start_index
        self.index_count = index_count
        self.diffuse_color = tuple(diffuse_color)
        self.shininess = shininess
        self.texture = texture

    @property
    def has_diffuse(self) -> bool:
        return self.texture is not None

    @property
    def byte_offset(self) -> int:
        """Смещение в индексном буфере (uint32) в байтах."""
        return self.start_index * 4

    def __repr__(self) -> str:
        return (f"DrawCall(start={self.start_index}, count={self.index_count}, "
                f"diffuse={self.diffuse_color}, has_diffuse={self.has_diffuse})")


class Model:
    """Загруженный меш и его draw‑call'ы."""

    def __init__(self, mesh: ObjMesh, draw_calls: list[DrawCall],
                 warnings: list[str] | None = None, name: str = "Model"):
        self.mesh = mesh
        self.draw_calls = draw_calls
        self.warnings = warnings or []
        self.name = name

    @property
    def index_count(self) -> int:
        return self.mesh.index_count

    # -----------------------------------------------------------------
    @classmethod
    def load(cls,
             path: str | Path,
             texture_manager: TextureManager | None = None,
             config: Mapping | None = None) -> "Model":
        """
        Загрузить OBJ и построить draw‑call'ы.

        Ошибки `SourceUnreadableError` / `EmptyGeometryError` пробрасываются
        наружу; проблемы с текстурами – только предупреждения.
        """
        path = Path(path)
        mesh = load_obj_mesh(path, config)
        if texture_manager is None:
            texture_manager = TextureManager()
        draw_calls, warnings = build_draw_calls(mesh, texture_manager)
        for msg in warnings:
            logger.warning(f"[Model] {msg}")
        return cls(mesh, draw_calls, warnings, name=path.stem)


def build_draw_calls(mesh: ObjMesh,
                     textures: TextureManager | None = None) -> tuple[list[DrawCall], list[str]]:
    """
    Чанки → draw‑call'ы.

    Если чанков нет – один draw‑call на весь индексный буфер с
    параметрами по‑умолчанию.
    """
    draws: list[DrawCall] = []
    warnings: list[str] = []
    failed: set[str] = set()

    for chunk in mesh.chunks:
        if chunk.index_count == 0:
            continue
        material = chunk.material
        texture = None
        if material.diffuse_texture is not None and textures is not None:
            key = str(material.diffuse_texture)
            if key not in failed:
                try:
                    texture = textures.get(material.diffuse_texture)
                except TextureLoadError as exc:
                    failed.add(key)
                    warnings.append(str(exc))
        draws.append(DrawCall(chunk.start_index, chunk.index_count,
                              material.diffuse_color, material.shininess, texture))

    if not draws:
        draws.append(DrawCall(0, mesh.index_count))
    return draws, warnings
