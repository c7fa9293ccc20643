# objmesh/errors.py
"""
Исключения загрузчика.

Фатальными считаются только две ситуации: OBJ‑файл не открывается
и файл не содержит ни одного треугольника.  Всё остальное (битые
грани, отсутствующие материалы/MTL‑файлы, вырожденные треугольники)
логируется и пропускается.
"""

from __future__ import annotations


class MeshLoadError(RuntimeError):
    """Базовая ошибка загрузки меша."""


class SourceUnreadableError(MeshLoadError):
    """OBJ‑файл не удалось открыть/прочитать."""

    def __init__(self, path, reason: str | None = None):
        self.path = path
        self.reason = reason
        msg = f"Unable to open OBJ file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class EmptyGeometryError(MeshLoadError):
    """Разбор прошёл, но в результате нет вершин или индексов."""

    def __init__(self, path=None):
        self.path = path
        super().__init__("OBJ file does not contain any drawable geometry.")


class TextureLoadError(MeshLoadError):
    """Текстуру не удалось загрузить (не фатально для модели)."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load texture {path}: {reason}")
