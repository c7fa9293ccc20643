"""
Загрузчики текстур – внешний «коллаборатор» для Model.

Парсер OBJ/MTL никогда не открывает изображения сам: он только выдаёт
нормализованный путь.  Превращать путь в хэндл – задача `TextureLoader`.
По‑умолчанию используется `PillowTextureLoader` (PNG/JPG/TGA… → RGBA).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from objmesh.errors import TextureLoadError
from objmesh.utils.logger import logger


class TextureLoader(ABC):
    """Интерфейс: путь → хэндл текстуры (или TextureLoadError)."""

    @abstractmethod
    def load(self, path: Path) -> Any:
        pass


class TextureImage:
    """Декодированная RGBA8‑картинка (CPU‑сторона)."""

    __slots__ = ("path", "width", "height", "pixels")

    def __init__(self, path: Path, pixels: np.ndarray):
        self.path = path
        self.pixels = pixels
        self.height, self.width = pixels.shape[:2]

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def __repr__(self) -> str:
        return f"TextureImage({str(self.path)!r}, {self.width}x{self.height})"


class PillowTextureLoader(TextureLoader):
    """Загружает изображение через Pillow и приводит к RGBA8."""

    def __init__(self, flip_vertical: bool = False):
        # OpenGL ждёт первую строку снизу – по желанию переворачиваем
        self.flip_vertical = flip_vertical

    def load(self, path: Path) -> TextureImage:
        p = Path(path).expanduser()
        if not p.is_file():
            raise TextureLoadError(p, "file not found")
        try:
            with Image.open(p) as img:
                img = img.convert("RGBA")
                if self.flip_vertical:
                    img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
                pixels = np.array(img, dtype=np.uint8)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise TextureLoadError(p, str(exc)) from exc

        tex = TextureImage(p, pixels)
        logger.debug(f"[TextureLoader] Loaded texture {p} ({tex.width}x{tex.height})")
        return tex
