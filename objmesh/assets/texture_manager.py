# objmesh/assets/texture_manager.py
"""Менеджер кэширования текстур – один путь загружается один раз."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from PIL import Image

from objmesh.errors import TextureLoadError
from objmesh.utils.logger import logger
from objmesh.utils.texture_loader import PillowTextureLoader, TextureLoader


class TextureManager:
    """Кеширующий менеджер текстур; ключ кэша – нормализованный путь."""

    def __init__(self, loader: TextureLoader | None = None):
        self.loader = loader or PillowTextureLoader()
        self._cache: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, path) -> bool:
        return os.path.normpath(str(path)) in self._cache

    def get(self, path: str | Path) -> Any:
        """Хэндл текстуры; неудача – `TextureLoadError` (в кэш не попадает)."""
        key = os.path.normpath(str(path))
        if key in self._cache:
            return self._cache[key]
        try:
            tex = self.loader.load(Path(key))
        except TextureLoadError:
            raise
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise TextureLoadError(key, str(exc)) from exc
        self._cache[key] = tex
        logger.debug(f"[TextureManager] Loaded texture: {key}")
        return tex

    def clear(self) -> None:
        self._cache.clear()
