# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись OBJ/MTL во временный каталог и
мок‑загрузчик текстур, который только записывает вызовы.
"""

from pathlib import Path
from textwrap import dedent
from typing import Any, Callable

import pytest

from objmesh.errors import TextureLoadError
from objmesh.utils.texture_loader import TextureLoader


# ----------------------------------------------------------------------
# MockTextureLoader – реализует интерфейс TextureLoader без Pillow
# ----------------------------------------------------------------------
class MockTextureLoader(TextureLoader):
    """
    Возвращает «хэндл» вида ("tex", путь) для файлов из `available`,
    для остальных бросает TextureLoadError.  Каждый вызов пишется в `calls`.
    """

    def __init__(self, available=None) -> None:
        self.available = {str(Path(p)) for p in (available or [])}
        self.calls: list[str] = []

    def load(self, path: Path) -> Any:
        self.calls.append(str(path))
        if str(path) not in self.available:
            raise TextureLoadError(path, "not available")
        return ("tex", str(path))

    def count(self, path) -> int:
        """Сколько раз загружали `path`."""
        return sum(1 for p in self.calls if p == str(Path(path)))


# ----------------------------------------------------------------------
@pytest.fixture
def write_file(tmp_path) -> Callable[[str, str], Path]:
    """Записать текст (dedent) в tmp_path/name и вернуть путь."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip("\n"), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def mock_textures() -> Callable[..., MockTextureLoader]:
    def _make(available=None) -> MockTextureLoader:
        return MockTextureLoader(available)
    return _make


@pytest.fixture
def square_obj() -> str:
    """Четыре вершины в плоскости XY и квад без нормалей."""
    return """
    v 0 0 0
    v 1 0 0
    v 1 1 0
    v 0 1 0
    f 1 2 3 4
    """
