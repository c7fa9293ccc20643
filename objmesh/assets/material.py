# -*- coding: utf-8 -*-
"""
MaterialDefinition – то, что мы вычитываем из MTL‑файла:
имя, diffuse‑цвет (Kd), блеск (Ns) и путь к diffuse‑карте (map_Kd).

Материал – неизменяемое значение: сравнивается по всем полям,
а «отсутствующий» материал всегда подменяется `DEFAULT_MATERIAL`
через `resolve_material` (никаких None‑проверок в вызывающем коде).
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

DEFAULT_DIFFUSE = (0.8, 0.8, 0.8)
DEFAULT_SHININESS = 32.0


class MaterialDefinition:
    """Параметры одного `newmtl`‑блока."""

    __slots__ = ("_name", "_diffuse_color", "_shininess", "_diffuse_texture")

    def __init__(
        self,
        name: str = "",
        diffuse_color: tuple[float, float, float] = DEFAULT_DIFFUSE,
        shininess: float = DEFAULT_SHININESS,
        diffuse_texture: str | Path | None = None,
    ) -> None:
        self._name = name
        self._diffuse_color = tuple(float(c) for c in diffuse_color)
        self._shininess = float(shininess)
        self._diffuse_texture = Path(diffuse_texture) if diffuse_texture else None

    # -----------------------------------------------------------------
    # свойства (только чтение)
    # -----------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def diffuse_color(self) -> tuple[float, float, float]:
        return self._diffuse_color

    @property
    def shininess(self) -> float:
        return self._shininess

    @property
    def diffuse_texture(self) -> Path | None:
        return self._diffuse_texture

    @property
    def has_texture(self) -> bool:
        return self._diffuse_texture is not None

    # -----------------------------------------------------------------
    def replace(self, **changes) -> "MaterialDefinition":
        """Копия материала с изменёнными полями."""
        fields = {
            "name": self._name,
            "diffuse_color": self._diffuse_color,
            "shininess": self._shininess,
            "diffuse_texture": self._diffuse_texture,
        }
        fields.update(changes)
        return MaterialDefinition(**fields)

    def _astuple(self):
        return (self._name, self._diffuse_color, self._shininess, self._diffuse_texture)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MaterialDefinition):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __hash__(self) -> int:
        return hash(self._astuple())

    def __repr__(self) -> str:
        return (f"MaterialDefinition(name={self._name!r}, "
                f"diffuse_color={self._diffuse_color}, "
                f"shininess={self._shininess}, "
                f"diffuse_texture={self._diffuse_texture!r})")


DEFAULT_MATERIAL = MaterialDefinition(name="default")


def make_default_material(config: Mapping | None = None) -> MaterialDefinition:
    """Материал‑заглушка; цвет/блеск можно переопределить в конфиге."""
    if not config:
        return DEFAULT_MATERIAL
    section = config.get("default_material") or {}
    return MaterialDefinition(
        name="default",
        diffuse_color=section.get("diffuse_color", DEFAULT_DIFFUSE),
        shininess=section.get("shininess", DEFAULT_SHININESS),
    )


def resolve_material(
    name: str,
    library: Mapping[str, MaterialDefinition],
    fallback: MaterialDefinition = DEFAULT_MATERIAL,
) -> MaterialDefinition:
    """Материал по имени, либо `fallback`, если в библиотеке его нет."""
    return library.get(name, fallback)
