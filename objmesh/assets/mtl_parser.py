# -*- coding: utf-8 -*-
"""
Парсер Wavefront MTL.

Поддерживаются директивы:
    newmtl NAME   – начало нового материала
    Kd r g b      – diffuse‑цвет
    Ns s          – блеск (shininess)
    map_Kd FILE   – diffuse‑карта, путь относительно каталога MTL‑файла

Остальные директивы, пустые строки и комментарии игнорируются.
Если файл не открывается – это не ошибка: библиотека просто остаётся
без новых материалов, а меш рисуется материалом по‑умолчанию.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from objmesh.assets.material import DEFAULT_DIFFUSE, DEFAULT_SHININESS, MaterialDefinition
from objmesh.utils.logger import logger
from objmesh.utils.parsing import iter_directives, read_floats


def normalize_path(base_dir: str | Path, name: str) -> Path:
    """`base_dir / name` с лексической нормализацией (без обращения к ФС)."""
    return Path(os.path.normpath(os.path.join(str(base_dir), name)))


def parse_mtl_lines(
    lines: Iterable[str],
    base_dir: str | Path = ".",
    library: dict[str, MaterialDefinition] | None = None,
) -> dict[str, MaterialDefinition]:
    """Разобрать MTL‑текст и дописать материалы в `library`."""
    if library is None:
        library = {}

    name: str | None = None
    diffuse = DEFAULT_DIFFUSE
    shininess = DEFAULT_SHININESS
    texture: Path | None = None

    def commit():
        if name:
            library[name] = MaterialDefinition(name, diffuse, shininess, texture)

    for directive, args in iter_directives(lines):
        if directive == "newmtl":
            commit()
            name = args[0] if args else None
            diffuse = DEFAULT_DIFFUSE
            shininess = DEFAULT_SHININESS
            texture = None
        elif directive == "Kd":
            diffuse = read_floats(args, diffuse)
        elif directive == "Ns":
            shininess = read_floats(args, (shininess,))[0]
        elif directive == "map_Kd":
            if args:
                texture = normalize_path(base_dir, args[0])

    commit()
    return library


def parse_mtl_file(
    path: str | Path,
    library: dict[str, MaterialDefinition] | None = None,
    encoding: str = "utf-8",
) -> dict[str, MaterialDefinition]:
    """
    Прочитать MTL‑файл и слить его материалы в `library`.

    Одноимённые материалы перезаписываются (побеждает последний).
    """
    if library is None:
        library = {}

    path = Path(path)
    before = len(library)
    try:
        with path.open("r", encoding=encoding, errors="replace") as f:
            parse_mtl_lines(f, path.parent, library)
    except OSError as exc:
        logger.warning(f"[MtlParser] Unable to open material library {path}: {exc}")
        return library

    logger.debug(f"[MtlParser] {path}: {len(library) - before} new material(s), "
                 f"{len(library)} total")
    return library
