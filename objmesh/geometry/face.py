# -*- coding: utf-8 -*-
"""
Разбор `f`‑записей OBJ: ссылки на атрибуты и fan‑триангуляция.

Форматы угла грани: `v`, `v/t`, `v/t/n`, `v//n`.
Индексы в OBJ 1‑based; отрицательные считаются от конца списка
(`-1` – последний элемент), `0` – недопустимый индекс.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator, Sequence, TypeVar

ABSENT = -1

Corner = TypeVar("Corner")

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def resolve_index(idx: int, count: int) -> int:
    """
    Перевести OBJ‑индекс в 0‑based.

    Возвращает `ABSENT` (-1) для `0` и для всего, что вне `[0, count)`.
    """
    if idx > 0:
        resolved = idx - 1
    elif idx < 0:
        resolved = count + idx
    else:
        return ABSENT
    return resolved if 0 <= resolved < count else ABSENT


def parse_corner(token: str) -> tuple[int, int, int]:
    """
    `"3/7/2"` → `(3, 7, 2)`.  Пустое поле → 0 (т.е. «нет атрибута»).

    Нечисловое поле – `ValueError` (грань целиком считается битой).
    """
    fields = token.split("/")
    if len(fields) > 3:
        raise ValueError(f"too many '/' in face corner {token!r}")
    fields += [""] * (3 - len(fields))
    v = _parse_index(fields[0], token)
    t = _parse_index(fields[1], token) if fields[1] else 0
    n = _parse_index(fields[2], token) if fields[2] else 0
    return v, t, n


def _parse_index(field: str, token: str) -> int:
    # int() принимает "1_1" и пробелы – здесь только знак и цифры
    if not _INDEX_RE.fullmatch(field):
        raise ValueError(f"bad index {field!r} in face corner {token!r}")
    return int(field)


def fan_triangles(
    corners: Sequence[Corner],
    emit: Callable[[Corner], int],
) -> Iterator[tuple[int, int, int]]:
    """
    Fan‑триангуляция от первого угла.

    `emit(corner)` превращает угол в индекс вершины (или `ABSENT`) и
    вызывается ровно один раз на угол, в порядке следования.
    Для углов c0..cn выдаются (c0, c1, c2), (c0, c2, c3) …
    Треугольник, в котором есть `ABSENT`, пропускается; при этом
    «предыдущий» угол не сдвигается, так что следующий треугольник
    строится от последнего удачного.
    """
    if len(corners) < 3:
        return
    first = emit(corners[0])
    prev = emit(corners[1])
    for token in corners[2:]:
        current = emit(token)
        if first < 0 or prev < 0 or current < 0:
            continue
        yield first, prev, current
        prev = current
