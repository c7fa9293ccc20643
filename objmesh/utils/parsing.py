# objmesh/utils/parsing.py
"""
Мелкие помощники для построчных текстовых форматов (OBJ / MTL).
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def iter_directives(lines: Iterable[str]) -> Iterator[tuple[str, list[str]]]:
    """
    Ленивая последовательность `(директива, аргументы)`.

    Пустые строки и комментарии (`#` в начале строки) пропускаются,
    директива сравнивается с учётом регистра.
    """
    for line in lines:
        line = line.strip()
        if not line or line[0] == "#":
            continue
        parts = line.split()
        yield parts[0], parts[1:]


def read_floats(tokens: Sequence[str], current: Sequence[float]) -> tuple[float, ...]:
    """
    Прочитать `len(current)` чисел из `tokens`.

    Поведение как у потокового чтения: первое нечитаемое/отсутствующее
    число становится 0.0, а все последующие сохраняют значения из `current`.
    """
    values = list(current)
    for i in range(len(values)):
        try:
            values[i] = float(tokens[i])
        except (IndexError, ValueError):
            values[i] = 0.0
            break
    return tuple(values)
