# -*- coding: utf-8 -*-
"""
Проход по нормалям после сборки буферов.

* Если в файле были нормали (хотя бы одна ненулевая) – просто
  перенормируем ненулевые; нулевые так и остаются нулевыми.
* Если нормалей нет совсем – считаем face‑normal каждого треугольника,
  накапливаем его в трёх вершинах и нормируем сумму.  Вершины, в
  которые ничего не попало, получают up‑вектор (0, 1, 0).
"""

from __future__ import annotations

import numpy as np

UP = (0.0, 1.0, 0.0)


def has_supplied_normals(normals: np.ndarray) -> bool:
    """True, если хотя бы одна нормаль ненулевая."""
    if len(normals) == 0:
        return False
    return bool(np.any(np.einsum("ij,ij->i", normals, normals) > 0.0))


def _normalize_nonzero(vectors: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Нормировать строки с ненулевой длиной; вернуть (результат, маску ненулевых)."""
    sq = np.einsum("ij,ij->i", vectors, vectors)
    nonzero = sq > 0.0
    out = vectors.copy()
    out[nonzero] /= np.sqrt(sq[nonzero])[:, None]
    return out, nonzero


def face_normals(positions: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """
    `normalize(cross(b - a, c - a))` для каждого треугольника `(K, 3)`.

    Для вырожденных треугольников результат содержит NaN.
    """
    a = positions[triangles[:, 0]]
    b = positions[triangles[:, 1]]
    c = positions[triangles[:, 2]]
    cross = np.cross(b - a, c - a)
    with np.errstate(invalid="ignore", divide="ignore"):
        length = np.sqrt(np.einsum("ij,ij->i", cross, cross))
        return cross / length[:, None]


def synthesize_normals(
    positions: np.ndarray,
    normals: np.ndarray,
    indices: np.ndarray,
    fallback=UP,
) -> np.ndarray:
    """
    Вернуть новый массив нормалей `(N, 3)` float32.

    positions : (N, 3) – позиции вершин.
    normals   : (N, 3) – нормали, как их собрал парсер (нули = «нет»).
    indices   : (M,)   – индексный буфер, тройки = треугольники.
    """
    normals = np.asarray(normals, dtype=np.float64).reshape(-1, 3)
    if len(indices) < 3:
        return normals.astype(np.float32)

    if has_supplied_normals(normals):
        result, _ = _normalize_nonzero(normals)
        return result.astype(np.float32)

    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    triangles = np.asarray(indices, dtype=np.int64)[: len(indices) // 3 * 3].reshape(-1, 3)

    per_face = face_normals(positions, triangles)
    valid = ~np.isnan(per_face).any(axis=1)
    per_face = per_face[valid]
    triangles = triangles[valid]

    accum = np.zeros_like(positions)
    for corner in range(3):
        np.add.at(accum, triangles[:, corner], per_face)

    result, nonzero = _normalize_nonzero(accum)
    result[~nonzero] = fallback
    return result.astype(np.float32)
