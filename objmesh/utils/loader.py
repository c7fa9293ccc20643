# -*- coding: utf-8 -*-
"""
Парсер Wavefront OBJ с поддержкой материалов MTL.

Поддерживаемые директивы: v, vt, vn, f, mtllib, usemtl.
Всё остальное (o, g, s, l …) игнорируется.

Результат – `ObjMesh`: дедуплицированные вершины, индексы треугольников
и список чанков (диапазонов индексов с одним материалом).

Битые локальные записи (неверный индекс в грани, неизвестный материал,
нечитаемый MTL) не прерывают разбор – они логируются и пропускаются.
Фатальны только нечитаемый OBJ‑файл и полностью пустая геометрия.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Mapping

import numpy as np

from objmesh.assets.material import MaterialDefinition, make_default_material, resolve_material
from objmesh.assets.mtl_parser import normalize_path, parse_mtl_file
from objmesh.errors import EmptyGeometryError, SourceUnreadableError
from objmesh.geometry.face import ABSENT, fan_triangles, parse_corner, resolve_index
from objmesh.geometry.normals import UP, synthesize_normals
from objmesh.geometry.vertex_cache import ZERO2, ZERO3, VertexCache, VertexKey
from objmesh.mesh.mesh import MeshChunk, ObjMesh
from objmesh.utils.config import DEFAULT_CONFIG
from objmesh.utils.logger import logger
from objmesh.utils.parsing import iter_directives, read_floats
from objmesh.utils.profiler import Profiler


def iter_records(lines: Iterable[str]) -> Iterator[tuple[str, list[str]]]:
    """Ленивая последовательность классифицированных записей OBJ."""
    return iter_directives(lines)


class ParseContext:
    """
    Всё изменяемое состояние одного разбора.

    Списки атрибутов, кэш вершин, индексный буфер, текущий чанк и
    библиотека материалов живут только пока идёт разбор; наружу
    отдаётся лишь `ObjMesh` из `finish()`.
    """

    def __init__(self, base_dir: str | Path = ".", config: Mapping | None = None):
        self.base_dir = Path(base_dir)
        self.config = config or DEFAULT_CONFIG
        self.encoding = self.config.get("encoding", "utf-8")

        self.positions: list[tuple] = []
        self.texcoords: list[tuple] = []
        self.normals: list[tuple] = []
        self.cache = VertexCache(self.positions, self.texcoords, self.normals)
        self.indices: list[int] = []

        self.materials: dict[str, MaterialDefinition] = {}
        self.default_material = make_default_material(self.config)
        self.chunks: list[MeshChunk] = []
        self.active = MeshChunk(0, 0, self.default_material)
        self.active_name = ""

        self.skipped_triangles = 0
        self.skipped_faces = 0

        self._handlers = {
            "v": self._on_position,
            "vt": self._on_texcoord,
            "vn": self._on_normal,
            "f": self._on_face,
            "mtllib": self._on_mtllib,
            "usemtl": self._on_usemtl,
        }

    # -----------------------------------------------------------------
    # диспетчеризация
    # -----------------------------------------------------------------
    def feed(self, lines: Iterable[str]) -> "ParseContext":
        for directive, args in iter_records(lines):
            handler = self._handlers.get(directive)
            if handler is not None:
                handler(args)
        return self

    # -----------------------------------------------------------------
    # атрибуты вершин
    # -----------------------------------------------------------------
    def _on_position(self, args):
        self.positions.append(read_floats(args, ZERO3))

    def _on_texcoord(self, args):
        self.texcoords.append(read_floats(args, ZERO2))

    def _on_normal(self, args):
        self.normals.append(read_floats(args, ZERO3))

    # -----------------------------------------------------------------
    # материалы
    # -----------------------------------------------------------------
    def _on_mtllib(self, args):
        for name in args:
            parse_mtl_file(normalize_path(self.base_dir, name), self.materials, self.encoding)

    def _on_usemtl(self, args):
        name = args[0] if args else ""
        if name == self.active_name:
            return

        end = len(self.indices)
        if self.active.index_count > 0:
            self.chunks.append(self.active)
            self.active = MeshChunk(end, 0, self.active.material)
        else:
            self.active.start_index = end

        self.active_name = name
        material = resolve_material(name, self.materials, self.default_material)
        if material is self.default_material:
            logger.debug(f"[ObjLoader] Unknown material '{name}', using default")
        self.active.material = material

    # -----------------------------------------------------------------
    # грани
    # -----------------------------------------------------------------
    def _emit_corner(self, corner: tuple[int, int, int]) -> int:
        v, t, n = corner
        position = resolve_index(v, len(self.positions))
        if position == ABSENT:
            return ABSENT
        key = VertexKey(position,
                        resolve_index(t, len(self.texcoords)),
                        resolve_index(n, len(self.normals)))
        return self.cache.resolve(key)

    def _on_face(self, args):
        if len(args) < 3:
            return
        try:
            corners = [parse_corner(token) for token in args]
        except ValueError as exc:
            self.skipped_faces += 1
            logger.warning(f"[ObjLoader] Skipping malformed face 'f {' '.join(args)}': {exc}")
            return

        emitted = 0
        for triangle in fan_triangles(corners, self._emit_corner):
            self.indices.extend(triangle)
            emitted += 1
        self.active.index_count += 3 * emitted
        self.skipped_triangles += len(corners) - 2 - emitted

    # -----------------------------------------------------------------
    def finish(self) -> ObjMesh:
        """Закрыть последний чанк, посчитать нормали и собрать `ObjMesh`."""
        chunks = list(self.chunks)
        if self.active.index_count > 0:
            chunks.append(self.active)

        positions = np.array(self.cache.positions, dtype=np.float32).reshape(-1, 3)
        texcoords = np.array(self.cache.texcoords, dtype=np.float32).reshape(-1, 2)
        normals = np.array(self.cache.normals, dtype=np.float32).reshape(-1, 3)
        indices = np.array(self.indices, dtype=np.uint32)

        with Profiler("normals"):
            normals = synthesize_normals(positions, normals, indices,
                                         fallback=self.config.get("fallback_normal", UP))

        if self.skipped_triangles:
            logger.warning(f"[ObjLoader] {self.skipped_triangles} triangle(s) skipped "
                           f"because of invalid vertex references")
        if self.skipped_faces:
            logger.warning(f"[ObjLoader] {self.skipped_faces} malformed face record(s) skipped")
        logger.debug(f"[ObjLoader] vertex cache: {self.cache.hits} hits, "
                     f"{self.cache.misses} misses")
        return ObjMesh(positions, normals, texcoords, indices, chunks)


def parse_obj(lines: Iterable[str],
              base_dir: str | Path = ".",
              config: Mapping | None = None) -> ObjMesh:
    """
    Разобрать OBJ‑текст (итерируемое строк).

    `base_dir` – каталог, относительно которого ищутся `mtllib`‑файлы.
    Пустой результат здесь не ошибка – см. `load_obj_mesh`.
    """
    return ParseContext(base_dir, config).feed(lines).finish()


def load_obj_mesh(path: str | Path, config: Mapping | None = None) -> ObjMesh:
    """
    Загрузить OBJ‑файл.

    Raises:
        SourceUnreadableError – файл не открывается.
        EmptyGeometryError    – в файле нет ни вершин, ни треугольников.
    """
    path = Path(path)
    config = config or DEFAULT_CONFIG
    encoding = config.get("encoding", "utf-8")

    with Profiler(f"load {path.name}") as prof:
        try:
            with path.open("r", encoding=encoding, errors="replace") as f:
                mesh = parse_obj(f, path.parent, config)
        except OSError as exc:
            logger.error(f"[ObjLoader] Unable to open OBJ file: {path}: {exc}")
            raise SourceUnreadableError(path, exc.strerror) from exc

    if mesh.is_empty:
        logger.error(f"[ObjLoader] {path}: no drawable geometry")
        raise EmptyGeometryError(path)

    logger.info(f"[ObjLoader] Loaded {path.name}: {mesh.vertex_count} vertices, "
                f"{mesh.triangle_count} triangles, {len(mesh.chunks)} chunk(s) "
                f"in {prof.elapsed_ms:.1f} ms")
    return mesh
