#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Пример: загрузить OBJ и вывести, что получится на стороне рендера.

    python examples/inspect_model.py [path/to/model.obj]

Без аргумента грузится examples/assets/crate.obj.  Текстуры crate_wood.png
в комплекте нет – это нормально, в выводе появится предупреждение.
"""

from __future__ import annotations

import sys
from pathlib import Path

from objmesh import MeshLoadError, Model
from objmesh.utils import logger


def main(argv: list[str]) -> int:
    path = Path(argv[1]) if len(argv) > 1 else Path(__file__).parent / "assets" / "crate.obj"
    try:
        model = Model.load(path)
    except MeshLoadError as exc:
        logger.error(str(exc))
        return 1

    mesh = model.mesh
    print(f"{path.name}: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles")
    for i, draw in enumerate(model.draw_calls):
        print(f"  draw #{i}: indices [{draw.start_index}, {draw.start_index + draw.index_count}) "
              f"diffuse={draw.diffuse_color} shininess={draw.shininess} "
              f"textured={draw.has_diffuse}")
    for msg in model.warnings:
        print(f"  warning: {msg}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
