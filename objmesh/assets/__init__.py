# objmesh/assets/__init__.py
"""Пакет с материалами, MTL‑парсером и менеджером текстур."""
from objmesh.assets.material import MaterialDefinition, DEFAULT_MATERIAL, resolve_material
from objmesh.assets.mtl_parser import parse_mtl_file, parse_mtl_lines
from objmesh.assets.texture_manager import TextureManager

__all__ = ["MaterialDefinition", "DEFAULT_MATERIAL", "resolve_material",
           "parse_mtl_file", "parse_mtl_lines", "TextureManager"]
