"""
objmesh – загрузчик Wavefront OBJ/MTL для Python.

Превращает текстовый OBJ (+ MTL‑библиотеки) в индексированный меш:
дедуплицированные вершины, индексы треугольников и чанки по материалам.
"""

from objmesh.utils import logger
from objmesh.errors import (
    MeshLoadError, SourceUnreadableError, EmptyGeometryError, TextureLoadError
)
from objmesh.assets.material import MaterialDefinition, DEFAULT_MATERIAL
from objmesh.assets.mtl_parser import parse_mtl_file
from objmesh.assets.texture_manager import TextureManager
from objmesh.mesh import Vertex, MeshChunk, ObjMesh
from objmesh.utils.loader import load_obj_mesh, parse_obj
from objmesh.scene import Model, DrawCall

__version__ = "1.0.0"

__all__ = [
    "load_obj_mesh",
    "parse_obj",
    "parse_mtl_file",
    "MaterialDefinition",
    "DEFAULT_MATERIAL",
    "Vertex",
    "MeshChunk",
    "ObjMesh",
    "Model",
    "DrawCall",
    "TextureManager",
    "MeshLoadError",
    "SourceUnreadableError",
    "EmptyGeometryError",
    "TextureLoadError",
]
