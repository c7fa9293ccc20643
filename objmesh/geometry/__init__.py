"""
Пакет geometry – разбор граней, дедупликация вершин, нормали.
"""

from objmesh.geometry.face import ABSENT, resolve_index, parse_corner, fan_triangles
from objmesh.geometry.vertex_cache import VertexKey, VertexCache
from objmesh.geometry.normals import synthesize_normals, face_normals, has_supplied_normals

__all__ = ["ABSENT", "resolve_index", "parse_corner", "fan_triangles",
           "VertexKey", "VertexCache",
           "synthesize_normals", "face_normals", "has_supplied_normals"]
