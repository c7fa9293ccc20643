"""
Пакет mesh – структуры результата загрузки: Vertex, MeshChunk, ObjMesh.
"""

from objmesh.mesh.mesh import Vertex, MeshChunk, ObjMesh

__all__ = ["Vertex", "MeshChunk", "ObjMesh"]
