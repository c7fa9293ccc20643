"""
Пакет scene – Model (меш + draw‑call'ы для рендера).
"""

from objmesh.scene.model import Model, DrawCall, build_draw_calls

__all__ = ["Model", "DrawCall", "build_draw_calls"]
