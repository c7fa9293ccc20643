# objmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * set_log_level – смена уровня логирования
"""

from .logger import logger, set_log_level

__all__ = ["logger", "set_log_level"]
