"""
Простой загрузчик/сохранитель конфигурации загрузчика в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(на диск ничего не пишется, пока не вызван `save()`).
"""

import copy
import json
from pathlib import Path
from objmesh.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    "encoding": "utf-8",
    "default_material": {"diffuse_color": [0.8, 0.8, 0.8], "shininess": 32.0},
    "fallback_normal": [0.0, 1.0, 0.0],
    "log_level": "INFO",
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "objmesh.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий `Config()` перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path.is_file():
            self._read()
        else:
            logger.info("[Config] No config file – using defaults.")
        if not set_log_level(self.data.get("log_level", "INFO")):
            self.data["log_level"] = DEFAULT_CONFIG["log_level"]

    def _read(self):
        try:
            with self.path.open("r", encoding="utf-8") as f:
                self.data.update(json.load(f))
            logger.info("[Config] Loaded configuration.")
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
