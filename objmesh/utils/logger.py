# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Единый логгер пакета.  Все модули пишут в "objmesh" с префиксом
# компонента в квадратных скобках: [ObjLoader], [MtlParser] …
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "objmesh"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


def set_log_level(level) -> bool:
    """
    Поменять уровень логгера (int или имя: "DEBUG", "INFO" …).

    Неизвестное имя сбрасывает уровень на INFO – вернётся False, а в лог уйдёт
    предупреждение.
    """
    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        logger.warning(f"[Config] Unknown log level {level!r}, keeping INFO")
        logger.setLevel(logging.INFO)
        return False
    logger.setLevel(resolved)
    return True


logger = init_logger()
