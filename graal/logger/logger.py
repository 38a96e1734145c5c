"""
Logger — конфигурация логирования graal

Единый root-логгер проекта "graal" и дочерние логгеры компонентов
("graal.checked", "graal.harness"). Уровень берётся из LOG_LEVEL (default: INFO).

Ядро алгоритмов (graal.core.ranges) не логирует.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "get_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "graal",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Конфигурация и получение логгера.

    Handler добавляется один раз: повторный вызов возвращает уже
    настроенный логгер без изменений.

    Args:
        name: Имя логгера (обычно имя проекта)
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Формат сообщений (default: DEFAULT_FORMAT)

    Returns:
        Настроенный логгер
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or DEFAULT_FORMAT

    configured = logging.getLogger(name)

    if not configured.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured


def get_logger(component: str) -> logging.Logger:
    """Дочерний логгер компонента: graal.<component>."""
    return logger.getChild(component)


# Логгер проекта по умолчанию
logger = setup_logger()
