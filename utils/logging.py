"""
utils/logging.py

Логгер игры. Пишет в stderr, чтобы не смешиваться с отрисовкой доски.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class GameLogger:
    """Обёртка над logging.Logger с одним stderr-handler."""

    def __init__(self, name: str = "peg_thing", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(handler)

    def set_level(self, level: int):
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_default_logger: Optional[GameLogger] = None


def get_logger() -> GameLogger:
    """Общий логгер игры (создаётся при первом вызове)."""
    global _default_logger
    if _default_logger is None:
        _default_logger = GameLogger()
    return _default_logger


def set_level(level: int):
    get_logger().set_level(level)


def setup_file_logging(log_file: str, level: int = logging.INFO):
    """Дублирует лог в файл; при необходимости понижает уровень логгера."""
    logger = get_logger().logger

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(file_handler)
    if logger.level > level:
        logger.setLevel(level)
