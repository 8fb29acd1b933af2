"""
utils/error_handling.py

Исключения игры и обработка ошибок на границах ввода/вывода.
"""

from typing import Callable, Any
from functools import wraps

from .logging import get_logger


class PegThingError(Exception):
    """Базовое исключение игры."""
    pass


class InvalidBoardError(PegThingError, ValueError):
    """Невозможно построить доску (например, rows < 1)."""
    pass


class InvalidPositionError(PegThingError, ValueError):
    """Позиция вне доски."""
    pass


class InvalidMoveError(PegThingError):
    """Ход недопустим на текущей доске."""

    def __init__(self, origin: int, destination: int, message: str = ""):
        self.origin = origin
        self.destination = destination
        super().__init__(message or f"Недопустимый ход {origin} → {destination}")


class NoSolutionError(PegThingError):
    """Решение не найдено; limit_reached — поиск прерван по лимиту."""

    def __init__(self, message: str = "", limit_reached: bool = False):
        self.limit_reached = limit_reached
        super().__init__(message)


def handle_errors(default_return: Any = None, log_error: bool = True):
    """
    Декоратор: ошибки игры логируются и превращаются в default_return.

    Прочие исключения пробрасываются дальше.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PegThingError as e:
                if log_error:
                    get_logger().error(f"{func.__name__}: {e}")
                return default_return
        return wrapper
    return decorator


def validate_board(board) -> bool:
    """
    Валидирует доску.

    Args:
        board: доска для валидации

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if not hasattr(board, 'peg_count'):
        raise InvalidBoardError("Доска должна иметь метод peg_count()")

    if board.rows < 1:
        raise InvalidBoardError("Доска должна содержать хотя бы один ряд")

    if any(not 1 <= pos <= board.max_position for pos in board.pegs):
        raise InvalidBoardError("Колышек вне доски")

    return True
