"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, set_level, setup_file_logging
from .error_handling import (
    PegThingError, InvalidBoardError, InvalidPositionError,
    InvalidMoveError, NoSolutionError, handle_errors, validate_board
)

__all__ = [
    'get_logger', 'set_level', 'setup_file_logging',
    'PegThingError', 'InvalidBoardError', 'InvalidPositionError',
    'InvalidMoveError', 'NoSolutionError', 'handle_errors', 'validate_board'
]
