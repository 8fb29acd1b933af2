"""
core - Ядро Peg Thing

Треугольная доска, граф прыжков и генерация ходов.
"""

from .board import Board, Cell, build_board
from .moves import (
    Move, legal_moves, check_move, apply_move,
    all_moves, any_move_available
)
from .utils import (
    DEFAULT_ROWS, DEFAULT_HOLE, MAX_ROWS, PEG, HOLE,
    triangular, is_triangular, row_of, row_end, row_positions
)

__all__ = [
    'Board', 'Cell', 'build_board',
    'Move', 'legal_moves', 'check_move', 'apply_move',
    'all_moves', 'any_move_available',
    'DEFAULT_ROWS', 'DEFAULT_HOLE', 'MAX_ROWS', 'PEG', 'HOLE',
    'triangular', 'is_triangular', 'row_of', 'row_end', 'row_positions'
]
