"""
solutions/verify.py

Проверка решений на треугольной доске.
"""

from typing import List

from core.board import Board
from core.moves import Move, apply_move, check_move


def verify_solution(board: Board, moves: List[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим на текущей доске, jumped совпадает с графом связей;
    - после применения всех ходов остаётся ровно один колышек.
    """
    # Пустое решение допустимо только для уже решённой доски
    if not moves:
        return board.peg_count() == 1

    current = board
    for origin, jumped, destination in moves:
        if check_move(current, origin, destination) != jumped:
            return False
        current = apply_move(current, origin, destination)

    return current.peg_count() == 1
