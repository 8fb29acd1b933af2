"""
core/moves.py

Генерация и применение ходов. Все функции чистые: входная доска
никогда не меняется, каждый ход даёт новую доску.
"""

from typing import Dict, List, Optional, Tuple

from .board import Board, Position
from utils.error_handling import InvalidMoveError

# (from, jumped, to), как в решателях
Move = Tuple[Position, Position, Position]


def legal_moves(board: Board, pos: Position) -> Dict[Position, Position]:
    """
    Допустимые прыжки из pos: destination → jumped.

    Пустой словарь, если в pos нет колышка или pos вне доски.
    """
    pegs = board.pegs
    if pos not in pegs:
        return {}
    return {
        destination: jumped
        for destination, jumped in board.connections(pos).items()
        if destination not in pegs and jumped in pegs
    }


def check_move(board: Board, origin: Position, destination: Position) -> Optional[Position]:
    """Возвращает перепрыгиваемую позицию, если ход допустим, иначе None."""
    return legal_moves(board, origin).get(destination)


def apply_move(board: Board, origin: Position, destination: Position) -> Board:
    """
    Возвращает новую доску после прыжка origin → destination.

    Raises:
        InvalidMoveError: ход недопустим
    """
    jumped = check_move(board, origin, destination)
    if jumped is None:
        raise InvalidMoveError(origin, destination)
    new_pegs = (board.pegs - {origin, jumped}) | {destination}
    return board.with_pegs(new_pegs)


def all_moves(board: Board) -> List[Move]:
    """Все допустимые ходы на доске в порядке позиций."""
    moves = []
    for pos in sorted(board.pegs):
        for destination, jumped in sorted(legal_moves(board, pos).items()):
            moves.append((pos, jumped, destination))
    return moves


def any_move_available(board: Board) -> bool:
    """Есть ли хоть один ход? Останавливается на первой находке."""
    return any(legal_moves(board, pos) for pos in board.pegs)
