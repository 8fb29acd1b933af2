"""
game/controller.py

Ход игры: старт, снятие первого колышка, приём ходов, конец игры.
Состояния между вызовами не хранит — только переданную доску.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from core.board import Board, Position, build_board
from core.moves import any_move_available, apply_move
from utils.error_handling import InvalidMoveError, InvalidPositionError
from utils.logging import get_logger


class GamePhase(Enum):
    """Стадия жизни доски."""
    FRESH = 'fresh'
    HOLE_REMOVED = 'hole_removed'
    IN_PLAY = 'in_play'
    TERMINAL = 'terminal'


@dataclass(frozen=True)
class Applied:
    """Ход принят, игра продолжается."""
    board: Board


@dataclass(frozen=True)
class Rejected:
    """Ход недопустим; доска не изменилась."""
    board: Board
    reason: str = ""


@dataclass(frozen=True)
class GameOver:
    """Ход принят, ходов больше нет."""
    board: Board
    remaining_pegs: int


MoveOutcome = Union[Applied, Rejected, GameOver]


def start(rows: int) -> Board:
    """Новая доска, все клетки с колышками."""
    board = build_board(rows)
    get_logger().info(f"Новая игра: {rows} рядов, {board.max_position} позиций")
    return board


def remove_initial_peg(board: Board, pos: Position) -> Optional[Board]:
    """Снимает колышек перед первым ходом. None, если pos вне доски."""
    try:
        return board.remove_peg(pos)
    except InvalidPositionError as e:
        get_logger().debug(str(e))
        return None


def remaining_pegs(board: Board) -> int:
    return board.peg_count()


def submit_move(board: Board, origin: Position, destination: Position) -> MoveOutcome:
    """
    Пробует сделать ход.

    Returns:
        Applied — ход сделан;
        Rejected — ход недопустим, возвращается исходная доска;
        GameOver — ход сделан и больше ходов нет.
    """
    logger = get_logger()
    if origin == destination:
        logger.debug(f"Ход {origin} → {destination} отклонён: прыжок на месте")
        return Rejected(board, "Нельзя прыгнуть в ту же позицию")

    try:
        new_board = apply_move(board, origin, destination)
    except InvalidMoveError as e:
        logger.debug(f"Ход отклонён: {e}")
        return Rejected(board, str(e))

    if not any_move_available(new_board):
        pegs = remaining_pegs(new_board)
        logger.info(f"Игра окончена, осталось колышков: {pegs}")
        return GameOver(new_board, pegs)

    logger.debug(f"Ход {origin} → {destination} принят")
    return Applied(new_board)


def phase_of(board: Board) -> GamePhase:
    """Определяет стадию по доске."""
    pegs = board.peg_count()
    if pegs == board.max_position:
        return GamePhase.FRESH
    if not any_move_available(board):
        return GamePhase.TERMINAL
    if pegs == board.max_position - 1:
        return GamePhase.HOLE_REMOVED
    return GamePhase.IN_PLAY
