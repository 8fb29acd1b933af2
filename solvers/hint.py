"""
solvers/hint.py

Подсказки для игрока: следующий ход решения.
"""

from dataclasses import dataclass
from typing import List, Optional

from .dfs_memo import DFSMemoSolver
from core.board import Board
from core.moves import Move
from utils.error_handling import NoSolutionError

# Лимит узлов для одной подсказки
DEFAULT_HINT_NODES = 200_000


@dataclass(frozen=True)
class Hint:
    """Результат поиска подсказки."""
    move: Optional[Move] = None
    limit_reached: bool = False
    max_nodes: Optional[int] = None


def solve_or_raise(board: Board, max_nodes: Optional[int] = None,
                   verbose: bool = False) -> List[Move]:
    """
    Решает доску.

    Raises:
        NoSolutionError: решения нет или лимит узлов исчерпан
            (см. limit_reached)
    """
    solver = DFSMemoSolver(max_nodes=max_nodes, verbose=verbose)
    solution = solver.solve(board)
    if solution is None:
        if solver.stats.limit_reached:
            raise NoSolutionError(f"Поиск прерван после {max_nodes} узлов",
                                  limit_reached=True)
        raise NoSolutionError(f"Из позиции с {board.peg_count()} колышками не остаться с одним")
    return solution


def hint(board: Board, max_nodes: Optional[int] = DEFAULT_HINT_NODES) -> Hint:
    """
    Первый ход решения.

    Hint.move is None: решения нет, либо (limit_reached) поиск
    не уложился в max_nodes и ответ неизвестен.
    """
    try:
        solution = solve_or_raise(board, max_nodes)
    except NoSolutionError as e:
        return Hint(limit_reached=e.limit_reached, max_nodes=max_nodes)
    return Hint(move=solution[0] if solution else None, max_nodes=max_nodes)
