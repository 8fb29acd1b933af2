"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass

from core.board import Board
from core.moves import Move
from analysis.symmetry import canonical_key, pegs_to_mask
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0
    limit_reached: bool = False

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    def __init__(self, use_symmetry: bool = True, verbose: bool = False):
        self.use_symmetry = use_symmetry
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: Board) -> Optional[List[Move]]:
        """
        Решает головоломку.

        Args:
            board: начальная позиция

        Returns:
            Список ходов (from, jumped, to) или None
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")

    def _get_key(self, board: Board) -> int:
        """Возвращает ключ для memo."""
        if self.use_symmetry:
            return canonical_key(board.pegs, board.rows)
        return pegs_to_mask(board.pegs)
