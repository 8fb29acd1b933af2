"""
solvers/dfs_memo.py

DFS с мемоизацией тупиковых состояний.
"""

import time
from typing import List, Optional, Set

from .base import BaseSolver, SolverStats
from core.board import Board
from core.moves import Move, all_moves, apply_move
from utils.error_handling import validate_board


class _SearchLimit(Exception):
    """Превышен лимит узлов."""


class DFSMemoSolver(BaseSolver):
    """
    DFS решатель с мемоизацией неудачных состояний.

    Особенности:
    - Запоминает состояния без решения
    - Канонические формы по 6 симметриям треугольника
    - Опциональный лимит узлов (для подсказок на больших досках)
    """

    def __init__(self, use_symmetry: bool = True, max_nodes: Optional[int] = None,
                 verbose: bool = False):
        """
        Args:
            use_symmetry: использовать канонические формы для мемоизации
            max_nodes: прервать поиск после стольких узлов (None — без лимита)
            verbose: выводить отладочную информацию
        """
        super().__init__(use_symmetry=use_symmetry, verbose=verbose)
        self.max_nodes = max_nodes
        self.memo: Set[int] = set()

    def solve(self, board: Board) -> Optional[List[Move]]:
        """
        Ищет последовательность ходов, оставляющую один колышек.

        Args:
            board: начальная позиция

        Returns:
            Список ходов (from, jumped, to) или None если решение не найдено
        """
        validate_board(board)
        self.stats = SolverStats()
        self.memo.clear()

        self._log(f"Starting DFS with memoization (pegs={board.peg_count()})")
        start = time.time()
        try:
            result = self._dfs(board, [])
        except _SearchLimit:
            self.stats.limit_reached = True
            self._log(f"Node limit reached ({self.max_nodes})")
            result = None
        self.stats.time_elapsed = time.time() - start

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Solution found: {len(result)} moves")
        else:
            self._log("No solution found")

        self._log(f"Stats: {self.stats}")
        return result

    def _dfs(self, board: Board, path: List[Move]) -> Optional[List[Move]]:
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, len(path))
        if self.max_nodes is not None and self.stats.nodes_visited > self.max_nodes:
            raise _SearchLimit()

        # Победа: остался один колышек
        if board.peg_count() == 1:
            return path

        key = self._get_key(board)
        if key in self.memo:
            self.stats.nodes_pruned += 1
            return None

        for move in all_moves(board):
            origin, _, destination = move
            result = self._dfs(apply_move(board, origin, destination), path + [move])
            if result is not None:
                return result

        # Тупик или нет ходов: запоминаем
        self.memo.add(key)
        return None
