"""
solvers - Решатель Peg Thing

Экспортирует:
- DFSMemoSolver: поиск в глубину с мемоизацией
- hint: следующий ход решения
"""

from .base import BaseSolver, SolverStats
from .dfs_memo import DFSMemoSolver
from .hint import Hint, hint, solve_or_raise, DEFAULT_HINT_NODES

__all__ = [
    'BaseSolver',
    'SolverStats',
    'DFSMemoSolver',
    'Hint',
    'hint',
    'solve_or_raise',
    'DEFAULT_HINT_NODES'
]
