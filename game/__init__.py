"""
game - Ход партии

Экспортирует:
- Контроллер ходов (start, submit_move, MoveOutcome)
- Консольную сессию GameSession
"""

from .controller import (
    GamePhase, Applied, Rejected, GameOver, MoveOutcome,
    start, remove_initial_peg, submit_move, remaining_pegs, phase_of
)
from .session import GameSession

__all__ = [
    'GamePhase', 'Applied', 'Rejected', 'GameOver', 'MoveOutcome',
    'start', 'remove_initial_peg', 'submit_move', 'remaining_pegs', 'phase_of',
    'GameSession'
]
