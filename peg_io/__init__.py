"""
peg_io - Ввод/вывод для Peg Thing

Экспортирует:
- Парсинг пользовательского ввода
- Визуализация доски
"""

from .parser import (
    letter_to_position, position_to_letter, parse_positions,
    parse_move, parse_position, parse_rows, parse_yes_no
)
from .visualizer import (
    colorize, position_label, render_position, render_row,
    render_board, format_move, format_solution
)

__all__ = [
    'letter_to_position',
    'position_to_letter',
    'parse_positions',
    'parse_move',
    'parse_position',
    'parse_rows',
    'parse_yes_no',
    'colorize',
    'position_label',
    'render_position',
    'render_row',
    'render_board',
    'format_move',
    'format_solution'
]
