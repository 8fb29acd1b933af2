"""
peg_io/visualizer.py

Визуализация треугольной доски и ходов.
"""

from typing import List, Optional

from core.board import Board
from core.moves import Move
from core.utils import PEG, HOLE, row_positions
from .parser import MAX_LETTER_POSITION, position_to_letter

ANSI_STYLES = {
    'red': '\033[31m',
    'green': '\033[32m',
    'blue': '\033[34m',
    'reset': '\033[0m',
}


def ansi(style: str) -> str:
    """Escape-последовательность стиля."""
    return ANSI_STYLES[style]


def colorize(text: str, color: str) -> str:
    """Оборачивает текст в ANSI-цвет."""
    return f"{ansi(color)}{text}{ansi('reset')}"


def uses_letters(board: Board) -> bool:
    """Буквенные метки возможны только для досок до 26 позиций."""
    return board.max_position <= MAX_LETTER_POSITION


def label_width(board: Board) -> int:
    return 1 if uses_letters(board) else len(str(board.max_position))


def position_label(board: Board, pos: int) -> str:
    """Метка позиции: буква или номер."""
    if uses_letters(board):
        return position_to_letter(pos)
    return str(pos).rjust(label_width(board))


def render_position(board: Board, pos: int, color: bool = True,
                    symbols: bool = False) -> str:
    """Метка + маркер колышка/лунки."""
    if board.is_pegged(pos):
        marker = PEG if symbols else '0'
        if color:
            marker = colorize(marker, 'blue')
    else:
        marker = HOLE if symbols else '-'
        if color:
            marker = colorize(marker, 'red')
    return position_label(board, pos) + marker


def row_padding(row: int, rows: int, pos_chars: int) -> str:
    """Отступ, центрирующий ряд."""
    return ' ' * ((rows - row) * pos_chars // 2)


def render_row(board: Board, row: int, color: bool = True, symbols: bool = False) -> str:
    # ширина позиции: метка + маркер + пробел-разделитель
    pos_chars = label_width(board) + 2
    cells = (render_position(board, pos, color, symbols) for pos in row_positions(row))
    return row_padding(row, board.rows, pos_chars) + ' '.join(cells)


def render_board(board: Board, color: bool = True, symbols: bool = False) -> str:
    """
    Красиво форматирует доску треугольником.

    Args:
        board: доска
        color: раскрашивать ли ANSI-цветами
        symbols: ●/○ вместо 0/-

    Returns:
        Строка для вывода
    """
    return "\n".join(
        render_row(board, row, color, symbols) for row in range(1, board.rows + 1)
    )


def format_move(board: Board, origin: int, destination: int) -> str:
    """Ход в виде «a → d»."""
    return f"{position_label(board, origin).strip()} → {position_label(board, destination).strip()}"


def format_solution(board: Board, moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        board: начальная доска (для меток)
        moves: список (from, jumped, to) или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, (origin, _, destination) in enumerate(moves, 1):
        lines.append(f"  {i:2}. {format_move(board, origin, destination)}")

    return "\n".join(lines)
