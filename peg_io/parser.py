"""
peg_io/parser.py

Парсинг пользовательского ввода: число рядов, позиции, ходы, да/нет.

Позиции задаются буквами (a = 1, b = 2, ...) или числами.
Все функции бросают ValueError с понятным сообщением.
"""

import re
from typing import List, Optional, Tuple

from core.utils import DEFAULT_ROWS, MAX_ROWS

ALPHA_START = ord('a')
MAX_LETTER_POSITION = 26


def letter_to_position(letter: str) -> int:
    """'a' → 1, 'b' → 2, ..."""
    return ord(letter.lower()[0]) - ALPHA_START + 1


def position_to_letter(pos: int) -> str:
    """1 → 'a', 2 → 'b', ..."""
    if not 1 <= pos <= MAX_LETTER_POSITION:
        raise ValueError(f"Позицию {pos} нельзя записать буквой")
    return chr(ALPHA_START + pos - 1)


def parse_positions(text: str, max_pos: int) -> List[int]:
    """
    Извлекает позиции из строки.

    Форматы: "be", "b e", "b-e", "2 5", "2-5", "2,5".

    Args:
        text: ввод пользователя
        max_pos: последняя позиция доски

    Returns:
        Список позиций в порядке ввода
    """
    text = text.strip().lower()
    numbers = re.findall(r'\d+', text)
    letters = re.findall(r'[a-z]', text)

    if numbers and letters:
        raise ValueError("Используйте либо буквы, либо номера позиций")

    if numbers:
        positions = [int(n) for n in numbers]
    else:
        positions = [letter_to_position(ch) for ch in letters]

    for pos in positions:
        if not 1 <= pos <= max_pos:
            raise ValueError(f"Позиция {pos} вне доски (1..{max_pos})")
    return positions


def parse_move(text: str, max_pos: int) -> Tuple[int, int]:
    """Ход «откуда-куда»: ровно две позиции."""
    positions = parse_positions(text, max_pos)
    if len(positions) != 2:
        raise ValueError("Нужно указать две позиции: откуда и куда")
    return positions[0], positions[1]


def parse_position(text: str, max_pos: int, default: Optional[int] = None) -> int:
    """Одна позиция; пустой ввод → default."""
    if not text.strip():
        if default is None:
            raise ValueError("Нужно указать позицию")
        return default
    positions = parse_positions(text, max_pos)
    if len(positions) != 1:
        raise ValueError("Нужно указать ровно одну позицию")
    return positions[0]


def parse_rows(text: str, default: int = DEFAULT_ROWS, max_rows: int = MAX_ROWS) -> int:
    """Число рядов; пустой ввод → default."""
    text = text.strip()
    if not text:
        return default
    if not re.fullmatch(r'\d+', text):
        raise ValueError(f"Число рядов должно быть целым числом, получено {text!r}")
    rows = int(text)
    if not 1 <= rows <= max_rows:
        raise ValueError(f"Число рядов должно быть от 1 до {max_rows}")
    return rows


def parse_yes_no(text: str, default: bool = True) -> bool:
    """y/yes/д/да → True, n/no/н/нет → False, пусто → default."""
    text = text.strip().lower()
    if not text:
        return default
    if text in ('y', 'yes', 'д', 'да'):
        return True
    if text in ('n', 'no', 'н', 'нет'):
        return False
    raise ValueError("Ответьте y или n")
