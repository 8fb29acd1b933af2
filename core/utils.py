"""
core/utils.py

Общие утилиты и константы для треугольной доски Peg Thing.
Арифметика треугольных чисел: позиция → ряд, конец ряда.
"""

from math import isqrt

# Параметры игры по умолчанию
DEFAULT_ROWS = 5
DEFAULT_HOLE = 5     # буква 'e' в классической раскладке
MAX_ROWS = 20

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустая лунка


def triangular(n: int) -> int:
    """
    n-е треугольное число: 1, 3, 6, 10, 15, ...

    triangular(0) == 0 — «ряда до первого» нет.
    """
    return n * (n + 1) // 2


def is_triangular(x: int) -> bool:
    """Является ли x треугольным числом (1, 3, 6, 10, ...)."""
    if x < 1:
        return False
    # x = n(n+1)/2  <=>  8x + 1 является полным квадратом
    root = isqrt(8 * x + 1)
    return root * root == 8 * x + 1


def row_of(position: int) -> int:
    """
    Номер ряда (с 1), которому принадлежит позиция.

    row_of(1) == 1, row_of(2) == row_of(3) == 2, ...
    """
    row = (isqrt(8 * position + 1) - 1) // 2
    if triangular(row) < position:
        row += 1
    return row


def row_end(row: int) -> int:
    """Последняя позиция ряда; 0 для ряда 0."""
    if row <= 0:
        return 0
    return triangular(row)


def row_positions(row: int) -> range:
    """Все позиции ряда по порядку."""
    return range(row_end(row - 1) + 1, row_end(row) + 1)
