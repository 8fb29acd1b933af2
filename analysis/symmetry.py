"""
analysis/symmetry.py

Работа с симметриями треугольной доски.

Треугольник имеет 6 симметрий: 3 поворота × отражение.
Позиция p ↔ координаты (i, j): ряд i с 0, место в ряду j с 0.
"""

from functools import lru_cache
from typing import FrozenSet, Iterable, List, Tuple

from core.utils import row_of, row_end, triangular

Coord = Tuple[int, int]


def to_coord(pos: int) -> Coord:
    i = row_of(pos) - 1
    return i, pos - row_end(i) - 1


def from_coord(coord: Coord) -> int:
    i, j = coord
    return row_end(i) + j + 1


def rotate_120(coord: Coord, rows: int) -> Coord:
    """Поворот: вершина → левый нижний угол → правый нижний угол."""
    i, j = coord
    return rows - 1 - j, i - j


def reflect(coord: Coord) -> Coord:
    """Отражение относительно вертикальной оси."""
    i, j = coord
    return i, i - j


@lru_cache(maxsize=None)
def symmetry_permutations(rows: int) -> Tuple[Tuple[int, ...], ...]:
    """
    Все 6 перестановок позиций доски.

    perm[p] — образ позиции p (perm[0] не используется).
    """
    max_pos = triangular(rows)
    perms = []
    for mirrored in (False, True):
        for turns in range(3):
            perm = [0]
            for pos in range(1, max_pos + 1):
                coord = to_coord(pos)
                if mirrored:
                    coord = reflect(coord)
                for _ in range(turns):
                    coord = rotate_120(coord, rows)
                perm.append(from_coord(coord))
            perms.append(tuple(perm))
    return tuple(perms)


def pegs_to_mask(pegs: Iterable[int]) -> int:
    """Набор позиций → битовая маска (бит p-1 для позиции p)."""
    mask = 0
    for pos in pegs:
        mask |= 1 << (pos - 1)
    return mask


def get_all_symmetries(pegs: FrozenSet[int], rows: int) -> List[FrozenSet[int]]:
    """Генерирует все 6 образов набора колышков."""
    return [frozenset(perm[p] for p in pegs) for perm in symmetry_permutations(rows)]


def canonical_key(pegs: FrozenSet[int], rows: int) -> int:
    """
    Каноническая форма — минимальная маска среди симметрий.
    Используется для сокращения memo.
    """
    return min(
        pegs_to_mask(perm[p] for p in pegs) for perm in symmetry_permutations(rows)
    )


def count_symmetries(pegs: FrozenSet[int], rows: int) -> int:
    """
    Считает различные образы позиции.
    Если позиция симметрична, число < 6.
    """
    return len(set(get_all_symmetries(pegs, rows)))
