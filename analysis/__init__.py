"""
analysis - Анализ позиций

Экспортирует:
- Симметрии треугольной доски
"""

from .symmetry import (
    symmetry_permutations, get_all_symmetries, canonical_key,
    count_symmetries, pegs_to_mask
)

__all__ = [
    'symmetry_permutations',
    'get_all_symmetries',
    'canonical_key',
    'count_symmetries',
    'pegs_to_mask'
]
