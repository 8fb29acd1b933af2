"""
core/board.py

Треугольная доска: граф прыжков + frozenset колышков.

Таблица связей строится один раз в build_board() и разделяется всеми
досками, полученными из неё ходами; меняется только набор колышков.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, NamedTuple, Tuple

from .utils import triangular, is_triangular, row_of
from utils.error_handling import InvalidBoardError, InvalidPositionError

Position = int
Connections = Mapping[Position, Position]

_NO_CONNECTIONS: Connections = MappingProxyType({})


class Cell(NamedTuple):
    """Клетка доски: есть ли колышек и куда из неё можно прыгнуть."""
    pegged: bool
    connections: Connections


class Board:
    """
    Иммутабельное представление треугольной доски.

    Хранит только позиции колышков — эффективно по памяти.
    """
    __slots__ = ('rows', 'pegs', '_connections', '_hash')

    def __init__(self, rows: int, connections: Tuple[Connections, ...],
                 pegs: FrozenSet[Position]):
        self.rows = rows
        self.pegs = pegs
        # _connections[p - 1]: связи позиции p
        self._connections = connections
        self._hash = hash((rows, pegs))

    @property
    def max_position(self) -> int:
        """Номер последней позиции (= число клеток)."""
        return len(self._connections)

    def positions(self) -> range:
        """Все позиции доски по порядку."""
        return range(1, self.max_position + 1)

    def is_valid_position(self, pos: Position) -> bool:
        return isinstance(pos, int) and 1 <= pos <= self.max_position

    def is_pegged(self, pos: Position) -> bool:
        return pos in self.pegs

    def peg_count(self) -> int:
        """Количество колышков — O(1)."""
        return len(self.pegs)

    def connections(self, pos: Position) -> Connections:
        """Связи позиции: destination → jumped. Пусто для позиции вне доски."""
        if not self.is_valid_position(pos):
            return _NO_CONNECTIONS
        return self._connections[pos - 1]

    def cell(self, pos: Position) -> Cell:
        if not self.is_valid_position(pos):
            raise InvalidPositionError(f"Позиция {pos} вне доски 1..{self.max_position}")
        return Cell(pos in self.pegs, self._connections[pos - 1])

    @property
    def cells(self) -> Mapping[Position, Cell]:
        """Снимок всех клеток: позиция → Cell."""
        return MappingProxyType({pos: self.cell(pos) for pos in self.positions()})

    def with_pegs(self, pegs: Iterable[Position]) -> 'Board':
        """Новая доска с той же геометрией и другим набором колышков."""
        pegs = frozenset(pegs)
        for pos in pegs:
            if not self.is_valid_position(pos):
                raise InvalidPositionError(f"Позиция {pos} вне доски 1..{self.max_position}")
        return Board(self.rows, self._connections, pegs)

    def remove_peg(self, pos: Position) -> 'Board':
        """Возвращает новую доску без колышка в pos."""
        if not self.is_valid_position(pos):
            raise InvalidPositionError(f"Позиция {pos} вне доски 1..{self.max_position}")
        return Board(self.rows, self._connections, self.pegs - {pos})

    def place_peg(self, pos: Position) -> 'Board':
        """Возвращает новую доску с колышком в pos."""
        if not self.is_valid_position(pos):
            raise InvalidPositionError(f"Позиция {pos} вне доски 1..{self.max_position}")
        return Board(self.rows, self._connections, self.pegs | {pos})

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.rows == other.rows and self.pegs == other.pegs

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, {self.peg_count()}/{self.max_position} pegs)"


def _connect(work: Dict[Position, Dict[Position, Position]], max_pos: int,
             pos: Position, neighbor: Position, destination: Position) -> None:
    """Взаимная связь pos ↔ destination через neighbor, если она на доске."""
    if destination <= max_pos:
        work[pos][destination] = neighbor
        work[destination][pos] = neighbor


def build_board(rows: int) -> Board:
    """
    Создаёт доску из rows рядов, все клетки с колышками.

    Для каждой позиции пробуются три прыжка: вправо по ряду,
    вниз-влево и вниз-вправо по диагоналям.

    Raises:
        InvalidBoardError: rows не целое или меньше 1
    """
    if isinstance(rows, bool) or not isinstance(rows, int) or rows < 1:
        raise InvalidBoardError(f"Число рядов должно быть целым >= 1, получено {rows!r}")

    max_pos = triangular(rows)
    work: Dict[Position, Dict[Position, Position]] = {
        pos: {} for pos in range(1, max_pos + 1)
    }

    for pos in range(1, max_pos + 1):
        row = row_of(pos)

        # Вправо: конец ряда не имеет соседа справа
        if not (is_triangular(pos) or is_triangular(pos + 1)):
            _connect(work, max_pos, pos, pos + 1, pos + 2)

        # Вниз-влево
        neighbor = pos + row
        _connect(work, max_pos, pos, neighbor, neighbor + row + 1)

        # Вниз-вправо
        neighbor = pos + row + 1
        _connect(work, max_pos, pos, neighbor, neighbor + row + 2)

    connections = tuple(
        MappingProxyType(work[pos]) for pos in range(1, max_pos + 1)
    )
    return Board(rows, connections, frozenset(work))
