"""
game/session.py

Интерактивная игра в консоли: явный цикл вместо рекурсии подсказок.

Ввод и вывод передаются функциями (input/print по умолчанию),
поэтому сессию можно прогнать в тестах по сценарию.
"""

from typing import Callable, List

from core.board import Board
from core.moves import any_move_available
from core.utils import DEFAULT_ROWS, DEFAULT_HOLE
from peg_io.parser import parse_move, parse_position, parse_rows, parse_yes_no
from peg_io.visualizer import render_board, position_label, format_move, uses_letters
from solvers.hint import DEFAULT_HINT_NODES, hint
from utils.error_handling import InvalidBoardError
from utils.logging import get_logger
from .controller import (
    Applied, Rejected, GameOver, start, remove_initial_peg, submit_move, remaining_pegs
)

HINT_COMMAND = '?'


class GameSession:
    """Одна или несколько партий подряд с одним игроком."""

    def __init__(self, input_fn: Callable[[], str] = input,
                 output_fn: Callable[[str], None] = print,
                 color: bool = True, symbols: bool = False,
                 default_rows: int = DEFAULT_ROWS, default_hole: int = DEFAULT_HOLE,
                 hints: bool = True, hint_nodes: int = DEFAULT_HINT_NODES):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.color = color
        self.symbols = symbols
        self.default_rows = default_rows
        self.default_hole = default_hole
        self.hints = hints
        self.hint_nodes = hint_nodes
        self.logger = get_logger()

    def _say(self, text: str = "") -> None:
        self.output_fn(text)

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        return self.input_fn()

    def show(self, board: Board) -> None:
        self._say("Ваша доска:")
        self._say(render_board(board, color=self.color, symbols=self.symbols))

    def prompt_rows(self) -> Board:
        """Спрашивает число рядов, пока не получит корректное."""
        while True:
            text = self._ask(f"Сколько рядов? [{self.default_rows}]")
            try:
                return start(parse_rows(text, self.default_rows))
            except (ValueError, InvalidBoardError) as e:
                self._say(f"!!! {e}")

    def prompt_empty_peg(self, board: Board) -> Board:
        """Снимает первый колышек."""
        default = max(1, min(self.default_hole, board.max_position))
        while True:
            self.show(board)
            text = self._ask(f"Какой колышек убрать? [{position_label(board, default).strip()}]")
            try:
                pos = parse_position(text, board.max_position, default)
            except ValueError as e:
                self._say(f"!!! {e}")
                continue
            new_board = remove_initial_peg(board, pos)
            if new_board is not None:
                return new_board

    def _move_prompt(self, board: Board) -> str:
        what = "две буквы" if uses_letters(board) else "два номера"
        if self.hints:
            return f"Откуда и куда? Введите {what} ({HINT_COMMAND} — подсказка):"
        return f"Откуда и куда? Введите {what}:"

    def _show_hint(self, board: Board) -> None:
        found = hint(board, self.hint_nodes)
        if found.limit_reached:
            self._say(f"Подсказки нет: решение не найдено за {found.max_nodes} узлов")
        elif found.move is None:
            self._say("Подсказки нет: с этой позиции не остаться с одним колышком")
        else:
            origin, _, destination = found.move
            self._say(f"Подсказка: {format_move(board, origin, destination)}")

    def play(self, board: Board) -> GameOver:
        """Цикл ходов до конца партии."""
        if not any_move_available(board):
            return GameOver(board, remaining_pegs(board))

        while True:
            self._say()
            self.show(board)
            text = self._ask(self._move_prompt(board))
            if self.hints and text.strip() == HINT_COMMAND:
                self._show_hint(board)
                continue
            try:
                origin, destination = parse_move(text, board.max_position)
            except ValueError as e:
                self._say(f"\n!!! {e}\n")
                continue

            outcome = submit_move(board, origin, destination)
            if isinstance(outcome, Rejected):
                self._say("\n!!! Недопустимый ход :(\n")
            elif isinstance(outcome, Applied):
                board = outcome.board
            else:
                return outcome

    def game_over(self, outcome: GameOver) -> None:
        self._say(f"Игра окончена! Осталось колышков: {outcome.remaining_pegs}")
        self._say(render_board(outcome.board, color=self.color, symbols=self.symbols))

    def prompt_play_again(self) -> bool:
        while True:
            text = self._ask("Сыграть ещё? y/n [y]")
            try:
                return parse_yes_no(text, default=True)
            except ValueError as e:
                self._say(f"!!! {e}")

    def run(self) -> List[int]:
        """
        Играет партии, пока игрок не откажется или не закончится ввод.

        Returns:
            Число оставшихся колышков в каждой завершённой партии
        """
        results: List[int] = []
        self._say("Приготовьтесь играть в Peg Thing!")
        try:
            while True:
                board = self.prompt_empty_peg(self.prompt_rows())
                outcome = self.play(board)
                self.game_over(outcome)
                results.append(outcome.remaining_pegs)
                self.logger.info(f"Партия {len(results)} завершена: {outcome.remaining_pegs} колышков")
                if not self.prompt_play_again():
                    break
        except EOFError:
            self._say()
        self._say("Пока!")
        return results
