#!/usr/bin/env python3
"""
main.py

Точка входа для Peg Thing.

Использование:
    python main.py                      # интерактивная игра
    python main.py --rows 6 --no-color  # другая доска, без ANSI
    python main.py --solve --hole 1     # показать решение
    python main.py --web --port 5000    # JSON API
"""

import sys
import argparse
import logging
import time

from core.utils import DEFAULT_ROWS, DEFAULT_HOLE, MAX_ROWS
from game.controller import start, remove_initial_peg
from game.session import GameSession
from peg_io.visualizer import render_board, format_solution
from solutions.verify import verify_solution
from solvers.dfs_memo import DFSMemoSolver
from utils.error_handling import handle_errors
from utils.logging import set_level, setup_file_logging


@handle_errors(default_return=1)
def solve_board(rows: int, hole: int, color: bool = True, symbols: bool = False,
                verbose: bool = False) -> int:
    """Строит доску, решает и печатает решение. Код возврата процесса."""
    board = remove_initial_peg(start(rows), hole)
    if board is None:
        print(f"❌ Ошибка: позиция {hole} вне доски")
        return 1

    print("\nНачальная позиция:")
    print(render_board(board, color=color, symbols=symbols))
    print(f"Колышков: {board.peg_count()}")

    solver = DFSMemoSolver(verbose=verbose)
    start_time = time.time()
    solution = solver.solve(board)
    elapsed = time.time() - start_time

    print(f"\n{format_solution(board, solution)}")
    print(f"\n⏱ Время: {elapsed:.3f}с")
    print(f"📊 Статистика: {solver.stats}")

    if solution is None:
        return 1
    if not verify_solution(board, solution):
        print("❌ Решение некорректно!")
        return 1
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Peg Thing — треугольный peg solitaire',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                      # интерактивная игра
  python main.py --solve              # решение для 5 рядов
  python main.py --solve --rows 6     # решение для 6 рядов
        """
    )
    parser.add_argument(
        '--rows', '-r', type=int, default=DEFAULT_ROWS,
        help=f'Число рядов (default: {DEFAULT_ROWS}, максимум {MAX_ROWS})'
    )
    parser.add_argument(
        '--hole', type=int, default=DEFAULT_HOLE,
        help=f'Снятый перед игрой колышек (default: {DEFAULT_HOLE})'
    )
    parser.add_argument('--no-color', action='store_true', help='Без ANSI-цветов')
    parser.add_argument('--symbols', action='store_true', help='Рисовать ●/○ вместо 0/-')
    parser.add_argument('--no-hints', action='store_true', help='Отключить подсказки')
    parser.add_argument('--solve', action='store_true', help='Найти и показать решение')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument('--log-file', help='Дополнительно писать лог в файл')
    parser.add_argument('--web', action='store_true', help='Запустить JSON API')
    parser.add_argument('--port', type=int, default=5000, help='Порт для --web')

    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file,
                           level=logging.DEBUG if args.verbose else logging.INFO)

    if not 1 <= args.rows <= MAX_ROWS:
        parser.error(f"--rows должно быть от 1 до {MAX_ROWS}")
    if args.hole < 1:
        parser.error("--hole должно быть положительным номером позиции")

    color = not args.no_color

    if args.web:
        from web.app import run
        run(port=args.port)
        return 0

    if args.solve:
        return solve_board(args.rows, args.hole, color, args.symbols, args.verbose)

    session = GameSession(color=color, symbols=args.symbols,
                          default_rows=args.rows, default_hole=args.hole,
                          hints=not args.no_hints)
    try:
        session.run()
    except KeyboardInterrupt:
        print("\nПока!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
