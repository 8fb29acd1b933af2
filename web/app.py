"""
web/app.py

Flask JSON API для Peg Thing.

Сервер ничего не хранит: доска передаётся в каждом запросе
как {"rows": n, "pegs": [...]}, в ответе приходит новая.
"""

import os
import sys

from flask import Flask, Response, jsonify, request

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board, build_board
from core.moves import legal_moves
from core.utils import DEFAULT_ROWS, DEFAULT_HOLE, MAX_ROWS
from game.controller import Applied, GameOver, start, submit_move, phase_of
from peg_io.visualizer import render_board
from solvers.hint import DEFAULT_HINT_NODES, hint
from utils.error_handling import PegThingError
from utils.logging import get_logger

app = Flask(__name__)
app.config.setdefault('HINT_MAX_NODES', DEFAULT_HINT_NODES)


def board_to_json(board: Board) -> dict:
    return {
        'rows': board.rows,
        'pegs': sorted(board.pegs),
        'max_position': board.max_position,
        'phase': phase_of(board).value,
    }


def _is_int(value) -> bool:
    """JSON true/false не считаются числами."""
    return isinstance(value, int) and not isinstance(value, bool)


def _request_data() -> dict:
    """Тело запроса: JSON-объект или пустой словарь, если тела нет."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Тело запроса должно быть JSON-объектом")
    return data


def board_from_json(data) -> Board:
    """Восстанавливает доску из {"rows": n, "pegs": [...]}."""
    if not isinstance(data, dict):
        raise ValueError("Ожидается объект доски {rows, pegs}")
    rows = data.get('rows')
    pegs = data.get('pegs', [])
    if not _is_int(rows) or not 1 <= rows <= MAX_ROWS:
        raise ValueError(f"rows должно быть целым от 1 до {MAX_ROWS}")
    if not isinstance(pegs, list) or not all(_is_int(p) for p in pegs):
        raise ValueError("pegs должно быть списком целых")
    return build_board(rows).with_pegs(pegs)


def _position(data: dict, key: str) -> int:
    value = data.get(key)
    if not _is_int(value):
        raise ValueError(f"{key} должно быть целым числом")
    return value


def _error(message: str, status: int = 400):
    return jsonify({'success': False, 'error': message}), status


@app.errorhandler(ValueError)
@app.errorhandler(PegThingError)
def handle_bad_request(e):
    get_logger().debug(f"Некорректный запрос: {e}")
    return _error(str(e))


@app.route('/api/new', methods=['POST'])
def new_game():
    """Новая доска с одной снятой фишкой."""
    data = _request_data()
    rows = data.get('rows', DEFAULT_ROWS)
    if not _is_int(rows) or not 1 <= rows <= MAX_ROWS:
        return _error(f"rows должно быть целым от 1 до {MAX_ROWS}")
    board = start(rows)
    hole = data.get('hole', min(DEFAULT_HOLE, board.max_position))
    if not _is_int(hole):
        return _error("hole должно быть целым числом")
    board = board.remove_peg(hole)
    return jsonify({'success': True, 'board': board_to_json(board)})


@app.route('/api/moves', methods=['POST'])
def moves():
    """Допустимые прыжки из позиции."""
    data = _request_data()
    board = board_from_json(data.get('board'))
    pos = _position(data, 'position')
    found = legal_moves(board, pos)
    return jsonify({
        'success': True,
        'position': pos,
        'moves': [{'to': dest, 'jumped': jumped} for dest, jumped in sorted(found.items())],
    })


@app.route('/api/move', methods=['POST'])
def move():
    """Ход: applied / rejected / game_over."""
    data = _request_data()
    board = board_from_json(data.get('board'))
    outcome = submit_move(board, _position(data, 'from'), _position(data, 'to'))

    if isinstance(outcome, Applied):
        return jsonify({'success': True, 'outcome': 'applied',
                        'board': board_to_json(outcome.board)})
    if isinstance(outcome, GameOver):
        return jsonify({'success': True, 'outcome': 'game_over',
                        'remaining_pegs': outcome.remaining_pegs,
                        'board': board_to_json(outcome.board)})
    return jsonify({'success': False, 'outcome': 'rejected', 'error': outcome.reason,
                    'board': board_to_json(outcome.board)})


@app.route('/api/hint', methods=['POST'])
def get_hint():
    """
    Следующий ход решения.

    hint: null и limit_reached: true — поиск не уложился в лимит узлов,
    решение может существовать.
    """
    data = _request_data()
    board = board_from_json(data.get('board'))
    found = hint(board, app.config['HINT_MAX_NODES'])
    if found.move is None:
        return jsonify({'success': True, 'hint': None,
                        'limit_reached': found.limit_reached,
                        'max_nodes': found.max_nodes})
    origin, jumped, destination = found.move
    return jsonify({'success': True, 'limit_reached': False,
                    'hint': {'from': origin, 'jumped': jumped, 'to': destination}})


@app.route('/api/render', methods=['GET'])
def render():
    """Текстовая доска без цветов."""
    rows = request.args.get('rows', type=int)
    pegs_arg = request.args.get('pegs', '')
    try:
        pegs = [int(p) for p in pegs_arg.split(',') if p.strip()]
    except ValueError:
        return _error("pegs — список номеров через запятую")
    board = board_from_json({'rows': rows, 'pegs': pegs})
    return Response(render_board(board, color=False) + "\n", mimetype='text/plain')


def run(host: str = '127.0.0.1', port: int = 5000, debug: bool = False):
    print("=" * 50)
    print("Peg Thing - Web API")
    print("=" * 50)
    print(f"\nOpen http://{host}:{port}/api/render?rows=5&pegs=1,2,3 in your browser")
    print()
    app.run(debug=debug, host=host, port=port)


if __name__ == '__main__':
    run()
