"""
tests/test_web.py

Тесты Flask JSON API.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from web.app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def new_board(client, rows=5, hole=4):
    response = client.post('/api/new', json={'rows': rows, 'hole': hole})
    assert response.status_code == 200
    return response.get_json()['board']


def test_new_game(client):
    board = new_board(client)
    assert board['rows'] == 5
    assert board['max_position'] == 15
    assert 4 not in board['pegs']
    assert len(board['pegs']) == 14
    assert board['phase'] == 'hole_removed'


def test_new_game_defaults(client):
    data = client.post('/api/new', json={}).get_json()
    assert data['success'] is True
    assert 5 not in data['board']['pegs']


def test_new_game_bad_rows(client):
    response = client.post('/api/new', json={'rows': 0})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_new_game_bad_hole(client):
    response = client.post('/api/new', json={'rows': 3, 'hole': 9})
    assert response.status_code == 400


def test_moves(client):
    board = new_board(client)
    data = client.post('/api/moves', json={'board': board, 'position': 1}).get_json()
    assert data['moves'] == [{'to': 4, 'jumped': 2}]


def test_move_applied(client):
    board = new_board(client)
    data = client.post('/api/move', json={'board': board, 'from': 1, 'to': 4}).get_json()
    assert data['outcome'] == 'applied'
    assert 1 not in data['board']['pegs']
    assert 2 not in data['board']['pegs']
    assert 4 in data['board']['pegs']


def test_move_rejected(client):
    board = new_board(client)
    data = client.post('/api/move', json={'board': board, 'from': 1, 'to': 1}).get_json()
    assert data['outcome'] == 'rejected'
    assert data['success'] is False
    assert data['board']['pegs'] == board['pegs']


def test_move_game_over(client):
    board = {'rows': 3, 'pegs': [1, 3, 4]}
    data = client.post('/api/move', json={'board': board, 'from': 1, 'to': 6}).get_json()
    assert data['outcome'] == 'game_over'
    assert data['remaining_pegs'] == 2
    assert data['board']['phase'] == 'terminal'


def test_move_bad_board(client):
    response = client.post('/api/move', json={'board': {'rows': 3, 'pegs': [9]},
                                              'from': 1, 'to': 6})
    assert response.status_code == 400
    response = client.post('/api/move', json={'board': {'rows': 3, 'pegs': [1]},
                                              'from': 'a', 'to': 6})
    assert response.status_code == 400


def test_hint(client):
    board = new_board(client, hole=1)
    data = client.post('/api/hint', json={'board': board}).get_json()
    assert data['hint'] is not None
    assert set(data['hint']) == {'from', 'jumped', 'to'}


def test_hint_dead_position(client):
    data = client.post('/api/hint', json={'board': {'rows': 3, 'pegs': [4, 6]}}).get_json()
    assert data['hint'] is None
    assert data['limit_reached'] is False


def test_render(client):
    response = client.get('/api/render?rows=3&pegs=1,2')
    assert response.status_code == 200
    assert response.mimetype == 'text/plain'
    assert response.get_data(as_text=True) == "   a0\n b0 c-\nd- e- f-\n"


def test_render_bad_request(client):
    assert client.get('/api/render?rows=3&pegs=x').status_code == 400
    assert client.get('/api/render').status_code == 400


# =====================================================
# Некорректные тела запросов
# =====================================================

@pytest.mark.parametrize("body", [[1, 2], "доска", 7])
def test_non_object_body_is_bad_request(client, body):
    response = client.post('/api/move', json=body)
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_bool_position_rejected(client):
    board = new_board(client)
    response = client.post('/api/move', json={'board': board, 'from': True, 'to': 4})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_bool_hole_rejected(client):
    response = client.post('/api/new', json={'rows': 5, 'hole': True})
    assert response.status_code == 400


def test_bool_pegs_rejected(client):
    response = client.post('/api/hint', json={'board': {'rows': 3, 'pegs': [True, 4]}})
    assert response.status_code == 400


def test_hint_limit_reached(client):
    previous = app.config['HINT_MAX_NODES']
    app.config['HINT_MAX_NODES'] = 2
    try:
        board = new_board(client, hole=1)
        data = client.post('/api/hint', json={'board': board}).get_json()
    finally:
        app.config['HINT_MAX_NODES'] = previous
    assert data['success'] is True
    assert data['hint'] is None
    assert data['limit_reached'] is True
    assert data['max_nodes'] == 2
