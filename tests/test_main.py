"""
tests/test_main.py

Тесты точки входа.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from main import main


def test_solve_mode(capsys):
    assert main(['--solve', '--hole', '1', '--no-color']) == 0
    out = capsys.readouterr().out
    assert "Найдено решение за 13 ходов" in out


def test_solve_mode_bad_hole(capsys):
    assert main(['--solve', '--rows', '3', '--hole', '9']) == 1
    assert "вне доски" in capsys.readouterr().out


def test_rows_out_of_range():
    with pytest.raises(SystemExit):
        main(['--rows', '0'])


def test_hole_below_one_rejected():
    with pytest.raises(SystemExit):
        main(['--hole', '0'])
