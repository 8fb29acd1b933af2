"""
tests/test_utils.py

Тесты логирования и обработки ошибок.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

from core.board import build_board
from utils.error_handling import (
    PegThingError, InvalidBoardError, InvalidMoveError, handle_errors, validate_board
)
from utils.logging import get_logger, set_level, setup_file_logging


def test_get_logger_is_shared():
    assert get_logger() is get_logger()
    assert get_logger().logger.name == "peg_thing"


def test_set_level():
    logger = get_logger()
    previous = logger.logger.level
    try:
        set_level(logging.DEBUG)
        assert logger.logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.logger.handlers)
    finally:
        set_level(previous)


def test_setup_file_logging(tmp_path):
    log_file = tmp_path / "game.log"
    logger = get_logger()
    handlers_before = list(logger.logger.handlers)
    previous = logger.logger.level
    try:
        setup_file_logging(str(log_file), level=logging.INFO)
        logger.info("партия начата")
        for handler in logger.logger.handlers:
            handler.flush()
        assert "партия начата" in log_file.read_text(encoding='utf-8')
    finally:
        for handler in logger.logger.handlers:
            if handler not in handlers_before:
                logger.logger.removeHandler(handler)
                handler.close()
        logger.logger.setLevel(previous)


def test_handle_errors_swallows_game_errors():
    @handle_errors(default_return="fallback", log_error=False)
    def fails():
        raise InvalidMoveError(1, 4)

    assert fails() == "fallback"


def test_handle_errors_propagates_other_errors():
    @handle_errors(default_return=None, log_error=False)
    def broken():
        raise KeyError("bug")

    with pytest.raises(KeyError):
        broken()


def test_error_hierarchy():
    assert issubclass(InvalidBoardError, PegThingError)
    assert issubclass(InvalidBoardError, ValueError)
    assert "1 → 4" in str(InvalidMoveError(1, 4))


def test_validate_board():
    assert validate_board(build_board(3)) is True
    with pytest.raises(InvalidBoardError):
        validate_board(None)
    with pytest.raises(InvalidBoardError):
        validate_board(object())
