"""Tests for CLI logging configuration."""

import logging

from streamheroes.cli.logging_setup import configure_logging


def test_configure_logging_sets_level():
    logger = configure_logging("debug")

    assert logger.name == "streamheroes"
    assert logger.level == logging.DEBUG


def test_configure_logging_adds_one_handler():
    configure_logging("INFO")
    configure_logging("ERROR")

    logger = logging.getLogger("streamheroes")
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR


def test_unknown_level_falls_back_to_warning():
    assert configure_logging("chatty").level == logging.WARNING
