"""Logging configuration for the command line application."""

import logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root streamheroes logger.

    Args:
        level: Log level name. Defaults to WARNING so normal use is quiet;
            command output goes through click.echo, not logging.

    Returns:
        The configured package logger
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("streamheroes")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
