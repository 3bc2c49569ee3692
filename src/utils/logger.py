import logging
import os

from rich.logging import RichHandler


class CenteredFormatter(logging.Formatter):
    """
    Centres the short logger name (last dotted component) in a column that
    grows with the longest name seen so far.
    """

    longest_name_length = 10

    def __init__(self, fmt=None, datefmt=None, style="%", initial_width=10):
        super().__init__(fmt, datefmt, style)
        CenteredFormatter.longest_name_length = initial_width

    def format(self, record):
        short_name = record.name.rsplit(".", 1)[-1]
        CenteredFormatter.longest_name_length = max(
            CenteredFormatter.longest_name_length, len(short_name)
        )
        record.name = short_name.center(CenteredFormatter.longest_name_length)
        return super().format(record)


def _log_level() -> int:
    if os.getenv("DEBUG"):
        return logging.DEBUG
    level_name = os.getenv("FARM_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Creates and returns a logger configured with RichHandler for rich output.

    The level is DEBUG when the DEBUG environment variable is set, otherwise
    FARM_LOG_LEVEL (default INFO).
    """
    if name is None:
        name = "farm"
    logger = logging.getLogger(name)
    log_level = _log_level()
    logger.setLevel(log_level)

    if not logger.handlers:
        formatter = CenteredFormatter("[%(name)s]  %(message)s")

        console_handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

        logger.propagate = False
        logger.debug(f"Logger for '{name}' initialized.")

    return logger
