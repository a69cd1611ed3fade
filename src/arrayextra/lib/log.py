"""
Logger of the array operations

The ``arrayextra`` logger has its own handler and still propagates to the root logger, so an
application that configures root logging and lowers this logger to DEBUG sees each record from
both. Set ``logger.propagate = False`` or remove ``handler`` to keep only one of them.
"""
from typing import Any
import os
import logging

import rich.logging

__all__ = 'logger', 'handler', 'set_level', 'debug', 'info', 'warning', 'error', 'fallback'

LOGGER_NAME = "arrayextra"
DEFAULT_LEVEL = logging.WARNING

use_rich = os.environ.get("ARRAYEXTRA_NO_COLOR_LOG", "") != "1"


class ArrayLogFormatter(logging.Formatter):
    """Formatter that prefixes messages with the name of the array operation"""

    def format(self, record: logging.LogRecord) -> Any:
        msg = record.getMessage()
        operation = getattr(record, 'operation', None)
        if operation:
            msg = f"{operation}: {msg}"

        # RichHandler renders time and level itself
        if use_rich:
            return msg

        # Other handlers share the record, format a copy
        copy = logging.makeLogRecord(record.__dict__)
        copy.msg = msg
        copy.args = ()
        return super().format(copy)


def _level_from_env() -> int:
    """
    Resolve the initial level from ``ARRAYEXTRA_LOG_LEVEL``.

    :return: Logging level, WARNING for missing or unknown names
    """
    name = os.environ.get("ARRAYEXTRA_LOG_LEVEL", "").strip().upper()
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LEVEL


# Create logger
logger = logging.getLogger(LOGGER_NAME)
# Remove the handler of a previous import only, handlers added by the application stay
for _old in [h for h in logger.handlers if getattr(h, '_arrayextra', False)]:
    logger.removeHandler(_old)

logger.setLevel(_level_from_env())
if use_rich:
    handler = rich.logging.RichHandler(
        show_time=True,
        show_level=True,
        omit_repeated_times=False,
        markup=False,
        show_path=False,
    )
else:
    handler = logging.StreamHandler()
handler.setFormatter(ArrayLogFormatter(
    "%(asctime)s %(levelname)-7s %(message)s",
    datefmt="[%Y-%m-%d %H:%M:%S%z]")
)
handler._arrayextra = True  # type: ignore[attr-defined]
logger.addHandler(handler)


def set_level(level: int | str) -> None:
    """
    Change the level of the library logger.

    :param level: Level number or name (e.g. ``"DEBUG"``)
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)


def fallback(operation: str, index: int, size: int, outcome: str = "array unchanged") -> None:
    """
    Record that an operation took its out of range fallback.

    :param operation: Name of the array operation
    :param index: The index that was requested
    :param size: Length of the input array
    :param outcome: What the operation returned instead
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("index %d out of range for length %d, %s", index, size, outcome,
                     extra={'operation': operation})


def debug(msg: str, *args: Any) -> None:
    """
    Log a debug message.

    :param msg: Message format string, %-style
    :param args: Arguments to format the message
    """
    logger.debug(msg, *args)


def info(msg: str, *args: Any) -> None:
    """
    Log an info message.

    :param msg: Message format string, %-style
    :param args: Arguments to format the message
    """
    logger.info(msg, *args)


def warning(msg: str, *args: Any) -> None:
    """
    Log a warning message.

    :param msg: Message format string, %-style
    :param args: Arguments to format the message
    """
    logger.warning(msg, *args)


def error(msg: str, *args: Any) -> None:
    """
    Log an error message.

    :param msg: Message format string, %-style
    :param args: Arguments to format the message
    """
    logger.error(msg, *args)
