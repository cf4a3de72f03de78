import logging
import os
import sys
import typing
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_PATH: Path = Path(__file__).parent.resolve()

# NOTE: Dictionaries shipped with the package, used unless other paths are configured.
DICTIONARIES_PATH: Path = PACKAGE_PATH / "_dictionaries"

ALPHABET_DICTIONARY_PATH: Path = DICTIONARIES_PATH / "en_UK.txt"
SIMPLIFIED_DICTIONARY_PATH: Path = DICTIONARIES_PATH / "cmudict_simple.txt"


class AnsiCodes:
    """
    Inspired by:
    https://godoc.org/github.com/whitedevops/colors
    https://github.com/tartley/colorama

    NOTE: You can experiment with these codes in your console like so:
    `echo -e '\033[43m \033[30m hi \033[0m'`
    """

    RESET_ALL: typing.Final = "\033[0m"
    BLACK: typing.Final = "\033[30m"
    RED: typing.Final = "\033[31m"
    GREEN: typing.Final = "\033[32m"
    YELLOW: typing.Final = "\033[33m"
    BLUE: typing.Final = "\033[34m"
    MAGENTA: typing.Final = "\033[35m"
    CYAN: typing.Final = "\033[36m"
    DARK_GRAY: typing.Final = "\033[90m"
    BACKGROUND_LIGHT_GREEN: typing.Final = "\033[102m"
    BACKGROUND_LIGHT_BLUE: typing.Final = "\033[104m"
    BACKGROUND_LIGHT_MAGENTA: typing.Final = "\033[105m"
    BACKGROUND_LIGHT_CYAN: typing.Final = "\033[106m"
    BACKGROUND_WHITE: typing.Final = "\033[107m"


class _ColoredFormatter(logging.Formatter):
    """Logging formatter with color.

    Args:
        id_: An id to be printed along with all logs, typically the worker process id.
    """

    ID_COLOR_ROTATION = [
        AnsiCodes.BACKGROUND_LIGHT_BLUE + AnsiCodes.BLACK,
        AnsiCodes.BACKGROUND_LIGHT_CYAN + AnsiCodes.BLACK,
        AnsiCodes.BACKGROUND_LIGHT_GREEN + AnsiCodes.BLACK,
        AnsiCodes.BACKGROUND_LIGHT_MAGENTA + AnsiCodes.BLACK,
        AnsiCodes.BACKGROUND_WHITE + AnsiCodes.BLACK,
        AnsiCodes.BLUE,
        AnsiCodes.CYAN,
        AnsiCodes.GREEN,
        AnsiCodes.MAGENTA,
    ]

    def __init__(self, id_: int):
        color = self.ID_COLOR_ROTATION[id_ % len(self.ID_COLOR_ROTATION)]
        super().__init__(
            f"{AnsiCodes.DARK_GRAY}[%(asctime)s][{AnsiCodes.RESET_ALL}"
            f"{color}{id_}{AnsiCodes.RESET_ALL}"
            f"{AnsiCodes.DARK_GRAY}][%(name)s][%(levelname)s]{AnsiCodes.RESET_ALL} %(message)s",
        )

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno > logging.WARNING:
            record.levelname = (
                AnsiCodes.RED + record.levelname + AnsiCodes.RESET_ALL + AnsiCodes.DARK_GRAY
            )
        elif record.levelno > logging.INFO:
            record.levelname = (
                AnsiCodes.YELLOW + record.levelname + AnsiCodes.RESET_ALL + AnsiCodes.DARK_GRAY
            )
        return logging.Formatter.format(self, record)


class _MaxLevelFilter(logging.Filter):
    """Filter out logs above a certain level.

    NOTE: This is the opposite of `logging.Handler.setLevel` which sets a mininum threshold.
    """

    def __init__(self, maxLevel: int):
        super().__init__()
        self.maxLevel = maxLevel

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.maxLevel


def set_basic_logging_config(id_: int = os.getpid(), reset=False, level=logging.INFO):
    """
    Inspired by: `logging.basicConfig`

    Set a basic configuration for the logging system. Logs up to `level` are written to
    `sys.stdout` and warnings, or worse, are written to `sys.stderr`.

    This function does nothing if the root logger already has handlers configured, unless `reset`
    is set.

    Args:
        id_: An id to be printed along with all logs.
        reset: Reset root logger handlers.
        level: The logging level of the root logger.
    """
    root = logging.getLogger()

    if reset:
        while root.hasHandlers():
            root.removeHandler(root.handlers[0])

    if len(root.handlers) == 0:
        root.setLevel(level)

        formatter = _ColoredFormatter(id_)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(_MaxLevelFilter(max(level, logging.INFO)))
        root.addHandler(handler)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.WARNING)
        handler.setFormatter(formatter)
        root.addHandler(handler)
