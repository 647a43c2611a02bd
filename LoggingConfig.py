"""Christopher Mee
2026-10-17
Logging setup, such that the handler can be debugged from the command line or
from a log file.
"""

import logging
import sys


class LoggingConfig:

    @staticmethod
    def setLogToFileConfig() -> None:
        """Write every log record, down to DEBUG, to debug.log. Used when the
        LOGGING setting is on, to trace events through the handler.
        """
        logging.basicConfig(
            filename="debug.log",
            filemode="w",
            encoding="utf-8",
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.getLogger("dateutil").setLevel(logging.WARNING)  # ignore

    @staticmethod
    def setLogToConsoleConfig() -> None:
        """Print log messages to stdout, one line per message."""
        logging.basicConfig(
            stream=sys.stdout,
            level=logging.INFO,
            format="%(message)s",
        )
        logging.getLogger("dateutil").setLevel(logging.WARNING)  # ignore
