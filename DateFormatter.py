""" Christopher Mee
2026-10-17
Cloud function handler. Format the event date as "DD MMM YYYY" and log it.
"""

import logging
import os
import sys
from collections.abc import Mapping
from typing import Any

import ParseDate
from LoggingConfig import LoggingConfig

# MODULE-LEVEL LOGGER
LOGGER_NAME = os.path.splitext(os.path.basename(__file__))[0]
logger = logging.getLogger(LOGGER_NAME)

# SETTINGS ====================================================================
DATE_FIELD = "date"

# advanced
LOGGING = False
# =============================================================================

# ERROR MSG
SCRIPT_NAME: str = os.path.basename(__file__)

# host root logger level is WARNING
logger.setLevel(logging.DEBUG if LOGGING else logging.INFO)


def getEventDate(event: Any) -> Any:
    """Get the date value from an invocation event.

    Args:
        event (Any): Invocation event.

    Raises:
        ValueError: Event is not a mapping, or has no date field.

    Returns:
        Any: Date value, unparsed.
    """
    if not isinstance(event, Mapping):
        raise ValueError(f"Event must be a mapping, got {type(event).__name__}.")

    if DATE_FIELD not in event:
        raise ValueError(f"Event is missing the '{DATE_FIELD}' field.")

    return event[DATE_FIELD]


def lambdaHandler(event: Any, context: Any) -> None:
    """Format the event date and log it. Errors are logged, never raised.

    Args:
        event (Any): Invocation event, Ex: {"date": "2024-03-05"}.
        context (Any): Invocation context (unused).
    """
    if LOGGING:
        logger.debug("Event received - %s", event)

    try:
        formattedDate = ParseDate.formatDate(getEventDate(event))
    except Exception as e:
        logger.error("Error formatting date: %s", e)
        return

    logger.info(formattedDate)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python " + SCRIPT_NAME + " <date>")
        sys.exit(1)

    if LOGGING:
        LoggingConfig.setLogToFileConfig()
    else:
        LoggingConfig.setLogToConsoleConfig()

    lambdaHandler({DATE_FIELD: sys.argv[1]}, None)
