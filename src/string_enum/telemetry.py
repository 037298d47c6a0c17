"""Utilities for monitoring closed sets via structured logging."""

import logging
import sys
from functools import wraps
from logging import StreamHandler
from typing import Any, Literal

import structlog


def _get_processors(purpose: Literal["report", "log"]) -> list[Any]:
    return [
        # If log level is too low, abort pipeline and throw away log entry.
        structlog.stdlib.filter_by_level,
        # Perform %-style formatting.
        structlog.stdlib.PositionalArgumentsFormatter(),
        # Add the name of the logger to event dict.
        structlog.stdlib.add_logger_name,
        # Add log level to event dict.
        structlog.stdlib.add_log_level,
        # Add a timestamp in ISO 8601 format.
        structlog.processors.TimeStamper(fmt="iso"),
        # If the "stack_info" key in the event dict is true, remove it and
        # render the current stack trace in the "stack" key.
        structlog.processors.StackInfoRenderer(),
        # If the "exc_info" key in the event dict is either true or a
        # sys.exc_info() tuple, remove "exc_info" and render the exception
        # with traceback into the "exception" key.
        structlog.processors.format_exc_info,
        # If some value is in bytes, decode it to a unicode str.
        structlog.processors.UnicodeDecoder(),
        # Add callsite parameters.
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        (
            structlog.dev.ConsoleRenderer()
            if purpose == "report"
            else structlog.processors.JSONRenderer()
        ),
    ]


def _configure_structlog(purpose: Literal["report", "log"]) -> None:
    structlog.configure(
        processors=_get_processors(purpose),
        # `wrapper_class` is the bound logger that you get back from
        # get_logger(). This one imitates the API of `logging.Logger`.
        wrapper_class=structlog.stdlib.BoundLogger,
        # `logger_factory` is used to create wrapped loggers that are used for
        # OUTPUT. This one returns a `logging.Logger`, so the application's
        # own logging setup decides what actually gets emitted.
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Effectively freeze configuration after creating the first bound
        # logger.
        cache_logger_on_first_use=True,
    )


def configure_logging(
    purpose: Literal["report", "log"] = "report", verbose: bool = False
) -> None:
    """Auto-configure :py:mod:`structlog` based on logging purpose.

    Args:
        purpose:
            Which purpose the default global logger is supposed to fulfill.
            Can be any of:

            * ``report``:
                Record declarations of closed sets and rejected tokens
                to the console.
            * ``log``:
                Produce a common log stream in JSON format.
        verbose:
            Whether to also emit debug events.
    """
    _configure_structlog(purpose)

    logging.basicConfig(
        format="%(message)s",
        handlers=[StreamHandler(sys.stdout)],
        level=logging.DEBUG if verbose else logging.INFO,
        force=True,
    )


# Route library log events through stdlib logging unless the application
# has already set up structlog on its own.
if not structlog.is_configured():
    _configure_structlog("log")


@wraps(structlog.get_logger)
def get_logger(name: str | None = None, **kwds) -> structlog.stdlib.BoundLogger:
    """Typed interface for `structlog.get_logger`."""
    return structlog.get_logger(name, **kwds)
