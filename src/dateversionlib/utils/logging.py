import logging
from contextlib import contextmanager, nullcontext

import click
from rich.console import Console
from rich.logging import RichHandler

from ..config import (
    DATEVERSION_DEFAULT_DATETIME_FORMAT,
    DATEVERSION_VERBOSE_DATETIME_FORMAT,
)

# create logger
logger = logging.getLogger(__name__)


@contextmanager
def suppress_log_level(loglevel: int):
    logging.disable(loglevel)
    try:
        yield
    finally:
        logging.disable(logging.NOTSET)


def silenced(silent: bool):
    """Mutes all library logging up to CRITICAL while active if silent is set."""
    return suppress_log_level(logging.CRITICAL) if silent else nullcontext()


def configure_logging(loglevel):
    log_format = "| %(subsystem)s | %(message)s"
    datefmt = DATEVERSION_DEFAULT_DATETIME_FORMAT

    def addSubsys(record: logging.LogRecord):
        try:
            subsys = record.name.split(".")
            record.subsystem = (subsys[1:2] or ("",))[0]
        except Exception:
            record.subsystem = "?"
        return record

    if loglevel < 10:
        # this means the value passed is
        # not a valid log level in python
        if loglevel == 0:
            loglevel = logging.WARNING
        elif loglevel == 1:
            loglevel = logging.INFO
        elif loglevel >= 2:
            loglevel = logging.DEBUG
            log_format = " | %(name)s | %(message)s"
            datefmt = DATEVERSION_VERBOSE_DATETIME_FORMAT

    # logs go to stderr, stdout is reserved for the version itself
    c = Console(stderr=True)
    if c.is_terminal:
        rh = RichHandler(rich_tracebacks=True, tracebacks_suppress=[click], console=c)
    else:
        # if file redirect set terminal width to 220
        c = Console(stderr=True, width=220)
        rh = RichHandler(
            rich_tracebacks=True,
            tracebacks_suppress=[click],
            console=c,
            show_path=False,
        )

    rh.addFilter(addSubsys)

    logging.basicConfig(
        format=log_format,
        level=loglevel,
        datefmt=datefmt,
        handlers=[rh],
        force=True,
    )

    if loglevel <= logging.DEBUG:
        logger.debug("Logging set to verbose mode.")
        logging.getLogger("git").setLevel(logging.INFO)
    else:
        logging.getLogger("git").setLevel(logging.WARNING)
