"""Logging helpers built on loguru."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_SINK_ID: int | None = None  # None removes loguru's default handler too


def configure_logging(level: str = "WARNING") -> None:
    """Enable termblock logs on stderr at *level*.

    The first call removes every loguru sink in the process, loguru's default
    stderr handler included; later calls only replace the sink added here.
    Meant for the CLI, not for applications that configure loguru themselves.
    """
    global _SINK_ID
    logger.remove(_SINK_ID)
    _SINK_ID = logger.add(
        sys.stderr,
        level=level.upper(),
        format=_FORMAT,
        filter="termblock",
        backtrace=False,
        diagnose=False,
    )
    logger.enable("termblock")


__all__ = ["configure_logging"]
