"""
Centralized logging using Loguru with context-aware verbosity.

clansi is mostly used as a library inside other programs, so its loguru
records are disabled on import and the host application's handlers are
left alone. The CLI turns them on with logger_configure().

Verbosity maps onto loguru levels:
    1 = INFO   normal output
    2 = DEBUG  style sheet loading, command selection (-v)
    3 = TRACE  unknown directives, item counts (-vv)

Usage:
    from clansi.lib.log import LOG, logger_configure, state_connectToLogger

    logger_configure()
    state_connectToLogger(state)

    LOG("Loaded 4 styles", level=2)
    LOG("Unknown directive 'purple', substituting reset", level=3)
"""

from loguru import logger
from typing import Any, Dict, Optional, TextIO
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

LEVEL_NAMES: Dict[int, str] = {
    1: "INFO",
    2: "DEBUG",
    3: "TRACE",
}

logger_format = (
    "<magenta>clansi</magenta> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{name}:{function}</cyan> ║ "
    "<level>{message}</level>"
)

_handler_id: Optional[int] = None

logger.disable("clansi")


def logger_configure(sink: Optional[TextIO] = None) -> int:
    """
    Enable clansi log records and route them to a sink.

    Calling it again replaces the previous clansi handler.

    Args:
        sink: Stream to write to (default: stderr)

    Returns:
        loguru handler id
    """
    global _handler_id
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # handler already removed through loguru directly
            pass
    logger.enable("clansi")
    _handler_id = logger.add(
        sink or sys.stderr,
        format=logger_format,
        level="TRACE",
        filter="clansi",
    )
    return _handler_id


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Call this at the start of a CLI run to make the state's verbosity
    setting available to LOG() calls throughout that context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        level_name = LEVEL_NAMES.get(level, "TRACE")
        logger.opt(depth=1).log(level_name, message, **kwargs)
