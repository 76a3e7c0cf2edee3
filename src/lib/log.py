"""
Loguru sink and a verbosity-gated LOG() for the tokenizer and grouper.

The verbosity comes from whichever TokenizerState was last connected with
state_connectToLogger(). The per-mark trace needs verbosity 3.
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold the current state object
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Configure loguru with slidemark-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a state object to the logging context.

    The Tokenizer calls this on construction so that the verbosity of its
    TokenizerState governs every LOG() call made while tokenizing and grouping.

    Args:
        state: Object with a `verbosity` attribute (e.g., TokenizerState)
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=structure, 3=trace)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        0 = Silent (default)
        1 = Normal output
        2 = Page and transition structure
        3 = Every emitted mark

    Example:
        LOG("Grouped 3 pages", level=2)
        LOG("Mark at offset 42: Text(content='hello')", level=3)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
