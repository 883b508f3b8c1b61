"""
Ordered model fallback.

``try_in_order`` walks a list of candidates (model ids) one at a time and
returns the first successful result. The model lists themselves are
configuration data on each adapter.
"""

import logging
from typing import Awaitable, Callable, Sequence, TypeVar

from common.exception import ModelExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Substring a provider uses when a model has been retired
MODEL_REMOVED_MARKER = "removed"


def is_model_removed(error: Exception) -> bool:
    """Return True if ``error`` says the requested model was removed or deprecated."""
    message = str(error).lower()
    return MODEL_REMOVED_MARKER in message or "deprecated" in message


async def try_in_order(
    candidates: Sequence[T],
    attempt: Callable[[T], Awaitable[R]],
    label: str = "model",
) -> R:
    """
    Try ``attempt`` on each candidate in order until one succeeds.

    Strictly sequential, no delay between attempts. A failure on any but the
    last candidate advances to the next one; the last candidate's exception
    propagates unchanged.

    Args:
        candidates: Ordered candidates, first is preferred
        attempt: Coroutine function called with one candidate
        label: Noun used in log messages

    Returns:
        The first successful result

    Raises:
        ModelExhaustedError: If ``candidates`` is empty
        Exception: Whatever the last candidate's attempt raised

    Example:
        >>> text = await try_in_order(["model-a", "model-b"], call_model)
    """
    remaining = list(candidates)
    if not remaining:
        raise ModelExhaustedError(f"All {label}s failed")

    last_index = len(remaining) - 1
    for index, candidate in enumerate(remaining):
        try:
            result = await attempt(candidate)
        except Exception as e:
            if index == last_index:
                logger.error(f"Last {label} {candidate} failed: {e}")
                raise
            if is_model_removed(e):
                logger.warning(f"{label.capitalize()} {candidate} not available, trying next...")
            else:
                logger.warning(f"{label.capitalize()} {candidate} failed ({e}), trying next...")
            continue

        logger.debug(f"Successfully used {label}: {candidate}")
        return result

    raise ModelExhaustedError(f"All {label}s failed")
