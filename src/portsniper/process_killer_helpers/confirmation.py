"""Interactive confirmation before a process is signalled."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})

CONFIRMATION_QUESTION = "⚠ Do you want to terminate this process? (y/n): "


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def ask_confirmation(question: str = CONFIRMATION_QUESTION, *, prompt: Callable[[str], str] = input) -> bool:
    """Read one line of input and return True only for an affirmative answer.

    End of input counts as a refusal.
    """
    try:
        answer = prompt(question)
    except EOFError:
        logger.debug("Confirmation input closed before an answer was given")
        return False
    return is_affirmative(answer)
