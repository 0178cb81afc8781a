"""Follow-up check-in question extraction."""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)


MIN_QUESTION_LENGTH = 10

_SENTENCE_END = re.compile(r"[.!]\s+")


def extract_check_in_question(reply: Optional[str]) -> Optional[str]:
    """
    Return the last question asked in an assistant reply.

    Only questions longer than MIN_QUESTION_LENGTH characters count, so
    a trailing "Right?" is ignored. Text before the question's own
    sentence is dropped.

    Args:
        reply: Assistant reply text

    Returns:
        The question ending in "?", or None if the reply asks none
    """
    if not reply or "?" not in reply:
        return None

    questions = [_SENTENCE_END.split(part)[-1].strip() for part in reply.split("?")[:-1]]
    questions = [q for q in questions if len(q) > MIN_QUESTION_LENGTH]
    if not questions:
        return None

    question = questions[-1]

    logger.debug(f"Extracted check-in question ({len(question)} chars)")
    return f"{question}?"
