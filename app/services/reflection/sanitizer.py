"""
Content sanitizer.

Redacts PII-shaped substrings before text is sent to an external model
or written to a log.
"""

import re
from typing import List, Optional, Pattern, Tuple


EMAIL_MARKER = "[EMAIL REDACTED]"
PHONE_MARKER = "[PHONE REDACTED]"
ID_MARKER = "[ID REDACTED]"
PAYMENT_MARKER = "[PAYMENT INFO REDACTED]"

# Applied in order; each category replaces all of its non-overlapping matches
REDACTION_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), EMAIL_MARKER),
    (re.compile(r"(?:\+\d{1,2}\s)?(?:\(\d{3}\)|\b\d{3})[\s.-]?\d{3}[\s.-]?\d{4}\b"), PHONE_MARKER),
    (re.compile(r"\b\d{3}-?\d{2}-?\d{4}\b"), ID_MARKER),
    (re.compile(r"\b(?:\d{4}[ -]?){3}\d{4}\b"), PAYMENT_MARKER),
]


def sanitize(text: Optional[str]) -> str:
    """
    Replace emails, phone numbers, ID numbers and card numbers.

    Total over any input: None and empty strings yield "". Running it twice
    gives the same result as running it once.

    Args:
        text: Raw user text

    Returns:
        Text with PII patterns replaced by fixed markers
    """
    if not text:
        return ""

    sanitized = text
    for pattern, marker in REDACTION_RULES:
        sanitized = pattern.sub(marker, sanitized)

    return sanitized
