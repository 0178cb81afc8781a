"""
Guarded external completion.

Wraps a single provider call with a credential check, a timeout, and
failure classification. Callers receive None on any failure and run their
own fallback.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from common.ai import AIProvider

from app.services.reflection.failures import (
    EmptyCompletionError,
    ProviderUnavailableError,
    classify_failure,
)

logger = logging.getLogger(__name__)


async def attempt_completion(
    provider: Optional[AIProvider],
    messages: List[Dict[str, str]],
    max_tokens: int,
    temperature: float,
    timeout: Optional[float],
    json_mode: bool = False,
    purpose: str = "reply",
) -> Optional[str]:
    """
    Call the provider once and return non-blank content, or None.

    Cancellation of the awaiting task is not a failure and propagates.
    There are no retries here; the provider client owns those.
    """
    try:
        if provider is None or not provider.is_configured():
            logger.info(f"Skipping external {purpose}: provider credential not configured")
            raise ProviderUnavailableError("provider credential not configured")

        content = await asyncio.wait_for(
            provider.complete(
                messages,
                max_tokens=max_tokens,
                temperature=temperature,
                json_mode=json_mode,
            ),
            timeout=timeout,
        )

        if content is None or not content.strip():
            raise EmptyCompletionError("provider returned no content")

        return content

    except asyncio.TimeoutError:
        logger.warning(f"External {purpose} timed out after {timeout}s, using fallback (error)")
        return None
    except Exception as e:
        kind = classify_failure(e)
        logger.warning(f"External {purpose} failed, using fallback ({kind}): {type(e).__name__}")
        return None
