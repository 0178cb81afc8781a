"""
FastAPI dependencies for the Reflect application.

Provides the AI provider and the reflection services as process-wide
singletons, created once at startup.
"""

import logging
from typing import Optional

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import ServiceUnavailableException

from app.config import Settings
from app.services.reflection.response_synthesizer import ResponseSynthesizer
from app.services.reflection.sentiment_analyzer import SentimentAnalyzer
from app.services.reflection.entry_reflection import EntryReflectionService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Service instances (initialized on startup)
# ─────────────────────────────────────────────────────────────────

_ai_provider: Optional[AIProvider] = None
_response_synthesizer: Optional[ResponseSynthesizer] = None
_sentiment_analyzer: Optional[SentimentAnalyzer] = None
_entry_reflection_service: Optional[EntryReflectionService] = None


# ─────────────────────────────────────────────────────────────────
# Provider selection
# ─────────────────────────────────────────────────────────────────

def get_ai_provider(settings: Settings) -> AIProvider:
    """
    Build the configured AI provider.

    Returns ClaudeProvider or OpenAIProvider based on settings.AI_PROVIDER.
    A missing key is not an error here; the services detect it and use
    their local fallbacks.
    """
    if settings.AI_PROVIDER == "claude":
        return ClaudeProvider(
            api_key=settings.CLAUDE_API_KEY,
            model=settings.CLAUDE_MODEL,
            max_retries=settings.AI_MAX_RETRIES,
            timeout=settings.AI_TIMEOUT_SECONDS,
        )

    # Default to OpenAI
    return OpenAIProvider(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        max_retries=settings.AI_MAX_RETRIES,
        timeout=settings.AI_TIMEOUT_SECONDS,
        organization=settings.OPENAI_ORGANIZATION,
    )


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def init_all_services(settings: Settings, ai_provider: Optional[AIProvider] = None) -> None:
    """
    Initialize all services.

    Args:
        settings: Application settings
        ai_provider: Provider override; built from settings when omitted
    """
    global _ai_provider, _response_synthesizer, _sentiment_analyzer, _entry_reflection_service

    _ai_provider = ai_provider or get_ai_provider(settings)
    if not _ai_provider.is_configured():
        logger.warning(
            f"AI provider '{settings.AI_PROVIDER}' has no usable API key; "
            "replies will use local fallbacks"
        )

    _response_synthesizer = ResponseSynthesizer(
        ai_provider=_ai_provider,
        max_tokens=settings.REPLY_MAX_TOKENS,
        temperature=settings.REPLY_TEMPERATURE,
        timeout=settings.GENERATION_TIMEOUT_SECONDS,
        window=settings.CONVERSATION_WINDOW,
    )
    _sentiment_analyzer = SentimentAnalyzer(
        ai_provider=_ai_provider,
        max_tokens=settings.SENTIMENT_MAX_TOKENS,
        temperature=settings.SENTIMENT_TEMPERATURE,
        timeout=settings.GENERATION_TIMEOUT_SECONDS,
    )
    _entry_reflection_service = EntryReflectionService(
        ai_provider=_ai_provider,
        max_tokens=settings.ENTRY_REFLECTION_MAX_TOKENS,
        temperature=settings.ENTRY_REFLECTION_TEMPERATURE,
        timeout=settings.GENERATION_TIMEOUT_SECONDS,
    )

    logger.info("Reflection services initialized")


# ─────────────────────────────────────────────────────────────────
# Getters
# ─────────────────────────────────────────────────────────────────

def get_response_synthesizer() -> ResponseSynthesizer:
    """Get response synthesizer instance."""
    if _response_synthesizer is None:
        raise ServiceUnavailableException("Reflection services not initialized.")
    return _response_synthesizer


def get_sentiment_analyzer() -> SentimentAnalyzer:
    """Get sentiment analyzer instance."""
    if _sentiment_analyzer is None:
        raise ServiceUnavailableException("Reflection services not initialized.")
    return _sentiment_analyzer


def get_entry_reflection_service() -> EntryReflectionService:
    """Get entry reflection service instance."""
    if _entry_reflection_service is None:
        raise ServiceUnavailableException("Reflection services not initialized.")
    return _entry_reflection_service


def get_active_ai_provider() -> Optional[AIProvider]:
    """Get the provider the services were built with, if initialized."""
    return _ai_provider
