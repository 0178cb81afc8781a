"""
Reflect application settings.

Extends the base settings with reply-generation configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Reflect-specific settings."""

    # ==========================================================================
    # Chat Replies
    # ==========================================================================
    REPLY_MAX_TOKENS: int = 500
    REPLY_TEMPERATURE: float = 0.7

    # Messages forwarded to the model (older context is dropped)
    CONVERSATION_WINDOW: int = 10

    # Upper bound for a single model call before the local fallback is used
    GENERATION_TIMEOUT_SECONDS: float = 30.0

    # ==========================================================================
    # Sentiment Analysis
    # ==========================================================================
    SENTIMENT_TEMPERATURE: float = 0.3
    SENTIMENT_MAX_TOKENS: int = 200

    # ==========================================================================
    # Journal Entry Reflections
    # ==========================================================================
    ENTRY_REFLECTION_MAX_TOKENS: int = 500
    ENTRY_REFLECTION_TEMPERATURE: float = 0.7


# Global settings instance
settings = Settings()
