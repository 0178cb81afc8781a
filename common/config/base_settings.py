"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        REPLY_MAX_TOKENS: int = 500

    settings = Settings()
    print(settings.AI_PROVIDER)
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # AI Settings
    # ==========================================================================
    AI_PROVIDER: str = "openai"  # "openai" or "claude"

    # OpenAI Settings (used when AI_PROVIDER = "openai")
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_ORGANIZATION: Optional[str] = None

    # Claude Settings (used when AI_PROVIDER = "claude")
    CLAUDE_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-5-20250929"

    # Client behaviour (retries belong to the SDK client, not the services)
    AI_MAX_RETRIES: int = 2
    AI_TIMEOUT_SECONDS: float = 60.0

    # ==========================================================================
    # Server Settings
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # CORS Settings
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if self.AI_PROVIDER not in ("openai", "claude"):
            errors.append(f"AI_PROVIDER must be 'openai' or 'claude', got '{self.AI_PROVIDER}'")

        # Check AI provider requirements
        if self.AI_PROVIDER == "claude" and not self.CLAUDE_API_KEY:
            errors.append("CLAUDE_API_KEY is required when using Claude AI")

        if self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            errors.append("OPENAI_API_KEY is required when using OpenAI")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
