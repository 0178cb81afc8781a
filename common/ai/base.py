"""
Abstract AI provider interface.

Defines the contract that all AI/LLM providers must implement.
This allows swapping between different AI services (Claude, OpenAI, etc.)
without changing application code.

Example:
    from common.ai import AIProvider, ClaudeProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "claude":
            return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
        return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services. A provider takes an ordered
    list of role/content messages and returns a single completion.
    """

    # Credential shape used to skip obviously broken configurations
    KEY_PREFIX: str = ""
    MIN_KEY_LENGTH: int = 10

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key or ""

    def is_configured(self) -> bool:
        """
        Check whether the credential looks usable.

        This is a shape check only (length and known prefix). It never
        performs a network call.
        """
        if len(self.api_key) < self.MIN_KEY_LENGTH:
            return False
        return self.api_key.startswith(self.KEY_PREFIX)

    @abstractmethod
    async def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int = 500,
        temperature: float = 0.7,
        json_mode: bool = False,
    ) -> Optional[str]:
        """
        Generate a completion for a message list.

        Args:
            messages: Ordered messages
                Format: [{"role": "system"|"user"|"assistant", "content": "..."}]
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            json_mode: Ask the model for a single JSON object

        Returns:
            The completion text, or None when the model returned no content

        Raises:
            Exception: Any client, network, or API error is propagated
        """
        pass
