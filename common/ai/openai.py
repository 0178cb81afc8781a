"""
OpenAI GPT provider implementation.

Provides chat completions using the OpenAI API.
Supports GPT-4, GPT-4o, and other OpenAI chat models.

Example:
    from common.ai import OpenAIProvider

    openai = OpenAIProvider(api_key="your-api-key")
    response = await openai.complete([
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "Hello, how are you?"},
    ])
    print(response)
"""

from typing import Optional, List, Dict, Any

from common.ai.base import AIProvider


class OpenAIProvider(AIProvider):
    """
    OpenAI GPT provider.

    Uses the OpenAI async client for API calls.
    """

    KEY_PREFIX = "sk-"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o",
        max_retries: int = 2,
        timeout: float = 60.0,
        organization: Optional[str] = None,
        client: Any = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Chat model to use (default: gpt-4o)
            max_retries: Number of retries the client performs for failed requests
            timeout: Request timeout in seconds
            organization: Optional OpenAI organization ID
            client: Pre-built AsyncOpenAI-compatible client (tests, proxies)
        """
        super().__init__(api_key)
        self.model = model

        if client is not None:
            self.client = client
            return

        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError(
                "openai package is required for OpenAI. "
                "Install with: pip install openai"
            )

        self.client = AsyncOpenAI(
            api_key=self.api_key or "missing",
            max_retries=max_retries,
            timeout=timeout,
            organization=organization,
        )

    async def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int = 500,
        temperature: float = 0.7,
        json_mode: bool = False,
    ) -> Optional[str]:
        """Send the message list to OpenAI and return the first choice."""
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if json_mode:
            params["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(**params)
        if not response.choices:
            return None
        return response.choices[0].message.content
