"""
Anthropic Claude AI provider implementation.

Provides chat completions using the Anthropic API.
Supports all Claude models.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    response = await claude.complete([
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "Hello, how are you?"},
    ])
    print(response)
"""

from typing import Optional, List, Dict, Any, Tuple

from common.ai.base import AIProvider


JSON_ONLY_INSTRUCTION = "Respond with a single JSON object and nothing else."


class ClaudeProvider(AIProvider):
    """
    Anthropic Claude AI provider.

    Uses the Anthropic SDK async client. System messages are lifted out of
    the message list into the `system` parameter, as the Messages API expects.
    """

    KEY_PREFIX = "sk-ant-"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "claude-sonnet-4-5-20250929",
        max_retries: int = 2,
        timeout: float = 60.0,
        client: Any = None,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model to use (default: claude-sonnet-4-5-20250929)
            max_retries: Number of retries the client performs for failed requests
            timeout: Request timeout in seconds
            client: Pre-built AsyncAnthropic-compatible client (tests, proxies)
        """
        super().__init__(api_key)
        self.model = model

        if client is not None:
            self.client = client
            return

        try:
            from anthropic import AsyncAnthropic
        except ImportError:
            raise ImportError(
                "anthropic package is required for Claude. "
                "Install with: pip install anthropic"
            )

        self.client = AsyncAnthropic(
            api_key=self.api_key or "missing",
            max_retries=max_retries,
            timeout=timeout,
        )

    async def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int = 500,
        temperature: float = 0.7,
        json_mode: bool = False,
    ) -> Optional[str]:
        """Send the message list to Claude and return the text blocks."""
        system_prompt, chat_messages = self._split_system(messages)

        if json_mode:
            system_prompt = (
                f"{system_prompt}\n\n{JSON_ONLY_INSTRUCTION}" if system_prompt
                else JSON_ONLY_INSTRUCTION
            )

        params: Dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": chat_messages,
        }

        if system_prompt:
            params["system"] = system_prompt

        response = await self.client.messages.create(**params)

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )
        return text or None

    @staticmethod
    def _split_system(
        messages: List[Dict[str, str]]
    ) -> Tuple[str, List[Dict[str, str]]]:
        """Separate system messages from the user/assistant turns."""
        system_parts = []
        chat_messages = []

        for message in messages:
            if message["role"] == "system":
                system_parts.append(message["content"])
            else:
                chat_messages.append({"role": message["role"], "content": message["content"]})

        return "\n\n".join(system_parts), chat_messages
