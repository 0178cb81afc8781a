"""
Response synthesizer.

Produces the assistant's reply to a conversation. The external model is
tried first; if it is unavailable, slow, or fails in any way, a reply is
composed locally from templates chosen by lexical analysis of the user's
last message.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Sequence, Union

from common.ai import AIProvider

from app.services.reflection.exceptions import ConversationValidationError
from app.services.reflection.generation import attempt_completion
from app.services.reflection.lexical_analyzer import LexicalAnalyzer
from app.services.reflection.personalities import (
    apply_personality,
    build_system_instructions,
    normalize_personality,
)
from app.services.reflection.sanitizer import sanitize
from app.services.reflection.templates import select_bucket
from app.services.reflection.types import (
    VALID_ROLES,
    ChatMessage,
    GenerationResult,
    SupportType,
)

logger = logging.getLogger(__name__)

MessageLike = Union[ChatMessage, Dict[str, Any]]


class ResponseSynthesizer:
    """
    Generates replies with an external model and a local fallback.

    Stateless between calls; one instance can serve concurrent requests.
    """

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        analyzer: Optional[LexicalAnalyzer] = None,
        rng: Any = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
        timeout: Optional[float] = 30.0,
        window: int = 10,
    ):
        """
        Initialize the synthesizer.

        Args:
            ai_provider: Provider for external generation (None disables it)
            analyzer: Lexical analyzer for the fallback path
            rng: Random source with a choice() method (default: random module)
            max_tokens: Maximum tokens for external replies
            temperature: Sampling temperature for external replies
            timeout: Seconds to wait for the provider (None waits indefinitely)
            window: Number of trailing messages forwarded to the provider
        """
        self.ai = ai_provider
        self.analyzer = analyzer or LexicalAnalyzer()
        self.rng = rng or random
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.window = window

    @staticmethod
    def validate_conversation(messages: Any) -> List[ChatMessage]:
        """
        Check a conversation and convert it to ChatMessage objects.

        Raises:
            ConversationValidationError: Not a non-empty list of messages
                with a known role and string content
        """
        if not isinstance(messages, (list, tuple)) or not messages:
            raise ConversationValidationError("Messages must be a non-empty array")

        validated = []
        for index, message in enumerate(messages):
            if isinstance(message, ChatMessage):
                role, content = message.role, message.content
            elif isinstance(message, dict):
                role, content = message.get("role"), message.get("content")
            else:
                raise ConversationValidationError(
                    f"Message at position {index} must be an object", index=index
                )

            if role not in VALID_ROLES:
                raise ConversationValidationError(
                    f"Message at position {index} has an invalid role", index=index
                )
            if not isinstance(content, str):
                raise ConversationValidationError(
                    f"Message at position {index} must have text content", index=index
                )

            validated.append(ChatMessage(role=role, content=content))

        return validated

    async def generate_reply(
        self,
        messages: Sequence[MessageLike],
        support_type: Optional[str] = None,
        personality: Optional[str] = None,
        custom_instructions: Optional[str] = None,
    ) -> GenerationResult:
        """
        Produce the next assistant message.

        Args:
            messages: Conversation, oldest first
            support_type: Conversational framing (unknown values mean general)
            personality: Built-in personality key or custom reference
            custom_instructions: Free-text style; takes precedence over the personality

        Returns:
            GenerationResult with non-empty content

        Raises:
            ConversationValidationError: If the conversation is malformed
        """
        conversation = self.validate_conversation(messages)
        support = SupportType.normalize(support_type)
        style = normalize_personality(personality)

        sanitized = [
            ChatMessage(role=m.role, content=sanitize(m.content)) if m.role == "user" else m
            for m in conversation
        ]

        outbound = [
            {"role": "system", "content": build_system_instructions(support, style, custom_instructions)}
        ]
        outbound.extend(m.to_dict() for m in sanitized[-self.window:])

        content = await attempt_completion(
            self.ai,
            outbound,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            timeout=self.timeout,
            purpose="reply",
        )
        if content is not None:
            return GenerationResult(content=content)

        last_user = next((m.content for m in reversed(sanitized) if m.role == "user"), "")
        return GenerationResult(
            content=self.fallback_reply(last_user, support, style, custom_instructions),
            used_fallback=True,
        )

    def fallback_reply(
        self,
        text: str,
        support_type: Optional[str] = None,
        personality: Optional[str] = None,
        custom_instructions: Optional[str] = None,
    ) -> str:
        """
        Compose a reply locally from templates.

        Bucket precedence is greeting, then question, then the support
        type's content flags, then generic. Never raises.
        """
        analysis = self.analyzer.analyze(text or "")
        pool = select_bucket(SupportType.normalize(support_type), analysis)
        base_reply = self.rng.choice(pool)
        return apply_personality(
            normalize_personality(personality),
            base_reply,
            custom_instructions=custom_instructions,
            rng=self.rng,
        )
