"""Tests for reply generation and the local fallback."""

import asyncio
import logging
import pytest
from unittest.mock import AsyncMock, patch

from app.services.reflection.exceptions import ConversationValidationError
from app.services.reflection.personalities import CUSTOM_FALLBACK_NOTICE, PERSONALITIES
from app.services.reflection.prompts import SUPPORT_TYPE_PROMPTS
from app.services.reflection.response_synthesizer import ResponseSynthesizer
from app.services.reflection.templates import (
    EMOTIONAL_TEMPLATES,
    GENERAL_TEMPLATES,
    PHILOSOPHY_TEMPLATES,
    PRODUCTIVITY_TEMPLATES,
)
from app.services.reflection.types import ChatMessage, SupportType


GENERAL_GREETING = (
    "Hello there! It's nice to connect with you today. How can I be of help or support right now?"
)


def _pool(templates, flag):
    return dict(templates)[flag]


class FakeRateLimitError(Exception):
    status_code = 429


# ─────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────


class TestValidateConversation:
    @pytest.mark.parametrize("messages", [None, [], "hello", {"role": "user"}])
    def test_rejects_non_list_or_empty(self, messages):
        with pytest.raises(ConversationValidationError):
            ResponseSynthesizer.validate_conversation(messages)

    def test_rejects_unknown_role(self):
        with pytest.raises(ConversationValidationError) as exc_info:
            ResponseSynthesizer.validate_conversation([
                {"role": "user", "content": "hi"},
                {"role": "robot", "content": "beep"},
            ])
        assert exc_info.value.index == 1

    def test_rejects_non_string_content(self):
        with pytest.raises(ConversationValidationError):
            ResponseSynthesizer.validate_conversation([{"role": "user", "content": 42}])

    def test_rejects_non_object_message(self):
        with pytest.raises(ConversationValidationError):
            ResponseSynthesizer.validate_conversation(["hello"])

    def test_accepts_dicts_and_chat_messages(self):
        result = ResponseSynthesizer.validate_conversation([
            {"role": "user", "content": "hi"},
            ChatMessage(role="assistant", content="hello"),
        ])
        assert [m.role for m in result] == ["user", "assistant"]

    def test_validation_error_is_value_error(self):
        assert issubclass(ConversationValidationError, ValueError)

    @pytest.mark.asyncio
    async def test_generate_reply_raises_before_provider_call(self, mock_provider):
        synthesizer = ResponseSynthesizer(mock_provider)
        with pytest.raises(ConversationValidationError):
            await synthesizer.generate_reply([])
        mock_provider.complete.assert_not_called()


# ─────────────────────────────────────────────────────────────────
# External path
# ─────────────────────────────────────────────────────────────────


class TestExternalGeneration:
    @pytest.mark.asyncio
    async def test_returns_model_content_verbatim(self, mock_provider, greeting_conversation):
        synthesizer = ResponseSynthesizer(mock_provider)

        result = await synthesizer.generate_reply(greeting_conversation)

        assert result.role == "assistant"
        assert result.content == "A thoughtful reply from the model."
        assert not result.used_fallback

    @pytest.mark.asyncio
    async def test_forwards_last_ten_messages_after_system(self, mock_provider, long_conversation):
        synthesizer = ResponseSynthesizer(mock_provider)

        await synthesizer.generate_reply(long_conversation, support_type="emotional")

        sent = mock_provider.complete.call_args[0][0]
        assert len(sent) == 11
        assert sent[0] == {"role": "system", "content": SUPPORT_TYPE_PROMPTS[SupportType.EMOTIONAL]}
        assert [m["content"] for m in sent[1:]] == [f"message {i}" for i in range(5, 15)]

    @pytest.mark.asyncio
    async def test_generation_parameters(self, mock_provider, greeting_conversation):
        synthesizer = ResponseSynthesizer(mock_provider, max_tokens=321, temperature=0.2)

        await synthesizer.generate_reply(greeting_conversation)

        kwargs = mock_provider.complete.call_args.kwargs
        assert kwargs["max_tokens"] == 321
        assert kwargs["temperature"] == 0.2

    @pytest.mark.asyncio
    async def test_pii_never_reaches_provider(self, mock_provider):
        synthesizer = ResponseSynthesizer(mock_provider)

        await synthesizer.generate_reply([
            {"role": "user", "content": "Email jane@example.com or call 555-123-4567"},
        ])

        sent = mock_provider.complete.call_args[0][0]
        user_content = sent[-1]["content"]
        assert "jane@example.com" not in user_content
        assert "555-123-4567" not in user_content
        assert "[EMAIL REDACTED]" in user_content
        assert "[PHONE REDACTED]" in user_content

    @pytest.mark.asyncio
    async def test_assistant_messages_not_sanitized(self, mock_provider):
        synthesizer = ResponseSynthesizer(mock_provider)
        assistant_text = "You can reach support at help@example.com"

        await synthesizer.generate_reply([
            {"role": "assistant", "content": assistant_text},
            {"role": "user", "content": "thanks"},
        ])

        sent = mock_provider.complete.call_args[0][0]
        assert sent[1]["content"] == assistant_text

    @pytest.mark.asyncio
    async def test_personality_block_in_system_message(self, mock_provider, greeting_conversation):
        synthesizer = ResponseSynthesizer(mock_provider)

        await synthesizer.generate_reply(greeting_conversation, personality="zen")

        system = mock_provider.complete.call_args[0][0][0]["content"]
        assert system.endswith(PERSONALITIES["zen"].instruction_block)

    @pytest.mark.asyncio
    async def test_custom_instructions_used_with_custom_reference(self, mock_provider, greeting_conversation):
        synthesizer = ResponseSynthesizer(mock_provider)

        await synthesizer.generate_reply(
            greeting_conversation,
            personality="custom_9",
            custom_instructions="Answer in haiku",
        )

        system = mock_provider.complete.call_args[0][0][0]["content"]
        assert "Answer in haiku" in system

    @pytest.mark.asyncio
    @pytest.mark.parametrize("personality", ["stoic", None, "nonsense"])
    async def test_custom_instructions_win_over_built_in(self, mock_provider, greeting_conversation, personality):
        synthesizer = ResponseSynthesizer(mock_provider)

        await synthesizer.generate_reply(
            greeting_conversation,
            personality=personality,
            custom_instructions="Answer in haiku",
        )

        system = mock_provider.complete.call_args[0][0][0]["content"]
        assert "Answer in haiku" in system
        assert PERSONALITIES["stoic"].instruction_block not in system

    @pytest.mark.asyncio
    async def test_blank_custom_instructions_keep_built_in(self, mock_provider, greeting_conversation):
        synthesizer = ResponseSynthesizer(mock_provider)

        await synthesizer.generate_reply(
            greeting_conversation,
            personality="stoic",
            custom_instructions="   ",
        )

        system = mock_provider.complete.call_args[0][0][0]["content"]
        assert system.endswith(PERSONALITIES["stoic"].instruction_block)


# ─────────────────────────────────────────────────────────────────
# Fallback path
# ─────────────────────────────────────────────────────────────────


class TestFallback:
    @pytest.mark.asyncio
    async def test_greeting_scenario(self, failing_provider, greeting_conversation, rng):
        synthesizer = ResponseSynthesizer(failing_provider, rng=rng)

        result = await synthesizer.generate_reply(
            greeting_conversation, support_type="general", personality="default"
        )

        assert result.content == GENERAL_GREETING
        assert result.used_fallback

    @pytest.mark.asyncio
    async def test_invalid_credential_skips_network_call(self, unconfigured_provider, greeting_conversation, rng):
        synthesizer = ResponseSynthesizer(unconfigured_provider, rng=rng)

        result = await synthesizer.generate_reply(greeting_conversation)

        assert result.content == GENERAL_GREETING
        unconfigured_provider.client.chat.completions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_provider(self, greeting_conversation, rng):
        synthesizer = ResponseSynthesizer(None, rng=rng)
        result = await synthesizer.generate_reply(greeting_conversation)
        assert result.content == GENERAL_GREETING

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_empty_completion_falls_back(self, mock_provider, greeting_conversation, rng, content):
        mock_provider.complete = AsyncMock(return_value=content)
        synthesizer = ResponseSynthesizer(mock_provider, rng=rng)

        result = await synthesizer.generate_reply(greeting_conversation)

        assert result.content == GENERAL_GREETING

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, mock_provider, greeting_conversation, rng):
        async def _slow(*args, **kwargs):
            await asyncio.sleep(5)
            return "too late"

        mock_provider.complete = _slow
        synthesizer = ResponseSynthesizer(mock_provider, rng=rng, timeout=0.01)

        result = await synthesizer.generate_reply(greeting_conversation)

        assert result.content == GENERAL_GREETING

    @pytest.mark.asyncio
    async def test_cancellation_propagates_without_fallback(self, mock_provider, greeting_conversation):
        started = asyncio.Event()

        async def _hang(*args, **kwargs):
            started.set()
            await asyncio.sleep(10)

        mock_provider.complete = _hang
        synthesizer = ResponseSynthesizer(mock_provider, timeout=None)

        with patch.object(synthesizer, "fallback_reply") as fallback:
            task = asyncio.create_task(synthesizer.generate_reply(greeting_conversation))
            await started.wait()
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task

            fallback.assert_not_called()

    @pytest.mark.asyncio
    async def test_rate_limit_logged(self, mock_provider, greeting_conversation, caplog):
        mock_provider.complete = AsyncMock(side_effect=FakeRateLimitError("Too many requests"))
        synthesizer = ResponseSynthesizer(mock_provider)

        with caplog.at_level(logging.WARNING):
            result = await synthesizer.generate_reply(greeting_conversation)

        assert result.content
        assert "(rate_limit)" in caplog.text

    @pytest.mark.asyncio
    async def test_generic_error_logged(self, failing_provider, greeting_conversation, caplog):
        synthesizer = ResponseSynthesizer(failing_provider)

        with caplog.at_level(logging.WARNING):
            await synthesizer.generate_reply(greeting_conversation)

        assert "(error)" in caplog.text

    @pytest.mark.asyncio
    async def test_user_content_not_logged(self, failing_provider, caplog):
        synthesizer = ResponseSynthesizer(failing_provider)

        with caplog.at_level(logging.DEBUG):
            await synthesizer.generate_reply([{"role": "user", "content": "my secret diary line"}])

        assert "my secret diary line" not in caplog.text

    @pytest.mark.asyncio
    async def test_uses_last_user_message(self, failing_provider, rng):
        synthesizer = ResponseSynthesizer(failing_provider, rng=rng)

        result = await synthesizer.generate_reply([
            {"role": "user", "content": "hello"},
            {"role": "assistant", "content": "Hi, how can I help?"},
            {"role": "user", "content": "I feel anxious lately"},
        ])

        assert result.content == _pool(GENERAL_TEMPLATES, "contains_emotion_word")[0]

    @pytest.mark.asyncio
    async def test_no_user_message_uses_generic(self, failing_provider, rng):
        synthesizer = ResponseSynthesizer(failing_provider, rng=rng)

        result = await synthesizer.generate_reply([{"role": "system", "content": "Be kind."}])

        assert result.content == _pool(GENERAL_TEMPLATES, None)[0]

    @pytest.mark.asyncio
    async def test_custom_personality_fallback_has_notice(self, failing_provider, greeting_conversation, rng):
        synthesizer = ResponseSynthesizer(failing_provider, rng=rng)

        result = await synthesizer.generate_reply(
            greeting_conversation, personality="custom_3", custom_instructions="Be a pirate"
        )

        assert result.content == f"{GENERAL_GREETING}\n\n{CUSTOM_FALLBACK_NOTICE}"

    @pytest.mark.asyncio
    async def test_custom_instructions_fallback_with_built_in_key(self, failing_provider, greeting_conversation, rng):
        synthesizer = ResponseSynthesizer(failing_provider, rng=rng)

        result = await synthesizer.generate_reply(
            greeting_conversation, personality="stoic", custom_instructions="Be a pirate"
        )

        assert result.content == f"{GENERAL_GREETING}\n\n{CUSTOM_FALLBACK_NOTICE}"

    @pytest.mark.asyncio
    async def test_never_empty_under_forced_failure(self, failing_provider):
        synthesizer = ResponseSynthesizer(failing_provider)
        texts = ["", "hello", "why?", "I feel sad", "my goal", "meaning of life", "ok"]

        for support_type in ["general", "emotional", "productivity", "philosophy", "unknown", None]:
            for personality in list(PERSONALITIES) + ["custom_1", "nonsense", None]:
                for text in texts:
                    result = await synthesizer.generate_reply(
                        [{"role": "user", "content": text}],
                        support_type=support_type,
                        personality=personality,
                    )
                    assert result.content.strip()


class TestBucketPrecedence:
    @pytest.fixture
    def synthesizer(self, rng):
        return ResponseSynthesizer(None, rng=rng)

    def test_greeting_beats_question(self, synthesizer):
        reply = synthesizer.fallback_reply("hey, what should I do?", "emotional")
        assert reply == _pool(EMOTIONAL_TEMPLATES, "is_greeting")[0]

    def test_question_beats_emotion(self, synthesizer):
        reply = synthesizer.fallback_reply("why do I feel sad", "emotional")
        assert reply == _pool(EMOTIONAL_TEMPLATES, "is_question")[0]

    def test_emotional_content_bucket(self, synthesizer):
        reply = synthesizer.fallback_reply("I feel low", "emotional")
        assert reply == _pool(EMOTIONAL_TEMPLATES, "contains_emotion_word")[0]

    def test_productivity_goal_bucket(self, synthesizer):
        reply = synthesizer.fallback_reply("I need to finish the report", "productivity")
        assert reply == _pool(PRODUCTIVITY_TEMPLATES, "mentions_goals")[0]

    def test_productivity_ignores_emotion_flag(self, synthesizer):
        reply = synthesizer.fallback_reply("I feel tired", "productivity")
        assert reply == _pool(PRODUCTIVITY_TEMPLATES, None)[0]

    def test_philosophy_terms_bucket(self, synthesizer):
        reply = synthesizer.fallback_reply("the purpose of my existence", "philosophy")
        assert reply == _pool(PHILOSOPHY_TEMPLATES, "mentions_philosophical_terms")[0]

    def test_general_goal_bucket(self, synthesizer):
        reply = synthesizer.fallback_reply("I finally finished my plan", "general")
        assert reply == _pool(GENERAL_TEMPLATES, "mentions_goals")[0]

    def test_unknown_support_type_uses_general(self, synthesizer):
        reply = synthesizer.fallback_reply("ok", "astrology")
        assert reply == _pool(GENERAL_TEMPLATES, None)[0]
