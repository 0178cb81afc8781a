"""Tests for personality instructions and fallback transforms."""

import pytest

from app.services.reflection.personalities import (
    BUILT_IN_PERSONALITIES,
    CUSTOM_FALLBACK_NOTICE,
    DEFAULT_PERSONALITY,
    PERSONALITIES,
    TransformRule,
    apply_personality,
    build_system_instructions,
    is_custom_reference,
    normalize_personality,
)
from app.services.reflection.prompts import SUPPORT_TYPE_PROMPTS
from app.services.reflection.types import SupportType


BASE_REPLY = "Hello there! It's nice to connect with you today. How can I be of help or support right now?"


class TestRegistry:
    def test_all_built_ins_present(self):
        expected = {
            "default", "socratic", "stoic", "existentialist", "analytical", "poetic",
            "humorous", "zen", "empathetic-listener", "solution-focused",
            "trauma-informed", "mindfulness-based", "cognitive-behavioral",
            "strength-based", "holistic-wellness",
        }
        assert set(BUILT_IN_PERSONALITIES) == expected

    @pytest.mark.parametrize("key", [k for k in PERSONALITIES if k != DEFAULT_PERSONALITY])
    def test_instruction_block_and_fragments_in_lockstep(self, key):
        personality = PERSONALITIES[key]
        assert personality.instruction_block.strip()
        assert len(personality.fragments) > 0
        assert personality.rule != TransformRule.IDENTITY

    def test_default_is_identity_with_no_block(self):
        default = PERSONALITIES[DEFAULT_PERSONALITY]
        assert default.instruction_block == ""
        assert default.rule == TransformRule.IDENTITY


class TestNormalize:
    @pytest.mark.parametrize("value,expected", [
        ("stoic", "stoic"),
        ("custom_42", "custom_42"),
        ("pirate", "default"),
        ("custom_", "default"),
        (None, "default"),
    ])
    def test_normalize(self, value, expected):
        assert normalize_personality(value) == expected

    def test_custom_reference_shape(self):
        assert is_custom_reference("custom_abc-1")
        assert not is_custom_reference("stoic")
        assert not is_custom_reference(None)


class TestBuildSystemInstructions:
    def test_default_is_base_only(self):
        assert build_system_instructions("emotional", "default") == SUPPORT_TYPE_PROMPTS[SupportType.EMOTIONAL]

    def test_built_in_block_appended(self):
        result = build_system_instructions("general", "stoic")
        base = SUPPORT_TYPE_PROMPTS[SupportType.GENERAL]
        assert result == f"{base}\n\n{PERSONALITIES['stoic'].instruction_block}"

    def test_unknown_support_type_uses_general(self):
        result = build_system_instructions("astrology", "default")
        assert result == SUPPORT_TYPE_PROMPTS[SupportType.GENERAL]

    def test_custom_instructions_take_precedence(self):
        result = build_system_instructions("philosophy", "stoic", custom_instructions="Talk like a pirate")
        assert result.startswith(SUPPORT_TYPE_PROMPTS[SupportType.PHILOSOPHY])
        assert "Adopt a custom personality with these instructions:\nTalk like a pirate" in result
        assert PERSONALITIES["stoic"].instruction_block not in result

    def test_custom_reference_without_instructions_is_base_only(self):
        assert build_system_instructions("general", "custom_7") == SUPPORT_TYPE_PROMPTS[SupportType.GENERAL]


class TestApplyPersonality:
    def test_default_identity(self, rng):
        assert apply_personality("default", BASE_REPLY, rng=rng) == BASE_REPLY

    def test_unknown_key_identity(self, rng):
        assert apply_personality("pirate", BASE_REPLY, rng=rng) == BASE_REPLY

    def test_stoic_appends(self, rng):
        result = apply_personality("stoic", BASE_REPLY, rng=rng)
        assert result == f"{BASE_REPLY} Remember what is within your control and what is not."

    def test_analytical_prepends(self, rng):
        result = apply_personality("analytical", BASE_REPLY, rng=rng)
        assert result == f"Let me analyze this systematically. {BASE_REPLY}"

    def test_socratic_replaces_closing_sentence_with_question(self, rng):
        result = apply_personality("socratic", BASE_REPLY, rng=rng)
        assert result == (
            "Hello there! It's nice to connect with you today. "
            "What do you think about this perspective?"
        )

    def test_socratic_single_sentence_kept(self, rng):
        result = apply_personality("socratic", "Tell me more", rng=rng)
        assert result == "Tell me more. What do you think about this perspective?"

    def test_zen_distills_to_first_sentence(self, rng):
        result = apply_personality("zen", BASE_REPLY, rng=rng)
        assert result == "Hello there! The present moment contains all we need."

    def test_custom_reference_adds_notice(self, rng):
        result = apply_personality("custom_12", BASE_REPLY, rng=rng)
        assert result == f"{BASE_REPLY}\n\n{CUSTOM_FALLBACK_NOTICE}"
        assert rng.calls == []

    def test_custom_instructions_add_notice_over_built_in(self, rng):
        result = apply_personality("stoic", BASE_REPLY, custom_instructions="be brief", rng=rng)
        assert result == f"{BASE_REPLY}\n\n{CUSTOM_FALLBACK_NOTICE}"

    @pytest.mark.parametrize("key", BUILT_IN_PERSONALITIES)
    def test_every_built_in_yields_non_empty(self, key):
        assert apply_personality(key, BASE_REPLY).strip()

    def test_fragment_drawn_from_pool(self):
        result = apply_personality("humorous", BASE_REPLY)
        assert any(result.endswith(f) for f in PERSONALITIES["humorous"].fragments)
