"""
Personality style engine.

One lookup table drives both paths: the instruction block appended to the
system prompt when the model is called, and the fragment pool used to
flavour template replies when it is not.
"""

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from app.services.reflection.prompts import SUPPORT_TYPE_PROMPTS
from app.services.reflection.types import SupportType


DEFAULT_PERSONALITY = "default"

CUSTOM_PERSONALITY_PATTERN = re.compile(r"^custom_[A-Za-z0-9_-]+$")

CUSTOM_FALLBACK_NOTICE = (
    "(Note: This is a fallback response. With an active API connection, "
    "this would use your custom personality style.)"
)

_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")


class TransformRule(str, Enum):
    """How a fragment is combined with a template reply."""
    IDENTITY = "identity"
    APPEND = "append"
    PREPEND = "prepend"
    QUESTION = "question"  # replace the closing sentence with a probing question
    DISTILL = "distill"  # keep only the opening sentence, then the fragment


@dataclass(frozen=True)
class Personality:
    """A built-in response style."""
    key: str
    instruction_block: str
    fragments: Tuple[str, ...]
    rule: TransformRule

    def transform(self, base_reply: str, rng=None) -> str:
        """Apply this style to a template reply."""
        if self.rule == TransformRule.IDENTITY or not self.fragments:
            return base_reply

        fragment = (rng or random).choice(self.fragments)
        sentences = [s for s in _SENTENCE_SPLIT.split(base_reply.strip()) if s]

        if self.rule == TransformRule.PREPEND:
            return f"{fragment} {base_reply}"

        if self.rule == TransformRule.QUESTION:
            kept = " ".join(sentences[:-1] if len(sentences) > 1 else sentences)
            if kept and kept[-1] not in ".!?":
                kept += "."
            return f"{kept} {fragment}".strip()

        if self.rule == TransformRule.DISTILL:
            opening = sentences[0] if sentences else base_reply
            return f"{opening} {fragment}".strip()

        return f"{base_reply} {fragment}"


PERSONALITIES: Dict[str, Personality] = {
    p.key: p for p in [
        Personality(
            key="default",
            instruction_block="",
            fragments=(),
            rule=TransformRule.IDENTITY,
        ),
        Personality(
            key="socratic",
            instruction_block="""Adopt a Socratic dialogue style:
- Ask thought-provoking questions that lead to deeper insights
- Use dialectic questioning to help examine assumptions
- Focus on clarifying concepts and definitions
- Demonstrate intellectual humility, acknowledging the limits of knowledge
- End responses with questions that encourage further reflection""",
            fragments=(
                "What do you think about this perspective?",
                "Have you considered an alternative view?",
                "How would you define the key terms in your inquiry?",
                "What assumptions are we making here?",
                "What evidence would convince you otherwise?",
            ),
            rule=TransformRule.QUESTION,
        ),
        Personality(
            key="stoic",
            instruction_block="""Adopt a Stoic perspective in your responses:
- Emphasize focusing on what's within our control
- Highlight the importance of virtue and character
- Suggest practical exercises for developing resilience
- Maintain calm rationality in the face of difficulties
- Reference Stoic principles from philosophers like Marcus Aurelius, Seneca, or Epictetus""",
            fragments=(
                "Remember what is within your control and what is not.",
                "The obstacle is the way.",
                "Focus on what you can change, accept what you cannot.",
                "Virtue alone is sufficient for happiness.",
                "We suffer more in imagination than in reality.",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="existentialist",
            instruction_block="""Adopt an Existentialist perspective:
- Emphasize freedom, choice, and personal responsibility
- Explore themes of authenticity, anxiety, and meaning-creation
- Reference existentialist thinkers like Sartre, Camus, Kierkegaard, or de Beauvoir
- Acknowledge the tension between freedom and responsibility
- Discuss how we create meaning in an inherently meaningless universe""",
            fragments=(
                "We are condemned to be free and must create our own meaning.",
                "Authenticity requires embracing the anxiety of freedom.",
                "In choosing for yourself, you choose for all humanity.",
                "Existence precedes essence - we define ourselves through our actions.",
                "The absurd arises from our search for meaning in a universe that offers none inherently.",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="analytical",
            instruction_block="""Adopt an Analytical and logical approach:
- Present information in a structured, logical manner
- Break complex topics down into component parts
- Use precise language and clear definitions
- Draw logical connections between concepts
- Evaluate arguments carefully for validity and soundness""",
            fragments=(
                "Let me analyze this systematically.",
                "Let's break this down into its component parts.",
                "Looking at this step by step:",
                "To reason about this clearly, let's separate the premises from the conclusions.",
            ),
            rule=TransformRule.PREPEND,
        ),
        Personality(
            key="poetic",
            instruction_block="""Adopt a Poetic and metaphorical style:
- Use rich imagery and metaphor to illustrate concepts
- Draw on literary and artistic references
- Express philosophical ideas through aesthetic language
- Consider the emotional and experiential dimensions of philosophical questions
- Use rhythm and flow in your language to create a sense of beauty""",
            fragments=(
                "Like stars guiding sailors across vast oceans, these insights illuminate our path.",
                "This reminds me of the changing seasons, each bringing its own wisdom and beauty.",
                "Your words are like seeds that, with proper nurturing, may grow into forests of understanding.",
                "We navigate the rivers of consciousness, sometimes in calm waters, sometimes in rapids.",
                "The tapestry of human experience is woven with threads of joy and sorrow, triumph and defeat.",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="humorous",
            instruction_block="""Adopt a Humorous and witty approach:
- Use appropriate humor, wordplay, and wit in your explanations
- Include philosophical jokes or ironies
- Keep the tone light while still providing insightful content
- Use humorous analogies to explain complex concepts
- Balance humor with substance to maintain intellectual integrity""",
            fragments=(
                "Not to get philosophical about it, but... wait, that's exactly what we're doing!",
                "If Socrates were here, he'd probably ask for a refund on his hemlock.",
                "This is deep stuff - almost as deep as the pile of laundry I've been avoiding.",
                "Philosophy: because sometimes overthinking is actually the right amount of thinking.",
                "I'd make a joke about existentialism, but what would be the point?",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="zen",
            instruction_block="""Adopt a Zen-like simplicity and mindfulness:
- Use concise, direct language
- Embrace paradox and non-dualistic thinking
- Focus on present-moment awareness
- Use simple yet profound observations
- Sometimes use koans or paradoxical statements
- Create space for silence and contemplation""",
            fragments=(
                "The present moment contains all we need.",
                "Empty your cup to receive new wisdom.",
                "The answer you seek may be in the space between thoughts.",
                "Before enlightenment, chop wood, carry water. After enlightenment, chop wood, carry water.",
                "When hungry, eat. When tired, sleep.",
            ),
            rule=TransformRule.DISTILL,
        ),
        Personality(
            key="empathetic-listener",
            instruction_block="""Adopt the style of an empathetic listener:
- Reflect back what the user has shared before offering anything new
- Name and validate the emotions you hear without judging them
- Prefer open questions over advice
- Keep a warm, unhurried pace and avoid minimizing language""",
            fragments=(
                "I'm really hearing you.",
                "It makes sense that you'd feel this way.",
                "Thank you for trusting me with this.",
                "What you're describing sounds important.",
            ),
            rule=TransformRule.PREPEND,
        ),
        Personality(
            key="solution-focused",
            instruction_block="""Adopt a solution-focused approach:
- Focus on what is already working and on exceptions to the problem
- Use scaling questions (on a scale of 1 to 10) to make progress visible
- Help the user describe their preferred future in concrete terms
- Suggest one small, achievable next step""",
            fragments=(
                "On a scale of 1 to 10, where would you place things today, and what would move it up by one point?",
                "What is one small step you could take in the next day?",
                "When has this felt even slightly better, and what was different then?",
                "If this were resolved tomorrow, what would be the first thing you'd notice?",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="trauma-informed",
            instruction_block="""Adopt a trauma-informed approach:
- Prioritize the user's sense of safety, choice, and control
- Never push for details the user has not offered
- Use gentle, non-judgmental language and normalize stress responses
- Offer grounding options and remind the user they can pause at any time""",
            fragments=(
                "You are in control of how much you share, and we can go at whatever pace feels right.",
                "There's no right or wrong way to feel about this, and you can pause whenever you need.",
                "Your reactions make sense given what you've been through.",
                "Whatever you choose to share is enough.",
            ),
            rule=TransformRule.PREPEND,
        ),
        Personality(
            key="mindfulness-based",
            instruction_block="""Adopt a mindfulness-based approach:
- Invite present-moment awareness of thoughts, emotions, and body sensations
- Encourage observing experiences with curiosity rather than judgment
- Offer short breathing or grounding practices when appropriate
- Use calm, spacious language""",
            fragments=(
                "Take a slow breath and notice what you feel in your body right now.",
                "See if you can observe this thought with curiosity, as if watching a cloud drift by.",
                "Notice three things you can hear in this moment.",
                "Let this feeling be here without needing to change it just yet.",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="cognitive-behavioral",
            instruction_block="""Adopt a cognitive-behavioral approach:
- Help the user notice links between thoughts, feelings, and behaviors
- Gently identify possible cognitive distortions (all-or-nothing thinking, catastrophizing)
- Encourage examining the evidence for and against a thought
- Suggest small behavioral experiments""",
            fragments=(
                "What evidence supports this thought, and what evidence might challenge it?",
                "Is there a more balanced way to look at this situation?",
                "What would you tell a friend who had this same thought?",
                "Notice how this thought shapes what you feel and what you do next.",
            ),
            rule=TransformRule.APPEND,
        ),
        Personality(
            key="strength-based",
            instruction_block="""Adopt a strength-based approach:
- Highlight the user's existing strengths, skills, and resources
- Point to past successes as evidence of capability
- Frame challenges as opportunities to use those strengths
- Keep the tone encouraging and genuine, never dismissive""",
            fragments=(
                "You've already shown real strength by reflecting on this.",
                "The awareness you bring here is a genuine strength.",
                "It takes resilience to look at this so honestly.",
                "You have more resources for this than it may feel like right now.",
            ),
            rule=TransformRule.PREPEND,
        ),
        Personality(
            key="holistic-wellness",
            instruction_block="""Adopt a holistic wellness approach:
- Consider mind, body, relationships, and environment together
- Ask about sleep, movement, nutrition, and connection when relevant
- Suggest gentle lifestyle adjustments rather than quick fixes
- Respect the user's own sense of balance""",
            fragments=(
                "How have your sleep, movement, and nourishment been lately?",
                "Remember that rest, connection, and time outdoors all support your wellbeing.",
                "Consider how your body is feeling alongside your thoughts.",
                "Small daily rituals, like a short walk or a glass of water, can ripple out into how you feel.",
            ),
            rule=TransformRule.APPEND,
        ),
    ]
}

BUILT_IN_PERSONALITIES: Tuple[str, ...] = tuple(PERSONALITIES)


def is_custom_reference(personality: Optional[str]) -> bool:
    """Check whether a personality identifier refers to a user-defined style."""
    return isinstance(personality, str) and bool(CUSTOM_PERSONALITY_PATTERN.match(personality))


def normalize_personality(personality: Optional[str]) -> str:
    """Return a built-in key, a custom reference, or the default key."""
    if isinstance(personality, str):
        if personality in PERSONALITIES or is_custom_reference(personality):
            return personality
    return DEFAULT_PERSONALITY


def build_system_instructions(
    support_type: Optional[str],
    personality: Optional[str],
    custom_instructions: Optional[str] = None,
) -> str:
    """
    Compose the system message for the external model.

    Args:
        support_type: Support type (unknown values use the general framing)
        personality: Built-in key or custom reference
        custom_instructions: Free-text style; replaces any built-in block

    Returns:
        Support-type framing followed by the personality block, if any
    """
    base = SUPPORT_TYPE_PROMPTS[SupportType.normalize(support_type)]

    if custom_instructions and custom_instructions.strip():
        block = f"Adopt a custom personality with these instructions:\n{custom_instructions.strip()}"
    else:
        entry = PERSONALITIES.get(personality or DEFAULT_PERSONALITY)
        block = entry.instruction_block if entry else ""

    return f"{base}\n\n{block}" if block else base


def apply_personality(
    personality: Optional[str],
    base_reply: str,
    custom_instructions: Optional[str] = None,
    rng=None,
) -> str:
    """
    Flavour a fallback template reply with a personality.

    Custom styles cannot be imitated offline, so they return the reply
    unchanged plus a short notice. Unknown keys behave like the default.

    Args:
        personality: Built-in key or custom reference
        base_reply: Template reply
        custom_instructions: Present when a custom style was requested
        rng: Random source with a choice() method

    Returns:
        The transformed reply
    """
    if (custom_instructions and custom_instructions.strip()) or is_custom_reference(personality):
        return f"{base_reply}\n\n{CUSTOM_FALLBACK_NOTICE}"

    entry = PERSONALITIES.get(personality or DEFAULT_PERSONALITY, PERSONALITIES[DEFAULT_PERSONALITY])
    return entry.transform(base_reply, rng)
