"""
Journal entry reflection.

Writes a short companion response to a journal entry, with a three
paragraph local fallback built from lexical analysis.
"""

import logging
import random
from typing import Any, Dict, Optional, Tuple

from common.ai import AIProvider

from app.services.reflection.generation import attempt_completion
from app.services.reflection.lexical_analyzer import LexicalAnalyzer
from app.services.reflection.prompts import (
    ENTRY_REFLECTION_SYSTEM_PROMPT,
    ENTRY_REFLECTION_USER_PROMPT,
)
from app.services.reflection.sanitizer import sanitize
from app.services.reflection.types import Sentiment, TimeOrientation

logger = logging.getLogger(__name__)


SENTIMENT_PARAGRAPHS: Dict[Sentiment, str] = {
    Sentiment.POSITIVE: (
        "I'm glad to see your positive energy in this journal entry. It's wonderful that you're "
        "taking time to reflect on your experiences and notice the good things in your life. "
        "These moments of gratitude help build resilience and joy."
    ),
    Sentiment.NEGATIVE: (
        "I notice you're expressing some challenging emotions in your entry. It's completely valid "
        "to feel this way, and writing about it is a healthy outlet. Acknowledging difficult feelings "
        "is an important step in processing them and finding your path forward."
    ),
    Sentiment.NEUTRAL: (
        "Thank you for sharing your thoughts in your journal today. Taking time to reflect like this "
        "is an important practice for self-awareness and growth. Your observations create space for "
        "deeper understanding of yourself and your experiences."
    ),
}

TOPIC_PARAGRAPHS: Dict[str, str] = {
    "work": (
        "I noticed your thoughts about work-related experiences. Finding balance between professional "
        "responsibilities and personal wellbeing can be challenging. Consider setting clear boundaries "
        "and taking short mindful breaks throughout your day. Even five minutes of conscious breathing "
        "can reset your perspective and enhance your focus."
    ),
    "relationships": (
        "Relationships seem to be on your mind today. Our connections with others often mirror aspects "
        "of ourselves that we might not otherwise notice. Taking time to reflect on what certain "
        "relationships bring up for you can offer valuable insights into your patterns and growth."
    ),
    "health": (
        "I see health and wellbeing themes in your writing. Your physical and mental health form the "
        "foundation for everything else in life, and small, consistent actions often create more "
        "sustainable change than dramatic efforts. What one small habit might feel genuinely "
        "nourishing rather than obligatory?"
    ),
    "goals": (
        "Your focus on goals and aspirations shows a forward-thinking mindset. Meaningful progress "
        "isn't always linear, and setbacks are a natural part of any worthwhile journey. Breaking "
        "larger goals into smaller steps can help maintain momentum and give you small wins to celebrate."
    ),
    "challenges": (
        "I notice you're facing some challenges right now. Difficult periods, while uncomfortable, "
        "often contain the seeds of significant personal growth. What capabilities might you be "
        "building through this challenge that could serve you well in the future?"
    ),
    "learning": (
        "Your interest in learning and growth comes through in your writing. Learning happens not "
        "just through formal education but through curiosity, experience, and reflection, which is "
        "exactly what you're doing with this journal practice."
    ),
    "creativity": (
        "I see creativity flowing through your journal entry. Creative expression connects us with "
        "our authentic selves and gives us a way to process our experiences. These practices nourish "
        "parts of ourselves that logical thinking alone cannot reach."
    ),
}

NO_TOPIC_PARAGRAPH = (
    "Taking time to record your thoughts creates valuable space between experience and reaction. "
    "This practice of reflection helps you recognize patterns, process emotions, and make more "
    "intentional choices. Over time, your journal becomes a record of how far you've come."
)

CLOSING_PROMPTS: Dict[TimeOrientation, Tuple[str, ...]] = {
    TimeOrientation.FUTURE: (
        "As you look toward the future, consider: What small step could you take today that aligns "
        "with your vision for tomorrow? Sometimes the smallest actions create the most meaningful "
        "momentum when they're consistently applied.",
        "Looking ahead, what would you like to be able to write in your journal a month from now? "
        "Naming that picture can help you choose where to put your energy this week.",
    ),
    TimeOrientation.PAST: (
        "Reflecting on past experiences, what wisdom have you gathered that might serve you right now? "
        "Our histories contain valuable lessons that can illuminate our present choices when we "
        "approach them with curiosity rather than judgment.",
        "As you look back on this, what would you want to tell the version of yourself who lived it? "
        "Offering that kindness can change how the memory sits with you today.",
    ),
    TimeOrientation.PRESENT: (
        "As you continue your day, what would help you feel more present and engaged with this moment? "
        "Our minds often wander to the past or future, but there's a special quality of aliveness "
        "that comes from fully inhabiting the present.",
        "Before you close your journal, take a breath and notice how you feel right now. What is one "
        "thing this moment is asking of you?",
    ),
}

REGENERATION_NOTE = (
    "You already offered the reflection below. Write a new one with a different perspective "
    "and a different closing question.\n\nPrevious reflection:\n{previous}"
)


class EntryReflectionService:
    """Companion responses for journal entries."""

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        analyzer: Optional[LexicalAnalyzer] = None,
        rng: Any = None,
        max_tokens: int = 500,
        temperature: float = 0.7,
        timeout: Optional[float] = 30.0,
    ):
        self.ai = ai_provider
        self.analyzer = analyzer or LexicalAnalyzer()
        self.rng = rng or random
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

    async def reflect_on_entry(self, content: str, previous_response: Optional[str] = None) -> str:
        """
        Reflect on a journal entry.

        Args:
            content: Journal entry text
            previous_response: Reflection being regenerated, if any

        Returns:
            Non-empty reflection text

        Raises:
            ValueError: If the entry is empty
        """
        if not content or not content.strip():
            raise ValueError("Journal entry content is required")

        clean = sanitize(content)
        messages = [
            {"role": "system", "content": ENTRY_REFLECTION_SYSTEM_PROMPT},
            {"role": "user", "content": ENTRY_REFLECTION_USER_PROMPT.format(entry=clean)},
        ]
        if previous_response:
            messages.append({
                "role": "user",
                "content": REGENERATION_NOTE.format(previous=previous_response),
            })

        reflection = await attempt_completion(
            self.ai,
            messages,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            timeout=self.timeout,
            purpose="entry reflection",
        )
        if reflection is not None:
            return reflection

        return self.fallback_reflection(clean, previous_response)

    def fallback_reflection(self, content: str, previous_response: Optional[str] = None) -> str:
        """Sentiment paragraph, topic paragraph, then a closing prompt."""
        analysis = self.analyzer.analyze(content)

        if analysis.topics:
            topic_paragraph = TOPIC_PARAGRAPHS[analysis.topics[0]]
        else:
            topic_paragraph = NO_TOPIC_PARAGRAPH

        closings = CLOSING_PROMPTS[analysis.time_orientation]
        if previous_response:
            unused = tuple(c for c in closings if c not in previous_response)
            closings = unused or closings

        return "\n\n".join([
            SENTIMENT_PARAGRAPHS[analysis.sentiment],
            topic_paragraph,
            self.rng.choice(closings),
        ])
