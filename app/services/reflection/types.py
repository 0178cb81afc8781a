"""
Type definitions for the reflection services.

Contains the request-scoped value objects shared by the sanitizer,
analyzers, and reply synthesizer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Dict, Any, Optional, Tuple


VALID_ROLES = ("user", "assistant", "system")


class SupportType(str, Enum):
    """Conversational framing requested by the user."""
    EMOTIONAL = "emotional"
    PRODUCTIVITY = "productivity"
    GENERAL = "general"
    PHILOSOPHY = "philosophy"

    @classmethod
    def normalize(cls, value: Optional[str]) -> "SupportType":
        """Map any input to a support type, defaulting to general."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class TimeOrientation(str, Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"


@dataclass
class ChatMessage:
    """A single message in a conversation."""
    role: str  # "user" | "assistant" | "system"
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class GenerationResult:
    """Reply returned to the caller. Content is never empty."""
    content: str
    role: str = "assistant"
    used_fallback: bool = False

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class SentimentResult:
    """Mood labels, polarity, and confidence for a piece of text."""
    moods: List[str]
    sentiment: Sentiment
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "moods": list(self.moods),
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class TextAnalysis:
    """Keyword-based reading of a message, used by the fallback paths."""
    sentiment: Sentiment
    topics: Tuple[str, ...] = ()
    time_orientation: TimeOrientation = TimeOrientation.PRESENT
    is_question: bool = False
    is_greeting: bool = False
    contains_emotion_word: bool = False
    mentions_goals: bool = False
    mentions_philosophical_terms: bool = False
    positive_score: float = 0.0
    negative_score: float = 0.0
