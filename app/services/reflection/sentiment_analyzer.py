"""
Sentiment and mood analyzer.

Asks the external model for a JSON classification and falls back to
keyword counting when that fails.
"""

import json
import logging
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from common.ai import AIProvider

from app.services.reflection.generation import attempt_completion
from app.services.reflection.prompts import SENTIMENT_SYSTEM_PROMPT
from app.services.reflection.sanitizer import sanitize
from app.services.reflection.types import Sentiment, SentimentResult

logger = logging.getLogger(__name__)


MAX_MOODS = 5


class SentimentPayload(BaseModel):
    """Shape of the model's JSON answer."""
    moods: List[str]
    sentiment: Sentiment
    confidence: float


class SentimentAnalyzer:
    """Classifies the mood of a piece of text."""

    POSITIVE_WORDS = [
        "happy", "glad", "excited", "joy", "wonderful", "great", "awesome",
        "love", "enjoy", "grateful",
    ]
    NEGATIVE_WORDS = [
        "sad", "angry", "upset", "frustrated", "mad", "hate", "annoyed",
        "stressed", "anxious", "disappointed",
    ]

    POSITIVE_FILLERS = ["Happy", "Content", "Optimistic"]
    NEGATIVE_FILLERS = ["Sad", "Frustrated", "Concerned"]
    NEUTRAL_MOODS = ["Neutral", "Calm", "Balanced"]

    BASE_CONFIDENCE = 0.6
    CONFIDENCE_PER_WORD = 0.05
    MAX_CONFIDENCE_BONUS = 0.3
    MOOD_COUNT = 3

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        max_tokens: int = 200,
        temperature: float = 0.3,
        timeout: Optional[float] = 30.0,
    ):
        self.ai = ai_provider
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        """
        Classify text into moods, a polarity, and a confidence.

        Args:
            text: Journal entry or message

        Returns:
            SentimentResult with 1-5 moods and confidence in [0, 1]
        """
        clean = sanitize(text)
        messages = [
            {"role": "system", "content": SENTIMENT_SYSTEM_PROMPT},
            {"role": "user", "content": clean},
        ]

        content = await attempt_completion(
            self.ai,
            messages,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            timeout=self.timeout,
            json_mode=True,
            purpose="sentiment analysis",
        )
        if content is not None:
            result = self.parse_response(content)
            if result is not None:
                return result
            logger.warning("Sentiment response was not a valid classification, using fallback (error)")

        return self.fallback_sentiment(clean)

    @staticmethod
    def parse_response(content: str) -> Optional[SentimentResult]:
        """Validate the model's JSON, truncating moods and clamping confidence."""
        try:
            payload = SentimentPayload.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError, TypeError):
            return None

        moods = [m.strip() for m in payload.moods if m and m.strip()][:MAX_MOODS]
        if not moods:
            return None

        return SentimentResult(
            moods=moods,
            sentiment=payload.sentiment,
            confidence=min(1.0, max(0.0, payload.confidence)),
        )

    def fallback_sentiment(self, text: str) -> SentimentResult:
        """Keyword-count classification used when the model is unavailable."""
        lower = (text or "").lower()
        positive = [w for w in self.POSITIVE_WORDS if w in lower]
        negative = [w for w in self.NEGATIVE_WORDS if w in lower]

        if len(positive) > len(negative):
            return SentimentResult(
                moods=self._moods(positive, self.POSITIVE_FILLERS),
                sentiment=Sentiment.POSITIVE,
                confidence=self._confidence(len(positive)),
            )
        if len(negative) > len(positive):
            return SentimentResult(
                moods=self._moods(negative, self.NEGATIVE_FILLERS),
                sentiment=Sentiment.NEGATIVE,
                confidence=self._confidence(len(negative)),
            )

        return SentimentResult(
            moods=list(self.NEUTRAL_MOODS),
            sentiment=Sentiment.NEUTRAL,
            confidence=self.BASE_CONFIDENCE,
        )

    def _confidence(self, count: int) -> float:
        bonus = min(self.MAX_CONFIDENCE_BONUS, count * self.CONFIDENCE_PER_WORD)
        return round(self.BASE_CONFIDENCE + bonus, 2)

    def _moods(self, matched: List[str], fillers: List[str]) -> List[str]:
        moods = [w.title() for w in matched[:self.MOOD_COUNT]]
        for filler in fillers:
            if len(moods) >= self.MOOD_COUNT:
                break
            if filler not in moods:
                moods.append(filler)
        return moods
