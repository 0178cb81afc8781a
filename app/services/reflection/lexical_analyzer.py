"""
Lexical analyzer.

Keyword-based sentiment, topic, and tone detection. Used on its own and by
the fallback reply paths when no model is available.
"""

from typing import List, Tuple

from app.services.reflection.types import Sentiment, TextAnalysis, TimeOrientation


class LexicalAnalyzer:
    """
    Classifies text with fixed word lists.

    Pure: the same input always produces the same TextAnalysis.
    """

    POSITIVE_WORDS = [
        "happy", "glad", "excited", "joy", "good", "great", "wonderful",
        "amazing", "awesome", "love", "enjoy", "pleased", "proud", "hopeful",
        "grateful", "thankful", "blessed", "accomplished", "relaxed",
        "peaceful", "content",
    ]

    NEGATIVE_WORDS = [
        "sad", "angry", "upset", "frustrated", "mad", "worried", "anxious",
        "stressed", "tired", "exhausted", "overwhelmed", "disappointed", "hurt",
        "afraid", "scared", "lonely", "confused", "annoyed", "pain",
        "difficult", "struggling", "problem",
    ]

    INTENSIFIERS = ["very", "really"]
    INTENSIFIER_BONUS = 0.5

    # A verdict needs to lead by more than this margin
    SENTIMENT_MARGIN = 1.0

    # Declaration order is the output order
    TOPIC_KEYWORDS: List[Tuple[str, List[str]]] = [
        ("work", [
            "work", "job", "career", "meeting", "boss", "colleague", "project",
            "deadline", "task", "office", "promotion", "professional",
        ]),
        ("relationships", [
            "friend", "family", "partner", "relationship", "wife", "husband",
            "girlfriend", "boyfriend", "spouse", "parent", "child", "date",
            "love", "connection", "social",
        ]),
        ("health", [
            "health", "sick", "illness", "doctor", "exercise", "workout", "gym",
            "diet", "eating", "sleep", "tired", "energy", "wellness",
            "meditation", "rest",
        ]),
        ("goals", [
            "goal", "plan", "future", "dream", "aspiration", "achievement",
            "success", "progress", "milestone", "ambition", "resolution", "habit",
        ]),
        ("challenges", [
            "challenge", "problem", "obstacle", "difficulty", "struggle",
            "overcome", "hard", "tough", "setback", "issue", "conflict",
            "stress", "worry", "concern",
        ]),
        ("learning", [
            "learn", "study", "course", "book", "read", "knowledge", "skill",
            "practice", "improve", "grow", "development", "progress",
            "education", "training",
        ]),
        ("creativity", [
            "create", "art", "music", "paint", "write", "draw", "design",
            "creative", "idea", "inspiration", "express", "passion", "hobby",
            "project",
        ]),
    ]

    FUTURE_MARKERS = ["future", "plan", "will", "going to"]
    PAST_MARKERS = ["past", "yesterday", "used to", "remember"]

    QUESTION_MARKERS = ["?", "how", "what", "why", "when", "where"]
    EMOTION_WORDS = ["feel", "sad", "happy", "angry", "anxious", "stress"]
    GOAL_WORDS = ["goal", "plan", "achieve", "accomplish", "finish"]
    PHILOSOPHICAL_TERMS = [
        "meaning", "life", "existence", "truth", "reality", "ethics", "moral",
        "virtue", "wisdom", "purpose",
    ]

    GREETING_WORDS = [
        "hello", "hi", "hey", "greetings", "good morning", "good afternoon", "good evening",
    ]

    def analyze(self, text: str) -> TextAnalysis:
        """
        Analyze a message.

        Args:
            text: Message text (any case)

        Returns:
            TextAnalysis with sentiment, topics, time orientation and flags
        """
        lower = (text or "").lower()

        positive_score = self._score(lower, self.POSITIVE_WORDS)
        negative_score = self._score(lower, self.NEGATIVE_WORDS)

        return TextAnalysis(
            sentiment=self._classify(positive_score, negative_score),
            topics=self.detect_topics(lower),
            time_orientation=self._time_orientation(lower),
            is_question=self._contains_any(lower, self.QUESTION_MARKERS),
            is_greeting=self._contains_any(lower, self.GREETING_WORDS),
            contains_emotion_word=self._contains_any(lower, self.EMOTION_WORDS),
            mentions_goals=self._contains_any(lower, self.GOAL_WORDS),
            mentions_philosophical_terms=self._contains_any(lower, self.PHILOSOPHICAL_TERMS),
            positive_score=positive_score,
            negative_score=negative_score,
        )

    def detect_topics(self, text: str) -> Tuple[str, ...]:
        """Return detected topic tags in category declaration order."""
        lower = text.lower()
        return tuple(
            topic for topic, keywords in self.TOPIC_KEYWORDS
            if self._contains_any(lower, keywords)
        )

    def _score(self, lower: str, words: List[str]) -> float:
        """Score one word list: 1 per word present, plus an intensifier bonus."""
        score = 0.0
        for word in words:
            if word in lower:
                score += 1
                if any(f"{intensifier} {word}" in lower for intensifier in self.INTENSIFIERS):
                    score += self.INTENSIFIER_BONUS
        return score

    def _classify(self, positive_score: float, negative_score: float) -> Sentiment:
        if positive_score > negative_score + self.SENTIMENT_MARGIN:
            return Sentiment.POSITIVE
        if negative_score > positive_score + self.SENTIMENT_MARGIN:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def _time_orientation(self, lower: str) -> TimeOrientation:
        if self._contains_any(lower, self.FUTURE_MARKERS):
            return TimeOrientation.FUTURE
        if self._contains_any(lower, self.PAST_MARKERS):
            return TimeOrientation.PAST
        return TimeOrientation.PRESENT

    @staticmethod
    def _contains_any(lower: str, markers: List[str]) -> bool:
        return any(marker in lower for marker in markers)
