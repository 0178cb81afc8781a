"""AI reply generation and fallback services."""

from app.services.reflection.types import (
    ChatMessage,
    GenerationResult,
    SentimentResult,
    Sentiment,
    SupportType,
    TextAnalysis,
    TimeOrientation,
)
from app.services.reflection.exceptions import ConversationValidationError
from app.services.reflection.sanitizer import sanitize
from app.services.reflection.lexical_analyzer import LexicalAnalyzer
from app.services.reflection.personalities import (
    PERSONALITIES,
    Personality,
    apply_personality,
    build_system_instructions,
    normalize_personality,
)
from app.services.reflection.response_synthesizer import ResponseSynthesizer
from app.services.reflection.sentiment_analyzer import SentimentAnalyzer
from app.services.reflection.entry_reflection import EntryReflectionService
from app.services.reflection.check_ins import extract_check_in_question

__all__ = [
    "ChatMessage",
    "GenerationResult",
    "SentimentResult",
    "Sentiment",
    "SupportType",
    "TextAnalysis",
    "TimeOrientation",
    "ConversationValidationError",
    "sanitize",
    "LexicalAnalyzer",
    "PERSONALITIES",
    "Personality",
    "apply_personality",
    "build_system_instructions",
    "normalize_personality",
    "ResponseSynthesizer",
    "SentimentAnalyzer",
    "EntryReflectionService",
    "extract_check_in_question",
]
