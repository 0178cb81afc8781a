"""
Reflect Services.

All service classes organized by feature.
"""

from app.services.reflection.response_synthesizer import ResponseSynthesizer
from app.services.reflection.sentiment_analyzer import SentimentAnalyzer
from app.services.reflection.entry_reflection import EntryReflectionService

__all__ = [
    "ResponseSynthesizer",
    "SentimentAnalyzer",
    "EntryReflectionService",
]
