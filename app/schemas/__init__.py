"""Pydantic schemas for request/response validation."""

from app.schemas.reflection import (
    ChatMessageRequest,
    ChatMessageResponse,
    AnalyzeRequest,
    SentimentResponse,
    EntryReflectionRequest,
    EntryReflectionResponse,
)

__all__ = [
    "ChatMessageRequest",
    "ChatMessageResponse",
    "AnalyzeRequest",
    "SentimentResponse",
    "EntryReflectionRequest",
    "EntryReflectionResponse",
]
