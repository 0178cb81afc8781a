"""
Pydantic models for chatbot and journal reflection requests/responses.

Conversation shape is checked by the reply service rather than here, so
malformed conversations produce a 400 with a specific message instead of
a generic 422.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field


class ChatMessageRequest(BaseModel):
    """Request body for generating the next chatbot reply."""
    messages: Any = None
    supportType: Optional[str] = None
    personalityType: Optional[str] = None
    customInstructions: Optional[str] = Field(None, max_length=4000)


class ChatMessageResponse(BaseModel):
    """Assistant reply with an optional follow-up check-in question."""
    role: str = "assistant"
    content: str
    checkInQuestion: Optional[str] = None


class AnalyzeRequest(BaseModel):
    """Request body for sentiment analysis."""
    text: str = Field(..., min_length=1, max_length=20000)


class SentimentResponse(BaseModel):
    """Mood classification."""
    moods: List[str]
    sentiment: str
    confidence: float = Field(..., ge=0, le=1)


class EntryReflectionRequest(BaseModel):
    """Request body for reflecting on a journal entry."""
    content: str = Field(..., max_length=20000)
    previousResponse: Optional[str] = None


class EntryReflectionResponse(BaseModel):
    """Companion reflection for a journal entry."""
    reflection: str
