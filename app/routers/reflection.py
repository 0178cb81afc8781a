"""
FastAPI router for chatbot replies and journal reflections.

Handlers are thin: they translate request bodies, call the reflection
services, and map malformed input to 400 responses.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import BadRequestException

from app.dependencies import (
    get_response_synthesizer,
    get_sentiment_analyzer,
    get_entry_reflection_service,
)
from app.services.reflection.check_ins import extract_check_in_question
from app.services.reflection.entry_reflection import EntryReflectionService
from app.services.reflection.exceptions import ConversationValidationError
from app.services.reflection.response_synthesizer import ResponseSynthesizer
from app.services.reflection.sentiment_analyzer import SentimentAnalyzer
from app.schemas.reflection import (
    ChatMessageRequest,
    ChatMessageResponse,
    AnalyzeRequest,
    SentimentResponse,
    EntryReflectionRequest,
    EntryReflectionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reflection"])


@router.post("/chatbot/message", response_model=ChatMessageResponse)
async def send_chat_message(
    body: ChatMessageRequest,
    synthesizer: Annotated[ResponseSynthesizer, Depends(get_response_synthesizer)],
):
    """
    Generate the next assistant reply.

    Falls back to a locally composed reply when the model is unavailable,
    so a valid conversation always gets a response.
    """
    try:
        result = await synthesizer.generate_reply(
            body.messages,
            support_type=body.supportType,
            personality=body.personalityType,
            custom_instructions=body.customInstructions,
        )
    except ConversationValidationError as e:
        raise BadRequestException(e.message, code="INVALID_MESSAGES", details={"index": e.index})

    check_in = extract_check_in_question(result.content)
    if check_in:
        logger.info("Reply contains a check-in question")

    return ChatMessageResponse(
        role=result.role,
        content=result.content,
        checkInQuestion=check_in,
    )


@router.post("/chatbot/analyze", response_model=SentimentResponse)
async def analyze_text(
    body: AnalyzeRequest,
    analyzer: Annotated[SentimentAnalyzer, Depends(get_sentiment_analyzer)],
):
    """Classify the mood of a piece of text."""
    result = await analyzer.analyze_sentiment(body.text)
    return SentimentResponse(**result.to_dict())


@router.post("/entries/reflection", response_model=EntryReflectionResponse)
async def reflect_on_entry(
    body: EntryReflectionRequest,
    reflection_service: Annotated[EntryReflectionService, Depends(get_entry_reflection_service)],
):
    """Write a companion reflection for a journal entry."""
    try:
        reflection = await reflection_service.reflect_on_entry(
            body.content,
            previous_response=body.previousResponse,
        )
    except ValueError as e:
        raise BadRequestException(str(e), code="INVALID_ENTRY")

    return EntryReflectionResponse(reflection=reflection)
