"""
Sessions API Router.

Learning sessions snapshot both engines at creation time. Progress updates
and session end are acknowledged and logged; sessions are not persisted.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import Field, ValidationError

from contextual_ai.ai_engine import AIEngine
from contextual_ai.api.dependencies import get_ai_engine
from contextual_ai.api.responses import SUCCESS_MESSAGES, envelope, validation_http_error
from contextual_ai.engines.models import ContextualDataUpdate, PersonalDataUpdate
from contextual_ai.exceptions import SessionCreationError
from contextual_ai.schema import CamelModel

router = APIRouter()


class SessionCreateRequest(CamelModel):
    """Request model for creating a learning session."""

    user_id: str = Field(..., description="Learner identifier")
    topic: str = Field(..., min_length=1, description="Session topic")
    context: Optional[ContextualDataUpdate] = None
    personal: Optional[PersonalDataUpdate] = None


class SessionProgressRequest(CamelModel):
    progress: float = Field(..., ge=0, le=100, description="Completion percentage")


@router.post("", status_code=201, summary="Create learning session")
def create_session(
    request: SessionCreateRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    logger.info(f"Creating learning session on '{request.topic}' for user {request.user_id}")

    try:
        session = engine.create_learning_session(
            request.user_id,
            request.topic,
            context=request.context,
            personal=request.personal,
        )
        return envelope(session.to_dict(), SUCCESS_MESSAGES["SESSION_CREATED"])
    except ValidationError as exc:
        raise validation_http_error(exc)
    except SessionCreationError:
        logger.exception("Failed to create session")
        raise HTTPException(status_code=500, detail="Failed to create learning session")


@router.put("/{session_id}/progress", summary="Update session progress")
def update_progress(
    session_id: str,
    request: SessionProgressRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    engine.update_session_progress(session_id, request.progress)
    return envelope(
        {"id": session_id, "progress": request.progress},
        SUCCESS_MESSAGES["SESSION_UPDATED"],
    )


@router.post("/{session_id}/end", summary="End session")
def end_session(
    session_id: str,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    engine.end_session(session_id)
    return envelope({"id": session_id}, SUCCESS_MESSAGES["SESSION_ENDED"])
