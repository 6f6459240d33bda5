"""
Learning API Router.

Endpoints for content adaptation and adaptive responses:
- Offline-first content preparation
- Low-bandwidth compression
- Behavioral content adaptation
- Contextual + personal chat responses
- Combined recommendations
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import Field, ValidationError

from contextual_ai.adaptation.models import (
    BehavioralAdaptationRequest,
    LowBandwidthRequest,
    OfflineFirstRequest,
)
from contextual_ai.ai_engine import AIEngine
from contextual_ai.api.dependencies import get_ai_engine
from contextual_ai.api.responses import SUCCESS_MESSAGES, envelope, validation_http_error
from contextual_ai.engines.models import ContextualDataUpdate, PersonalDataUpdate
from contextual_ai.schema import CamelModel

router = APIRouter()


# ========================================
# Request Models
# ========================================


class ChatRequest(CamelModel):
    """Request model for a contextual chat response."""

    message: str = Field(..., min_length=1, description="Learner's question")
    user_id: str = Field("anonymous", description="Learner identifier")
    context: Optional[ContextualDataUpdate] = Field(None, description="Context sections to update")
    personal: Optional[PersonalDataUpdate] = Field(None, description="Personal sections to update")


# ========================================
# Advanced Adaptation Endpoints
# ========================================


@router.post("/offline-content", summary="Generate offline content")
def generate_offline_content(
    request: OfflineFirstRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """
    Prepare content for offline use.

    High-priority content is marked and always requires a sync; content
    whose last sync is older than 24 hours also requires one.
    """
    try:
        result = engine.generate_offline_content(request)
        return envelope(result.to_wire(), SUCCESS_MESSAGES["CONTENT_GENERATED"])
    except Exception:
        logger.exception("Failed to generate offline content")
        raise HTTPException(status_code=500, detail="Failed to generate offline content")


@router.post("/compress-content", summary="Compress content for low bandwidth")
def compress_content(
    request: LowBandwidthRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """
    Compress content for the learner's bandwidth tier.

    Tiers:
    - slow: first 3 sentences, ratio 0.3
    - medium: first 5 sentences, ratio 0.6
    - fast: unchanged, ratio 1.0
    """
    try:
        result = engine.compress_content(request)
        return envelope(result.to_wire(), SUCCESS_MESSAGES["CONTENT_GENERATED"])
    except Exception:
        logger.exception("Failed to compress content")
        raise HTTPException(status_code=500, detail="Failed to compress content")


@router.post("/adapt-content", summary="Adapt content to learner behavior")
def adapt_content(
    request: BehavioralAdaptationRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """Classify pacing, format, complexity and engagement and tag the content."""
    try:
        result = engine.adapt_content(request)
        return envelope(result.to_wire(), SUCCESS_MESSAGES["CONTENT_GENERATED"])
    except Exception:
        logger.exception(f"Failed to adapt content for user {request.user_id}")
        raise HTTPException(status_code=500, detail="Failed to adapt content")


# ========================================
# Orchestrated Endpoints
# ========================================


@router.post("/chat", summary="Contextual chat response")
def chat(
    request: ChatRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """
    Generate a response adapted to the learner's context and profile.

    Context and personal sections in the request replace the stored sections
    before analysis.
    """
    try:
        response = engine.generate_response(
            request.message,
            request.user_id,
            context=request.context,
            personal=request.personal,
        )
        return envelope(response.to_dict())
    except ValidationError as exc:
        raise validation_http_error(exc)
    except Exception:
        logger.exception(f"Failed to generate response for user {request.user_id}")
        raise HTTPException(status_code=500, detail="Failed to chat with AI")


@router.get("/recommendations", summary="Combined recommendations")
def get_recommendations(engine: AIEngine = Depends(get_ai_engine)) -> dict[str, Any]:
    """Contextual and personal recommendations with the optimal delivery format."""
    return envelope(
        {
            "contextual": engine.get_contextual_recommendations(),
            "personal": engine.get_personal_recommendations(),
            "optimalFormat": engine.get_optimal_content_format().to_dict(),
            "adaptive": engine.get_adaptive_recommendations().to_dict(),
        }
    )
