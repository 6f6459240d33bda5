"""
Learning Models API Router.

Accessibility and engagement endpoints:
- Screen reader labels and descriptions
- Caption segments from a transcript
- Mobile line wrapping and low-bandwidth marking
- Gamification points and badges
- Motivational messages
- Cultural localization
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from contextual_ai.accessibility.models import (
    CaptionRequest,
    MobileOptimizedRequest,
    ScreenReaderRequest,
)
from contextual_ai.ai_engine import AIEngine
from contextual_ai.api.dependencies import get_ai_engine
from contextual_ai.api.responses import envelope
from contextual_ai.engagement.models import (
    CulturalContextRequest,
    GamificationRequest,
    MotivationalRequest,
)

router = APIRouter()


# ========================================
# Accessibility Endpoints
# ========================================


@router.post("/screen-reader", summary="Screen reader content")
def generate_screen_reader_content(
    request: ScreenReaderRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """ARIA label, alt text (images and diagrams only) and description."""
    try:
        return envelope(engine.generate_screen_reader_content(request).to_wire())
    except Exception:
        logger.exception("Failed to generate screen reader content")
        raise HTTPException(status_code=500, detail="Failed to generate screen reader content")


@router.post("/captions", summary="Generate captions")
def generate_captions(
    request: CaptionRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """Split a transcript into 5-second segments of ten words."""
    try:
        return envelope(engine.generate_captions(request).to_wire())
    except Exception:
        logger.exception("Failed to generate captions")
        raise HTTPException(status_code=500, detail="Failed to generate captions")


@router.post("/mobile-optimize", summary="Optimize content for mobile")
def optimize_for_mobile(
    request: MobileOptimizedRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    try:
        return envelope(engine.optimize_for_mobile(request).to_wire())
    except Exception:
        logger.exception("Failed to optimize mobile content")
        raise HTTPException(status_code=500, detail="Failed to optimize mobile content")


# ========================================
# Engagement Endpoints
# ========================================


@router.post("/gamification", summary="Award points and badges")
def generate_gamification(
    request: GamificationRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    try:
        return envelope(engine.generate_gamification(request).to_wire())
    except Exception:
        logger.exception(f"Failed to generate gamification content for user {request.user_id}")
        raise HTTPException(status_code=500, detail="Failed to generate gamification content")


@router.post("/motivation", summary="Motivational message")
def generate_motivation(
    request: MotivationalRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    """
    Pick a message and tone.

    Progress above 80% or 50% decides first; a negative mood only matters
    below that.
    """
    try:
        return envelope(engine.generate_motivation(request).to_wire())
    except Exception:
        logger.exception(f"Failed to generate motivational content for user {request.user_id}")
        raise HTTPException(status_code=500, detail="Failed to generate motivational content")


@router.post("/localize", summary="Add cultural context")
def localize_content(
    request: CulturalContextRequest,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    try:
        return envelope(engine.localize_content(request).to_wire())
    except Exception:
        logger.exception("Failed to localize content")
        raise HTTPException(status_code=500, detail="Failed to localize content")
