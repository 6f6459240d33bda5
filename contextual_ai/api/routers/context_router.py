"""
Context API Router.

Read and update the contextual and personal snapshots, and expose their
analyses. Updates are shallow merges: each section sent replaces the
stored section.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from contextual_ai.ai_engine import AIEngine
from contextual_ai.api.dependencies import get_ai_engine
from contextual_ai.api.responses import SUCCESS_MESSAGES, envelope
from contextual_ai.engines.models import ContextualDataUpdate, PersonalDataUpdate

router = APIRouter()


def _wire(snapshot) -> dict[str, Any] | None:
    return snapshot.to_wire() if snapshot is not None else None


# ========================================
# Contextual snapshot
# ========================================


@router.get("/context", summary="Get contextual snapshot")
def get_context(engine: AIEngine = Depends(get_ai_engine)) -> dict[str, Any]:
    return envelope(_wire(engine.get_context()))


@router.patch("/context", summary="Update contextual snapshot")
def update_context(
    update: ContextualDataUpdate,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    engine.update_snapshots(context=update)
    return envelope(_wire(engine.get_context()), SUCCESS_MESSAGES["CONTEXT_UPDATED"])


@router.get("/context/analysis", summary="Analyse contextual snapshot")
def analyze_context(engine: AIEngine = Depends(get_ai_engine)) -> dict[str, Any]:
    """Recommendations, adaptation flags and constraints for the current context."""
    analysis = engine.analyze_context()
    return envelope(
        {
            **analysis.to_dict(),
            "optimalFormat": engine.get_optimal_content_format().to_dict(),
            "offlineMode": engine.contextual_engine.should_use_offline_mode(),
        }
    )


@router.get("/context/localization", summary="Localized settings")
def get_localization(engine: AIEngine = Depends(get_ai_engine)) -> dict[str, Any]:
    return envelope(engine.get_localized_settings())


# ========================================
# Personal snapshot
# ========================================


@router.get("/personal", summary="Get personal snapshot")
def get_personal(engine: AIEngine = Depends(get_ai_engine)) -> dict[str, Any]:
    return envelope(_wire(engine.get_personal_data()))


@router.patch("/personal", summary="Update personal snapshot")
def update_personal(
    update: PersonalDataUpdate,
    engine: AIEngine = Depends(get_ai_engine),
) -> dict[str, Any]:
    engine.update_snapshots(personal=update)
    return envelope(_wire(engine.get_personal_data()), SUCCESS_MESSAGES["PERSONAL_UPDATED"])


@router.get("/personal/analysis", summary="Analyse learning needs")
def analyze_personal(engine: AIEngine = Depends(get_ai_engine)) -> dict[str, Any]:
    """Learning-need adaptations plus the derived session settings."""
    personal = engine.personal_engine
    return envelope(
        {
            **engine.analyze_learning_needs().to_dict(),
            "sessionDuration": personal.get_optimal_session_duration(),
            "difficulty": personal.get_content_difficulty(),
            "immediateFeedback": personal.should_provide_immediate_feedback(),
            "preferredFormat": personal.get_preferred_content_format(),
            "motivationalFactors": personal.get_motivational_factors(),
            "adaptive": engine.get_adaptive_recommendations().to_dict(),
        }
    )
