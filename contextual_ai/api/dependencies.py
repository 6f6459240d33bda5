"""FastAPI dependencies."""
from __future__ import annotations

from functools import lru_cache

from config import get_settings
from contextual_ai.accessibility import AccessibilityService
from contextual_ai.adaptation import AdvancedAdaptationService
from contextual_ai.ai_engine import AIEngine
from contextual_ai.engagement import EngagementService


@lru_cache(maxsize=1)
def get_ai_engine() -> AIEngine:
    """Process-wide AIEngine. Its snapshots are shared by every request."""
    settings = get_settings()
    model_version = settings.adaptation_model_version
    adaptation_service = AdvancedAdaptationService(
        model_version=model_version,
        sync_max_age_hours=settings.offline_sync_max_age_hours,
    )
    return AIEngine(
        adaptation_service=adaptation_service,
        accessibility_service=AccessibilityService(model_version=model_version),
        engagement_service=EngagementService(model_version=model_version),
    )
