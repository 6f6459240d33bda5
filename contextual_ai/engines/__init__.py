"""Contextual and personal snapshot engines."""
from contextual_ai.engines.contextual_engine import ContentFormat, ContextAnalysis, ContextualEngine
from contextual_ai.engines.models import (
    ContextualData,
    ContextualDataUpdate,
    PersonalData,
    PersonalDataUpdate,
    default_contextual_data,
    default_personal_data,
)
from contextual_ai.engines.personal_engine import (
    AdaptiveRecommendation,
    LearningNeeds,
    PersonalEngine,
)

__all__ = [
    "ContextualEngine",
    "PersonalEngine",
    "ContextAnalysis",
    "ContentFormat",
    "LearningNeeds",
    "AdaptiveRecommendation",
    "ContextualData",
    "ContextualDataUpdate",
    "PersonalData",
    "PersonalDataUpdate",
    "default_contextual_data",
    "default_personal_data",
]
