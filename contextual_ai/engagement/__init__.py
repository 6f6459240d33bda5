"""
Engagement Models.

Components:
- GamificationModel: Points, badges and leaderboard position
- MotivationalModel: Message and tone from progress and mood
- CulturalContextModel: Idiom and local reference appended to content
- EngagementService: Single entry point over the three models

Gamification and cultural context draw from a shared ``random.Random``;
pass a seeded one for reproducible output.
"""
from __future__ import annotations

import random
from typing import Optional

from loguru import logger

from contextual_ai.engagement.cultural_context import CulturalContextModel
from contextual_ai.engagement.gamification import GamificationModel
from contextual_ai.engagement.models import (
    CulturalContextRequest,
    CulturalContextResponse,
    GamificationRequest,
    GamificationResponse,
    MotivationalRequest,
    MotivationalResponse,
)
from contextual_ai.engagement.motivational import MotivationalModel


class EngagementService:
    """Owns one instance of each engagement model and logs around every call."""

    def __init__(self, model_version: str = "1.0.0", rng: Optional[random.Random] = None):
        rng = rng or random.Random()
        self.gamification = GamificationModel(model_version=model_version, rng=rng)
        self.motivational = MotivationalModel(model_version=model_version)
        self.cultural_context = CulturalContextModel(model_version=model_version, rng=rng)

    def generate_gamification(self, request: GamificationRequest) -> GamificationResponse:
        response = self.gamification.generate_gamification(request)
        logger.info(
            f"Awarded {response.points_awarded} points to user {request.user_id} "
            f"for {request.activity!r}"
        )
        return response

    def generate_motivation(self, request: MotivationalRequest) -> MotivationalResponse:
        response = self.motivational.generate_motivation(request)
        logger.debug(f"Motivation for user {request.user_id}: tone={response.tone}")
        return response

    def localize_content(self, request: CulturalContextRequest) -> CulturalContextResponse:
        logger.debug(f"Localizing content: region={request.region} language={request.language}")
        return self.cultural_context.localize_content(request)


__all__ = [
    "EngagementService",
    "GamificationModel",
    "MotivationalModel",
    "CulturalContextModel",
    "GamificationRequest",
    "GamificationResponse",
    "MotivationalRequest",
    "MotivationalResponse",
    "CulturalContextRequest",
    "CulturalContextResponse",
]
