"""
Gamification Model.

Awards 10-109 points per activity. More than 50 points earns the
"High Scorer" badge. The leaderboard position is drawn from 1-100 until a
real leaderboard exists.
"""
from __future__ import annotations

import random
import time
from typing import Optional

from contextual_ai.adaptation.models import AdaptationMetadata
from contextual_ai.engagement.models import GamificationRequest, GamificationResponse

CONFIDENCE = 0.93
MIN_POINTS = 10
MAX_POINTS = 109
BADGE_THRESHOLD = 50
HIGH_SCORER_BADGE = "High Scorer"
POINTS_PER_PROGRESS = 10
LEADERBOARD_SIZE = 100


class GamificationModel:
    def __init__(self, model_version: str = "1.0.0", rng: Optional[random.Random] = None):
        self.model_version = model_version
        self._rng = rng or random.Random()

    def generate_gamification(self, request: GamificationRequest) -> GamificationResponse:
        started = time.perf_counter()

        points = self._rng.randint(MIN_POINTS, MAX_POINTS)
        earned_badge = points > BADGE_THRESHOLD
        badges = list(request.achievements)
        if earned_badge:
            badges.append(HIGH_SCORER_BADGE)

        return GamificationResponse(
            points_awarded=points,
            total_points=request.progress * POINTS_PER_PROGRESS + points,
            badges=badges,
            leaderboard_position=self._rng.randint(1, LEADERBOARD_SIZE),
            feedback=(
                "Great job! You earned a badge!" if earned_badge else "Keep going! More points await."
            ),
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )
