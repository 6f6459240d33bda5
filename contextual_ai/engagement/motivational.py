"""
Motivational Model.

Progress outranks mood: above 80% celebrates, above 50% encourages, and
only then does a negative mood get a supportive message.
"""
from __future__ import annotations

import time

from contextual_ai.adaptation.models import AdaptationMetadata
from contextual_ai.engagement.models import MotivationalRequest, MotivationalResponse

CONFIDENCE = 0.94


def choose_message(progress: float, mood: str | None) -> tuple[str, str]:
    """(message, tone) for a learner's progress and mood."""
    if progress > 80:
        return "Outstanding progress! You are almost at your goal!", "celebratory"
    if progress > 50:
        return "Great work! Keep up the momentum.", "encouraging"
    if mood == "negative":
        return "Don't give up! Every step counts, and you're making progress.", "supportive"
    return "Let's keep going! You can do this.", "challenging"


class MotivationalModel:
    def __init__(self, model_version: str = "1.0.0"):
        self.model_version = model_version

    def generate_motivation(self, request: MotivationalRequest) -> MotivationalResponse:
        started = time.perf_counter()

        text, tone = choose_message(request.progress, request.mood)

        return MotivationalResponse(
            message=text,
            tone=tone,
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )
