"""
Behavioral Adaptation Model.

Classifies a learner's recent behavior along four axes and tags content
accordingly:

- pacing:     accelerated / normal / slowed
- format:     the learner's preferred format
- complexity: simplified / standard / enhanced
- engagement: high / medium / low

Markers are applied pacing first, then format, then complexity. Each marker
is prepended, so complexity ends up outermost.
"""
from __future__ import annotations

import time
from typing import Optional

from contextual_ai.adaptation.models import (
    AdaptationMetadata,
    BehavioralAdaptationRequest,
    BehavioralAdaptationResponse,
    BehavioralAdaptations,
    BehavioralContext,
    TaggedContent,
    UserBehavior,
)

CONFIDENCE = 0.92

PACING_TAGS = {"accelerated": "FAST-PACED", "slowed": "SLOW-PACED"}
COMPLEXITY_TAGS = {"simplified": "SIMPLIFIED", "enhanced": "ENHANCED"}


def determine_pacing(behavior: UserBehavior) -> str:
    if behavior.learning_pace == "fast" and behavior.completion_rate > 80:
        return "accelerated"
    if behavior.learning_pace == "slow" or behavior.completion_rate < 50:
        return "slowed"
    return "normal"


def determine_format(behavior: UserBehavior) -> str:
    return behavior.preferred_format


def determine_complexity(behavior: UserBehavior) -> str:
    if behavior.attention_span < 15 or behavior.completion_rate < 60:
        return "simplified"
    if behavior.attention_span > 45 and behavior.completion_rate > 90:
        return "enhanced"
    return "standard"


def determine_engagement(behavior: UserBehavior, context: Optional[BehavioralContext]) -> str:
    session_duration = context.session_duration if context else 0
    if behavior.interaction_frequency > 10 and session_duration > 30:
        return "high"
    if behavior.interaction_frequency < 3 or session_duration < 10:
        return "low"
    return "medium"


def format_tag(delivery_format: str) -> str:
    return f"{delivery_format.upper()}-FORMAT"


class BehavioralAdaptationModel:
    """Reshape content from a learner's observed behavior."""

    def __init__(self, model_version: str = "1.0.0"):
        self.model_version = model_version

    def adapt_content(self, request: BehavioralAdaptationRequest) -> BehavioralAdaptationResponse:
        started = time.perf_counter()

        behavior = request.user_behavior
        adaptations = BehavioralAdaptations(
            pacing=determine_pacing(behavior),
            format=determine_format(behavior),
            complexity=determine_complexity(behavior),
            engagement=determine_engagement(behavior, request.context),
        )
        content = self.apply_adaptations(TaggedContent(request.content), adaptations)

        return BehavioralAdaptationResponse(
            adapted_content=content.render(),
            content_tags=list(content.tags),
            adaptations=adaptations,
            recommendations=self.generate_recommendations(behavior, adaptations),
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )

    @staticmethod
    def apply_adaptations(content: TaggedContent, adaptations: BehavioralAdaptations) -> TaggedContent:
        pacing_tag = PACING_TAGS.get(adaptations.pacing)
        if pacing_tag:
            content.tag(pacing_tag)

        content.tag(format_tag(adaptations.format))

        complexity_tag = COMPLEXITY_TAGS.get(adaptations.complexity)
        if complexity_tag:
            content.tag(complexity_tag)

        return content

    @staticmethod
    def generate_recommendations(behavior: UserBehavior, adaptations: BehavioralAdaptations) -> list[str]:
        recommendations: list[str] = []

        if adaptations.engagement == "low":
            recommendations.append("Consider shorter, more interactive sessions")
        if behavior.attention_span < 20:
            recommendations.append("Break content into smaller chunks")
        if behavior.completion_rate < 70:
            recommendations.append("Provide more guided learning paths")

        return recommendations
