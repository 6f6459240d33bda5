"""
Personal Engine.

Holds the learner snapshot (learning profile, preferences, profile,
behavior, accessibility) and derives learning-need adaptations from it.

Accessibility needs always take precedence over stored preferences when
choosing a content format.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from loguru import logger
from pydantic import BaseModel

from contextual_ai.engines.models import PersonalData, default_personal_data, merge_snapshot

MIN_SESSION_MINUTES = 15
MAX_SESSION_MINUTES = 120
DEFAULT_SESSION_MINUTES = 30

SHORT_ATTENTION_MINUTES = 30
ADVANCED_COMPLETION_RATE = 80
BEGINNER_COMPLETION_RATE = 60

DEFAULT_MOTIVATIONAL_FACTORS = ["achievement", "recognition"]


@dataclass
class LearningNeeds:
    """Result of analysing a personal snapshot."""

    recommendations: list[str] = field(default_factory=list)
    adaptations: dict[str, Any] = field(default_factory=dict)
    content_suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "recommendations": list(self.recommendations),
            "adaptations": dict(self.adaptations),
            "contentSuggestions": list(self.content_suggestions),
        }


@dataclass(frozen=True)
class AdaptiveRecommendation:
    content_type: str
    duration: float
    difficulty: str
    format: str

    def to_dict(self) -> dict:
        return {
            "contentType": self.content_type,
            "duration": self.duration,
            "difficulty": self.difficulty,
            "format": self.format,
        }


class PersonalEngine:
    """Learner snapshot and the personalisation rules that read it."""

    def __init__(self, initial: Optional[PersonalData] = None):
        self._personal: Optional[PersonalData] = initial or default_personal_data()

    def update_personal_data(self, partial: Mapping[str, Any] | BaseModel) -> None:
        """Shallow-merge ``partial`` onto the snapshot. No-op without a snapshot."""
        merged = self.merge_personal_data(partial)
        if merged is not None:
            self.replace_personal_data(merged)

    def merge_personal_data(self, partial: Mapping[str, Any] | BaseModel) -> Optional[PersonalData]:
        """Snapshot ``partial`` would produce, without storing it. None without a snapshot."""
        if self._personal is None:
            return None
        return merge_snapshot(self._personal, partial)

    def replace_personal_data(self, snapshot: PersonalData) -> None:
        self._personal = snapshot
        logger.debug("Personal snapshot updated")

    def get_personal_data(self) -> Optional[PersonalData]:
        """Copy of the current snapshot, or None."""
        if self._personal is None:
            return None
        return self._personal.model_copy(deep=True)

    def analyze_learning_needs(self) -> LearningNeeds:
        needs = LearningNeeds()
        personal = self._personal
        if personal is None:
            return needs

        learning = personal.learning
        accessibility = personal.accessibility

        # Learning style
        if learning.style == "visual":
            needs.adaptations["visualContent"] = True
            needs.content_suggestions.extend(["diagrams", "infographics", "videos"])
        elif learning.style == "auditory":
            needs.adaptations["audioContent"] = True
            needs.content_suggestions.extend(["podcasts", "audio_lessons", "discussions"])

        # Pace
        if learning.pace == "slow":
            needs.adaptations["selfPaced"] = True
            needs.adaptations["breakdownContent"] = True
            needs.recommendations.append("Provide more time for content absorption")
        elif learning.pace == "fast":
            needs.adaptations["acceleratedContent"] = True
            needs.content_suggestions.extend(["advanced_topics", "challenge_problems"])

        if learning.attention_span < SHORT_ATTENTION_MINUTES:
            needs.adaptations["shortSessions"] = True
            needs.adaptations["microLearning"] = True
            needs.recommendations.append("Break content into smaller, digestible chunks")

        # Accessibility
        if accessibility.visual_impairment:
            needs.adaptations["screenReader"] = True
            needs.adaptations["audioDescriptions"] = True
            needs.recommendations.append("Provide audio alternatives for visual content")

        if accessibility.hearing_impairment:
            needs.adaptations["captions"] = True
            needs.adaptations["textAlternatives"] = True
            needs.recommendations.append("Provide captions and text alternatives")

        if personal.behavior.engagement_level == "low":
            needs.adaptations["gamification"] = True
            needs.adaptations["rewards"] = True
            needs.recommendations.append(
                "Implement gamification elements to increase engagement"
            )

        return needs

    def get_optimal_session_duration(self) -> float:
        """Shorter of attention span and typical session, clamped to 15-120 minutes."""
        if self._personal is None:
            return DEFAULT_SESSION_MINUTES

        optimal = min(
            self._personal.learning.attention_span,
            self._personal.behavior.session_duration,
        )
        return max(MIN_SESSION_MINUTES, min(MAX_SESSION_MINUTES, optimal))

    def get_content_difficulty(self) -> str:
        if self._personal is None:
            return "intermediate"

        behavior = self._personal.behavior
        if behavior.completion_rate > ADVANCED_COMPLETION_RATE and behavior.engagement_level == "high":
            return "advanced"
        if behavior.completion_rate < BEGINNER_COMPLETION_RATE or behavior.engagement_level == "low":
            return "beginner"
        return self._personal.learning.difficulty

    def should_provide_immediate_feedback(self) -> bool:
        if self._personal is None:
            return False

        return (
            self._personal.preferences.feedback_frequency == "immediate"
            or self._personal.behavior.engagement_level == "low"
            or self._personal.learning.difficulty == "beginner"
        )

    def get_preferred_content_format(self) -> str:
        if self._personal is None:
            return "mixed"

        accessibility = self._personal.accessibility
        if accessibility.visual_impairment:
            return "audio"
        if accessibility.hearing_impairment:
            return "text"
        return self._personal.preferences.content_format

    def get_motivational_factors(self) -> list[str]:
        if self._personal is None:
            return list(DEFAULT_MOTIVATIONAL_FACTORS)

        profile = self._personal.profile
        factors: list[str] = []

        if "career_advancement" in profile.goals:
            factors.extend(["career_growth", "skill_development"])
        if self._personal.behavior.engagement_level == "low":
            factors.extend(["gamification", "rewards", "social_recognition"])
        if "technology" in profile.interests:
            factors.extend(["innovation", "cutting_edge_knowledge"])

        return factors or list(DEFAULT_MOTIVATIONAL_FACTORS)

    def get_adaptive_recommendations(self) -> AdaptiveRecommendation:
        needs = self.analyze_learning_needs()
        return AdaptiveRecommendation(
            content_type=needs.content_suggestions[0] if needs.content_suggestions else "general",
            duration=self.get_optimal_session_duration(),
            difficulty=self.get_content_difficulty(),
            format=self.get_preferred_content_format(),
        )
