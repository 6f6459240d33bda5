"""
AI Engine.

Orchestration layer over the contextual engine, the personal engine and the
adaptation, accessibility and engagement models.

Request flow:
1. Apply any context / personal fragments to the engine snapshots
2. Analyse both snapshots independently
3. Pick the delivery format and compose the templated response
4. Merge adaptations and recommendations, derive next steps

The two snapshots are shared by every caller of an AIEngine instance
(last writer wins). Each orchestration call holds the engine lock for its
whole update-then-read sequence, so a single call never observes a snapshot
half-way through another call's update.
"""
from __future__ import annotations

import random
import string
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel

from contextual_ai.accessibility import AccessibilityService
from contextual_ai.accessibility.models import (
    CaptionRequest,
    CaptionResponse,
    MobileOptimizedRequest,
    MobileOptimizedResponse,
    ScreenReaderRequest,
    ScreenReaderResponse,
)
from contextual_ai.adaptation import AdvancedAdaptationService
from contextual_ai.adaptation.models import (
    BehavioralAdaptationRequest,
    BehavioralAdaptationResponse,
    LowBandwidthRequest,
    LowBandwidthResponse,
    OfflineFirstRequest,
    OfflineFirstResponse,
)
from contextual_ai.engagement import EngagementService
from contextual_ai.engagement.models import (
    CulturalContextRequest,
    CulturalContextResponse,
    GamificationRequest,
    GamificationResponse,
    MotivationalRequest,
    MotivationalResponse,
)
from contextual_ai.engines.contextual_engine import ContentFormat, ContextAnalysis, ContextualEngine
from contextual_ai.engines.localization import message
from contextual_ai.engines.models import ContextualData, PersonalData
from contextual_ai.engines.personal_engine import AdaptiveRecommendation, LearningNeeds, PersonalEngine
from contextual_ai.exceptions import SessionCreationError

SnapshotUpdate = Optional[Union[Mapping[str, Any], BaseModel]]

SESSION_ID_ALPHABET = string.digits + string.ascii_lowercase
SESSION_ID_SUFFIX_LENGTH = 6


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AIResponse:
    content: str
    format: str
    adaptations: dict[str, Any] = field(default_factory=dict)
    recommendations: list[str] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "format": self.format,
            "adaptations": dict(self.adaptations),
            "recommendations": list(self.recommendations),
            "nextSteps": list(self.next_steps),
        }


@dataclass(frozen=True)
class LearningSession:
    """
    Record of both snapshots at the moment a session starts.

    Fields cannot be reassigned. ``context`` and ``personal`` are private
    copies: later engine updates never reach them, though the models
    themselves are ordinary mutable pydantic models.
    """

    id: str
    user_id: str
    context: ContextualData
    personal: PersonalData
    content: str
    progress: float = 0
    start_time: datetime = field(default_factory=_utcnow)
    end_time: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "context": self.context.to_wire(),
            "personal": self.personal.to_wire(),
            "content": self.content,
            "progress": self.progress,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat() if self.end_time else None,
        }


class AIEngine:
    """Compose contextual and personal analysis into adaptive responses."""

    def __init__(
        self,
        contextual_engine: Optional[ContextualEngine] = None,
        personal_engine: Optional[PersonalEngine] = None,
        adaptation_service: Optional[AdvancedAdaptationService] = None,
        accessibility_service: Optional[AccessibilityService] = None,
        engagement_service: Optional[EngagementService] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.contextual_engine = contextual_engine or ContextualEngine()
        self.personal_engine = personal_engine or PersonalEngine()
        self.adaptation_service = adaptation_service or AdvancedAdaptationService()
        self._rng = rng or random.Random()
        self.accessibility_service = accessibility_service or AccessibilityService()
        self.engagement_service = engagement_service or EngagementService(rng=self._rng)
        self._clock = clock
        self._lock = threading.RLock()

    # ========================================
    # Snapshot access
    # ========================================

    def update_snapshots(self, context: SnapshotUpdate = None, personal: SnapshotUpdate = None) -> None:
        with self._lock:
            self._apply_updates(context, personal)

    def _apply_updates(self, context: SnapshotUpdate, personal: SnapshotUpdate) -> None:
        """Validate both merges before storing either; a failing fragment changes nothing."""
        merged_context = self.contextual_engine.merge_context(context) if context else None
        merged_personal = self.personal_engine.merge_personal_data(personal) if personal else None

        if merged_context is not None:
            self.contextual_engine.replace_context(merged_context)
        if merged_personal is not None:
            self.personal_engine.replace_personal_data(merged_personal)

    def get_context(self) -> Optional[ContextualData]:
        with self._lock:
            return self.contextual_engine.get_context()

    def get_personal_data(self) -> Optional[PersonalData]:
        with self._lock:
            return self.personal_engine.get_personal_data()

    def analyze_context(self) -> ContextAnalysis:
        with self._lock:
            return self.contextual_engine.analyze_context()

    def analyze_learning_needs(self) -> LearningNeeds:
        with self._lock:
            return self.personal_engine.analyze_learning_needs()

    # ========================================
    # Response generation
    # ========================================

    def generate_response(
        self,
        user_input: str,
        user_id: str,
        context: SnapshotUpdate = None,
        personal: SnapshotUpdate = None,
    ) -> AIResponse:
        with self._lock:
            self._apply_updates(context, personal)

            contextual_analysis = self.contextual_engine.analyze_context()
            personal_analysis = self.personal_engine.analyze_learning_needs()

            optimal_format = self.determine_optimal_format(contextual_analysis, personal_analysis)
            content = self._compose_response(user_input, contextual_analysis, personal_analysis)

        logger.info(f"Generated {optimal_format} response for user {user_id}")

        return AIResponse(
            content=content,
            format=optimal_format,
            adaptations={**contextual_analysis.adaptations, **personal_analysis.adaptations},
            recommendations=[
                *contextual_analysis.recommendations,
                *personal_analysis.recommendations,
            ],
            next_steps=self.generate_next_steps(contextual_analysis, personal_analysis),
        )

    @staticmethod
    def determine_optimal_format(
        contextual_analysis: ContextAnalysis,
        personal_analysis: LearningNeeds,
    ) -> str:
        """Accessibility first, then connectivity and device, then learning style."""
        if personal_analysis.adaptations.get("screenReader"):
            return "audio"
        if personal_analysis.adaptations.get("captions"):
            return "text"
        if contextual_analysis.adaptations.get("lowBandwidth"):
            return "text"
        if contextual_analysis.adaptations.get("mobileOptimized"):
            return "interactive"
        return "video" if personal_analysis.adaptations.get("visualContent") else "text"

    def _compose_response(
        self,
        user_input: str,
        contextual_analysis: ContextAnalysis,
        personal_analysis: LearningNeeds,
    ) -> str:
        context = self.contextual_engine.get_context()
        personal = self.personal_engine.get_personal_data()

        if context is None or personal is None:
            return message("en", "fallback", user_input=user_input)

        language = context.environment.language
        parts = [
            message(
                language,
                "intro",
                country=context.location.country,
                style=personal.learning.style,
            )
        ]
        if contextual_analysis.adaptations.get("offlineMode"):
            parts.append(message(language, "offline"))
        if personal_analysis.adaptations.get("visualContent"):
            parts.append(message(language, "visual"))
        parts.append(message(language, "question", user_input=user_input))

        return "".join(parts)

    @staticmethod
    def generate_next_steps(
        contextual_analysis: ContextAnalysis,
        personal_analysis: LearningNeeds,
    ) -> list[str]:
        next_steps: list[str] = []

        if contextual_analysis.adaptations.get("offlineMode"):
            next_steps.append("Download offline content for continued learning")
        if contextual_analysis.adaptations.get("lowBandwidth"):
            next_steps.append("Optimize content for your connection speed")
        if personal_analysis.adaptations.get("shortSessions"):
            next_steps.append("Schedule shorter, focused learning sessions")
        if personal_analysis.adaptations.get("gamification"):
            next_steps.append("Enable gamification features for better engagement")

        return next_steps

    # ========================================
    # Learning sessions
    # ========================================

    def create_learning_session(
        self,
        user_id: str,
        topic: str,
        context: SnapshotUpdate = None,
        personal: SnapshotUpdate = None,
    ) -> LearningSession:
        """
        Start a learning session from the current snapshots.

        Raises:
            SessionCreationError: If either engine has no snapshot
        """
        with self._lock:
            self._apply_updates(context, personal)

            current_context = self.contextual_engine.get_context()
            current_personal = self.personal_engine.get_personal_data()

            if current_context is None or current_personal is None:
                raise SessionCreationError(
                    "Unable to create session: missing context or personal data"
                )

            session = LearningSession(
                id=self.generate_session_id(),
                user_id=user_id,
                context=current_context,
                personal=current_personal,
                content=topic,
                progress=0,
                start_time=self._clock(),
            )

        logger.info(f"Created learning session {session.id} for user {user_id}")
        return session

    def update_session_progress(self, session_id: str, progress: float) -> None:
        # Sessions are not persisted
        logger.info(f"Updating session {session_id} progress to {progress}%")

    def end_session(self, session_id: str) -> None:
        logger.info(f"Ending session {session_id}")

    def generate_session_id(self) -> str:
        timestamp_ms = int(self._clock().timestamp() * 1000)
        suffix = "".join(
            self._rng.choice(SESSION_ID_ALPHABET) for _ in range(SESSION_ID_SUFFIX_LENGTH)
        )
        return f"session_{timestamp_ms}_{suffix}"

    # ========================================
    # Recommendations
    # ========================================

    def get_contextual_recommendations(self) -> list[str]:
        return self.analyze_context().recommendations

    def get_personal_recommendations(self) -> list[str]:
        return self.analyze_learning_needs().recommendations

    def get_optimal_content_format(self) -> ContentFormat:
        with self._lock:
            return self.contextual_engine.get_optimal_content_format()

    def get_adaptive_recommendations(self) -> AdaptiveRecommendation:
        with self._lock:
            return self.personal_engine.get_adaptive_recommendations()

    def get_localized_settings(self) -> dict[str, str]:
        with self._lock:
            return self.contextual_engine.get_localized_settings()

    # ========================================
    # Adaptation pass-through (engines untouched)
    # ========================================

    def generate_offline_content(self, request: OfflineFirstRequest) -> OfflineFirstResponse:
        return self.adaptation_service.generate_offline_content(request)

    def compress_content(self, request: LowBandwidthRequest) -> LowBandwidthResponse:
        return self.adaptation_service.compress_content(request)

    def adapt_content(self, request: BehavioralAdaptationRequest) -> BehavioralAdaptationResponse:
        return self.adaptation_service.adapt_content(request)

    # ========================================
    # Accessibility and engagement pass-through
    # ========================================

    def generate_screen_reader_content(self, request: ScreenReaderRequest) -> ScreenReaderResponse:
        return self.accessibility_service.generate_screen_reader_content(request)

    def generate_captions(self, request: CaptionRequest) -> CaptionResponse:
        return self.accessibility_service.generate_captions(request)

    def optimize_for_mobile(self, request: MobileOptimizedRequest) -> MobileOptimizedResponse:
        return self.accessibility_service.optimize_for_mobile(request)

    def generate_gamification(self, request: GamificationRequest) -> GamificationResponse:
        return self.engagement_service.generate_gamification(request)

    def generate_motivation(self, request: MotivationalRequest) -> MotivationalResponse:
        return self.engagement_service.generate_motivation(request)

    def localize_content(self, request: CulturalContextRequest) -> CulturalContextResponse:
        return self.engagement_service.localize_content(request)
