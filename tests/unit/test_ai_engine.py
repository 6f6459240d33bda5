"""
Unit tests for the AIEngine orchestration layer.

Tests format priority, response composition, next steps, learning
sessions and snapshot isolation.
"""

import dataclasses
import random
import re
import threading

import pytest
from pydantic import ValidationError

from contextual_ai.ai_engine import AIEngine, LearningSession
from contextual_ai.engines.contextual_engine import ContextAnalysis
from contextual_ai.engines.models import default_contextual_data, default_personal_data
from contextual_ai.engines.personal_engine import LearningNeeds
from contextual_ai.exceptions import SessionCreationError


def _analyses(context_flags=None, personal_flags=None):
    return (
        ContextAnalysis(adaptations=dict(context_flags or {})),
        LearningNeeds(adaptations=dict(personal_flags or {})),
    )


class TestDetermineOptimalFormat:
    """Accessibility beats connectivity, which beats device, which beats style."""

    @pytest.mark.parametrize(
        "context_flags,personal_flags,expected",
        [
            ({"lowBandwidth": True}, {"screenReader": True}, "audio"),
            ({"lowBandwidth": True}, {"captions": True}, "text"),
            ({"lowBandwidth": True, "mobileOptimized": True}, {"visualContent": True}, "text"),
            ({"mobileOptimized": True}, {"visualContent": True}, "interactive"),
            ({}, {"visualContent": True}, "video"),
            ({}, {}, "text"),
        ],
    )
    def test_priority(self, context_flags, personal_flags, expected):
        contextual, personal = _analyses(context_flags, personal_flags)

        assert AIEngine.determine_optimal_format(contextual, personal) == expected


class TestGenerateResponse:
    def test_default_snapshots(self, ai_engine):
        response = ai_engine.generate_response("What is photosynthesis?", "u1")

        assert response.format == "interactive"
        assert response.content == (
            "Based on your context in Nigeria and your visual learning style, "
            "I'll include visual elements to help you learn better. "
            "Here's what I understand about your question: What is photosynthesis?"
        )
        assert response.adaptations["visualContent"] is True
        assert response.adaptations["mobileOptimized"] is True
        assert response.next_steps == []

    def test_offline_fragment_updates_snapshot(self, ai_engine, offline_context):
        response = ai_engine.generate_response("Explain fractions", "u1", context=offline_context)

        assert response.format == "text"
        assert "I'll provide offline-accessible content. " in response.content
        assert response.next_steps == [
            "Download offline content for continued learning",
            "Optimize content for your connection speed",
        ]
        assert ai_engine.get_context().connectivity.is_online is False

    def test_recommendations_are_contextual_then_personal(self, ai_engine):
        personal = default_personal_data()
        response = ai_engine.generate_response(
            "Hi",
            "u1",
            personal={"behavior": personal.behavior.model_copy(update={"engagement_level": "low"})},
        )

        assert response.recommendations[0] == "Optimize interface for mobile interaction"
        assert response.recommendations[-1] == "Implement gamification elements to increase engagement"
        assert response.to_dict()["nextSteps"] == ["Enable gamification features for better engagement"]

    def test_french_templates(self, ai_engine):
        context = default_contextual_data()
        ai_engine.update_snapshots(
            context={"environment": context.environment.model_copy(update={"language": "fr"})}
        )

        response = ai_engine.generate_response("bonjour", "u1")

        assert response.content.startswith("Compte tenu de votre contexte au Nigeria")
        assert response.content.endswith("Voici ce que je comprends de votre question : bonjour")

    def test_invalid_personal_fragment_leaves_context_untouched(self, ai_engine, offline_context):
        with pytest.raises(ValidationError):
            ai_engine.generate_response(
                "q",
                "u1",
                context=offline_context,
                personal={"learning": {"style": "auditory"}},
            )

        assert ai_engine.get_context().connectivity.is_online is True
        assert ai_engine.get_personal_data().learning.style == "visual"

    def test_fallback_without_snapshot(self, ai_engine):
        ai_engine.contextual_engine._context = None

        response = ai_engine.generate_response("anything", "u1")

        assert response.content == "I understand you're asking about: anything"


class TestNextSteps:
    def test_all_steps(self):
        contextual, personal = _analyses(
            {"offlineMode": True, "lowBandwidth": True},
            {"shortSessions": True, "gamification": True},
        )

        assert len(AIEngine.generate_next_steps(contextual, personal)) == 4


class TestLearningSessions:
    def test_create_session(self, ai_engine, fixed_clock):
        session = ai_engine.create_learning_session("u1", "Algebra")

        assert isinstance(session, LearningSession)
        assert session.user_id == "u1"
        assert session.content == "Algebra"
        assert session.progress == 0
        assert session.start_time == fixed_clock()
        assert session.end_time is None

    def test_session_id_format(self, ai_engine, fixed_clock):
        session_id = ai_engine.generate_session_id()

        timestamp_ms = int(fixed_clock().timestamp() * 1000)
        assert re.fullmatch(rf"session_{timestamp_ms}_[0-9a-z]{{6}}", session_id)

    def test_session_ids_are_deterministic_with_seed(self, fixed_clock):
        first = AIEngine(rng=random.Random(7), clock=fixed_clock).generate_session_id()
        second = AIEngine(rng=random.Random(7), clock=fixed_clock).generate_session_id()

        assert first == second

    def test_session_snapshot_is_isolated(self, ai_engine, offline_context):
        session = ai_engine.create_learning_session("u1", "Algebra")

        ai_engine.update_snapshots(context=offline_context)

        assert session.context.connectivity.is_online is True

    def test_session_fields_are_frozen_and_snapshots_private(self, ai_engine):
        session = ai_engine.create_learning_session("u1", "Algebra")

        with pytest.raises(dataclasses.FrozenInstanceError):
            session.progress = 50

        session.context.location.country = "Kenya"
        assert ai_engine.get_context().location.country == "Nigeria"

    def test_session_applies_fragments(self, ai_engine, offline_context):
        session = ai_engine.create_learning_session("u1", "Algebra", context=offline_context)

        assert session.context.connectivity.type == "offline"

    def test_invalid_fragment_creates_nothing(self, ai_engine, offline_context):
        with pytest.raises(ValidationError):
            ai_engine.create_learning_session(
                "u1",
                "Algebra",
                context=offline_context,
                personal={"behavior": {"frequency": "daily"}},
            )

        assert ai_engine.get_context().connectivity.type == "mobile"

    def test_missing_snapshot_raises(self, ai_engine):
        ai_engine.personal_engine._personal = None

        with pytest.raises(SessionCreationError, match="missing context or personal data"):
            ai_engine.create_learning_session("u1", "Algebra")

    def test_to_dict(self, ai_engine):
        data = ai_engine.create_learning_session("u1", "Algebra").to_dict()

        assert data["userId"] == "u1"
        assert data["endTime"] is None
        assert data["context"]["connectivity"]["isOnline"] is True
        assert data["startTime"].startswith("2024-01-15T12:00:00")

    def test_progress_and_end_are_accepted(self, ai_engine):
        ai_engine.update_session_progress("session_1_abcdef", 50)
        ai_engine.end_session("session_1_abcdef")


class TestRecommendationGetters:
    def test_getters(self, ai_engine):
        assert ai_engine.get_contextual_recommendations()[0] == "Optimize interface for mobile interaction"
        assert ai_engine.get_personal_recommendations() == []
        assert ai_engine.get_optimal_content_format().format == "interactive"
        assert ai_engine.get_adaptive_recommendations().content_type == "diagrams"
        assert ai_engine.get_localized_settings()["currency"] == "NGN"


class TestConcurrency:
    def test_concurrent_updates_leave_a_complete_snapshot(self, ai_engine):
        context = default_contextual_data()
        speeds = ["slow", "medium", "fast"]

        def worker(speed):
            for _ in range(20):
                ai_engine.generate_response(
                    "q",
                    "u1",
                    context={"connectivity": context.connectivity.model_copy(update={"speed": speed})},
                )

        threads = [threading.Thread(target=worker, args=(speed,)) for speed in speeds]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert ai_engine.get_context().connectivity.speed in speeds
