"""
Unit tests for the PersonalEngine.

Tests the learning-need rules, session duration clamping, difficulty,
feedback, format precedence and motivational factors.
"""

import pytest

from contextual_ai.engines.models import default_personal_data
from contextual_ai.engines.personal_engine import (
    DEFAULT_MOTIVATIONAL_FACTORS,
    AdaptiveRecommendation,
    PersonalEngine,
)


@pytest.fixture
def engine():
    return PersonalEngine()


def _update(engine, section, **changes):
    current = getattr(engine.get_personal_data(), section)
    engine.update_personal_data({section: current.model_copy(update=changes)})


def _no_snapshot():
    engine = PersonalEngine()
    engine._personal = None
    return engine


class TestAnalyzeLearningNeeds:
    """Tests for analyze_learning_needs."""

    def test_default_visual_learner(self, engine):
        needs = engine.analyze_learning_needs()

        assert needs.adaptations == {"visualContent": True}
        assert needs.content_suggestions == ["diagrams", "infographics", "videos"]
        assert needs.recommendations == []

    def test_auditory_learner(self, engine):
        _update(engine, "learning", style="auditory")

        needs = engine.analyze_learning_needs()

        assert needs.adaptations["audioContent"] is True
        assert needs.content_suggestions == ["podcasts", "audio_lessons", "discussions"]

    def test_slow_pace(self, engine):
        _update(engine, "learning", pace="slow")

        needs = engine.analyze_learning_needs()

        assert needs.adaptations["selfPaced"] is True
        assert needs.adaptations["breakdownContent"] is True
        assert "Provide more time for content absorption" in needs.recommendations

    def test_fast_pace_appends_suggestions(self, engine):
        _update(engine, "learning", pace="fast")

        needs = engine.analyze_learning_needs()

        assert needs.adaptations["acceleratedContent"] is True
        assert needs.content_suggestions[-2:] == ["advanced_topics", "challenge_problems"]

    def test_short_attention_span(self, engine):
        _update(engine, "learning", attention_span=20)

        needs = engine.analyze_learning_needs()

        assert needs.adaptations["shortSessions"] is True
        assert needs.adaptations["microLearning"] is True

    def test_attention_span_of_thirty_is_not_short(self, engine):
        assert "shortSessions" not in engine.analyze_learning_needs().adaptations

    def test_accessibility_and_low_engagement(self, engine):
        _update(engine, "accessibility", visual_impairment=True, hearing_impairment=True)
        _update(engine, "behavior", engagement_level="low")

        needs = engine.analyze_learning_needs()

        for flag in ("screenReader", "audioDescriptions", "captions", "textAlternatives", "gamification", "rewards"):
            assert needs.adaptations[flag] is True
        assert needs.recommendations == [
            "Provide audio alternatives for visual content",
            "Provide captions and text alternatives",
            "Implement gamification elements to increase engagement",
        ]

    def test_to_dict_uses_camel_case(self, engine):
        assert "contentSuggestions" in engine.analyze_learning_needs().to_dict()

    def test_without_snapshot(self):
        needs = _no_snapshot().analyze_learning_needs()

        assert needs.adaptations == {}
        assert needs.content_suggestions == []


class TestSessionDuration:
    """Tests for get_optimal_session_duration."""

    def test_shorter_of_attention_and_session(self, engine):
        assert engine.get_optimal_session_duration() == 30

    @pytest.mark.parametrize(
        "attention_span,session_duration,expected",
        [
            (5, 45, 15),
            (200, 300, 120),
            (60, 40, 40),
        ],
    )
    def test_clamped(self, engine, attention_span, session_duration, expected):
        _update(engine, "learning", attention_span=attention_span)
        _update(engine, "behavior", session_duration=session_duration)

        assert engine.get_optimal_session_duration() == expected

    def test_without_snapshot(self):
        assert _no_snapshot().get_optimal_session_duration() == 30


class TestContentDifficulty:
    def test_falls_back_to_stored_difficulty(self, engine):
        assert engine.get_content_difficulty() == "intermediate"

    def test_high_completion_and_engagement_is_advanced(self, engine):
        _update(engine, "behavior", completion_rate=85, engagement_level="high")

        assert engine.get_content_difficulty() == "advanced"

    def test_completion_of_eighty_is_not_advanced(self, engine):
        _update(engine, "behavior", completion_rate=80, engagement_level="high")

        assert engine.get_content_difficulty() == "intermediate"

    def test_low_completion_is_beginner(self, engine):
        _update(engine, "behavior", completion_rate=50)

        assert engine.get_content_difficulty() == "beginner"

    def test_without_snapshot(self):
        assert _no_snapshot().get_content_difficulty() == "intermediate"


class TestImmediateFeedback:
    def test_default_is_periodic(self, engine):
        assert engine.should_provide_immediate_feedback() is False

    def test_immediate_preference(self, engine):
        _update(engine, "preferences", feedback_frequency="immediate")

        assert engine.should_provide_immediate_feedback() is True

    def test_beginner(self, engine):
        _update(engine, "learning", difficulty="beginner")

        assert engine.should_provide_immediate_feedback() is True

    def test_without_snapshot(self):
        assert _no_snapshot().should_provide_immediate_feedback() is False


class TestPreferredFormat:
    def test_stored_preference(self, engine):
        assert engine.get_preferred_content_format() == "mixed"

    def test_visual_impairment_wins(self, engine):
        _update(engine, "accessibility", visual_impairment=True, hearing_impairment=True)
        _update(engine, "preferences", content_format="video")

        assert engine.get_preferred_content_format() == "audio"

    def test_hearing_impairment(self, engine):
        _update(engine, "accessibility", hearing_impairment=True)

        assert engine.get_preferred_content_format() == "text"

    def test_without_snapshot(self):
        assert _no_snapshot().get_preferred_content_format() == "mixed"


class TestMotivationalFactors:
    def test_default_profile(self, engine):
        assert engine.get_motivational_factors() == [
            "career_growth",
            "skill_development",
            "innovation",
            "cutting_edge_knowledge",
        ]

    def test_low_engagement_adds_gamification(self, engine):
        _update(engine, "behavior", engagement_level="low")

        assert "social_recognition" in engine.get_motivational_factors()

    def test_empty_profile_uses_defaults(self, engine):
        _update(engine, "profile", goals=[], interests=[])

        assert engine.get_motivational_factors() == DEFAULT_MOTIVATIONAL_FACTORS

    def test_without_snapshot(self):
        assert _no_snapshot().get_motivational_factors() == ["achievement", "recognition"]


class TestAdaptiveRecommendations:
    def test_default(self, engine):
        assert engine.get_adaptive_recommendations() == AdaptiveRecommendation(
            content_type="diagrams",
            duration=30,
            difficulty="intermediate",
            format="mixed",
        )

    def test_no_suggestions_is_general(self, engine):
        _update(engine, "learning", style="kinesthetic")

        recommendation = engine.get_adaptive_recommendations()

        assert recommendation.content_type == "general"
        assert recommendation.to_dict()["contentType"] == "general"


class TestUpdatePersonalData:
    def test_camel_case_section(self, engine):
        default = default_personal_data().behavior.to_wire()
        engine.update_personal_data({"behavior": {**default, "engagementLevel": "high"}})

        personal = engine.get_personal_data()

        assert personal.behavior.engagement_level == "high"
        assert personal.learning.style == "visual"
