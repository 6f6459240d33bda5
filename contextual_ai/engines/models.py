"""
Engine snapshot models.

Each engine owns exactly one snapshot. A snapshot is always fully populated
(or absent); updates are shallow merges where a section present in the update
replaces the stored section wholesale.

Enum-like fields are plain strings. Values are caller-trusted, the tuples
below list what the rule tables recognise.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, Field

from contextual_ai.schema import CamelModel

DEVICE_TYPES = ("mobile", "desktop", "tablet")
CONNECTION_TYPES = ("wifi", "mobile", "offline")
SPEED_TIERS = ("slow", "medium", "fast")
TIMES_OF_DAY = ("morning", "afternoon", "evening", "night")
URGENCY_LEVELS = ("low", "medium", "high")

LEARNING_STYLES = ("visual", "auditory", "kinesthetic", "reading")
LEARNING_PACES = ("slow", "medium", "fast")
DIFFICULTY_LEVELS = ("beginner", "intermediate", "advanced")
CONTENT_FORMATS = ("text", "audio", "video", "mixed")
INTERACTION_STYLES = ("guided", "exploratory", "challenging")
FEEDBACK_FREQUENCIES = ("immediate", "periodic", "on-demand")
SESSION_FREQUENCIES = ("daily", "weekly", "monthly")
ENGAGEMENT_LEVELS = ("low", "medium", "high")


# ========================================
# Contextual snapshot
# ========================================


class Coordinates(CamelModel):
    latitude: float
    longitude: float


class LocationContext(CamelModel):
    country: str
    region: str
    city: str
    timezone: str
    coordinates: Optional[Coordinates] = None


class ScreenSize(CamelModel):
    width: int
    height: int


class DeviceContext(CamelModel):
    type: str = Field(..., description="mobile, desktop or tablet")
    platform: str
    browser: str
    screen_size: ScreenSize


class ConnectivityContext(CamelModel):
    type: str = Field(..., description="wifi, mobile or offline")
    speed: str = Field(..., description="slow, medium or fast")
    is_online: bool


class EnvironmentContext(CamelModel):
    language: str
    currency: str
    cultural_context: str
    season: str
    time_of_day: str = Field(..., description="morning, afternoon, evening or night")


class TaskContext(CamelModel):
    current_activity: str
    goal: str
    urgency: str = Field(..., description="low, medium or high")


class ContextualData(CamelModel):
    """Environmental snapshot held by the ContextualEngine."""

    location: LocationContext
    device: DeviceContext
    connectivity: ConnectivityContext
    environment: EnvironmentContext
    task: TaskContext


class ContextualDataUpdate(CamelModel):
    """Partial contextual snapshot. Each section given replaces the stored one."""

    location: Optional[LocationContext] = None
    device: Optional[DeviceContext] = None
    connectivity: Optional[ConnectivityContext] = None
    environment: Optional[EnvironmentContext] = None
    task: Optional[TaskContext] = None


# ========================================
# Personal snapshot
# ========================================


class LearningProfile(CamelModel):
    style: str = Field(..., description="visual, auditory, kinesthetic or reading")
    pace: str = Field(..., description="slow, medium or fast")
    preferred_time: str
    attention_span: float = Field(..., description="Minutes")
    difficulty: str = Field(..., description="beginner, intermediate or advanced")


class LearningPreferences(CamelModel):
    language: str
    content_format: str = Field(..., description="text, audio, video or mixed")
    interaction_style: str
    feedback_frequency: str


class LearnerProfile(CamelModel):
    age: int
    education: str
    occupation: str
    interests: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)


class LearningBehavior(CamelModel):
    session_duration: float = Field(..., description="Average session length in minutes")
    frequency: str
    completion_rate: float = Field(..., description="Percentage 0-100")
    engagement_level: str = Field(..., description="low, medium or high")


class AccessibilityNeeds(CamelModel):
    visual_impairment: bool = False
    hearing_impairment: bool = False
    motor_impairment: bool = False
    cognitive_impairment: bool = False
    preferred_accessibility: list[str] = Field(default_factory=list)


class PersonalData(CamelModel):
    """Learner snapshot held by the PersonalEngine."""

    learning: LearningProfile
    preferences: LearningPreferences
    profile: LearnerProfile
    behavior: LearningBehavior
    accessibility: AccessibilityNeeds


class PersonalDataUpdate(CamelModel):
    """Partial personal snapshot. Each section given replaces the stored one."""

    learning: Optional[LearningProfile] = None
    preferences: Optional[LearningPreferences] = None
    profile: Optional[LearnerProfile] = None
    behavior: Optional[LearningBehavior] = None
    accessibility: Optional[AccessibilityNeeds] = None


# ========================================
# Defaults
# ========================================


def default_contextual_data() -> ContextualData:
    """Snapshot every ContextualEngine starts from."""
    return ContextualData(
        location=LocationContext(
            country="Nigeria",
            region="West Africa",
            city="Lagos",
            timezone="Africa/Lagos",
        ),
        device=DeviceContext(
            type="mobile",
            platform="unknown",
            browser="unknown",
            screen_size=ScreenSize(width=375, height=667),
        ),
        connectivity=ConnectivityContext(type="mobile", speed="medium", is_online=True),
        environment=EnvironmentContext(
            language="en",
            currency="NGN",
            cultural_context="West African",
            season="dry",
            time_of_day="afternoon",
        ),
        task=TaskContext(
            current_activity="learning",
            goal="skill_development",
            urgency="medium",
        ),
    )


def default_personal_data() -> PersonalData:
    """Snapshot every PersonalEngine starts from."""
    return PersonalData(
        learning=LearningProfile(
            style="visual",
            pace="medium",
            preferred_time="afternoon",
            attention_span=30,
            difficulty="intermediate",
        ),
        preferences=LearningPreferences(
            language="en",
            content_format="mixed",
            interaction_style="guided",
            feedback_frequency="periodic",
        ),
        profile=LearnerProfile(
            age=25,
            education="university",
            occupation="student",
            interests=["technology", "education"],
            goals=["skill_development", "career_advancement"],
            challenges=["time_management", "access_to_resources"],
        ),
        behavior=LearningBehavior(
            session_duration=45,
            frequency="daily",
            completion_rate=75,
            engagement_level="medium",
        ),
        accessibility=AccessibilityNeeds(),
    )


SnapshotT = TypeVar("SnapshotT", bound=BaseModel)


def merge_snapshot(current: SnapshotT, partial: Mapping[str, Any] | BaseModel) -> SnapshotT:
    """
    Shallow-merge a partial update onto a snapshot.

    Top-level sections present in ``partial`` replace the stored section
    wholesale; ``None`` sections are ignored. The merged snapshot is
    re-validated so the result is always complete. Raises
    ``pydantic.ValidationError`` when a replacement section is incomplete.
    """
    if isinstance(partial, BaseModel):
        updates = {name: getattr(partial, name) for name in partial.model_fields_set}
    else:
        updates = dict(partial)

    merged = current.model_dump()
    for key, value in updates.items():
        if value is None:
            continue
        merged[key] = value

    return type(current).model_validate(merged)
