"""Engagement request/response models."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from contextual_ai.accessibility.models import DeliveryContext
from contextual_ai.adaptation.models import AdaptationMetadata
from contextual_ai.schema import CamelModel

Mood = Literal["positive", "neutral", "negative"]
Tone = Literal["encouraging", "celebratory", "supportive", "challenging"]


class GamificationRequest(CamelModel):
    user_id: str
    activity: str
    progress: float = Field(..., ge=0, le=100, description="Percentage 0-100")
    achievements: list[str] = Field(default_factory=list)
    context: Optional[DeliveryContext] = None


class GamificationResponse(CamelModel):
    points_awarded: int
    total_points: float
    badges: list[str] = Field(default_factory=list)
    leaderboard_position: int
    feedback: str
    metadata: AdaptationMetadata


class MotivationalRequest(CamelModel):
    user_id: str
    progress: float = Field(..., ge=0, le=100, description="Percentage 0-100")
    recent_activity: str
    mood: Optional[Mood] = None
    context: Optional[DeliveryContext] = None


class MotivationalResponse(CamelModel):
    message: str
    tone: Tone
    metadata: AdaptationMetadata


class CulturalContextRequest(CamelModel):
    content: str
    language: str
    region: str
    context: Optional[DeliveryContext] = None


class CulturalContextResponse(CamelModel):
    localized_content: str
    cultural_references: list[str] = Field(default_factory=list)
    idioms_used: list[str] = Field(default_factory=list)
    metadata: AdaptationMetadata
