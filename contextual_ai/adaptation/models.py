"""
Adaptation request/response models.

Requests are transient, one per call. Adapters are total functions over these
typed inputs: enum fields are Literals and are validated at the boundary.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from contextual_ai.schema import CamelModel

ContentType = Literal["text", "image", "video", "interactive"]
Priority = Literal["high", "medium", "low"]
Bandwidth = Literal["slow", "medium", "fast"]
DeviceType = Literal["mobile", "desktop", "tablet"]
ConnectionType = Literal["wifi", "mobile", "satellite"]
DeliveryFormat = Literal["text", "audio", "video", "interactive"]
LearningPace = Literal["slow", "medium", "fast"]
TimeOfDay = Literal["morning", "afternoon", "evening", "night"]

Pacing = Literal["accelerated", "normal", "slowed"]
Complexity = Literal["simplified", "standard", "enhanced"]
Level = Literal["high", "medium", "low"]

# Synthetic size multipliers relative to plain text (1 KB per 1000 characters)
OFFLINE_STORAGE_MULTIPLIERS: dict[str, float] = {
    "text": 1,
    "image": 10,
    "video": 100,
    "interactive": 5,
}
TRANSFER_SIZE_MULTIPLIERS: dict[str, float] = {
    "text": 1,
    "image": 50,
    "video": 500,
    "interactive": 20,
}
BASE_SIZE_PER_CHARACTER = 0.001


def estimate_size(content: str, content_type: str, multipliers: dict[str, float]) -> float:
    """Synthetic size of ``content``; unknown types use the text baseline."""
    return len(content) * BASE_SIZE_PER_CHARACTER * multipliers.get(content_type, 1)


@dataclass
class TaggedContent:
    """
    Content value with an ordered list of adaptation markers.

    Tags are stored outermost first: ``tag()`` prepends, so the most recently
    applied marker renders first, e.g. ``[SIMPLIFIED] [TEXT-FORMAT] body``.
    """

    body: str
    tags: list[str] = field(default_factory=list)

    def tag(self, name: str) -> "TaggedContent":
        self.tags.insert(0, name)
        return self

    def has(self, name: str) -> bool:
        return name in self.tags

    def render(self) -> str:
        prefix = "".join(f"[{tag}] " for tag in self.tags)
        return f"{prefix}{self.body}"

    def __str__(self) -> str:
        return self.render()


class AdaptationMetadata(CamelModel):
    model_version: str
    generation_time: float = Field(..., description="Milliseconds spent generating")
    confidence: float


# ========================================
# Offline-first
# ========================================


class OfflineFirstContext(CamelModel):
    device_type: DeviceType
    storage_available: float = Field(..., ge=0, description="MB")
    last_sync_time: Optional[datetime] = None


class OfflineFirstRequest(CamelModel):
    content: str
    content_type: ContentType
    priority: Priority
    context: Optional[OfflineFirstContext] = None


class OfflineFirstResponse(CamelModel):
    offline_content: str
    content_tags: list[str] = Field(default_factory=list)
    sync_required: bool
    storage_size: float = Field(..., description="MB")
    priority: Priority
    metadata: AdaptationMetadata


# ========================================
# Low-bandwidth
# ========================================


class LowBandwidthContext(CamelModel):
    device_type: DeviceType
    connection_type: ConnectionType


class LowBandwidthRequest(CamelModel):
    content: str
    content_type: ContentType
    bandwidth: Bandwidth
    context: Optional[LowBandwidthContext] = None


class LowBandwidthResponse(CamelModel):
    compressed_content: str
    content_tags: list[str] = Field(default_factory=list)
    original_size: float = Field(..., description="KB")
    compressed_size: float = Field(..., description="KB")
    compression_ratio: float
    quality: Level
    metadata: AdaptationMetadata


# ========================================
# Behavioral adaptation
# ========================================


class UserBehavior(CamelModel):
    attention_span: float = Field(..., description="Minutes")
    completion_rate: float = Field(..., description="Percentage 0-100")
    interaction_frequency: float = Field(..., description="Interactions per session")
    preferred_format: DeliveryFormat
    learning_pace: LearningPace


class BehavioralContext(CamelModel):
    device_type: DeviceType
    session_duration: float = Field(..., description="Minutes")
    time_of_day: TimeOfDay


class BehavioralAdaptationRequest(CamelModel):
    user_id: str
    content: str
    user_behavior: UserBehavior
    context: Optional[BehavioralContext] = None


class BehavioralAdaptations(CamelModel):
    pacing: Pacing
    format: DeliveryFormat
    complexity: Complexity
    engagement: Level


class BehavioralAdaptationResponse(CamelModel):
    adapted_content: str
    content_tags: list[str] = Field(default_factory=list)
    adaptations: BehavioralAdaptations
    recommendations: list[str] = Field(default_factory=list)
    metadata: AdaptationMetadata
