"""Accessibility request/response models."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from contextual_ai.adaptation.models import AdaptationMetadata, Bandwidth, DeviceType
from contextual_ai.schema import CamelModel

AccessibleContentType = Literal["text", "image", "diagram", "interactive", "video"]


class DeliveryContext(CamelModel):
    device_type: DeviceType
    cultural_context: str = ""


# ========================================
# Screen reader
# ========================================


class ScreenReaderRequest(CamelModel):
    content: str
    content_type: AccessibleContentType
    language: str
    context: Optional[DeliveryContext] = None


class ScreenReaderResponse(CamelModel):
    aria_label: str
    alt_text: Optional[str] = Field(None, description="Only for images and diagrams")
    description: str
    language: str
    accessibility_compliant: bool = True
    metadata: AdaptationMetadata


# ========================================
# Captions
# ========================================


class CaptionRequest(CamelModel):
    audio_content: str = Field(..., description="Transcript of the audio")
    language: str
    speakers: Optional[list[str]] = None
    context: Optional[DeliveryContext] = None


class CaptionSegment(CamelModel):
    start_time: float = Field(..., description="Seconds")
    end_time: float = Field(..., description="Seconds")
    text: str
    speaker: Optional[str] = None


class CaptionResponse(CamelModel):
    captions: list[CaptionSegment] = Field(default_factory=list)
    language: str
    accessibility_compliant: bool = True
    metadata: AdaptationMetadata


# ========================================
# Mobile optimisation
# ========================================


class MobileContext(DeliveryContext):
    bandwidth: Bandwidth


class MobileOptimizedRequest(CamelModel):
    content: str
    content_type: AccessibleContentType
    language: str
    context: MobileContext


class MobileOptimizedResponse(CamelModel):
    optimized_content: str
    content_tags: list[str] = Field(default_factory=list)
    mobile_friendly: bool
    low_bandwidth_optimized: bool
    accessibility_compliant: bool = True
    metadata: AdaptationMetadata
