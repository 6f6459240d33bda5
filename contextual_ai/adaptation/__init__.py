"""
Advanced Adaptation Models.

Components:
- OfflineFirstModel: Storage estimate, priority marking, sync requirement
- LowBandwidthModel: Tiered compression for slow and medium connections
- BehavioralAdaptationModel: Pacing, format, complexity and engagement tagging
- AdvancedAdaptationService: Single entry point over the three models
"""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from contextual_ai.adaptation.behavioral import BehavioralAdaptationModel
from contextual_ai.adaptation.low_bandwidth import LowBandwidthModel
from contextual_ai.adaptation.models import (
    BehavioralAdaptationRequest,
    BehavioralAdaptationResponse,
    LowBandwidthRequest,
    LowBandwidthResponse,
    OfflineFirstRequest,
    OfflineFirstResponse,
    TaggedContent,
)
from contextual_ai.adaptation.offline_first import OfflineFirstModel


class AdvancedAdaptationService:
    """Owns one instance of each adaptation model and logs around every call."""

    def __init__(
        self,
        model_version: str = "1.0.0",
        sync_max_age_hours: float = 24.0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        offline_kwargs = {"clock": clock} if clock else {}
        self.offline_first = OfflineFirstModel(
            model_version=model_version,
            sync_max_age_hours=sync_max_age_hours,
            **offline_kwargs,
        )
        self.low_bandwidth = LowBandwidthModel(model_version=model_version)
        self.behavioral = BehavioralAdaptationModel(model_version=model_version)

    def generate_offline_content(self, request: OfflineFirstRequest) -> OfflineFirstResponse:
        logger.debug(
            f"Generating offline content: type={request.content_type} priority={request.priority}"
        )
        response = self.offline_first.generate_offline_content(request)
        logger.info(
            f"Offline content ready: {response.storage_size:.3f} MB, "
            f"sync_required={response.sync_required}"
        )
        return response

    def compress_content(self, request: LowBandwidthRequest) -> LowBandwidthResponse:
        logger.debug(
            f"Compressing content: type={request.content_type} bandwidth={request.bandwidth}"
        )
        response = self.low_bandwidth.compress_content(request)
        logger.info(
            f"Content compressed: {response.original_size:.3f} KB -> "
            f"{response.compressed_size:.3f} KB ({response.quality} quality)"
        )
        return response

    def adapt_content(self, request: BehavioralAdaptationRequest) -> BehavioralAdaptationResponse:
        logger.debug(f"Adapting content for user {request.user_id}")
        response = self.behavioral.adapt_content(request)
        adaptations = response.adaptations
        logger.info(
            f"Content adapted for user {request.user_id}: pacing={adaptations.pacing} "
            f"complexity={adaptations.complexity} engagement={adaptations.engagement}"
        )
        return response


__all__ = [
    "AdvancedAdaptationService",
    "OfflineFirstModel",
    "LowBandwidthModel",
    "BehavioralAdaptationModel",
    "OfflineFirstRequest",
    "OfflineFirstResponse",
    "LowBandwidthRequest",
    "LowBandwidthResponse",
    "BehavioralAdaptationRequest",
    "BehavioralAdaptationResponse",
    "TaggedContent",
]
