"""
Accessibility Models.

Components:
- ScreenReaderModel: ARIA label, alt text and description from a summary
- CaptionGenerationModel: Fixed-length caption segments from a transcript
- MobileOptimizedModel: Line wrapping for phones, marking for slow links
- AccessibilityService: Single entry point over the three models
"""
from __future__ import annotations

from loguru import logger

from contextual_ai.accessibility.captions import CaptionGenerationModel
from contextual_ai.accessibility.mobile_optimized import MobileOptimizedModel
from contextual_ai.accessibility.models import (
    CaptionRequest,
    CaptionResponse,
    MobileOptimizedRequest,
    MobileOptimizedResponse,
    ScreenReaderRequest,
    ScreenReaderResponse,
)
from contextual_ai.accessibility.screen_reader import ScreenReaderModel


class AccessibilityService:
    def __init__(self, model_version: str = "1.0.0"):
        self.screen_reader = ScreenReaderModel(model_version=model_version)
        self.captions = CaptionGenerationModel(model_version=model_version)
        self.mobile = MobileOptimizedModel(model_version=model_version)

    def generate_screen_reader_content(self, request: ScreenReaderRequest) -> ScreenReaderResponse:
        logger.debug(f"Generating screen reader content: type={request.content_type}")
        return self.screen_reader.generate(request)

    def generate_captions(self, request: CaptionRequest) -> CaptionResponse:
        response = self.captions.generate_captions(request)
        logger.info(f"Generated {len(response.captions)} caption segments ({request.language})")
        return response

    def optimize_for_mobile(self, request: MobileOptimizedRequest) -> MobileOptimizedResponse:
        logger.debug(
            f"Optimizing content: device={request.context.device_type} "
            f"bandwidth={request.context.bandwidth}"
        )
        return self.mobile.optimize_content(request)


__all__ = [
    "AccessibilityService",
    "ScreenReaderModel",
    "CaptionGenerationModel",
    "MobileOptimizedModel",
    "ScreenReaderRequest",
    "ScreenReaderResponse",
    "CaptionRequest",
    "CaptionResponse",
    "MobileOptimizedRequest",
    "MobileOptimizedResponse",
]
