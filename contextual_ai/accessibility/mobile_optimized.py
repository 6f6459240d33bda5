"""
Mobile-Optimized Model.

On mobile devices text is wrapped into 80-character lines. On slow
connections the result is marked LOW-BANDWIDTH.
"""
from __future__ import annotations

import time

from contextual_ai.accessibility.models import MobileOptimizedRequest, MobileOptimizedResponse
from contextual_ai.adaptation.models import AdaptationMetadata, TaggedContent

CONFIDENCE = 0.92
MOBILE_LINE_LENGTH = 80
LOW_BANDWIDTH_TAG = "LOW-BANDWIDTH"


def chunk_text(text: str, size: int = MOBILE_LINE_LENGTH) -> str:
    """Hard-wrap ``text`` every ``size`` characters."""
    if len(text) <= size:
        return text
    return "\n".join(text[i:i + size] for i in range(0, len(text), size))


class MobileOptimizedModel:
    def __init__(self, model_version: str = "1.0.0"):
        self.model_version = model_version

    def optimize_content(self, request: MobileOptimizedRequest) -> MobileOptimizedResponse:
        started = time.perf_counter()

        is_mobile = request.context.device_type == "mobile"
        is_slow = request.context.bandwidth == "slow"

        content = TaggedContent(chunk_text(request.content) if is_mobile else request.content)
        if is_slow:
            content.tag(LOW_BANDWIDTH_TAG)

        return MobileOptimizedResponse(
            optimized_content=content.render(),
            content_tags=list(content.tags),
            mobile_friendly=is_mobile,
            low_bandwidth_optimized=is_slow,
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )
