"""
Low-Bandwidth Model.

Reduces content for constrained connections. The policy is a fixed table
keyed by bandwidth tier:

    slow    keep 3 sentences (text) or tag COMPRESSED   ratio 0.3
    medium  keep 5 sentences (text) or tag OPTIMIZED    ratio 0.6
    fast    unchanged                                   ratio 1.0

Sentences are the segments between '.' characters.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from contextual_ai.adaptation.models import (
    TRANSFER_SIZE_MULTIPLIERS,
    AdaptationMetadata,
    LowBandwidthRequest,
    LowBandwidthResponse,
    TaggedContent,
    estimate_size,
)

CONFIDENCE = 0.94
TRUNCATION_MARKER = "..."


@dataclass(frozen=True)
class CompressionPolicy:
    sentence_limit: Optional[int]
    tag: Optional[str]
    ratio: float


COMPRESSION_POLICIES: dict[str, CompressionPolicy] = {
    "slow": CompressionPolicy(sentence_limit=3, tag="COMPRESSED", ratio=0.3),
    "medium": CompressionPolicy(sentence_limit=5, tag="OPTIMIZED", ratio=0.6),
    "fast": CompressionPolicy(sentence_limit=None, tag=None, ratio=1.0),
}


def keep_sentences(content: str, limit: int) -> str:
    """First ``limit`` '.'-separated segments followed by the truncation marker."""
    return ".".join(content.split(".")[:limit]) + TRUNCATION_MARKER


def determine_quality(bandwidth: str, compression_ratio: float) -> str:
    if bandwidth == "fast" and compression_ratio > 0.8:
        return "high"
    if bandwidth == "medium" and compression_ratio > 0.5:
        return "medium"
    return "low"


class LowBandwidthModel:
    """Compress content according to the learner's bandwidth tier."""

    def __init__(self, model_version: str = "1.0.0"):
        self.model_version = model_version

    def compress_content(self, request: LowBandwidthRequest) -> LowBandwidthResponse:
        started = time.perf_counter()

        policy = COMPRESSION_POLICIES[request.bandwidth]
        original_size = estimate_size(
            request.content, request.content_type, TRANSFER_SIZE_MULTIPLIERS
        )
        content = self._apply_policy(request.content, request.content_type, policy)

        return LowBandwidthResponse(
            compressed_content=content.render(),
            content_tags=list(content.tags),
            original_size=original_size,
            compressed_size=original_size * policy.ratio,
            compression_ratio=policy.ratio,
            quality=determine_quality(request.bandwidth, policy.ratio),
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )

    @staticmethod
    def _apply_policy(content: str, content_type: str, policy: CompressionPolicy) -> TaggedContent:
        if policy.sentence_limit is None:
            return TaggedContent(content)
        if content_type == "text":
            return TaggedContent(keep_sentences(content, policy.sentence_limit))
        return TaggedContent(content).tag(policy.tag)
