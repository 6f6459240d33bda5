"""
Offline-First Model.

Prepares content for offline use: estimates on-device storage, marks
high-priority content and decides whether a sync is required.

A sync is required when:
1. The content is high priority
2. The last sync is older than the configured maximum age (24h by default)
"""
from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from contextual_ai.adaptation.models import (
    OFFLINE_STORAGE_MULTIPLIERS,
    AdaptationMetadata,
    OfflineFirstRequest,
    OfflineFirstResponse,
    TaggedContent,
    estimate_size,
)

OFFLINE_PRIORITY_TAG = "OFFLINE-PRIORITY"
CONFIDENCE = 0.96


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OfflineFirstModel:
    """Tag content for offline use and compute its sync requirement."""

    def __init__(
        self,
        model_version: str = "1.0.0",
        sync_max_age_hours: float = 24.0,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.model_version = model_version
        self.sync_max_age = timedelta(hours=sync_max_age_hours)
        self._clock = clock

    def generate_offline_content(self, request: OfflineFirstRequest) -> OfflineFirstResponse:
        started = time.perf_counter()

        content = TaggedContent(request.content)
        sync_required = False
        storage_size = estimate_size(
            request.content, request.content_type, OFFLINE_STORAGE_MULTIPLIERS
        )

        if request.priority == "high":
            content.tag(OFFLINE_PRIORITY_TAG)
            sync_required = True

        last_sync = request.context.last_sync_time if request.context else None
        if self.is_sync_stale(last_sync):
            sync_required = True

        return OfflineFirstResponse(
            offline_content=content.render(),
            content_tags=list(content.tags),
            sync_required=sync_required,
            storage_size=storage_size,
            priority=request.priority,
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )

    def is_sync_stale(self, last_sync_time: Optional[datetime]) -> bool:
        """True when ``last_sync_time`` is older than the maximum sync age."""
        if last_sync_time is None:
            return False
        if last_sync_time.tzinfo is None:
            last_sync_time = last_sync_time.replace(tzinfo=timezone.utc)
        return self._clock() - last_sync_time > self.sync_max_age
