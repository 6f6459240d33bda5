"""
Contextual Engine.

Holds the environmental snapshot (location, device, connectivity,
environment, task) and derives recommendations and adaptation flags from it.

Rules are independent and non-exclusive:
1. Offline        -> offline_mode_required, offlineMode
2. Slow network   -> slow_connection, lowBandwidth
3. Mobile device  -> mobileOptimized
4. Nigeria        -> localizedContent, currency NGN
5. Night time     -> nightMode
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from loguru import logger
from pydantic import BaseModel

from contextual_ai.engines.localization import UNCONFIGURED_SETTINGS, settings_for_country
from contextual_ai.engines.models import ContextualData, default_contextual_data, merge_snapshot

OFFLINE_MODE_REQUIRED = "offline_mode_required"
SLOW_CONNECTION = "slow_connection"


@dataclass
class ContextAnalysis:
    """Result of analysing a contextual snapshot."""

    recommendations: list[str] = field(default_factory=list)
    adaptations: dict[str, Any] = field(default_factory=dict)
    constraints: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "recommendations": list(self.recommendations),
            "adaptations": dict(self.adaptations),
            "constraints": list(self.constraints),
        }


@dataclass(frozen=True)
class ContentFormat:
    """Delivery format derived from context."""

    format: str = "text"
    size: str = "medium"
    complexity: str = "moderate"

    def to_dict(self) -> dict:
        return {"format": self.format, "size": self.size, "complexity": self.complexity}


class ContextualEngine:
    """Environmental context snapshot and the rules that read it."""

    def __init__(self, initial: Optional[ContextualData] = None):
        self._context: Optional[ContextualData] = initial or default_contextual_data()

    def update_context(self, partial: Mapping[str, Any] | BaseModel) -> None:
        """Shallow-merge ``partial`` onto the snapshot. No-op without a snapshot."""
        merged = self.merge_context(partial)
        if merged is not None:
            self.replace_context(merged)

    def merge_context(self, partial: Mapping[str, Any] | BaseModel) -> Optional[ContextualData]:
        """Snapshot ``partial`` would produce, without storing it. None without a snapshot."""
        if self._context is None:
            return None
        return merge_snapshot(self._context, partial)

    def replace_context(self, snapshot: ContextualData) -> None:
        self._context = snapshot
        logger.debug("Contextual snapshot updated")

    def get_context(self) -> Optional[ContextualData]:
        """Copy of the current snapshot, or None."""
        if self._context is None:
            return None
        return self._context.model_copy(deep=True)

    def analyze_context(self) -> ContextAnalysis:
        analysis = ContextAnalysis()
        context = self._context
        if context is None:
            return analysis

        if not context.connectivity.is_online:
            analysis.constraints.append(OFFLINE_MODE_REQUIRED)
            analysis.adaptations["offlineMode"] = True
            analysis.recommendations.append(
                "Use offline content and sync when connection is restored"
            )

        if context.connectivity.speed == "slow":
            analysis.constraints.append(SLOW_CONNECTION)
            analysis.adaptations["lowBandwidth"] = True
            analysis.recommendations.append("Optimize content for low bandwidth")

        if context.device.type == "mobile":
            analysis.adaptations["mobileOptimized"] = True
            analysis.recommendations.append("Optimize interface for mobile interaction")

        # Only Nigeria gets localized content flags
        if context.location.country == "Nigeria":
            analysis.adaptations["localizedContent"] = True
            analysis.adaptations["currency"] = "NGN"
            analysis.recommendations.append("Provide content relevant to Nigerian context")

        if context.environment.time_of_day == "night":
            analysis.adaptations["nightMode"] = True
            analysis.recommendations.append("Enable night mode for better visibility")

        return analysis

    def get_optimal_content_format(self) -> ContentFormat:
        adaptations = self.analyze_context().adaptations

        if adaptations.get("lowBandwidth"):
            return ContentFormat(format="text", size="small", complexity="simple")
        if adaptations.get("mobileOptimized"):
            return ContentFormat(format="interactive", size="medium", complexity="moderate")
        return ContentFormat()

    def should_use_offline_mode(self) -> bool:
        return OFFLINE_MODE_REQUIRED in self.analyze_context().constraints

    def get_localized_settings(self) -> dict[str, str]:
        """Language, currency, date and number format for the current location."""
        if self._context is None:
            return dict(UNCONFIGURED_SETTINGS)

        return settings_for_country(
            self._context.location.country,
            self._context.environment.language,
            self._context.environment.currency,
        )
