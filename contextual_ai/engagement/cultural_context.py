"""
Cultural Context Model.

Appends one idiom and one cultural reference to the content:
``"<content> (<idiom>, as told during a <reference>)"``.
"""
from __future__ import annotations

import random
import time
from typing import Optional

from contextual_ai.adaptation.models import AdaptationMetadata
from contextual_ai.engagement.models import CulturalContextRequest, CulturalContextResponse

CONFIDENCE = 0.91

IDIOMS = (
    "Many hands make light work",
    "A stitch in time saves nine",
    "It takes a village",
)
REFERENCES = (
    "local festival",
    "traditional story",
    "community gathering",
)


class CulturalContextModel:
    def __init__(self, model_version: str = "1.0.0", rng: Optional[random.Random] = None):
        self.model_version = model_version
        self._rng = rng or random.Random()

    def localize_content(self, request: CulturalContextRequest) -> CulturalContextResponse:
        started = time.perf_counter()

        idiom = self._rng.choice(IDIOMS)
        reference = self._rng.choice(REFERENCES)

        return CulturalContextResponse(
            localized_content=f"{request.content} ({idiom}, as told during a {reference})",
            cultural_references=[reference],
            idioms_used=[idiom],
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )
