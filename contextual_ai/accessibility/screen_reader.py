"""
Screen Reader Model.

Builds an ARIA label, alt text and a spoken description from a content
summary. The summary is the first 200 characters, followed by "..." when
the content was cut.
"""
from __future__ import annotations

import time

from contextual_ai.accessibility.models import ScreenReaderRequest, ScreenReaderResponse
from contextual_ai.adaptation.models import AdaptationMetadata

CONFIDENCE = 0.95
SUMMARY_LENGTH = 200

# content type -> (label prefix, description prefix); alt text only where visual
LABEL_TEMPLATES: dict[str, tuple[str, str]] = {
    "image": ("Image: ", "This image shows: "),
    "diagram": ("Diagram: ", "This diagram illustrates: "),
    "interactive": ("Interactive element: ", "This interactive element allows: "),
    "video": ("Video: ", "This video covers: "),
    "text": ("Text: ", ""),
}
ALT_TEXT_TYPES = frozenset({"image", "diagram"})


def summarize(content: str) -> str:
    if len(content) > SUMMARY_LENGTH:
        return content[:SUMMARY_LENGTH] + "..."
    return content


class ScreenReaderModel:
    def __init__(self, model_version: str = "1.0.0"):
        self.model_version = model_version

    def generate(self, request: ScreenReaderRequest) -> ScreenReaderResponse:
        started = time.perf_counter()

        summary = summarize(request.content)
        label_prefix, description_prefix = LABEL_TEMPLATES[request.content_type]

        return ScreenReaderResponse(
            aria_label=label_prefix + summary,
            alt_text=summary if request.content_type in ALT_TEXT_TYPES else None,
            description=description_prefix + summary,
            language=request.language,
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )
