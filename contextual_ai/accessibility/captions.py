"""
Caption Generation Model.

Splits a transcript into fixed segments of ten words, each lasting five
seconds. Words are the pieces between single spaces. Every segment is
attributed to the first listed speaker.
"""
from __future__ import annotations

import time

from contextual_ai.accessibility.models import CaptionRequest, CaptionResponse, CaptionSegment
from contextual_ai.adaptation.models import AdaptationMetadata

CONFIDENCE = 0.9
WORDS_PER_SEGMENT = 10
SEGMENT_SECONDS = 5


def segment_transcript(transcript: str, speaker: str | None = None) -> list[CaptionSegment]:
    words = transcript.split(" ")
    segments = []
    for index, start in enumerate(range(0, len(words), WORDS_PER_SEGMENT)):
        start_time = index * SEGMENT_SECONDS
        segments.append(
            CaptionSegment(
                start_time=start_time,
                end_time=start_time + SEGMENT_SECONDS,
                text=" ".join(words[start:start + WORDS_PER_SEGMENT]),
                speaker=speaker,
            )
        )
    return segments


class CaptionGenerationModel:
    def __init__(self, model_version: str = "1.0.0"):
        self.model_version = model_version

    def generate_captions(self, request: CaptionRequest) -> CaptionResponse:
        started = time.perf_counter()

        speaker = request.speakers[0] if request.speakers else None
        captions = segment_transcript(request.audio_content, speaker)

        return CaptionResponse(
            captions=captions,
            language=request.language,
            metadata=AdaptationMetadata(
                model_version=self.model_version,
                generation_time=(time.perf_counter() - started) * 1000,
                confidence=CONFIDENCE,
            ),
        )
