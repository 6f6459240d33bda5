"""
Unit tests for the LowBandwidthModel.

Tests the per-tier compression policy, size accounting and quality.
"""

import pytest

from contextual_ai.adaptation.low_bandwidth import (
    COMPRESSION_POLICIES,
    LowBandwidthModel,
    determine_quality,
    keep_sentences,
)
from contextual_ai.adaptation.models import LowBandwidthRequest

SEVEN_SENTENCES = "One. Two. Three. Four. Five. Six. Seven."


@pytest.fixture
def model():
    return LowBandwidthModel()


def _compress(model, content, bandwidth, content_type="text"):
    return model.compress_content(
        LowBandwidthRequest(content=content, content_type=content_type, bandwidth=bandwidth)
    )


class TestKeepSentences:
    def test_truncates_to_limit(self):
        assert keep_sentences("A. B. C. D. E.", 3) == "A. B. C..."

    def test_short_text_still_gets_marker(self):
        assert keep_sentences("Only one", 3) == "Only one..."


class TestTextCompression:
    def test_slow_keeps_three_sentences(self, model):
        response = _compress(model, "A. B. C. D. E.", "slow")

        assert response.compressed_content == "A. B. C..."
        assert response.content_tags == []
        assert response.compression_ratio == 0.3
        assert response.quality == "low"

    def test_medium_keeps_five_sentences(self, model):
        response = _compress(model, SEVEN_SENTENCES, "medium")

        assert response.compressed_content == "One. Two. Three. Four. Five..."
        assert response.compression_ratio == 0.6
        assert response.quality == "medium"

    def test_fast_is_unchanged(self, model):
        response = _compress(model, SEVEN_SENTENCES, "fast")

        assert response.compressed_content == SEVEN_SENTENCES
        assert response.compression_ratio == 1.0
        assert response.quality == "high"


class TestMediaCompression:
    def test_slow_video_is_tagged(self, model):
        response = _compress(model, "clip.mp4", "slow", content_type="video")

        assert response.compressed_content == "[COMPRESSED] clip.mp4"
        assert response.content_tags == ["COMPRESSED"]

    def test_medium_image_is_tagged(self, model):
        response = _compress(model, "photo.png", "medium", content_type="image")

        assert response.compressed_content == "[OPTIMIZED] photo.png"

    def test_fast_media_untagged(self, model):
        response = _compress(model, "game", "fast", content_type="interactive")

        assert response.compressed_content == "game"
        assert response.content_tags == []


class TestSizes:
    def test_original_size_uses_transfer_multiplier(self, model):
        response = _compress(model, "x" * 1000, "slow", content_type="video")

        assert response.original_size == pytest.approx(500)
        assert response.compressed_size == pytest.approx(150)

    def test_compressed_size_follows_ratio(self, model):
        for bandwidth, policy in COMPRESSION_POLICIES.items():
            response = _compress(model, SEVEN_SENTENCES, bandwidth)

            assert response.compressed_size == pytest.approx(response.original_size * policy.ratio)

    def test_metadata(self, model):
        metadata = _compress(model, "A.", "fast").metadata

        assert metadata.confidence == 0.94
        assert metadata.model_version == "1.0.0"


class TestQuality:
    @pytest.mark.parametrize(
        "bandwidth,ratio,expected",
        [
            ("fast", 1.0, "high"),
            ("fast", 0.8, "low"),
            ("medium", 0.6, "medium"),
            ("medium", 0.5, "low"),
            ("slow", 0.9, "low"),
        ],
    )
    def test_determine_quality(self, bandwidth, ratio, expected):
        assert determine_quality(bandwidth, ratio) == expected
