"""
Unit tests for adaptation models: TaggedContent, size estimates and
snapshot merging.
"""

import pytest
from pydantic import ValidationError

from contextual_ai.adaptation.models import (
    OFFLINE_STORAGE_MULTIPLIERS,
    LowBandwidthRequest,
    TaggedContent,
    estimate_size,
)
from contextual_ai.engines.models import (
    PersonalData,
    PersonalDataUpdate,
    default_personal_data,
    merge_snapshot,
)


class TestTaggedContent:
    def test_untagged_renders_body(self):
        assert TaggedContent("Hello").render() == "Hello"

    def test_latest_tag_renders_first(self):
        content = TaggedContent("Hello").tag("A").tag("B")

        assert content.tags == ["B", "A"]
        assert str(content) == "[B] [A] Hello"

    def test_has(self):
        content = TaggedContent("Hello").tag("COMPRESSED")

        assert content.has("COMPRESSED")
        assert not content.has("OPTIMIZED")


class TestEstimateSize:
    def test_unknown_type_uses_text_baseline(self):
        assert estimate_size("x" * 100, "hologram", OFFLINE_STORAGE_MULTIPLIERS) == pytest.approx(0.1)

    def test_empty_content(self):
        assert estimate_size("", "video", OFFLINE_STORAGE_MULTIPLIERS) == 0


class TestRequestValidation:
    def test_camel_case_input(self):
        request = LowBandwidthRequest.model_validate(
            {"content": "x", "contentType": "video", "bandwidth": "slow"}
        )

        assert request.content_type == "video"
        assert request.context is None

    def test_missing_fields_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            LowBandwidthRequest.model_validate({"content": "x"})

        missing = {err["loc"][0] for err in exc_info.value.errors() if err["type"] == "missing"}
        assert missing == {"contentType", "bandwidth"}


class TestMergeSnapshot:
    def test_none_sections_ignored(self):
        current = default_personal_data()

        merged = merge_snapshot(current, {"learning": None})

        assert merged == current

    def test_update_model_only_applies_set_fields(self):
        current = default_personal_data()
        update = PersonalDataUpdate(behavior=current.behavior.model_copy(update={"completion_rate": 10}))

        merged = merge_snapshot(current, update)

        assert isinstance(merged, PersonalData)
        assert merged.behavior.completion_rate == 10
        assert merged.learning == current.learning

    def test_original_not_mutated(self):
        current = default_personal_data()

        merge_snapshot(current, {"accessibility": {"visualImpairment": True}})

        assert current.accessibility.visual_impairment is False
