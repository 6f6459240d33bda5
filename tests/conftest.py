"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import os
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# In-memory database, no log file
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (in-process API)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "smoke" in path:
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def ai_engine(fixed_clock, seeded_rng):
    """Fresh AIEngine with default snapshots and deterministic ids."""
    from contextual_ai.adaptation import AdvancedAdaptationService
    from contextual_ai.ai_engine import AIEngine

    return AIEngine(
        adaptation_service=AdvancedAdaptationService(clock=fixed_clock),
        rng=seeded_rng,
        clock=fixed_clock,
    )


@pytest.fixture
def offline_context():
    """Connectivity fragment for a learner with no connection."""
    return {"connectivity": {"type": "offline", "speed": "slow", "isOnline": False}}


@pytest.fixture
def sample_behavior():
    """A steady, mid-range learner."""
    return {
        "attentionSpan": 30,
        "completionRate": 75,
        "interactionFrequency": 5,
        "preferredFormat": "text",
        "learningPace": "medium",
    }
