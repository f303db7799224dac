"""
Shared fixtures for the compiler tests.

Run with: pytest tests/ -v
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from specs import AgentConfig, agent_from_record


SCREENER_RECORD = {
    "name": "Screener",
    "jobDetails": {"title": "Backend Engineer", "description": "Builds APIs"},
    "pillars": ["experience", "behavioral"],
    "questions": ["Tell me about a past project.", "How do you handle conflict?"],
    "persona": "formal",
    "prompt": "",
}


@pytest.fixture
def screener_record():
    return {**SCREENER_RECORD, "jobDetails": dict(SCREENER_RECORD["jobDetails"])}


@pytest.fixture
def make_agent(screener_record):
    """Build an AgentConfig from the screener record with overrides applied."""

    def _make(**overrides) -> AgentConfig:
        return agent_from_record({**screener_record, **overrides})

    return _make
