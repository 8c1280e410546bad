"""Pytest fixtures for Legal Review tests."""

import pytest
from datetime import datetime

from legal_review import config


ENV_VARS = (
    "API_TOKEN",
    "LEGAL_RESEARCH_API_URL",
    "LEGAL_REVIEW_TIMEOUT",
    "LEGAL_REVIEW_MAX_RETRIES",
    "LEGAL_REVIEW_FORMAT",
    "LEGAL_REVIEW_SENDER",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the caller's environment and cached settings."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    yield
    config._settings = None


@pytest.fixture
def generated_at() -> datetime:
    """Fixed report timestamp."""
    return datetime(2026, 1, 2, 15, 4, 5)


@pytest.fixture
def sample_markdown() -> str:
    """Research answer with a heading, emphasis and a link."""
    return (
        "# Heading\n\n"
        "Some *italic* and **bold** text with [a link](http://x.test)."
    )


@pytest.fixture
def research_answer() -> str:
    """Longer research answer resembling the API's output."""
    return (
        "## Summary\n\n"
        "The court in [Smith v. Jones](http://example.com/case) held that "
        "verbal agreements can be binding.\n\n\n"
        "A. Formation. B. Consideration.\n\n"
        "- Offer and acceptance\n"
        "- Mutual assent\n\n"
        "1. Review the record\n"
        "2. File the motion"
    )
