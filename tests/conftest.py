"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time and require these values
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("SESSION_SECRET", "test-session-secret-with-enough-length-for-hs256")

import pytest  # noqa: E402

from editsync.domain.auth.models import UserIdentity  # noqa: E402


@pytest.fixture
def test_identity() -> UserIdentity:
    """Identity of the configured account."""
    return UserIdentity(id="1", name="Test User", email="test@editsync.com")
