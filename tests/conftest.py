"""Pytest configuration for the SpinField test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback, derandomized)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from spinfield.parsing import LocaleDescriptor
from spinfield.spinbutton import VirtualScheduler
from tests.fakes import RecordingAnnouncer, RecordingInput

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile from the environment.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev"
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_descriptor_cache() -> Iterator[None]:
    """Isolate tests from descriptors cached by earlier tests."""
    LocaleDescriptor.clear_cache()
    yield
    LocaleDescriptor.clear_cache()


@pytest.fixture
def scheduler() -> VirtualScheduler:
    """Virtual clock starting at 0 ms."""
    return VirtualScheduler()


@pytest.fixture
def announcer() -> RecordingAnnouncer:
    """Live-region sink that records announcements."""
    return RecordingAnnouncer()


@pytest.fixture
def text_input() -> RecordingInput:
    """Text field that counts select-all requests."""
    return RecordingInput()
