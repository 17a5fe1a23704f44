"""Shared pytest setup for seqparse.

Hypothesis profiles (max_examples is set here and nowhere else):
    dev      500 examples, random seed; the default on a workstation
    ci       50 examples, derandomized so failures reproduce between runs
    verbose  100 examples with per-example output

The profile is chosen from HYPOTHESIS_PROFILE when it names one of the
above, else "ci" when CI=true, else "dev".

Tests marked ``@pytest.mark.fuzz`` (differential lexer fuzzing under
tests/fuzz) are skipped unless selected with ``pytest -m fuzz``.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=500, phases=_ALL_PHASES)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_ALL_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_ALL_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog with every seqparse logger lowered to DEBUG."""
    caplog.set_level(logging.DEBUG, logger="seqparse")
    return caplog


# =============================================================================
# FUZZ SELECTION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless the -m expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
