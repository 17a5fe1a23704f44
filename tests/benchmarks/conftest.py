"""Benchmark inputs and pytest-benchmark hooks.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Tag saved benchmark runs with the project name."""
    output_json["project"] = "seqparse"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def long_digit_run() -> bytes:
    """10,000 ASCII digits, for repetition throughput."""
    return b"7" * 10_000


@pytest.fixture(scope="session")
def comma_list() -> str:
    """1,000 single-letter items separated by commas."""
    return ",".join("abc"[i % 3] for i in range(1_000))
