"""Pytest configuration and fixtures for splitjoin testing."""

import os
import sys
from collections.abc import Generator

import pytest
from hypothesis import HealthCheck, settings
from loguru import logger

# The autouse fixtures below are function scoped; they hold no state that
# hypothesis examples could share.
settings.register_profile(
    "splitjoin", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("splitjoin")


@pytest.fixture(autouse=True)
def isolated_logging() -> Generator[None, None, None]:
    """
    Give every test a fresh stderr sink.

    The CLI reconfigures loguru against whatever stream is ``sys.stderr``
    during ``CliRunner.invoke``; those streams are closed once the run
    finishes, so handlers must not leak into the next test.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SPLITJOIN_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("SPLITJOIN_"):
            monkeypatch.delenv(name)
