"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

from tests.helpers import ExecutionTracker, Logger, MetricsTracker


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Library logs at debug level only; make those records visible to tests."""
    caplog.set_level(logging.DEBUG, logger="fallible")
    return caplog


@pytest.fixture
def tracker() -> ExecutionTracker:
    return ExecutionTracker()


@pytest.fixture
def logger() -> Logger:
    return Logger()


@pytest.fixture
def metrics() -> MetricsTracker:
    return MetricsTracker()
