"""conftest.py for benchmarks.

Provides a shared record collection and silences the engine's debug events
so that timings measure the query work rather than log rendering.
"""

from __future__ import annotations

import logging

import pytest
import structlog


@pytest.fixture(scope="session", autouse=True)
def quiet_structlog():
    """Drop debug events for the whole benchmark session."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def records() -> list[dict]:
    """10 000 product-like records; every third name contains ``widget``."""
    return [
        {
            "id": i,
            "name": f"widget-{i:05d}" if i % 3 == 0 else f"gadget-{i:05d}",
            "price": (i * 7919) % 1000,
            "active": i % 2 == 0,
        }
        for i in range(10_000)
    ]
