"""Pytest configuration and fixtures."""

import os

import pytest

from pagenav.events import EventBus


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and config lookup for each test.

    This prevents test pollution where one test's environment
    or a developer's own config file affects other tests.
    """
    original_env = os.environ.copy()
    for name in ("PAGENAV_PAGE_LENGTH", "PAGENAV_NAVIGATOR", "PAGENAV_THEME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def event_bus():
    """Fresh event bus."""
    return EventBus()


@pytest.fixture
def recorder(event_bus):
    """Record every event type published on the event bus."""
    from pagenav.events import EventType

    received = []
    for event_type in EventType:
        event_bus.subscribe(event_type, received.append)
    return received
