"""Shared fixtures for core module tests."""

from unittest.mock import Mock

import pytest

from pagenav.core.state import PageState


@pytest.fixture
def callbacks():
    """Mocks for the valid and invalid page callbacks."""
    return Mock(name="on_valid_page"), Mock(name="on_invalid_page")


@pytest.fixture
def state(callbacks, event_bus):
    """Page state with page length 10, callbacks and an event bus."""
    on_valid, on_invalid = callbacks
    return PageState(
        page_length=10,
        on_valid_page=on_valid,
        on_invalid_page=on_invalid,
        event_bus=event_bus,
    )
