"""Pagination and navigation engine.

Keeps a page or item position consistent with a bounded, changing
collection, derives control enablement from it, and coordinates page
refreshes with an asynchronous data source.
"""

__version__ = "0.1.0"

from pagenav.core import (
    ControlState,
    DomainError,
    FetchRequest,
    FetchResult,
    FetchStateError,
    InvalidConfigurationError,
    Navigator,
    NavigatorKind,
    PageIndexList,
    PagerError,
    PageState,
    PageStatus,
    RandomAccessNavigator,
    ResultShape,
    SequentialAccessNavigator,
    create_navigator,
    run_if_valid,
)
from pagenav.events import Event, EventBus, EventType
from pagenav.fetch import FetchTicket, PagedFetchController

__all__ = [
    "__version__",
    "ControlState",
    "DomainError",
    "Event",
    "EventBus",
    "EventType",
    "FetchRequest",
    "FetchResult",
    "FetchStateError",
    "FetchTicket",
    "InvalidConfigurationError",
    "Navigator",
    "NavigatorKind",
    "PageIndexList",
    "PageState",
    "PageStatus",
    "PagedFetchController",
    "PagerError",
    "RandomAccessNavigator",
    "ResultShape",
    "SequentialAccessNavigator",
    "create_navigator",
    "run_if_valid",
]
