"""Core pagination engine: circular arithmetic, page lists, state and navigators."""

from pagenav.core import circular
from pagenav.core.exceptions import (
    DomainError,
    FetchStateError,
    InvalidConfigurationError,
    PagerError,
)
from pagenav.core.models import (
    ControlState,
    FetchRequest,
    FetchResult,
    PageStatus,
    ResultShape,
)
from pagenav.core.navigators import (
    Navigator,
    NavigatorKind,
    RandomAccessNavigator,
    SequentialAccessNavigator,
    create_navigator,
)
from pagenav.core.pages import PageIndexList, pages_count, recompute
from pagenav.core.state import PageState, run_if_valid

__all__ = [
    "circular",
    "ControlState",
    "DomainError",
    "FetchRequest",
    "FetchResult",
    "FetchStateError",
    "InvalidConfigurationError",
    "Navigator",
    "NavigatorKind",
    "PageIndexList",
    "PageState",
    "PageStatus",
    "PagerError",
    "RandomAccessNavigator",
    "ResultShape",
    "SequentialAccessNavigator",
    "create_navigator",
    "pages_count",
    "recompute",
    "run_if_valid",
]
