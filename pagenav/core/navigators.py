"""Navigation policies built on circular index arithmetic.

Two mutually exclusive policies are provided:

- RandomAccessNavigator: for collections where pages are fixed, i.e. the
  first item of each page always has the same index. Any page can be
  jumped to, and prev/next move by one page.
- SequentialAccessNavigator: for collections where page boundaries are not
  fixed. Moves are sequential only, either by one item or by a whole page
  length (rewind and fast forward).

Both wrap around at the collection ends. Counts and page length belong to
the caller and are supplied through ``bind``; the navigator only owns its
position.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any

from pagenav.events import EventBus, EventPublisher, EventType

from . import circular
from .exceptions import InvalidConfigurationError
from .pages import PageIndexList

logger = logging.getLogger(__name__)


class NavigatorKind(Enum):
    """Available navigation policies."""

    RANDOM = "random"
    SEQUENTIAL = "sequential"


class Navigator(EventPublisher, ABC):
    """Common interface of the navigation policies."""

    def __init__(
        self,
        items_count: int = 0,
        page_length: int = 10,
        event_bus: EventBus | None = None,
    ):
        super().__init__(event_bus)
        self.items_count = 0
        self.page_length = 10
        self.bind(items_count, page_length)

    def bind(self, items_count: int, page_length: int) -> "Navigator":
        """Supply the current item count and page length.

        Returns:
            This navigator
        """
        if page_length <= 0:
            raise InvalidConfigurationError(
                "page_length", f"must be a positive integer, got {page_length!r}"
            )
        if items_count < 0:
            raise InvalidConfigurationError(
                "items_count", f"must not be negative, got {items_count!r}"
            )
        self.items_count = items_count
        self.page_length = page_length
        return self

    def is_paginable(self) -> bool:
        """Check if the items make up at least two pages."""
        return self.items_count > self.page_length

    @property
    @abstractmethod
    def position(self) -> int:
        """Get the current position."""

    @abstractmethod
    def prev(self) -> "Navigator":
        """Move back by one step."""

    @abstractmethod
    def next(self) -> "Navigator":
        """Move forward by one step."""

    @abstractmethod
    def go_to(self, position: int) -> "Navigator":
        """Move to the given position, wrapping when out of range."""


class RandomAccessNavigator(Navigator):
    """Navigator over fixed pages, able to jump to any page."""

    kind = NavigatorKind.RANDOM

    def __init__(
        self,
        items_count: int = 0,
        page_length: int = 10,
        current_page: int = 1,
        on_page_change: Callable[[int], Any] | None = None,
        event_bus: EventBus | None = None,
    ):
        """Initialize the navigator.

        Args:
            items_count: Number of items being paginated
            page_length: Items per page
            current_page: Initial page (1-based)
            on_page_change: Called with the new page after each move
            event_bus: Bus receiving PAGE_CHANGED events
        """
        self._pages = PageIndexList()
        self.current_page = current_page
        super().__init__(items_count, page_length, event_bus)
        self.on_page_change = on_page_change

    def bind(self, items_count: int, page_length: int) -> "RandomAccessNavigator":
        """Supply the item count and page length, keeping the page in range.

        A page past a shrunk page list moves to the new last page.
        """
        super().bind(items_count, page_length)
        self._pages.recompute(items_count, page_length)
        if self.pages_count and self.current_page > self.pages_count:
            self.current_page = self.pages_count
        return self

    @property
    def pages(self) -> list[int]:
        """Get the page numbers, for page selectors."""
        return self._pages.pages

    @property
    def pages_count(self) -> int:
        """Get the number of pages."""
        return len(self._pages)

    @property
    def position(self) -> int:
        return self.current_page

    # Page numbers are 1-based, circular arithmetic is 0-based

    def prev(self) -> "RandomAccessNavigator":
        """Move to the previous page, wrapping from the first to the last."""
        return self._move_to(
            circular.move_back_by_one(self.current_page - 1, self.pages_count) + 1
        )

    def next(self) -> "RandomAccessNavigator":
        """Move to the next page, wrapping from the last to the first."""
        return self._move_to(
            circular.move_forward_by_one(self.current_page - 1, self.pages_count) + 1
        )

    def go_to(self, position: int) -> "RandomAccessNavigator":
        """Jump to the given 1-based page."""
        return self._move_to(
            circular.set_position(position - 1, self.pages_count) + 1
        )

    def _move_to(self, page: int) -> "RandomAccessNavigator":
        self.current_page = page
        logger.debug(f"Page changed to {page} of {self.pages_count}")
        if self.on_page_change:
            self.on_page_change(page)
        self._publish_event(EventType.PAGE_CHANGED, page=page)
        return self


class SequentialAccessNavigator(Navigator):
    """Navigator moving by single items or by page length strides."""

    kind = NavigatorKind.SEQUENTIAL

    def __init__(
        self,
        items_count: int = 0,
        page_length: int = 10,
        current_item: int = 0,
        on_item_change: Callable[[int], Any] | None = None,
        event_bus: EventBus | None = None,
    ):
        """Initialize the navigator.

        Args:
            items_count: Number of items being paginated
            page_length: Items per page, used as stride
            current_item: Initial item (0-based)
            on_item_change: Called with the new item after each move
            event_bus: Bus receiving ITEM_CHANGED events
        """
        self.current_item = current_item
        super().__init__(items_count, page_length, event_bus)
        self.on_item_change = on_item_change

    def bind(self, items_count: int, page_length: int) -> "SequentialAccessNavigator":
        super().bind(items_count, page_length)
        if items_count and self.current_item >= items_count:
            self.current_item = items_count - 1
        return self

    @property
    def position(self) -> int:
        return self.current_item

    def prev(self) -> "SequentialAccessNavigator":
        """Move back by one item."""
        return self._move_to(
            circular.move_back_by_one(self.current_item, self.items_count)
        )

    def next(self) -> "SequentialAccessNavigator":
        """Move forward by one item."""
        return self._move_to(
            circular.move_forward_by_one(self.current_item, self.items_count)
        )

    def rewind(self) -> "SequentialAccessNavigator":
        """Move back by a page length worth of items."""
        return self._move_to(
            circular.move_back_by_many(
                self.page_length, self.current_item, self.items_count
            )
        )

    def fast_forward(self) -> "SequentialAccessNavigator":
        """Move forward by a page length worth of items."""
        return self._move_to(
            circular.move_forward_by_many(
                self.page_length, self.current_item, self.items_count
            )
        )

    def go_to(self, position: int) -> "SequentialAccessNavigator":
        """Move to the given 0-based item."""
        return self._move_to(circular.set_position(position, self.items_count))

    def _move_to(self, item: int) -> "SequentialAccessNavigator":
        self.current_item = item
        logger.debug(f"Item changed to {item} of {self.items_count}")
        if self.on_item_change:
            self.on_item_change(item)
        self._publish_event(EventType.ITEM_CHANGED, item=item)
        return self


def create_navigator(kind: NavigatorKind | str, **kwargs) -> Navigator:
    """Create a navigator for the given policy.

    Args:
        kind: Navigation policy, as enum member or value
        **kwargs: Constructor arguments of the navigator class

    Returns:
        New navigator instance
    """
    try:
        kind = NavigatorKind(kind)
    except ValueError:
        raise InvalidConfigurationError(
            "navigator", f"unknown kind {kind!r}, expected 'random' or 'sequential'"
        ) from None

    if kind is NavigatorKind.RANDOM:
        return RandomAccessNavigator(**kwargs)
    return SequentialAccessNavigator(**kwargs)
