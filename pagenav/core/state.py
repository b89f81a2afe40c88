"""Bounded page position and the enablement policy derived from it.

A PageState holds the current page number, the page length, an optional
known maximum and a ``changed`` flag. Every page assignment, maximum
assignment or step is checked against the validity policy:

- the effective maximum is ``max`` when known, ``page + 1`` otherwise,
  so an unknown ceiling never invalidates the page or disables "next";
- a page is valid when ``1 <= page <= effective max``;
- prev/next enablement is recomputed both for valid and invalid pages.

Invalid pages are a steady state, not an error: they are reported through
the ``on_invalid_page`` callback and the ``PAGE_REJECTED`` event.

The boundary operations (first, last, only, other) are used once a fetch
completes. They reassign the whole state at once and fire no callback.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pagenav.events import EventBus, EventPublisher, EventType

from .exceptions import InvalidConfigurationError
from .models import ControlState, PageStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageCallback = Callable[["PageState"], None]


def _effective_max(page: int | None, max_page: int | None) -> int | None:
    if max_page is not None:
        return max_page
    return None if page is None else page + 1


def _enablement(page: int | None, max_page: int | None) -> tuple[bool, bool, bool]:
    """Apply the validity policy.

    Returns:
        Tuple of (valid, prev_enabled, next_enabled)
    """
    effective_max = _effective_max(page, max_page)
    if page is None or effective_max is None:
        return False, False, False

    if 1 <= page <= effective_max:
        return True, page != 1, page != effective_max

    return False, page > 1, page < effective_max


class PageState(EventPublisher):
    """Current page of a paginated view, with control enablement."""

    def __init__(
        self,
        page_length: int = 10,
        page: int | None = 1,
        max: int | None = None,
        on_valid_page: PageCallback | None = None,
        on_invalid_page: PageCallback | None = None,
        event_bus: EventBus | None = None,
    ):
        """Initialize page state.

        Controls start disabled: they get enabled by the first validation
        or boundary operation, typically after the first fetch.

        Args:
            page_length: Items per page
            page: Initial page number
            max: Initial known last page, None when unknown
            on_valid_page: Called with this state when a page is accepted
            on_invalid_page: Called with this state when a page is rejected
            event_bus: Bus receiving state events
        """
        super().__init__(event_bus)
        self.page_length = page_length
        self._check_max(max)

        self._page = page
        self._max = max
        self.changed = False
        self.prev_enabled = False
        self.next_enabled = False
        self.page_enabled = False

        self.on_valid_page = on_valid_page
        self.on_invalid_page = on_invalid_page

    # Properties

    @property
    def page(self) -> int | None:
        """Get the current page number."""
        return self._page

    @page.setter
    def page(self, value: int | None) -> None:
        self.go_to(value)

    @property
    def max(self) -> int | None:
        """Get the known last page, None when unknown."""
        return self._max

    @max.setter
    def max(self, value: int | None) -> None:
        self._check_max(value)
        self._max = value
        self._check()

    @property
    def page_length(self) -> int:
        """Get the number of items per page."""
        return self._page_length

    @page_length.setter
    def page_length(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise InvalidConfigurationError(
                "page_length", f"must be a positive integer, got {value!r}"
            )
        self._page_length = value

    @property
    def effective_max(self) -> int | None:
        """Get the upper bound used for validity checks."""
        return _effective_max(self._page, self._max)

    @property
    def status(self) -> PageStatus:
        """Get the position of the current page within the collection."""
        if not self.is_valid():
            return PageStatus.INVALID
        if self._page == self._max:
            return PageStatus.ONLY if self._page == 1 else PageStatus.LAST
        if self._page == 1:
            return PageStatus.FIRST
        return PageStatus.INTERIOR

    def is_valid(self) -> bool:
        """Check the current page against the validity policy, without side effects."""
        return _enablement(self._page, self._max)[0]

    def page_number(self) -> int | None:
        """Get the current page number."""
        return self._page

    # Transitions

    def go_to(self, page: int | None) -> bool:
        """Assign the page number and validate it.

        Returns:
            True if the page is valid
        """
        self._page = page
        return self._check()

    def step_up(self, step: int = 1) -> bool:
        """Advance the page, as the "next" control does.

        The page does not move past a known maximum; it is validated anyway.

        Returns:
            True if the resulting page is valid
        """
        if self._page is None:
            target = 1
        else:
            target = self._page + step
            if self._max is not None and target > self._max:
                target = self._page
        return self.go_to(target)

    def step_down(self, step: int = 1) -> bool:
        """Move the page back, as the "prev" control does.

        The page does not move below 1; it is validated anyway.

        Returns:
            True if the resulting page is valid
        """
        target = self._page
        if target is not None and target - step >= 1:
            target -= step
        return self.go_to(target)

    def validate(self) -> bool:
        """Re-run the validity policy on the current values.

        Enablement is recomputed, callbacks fire and a valid page is marked
        as changed, so the next request asks for it.

        Returns:
            True if the page is valid
        """
        return self._check()

    def reset_changed(self) -> None:
        """Clear the changed flag, once a fetch consumed it."""
        self.changed = False

    # Boundary operations

    def first(self) -> None:
        """Set the state to the first page of an unknown number of pages."""
        self._page = 1
        self._max = None
        self.prev_enabled = False
        self.page_enabled = True
        self.next_enabled = True
        self._state_changed()

    def last(self, page: int | None = None) -> None:
        """Freeze the given page, or the current one, as the last one."""
        if page is not None:
            self._page = page
        self._max = self._page
        self.prev_enabled = True
        self.page_enabled = True
        self.next_enabled = False
        self._state_changed()

    def only(self) -> None:
        """Set the state to the only page: every control is disabled."""
        self._page = 1
        self._max = 1
        self.prev_enabled = False
        self.page_enabled = False
        self.next_enabled = False
        self._state_changed()

    def other(self, page: int | None = None) -> None:
        """Set the state to the given page, or keep the current one.

        The maximum is left untouched and enablement follows the validity
        policy.
        """
        if page is not None:
            self._page = page
        _, self.prev_enabled, self.next_enabled = _enablement(self._page, self._max)
        self.page_enabled = True
        self._state_changed()

    to_first = first
    to_last = last
    to_only = only
    to_other = other

    # Guards

    def run_if_valid(self, action: Callable[..., T], *args, **kwargs) -> T | None:
        """Run ``action`` only if the current page is valid."""
        return run_if_valid(self, action, *args, **kwargs)

    def snapshot(self) -> ControlState:
        """Get an immutable snapshot of this state."""
        valid, _, _ = _enablement(self._page, self._max)
        return ControlState(
            page=self._page,
            max=self._max,
            page_length=self._page_length,
            changed=self.changed,
            valid=valid,
            status=self.status,
            prev_enabled=self.prev_enabled,
            next_enabled=self.next_enabled,
            page_enabled=self.page_enabled,
        )

    # Internals

    @staticmethod
    def _check_max(value: int | None) -> None:
        if value is not None and (not isinstance(value, int) or value < 1):
            raise InvalidConfigurationError(
                "max", f"must be None or an integer >= 1, got {value!r}"
            )

    def _check(self) -> bool:
        valid, self.prev_enabled, self.next_enabled = _enablement(
            self._page, self._max
        )

        if valid:
            self.changed = True
            logger.debug(f"Page {self._page} accepted (max={self._max})")
            if self.on_valid_page:
                self.on_valid_page(self)
            self._publish_event(EventType.PAGE_ACCEPTED, page=self._page)
        else:
            logger.debug(f"Page {self._page} rejected (max={self._max})")
            if self.on_invalid_page:
                self.on_invalid_page(self)
            self._publish_event(EventType.PAGE_REJECTED, page=self._page)

        self._state_changed()
        return valid

    def _state_changed(self) -> None:
        self._publish_event(
            EventType.STATE_CHANGED, page=self._page, state=self.snapshot()
        )

    def __repr__(self) -> str:
        return (
            f"PageState(page={self._page!r}, max={self._max!r}, "
            f"page_length={self._page_length}, changed={self.changed})"
        )


def run_if_valid(
    state: PageState, action: Callable[..., T], *args: Any, **kwargs: Any
) -> T | None:
    """Validate ``state`` and run ``action`` only when its page is valid.

    Args:
        state: Page state to check
        action: Callable run when the page is valid
        *args: Positional arguments for action
        **kwargs: Keyword arguments for action

    Returns:
        The action's result, None if the page is invalid
    """
    if state.validate():
        return action(*args, **kwargs)
    return None
