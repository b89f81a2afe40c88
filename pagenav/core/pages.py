"""Page numbers list for page selectors.

The list is recomputed every time the item count or the page length
changes, so the work done is kept proportional to what actually changed:
same page count returns the previous list object, growth appends to it,
and only a shrink builds a new list.
"""

import logging

from .exceptions import DomainError

logger = logging.getLogger(__name__)


def pages_count(item_count: int, page_length: int) -> int:
    """Get the number of pages needed for ``item_count`` items.

    The integer division remainder forms the last, not always full, page.

    Raises:
        DomainError: If page_length is not positive
    """
    if page_length <= 0:
        raise DomainError(page_length, f"Page length must be positive, got {page_length}")
    return max(0, -(-item_count // page_length))


def recompute(previous: list[int], item_count: int, page_length: int) -> list[int]:
    """Recompute the page numbers list.

    Args:
        previous: List returned by the previous call, ``[]`` the first time
        item_count: Number of items being paginated
        page_length: Items per page

    Returns:
        ``previous`` itself when the page count did not change or grew
        (extended in place), a new ``[1..N]`` list when it shrank
    """
    count = pages_count(item_count, page_length)

    if count == len(previous):
        return previous

    if count < len(previous):
        # A different set of items is being paginated
        logger.debug(f"Rebuilding page list: {len(previous)} -> {count} pages")
        return list(range(1, count + 1))

    previous.extend(range(len(previous) + 1, count + 1))
    return previous


class PageIndexList:
    """Cached page numbers list for one paginated view."""

    def __init__(self, item_count: int = 0, page_length: int = 10):
        """Initialize the list.

        Args:
            item_count: Initial number of items
            page_length: Initial items per page
        """
        self._pages: list[int] = []
        self.recompute(item_count, page_length)

    @property
    def pages(self) -> list[int]:
        """Get the current page numbers."""
        return self._pages

    def recompute(self, item_count: int, page_length: int) -> bool:
        """Recompute the cached list.

        Returns:
            True if the page numbers changed
        """
        before = len(self._pages)
        self._pages = recompute(self._pages, item_count, page_length)
        return len(self._pages) != before

    def is_paginable(self) -> bool:
        """Check if there is at least one page."""
        return bool(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self):
        return iter(self._pages)

    def __contains__(self, page: object) -> bool:
        return isinstance(page, int) and 1 <= page <= len(self._pages)
