"""Value types exchanged between the pagination engine and its collaborators.

Key components:
- PageStatus: where the current page sits within the collection
- ControlState: immutable snapshot of a PageState, for rendering adapters
- FetchRequest: page and page length sent along with a data request
- ResultShape, FetchResult: classification of a data response
"""

import enum
from collections.abc import Mapping, Sequence
from typing import Any

import msgspec


class PageStatus(enum.Enum):
    """Position of the current page within the collection."""

    INVALID = "invalid"
    FIRST = "first"
    INTERIOR = "interior"
    LAST = "last"
    ONLY = "only"

    @property
    def is_valid(self) -> bool:
        """Check if the status denotes a valid page."""
        return self is not PageStatus.INVALID


class ControlState(msgspec.Struct, frozen=True, kw_only=True):
    """Snapshot of page state and derived control enablement."""

    page: int | None
    max: int | None
    page_length: int
    changed: bool
    valid: bool
    status: PageStatus
    prev_enabled: bool
    next_enabled: bool
    page_enabled: bool


class FetchRequest(msgspec.Struct, frozen=True, kw_only=True):
    """Page request handed to the external transport."""

    page: int
    page_length: int
    params: dict[str, Any] = msgspec.field(default_factory=dict)

    def to_params(self) -> dict[str, Any]:
        """Get the caller's parameters with ``page`` and ``pageLength`` appended."""
        result = dict(self.params)
        result["page"] = self.page
        result["pageLength"] = self.page_length
        return result


class ResultShape(enum.Enum):
    """Shape of a data response."""

    SCALAR = "scalar"
    COLLECTION = "collection"


class FetchResult(msgspec.Struct, frozen=True, kw_only=True):
    """Classification of a data response used to infer boundary state."""

    shape: ResultShape
    size: int

    @classmethod
    def from_response(cls, data: Any) -> "FetchResult":
        """Classify a decoded response.

        Keyed or indexed collections are sized by their length, ``None``
        counts as an empty collection, and anything else, strings included,
        is a one-element page.
        """
        if data is None:
            return cls(shape=ResultShape.COLLECTION, size=0)
        if isinstance(data, Mapping) or (
            isinstance(data, Sequence) and not isinstance(data, (str, bytes))
        ):
            return cls(shape=ResultShape.COLLECTION, size=len(data))
        return cls(shape=ResultShape.SCALAR, size=1)

    def is_short(self, page_length: int) -> bool:
        """Check if the result holds less than a full page."""
        return self.size < page_length
