"""Fetch coordination for paginated views."""

from pagenav.fetch.controller import (
    AsyncTransport,
    FetchTicket,
    PagedFetchController,
    Transport,
)

__all__ = ["AsyncTransport", "FetchTicket", "PagedFetchController", "Transport"]
