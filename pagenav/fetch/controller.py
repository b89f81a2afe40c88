"""Coordination between page state and an external data source.

The controller encodes the current page into a request and, once the
response arrives, infers the new boundary state from its size relative to
the page length. The true item count is never known: a full page means
more pages probably exist, a short one means this was the last page.

Requests are serialized per view through tickets. Only the most recent
ticket may complete; responses for superseded tickets are discarded, so the
last request always wins.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import msgspec

from pagenav.core.exceptions import FetchStateError
from pagenav.core.models import FetchRequest, FetchResult, PageStatus, ResultShape
from pagenav.core.state import PageState
from pagenav.events import EventBus, EventPublisher, EventType

logger = logging.getLogger(__name__)

Transport = Callable[[dict[str, Any]], Any]
AsyncTransport = Callable[[dict[str, Any]], Awaitable[Any]]


class FetchTicket(msgspec.Struct, frozen=True):
    """Handle of an issued request."""

    sequence: int
    request: FetchRequest


class PagedFetchController(EventPublisher):
    """Drives a PageState from data requests and their responses."""

    def __init__(
        self,
        state: PageState,
        on_rows: Callable[[Any], Any] | None = None,
        params: dict[str, Any] | None = None,
        event_bus: EventBus | None = None,
    ):
        """Initialize the controller.

        Args:
            state: Page state of the view
            on_rows: Called with each applied response, before the
                boundary state is updated
            params: Request parameters sent with every request
            event_bus: Bus receiving fetch events, defaults to the state's
        """
        super().__init__(event_bus if event_bus is not None else state.event_bus)
        self.state = state
        self.on_rows = on_rows
        self.params = dict(params or {})
        self.last_request: FetchRequest | None = None
        self._sequence = 0
        self._pending: int | None = None

    @property
    def pending(self) -> bool:
        """Check if a request is waiting for its response."""
        return self._pending is not None

    # Request and response policy

    def build_request(self, params: dict[str, Any] | None = None) -> FetchRequest:
        """Encode the current page into a request.

        The page is only sent when the user changed it since the previous
        request; otherwise the request starts over from page 1. The changed
        flag is consumed.

        Args:
            params: Extra parameters, merged over the controller's ones
        """
        state = self.state
        page = state.page if state.changed and state.page is not None else 1
        state.reset_changed()

        request = FetchRequest(
            page=page,
            page_length=state.page_length,
            params={**self.params, **(params or {})},
        )
        self.last_request = request
        return request

    @staticmethod
    def classify(data: Any) -> FetchResult:
        """Classify a decoded response."""
        return FetchResult.from_response(data)

    def apply_result(self, request: FetchRequest, result: FetchResult) -> PageStatus:
        """Infer the boundary state from a response.

        Args:
            request: Request the response answers
            result: Classified response

        Returns:
            Status of the page after the update
        """
        state = self.state
        first_page = request.page == 1

        if result.shape is ResultShape.SCALAR:
            # A one-element page
            if first_page:
                state.only()
            else:
                state.last(request.page)
        elif first_page:
            if result.is_short(request.page_length):
                state.only()
            else:
                state.first()
        elif result.is_short(request.page_length):
            state.last(request.page)
        else:
            state.other(request.page)

        status = state.status
        logger.debug(
            f"Applied {result.shape.value} of size {result.size} "
            f"for page {request.page}: {status.value}"
        )
        return status

    # Ticketing

    def begin(self, params: dict[str, Any] | None = None) -> FetchTicket:
        """Issue a request, superseding any one still in flight."""
        if self._pending is not None:
            logger.debug(f"Request #{self._pending} superseded")

        self._sequence += 1
        ticket = FetchTicket(
            sequence=self._sequence, request=self.build_request(params)
        )
        self._pending = ticket.sequence
        self._publish_event(
            EventType.FETCH_STARTED,
            page=ticket.request.page,
            sequence=ticket.sequence,
        )
        return ticket

    def complete(self, ticket: FetchTicket, data: Any) -> PageStatus | None:
        """Apply the response to a ticket.

        Returns:
            Status of the page, None if the ticket was superseded

        Raises:
            FetchStateError: If the ticket was not issued by this controller
        """
        if ticket.sequence > self._sequence or ticket.sequence < 1:
            raise FetchStateError(f"Unknown fetch ticket #{ticket.sequence}")

        if ticket.sequence != self._pending:
            logger.warning(
                f"Discarding stale response for request #{ticket.sequence} "
                f"(page {ticket.request.page})"
            )
            self._publish_event(
                EventType.FETCH_DISCARDED,
                page=ticket.request.page,
                sequence=ticket.sequence,
            )
            return None

        self._pending = None
        if self.on_rows:
            self.on_rows(data)

        status = self.apply_result(ticket.request, self.classify(data))
        self._publish_event(
            EventType.FETCH_APPLIED,
            page=self.state.page,
            sequence=ticket.sequence,
            status=status,
        )
        return status

    def fail(self, ticket: FetchTicket, error: BaseException | None = None) -> None:
        """Record a failed request; the page state is left as it was."""
        if ticket.sequence == self._pending:
            self._pending = None
        logger.error(
            f"Request #{ticket.sequence} for page {ticket.request.page} failed: {error}"
        )
        self._publish_event(
            EventType.FETCH_FAILED,
            page=ticket.request.page,
            sequence=ticket.sequence,
            error=error,
        )

    def cancel(self, ticket: FetchTicket) -> None:
        """Drop a request that will never be answered."""
        if ticket.sequence == self._pending:
            self._pending = None
        logger.info(
            f"Request #{ticket.sequence} for page {ticket.request.page} cancelled"
        )
        self._publish_event(
            EventType.FETCH_CANCELLED,
            page=ticket.request.page,
            sequence=ticket.sequence,
        )

    # Round trips

    def submit(
        self, transport: Transport, params: dict[str, Any] | None = None
    ) -> PageStatus | None:
        """Request a page through ``transport`` and apply its response.

        Args:
            transport: Called with the request parameters, returns the data
            params: Extra request parameters

        Returns:
            Status of the page, None if superseded meanwhile
        """
        ticket = self.begin(params)
        try:
            data = transport(ticket.request.to_params())
        except Exception as e:
            self.fail(ticket, e)
            raise
        except BaseException:
            self.cancel(ticket)
            raise
        return self.complete(ticket, data)

    async def asubmit(
        self, transport: AsyncTransport, params: dict[str, Any] | None = None
    ) -> PageStatus | None:
        """Async variant of submit.

        Awaiting the transport is the only suspension point.
        """
        ticket = self.begin(params)
        try:
            data = await transport(ticket.request.to_params())
        except Exception as e:
            self.fail(ticket, e)
            raise
        except BaseException:
            # Cancelled or interrupted
            self.cancel(ticket)
            raise
        return self.complete(ticket, data)
