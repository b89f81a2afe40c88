"""In-process data source serving pages of a JSON document.

Stands in for the server side of a paginated view: it receives the
request parameters built by the fetch controller and answers with the
requested slice.
"""

import logging
from pathlib import Path
from typing import Any

import msgspec

from pagenav.core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


class SliceSource:
    """Serve ``page``/``pageLength`` slices of a list of items."""

    def __init__(self, data: Any):
        """Initialize the source.

        Args:
            data: Decoded document; lists are sliced, anything else is
                served whole
        """
        self.data = data

    @classmethod
    def from_file(cls, path: Path) -> "SliceSource":
        """Load a JSON document from a file.

        Raises:
            InvalidConfigurationError: If the file is not valid JSON
        """
        try:
            data = msgspec.json.decode(Path(path).read_bytes())
        except msgspec.DecodeError as e:
            raise InvalidConfigurationError("file", f"{path} is not valid JSON: {e}")
        logger.debug(f"Loaded JSON document from {path}")
        return cls(data)

    @property
    def items_count(self) -> int:
        """Get the number of items, 1 for documents that are not lists."""
        return len(self.data) if isinstance(self.data, list) else 1

    def __call__(self, params: dict[str, Any]) -> Any:
        """Answer a request.

        Args:
            params: Request parameters holding ``page`` and ``pageLength``

        Returns:
            The requested slice, or the whole document if it is not a list
        """
        if not isinstance(self.data, list):
            return self.data

        page = int(params.get("page", 1))
        page_length = int(params.get("pageLength", len(self.data) or 1))
        start = (page - 1) * page_length
        return self.data[start : start + page_length]
