"""Tests for the JSON slice source."""

import json

import pytest

from pagenav.core.exceptions import InvalidConfigurationError
from pagenav.sources.slice import SliceSource


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"id": i, "name": f"item {i}"} for i in range(12)]))
    return path


class TestSliceSource:
    """Test page slicing."""

    def test_from_file(self, items_file):
        source = SliceSource.from_file(items_file)

        assert source.items_count == 12

    def test_pages(self, items_file):
        """Each page holds pageLength items, the last one fewer."""
        source = SliceSource.from_file(items_file)

        first = source({"page": 1, "pageLength": 5})
        last = source({"page": 3, "pageLength": 5})

        assert [row["id"] for row in first] == [0, 1, 2, 3, 4]
        assert [row["id"] for row in last] == [10, 11]

    def test_past_the_end(self):
        """Pages past the end are empty."""
        assert SliceSource([1, 2, 3])({"page": 4, "pageLength": 2}) == []

    def test_string_parameters(self):
        """Parameters coming from query strings are converted."""
        assert SliceSource(list(range(10)))({"page": "2", "pageLength": "3"}) == [3, 4, 5]

    def test_non_list_document_served_whole(self):
        """Documents that are not arrays are not sliced."""
        source = SliceSource({"total": 3})

        assert source({"page": 2, "pageLength": 1}) == {"total": 3}
        assert source.items_count == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2,")

        with pytest.raises(InvalidConfigurationError):
            SliceSource.from_file(path)
