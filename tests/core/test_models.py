"""Tests for the engine's value types."""

from collections import OrderedDict

import pytest

from pagenav.core.models import FetchRequest, FetchResult, PageStatus, ResultShape


class TestFetchRequest:
    """Test request parameters."""

    def test_to_params_appends_page_fields(self):
        """page and pageLength are added to the caller's parameters."""
        request = FetchRequest(page=2, page_length=10, params={"request": "rows", "id": 7})

        assert request.to_params() == {
            "request": "rows",
            "id": 7,
            "page": 2,
            "pageLength": 10,
        }

    def test_to_params_does_not_mutate(self):
        """The stored parameters are left alone."""
        request = FetchRequest(page=1, page_length=10, params={"q": "x"})

        request.to_params()

        assert request.params == {"q": "x"}

    def test_default_params(self):
        request = FetchRequest(page=1, page_length=5)

        assert request.to_params() == {"page": 1, "pageLength": 5}


class TestFetchResult:
    """Test response classification."""

    @pytest.mark.parametrize(
        "data,size",
        [
            ([], 0),
            ([1, 2, 3], 3),
            (("a", "b"), 2),
            ({"a": 1, "b": 2}, 2),
            (OrderedDict(x=1), 1),
        ],
    )
    def test_collections(self, data, size):
        """Indexed and keyed collections are sized by length."""
        result = FetchResult.from_response(data)

        assert result.shape is ResultShape.COLLECTION
        assert result.size == size

    @pytest.mark.parametrize("data", ["a string", b"bytes", 42, 3.5, True])
    def test_scalars(self, data):
        """Anything else is a one-element page."""
        result = FetchResult.from_response(data)

        assert result.shape is ResultShape.SCALAR
        assert result.size == 1

    def test_none_is_empty_collection(self):
        """A null response is an empty page."""
        result = FetchResult.from_response(None)

        assert result == FetchResult(shape=ResultShape.COLLECTION, size=0)

    def test_is_short(self):
        """Short pages hold less than a page length."""
        assert FetchResult(shape=ResultShape.COLLECTION, size=4).is_short(10)
        assert not FetchResult(shape=ResultShape.COLLECTION, size=10).is_short(10)


class TestPageStatus:
    def test_validity(self):
        assert not PageStatus.INVALID.is_valid
        for status in (
            PageStatus.FIRST,
            PageStatus.INTERIOR,
            PageStatus.LAST,
            PageStatus.ONLY,
        ):
            assert status.is_valid
