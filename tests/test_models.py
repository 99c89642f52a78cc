"""Tests for the data model."""

import dataclasses

import pytest

from docker_tags.models import FetchSession, PageResult, TagRecord


class TestPageResult:
    def test_from_dict_ignores_unknown_fields(self):
        page = PageResult.from_dict(
            {
                "count": 1,
                "next": None,
                "previous": None,
                "results": [
                    {
                        "name": "latest",
                        "last_updated": "2024-01-27T00:00:00Z",
                        "images": [],
                        "tag_status": "active",
                    }
                ],
            }
        )
        assert page == PageResult(1, None, (TagRecord("latest", "2024-01-27T00:00:00Z"),))

    def test_missing_next_means_last_page(self):
        page = PageResult.from_dict({"count": 0, "results": []})
        assert page.next_cursor is None

    def test_tag_record_is_immutable(self):
        tag = TagRecord("latest", "2024-01-27T00:00:00Z")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tag.name = "other"


class TestFetchSession:
    def test_total_is_set_once(self):
        session = FetchSession()
        session.start(10)
        session.start(12)
        assert session.total_count == 10

    def test_add_accumulates_in_order(self):
        session = FetchSession()
        session.add((TagRecord("a", "x"), TagRecord("b", "y")))
        session.add([TagRecord("c", "z")])
        assert [t.name for t in session.accumulated_tags] == ["a", "b", "c"]
        assert session.retrieved_count == 3
