"""Tests for the Docker Hub client."""

import pytest
import requests
import responses
from responses import matchers

from docker_tags.config import Settings
from docker_tags.models import TagRecord
from docker_tags.registry.client import (
    HubClient,
    MalformedResponse,
    RegistryError,
    RegistryRequestFailed,
)
from docker_tags.registry.parser import ImageReference

TAGS_URL = "https://registry.hub.docker.com/v2/repositories/library/alpine/tags"


class TestHubClient:
    @pytest.fixture
    def client(self):
        return HubClient(Settings())

    def test_tags_url(self, client):
        url = client.tags_url(ImageReference("library", "alpine"))
        assert url == TAGS_URL

    def test_tags_url_uses_settings(self):
        client = HubClient(Settings(registry_url="http://localhost:5000/v2/repositories"))
        url = client.tags_url(ImageReference("myorg", "myimage"))
        assert url == "http://localhost:5000/v2/repositories/myorg/myimage/tags"

    @responses.activate
    def test_fetch_page_success(self, client):
        responses.add(
            responses.GET,
            TAGS_URL,
            json={
                "count": 2,
                "next": None,
                "previous": None,
                "results": [
                    {"name": "3.19", "last_updated": "2024-01-27T00:48:31.123Z", "digest": "sha256:1"},
                    {"name": "latest", "last_updated": "2024-01-26T10:00:00Z", "full_size": 3},
                ],
            },
            status=200,
            match=[matchers.query_param_matcher({"page_size": "100"})],
        )
        page = client.fetch_page(TAGS_URL, params={"page_size": 100})

        assert page.total_count == 2
        assert page.next_cursor is None
        assert page.tags == (
            TagRecord("3.19", "2024-01-27T00:48:31.123Z"),
            TagRecord("latest", "2024-01-26T10:00:00Z"),
        )

    @responses.activate
    def test_fetch_page_keeps_cursor(self, client):
        next_url = TAGS_URL + "?page=2&page_size=100"
        responses.add(
            responses.GET,
            TAGS_URL,
            json={"count": 150, "next": next_url, "results": []},
            status=200,
        )
        page = client.fetch_page(TAGS_URL)
        assert page.next_cursor == next_url

    @responses.activate
    def test_fetch_page_not_found(self, client):
        responses.add(
            responses.GET,
            TAGS_URL,
            body='{"message":"httperror 404: object not found"}',
            status=404,
        )
        with pytest.raises(RegistryRequestFailed) as exc_info:
            client.fetch_page(TAGS_URL)

        assert exc_info.value.status == 404
        assert exc_info.value.body == '{"message":"httperror 404: object not found"}'
        assert "404" in str(exc_info.value)
        assert "httperror 404: object not found" in str(exc_info.value)

    @responses.activate
    def test_fetch_page_not_json(self, client):
        responses.add(responses.GET, TAGS_URL, body="<html>oops</html>", status=200)
        with pytest.raises(MalformedResponse):
            client.fetch_page(TAGS_URL)

    @responses.activate
    def test_fetch_page_missing_results(self, client):
        responses.add(responses.GET, TAGS_URL, json={"count": 3}, status=200)
        with pytest.raises(MalformedResponse, match="results"):
            client.fetch_page(TAGS_URL)

    @responses.activate
    def test_fetch_page_bad_tag(self, client):
        responses.add(
            responses.GET,
            TAGS_URL,
            json={"count": 1, "next": None, "results": [{"name": 12}]},
            status=200,
        )
        with pytest.raises(MalformedResponse):
            client.fetch_page(TAGS_URL)

    @responses.activate
    def test_fetch_page_timeout(self, client):
        responses.add(
            responses.GET,
            TAGS_URL,
            body=requests.exceptions.Timeout("Timeout"),
        )
        with pytest.raises(RegistryError) as exc_info:
            client.fetch_page(TAGS_URL)
        assert not isinstance(exc_info.value, RegistryRequestFailed)

    def test_error_hierarchy(self):
        assert issubclass(RegistryRequestFailed, RegistryError)
        assert issubclass(MalformedResponse, RegistryError)
