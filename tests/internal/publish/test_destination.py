"""Tests for destination resolution."""

import pytest
from pydantic import ValidationError

from qstash_sdk._internal.publish.destination import DirectUrl, Topic, resolve_destination
from qstash_sdk.exceptions import InvalidDestinationError


class TestDirectUrl:
    """Tests for resolving DirectUrl destinations."""

    def test_plain_url(self):
        """Should keep URL structure characters in the path."""
        resolved = resolve_destination(DirectUrl(url="https://example.com"))
        assert resolved.path == "publish/https://example.com"
        assert resolved.mode == "single"

    def test_url_with_path(self):
        """Should keep the destination path."""
        resolved = resolve_destination(DirectUrl(url="https://example.com/api/hook"))
        assert resolved.path == "publish/https://example.com/api/hook"

    def test_query_is_escaped(self):
        """Should escape '?' so the query stays part of the destination."""
        resolved = resolve_destination(DirectUrl(url="https://example.com/hook?a=1&b=2"))
        assert resolved.path == "publish/https://example.com/hook%3Fa=1&b=2"

    def test_fragment_is_escaped(self):
        """Should escape '#'."""
        resolved = resolve_destination(DirectUrl(url="https://example.com/hook#top"))
        assert resolved.path == "publish/https://example.com/hook%23top"

    def test_existing_escapes_are_kept(self):
        """Should not escape already-escaped sequences twice."""
        resolved = resolve_destination(DirectUrl(url="https://example.com/a%20b"))
        assert resolved.path == "publish/https://example.com/a%20b"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://example.com/100%", "publish/https://example.com/100%25"),
            ("https://example.com/a%zz", "publish/https://example.com/a%25zz"),
            ("https://example.com/50%25/x%", "publish/https://example.com/50%25/x%25"),
        ],
    )
    def test_stray_percent_is_escaped(self, url, expected):
        """Should escape a '%' that does not start an escape sequence."""
        assert resolve_destination(DirectUrl(url=url)).path == expected

    def test_non_ascii_is_escaped(self):
        """Should percent-encode non-ASCII characters."""
        resolved = resolve_destination(DirectUrl(url="https://example.com/café"))
        assert resolved.path == "publish/https://example.com/caf%C3%A9"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "example.com",
            "/relative/path",
            "ftp://example.com/file",
            "https://",
            "https://example.com/with space",
            "https://example.com/\nline",
        ],
    )
    def test_invalid_urls(self, url):
        """Should reject URLs that cannot be used as a destination."""
        with pytest.raises(InvalidDestinationError):
            resolve_destination(DirectUrl(url=url))


class TestTopic:
    """Tests for resolving Topic destinations."""

    def test_topic_name(self):
        """Should use the raw topic name and decode as a list."""
        resolved = resolve_destination(Topic(name="my-topic"))
        assert resolved.path == "publish/my-topic"
        assert resolved.mode == "list"

    @pytest.mark.parametrize("name", ["", "a/b", "a?b", "a#b", "a b", "a\tb"])
    def test_invalid_names(self, name):
        """Should reject names that would change the request path."""
        with pytest.raises(InvalidDestinationError):
            resolve_destination(Topic(name=name))


class TestDestinationModels:
    """Tests for the destination models themselves."""

    def test_destinations_are_immutable(self):
        """Should not allow mutation after construction."""
        destination = Topic(name="orders")
        with pytest.raises(ValidationError):
            destination.name = "other"  # type: ignore[misc]

    def test_unsupported_destination(self):
        """Should reject objects that are not a destination."""
        with pytest.raises(InvalidDestinationError):
            resolve_destination("https://example.com")  # type: ignore[arg-type]
