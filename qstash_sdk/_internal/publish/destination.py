"""Publish destinations and their resolution into request paths."""

import re
from typing import Literal, NamedTuple
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict

from qstash_sdk.exceptions import InvalidDestinationError

DecodeMode = Literal["single", "list"]

# Characters left as-is when escaping a destination URL into the path.
# "%" is kept so already-escaped sequences are not escaped twice.
URL_SAFE_CHARS = ":/@!$&'()*+,;=-._~%"

# A "%" that does not start a %XX escape
STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

TOPIC_FORBIDDEN_CHARS = frozenset("/?#%")


class DirectUrl(BaseModel):
    """Publish to a single subscriber URL."""

    model_config = ConfigDict(frozen=True)

    url: str


class Topic(BaseModel):
    """Publish to a named topic, fanning out to its subscribers."""

    model_config = ConfigDict(frozen=True)

    name: str


Destination = DirectUrl | Topic


class ResolvedDestination(NamedTuple):
    """Request path suffix and the decode mode for its response."""

    path: str
    mode: DecodeMode


def _has_unsafe_chars(value: str) -> bool:
    return any(char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F for char in value)


def _resolve_url(url: str) -> ResolvedDestination:
    if not url or _has_unsafe_chars(url):
        raise InvalidDestinationError(f"Invalid destination URL: {url!r}")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidDestinationError(f"Invalid destination URL: {url!r}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidDestinationError(
            f"Destination URL must be an absolute http(s) URL: {url!r}"
        )
    escaped = quote(STRAY_PERCENT.sub("%25", url), safe=URL_SAFE_CHARS)
    return ResolvedDestination(f"publish/{escaped}", "single")


def _resolve_topic(name: str) -> ResolvedDestination:
    if not name or _has_unsafe_chars(name) or TOPIC_FORBIDDEN_CHARS.intersection(name):
        raise InvalidDestinationError(f"Invalid topic name: {name!r}")
    return ResolvedDestination(f"publish/{name}", "list")


def resolve_destination(destination: Destination) -> ResolvedDestination:
    """Resolve a destination into its publish path and decode mode.

    Direct URLs are escaped into a single path suffix and decode as one
    outcome. Topic names are used as-is and decode as a list of outcomes.

    Raises:
        InvalidDestinationError: If the destination cannot be placed in a path.
    """
    if isinstance(destination, DirectUrl):
        return _resolve_url(destination.url)
    if isinstance(destination, Topic):
        return _resolve_topic(destination.name)
    raise InvalidDestinationError(f"Unsupported destination: {destination!r}")
