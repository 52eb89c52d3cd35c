"""Parsing of raw HTTP request text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Method(Enum):
    GET = auto()
    POST = auto()
    UNINITIALIZED = auto()

    @classmethod
    def parse(cls, text: str) -> "Method":
        """Map a method token to a member; anything unknown is UNINITIALIZED."""
        return {"GET": cls.GET, "POST": cls.POST}.get(text, cls.UNINITIALIZED)


class Version(Enum):
    V1_1 = auto()
    V2_0 = auto()
    UNINITIALIZED = auto()

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Map a version token to a member; anything unknown is UNINITIALIZED."""
        return {"HTTP/1.1": cls.V1_1, "HTTP/2.0": cls.V2_0}.get(
            text, cls.UNINITIALIZED
        )


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def _parse_request_line(line: str) -> tuple[Method, str, Version]:
    words = line.split()
    if len(words) < 3:
        raise ValueError(f"malformed request line: {line!r}")
    method, resource, version = words[:3]
    return Method.parse(method), resource, Version.parse(version)


def _parse_header_line(line: str) -> tuple[str, str]:
    # Only the text between the first and second colon is kept as the value.
    pieces = line.split(":")
    key = pieces[0]
    value = pieces[1] if len(pieces) > 1 else ""
    return key, value


@dataclass
class HttpRequest:
    """A request: method, resource path, version, headers and a one-line body."""

    method: Method = Method.UNINITIALIZED
    version: Version = Version.UNINITIALIZED
    resource: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    msg_body: str = ""

    @classmethod
    def parse(cls, raw: str) -> "HttpRequest":
        """Parse request text line by line.

        A line holding "HTTP" is the request line, a line with a colon is a
        header, empty lines are skipped, and any other line becomes the body.
        """
        request = cls()
        for line in _lines(raw):
            if "HTTP" in line:
                request.method, request.resource, request.version = (
                    _parse_request_line(line)
                )
            elif ":" in line:
                key, value = _parse_header_line(line)
                request.headers[key] = value
            elif line:
                request.msg_body = line
        return request