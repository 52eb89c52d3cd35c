"""Building and sending HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

_STATUS_TEXTS = {
    "200": "OK",
    "400": "Bad Request",
    "404": "Not Found",
    "500": "Internal Server Error",
}


@dataclass
class HttpResponse:
    """A response line, headers and an optional body."""

    version: str = "HTTP/1.1"
    status_code: str = "200"
    status_text: str = "OK"
    headers: dict[str, str] | None = None
    body: str | None = None

    @classmethod
    def new(
        cls,
        status_code: str,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> "HttpResponse":
        """Build a response; headers default to an HTML content type."""
        if headers is None:
            headers = {"Content-Type": "text/html"}
        return cls(
            status_code=status_code,
            status_text=_STATUS_TEXTS.get(status_code, "Not Found"),
            headers=headers,
            body=body,
        )

    def headers_text(self) -> str:
        """Render the headers as ``key:value`` lines, each ending in CRLF."""
        if self.headers is None:
            raise ValueError("response has no headers")
        return "".join(f"{key}:{value}\r\n" for key, value in self.headers.items())

    def body_text(self) -> str:
        return self.body or ""

    def __str__(self) -> str:
        body = self.body_text()
        return (
            f"{self.version} {self.status_code} {self.status_text}\r\n"
            f"{self.headers_text()}"
            f"Content-Length: {len(body.encode('utf-8'))}\r\n\r\n"
            f"{body}"
        )

    def __bytes__(self) -> bytes:
        return str(self).encode("utf-8")

    def send_response(self, stream: BinaryIO) -> None:
        """Write the whole response to a binary writable stream."""
        stream.write(bytes(self))