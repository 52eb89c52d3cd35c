"""A multi-threaded HTTP server that serves two static pages."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from learnbox.threadpool import ThreadPool

SLEEP_SECONDS = 5

OK_STATUS = "HTTP/1.1 200 OK"
NOT_FOUND_STATUS = "HTTP/1.1 404 NOT FOUND"


def respond(request_line: str, root: str | os.PathLike[str] = ".") -> str:
    """Build the full response for one request line, reading pages from ``root``.

    ``GET /sleep HTTP/1.1`` waits a few seconds before answering, to stand in
    for a slow request.
    """
    if request_line == "GET / HTTP/1.1":
        status_line, file_name = OK_STATUS, "hello.html"
    elif request_line == "GET /sleep HTTP/1.1":
        time.sleep(SLEEP_SECONDS)
        status_line, file_name = OK_STATUS, "hello.html"
    else:
        status_line, file_name = NOT_FOUND_STATUS, "404.html"

    contents = (Path(root) / file_name).read_text(encoding="utf-8")
    length = len(contents.encode("utf-8"))
    return f"{status_line}\r\nContent-Length:{length}\r\n\r\n{contents}"


def _read_request_line(stream: socket.socket) -> str:
    with stream.makefile("rb") as reader:
        raw = reader.readline()
    if not raw:
        raise ConnectionError("connection closed before a request line arrived")
    return raw.decode("utf-8").removesuffix("\n").removesuffix("\r")


def handle_connection(stream: socket.socket, root: str | os.PathLike[str] = ".") -> None:
    """Read the request line from ``stream`` and write the response back."""
    request_line = _read_request_line(stream)
    stream.sendall(respond(request_line, root).encode("utf-8"))


def serve(
    host: str = "127.0.0.1",
    port: int = 7878,
    workers: int = 4,
    root: str | os.PathLike[str] = ".",
) -> None:
    """Accept connections forever, handling each on the thread pool."""
    with ThreadPool(workers) as pool, socket.create_server((host, port)) as listener:
        while True:
            connection, _ = listener.accept()

            def job(connection: socket.socket = connection) -> None:
                with connection:
                    handle_connection(connection, root)

            pool.execute(job)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve hello.html and 404.html.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=7878)
    parser.add_argument("--workers", type=int, default=4)
    parser.add_argument("--root", default=".")
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port, args.workers, args.root)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())