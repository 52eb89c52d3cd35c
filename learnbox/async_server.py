"""An asyncio HTTP server that serves two static pages concurrently."""

from __future__ import annotations

import argparse
import asyncio
import functools
import os
import sys
from collections.abc import Sequence
from pathlib import Path

SLEEP_SECONDS = 5
BUFFER_SIZE = 1024

GET_ROOT = b"GET / HTTP/1.1\r\n"
GET_SLEEP = b"GET /sleep HTTP/1.1\r\n"

OK_STATUS = "HTTP/1.1 200 OK\r\n\r\n"
NOT_FOUND_STATUS = "HTTP/1.1 404 NOT FOUNd\r\n\r\n"


async def handle_connection(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    root: str | os.PathLike[str] = ".",
) -> None:
    """Read one request and write back the matching page from ``root``."""
    request = await reader.read(BUFFER_SIZE)

    if request.startswith(GET_ROOT):
        print("incoming /")
        status_line, file_name = OK_STATUS, "hello.html"
    elif request.startswith(GET_SLEEP):
        print("incoming /sleep")
        # Yields to other connections while this one waits.
        await asyncio.sleep(SLEEP_SECONDS)
        status_line, file_name = OK_STATUS, "hello.html"
    else:
        print("incoming 404")
        status_line, file_name = NOT_FOUND_STATUS, "404.html"

    content = (Path(root) / file_name).read_text(encoding="utf-8")
    writer.write(f"{status_line}{content}".encode("utf-8"))
    await writer.drain()


async def _serve_client(
    root: str | os.PathLike[str],
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
) -> None:
    try:
        await handle_connection(reader, writer, root)
    finally:
        writer.close()
        await writer.wait_closed()


async def serve(
    host: str = "127.0.0.1", port: int = 3000, root: str | os.PathLike[str] = "."
) -> None:
    """Accept connections forever, handling them concurrently."""
    server = await asyncio.start_server(
        functools.partial(_serve_client, root), host, port
    )
    print(f"server running in http://{host}:{port}")
    async with server:
        await server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve hello.html and 404.html.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    parser.add_argument("--root", default=".")
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port, args.root))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())