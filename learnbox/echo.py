"""A TCP echo server and a client that greets it."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

BUFFER_SIZE = 1024
GREETING = b"hello"


def echo_once(connection: socket.socket) -> bytes:
    """Read one chunk and send back the whole fixed-size, zero-padded buffer.

    Returns the bytes that were received.
    """
    received = connection.recv(BUFFER_SIZE)
    connection.sendall(received.ljust(BUFFER_SIZE, b"\0"))
    return received


def serve(host: str = "127.0.0.1", port: int = 3000) -> None:
    """Echo one chunk back to each client that connects, forever."""
    with socket.create_server((host, port)) as listener:
        print(f"server running in {host}:{port}")
        while True:
            connection, _ = listener.accept()
            with connection:
                print("client connected")
                echo_once(connection)


def send_hello(host: str = "127.0.0.1", port: int = 3000) -> str:
    """Send a greeting, read one reply of the same length and return it."""
    with socket.create_connection((host, port)) as client:
        client.sendall(GREETING)
        data = client.recv(len(GREETING))
    reply = data.ljust(len(GREETING), b"\0").decode("utf-8")
    print(f"server response:{reply!r}")
    return reply


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="TCP echo server and client.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    if args.role == "client":
        send_hello(args.host, args.port)
        return 0
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())