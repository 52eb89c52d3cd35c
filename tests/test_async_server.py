import asyncio
from unittest import mock

import pytest

from learnbox.async_server import handle_connection


class FakeWriter:
    def __init__(self):
        self.data = bytearray()

    def write(self, chunk):
        self.data.extend(chunk)

    async def drain(self):
        return None


@pytest.fixture
def root(tmp_path):
    (tmp_path / "hello.html").write_text("<h1>Hello!</h1>", encoding="utf-8")
    (tmp_path / "404.html").write_text("<h1>Oops!</h1>", encoding="utf-8")
    return tmp_path


def _reader_for(request: bytes) -> asyncio.StreamReader:
    content = bytearray(1024)
    content[: len(request)] = request
    reader = asyncio.StreamReader()
    reader.feed_data(bytes(content))
    reader.feed_eof()
    return reader


@pytest.mark.asyncio
async def test_handle_connection(root):
    writer = FakeWriter()
    await handle_connection(_reader_for(b"GET / HTTP/1.1\r\n"), writer, root)
    expected_contents = (root / "hello.html").read_text(encoding="utf-8")
    expected_response = f"HTTP/1.1 200 OK\r\n\r\n{expected_contents}"
    assert bytes(writer.data).startswith(expected_response.encode("utf-8"))


@pytest.mark.asyncio
async def test_unknown_request_gets_not_found(root):
    writer = FakeWriter()
    await handle_connection(_reader_for(b"GET /other HTTP/1.1\r\n"), writer, root)
    expected = "HTTP/1.1 404 NOT FOUNd\r\n\r\n" + (root / "404.html").read_text()
    assert bytes(writer.data) == expected.encode("utf-8")


@pytest.mark.asyncio
async def test_sleep_request_awaits_then_serves_hello(root):
    writer = FakeWriter()
    with mock.patch(
        "learnbox.async_server.asyncio.sleep", new_callable=mock.AsyncMock
    ) as sleep:
        await handle_connection(_reader_for(b"GET /sleep HTTP/1.1\r\n"), writer, root)
    sleep.assert_awaited_once_with(5)
    expected = "HTTP/1.1 200 OK\r\n\r\n" + (root / "hello.html").read_text()
    assert bytes(writer.data) == expected.encode("utf-8")


@pytest.mark.asyncio
async def test_missing_page_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        await handle_connection(
            _reader_for(b"GET / HTTP/1.1\r\n"), FakeWriter(), tmp_path
        )