import io

import pytest

from learnbox.minihttp.response import HttpResponse


def test_http_response_actual_200():
    http_response_200 = HttpResponse.new("200", None, "")
    expected = HttpResponse(
        version="HTTP/1.1",
        status_code="200",
        status_text="OK",
        headers={"Content-Type": "text/html"},
        body="",
    )
    assert http_response_200 == expected


def test_http_response_actual_404():
    http_response_404 = HttpResponse.new("404", None, "xxxx")
    expected = HttpResponse(
        version="HTTP/1.1",
        status_code="404",
        status_text="Not Found",
        headers={"Content-Type": "text/html"},
        body="xxxx",
    )
    assert http_response_404 == expected


def test_http_response_into():
    response = HttpResponse(
        version="HTTP/1.1",
        status_code="200",
        status_text="OK",
        headers={"Content-Type": "text/html"},
        body="xxx",
    )
    assert str(response) == (
        "HTTP/1.1 200 OK\r\nContent-Type:text/html\r\nContent-Length: 3\r\n\r\nxxx"
    )


@pytest.mark.parametrize(
    ("code", "text"),
    [
        ("400", "Bad Request"),
        ("500", "Internal Server Error"),
        ("418", "Not Found"),
    ],
)
def test_status_texts(code, text):
    response = HttpResponse.new(code)
    assert response.status_code == code
    assert response.status_text == text


def test_explicit_headers_are_kept():
    headers = {"Content-Type": "application/json"}
    response = HttpResponse.new("200", headers, "{}")
    assert response.headers_text() == "Content-Type:application/json\r\n"


def test_body_text_defaults_to_empty():
    response = HttpResponse.new("200")
    assert response.body_text() == ""
    assert str(response).endswith("Content-Length: 0\r\n\r\n")


def test_headers_text_without_headers_raises():
    with pytest.raises(ValueError):
        HttpResponse().headers_text()


def test_send_response_writes_rendered_bytes():
    response = HttpResponse.new("404", None, "gone")
    stream = io.BytesIO()
    response.send_response(stream)
    assert stream.getvalue() == str(response).encode("utf-8")