"""Request handlers for static pages, the orders API and missing pages."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from learnbox.minihttp.request import HttpRequest
from learnbox.minihttp.response import HttpResponse

PUBLIC_PATH_VARIABLE = "PUBLIC_PATH"
DATA_PATH_VARIABLE = "DATA_PATH"

_PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_PUBLIC_PATH = _PACKAGE_DIR / "public"
DEFAULT_DATA_PATH = _PACKAGE_DIR / "data"
ORDERS_FILE = "orders.json"


@dataclass(frozen=True)
class OrderStatus:
    """One order and where it stands."""

    order_id: int
    order_date: str
    order_status: str


def load_file(file_name: str) -> str | None:
    """Read a file from the public directory; ``None`` if it cannot be read.

    The directory is ``$PUBLIC_PATH`` when set, else the bundled ``public``.
    """
    public_path = os.environ.get(PUBLIC_PATH_VARIABLE, str(DEFAULT_PUBLIC_PATH))
    try:
        return (Path(public_path) / file_name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def load_orders() -> list[OrderStatus]:
    """Read every order from ``orders.json`` in ``$DATA_PATH`` or the bundled data."""
    data_path = os.environ.get(DATA_PATH_VARIABLE, str(DEFAULT_DATA_PATH))
    raw = (Path(data_path) / ORDERS_FILE).read_text(encoding="utf-8")
    return [
        OrderStatus(
            order_id=item["order_id"],
            order_date=item["order_date"],
            order_status=item["order_status"],
        )
        for item in json.loads(raw)
    ]


def _not_found() -> HttpResponse:
    return HttpResponse.new("404", None, load_file("404.html"))


def _content_type(path: str) -> str:
    if path.endswith(".css"):
        return "text/css"
    if path.endswith(".js"):
        return "application/javascript"
    return "text/html"


class PageNotFoundHandler:
    """Answers every request with the 404 page."""

    @staticmethod
    def handle(request: HttpRequest) -> HttpResponse:
        return _not_found()


class StaticPageHandler:
    """Serves the index, the health page and files from the public directory."""

    @staticmethod
    def handle(request: HttpRequest) -> HttpResponse:
        route = request.resource.split("/")
        if len(route) < 2:
            return _not_found()
        path = route[1]
        if path == "":
            return HttpResponse.new("200", None, load_file("index.html"))
        if path == "health":
            return HttpResponse.new("200", None, load_file("health.html"))
        content = load_file(path)
        if content is None:
            return _not_found()
        return HttpResponse.new("200", {"Content-Type": _content_type(path)}, content)


class WebServiceHandler:
    """Serves the orders list as JSON at ``/api/shipping/orders``."""

    @staticmethod
    def handle(request: HttpRequest) -> HttpResponse:
        route = request.resource.split("/")
        if len(route) > 3 and route[2] == "shipping" and route[3] == "orders":
            body = json.dumps(
                [asdict(order) for order in load_orders()],
                separators=(",", ":"),
                ensure_ascii=False,
            )
            return HttpResponse.new("200", {"Content-Type": "application/json"}, body)
        return _not_found()