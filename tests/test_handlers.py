import json

import pytest

from learnbox.minihttp.handlers import (
    OrderStatus,
    PageNotFoundHandler,
    StaticPageHandler,
    WebServiceHandler,
    load_file,
    load_orders,
)
from learnbox.minihttp.request import HttpRequest, Method


@pytest.fixture
def public(tmp_path, monkeypatch):
    pages = {
        "index.html": "<h1>index</h1>",
        "health.html": "<h1>healthy</h1>",
        "404.html": "<h1>missing</h1>",
        "style.css": "body {}",
        "app.js": "let x = 1;",
        "about.html": "<p>about</p>",
    }
    for name, text in pages.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    monkeypatch.setenv("PUBLIC_PATH", str(tmp_path))
    return pages


@pytest.fixture
def orders(tmp_path, monkeypatch):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    items = [
        {"order_id": 1, "order_date": "21 Jan 2020", "order_status": "Delivered"},
        {"order_id": 2, "order_date": "2 Feb 2020", "order_status": "Pending"},
    ]
    (data_dir / "orders.json").write_text(json.dumps(items), encoding="utf-8")
    monkeypatch.setenv("DATA_PATH", str(data_dir))
    return items


def get(resource):
    return HttpRequest(method=Method.GET, resource=resource)


def test_load_file_reads_public_directory(public):
    assert load_file("index.html") == public["index.html"]


def test_load_file_missing_is_none(public):
    assert load_file("nothing-here.html") is None


def test_index_page(public):
    response = StaticPageHandler.handle(get("/"))
    assert response.status_code == "200"
    assert response.body == public["index.html"]


def test_health_page(public):
    response = StaticPageHandler.handle(get("/health"))
    assert response.body == public["health.html"]


@pytest.mark.parametrize(
    "name, content_type",
    [
        ("style.css", "text/css"),
        ("app.js", "application/javascript"),
        ("about.html", "text/html"),
    ],
)
def test_static_file_content_type(public, name, content_type):
    response = StaticPageHandler.handle(get("/" + name))
    assert response.headers == {"Content-Type": content_type}
    assert response.body == public[name]


def test_static_missing_file_is_404(public):
    response = StaticPageHandler.handle(get("/absent.html"))
    assert response.status_code == "404"
    assert response.body == public["404.html"]


def test_page_not_found_handler(public):
    response = PageNotFoundHandler.handle(HttpRequest(method=Method.POST, resource="/"))
    assert response.status_code == "404"
    assert response.status_text == "Not Found"
    assert response.body == public["404.html"]


def test_load_orders(orders):
    loaded = load_orders()
    assert [order.order_id for order in loaded] == [item["order_id"] for item in orders]
    assert loaded[0] == OrderStatus(**orders[0])


def test_orders_api(public, orders):
    response = WebServiceHandler.handle(get("/api/shipping/orders"))
    assert response.status_code == "200"
    assert response.headers == {"Content-Type": "application/json"}
    assert json.loads(response.body) == orders
    assert ", " not in response.body


def test_unknown_api_is_404(public, orders):
    response = WebServiceHandler.handle(get("/api/billing/orders"))
    assert response.status_code == "404"
    assert response.body == public["404.html"]