"""Dispatch of parsed requests to their handlers."""

from __future__ import annotations

from typing import BinaryIO

from learnbox.minihttp.handlers import (
    PageNotFoundHandler,
    StaticPageHandler,
    WebServiceHandler,
)
from learnbox.minihttp.request import HttpRequest, Method
from learnbox.minihttp.response import HttpResponse


def route(request: HttpRequest, stream: BinaryIO) -> HttpResponse:
    """Pick the handler for ``request``, write its response to ``stream`` and return it.

    GET requests under ``/api`` go to the web service, other GETs to the
    static pages, and every other method gets the 404 page.
    """
    if request.method is Method.GET:
        segments = request.resource.split("/")
        if len(segments) > 1 and segments[1] == "api":
            response = WebServiceHandler.handle(request)
        else:
            response = StaticPageHandler.handle(request)
    else:
        response = PageNotFoundHandler.handle(request)
    response.send_response(stream)
    return response