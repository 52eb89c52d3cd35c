"""Errors raised by the course service, each with its HTTP status."""

from __future__ import annotations

from http import HTTPStatus


class ServiceError(Exception):
    """Base error; carries a detail message and the HTTP status to answer with."""

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def error_response(self) -> str:
        """Log the detail and return the message a client may see."""
        print(f"{self._kind} occurred:{self.message!r}")
        return self.message

    _kind = "error"

    def to_json(self) -> dict[str, str]:
        return {"error_message": self.error_response()}


class DBError(ServiceError):
    """A database failure; its detail is hidden from clients."""

    _kind = "Database error"

    def error_response(self) -> str:
        super().error_response()
        return "Database error"


class ActixError(ServiceError):
    """A failure inside the web framework; its detail is hidden from clients."""

    _kind = "server error"

    def error_response(self) -> str:
        super().error_response()
        return "server error"


class NotFound(ServiceError):
    """The requested record does not exist."""

    status_code = HTTPStatus.NOT_FOUND
    _kind = "not found error"


class InvalidInput(ServiceError):
    """The request carried parameters that could not be used."""

    status_code = HTTPStatus.BAD_REQUEST
    _kind = "Invalid parameters received"