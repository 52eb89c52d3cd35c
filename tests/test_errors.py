from http import HTTPStatus

import pytest

from learnbox.courses.errors import (
    ActixError,
    DBError,
    InvalidInput,
    NotFound,
    ServiceError,
)


@pytest.mark.parametrize(
    "error, status",
    [
        (DBError("boom"), HTTPStatus.INTERNAL_SERVER_ERROR),
        (ActixError("boom"), HTTPStatus.INTERNAL_SERVER_ERROR),
        (NotFound("course id not found"), HTTPStatus.NOT_FOUND),
        (InvalidInput("Invalid input"), HTTPStatus.BAD_REQUEST),
    ],
)
def test_status_codes(error, status):
    assert error.status_code == status


def test_db_error_hides_detail():
    assert DBError("connection refused").error_response() == "Database error"


def test_actix_error_hides_detail():
    assert ActixError("handler crashed").error_response() == "server error"


def test_not_found_shows_message():
    assert NotFound("course id not found").error_response() == "course id not found"


def test_invalid_input_json():
    assert InvalidInput("Invalid input").to_json() == {"error_message": "Invalid input"}


def test_errors_are_raisable_service_errors():
    error = NotFound("Teacher id not found")
    with pytest.raises(ServiceError) as caught:
        raise error
    assert caught.value is error
    assert error.message == "Teacher id not found"
    assert str(error) == "Teacher id not found"
    assert error.to_json() == {"error_message": "Teacher id not found"}
    assert error.status_code == HTTPStatus.NOT_FOUND