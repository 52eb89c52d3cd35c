"""The course service as a Flask application, and its command."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request
from sqlalchemy import create_engine

from learnbox.courses import handlers
from learnbox.courses.errors import ServiceError
from learnbox.courses.state import AppState

DEFAULT_HEALTH_RESPONSE = "I'm OK."
DATABASE_URL_VARIABLE = "DATABASE_URL"

ALLOWED_ORIGIN = "http://localhost:8080/"
ALLOWED_ORIGIN_PREFIX = "http://localhost"
ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS")
ALLOWED_HEADERS = ("Authorization", "Accept", "Content-Type")
CORS_MAX_AGE = 3600


def _origin_allowed(origin: str) -> bool:
    return origin == ALLOWED_ORIGIN or origin.startswith(ALLOWED_ORIGIN_PREFIX)


def _payload() -> object:
    return request.get_json(silent=True)


def create_app(state: AppState) -> Flask:
    """Build the application with health, course and teacher routes."""
    app = Flask(__name__)

    @app.errorhandler(ServiceError)
    def _service_error(err: ServiceError) -> tuple[Response, int]:
        return jsonify(err.to_json()), int(err.status_code)

    @app.after_request
    def _cors(response: Response) -> Response:
        origin = request.headers.get("Origin")
        if origin and _origin_allowed(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = ", ".join(ALLOWED_METHODS)
            response.headers["Access-Control-Allow-Headers"] = ", ".join(ALLOWED_HEADERS)
            response.headers["Access-Control-Max-Age"] = str(CORS_MAX_AGE)
            response.headers.add("Vary", "Origin")
        return response

    def health() -> Response:
        return jsonify(handlers.health_check(state))

    def new_course() -> Response:
        return jsonify(handlers.post_new_course(state, _payload()))

    def teacher_courses(teacher_id: int) -> Response:
        return jsonify(handlers.get_courses_for_teacher(state, teacher_id))

    def course_detail(teacher_id: int, course_id: int) -> Response:
        return jsonify(handlers.get_course_detail(state, teacher_id, course_id))

    def remove_course(teacher_id: int, course_id: int) -> Response:
        return jsonify(handlers.delete_course(state, teacher_id, course_id))

    def change_course(teacher_id: int, course_id: int) -> Response:
        return jsonify(
            handlers.update_course_details(state, teacher_id, course_id, _payload())
        )

    def new_teacher() -> Response:
        return jsonify(handlers.post_new_teacher(state, _payload()))

    def all_teachers() -> Response:
        return jsonify(handlers.get_all_teachers(state))

    def teacher_detail(teacher_id: int) -> Response:
        return jsonify(handlers.get_teacher_details(state, teacher_id))

    def change_teacher(teacher_id: int) -> Response:
        return jsonify(handlers.update_teacher_details(state, teacher_id, _payload()))

    def remove_teacher(teacher_id: int) -> Response:
        return jsonify(handlers.delete_teacher(state, teacher_id))

    rules = (
        ("/health", health, "GET"),
        ("/courses/", new_course, "POST"),
        ("/courses/<int:teacher_id>", teacher_courses, "GET"),
        ("/courses/<int:teacher_id>/<int:course_id>", course_detail, "GET"),
        ("/courses/<int:teacher_id>/<int:course_id>", remove_course, "DELETE"),
        ("/courses/<int:teacher_id>/<int:course_id>", change_course, "PUT"),
        ("/teachers/", new_teacher, "POST"),
        ("/teachers/", all_teachers, "GET"),
        ("/teachers/<int:teacher_id>", teacher_detail, "GET"),
        ("/teachers/<int:teacher_id>", change_teacher, "PUT"),
        ("/teachers/<int:teacher_id>", remove_teacher, "DELETE"),
    )
    for rule, view, method in rules:
        app.add_url_rule(rule, endpoint=view.__name__, view_func=view, methods=[method])
    return app


def _engine_url(database_url: str) -> str:
    if database_url.startswith("mysql://"):
        return "mysql+pymysql://" + database_url.removeprefix("mysql://")
    return database_url


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the course and teacher API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    load_dotenv()
    database_url = os.environ.get(DATABASE_URL_VARIABLE)
    if not database_url:
        print(f"{DATABASE_URL_VARIABLE} is not set in .env", file=sys.stderr)
        return 1

    state = AppState(
        health_check_response=DEFAULT_HEALTH_RESPONSE,
        db=create_engine(_engine_url(database_url)),
    )
    create_app(state).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())