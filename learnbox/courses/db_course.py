"""Database access for courses."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from learnbox.courses.errors import DBError, NotFound
from learnbox.courses.models import Course, CreateCourse, UpdateCourse

_COLUMNS = (
    "id, teacher_id, name, time, description, format, structure, "
    "duration, price, language, level"
)

_SELECT_FOR_TEACHER = text(f"SELECT {_COLUMNS} FROM course WHERE teacher_id = :teacher_id")
_SELECT_ONE = text(
    f"SELECT {_COLUMNS} FROM course WHERE teacher_id = :teacher_id AND id = :id"
)
_SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM course WHERE id = :id")
_INSERT = text(
    "INSERT INTO course (teacher_id, name, description, format, structure, "
    "duration, price, language, level) VALUES (:teacher_id, :name, :description, "
    ":format, :structure, :duration, :price, :language, :level)"
)
_DELETE = text("DELETE FROM course WHERE teacher_id = :teacher_id AND id = :id")
_UPDATE = text(
    "UPDATE course SET name = :name, description = :description, format = :format, "
    "structure = :structure, duration = :duration, price = :price, "
    "language = :language, level = :level WHERE teacher_id = :teacher_id AND id = :id"
)

_TEXT_FIELDS = ("description", "format", "structure", "duration", "language", "level")


@contextmanager
def _db_errors() -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err


def _parse_time(value: Any) -> datetime | None:
    if value is None:
        return None
    moment = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _to_course(row: Row) -> Course:
    data = dict(row._mapping)
    data["time"] = _parse_time(data.get("time"))
    return Course(**data)


def get_courses_for_teacher(engine: Engine, teacher_id: int) -> list[Course]:
    """Return every course of a teacher."""
    with _db_errors(), engine.connect() as conn:
        rows = conn.execute(_SELECT_FOR_TEACHER, {"teacher_id": teacher_id}).all()
    return [_to_course(row) for row in rows]


def get_course_details(engine: Engine, teacher_id: int, course_id: int) -> Course:
    """Return one course; raise NotFound if the teacher has no such course."""
    with _db_errors(), engine.connect() as conn:
        row = conn.execute(
            _SELECT_ONE, {"teacher_id": teacher_id, "id": course_id}
        ).one_or_none()
    if row is None:
        raise NotFound("course id not found")
    return _to_course(row)


def _fetch_by_id(engine: Engine, course_id: int) -> Course:
    with _db_errors(), engine.connect() as conn:
        row = conn.execute(_SELECT_BY_ID, {"id": course_id}).one()
    return _to_course(row)


def post_new_course(engine: Engine, new_course: CreateCourse) -> Course:
    """Insert a course and return it as stored."""
    params = {
        "teacher_id": new_course.teacher_id,
        "name": new_course.name,
        "price": new_course.price,
        **{key: getattr(new_course, key) for key in _TEXT_FIELDS},
    }
    try:
        with engine.begin() as conn:
            new_id = conn.execute(_INSERT, params).lastrowid
    except SQLAlchemyError as err:
        raise DBError("insert data error") from err
    return _fetch_by_id(engine, new_id)


def delete_course(engine: Engine, teacher_id: int, course_id: int) -> str:
    """Delete a course and report how many records went."""
    with _db_errors(), engine.begin() as conn:
        result = conn.execute(_DELETE, {"teacher_id": teacher_id, "id": course_id})
    return f"Deleted {result.rowcount} record"


def update_course_details(
    engine: Engine, teacher_id: int, course_id: int, update: UpdateCourse
) -> Course:
    """Apply the given fields to a course and return it.

    Fields left out keep their value; stored empty text becomes "" and an
    empty price becomes 0.
    """
    try:
        with engine.connect() as conn:
            row = conn.execute(
                _SELECT_ONE, {"teacher_id": teacher_id, "id": course_id}
            ).one()
    except SQLAlchemyError as err:
        raise NotFound("Course Id not found") from err
    current = _to_course(row)

    params: dict[str, Any] = {
        "name": update.name if update.name is not None else current.name,
        "price": update.price if update.price is not None else (current.price or 0),
        "teacher_id": teacher_id,
        "id": course_id,
    }
    for key in _TEXT_FIELDS:
        given = getattr(update, key)
        params[key] = given if given is not None else (getattr(current, key) or "")

    try:
        with engine.begin() as conn:
            conn.execute(_UPDATE, params)
    except SQLAlchemyError as err:
        raise NotFound("Course id not found") from err

    with _db_errors(), engine.connect() as conn:
        row = conn.execute(
            _SELECT_ONE, {"teacher_id": teacher_id, "id": course_id}
        ).one()
    return _to_course(row)