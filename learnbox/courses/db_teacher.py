"""Database access for teachers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from learnbox.courses.errors import DBError, NotFound
from learnbox.courses.models import CreateTeacher, Teacher, UpdateTeacher

_SELECT_ALL = text("SELECT id, name, picture_url, profile FROM teachers")
_SELECT_ONE = text("SELECT id, name, picture_url, profile FROM teachers WHERE id = :id")
_INSERT = text(
    "INSERT INTO teachers (name, picture_url, profile) "
    "VALUES (:name, :picture_url, :profile)"
)
_UPDATE = text(
    "UPDATE teachers SET name = :name, picture_url = :picture_url, "
    "profile = :profile WHERE id = :id"
)
_DELETE = text("DELETE FROM teachers WHERE id = :id")


@contextmanager
def _db_errors() -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err


def _to_teacher(row: Row) -> Teacher:
    return Teacher(**dict(row._mapping))


def _fetch(engine: Engine, teacher_id: int) -> Teacher:
    with _db_errors(), engine.connect() as conn:
        row = conn.execute(_SELECT_ONE, {"id": teacher_id}).one()
    return _to_teacher(row)


def get_all_teachers(engine: Engine) -> list[Teacher]:
    """Return every teacher; raise NotFound if there are none."""
    with _db_errors(), engine.connect() as conn:
        rows = conn.execute(_SELECT_ALL).all()
    if not rows:
        raise NotFound("No teachers found")
    return [_to_teacher(row) for row in rows]


def get_teacher_details(engine: Engine, teacher_id: int) -> Teacher:
    """Return one teacher; raise NotFound if there is no such id."""
    try:
        with engine.connect() as conn:
            row = conn.execute(_SELECT_ONE, {"id": teacher_id}).one()
    except SQLAlchemyError as err:
        raise NotFound("Teacher id not found") from err
    return _to_teacher(row)


def post_new_teacher(engine: Engine, new_teacher: CreateTeacher) -> Teacher:
    """Insert a teacher and return it as stored."""
    params = {
        "name": new_teacher.name,
        "picture_url": new_teacher.picture_url,
        "profile": new_teacher.profile,
    }
    try:
        with engine.begin() as conn:
            new_id = conn.execute(_INSERT, params).lastrowid
    except SQLAlchemyError as err:
        raise DBError("insert data error") from err
    return _fetch(engine, new_id)


def update_teacher_details(
    engine: Engine, teacher_id: int, update: UpdateTeacher
) -> Teacher:
    """Apply the given fields to a teacher and return it; others are kept."""
    current = get_teacher_details(engine, teacher_id)
    params = {
        "id": teacher_id,
        "name": update.name if update.name is not None else current.name,
        "picture_url": (
            update.picture_url if update.picture_url is not None else current.picture_url
        ),
        "profile": update.profile if update.profile is not None else current.profile,
    }
    try:
        with engine.begin() as conn:
            conn.execute(_UPDATE, params)
    except SQLAlchemyError as err:
        raise NotFound("Teacher id not found") from err
    return _fetch(engine, teacher_id)


def delete_teacher(engine: Engine, teacher_id: int) -> str:
    """Delete a teacher and report how many records went."""
    try:
        with engine.begin() as conn:
            result = conn.execute(_DELETE, {"id": teacher_id})
    except SQLAlchemyError as err:
        raise NotFound("Unable to delete teacher") from err
    return f"Deleted {result.rowcount} record"