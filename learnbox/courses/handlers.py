"""Request handlers of the course service, returning JSON-ready results."""

from __future__ import annotations

from typing import Any

from learnbox.courses import db_course, db_teacher
from learnbox.courses.models import (
    CreateCourse,
    CreateTeacher,
    UpdateCourse,
    UpdateTeacher,
)
from learnbox.courses.state import AppState


def health_check(state: AppState) -> str:
    """Report the health message and how many times it was asked for before."""
    count = state.next_visit()
    return f"{state.health_check_response} {count} times"


def post_new_course(state: AppState, payload: Any) -> dict[str, Any]:
    """Create a course from a decoded JSON payload and return it."""
    print("Received new course")
    new_course = CreateCourse.from_json(payload)
    return db_course.post_new_course(state.db, new_course).to_json()


def get_courses_for_teacher(state: AppState, teacher_id: int) -> list[dict[str, Any]]:
    """Return every course of a teacher."""
    courses = db_course.get_courses_for_teacher(state.db, teacher_id)
    return [course.to_json() for course in courses]


def get_course_detail(state: AppState, teacher_id: int, course_id: int) -> dict[str, Any]:
    """Return one course of a teacher."""
    return db_course.get_course_details(state.db, teacher_id, course_id).to_json()


def delete_course(state: AppState, teacher_id: int, course_id: int) -> str:
    """Delete a course and return a report of what was removed."""
    return db_course.delete_course(state.db, teacher_id, course_id)


def update_course_details(
    state: AppState, teacher_id: int, course_id: int, payload: Any
) -> dict[str, Any]:
    """Apply a decoded JSON update to a course and return it."""
    update = UpdateCourse.from_json(payload)
    return db_course.update_course_details(
        state.db, teacher_id, course_id, update
    ).to_json()


def get_all_teachers(state: AppState) -> list[dict[str, Any]]:
    """Return every teacher."""
    return [teacher.to_json() for teacher in db_teacher.get_all_teachers(state.db)]


def get_teacher_details(state: AppState, teacher_id: int) -> dict[str, Any]:
    """Return one teacher."""
    return db_teacher.get_teacher_details(state.db, teacher_id).to_json()


def post_new_teacher(state: AppState, payload: Any) -> dict[str, Any]:
    """Create a teacher from a decoded JSON payload and return it."""
    new_teacher = CreateTeacher.from_json(payload)
    return db_teacher.post_new_teacher(state.db, new_teacher).to_json()


def update_teacher_details(
    state: AppState, teacher_id: int, payload: Any
) -> dict[str, Any]:
    """Apply a decoded JSON update to a teacher and return it."""
    update = UpdateTeacher.from_json(payload)
    return db_teacher.update_teacher_details(state.db, teacher_id, update).to_json()


def delete_teacher(state: AppState, teacher_id: int) -> str:
    """Delete a teacher and return a report of what was removed."""
    return db_teacher.delete_teacher(state.db, teacher_id)