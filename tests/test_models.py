import json
from datetime import datetime, timezone

import pytest

from learnbox.courses.errors import InvalidInput
from learnbox.courses.models import (
    Course,
    CreateCourse,
    CreateTeacher,
    Teacher,
    UpdateCourse,
    UpdateTeacher,
)


def test_create_course_from_json():
    course = CreateCourse.from_json(
        {
            "teacher_id": 1,
            "name": "Test course",
            "language": "English",
            "level": "Beginner",
        }
    )
    assert course == CreateCourse(
        teacher_id=1, name="Test course", language="English", level="Beginner"
    )
    assert course.description is None
    assert course.price is None


def test_create_course_ignores_unknown_fields():
    course = CreateCourse.from_json({"teacher_id": 1, "name": "Test course", "extra": 5})
    assert course.name == "Test course"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Test course"},
        {"teacher_id": 1},
        {"teacher_id": "1", "name": "Test course"},
        {"teacher_id": True, "name": "Test course"},
        {"teacher_id": 1, "name": "Test course", "price": "cheap"},
        ["not", "an", "object"],
    ],
)
def test_create_course_rejects_bad_payload(payload):
    with pytest.raises(InvalidInput) as caught:
        CreateCourse.from_json(payload)
    assert caught.value.to_json() == {"error_message": "Invalid input"}


def test_update_course_all_optional():
    assert UpdateCourse.from_json({}) == UpdateCourse()


def test_update_course_keeps_given_fields():
    update = UpdateCourse.from_json({"name": "Renamed", "price": 100})
    assert (update.name, update.price, update.level) == ("Renamed", 100, None)


def test_course_to_json_formats_time_in_utc():
    course = Course(
        id=1,
        teacher_id=1,
        name="Test course",
        time=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )
    data = course.to_json()
    assert data["time"] == "2024-01-02T03:04:05Z"
    assert json.loads(json.dumps(data))["name"] == "Test course"


def test_course_to_json_without_time():
    data = Course(id=3, teacher_id=1, name="Test course").to_json()
    assert data["time"] is None
    assert set(data) == {
        "id", "teacher_id", "name", "time", "description", "format",
        "structure", "duration", "price", "language", "level",
    }


def test_create_teacher_from_json():
    payload = {
        "name": "Third Teacher",
        "picture_url": "https://example.com/picture.png",
        "profile": "This is a test profile",
    }
    teacher = CreateTeacher.from_json(payload)
    assert (teacher.name, teacher.picture_url, teacher.profile) == (
        payload["name"],
        payload["picture_url"],
        payload["profile"],
    )


def test_create_teacher_requires_every_field():
    with pytest.raises(InvalidInput):
        CreateTeacher.from_json({"name": "Third Teacher"})


def test_update_teacher_partial():
    update = UpdateTeacher.from_json({"profile": "new profile"})
    assert update == UpdateTeacher(profile="new profile")


def test_update_teacher_rejects_wrong_type():
    with pytest.raises(InvalidInput):
        UpdateTeacher.from_json({"name": 12})


def test_teacher_to_json_round_trip():
    teacher = Teacher(id=2, name="Second", picture_url=None, profile="profile")
    assert Teacher(**teacher.to_json()) == teacher