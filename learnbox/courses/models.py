"""Course and teacher records and the payloads that create or update them."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any

from learnbox.courses.errors import InvalidInput

_INVALID = "Invalid input"


def _require_mapping(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise InvalidInput(_INVALID)
    return data


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _required(data: dict[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    valid = _is_int(value) if kind is int else isinstance(value, kind)
    if not valid:
        raise InvalidInput(_INVALID)
    return value


def _optional(data: dict[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    return _required(data, key, kind)


def _format_time(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


_COURSE_TEXT_FIELDS = ("description", "format", "structure", "duration", "language", "level")


@dataclass
class Course:
    """A stored course."""

    id: int
    teacher_id: int
    name: str
    time: datetime | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready dict; the time is RFC 3339 in UTC."""
        data = {field.name: getattr(self, field.name) for field in fields(self)}
        data["time"] = _format_time(self.time)
        return data


@dataclass
class CreateCourse:
    """The payload for creating a course."""

    teacher_id: int
    name: str
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "CreateCourse":
        """Build from decoded JSON; raise InvalidInput if it does not fit."""
        data = _require_mapping(data)
        return cls(
            teacher_id=_required(data, "teacher_id", int),
            name=_required(data, "name", str),
            price=_optional(data, "price", int),
            **{key: _optional(data, key, str) for key in _COURSE_TEXT_FIELDS},
        )


@dataclass
class UpdateCourse:
    """The payload for updating a course; absent fields stay unchanged."""

    name: str | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "UpdateCourse":
        """Build from decoded JSON; raise InvalidInput if it does not fit."""
        data = _require_mapping(data)
        return cls(
            name=_optional(data, "name", str),
            price=_optional(data, "price", int),
            **{key: _optional(data, key, str) for key in _COURSE_TEXT_FIELDS},
        )


@dataclass
class Teacher:
    """A stored teacher."""

    id: int
    name: str | None = None
    picture_url: str | None = None
    profile: str | None = None

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "picture_url": self.picture_url,
            "profile": self.profile,
        }


@dataclass
class CreateTeacher:
    """The payload for creating a teacher."""

    name: str
    picture_url: str
    profile: str

    @classmethod
    def from_json(cls, data: Any) -> "CreateTeacher":
        """Build from decoded JSON; raise InvalidInput if it does not fit."""
        data = _require_mapping(data)
        return cls(
            name=_required(data, "name", str),
            picture_url=_required(data, "picture_url", str),
            profile=_required(data, "profile", str),
        )


@dataclass
class UpdateTeacher:
    """The payload for updating a teacher."""

    name: str | None = None
    picture_url: str | None = None
    profile: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "UpdateTeacher":
        """Build from decoded JSON; raise InvalidInput if it does not fit."""
        data = _require_mapping(data)
        return cls(
            name=_optional(data, "name", str),
            picture_url=_optional(data, "picture_url", str),
            profile=_optional(data, "profile", str),
        )