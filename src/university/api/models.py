"""Pydantic models for the REST API.

Bodies use camelCase keys on the wire; fields are snake_case in Python.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from university.registry.records import (
        CourseRecord,
        DepartmentRecord,
        EnrollmentRecord,
        FacultyRecord,
        InstructorRecord,
        LevelRecord,
        StudentRecord,
    )


class CamelModel(BaseModel):
    """Base model with camelCase aliases, accepting field names as well."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiError(CamelModel):
    """Error body returned for every failed request."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    error_code: str


class CountResponse(CamelModel):
    count: int


# Faculty models


class FacultyRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class FacultyResponse(CamelModel):
    id: int
    name: str


# Department models


class DepartmentRequest(CamelModel):
    """Request model for a department. ``facultyId`` is ignored on update."""

    name: str = Field(..., min_length=1, max_length=255)
    faculty_id: int | None = None


class DepartmentResponse(CamelModel):
    id: int
    name: str
    faculty_id: int


# Level models


class LevelRequest(CamelModel):
    """Request model for a level. ``facultyId`` is ignored on update."""

    name: str = Field(..., min_length=1, max_length=255)
    faculty_id: int | None = None


class LevelResponse(CamelModel):
    id: int
    name: str
    faculty_id: int


# Course models


class CourseRequest(CamelModel):
    """Request model for a course. ``code`` is ignored on update."""

    code: str | None = Field(default=None, min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    credits: int = Field(..., ge=0)
    department_id: int | None = None
    level_id: int | None = None
    instructor_ids: list[int] | None = None


class CourseResponse(CamelModel):
    code: str
    name: str
    credits: int
    department_id: int
    level_id: int
    instructor_ids: list[int]


# Person models


class PersonRequest(CamelModel):
    """Personal fields shared by students and instructors."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    gender: str | None = Field(default=None, max_length=20)
    user_id: int | None = None


class StudentRequest(PersonRequest):
    level_id: int | None = None
    department_id: int | None = None


class StudentResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    phone_number: str
    date_of_birth: date
    gender: str | None
    level_id: int
    level_name: str
    department_id: int | None
    department_name: str | None
    faculty_id: int
    faculty_name: str
    user_id: int | None


class InstructorRequest(PersonRequest):
    department_id: int | None = None
    course_codes: list[str] | None = None


class InstructorResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    phone_number: str
    date_of_birth: date
    gender: str | None
    department_id: int
    department_name: str
    course_codes: list[str]
    user_id: int | None


# Enrollment models


class EnrollmentRequest(CamelModel):
    """Request model for an enrollment. The pair is taken from the path on update."""

    student_id: int | None = None
    course_code: str | None = None
    grade: float | None = None


class EnrollmentResponse(CamelModel):
    student_id: int
    course_code: str
    grade: float


# Conversions from records


def faculty_to_response(record: FacultyRecord) -> FacultyResponse:
    return FacultyResponse(**asdict(record))


def department_to_response(record: DepartmentRecord) -> DepartmentResponse:
    return DepartmentResponse(**asdict(record))


def level_to_response(record: LevelRecord) -> LevelResponse:
    return LevelResponse(**asdict(record))


def course_to_response(record: CourseRecord) -> CourseResponse:
    return CourseResponse(**asdict(record))


def student_to_response(record: StudentRecord) -> StudentResponse:
    return StudentResponse(**asdict(record))


def instructor_to_response(record: InstructorRecord) -> InstructorResponse:
    return InstructorResponse(**asdict(record))


def enrollment_to_response(record: EnrollmentRecord) -> EnrollmentResponse:
    return EnrollmentResponse(**asdict(record))
