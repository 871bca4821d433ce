"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

import pytest

from university.registry import (
    CourseRecord,
    DepartmentRecord,
    FacultyRecord,
    InstructorRecord,
    LevelRecord,
    StudentRecord,
)
from university.services import Registry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@dataclass
class Campus:
    """One faculty with one department and one level."""

    faculty: FacultyRecord
    department: DepartmentRecord
    level: LevelRecord


@pytest.fixture
def registry() -> Iterator[Registry]:
    """Create an in-memory Registry."""
    r = Registry(":memory:")
    yield r
    r.close()


@pytest.fixture
def campus(registry: Registry) -> Campus:
    """Engineering faculty with a CS department and level L1."""
    faculty = registry.faculties.create(FacultyRecord(name="Engineering"))
    department = registry.departments.create(DepartmentRecord(name="CS", faculty_id=faculty.id))
    level = registry.levels.create(LevelRecord(name="L1", faculty_id=faculty.id))
    return Campus(faculty=faculty, department=department, level=level)


@pytest.fixture
def make_course(registry: Registry, campus: Campus) -> Callable[..., CourseRecord]:
    """Factory creating a course in the campus department and level."""

    def _make(code: str = "CS101", **overrides: object) -> CourseRecord:
        fields: dict[str, object] = {
            "code": code,
            "name": "Algorithms",
            "credits": 3,
            "department_id": campus.department.id,
            "level_id": campus.level.id,
        }
        fields.update(overrides)
        return registry.courses.create(CourseRecord(**fields))  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_student(registry: Registry, campus: Campus) -> Callable[..., StudentRecord]:
    """Factory creating a student in the campus level."""

    def _make(**overrides: object) -> StudentRecord:
        fields: dict[str, object] = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "phone_number": "555-0100",
            "date_of_birth": date(2001, 5, 4),
            "level_id": campus.level.id,
        }
        fields.update(overrides)
        return registry.students.create(StudentRecord(**fields))  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_instructor(registry: Registry, campus: Campus) -> Callable[..., InstructorRecord]:
    """Factory creating an instructor in the campus department."""

    def _make(**overrides: object) -> InstructorRecord:
        fields: dict[str, object] = {
            "first_name": "Alan",
            "last_name": "Turing",
            "phone_number": "555-0199",
            "date_of_birth": date(1980, 6, 23),
            "department_id": campus.department.id,
        }
        fields.update(overrides)
        return registry.instructors.create(InstructorRecord(**fields))  # type: ignore[arg-type]

    return _make
