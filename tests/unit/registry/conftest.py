"""Fixtures for tests that work directly on a unit of work."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from university.registry import (
    Course,
    Database,
    Department,
    Faculty,
    Instructor,
    Level,
    Student,
    UnitOfWork,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def database() -> Iterator[Database]:
    """Create an in-memory database with tables."""
    db = Database(":memory:")
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def uow(database: Database) -> Iterator[UnitOfWork]:
    """A unit of work over an open session. Nothing is committed."""
    session = database.get_session()
    yield UnitOfWork(session)
    session.rollback()
    session.close()


@pytest.fixture
def faculty(uow: UnitOfWork) -> Faculty:
    return uow.repos.faculties.save(Faculty(name="Engineering"))


@pytest.fixture
def department(uow: UnitOfWork, faculty: Faculty) -> Department:
    return uow.repos.departments.save(Department(name="CS", faculty=faculty))


@pytest.fixture
def level(uow: UnitOfWork, faculty: Faculty) -> Level:
    return uow.repos.levels.save(Level(name="L1", faculty=faculty))


@pytest.fixture
def course(uow: UnitOfWork, department: Department, level: Level) -> Course:
    return uow.repos.courses.save(
        Course(code="CS101", name="Algorithms", credits=3, department=department, level=level)
    )


@pytest.fixture
def student(uow: UnitOfWork, level: Level) -> Student:
    return uow.repos.students.save(
        Student(
            first_name="Ada",
            last_name="Lovelace",
            phone_number="555-0100",
            date_of_birth=date(2001, 5, 4),
            level=level,
        )
    )


@pytest.fixture
def instructor(uow: UnitOfWork, department: Department) -> Instructor:
    return uow.repos.instructors.save(
        Instructor(
            first_name="Alan",
            last_name="Turing",
            phone_number="555-0199",
            date_of_birth=date(1980, 6, 23),
            department=department,
        )
    )
