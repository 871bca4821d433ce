"""Plain data records passed into and returned from the domain services.

Records carry ids of related entities, never ORM objects. Fields marked as
derived are filled on output and ignored on input.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date  # noqa: TC003 - used at runtime by dataclasses

from university.registry.models import (
    Course,
    Department,
    Enrollment,
    Faculty,
    Instructor,
    Level,
    Student,
)


@dataclass
class FacultyRecord:
    name: str | None = None
    id: int | None = None


@dataclass
class DepartmentRecord:
    name: str | None = None
    faculty_id: int | None = None
    id: int | None = None


@dataclass
class LevelRecord:
    name: str | None = None
    faculty_id: int | None = None
    id: int | None = None


@dataclass
class CourseRecord:
    """A course and the ids of the instructors teaching it.

    ``instructor_ids`` of None on input leaves the current instructors as they are.
    """

    code: str | None = None
    name: str | None = None
    credits: int | None = None
    department_id: int | None = None
    level_id: int | None = None
    instructor_ids: list[int] | None = None


@dataclass
class StudentRecord:
    """A student and the names of the units it belongs to.

    ``faculty_id``, ``faculty_name``, ``department_name`` and ``level_name``
    are derived from the level and department.
    """

    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    level_id: int | None = None
    department_id: int | None = None
    user_id: int | None = None
    id: int | None = None
    faculty_id: int | None = None
    faculty_name: str | None = None
    department_name: str | None = None
    level_name: str | None = None


@dataclass
class InstructorRecord:
    """An instructor and the codes of the courses it teaches.

    ``course_codes`` of None on input leaves the current courses as they are.
    ``department_name`` is derived.
    """

    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    department_id: int | None = None
    course_codes: list[str] | None = None
    user_id: int | None = None
    id: int | None = None
    department_name: str | None = None


@dataclass
class EnrollmentRecord:
    student_id: int | None = None
    course_code: str | None = None
    grade: float | None = None


# --- Conversions from models ---


def faculty_to_record(faculty: Faculty) -> FacultyRecord:
    return FacultyRecord(id=faculty.id, name=faculty.name)


def department_to_record(department: Department) -> DepartmentRecord:
    return DepartmentRecord(
        id=department.id,
        name=department.name,
        faculty_id=department.faculty_id,
    )


def level_to_record(level: Level) -> LevelRecord:
    return LevelRecord(id=level.id, name=level.name, faculty_id=level.faculty_id)


def course_to_record(course: Course) -> CourseRecord:
    return CourseRecord(
        code=course.code,
        name=course.name,
        credits=course.credits,
        department_id=course.department_id,
        level_id=course.level_id,
        instructor_ids=sorted(instructor.id for instructor in course.instructors),
    )


def student_to_record(student: Student) -> StudentRecord:
    level = student.level
    department = student.department
    return StudentRecord(
        id=student.id,
        first_name=student.first_name,
        last_name=student.last_name,
        phone_number=student.phone_number,
        date_of_birth=student.date_of_birth,
        gender=student.gender,
        level_id=student.level_id,
        level_name=level.name,
        department_id=student.department_id,
        department_name=department.name if department is not None else None,
        faculty_id=level.faculty_id,
        faculty_name=level.faculty.name,
        user_id=student.user_id,
    )


def instructor_to_record(instructor: Instructor) -> InstructorRecord:
    return InstructorRecord(
        id=instructor.id,
        first_name=instructor.first_name,
        last_name=instructor.last_name,
        phone_number=instructor.phone_number,
        date_of_birth=instructor.date_of_birth,
        gender=instructor.gender,
        department_id=instructor.department_id,
        department_name=instructor.department.name,
        course_codes=sorted(course.code for course in instructor.courses),
        user_id=instructor.user_id,
    )


def enrollment_to_record(enrollment: Enrollment) -> EnrollmentRecord:
    return EnrollmentRecord(
        student_id=enrollment.student_id,
        course_code=enrollment.course_code,
        grade=enrollment.grade,
    )
