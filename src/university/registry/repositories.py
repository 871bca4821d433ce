"""Repositories - per-entity persistence operations over a session.

Repositories never commit. The surrounding transaction owns the commit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select

from university.registry.models import (
    Course,
    Department,
    Enrollment,
    Faculty,
    Instructor,
    Level,
    Student,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

T = TypeVar("T")


class Repository(Generic[T]):
    """Common operations shared by all repositories."""

    model: type[T]
    order_by: tuple[Any, ...] = ()

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, key: Any) -> T | None:
        """Get an entity by primary key, or None."""
        return self._session.get(self.model, key)

    def exists_by_id(self, key: Any) -> bool:
        """Check whether an entity with this primary key exists."""
        return self.find_by_id(key) is not None

    def find_all(self) -> list[T]:
        """List all entities in a stable order."""
        stmt = select(self.model).order_by(*self.order_by)
        return list(self._session.execute(stmt).scalars().all())

    def save(self, entity: T) -> T:
        """Add the entity to the session and flush so generated keys are set."""
        self._session.add(entity)
        self._session.flush()
        return entity

    def delete(self, entity: T) -> None:
        """Delete the entity and flush."""
        self._session.delete(entity)
        self._session.flush()

    def _count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        return self._session.execute(stmt).scalar_one()

    def _find_all_where(self, *criteria: Any) -> list[T]:
        stmt = select(self.model).where(*criteria).order_by(*self.order_by)
        return list(self._session.execute(stmt).scalars().all())


class FacultyRepository(Repository[Faculty]):
    model = Faculty
    order_by = (Faculty.id,)

    def exists_by_name(self, name: str, exclude_id: int | None = None) -> bool:
        """Case-insensitive name lookup across all faculties."""
        criteria = [func.casefold(Faculty.name) == name.casefold()]
        if exclude_id is not None:
            criteria.append(Faculty.id != exclude_id)
        return self._count(*criteria) > 0


class DepartmentRepository(Repository[Department]):
    model = Department
    order_by = (Department.id,)

    def exists_by_name(self, name: str, exclude_id: int | None = None) -> bool:
        """Case-insensitive name lookup across all departments."""
        criteria = [func.casefold(Department.name) == name.casefold()]
        if exclude_id is not None:
            criteria.append(Department.id != exclude_id)
        return self._count(*criteria) > 0

    def find_all_by_faculty_id(self, faculty_id: int) -> list[Department]:
        return self._find_all_where(Department.faculty_id == faculty_id)

    def count_by_faculty_id(self, faculty_id: int) -> int:
        return self._count(Department.faculty_id == faculty_id)


class LevelRepository(Repository[Level]):
    model = Level
    order_by = (Level.id,)

    def exists_by_name_and_faculty_id(
        self, name: str, faculty_id: int, exclude_id: int | None = None
    ) -> bool:
        """Case-insensitive name lookup among the levels of one faculty."""
        criteria = [func.casefold(Level.name) == name.casefold(), Level.faculty_id == faculty_id]
        if exclude_id is not None:
            criteria.append(Level.id != exclude_id)
        return self._count(*criteria) > 0

    def find_all_by_faculty_id(self, faculty_id: int) -> list[Level]:
        return self._find_all_where(Level.faculty_id == faculty_id)

    def count_by_faculty_id(self, faculty_id: int) -> int:
        return self._count(Level.faculty_id == faculty_id)


class CourseRepository(Repository[Course]):
    model = Course
    order_by = (Course.code,)

    def find_by_code(self, code: str) -> Course | None:
        """Get a course by code, ignoring case."""
        stmt = select(Course).where(func.casefold(Course.code) == code.casefold())
        return self._session.execute(stmt).scalar_one_or_none()

    def exists_by_code(self, code: str) -> bool:
        return self._count(func.casefold(Course.code) == code.casefold()) > 0

    def find_all_by_department_id(self, department_id: int) -> list[Course]:
        return self._find_all_where(Course.department_id == department_id)

    def count_by_department_id(self, department_id: int) -> int:
        return self._count(Course.department_id == department_id)

    def find_all_by_level_id(self, level_id: int) -> list[Course]:
        return self._find_all_where(Course.level_id == level_id)

    def count_by_level_id(self, level_id: int) -> int:
        return self._count(Course.level_id == level_id)

    def count_by_level_faculty_id(self, faculty_id: int) -> int:
        """Count courses whose level belongs to the given faculty."""
        stmt = (
            select(func.count())
            .select_from(Course)
            .join(Level, Course.level_id == Level.id)
            .where(Level.faculty_id == faculty_id)
        )
        return self._session.execute(stmt).scalar_one()


class StudentRepository(Repository[Student]):
    model = Student
    order_by = (Student.id,)

    def count_by_department_id(self, department_id: int) -> int:
        return self._count(Student.department_id == department_id)

    def count_by_level_id(self, level_id: int) -> int:
        return self._count(Student.level_id == level_id)

    def find_all_by_faculty_id(self, faculty_id: int) -> list[Student]:
        """Students whose level belongs to the given faculty."""
        stmt = (
            select(Student)
            .join(Level, Student.level_id == Level.id)
            .where(Level.faculty_id == faculty_id)
            .order_by(Student.id)
        )
        return list(self._session.execute(stmt).scalars().all())

    def count_by_faculty_id(self, faculty_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(Student)
            .join(Level, Student.level_id == Level.id)
            .where(Level.faculty_id == faculty_id)
        )
        return self._session.execute(stmt).scalar_one()


class InstructorRepository(Repository[Instructor]):
    model = Instructor
    order_by = (Instructor.id,)

    def find_all_by_department_id(self, department_id: int) -> list[Instructor]:
        return self._find_all_where(Instructor.department_id == department_id)

    def count_by_department_id(self, department_id: int) -> int:
        return self._count(Instructor.department_id == department_id)


class EnrollmentRepository(Repository[Enrollment]):
    model = Enrollment
    order_by = (Enrollment.student_id, Enrollment.course_code)

    def find_by_pair(self, student_id: int, course_code: str) -> Enrollment | None:
        """Get an enrollment by its (student_id, course_code) identity."""
        return self._session.get(Enrollment, (student_id, course_code))

    def exists_by_pair(self, student_id: int, course_code: str) -> bool:
        return self.find_by_pair(student_id, course_code) is not None

    def find_all_by_student_id(self, student_id: int) -> list[Enrollment]:
        stmt = (
            select(Enrollment)
            .where(Enrollment.student_id == student_id)
            .order_by(Enrollment.course_code)
        )
        return list(self._session.execute(stmt).scalars().all())

    def count_by_student_id(self, student_id: int) -> int:
        return self._count(Enrollment.student_id == student_id)

    def find_all_by_course_code(self, course_code: str) -> list[Enrollment]:
        stmt = (
            select(Enrollment)
            .where(Enrollment.course_code == course_code)
            .order_by(Enrollment.student_id)
        )
        return list(self._session.execute(stmt).scalars().all())

    def count_by_course_code(self, course_code: str) -> int:
        return self._count(Enrollment.course_code == course_code)


class Repositories:
    """All repositories bound to one session."""

    def __init__(self, session: Session) -> None:
        self.faculties = FacultyRepository(session)
        self.departments = DepartmentRepository(session)
        self.levels = LevelRepository(session)
        self.courses = CourseRepository(session)
        self.students = StudentRepository(session)
        self.instructors = InstructorRepository(session)
        self.enrollments = EnrollmentRepository(session)
