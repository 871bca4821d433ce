"""Lookup - resolves identifiers to entities and owns the NotFound policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from university.registry.exceptions import BadRequestError, ConflictError, NotFoundError

if TYPE_CHECKING:
    from university.registry.models import (
        Course,
        Department,
        Enrollment,
        Faculty,
        Instructor,
        Level,
        Student,
    )
    from university.registry.repositories import Repositories

MIN_GRADE = 0.0
MAX_GRADE = 100.0


class Lookup:
    """Resolve ids and codes against the repositories.

    ``get_*_or_raise`` returns the entity or raises NotFoundError.
    ``assert_*_exists(key, expected)`` only checks presence: with
    ``expected=True`` an absent key raises NotFoundError, with
    ``expected=False`` a present key raises ConflictError.
    """

    def __init__(self, repos: Repositories) -> None:
        self._repos = repos

    # --- Faculty ---

    def get_faculty_or_raise(self, faculty_id: int) -> Faculty:
        faculty = self._repos.faculties.find_by_id(faculty_id)
        if faculty is None:
            raise NotFoundError(f"Faculty with id {faculty_id} not found", "FACULTY_NOT_FOUND")
        return faculty

    def assert_faculty_exists(self, faculty_id: int) -> None:
        if not self._repos.faculties.exists_by_id(faculty_id):
            raise NotFoundError(f"Faculty with id {faculty_id} not found", "FACULTY_NOT_FOUND")

    # --- Department ---

    def get_department_or_raise(self, department_id: int) -> Department:
        department = self._repos.departments.find_by_id(department_id)
        if department is None:
            raise NotFoundError(
                f"Department with id {department_id} not found", "DEPARTMENT_NOT_FOUND"
            )
        return department

    def assert_department_exists(self, department_id: int) -> None:
        if not self._repos.departments.exists_by_id(department_id):
            raise NotFoundError(
                f"Department with id {department_id} not found", "DEPARTMENT_NOT_FOUND"
            )

    # --- Level ---

    def get_level_or_raise(self, level_id: int) -> Level:
        level = self._repos.levels.find_by_id(level_id)
        if level is None:
            raise NotFoundError(f"Level with id {level_id} not found", "LEVEL_NOT_FOUND")
        return level

    def assert_level_exists(self, level_id: int) -> None:
        if not self._repos.levels.exists_by_id(level_id):
            raise NotFoundError(f"Level with id {level_id} not found", "LEVEL_NOT_FOUND")

    # --- Course ---

    def get_course_or_raise(self, code: str) -> Course:
        course = self._repos.courses.find_by_code(code)
        if course is None:
            raise NotFoundError(f"Course with code {code} not found", "COURSE_NOT_FOUND")
        return course

    def assert_course_exists(self, code: str, expected: bool = True) -> None:
        exists = self._repos.courses.exists_by_code(code)
        if expected and not exists:
            raise NotFoundError(f"Course with code {code} not found", "COURSE_NOT_FOUND")
        if not expected and exists:
            raise ConflictError(f"Course with code {code} already exists", "COURSE_ALREADY_EXISTS")

    # --- Student ---

    def get_student_or_raise(self, student_id: int) -> Student:
        student = self._repos.students.find_by_id(student_id)
        if student is None:
            raise NotFoundError(f"Student with id {student_id} not found", "STUDENT_NOT_FOUND")
        return student

    def assert_student_exists(self, student_id: int) -> None:
        if not self._repos.students.exists_by_id(student_id):
            raise NotFoundError(f"Student with id {student_id} not found", "STUDENT_NOT_FOUND")

    # --- Instructor ---

    def get_instructor_or_raise(self, instructor_id: int) -> Instructor:
        instructor = self._repos.instructors.find_by_id(instructor_id)
        if instructor is None:
            raise NotFoundError(
                f"Instructor with id {instructor_id} not found", "INSTRUCTOR_NOT_FOUND"
            )
        return instructor

    # --- Enrollment ---

    def get_enrollment_or_raise(self, student_id: int, course_code: str) -> Enrollment:
        enrollment = self._repos.enrollments.find_by_pair(student_id, course_code)
        if enrollment is None:
            raise NotFoundError(
                f"Enrollment for student_id {student_id} and course_code {course_code} not found",
                "ENROLLMENT_NOT_FOUND",
            )
        return enrollment

    def assert_enrollment_exists(
        self, student_id: int, course_code: str, expected: bool = True
    ) -> None:
        exists = self._repos.enrollments.exists_by_pair(student_id, course_code)
        if expected and not exists:
            raise NotFoundError(
                f"Enrollment not found for student_id {student_id} and course_code {course_code}",
                "ENROLLMENT_NOT_FOUND",
            )
        if not expected and exists:
            raise ConflictError(
                f"Enrollment already exists for student_id {student_id} "
                f"and course_code {course_code}",
                "ENROLLMENT_ALREADY_EXISTS",
            )

    # --- Grade ---

    def validate_grade(self, grade: float | None) -> float:
        """Return the grade if it is set and within range.

        Raises:
            BadRequestError: GRADE_NOT_SET or INVALID_GRADE
        """
        if grade is None:
            raise BadRequestError("Grade must be set for enrollment", "GRADE_NOT_SET")
        if not MIN_GRADE <= grade <= MAX_GRADE:
            raise BadRequestError(
                f"Grade {grade} is invalid, grade must be between "
                f"{MIN_GRADE:.2f} and {MAX_GRADE:.2f}",
                "INVALID_GRADE",
            )
        return grade
