"""DeletionGuard - refuses deletes that would orphan dependent records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from university.registry.exceptions import ConflictError
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
    from collections.abc import Callable

    from university.registry.repositories import Repositories

logger = logging.getLogger(__name__)


class DeletionGuard:
    """Checks run before a node of the ownership tree is deleted.

    Dependents are counted by id through the repositories, so the check never
    depends on which collections happen to be loaded in the session.
    """

    def __init__(self, repos: Repositories) -> None:
        self._repos = repos
        self._checks: dict[type, Callable[[Any], None]] = {
            Faculty: self._check_faculty,
            Department: self._check_department,
            Level: self._check_level,
            Course: self._check_course,
            Student: self._check_student,
            Instructor: self._check_instructor,
            Enrollment: self._check_enrollment,
        }

    def check(self, entity: object) -> None:
        """Raise ConflictError if the entity still has dependents.

        Raises:
            ConflictError: If deleting the entity would orphan a dependent
            TypeError: If the entity type is not part of the registry
        """
        check = self._checks.get(type(entity))
        if check is None:
            raise TypeError(f"No deletion guard for {type(entity).__name__}")
        check(entity)

    def detach(self, entity: object) -> None:
        """Remove the entity from the reciprocal side of its associations."""
        if isinstance(entity, Instructor):
            for course in list(entity.courses):
                course.instructors.remove(entity)
            logger.debug("Instructor %s detached from all courses", entity.id)
        elif isinstance(entity, Course):
            for instructor in list(entity.instructors):
                instructor.courses.remove(entity)
            logger.debug("Course %s detached from all instructors", entity.code)

    # --- Per-type checks ---

    def _check_faculty(self, faculty: Faculty) -> None:
        if self._repos.departments.count_by_faculty_id(faculty.id) > 0:
            raise ConflictError(
                f"Cannot delete faculty with id {faculty.id} because it has associated departments",
                "FACULTY_HAS_DEPARTMENTS",
            )
        # Empty levels go with the faculty; populated ones would be orphaned.
        students = self._repos.students.count_by_faculty_id(faculty.id)
        courses = self._repos.courses.count_by_level_faculty_id(faculty.id)
        if students > 0 or courses > 0:
            raise ConflictError(
                f"Cannot delete faculty with id {faculty.id} because its levels "
                "have associated students or courses",
                "FACULTY_HAS_LEVELS",
            )

    def _check_department(self, department: Department) -> None:
        students = self._repos.students.count_by_department_id(department.id)
        courses = self._repos.courses.count_by_department_id(department.id)
        # Instructors require a department, so they block the delete as well.
        instructors = self._repos.instructors.count_by_department_id(department.id)
        if students > 0 or courses > 0 or instructors > 0:
            raise ConflictError(
                f"Cannot delete department with id {department.id} because it has "
                "associated students, courses or instructors",
                "DEPARTMENT_HAS_ASSOCIATIONS",
            )

    def _check_level(self, level: Level) -> None:
        students = self._repos.students.count_by_level_id(level.id)
        courses = self._repos.courses.count_by_level_id(level.id)
        if students > 0 or courses > 0:
            raise ConflictError(
                f"Cannot delete level with id {level.id} because it has "
                "associated students or courses",
                "LEVEL_DELETE_CONFLICT",
            )

    def _check_course(self, course: Course) -> None:
        if self._repos.enrollments.count_by_course_code(course.code) > 0:
            raise ConflictError(
                f"Cannot delete course with code {course.code} because it has enrollments",
                "COURSE_HAS_ENROLLMENTS",
            )

    def _check_student(self, student: Student) -> None:
        if self._repos.enrollments.count_by_student_id(student.id) > 0:
            raise ConflictError(
                f"Cannot delete student with id {student.id} because they are enrolled in courses",
                "STUDENT_HAS_ENROLLMENTS",
            )

    def _check_instructor(self, _instructor: Instructor) -> None:
        return

    def _check_enrollment(self, _enrollment: Enrollment) -> None:
        return
