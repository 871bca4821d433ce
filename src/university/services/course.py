"""CourseService - CRUD for courses, keyed by their caller-supplied code."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from university.registry.models import Course
from university.registry.records import CourseRecord, course_to_record
from university.services.base import BaseService, require

if TYPE_CHECKING:
    from university.registry.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CourseService(BaseService):
    """Courses belong to a level and a department and are taught by instructors.

    Course codes are unique ignoring case. A course can only be deleted while
    nobody is enrolled in it; deleting it removes it from every instructor.
    """

    def list_all(self) -> list[CourseRecord]:
        with self._unit_of_work() as uow:
            return [course_to_record(c) for c in uow.repos.courses.find_all()]

    def get(self, code: str) -> CourseRecord:
        """Get a course by code.

        Raises:
            NotFoundError: COURSE_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            return course_to_record(uow.lookup.get_course_or_raise(code))

    def create(self, record: CourseRecord) -> CourseRecord:
        """Create a course and attach the requested instructors.

        Raises:
            BadRequestError: Missing code, name, credits, level or department
            NotFoundError: LEVEL_NOT_FOUND, DEPARTMENT_NOT_FOUND or INSTRUCTOR_NOT_FOUND
            ConflictError: COURSE_ALREADY_EXISTS
        """
        code = require(record.code, "Course code must be provided")
        with self._unit_of_work() as uow:
            uow.lookup.assert_course_exists(code, expected=False)
            course = Course(
                code=code,
                name=require(record.name, "Course name must be provided"),
                credits=require(record.credits, "Course credits must be provided"),
            )
            self._resolve_and_save(uow, course, record)
            logger.info("Created course %s", course.code)
            return course_to_record(course)

    def update(self, code: str, record: CourseRecord) -> CourseRecord:
        """Replace a course's fields. The code itself cannot change.

        Instructors listed in the record are attached; existing ones stay.

        Raises:
            NotFoundError: COURSE_NOT_FOUND, or a missing level/department/instructor
            BadRequestError: Missing name, credits, level or department
        """
        with self._unit_of_work() as uow:
            course = uow.lookup.get_course_or_raise(code)
            course.name = require(record.name, "Course name must be provided")
            course.credits = require(record.credits, "Course credits must be provided")
            self._resolve_and_save(uow, course, record)
            logger.info("Updated course %s", course.code)
            return course_to_record(course)

    def delete(self, code: str) -> None:
        """Delete a course that has no enrollments.

        Raises:
            NotFoundError: COURSE_NOT_FOUND
            ConflictError: COURSE_HAS_ENROLLMENTS
        """
        with self._unit_of_work() as uow:
            course = uow.lookup.get_course_or_raise(code)
            uow.guard.check(course)
            uow.guard.detach(course)
            uow.repos.courses.delete(course)
            logger.info("Deleted course %s", course.code)

    # --- Scoped queries ---

    def list_by_department(self, department_id: int) -> list[CourseRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_department_exists(department_id)
            courses = uow.repos.courses.find_all_by_department_id(department_id)
            return [course_to_record(c) for c in courses]

    def count_by_department(self, department_id: int) -> int:
        with self._unit_of_work() as uow:
            uow.lookup.assert_department_exists(department_id)
            return uow.repos.courses.count_by_department_id(department_id)

    def list_by_level(self, level_id: int) -> list[CourseRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_level_exists(level_id)
            return [course_to_record(c) for c in uow.repos.courses.find_all_by_level_id(level_id)]

    # --- Helpers ---

    def _resolve_and_save(self, uow: UnitOfWork, course: Course, record: CourseRecord) -> None:
        level_id = require(record.level_id, "Course must have a level", "LEVEL_NOT_PROVIDED")
        department_id = require(
            record.department_id, "Course must have a department", "DEPARTMENT_NOT_PROVIDED"
        )
        # Parents are loaded before either is assigned; a load would autoflush the course.
        level = uow.lookup.get_level_or_raise(level_id)
        department = uow.lookup.get_department_or_raise(department_id)
        course.level = level
        course.department = department

        uow.repos.courses.save(course)
        if record.instructor_ids is not None:
            uow.associations.attach_instructors(course, record.instructor_ids)
            uow.repos.courses.save(course)
