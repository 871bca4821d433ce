"""StudentService - CRUD for students and faculty-scoped queries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from university.registry.models import Student
from university.registry.records import StudentRecord, student_to_record
from university.services.base import BaseService, require

if TYPE_CHECKING:
    from university.registry.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class StudentService(BaseService):
    """Students sit in a level and may also belong to a department.

    The faculty of a student is the faculty of its level.
    """

    def list_all(self) -> list[StudentRecord]:
        with self._unit_of_work() as uow:
            return [student_to_record(s) for s in uow.repos.students.find_all()]

    def get(self, student_id: int) -> StudentRecord:
        with self._unit_of_work() as uow:
            return student_to_record(uow.lookup.get_student_or_raise(student_id))

    def create(self, record: StudentRecord, user_id: int | None = None) -> StudentRecord:
        """Create a student.

        Args:
            record: Student fields; ``level_id`` is required
            user_id: Identity to link the student to, overriding ``record.user_id``

        Returns:
            The stored student

        Raises:
            BadRequestError: LEVEL_NOT_PROVIDED, or a missing personal field
            NotFoundError: LEVEL_NOT_FOUND or DEPARTMENT_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            student = Student(
                first_name=require(record.first_name, "Student first name must be provided"),
                last_name=require(record.last_name, "Student last name must be provided"),
                phone_number=require(
                    record.phone_number, "Student phone number must be provided"
                ),
                date_of_birth=require(
                    record.date_of_birth, "Student date of birth must be provided"
                ),
                gender=record.gender,
                user_id=user_id if user_id is not None else record.user_id,
            )
            self._resolve_and_save(uow, student, record)
            logger.info("Created student %s in level %s", student.id, student.level_id)
            return student_to_record(student)

    def update(self, student_id: int, record: StudentRecord) -> StudentRecord:
        """Replace a student's fields. The identity link is left untouched.

        Raises:
            NotFoundError: STUDENT_NOT_FOUND, LEVEL_NOT_FOUND or DEPARTMENT_NOT_FOUND
            BadRequestError: LEVEL_NOT_PROVIDED, or a missing personal field
        """
        with self._unit_of_work() as uow:
            student = uow.lookup.get_student_or_raise(student_id)
            student.first_name = require(
                record.first_name, "Student first name must be provided"
            )
            student.last_name = require(record.last_name, "Student last name must be provided")
            student.phone_number = require(
                record.phone_number, "Student phone number must be provided"
            )
            student.date_of_birth = require(
                record.date_of_birth, "Student date of birth must be provided"
            )
            student.gender = record.gender
            self._resolve_and_save(uow, student, record)
            logger.info("Updated student %s", student.id)
            return student_to_record(student)

    def delete(self, student_id: int) -> None:
        """Delete a student that is not enrolled in any course.

        Raises:
            NotFoundError: STUDENT_NOT_FOUND
            ConflictError: STUDENT_HAS_ENROLLMENTS
        """
        with self._unit_of_work() as uow:
            student = uow.lookup.get_student_or_raise(student_id)
            uow.guard.check(student)
            uow.repos.students.delete(student)
            logger.info("Deleted student %s", student_id)

    # --- Faculty-scoped queries ---

    def list_by_faculty(self, faculty_id: int) -> list[StudentRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_faculty_exists(faculty_id)
            students = uow.repos.students.find_all_by_faculty_id(faculty_id)
            return [student_to_record(s) for s in students]

    def count_by_faculty(self, faculty_id: int) -> int:
        with self._unit_of_work() as uow:
            uow.lookup.assert_faculty_exists(faculty_id)
            return uow.repos.students.count_by_faculty_id(faculty_id)

    def _resolve_and_save(self, uow: UnitOfWork, student: Student, record: StudentRecord) -> None:
        level_id = require(record.level_id, "Student must be in a level", "LEVEL_NOT_PROVIDED")
        level = uow.lookup.get_level_or_raise(level_id)
        # Department is optional
        department = None
        if record.department_id is not None:
            department = uow.lookup.get_department_or_raise(record.department_id)
        student.level = level
        student.department = department
        uow.repos.students.save(student)
