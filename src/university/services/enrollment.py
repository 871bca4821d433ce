"""EnrollmentService - grades of students in courses, keyed by the pair."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from university.registry.models import Enrollment
from university.registry.records import EnrollmentRecord, enrollment_to_record
from university.services.base import BaseService, require

if TYPE_CHECKING:
    from university.registry.models import Course, Student
    from university.registry.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class EnrollmentService(BaseService):
    """Enrollments have no id of their own.

    They are addressed by ``(student_id, course_code)``; the course code is
    matched ignoring case and stored as the course spells it.
    """

    def list_all(self) -> list[EnrollmentRecord]:
        with self._unit_of_work() as uow:
            return [enrollment_to_record(e) for e in uow.repos.enrollments.find_all()]

    def get(self, student_id: int, course_code: str) -> EnrollmentRecord:
        """Get an enrollment by its pair.

        Raises:
            NotFoundError: STUDENT_NOT_FOUND, COURSE_NOT_FOUND or ENROLLMENT_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            student, course = self._resolve(uow, student_id, course_code)
            enrollment = uow.lookup.get_enrollment_or_raise(student.id, course.code)
            return enrollment_to_record(enrollment)

    def create(self, record: EnrollmentRecord) -> EnrollmentRecord:
        """Enroll a student in a course with a grade.

        Raises:
            BadRequestError: STUDENT_NOT_PROVIDED, COURSE_NOT_PROVIDED,
                GRADE_NOT_SET or INVALID_GRADE
            NotFoundError: STUDENT_NOT_FOUND or COURSE_NOT_FOUND
            ConflictError: ENROLLMENT_ALREADY_EXISTS
        """
        with self._unit_of_work() as uow:
            student, course = self._resolve(uow, record.student_id, record.course_code)
            uow.lookup.assert_enrollment_exists(student.id, course.code, expected=False)
            enrollment = Enrollment(student_id=student.id, course_code=course.code)
            self._validate_and_save(uow, enrollment, student, course, record.grade)
            logger.info("Enrolled student %s in course %s", student.id, course.code)
            return enrollment_to_record(enrollment)

    def update(
        self, student_id: int, course_code: str, record: EnrollmentRecord
    ) -> EnrollmentRecord:
        """Change the grade of an existing enrollment.

        Raises:
            NotFoundError: STUDENT_NOT_FOUND, COURSE_NOT_FOUND or ENROLLMENT_NOT_FOUND
            BadRequestError: GRADE_NOT_SET or INVALID_GRADE
        """
        with self._unit_of_work() as uow:
            student, course = self._resolve(uow, student_id, course_code)
            enrollment = uow.lookup.get_enrollment_or_raise(student.id, course.code)
            self._validate_and_save(uow, enrollment, student, course, record.grade)
            logger.info("Updated enrollment of student %s in course %s", student.id, course.code)
            return enrollment_to_record(enrollment)

    def delete(self, student_id: int, course_code: str) -> None:
        """Remove a student from a course.

        Raises:
            NotFoundError: STUDENT_NOT_FOUND, COURSE_NOT_FOUND or ENROLLMENT_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            student, course = self._resolve(uow, student_id, course_code)
            enrollment = uow.lookup.get_enrollment_or_raise(student.id, course.code)
            uow.guard.check(enrollment)
            uow.repos.enrollments.delete(enrollment)
            logger.info("Deleted enrollment of student %s in course %s", student.id, course.code)

    def list_by_student(self, student_id: int) -> list[EnrollmentRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_student_exists(student_id)
            enrollments = uow.repos.enrollments.find_all_by_student_id(student_id)
            return [enrollment_to_record(e) for e in enrollments]

    def list_by_course(self, course_code: str) -> list[EnrollmentRecord]:
        with self._unit_of_work() as uow:
            course = uow.lookup.get_course_or_raise(course_code)
            enrollments = uow.repos.enrollments.find_all_by_course_code(course.code)
            return [enrollment_to_record(e) for e in enrollments]

    # --- Helpers ---

    def _resolve(
        self, uow: UnitOfWork, student_id: int | None, course_code: str | None
    ) -> tuple[Student, Course]:
        student_id = require(
            student_id, "Enrollment must have a student", "STUDENT_NOT_PROVIDED"
        )
        course_code = require(
            course_code, "Enrollment must have a course", "COURSE_NOT_PROVIDED"
        )
        student = uow.lookup.get_student_or_raise(student_id)
        return student, uow.lookup.get_course_or_raise(course_code)

    def _validate_and_save(
        self,
        uow: UnitOfWork,
        enrollment: Enrollment,
        student: Student,
        course: Course,
        grade: float | None,
    ) -> None:
        # Both sides are attached before the grade is looked at.
        enrollment.student = student
        enrollment.course = course
        enrollment.grade = uow.lookup.validate_grade(grade)
        uow.repos.enrollments.save(enrollment)
