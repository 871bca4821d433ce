"""InstructorService - CRUD for instructors and the courses they teach."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from university.registry.models import Instructor
from university.registry.records import InstructorRecord, instructor_to_record
from university.services.base import BaseService, require

if TYPE_CHECKING:
    from university.registry.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class InstructorService(BaseService):
    def list_all(self) -> list[InstructorRecord]:
        with self._unit_of_work() as uow:
            return [instructor_to_record(i) for i in uow.repos.instructors.find_all()]

    def get(self, instructor_id: int) -> InstructorRecord:
        with self._unit_of_work() as uow:
            return instructor_to_record(uow.lookup.get_instructor_or_raise(instructor_id))

    def create(self, record: InstructorRecord, user_id: int | None = None) -> InstructorRecord:
        """Create an instructor and attach the requested courses.

        Args:
            record: Instructor fields; ``department_id`` is required
            user_id: Identity to link the instructor to, overriding ``record.user_id``

        Raises:
            BadRequestError: DEPARTMENT_NOT_PROVIDED, or a missing personal field
            NotFoundError: DEPARTMENT_NOT_FOUND or COURSE_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            instructor = Instructor(
                first_name=require(record.first_name, "Instructor first name must be provided"),
                last_name=require(record.last_name, "Instructor last name must be provided"),
                phone_number=require(
                    record.phone_number, "Instructor phone number must be provided"
                ),
                date_of_birth=require(
                    record.date_of_birth, "Instructor date of birth must be provided"
                ),
                gender=record.gender,
                user_id=user_id if user_id is not None else record.user_id,
            )
            self._resolve_and_save(uow, instructor, record)
            logger.info(
                "Created instructor %s in department %s", instructor.id, instructor.department_id
            )
            return instructor_to_record(instructor)

    def update(self, instructor_id: int, record: InstructorRecord) -> InstructorRecord:
        """Replace an instructor's fields and attach any newly listed courses.

        Raises:
            NotFoundError: INSTRUCTOR_NOT_FOUND, DEPARTMENT_NOT_FOUND or COURSE_NOT_FOUND
            BadRequestError: DEPARTMENT_NOT_PROVIDED, or a missing personal field
        """
        with self._unit_of_work() as uow:
            instructor = uow.lookup.get_instructor_or_raise(instructor_id)
            instructor.first_name = require(
                record.first_name, "Instructor first name must be provided"
            )
            instructor.last_name = require(
                record.last_name, "Instructor last name must be provided"
            )
            instructor.phone_number = require(
                record.phone_number, "Instructor phone number must be provided"
            )
            instructor.date_of_birth = require(
                record.date_of_birth, "Instructor date of birth must be provided"
            )
            instructor.gender = record.gender
            self._resolve_and_save(uow, instructor, record)
            logger.info("Updated instructor %s", instructor.id)
            return instructor_to_record(instructor)

    def delete(self, instructor_id: int) -> None:
        """Delete an instructor after removing it from every course it teaches.

        Raises:
            NotFoundError: INSTRUCTOR_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            instructor = uow.lookup.get_instructor_or_raise(instructor_id)
            uow.guard.check(instructor)
            uow.guard.detach(instructor)
            uow.repos.instructors.delete(instructor)
            logger.info("Deleted instructor %s", instructor_id)

    def list_by_department(self, department_id: int) -> list[InstructorRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_department_exists(department_id)
            instructors = uow.repos.instructors.find_all_by_department_id(department_id)
            return [instructor_to_record(i) for i in instructors]

    def count_by_department(self, department_id: int) -> int:
        with self._unit_of_work() as uow:
            uow.lookup.assert_department_exists(department_id)
            return uow.repos.instructors.count_by_department_id(department_id)

    def _resolve_and_save(
        self, uow: UnitOfWork, instructor: Instructor, record: InstructorRecord
    ) -> None:
        department_id = require(
            record.department_id, "Instructor must be in a department", "DEPARTMENT_NOT_PROVIDED"
        )
        instructor.department = uow.lookup.get_department_or_raise(department_id)
        uow.repos.instructors.save(instructor)
        if record.course_codes is not None:
            uow.associations.attach_courses(instructor, record.course_codes)
            uow.repos.instructors.save(instructor)
