"""DepartmentService - CRUD and faculty-scoped queries for departments."""

from __future__ import annotations

import logging

from university.registry.models import Department
from university.registry.records import DepartmentRecord, department_to_record
from university.services.base import BaseService, changed_fields, require

logger = logging.getLogger(__name__)


class DepartmentService(BaseService):
    """Departments belong to one faculty; names are unique university-wide."""

    def list_all(self) -> list[DepartmentRecord]:
        with self._unit_of_work() as uow:
            return [department_to_record(d) for d in uow.repos.departments.find_all()]

    def get(self, department_id: int) -> DepartmentRecord:
        with self._unit_of_work() as uow:
            return department_to_record(uow.lookup.get_department_or_raise(department_id))

    def create(self, record: DepartmentRecord) -> DepartmentRecord:
        """Create a department under an existing faculty.

        Raises:
            BadRequestError: FACULTY_NOT_PROVIDED, or a missing name
            NotFoundError: FACULTY_NOT_FOUND
            ConflictError: DEPARTMENT_ALREADY_EXISTS
        """
        name = require(record.name, "Department name must be provided")
        faculty_id = require(
            record.faculty_id, "Department must be in a faculty", "FACULTY_NOT_PROVIDED"
        )
        with self._unit_of_work() as uow:
            faculty = uow.lookup.get_faculty_or_raise(faculty_id)
            uow.names.assert_department_name_unique(name)
            department = uow.repos.departments.save(Department(name=name, faculty=faculty))
            logger.info(
                "Created department %s (%s) in faculty %s", department.id, name, faculty.id
            )
            return department_to_record(department)

    def update(self, department_id: int, record: DepartmentRecord) -> DepartmentRecord:
        """Rename a department. The owning faculty cannot change.

        Raises:
            NotFoundError: DEPARTMENT_NOT_FOUND
            ConflictError: DEPARTMENT_ALREADY_EXISTS
        """
        with self._unit_of_work() as uow:
            department = uow.lookup.get_department_or_raise(department_id)
            changes = changed_fields({"name": department.name}, {"name": record.name})
            if not changes:
                logger.debug("Department %s unchanged, skipping update", department_id)
                return department_to_record(department)

            uow.names.assert_department_name_unique(changes["name"], exclude_id=department.id)
            department.name = changes["name"]
            uow.repos.departments.save(department)
            logger.info("Updated department %s (%s)", department.id, department.name)
            return department_to_record(department)

    def delete(self, department_id: int) -> None:
        """Delete a department that owns no students and no courses.

        Raises:
            NotFoundError: DEPARTMENT_NOT_FOUND
            ConflictError: DEPARTMENT_HAS_ASSOCIATIONS
        """
        with self._unit_of_work() as uow:
            department = uow.lookup.get_department_or_raise(department_id)
            uow.guard.check(department)
            uow.repos.departments.delete(department)
            logger.info("Deleted department %s", department_id)

    # --- Faculty-scoped queries ---

    def list_by_faculty(self, faculty_id: int) -> list[DepartmentRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_faculty_exists(faculty_id)
            departments = uow.repos.departments.find_all_by_faculty_id(faculty_id)
            return [department_to_record(d) for d in departments]

    def count_by_faculty(self, faculty_id: int) -> int:
        with self._unit_of_work() as uow:
            uow.lookup.assert_faculty_exists(faculty_id)
            return uow.repos.departments.count_by_faculty_id(faculty_id)
