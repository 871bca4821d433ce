"""FacultyService - CRUD for faculties."""

from __future__ import annotations

import logging

from university.registry.models import Faculty
from university.registry.records import FacultyRecord, faculty_to_record
from university.services.base import BaseService, changed_fields, require

logger = logging.getLogger(__name__)


class FacultyService(BaseService):
    """Faculties: globally unique names, deletable only without departments."""

    def list_all(self) -> list[FacultyRecord]:
        """List all faculties, ordered by id."""
        with self._unit_of_work() as uow:
            return [faculty_to_record(f) for f in uow.repos.faculties.find_all()]

    def get(self, faculty_id: int) -> FacultyRecord:
        """Get a faculty by id.

        Raises:
            NotFoundError: FACULTY_NOT_FOUND
        """
        with self._unit_of_work() as uow:
            return faculty_to_record(uow.lookup.get_faculty_or_raise(faculty_id))

    def create(self, record: FacultyRecord) -> FacultyRecord:
        """Create a faculty.

        Raises:
            BadRequestError: If the name is missing
            ConflictError: FACULTY_ALREADY_EXISTS, compared case-insensitively
        """
        name = require(record.name, "Faculty name must be provided")
        with self._unit_of_work() as uow:
            uow.names.assert_faculty_name_unique(name)
            faculty = uow.repos.faculties.save(Faculty(name=name))
            logger.info("Created faculty %s (%s)", faculty.id, faculty.name)
            return faculty_to_record(faculty)

    def update(self, faculty_id: int, record: FacultyRecord) -> FacultyRecord:
        """Rename a faculty. An unchanged name is a no-op.

        Raises:
            NotFoundError: FACULTY_NOT_FOUND
            ConflictError: FACULTY_ALREADY_EXISTS
        """
        with self._unit_of_work() as uow:
            faculty = uow.lookup.get_faculty_or_raise(faculty_id)
            changes = changed_fields({"name": faculty.name}, {"name": record.name})
            if not changes:
                logger.debug("Faculty %s unchanged, skipping update", faculty_id)
                return faculty_to_record(faculty)

            uow.names.assert_faculty_name_unique(changes["name"], exclude_id=faculty.id)
            faculty.name = changes["name"]
            uow.repos.faculties.save(faculty)
            logger.info("Updated faculty %s (%s)", faculty.id, faculty.name)
            return faculty_to_record(faculty)

    def delete(self, faculty_id: int) -> None:
        """Delete a faculty and its empty levels.

        Raises:
            NotFoundError: FACULTY_NOT_FOUND
            ConflictError: FACULTY_HAS_DEPARTMENTS or FACULTY_HAS_LEVELS
        """
        with self._unit_of_work() as uow:
            faculty = uow.lookup.get_faculty_or_raise(faculty_id)
            uow.guard.check(faculty)
            uow.repos.faculties.delete(faculty)
            logger.info("Deleted faculty %s", faculty_id)
