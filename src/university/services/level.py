"""LevelService - CRUD for levels, named uniquely within their faculty."""

from __future__ import annotations

import logging

from university.registry.models import Level
from university.registry.records import LevelRecord, level_to_record
from university.services.base import BaseService, changed_fields, require

logger = logging.getLogger(__name__)


class LevelService(BaseService):
    def list_all(self) -> list[LevelRecord]:
        with self._unit_of_work() as uow:
            return [level_to_record(level) for level in uow.repos.levels.find_all()]

    def get(self, level_id: int) -> LevelRecord:
        with self._unit_of_work() as uow:
            return level_to_record(uow.lookup.get_level_or_raise(level_id))

    def create(self, record: LevelRecord) -> LevelRecord:
        """Create a level under an existing faculty.

        Raises:
            BadRequestError: FACULTY_NOT_PROVIDED, or a missing name
            NotFoundError: FACULTY_NOT_FOUND
            ConflictError: LEVEL_ALREADY_EXISTS within the same faculty
        """
        name = require(record.name, "Level name must be provided")
        faculty_id = require(
            record.faculty_id, "Level must be in a faculty", "FACULTY_NOT_PROVIDED"
        )
        with self._unit_of_work() as uow:
            faculty = uow.lookup.get_faculty_or_raise(faculty_id)
            uow.names.assert_level_name_unique(name, faculty.id)
            level = uow.repos.levels.save(Level(name=name, faculty=faculty))
            logger.info("Created level %s (%s) in faculty %s", level.id, name, faculty.id)
            return level_to_record(level)

    def update(self, level_id: int, record: LevelRecord) -> LevelRecord:
        """Rename a level. An unchanged name is a no-op.

        Raises:
            NotFoundError: LEVEL_NOT_FOUND
            ConflictError: LEVEL_ALREADY_EXISTS
        """
        with self._unit_of_work() as uow:
            level = uow.lookup.get_level_or_raise(level_id)
            changes = changed_fields({"name": level.name}, {"name": record.name})
            if not changes:
                logger.debug("Level %s unchanged, skipping update", level_id)
                return level_to_record(level)

            uow.names.assert_level_name_unique(
                changes["name"], level.faculty_id, exclude_id=level.id
            )
            level.name = changes["name"]
            uow.repos.levels.save(level)
            logger.info("Updated level %s (%s)", level.id, level.name)
            return level_to_record(level)

    def delete(self, level_id: int) -> None:
        """Delete a level that owns no students and no courses.

        Raises:
            NotFoundError: LEVEL_NOT_FOUND
            ConflictError: LEVEL_DELETE_CONFLICT
        """
        with self._unit_of_work() as uow:
            level = uow.lookup.get_level_or_raise(level_id)
            uow.guard.check(level)
            uow.repos.levels.delete(level)
            logger.info("Deleted level %s", level_id)

    def list_by_faculty(self, faculty_id: int) -> list[LevelRecord]:
        with self._unit_of_work() as uow:
            uow.lookup.assert_faculty_exists(faculty_id)
            levels = uow.repos.levels.find_all_by_faculty_id(faculty_id)
            return [level_to_record(level) for level in levels]
