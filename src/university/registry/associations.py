"""AssociationMaintainer - keeps Course <-> Instructor consistent on attach."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from university.registry.lookup import Lookup
    from university.registry.models import Course, Instructor

logger = logging.getLogger(__name__)


class AssociationMaintainer:
    """Attach members to an owner on both sides of the relation.

    Attaching is idempotent: members already present are skipped. Nothing is
    ever detached here; see DeletionGuard.detach.

    Both sides of a pair are loaded before anything is appended to them.
    """

    def __init__(self, lookup: Lookup) -> None:
        self._lookup = lookup

    def attach_courses(self, instructor: Instructor, course_codes: Iterable[str]) -> None:
        """Attach each course to the instructor.

        Raises:
            NotFoundError: If any course code does not exist
        """
        owned = instructor.courses
        for code in course_codes:
            course = self._lookup.get_course_or_raise(code)
            if instructor not in course.instructors:
                course.instructors.append(instructor)
            if course not in owned:
                owned.append(course)
            logger.debug("Course %s attached to instructor %s", course.code, instructor.id)

    def attach_instructors(self, course: Course, instructor_ids: Iterable[int]) -> None:
        """Attach each instructor to the course.

        Raises:
            NotFoundError: If any instructor id does not exist
        """
        owned = course.instructors
        for instructor_id in instructor_ids:
            instructor = self._lookup.get_instructor_or_raise(instructor_id)
            if course not in instructor.courses:
                instructor.courses.append(course)
            if instructor not in owned:
                owned.append(instructor)
            logger.debug("Instructor %s attached to course %s", instructor.id, course.code)
