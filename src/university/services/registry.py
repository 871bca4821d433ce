"""Registry - one entry point owning the database and every domain service."""

from __future__ import annotations

import logging

from university.registry.database import Database
from university.services.course import CourseService
from university.services.department import DepartmentService
from university.services.enrollment import EnrollmentService
from university.services.faculty import FacultyService
from university.services.instructor import InstructorService
from university.services.level import LevelService
from university.services.student import StudentService

logger = logging.getLogger(__name__)


class Registry:
    """Domain services sharing one database.

    Example:
        registry = Registry(":memory:")
        faculty = registry.faculties.create(FacultyRecord(name="Engineering"))
    """

    def __init__(self, db_path: str = "university.db") -> None:
        """Open the database and create missing tables.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory DB.
        """
        self.db = Database(db_path)
        self.db.create_tables()
        logger.debug("Registry opened on %s", db_path)

        self.faculties = FacultyService(self.db)
        self.departments = DepartmentService(self.db)
        self.levels = LevelService(self.db)
        self.courses = CourseService(self.db)
        self.students = StudentService(self.db)
        self.instructors = InstructorService(self.db)
        self.enrollments = EnrollmentService(self.db)

    def close(self) -> None:
        """Close the database connection."""
        self.db.close()
