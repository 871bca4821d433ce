"""Registry - entity graph, persistence and integrity rules for the university."""

from university.registry.database import Database
from university.registry.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    RegistryError,
)
from university.registry.models import (
    Course,
    Department,
    Enrollment,
    Faculty,
    Instructor,
    Level,
    Student,
)
from university.registry.records import (
    CourseRecord,
    DepartmentRecord,
    EnrollmentRecord,
    FacultyRecord,
    InstructorRecord,
    LevelRecord,
    StudentRecord,
)
from university.registry.unit_of_work import UnitOfWork

__all__ = [
    "BadRequestError",
    "ConflictError",
    "Course",
    "CourseRecord",
    "Database",
    "Department",
    "DepartmentRecord",
    "Enrollment",
    "EnrollmentRecord",
    "Faculty",
    "FacultyRecord",
    "Instructor",
    "InstructorRecord",
    "Level",
    "LevelRecord",
    "NotFoundError",
    "RegistryError",
    "Student",
    "StudentRecord",
    "UnitOfWork",
]
