"""Domain services - CRUD and scoped queries over the registry."""

from university.services.course import CourseService
from university.services.department import DepartmentService
from university.services.enrollment import EnrollmentService
from university.services.faculty import FacultyService
from university.services.instructor import InstructorService
from university.services.level import LevelService
from university.services.registry import Registry
from university.services.student import StudentService

__all__ = [
    "CourseService",
    "DepartmentService",
    "EnrollmentService",
    "FacultyService",
    "InstructorService",
    "LevelService",
    "Registry",
    "StudentService",
]
