"""Course CRUD endpoints, keyed by course code."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    CourseRequest,
    CourseResponse,
    EnrollmentResponse,
    course_to_response,
    enrollment_to_response,
)
from university.registry import CourseRecord

router = APIRouter(prefix="/courses", tags=["courses"])


def _to_record(course: CourseRequest, code: str | None) -> CourseRecord:
    return CourseRecord(
        code=code,
        name=course.name,
        credits=course.credits,
        department_id=course.department_id,
        level_id=course.level_id,
        instructor_ids=course.instructor_ids,
    )


@router.get("", response_model=list[CourseResponse])
def list_courses(registry: RegistryDep) -> list[CourseResponse]:
    """List all courses."""
    return [course_to_response(c) for c in registry.courses.list_all()]


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(course: CourseRequest, registry: RegistryDep) -> CourseResponse:
    """Create a course and attach its instructors."""
    return course_to_response(registry.courses.create(_to_record(course, course.code)))


@router.get("/{code}", response_model=CourseResponse)
def get_course(code: str, registry: RegistryDep) -> CourseResponse:
    """Get a course by code."""
    return course_to_response(registry.courses.get(code))


@router.put("/{code}", response_model=CourseResponse)
def update_course(code: str, course: CourseRequest, registry: RegistryDep) -> CourseResponse:
    """Replace a course's fields."""
    return course_to_response(registry.courses.update(code, _to_record(course, code)))


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(code: str, registry: RegistryDep) -> None:
    """Delete a course with no enrollments."""
    registry.courses.delete(code)


@router.get("/{code}/enrollments", response_model=list[EnrollmentResponse])
def list_course_enrollments(code: str, registry: RegistryDep) -> list[EnrollmentResponse]:
    return [enrollment_to_response(e) for e in registry.enrollments.list_by_course(code)]
