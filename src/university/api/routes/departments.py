"""Department CRUD endpoints and department-scoped listings."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    CountResponse,
    CourseResponse,
    DepartmentRequest,
    DepartmentResponse,
    InstructorResponse,
    course_to_response,
    department_to_response,
    instructor_to_response,
)
from university.registry import DepartmentRecord

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[DepartmentResponse])
def list_departments(registry: RegistryDep) -> list[DepartmentResponse]:
    """List all departments."""
    return [department_to_response(d) for d in registry.departments.list_all()]


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
def create_department(department: DepartmentRequest, registry: RegistryDep) -> DepartmentResponse:
    """Create a department in a faculty."""
    created = registry.departments.create(
        DepartmentRecord(name=department.name, faculty_id=department.faculty_id)
    )
    return department_to_response(created)


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(department_id: int, registry: RegistryDep) -> DepartmentResponse:
    """Get a department by ID."""
    return department_to_response(registry.departments.get(department_id))


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(
    department_id: int, department: DepartmentRequest, registry: RegistryDep
) -> DepartmentResponse:
    """Rename a department. Its faculty does not change."""
    updated = registry.departments.update(department_id, DepartmentRecord(name=department.name))
    return department_to_response(updated)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(department_id: int, registry: RegistryDep) -> None:
    """Delete a department with no students, courses or instructors."""
    registry.departments.delete(department_id)


@router.get("/{department_id}/courses", response_model=list[CourseResponse])
def list_department_courses(department_id: int, registry: RegistryDep) -> list[CourseResponse]:
    return [course_to_response(c) for c in registry.courses.list_by_department(department_id)]


@router.get("/{department_id}/courses/count", response_model=CountResponse)
def count_department_courses(department_id: int, registry: RegistryDep) -> CountResponse:
    return CountResponse(count=registry.courses.count_by_department(department_id))


@router.get("/{department_id}/instructors", response_model=list[InstructorResponse])
def list_department_instructors(
    department_id: int, registry: RegistryDep
) -> list[InstructorResponse]:
    instructors = registry.instructors.list_by_department(department_id)
    return [instructor_to_response(i) for i in instructors]
