"""Faculty CRUD endpoints and faculty-scoped listings."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    CountResponse,
    DepartmentResponse,
    FacultyRequest,
    FacultyResponse,
    LevelResponse,
    StudentResponse,
    department_to_response,
    faculty_to_response,
    level_to_response,
    student_to_response,
)
from university.registry import FacultyRecord

router = APIRouter(prefix="/faculties", tags=["faculties"])


@router.get("", response_model=list[FacultyResponse])
def list_faculties(registry: RegistryDep) -> list[FacultyResponse]:
    """List all faculties."""
    return [faculty_to_response(f) for f in registry.faculties.list_all()]


@router.post("", response_model=FacultyResponse, status_code=status.HTTP_201_CREATED)
def create_faculty(faculty: FacultyRequest, registry: RegistryDep) -> FacultyResponse:
    """Create a new faculty."""
    created = registry.faculties.create(FacultyRecord(name=faculty.name))
    return faculty_to_response(created)


@router.get("/{faculty_id}", response_model=FacultyResponse)
def get_faculty(faculty_id: int, registry: RegistryDep) -> FacultyResponse:
    """Get a faculty by ID."""
    return faculty_to_response(registry.faculties.get(faculty_id))


@router.put("/{faculty_id}", response_model=FacultyResponse)
def update_faculty(
    faculty_id: int, faculty: FacultyRequest, registry: RegistryDep
) -> FacultyResponse:
    """Rename a faculty."""
    updated = registry.faculties.update(faculty_id, FacultyRecord(name=faculty.name))
    return faculty_to_response(updated)


@router.delete("/{faculty_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_faculty(faculty_id: int, registry: RegistryDep) -> None:
    """Delete a faculty that has no departments."""
    registry.faculties.delete(faculty_id)


@router.get("/{faculty_id}/departments", response_model=list[DepartmentResponse])
def list_faculty_departments(faculty_id: int, registry: RegistryDep) -> list[DepartmentResponse]:
    return [department_to_response(d) for d in registry.departments.list_by_faculty(faculty_id)]


@router.get("/{faculty_id}/departments/count", response_model=CountResponse)
def count_faculty_departments(faculty_id: int, registry: RegistryDep) -> CountResponse:
    return CountResponse(count=registry.departments.count_by_faculty(faculty_id))


@router.get("/{faculty_id}/levels", response_model=list[LevelResponse])
def list_faculty_levels(faculty_id: int, registry: RegistryDep) -> list[LevelResponse]:
    return [level_to_response(level) for level in registry.levels.list_by_faculty(faculty_id)]


@router.get("/{faculty_id}/students", response_model=list[StudentResponse])
def list_faculty_students(faculty_id: int, registry: RegistryDep) -> list[StudentResponse]:
    return [student_to_response(s) for s in registry.students.list_by_faculty(faculty_id)]


@router.get("/{faculty_id}/students/count", response_model=CountResponse)
def count_faculty_students(faculty_id: int, registry: RegistryDep) -> CountResponse:
    return CountResponse(count=registry.students.count_by_faculty(faculty_id))
