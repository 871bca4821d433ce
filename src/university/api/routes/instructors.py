"""Instructor CRUD endpoints."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    InstructorRequest,
    InstructorResponse,
    instructor_to_response,
)
from university.registry import InstructorRecord

router = APIRouter(prefix="/instructors", tags=["instructors"])


def _to_record(instructor: InstructorRequest) -> InstructorRecord:
    return InstructorRecord(
        first_name=instructor.first_name,
        last_name=instructor.last_name,
        phone_number=instructor.phone_number,
        date_of_birth=instructor.date_of_birth,
        gender=instructor.gender,
        department_id=instructor.department_id,
        course_codes=instructor.course_codes,
        user_id=instructor.user_id,
    )


@router.get("", response_model=list[InstructorResponse])
def list_instructors(registry: RegistryDep) -> list[InstructorResponse]:
    """List all instructors."""
    return [instructor_to_response(i) for i in registry.instructors.list_all()]


@router.post("", response_model=InstructorResponse, status_code=status.HTTP_201_CREATED)
def create_instructor(instructor: InstructorRequest, registry: RegistryDep) -> InstructorResponse:
    """Create an instructor and attach the listed courses."""
    return instructor_to_response(registry.instructors.create(_to_record(instructor)))


@router.get("/{instructor_id}", response_model=InstructorResponse)
def get_instructor(instructor_id: int, registry: RegistryDep) -> InstructorResponse:
    """Get an instructor by ID."""
    return instructor_to_response(registry.instructors.get(instructor_id))


@router.put("/{instructor_id}", response_model=InstructorResponse)
def update_instructor(
    instructor_id: int, instructor: InstructorRequest, registry: RegistryDep
) -> InstructorResponse:
    """Replace an instructor's fields and attach any new courses."""
    updated = registry.instructors.update(instructor_id, _to_record(instructor))
    return instructor_to_response(updated)


@router.delete("/{instructor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_instructor(instructor_id: int, registry: RegistryDep) -> None:
    """Delete an instructor and remove it from its courses."""
    registry.instructors.delete(instructor_id)
