"""Student CRUD endpoints."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    EnrollmentResponse,
    StudentRequest,
    StudentResponse,
    enrollment_to_response,
    student_to_response,
)
from university.registry import StudentRecord

router = APIRouter(prefix="/students", tags=["students"])


def _to_record(student: StudentRequest) -> StudentRecord:
    return StudentRecord(
        first_name=student.first_name,
        last_name=student.last_name,
        phone_number=student.phone_number,
        date_of_birth=student.date_of_birth,
        gender=student.gender,
        level_id=student.level_id,
        department_id=student.department_id,
        user_id=student.user_id,
    )


@router.get("", response_model=list[StudentResponse])
def list_students(registry: RegistryDep) -> list[StudentResponse]:
    """List all students."""
    return [student_to_response(s) for s in registry.students.list_all()]


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(student: StudentRequest, registry: RegistryDep) -> StudentResponse:
    """Create a student in a level."""
    return student_to_response(registry.students.create(_to_record(student)))


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: int, registry: RegistryDep) -> StudentResponse:
    """Get a student by ID."""
    return student_to_response(registry.students.get(student_id))


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: int, student: StudentRequest, registry: RegistryDep
) -> StudentResponse:
    """Replace a student's fields."""
    return student_to_response(registry.students.update(student_id, _to_record(student)))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: int, registry: RegistryDep) -> None:
    """Delete a student with no enrollments."""
    registry.students.delete(student_id)


@router.get("/{student_id}/enrollments", response_model=list[EnrollmentResponse])
def list_student_enrollments(student_id: int, registry: RegistryDep) -> list[EnrollmentResponse]:
    return [enrollment_to_response(e) for e in registry.enrollments.list_by_student(student_id)]
