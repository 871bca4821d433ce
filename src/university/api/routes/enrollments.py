"""Enrollment endpoints, addressed by student id and course code."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    EnrollmentRequest,
    EnrollmentResponse,
    enrollment_to_response,
)
from university.registry import EnrollmentRecord

router = APIRouter(prefix="/enrollments", tags=["enrollments"])


@router.get("", response_model=list[EnrollmentResponse])
def list_enrollments(registry: RegistryDep) -> list[EnrollmentResponse]:
    """List all enrollments."""
    return [enrollment_to_response(e) for e in registry.enrollments.list_all()]


@router.post("", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def create_enrollment(enrollment: EnrollmentRequest, registry: RegistryDep) -> EnrollmentResponse:
    """Enroll a student in a course."""
    created = registry.enrollments.create(
        EnrollmentRecord(
            student_id=enrollment.student_id,
            course_code=enrollment.course_code,
            grade=enrollment.grade,
        )
    )
    return enrollment_to_response(created)


@router.get("/{student_id}/{course_code}", response_model=EnrollmentResponse)
def get_enrollment(
    student_id: int, course_code: str, registry: RegistryDep
) -> EnrollmentResponse:
    """Get the enrollment of a student in a course."""
    return enrollment_to_response(registry.enrollments.get(student_id, course_code))


@router.put("/{student_id}/{course_code}", response_model=EnrollmentResponse)
def update_enrollment(
    student_id: int, course_code: str, enrollment: EnrollmentRequest, registry: RegistryDep
) -> EnrollmentResponse:
    """Change the grade of an enrollment."""
    updated = registry.enrollments.update(
        student_id, course_code, EnrollmentRecord(grade=enrollment.grade)
    )
    return enrollment_to_response(updated)


@router.delete("/{student_id}/{course_code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_enrollment(student_id: int, course_code: str, registry: RegistryDep) -> None:
    """Remove a student from a course."""
    registry.enrollments.delete(student_id, course_code)
