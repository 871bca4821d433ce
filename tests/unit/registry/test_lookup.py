"""Unit tests for Lookup."""

import pytest

from university.registry import (
    BadRequestError,
    ConflictError,
    Course,
    Enrollment,
    Faculty,
    NotFoundError,
    Student,
    UnitOfWork,
)
from university.registry.lookup import MAX_GRADE, MIN_GRADE


@pytest.mark.unit
class TestGetOrRaise:
    """Tests for get_*_or_raise."""

    def test_get_faculty(self, uow: UnitOfWork, faculty: Faculty) -> None:
        assert uow.lookup.get_faculty_or_raise(faculty.id) is faculty

    @pytest.mark.parametrize(
        ("method", "key", "code"),
        [
            ("get_faculty_or_raise", 99, "FACULTY_NOT_FOUND"),
            ("get_department_or_raise", 99, "DEPARTMENT_NOT_FOUND"),
            ("get_level_or_raise", 99, "LEVEL_NOT_FOUND"),
            ("get_course_or_raise", "NOPE1", "COURSE_NOT_FOUND"),
            ("get_student_or_raise", 99, "STUDENT_NOT_FOUND"),
            ("get_instructor_or_raise", 99, "INSTRUCTOR_NOT_FOUND"),
        ],
    )
    def test_missing_raises_not_found(
        self, uow: UnitOfWork, method: str, key: object, code: str
    ) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            getattr(uow.lookup, method)(key)

        assert exc_info.value.error_code == code
        assert exc_info.value.status_code == 404

    def test_course_code_ignores_case(self, uow: UnitOfWork, course: Course) -> None:
        assert uow.lookup.get_course_or_raise("cs101") is course

    def test_missing_enrollment(self, uow: UnitOfWork, student: Student, course: Course) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            uow.lookup.get_enrollment_or_raise(student.id, course.code)

        assert exc_info.value.error_code == "ENROLLMENT_NOT_FOUND"


@pytest.mark.unit
class TestAssertExists:
    """Tests for assert_*_exists."""

    def test_present_faculty_passes(self, uow: UnitOfWork, faculty: Faculty) -> None:
        uow.lookup.assert_faculty_exists(faculty.id)

    def test_missing_level(self, uow: UnitOfWork) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            uow.lookup.assert_level_exists(7)

        assert exc_info.value.error_code == "LEVEL_NOT_FOUND"

    def test_course_expected_absent_but_present(self, uow: UnitOfWork, course: Course) -> None:
        with pytest.raises(ConflictError) as exc_info:
            uow.lookup.assert_course_exists("Cs101", expected=False)

        assert exc_info.value.error_code == "COURSE_ALREADY_EXISTS"

    def test_course_expected_absent_and_absent(self, uow: UnitOfWork) -> None:
        uow.lookup.assert_course_exists("CS999", expected=False)

    def test_course_expected_present_but_absent(self, uow: UnitOfWork) -> None:
        with pytest.raises(NotFoundError):
            uow.lookup.assert_course_exists("CS999")

    def test_enrollment_expected_absent_but_present(
        self, uow: UnitOfWork, student: Student, course: Course
    ) -> None:
        uow.repos.enrollments.save(Enrollment(grade=70.0, student=student, course=course))

        with pytest.raises(ConflictError) as exc_info:
            uow.lookup.assert_enrollment_exists(student.id, course.code, expected=False)

        assert exc_info.value.error_code == "ENROLLMENT_ALREADY_EXISTS"

    def test_enrollment_expected_present_but_absent(
        self, uow: UnitOfWork, student: Student, course: Course
    ) -> None:
        with pytest.raises(NotFoundError):
            uow.lookup.assert_enrollment_exists(student.id, course.code)


@pytest.mark.unit
class TestValidateGrade:
    """Tests for validate_grade."""

    @pytest.mark.parametrize("grade", [MIN_GRADE, 55.5, MAX_GRADE])
    def test_in_range(self, uow: UnitOfWork, grade: float) -> None:
        assert uow.lookup.validate_grade(grade) == grade

    @pytest.mark.parametrize("grade", [-0.1, 100.5, 150.0, float("nan"), float("inf")])
    def test_out_of_range(self, uow: UnitOfWork, grade: float) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            uow.lookup.validate_grade(grade)

        assert exc_info.value.error_code == "INVALID_GRADE"

    def test_unset(self, uow: UnitOfWork) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            uow.lookup.validate_grade(None)

        assert exc_info.value.error_code == "GRADE_NOT_SET"
