"""Unit tests for CourseService."""

import warnings

import pytest
from sqlalchemy.exc import SAWarning

from university.registry import (
    BadRequestError,
    ConflictError,
    CourseRecord,
    EnrollmentRecord,
    NotFoundError,
)
from university.services import Registry


@pytest.mark.unit
class TestCreateCourse:
    """Tests for CourseService.create."""

    def test_create(self, registry: Registry, campus) -> None:
        course = registry.courses.create(
            CourseRecord(
                code="CS101",
                name="Algorithms",
                credits=3,
                department_id=campus.department.id,
                level_id=campus.level.id,
            )
        )

        assert course.code == "CS101"
        assert course.instructor_ids == []

    def test_save_emits_no_orm_warnings(self, registry: Registry, campus, make_course) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", SAWarning)
            make_course("CS101")
            registry.courses.update(
                "CS101",
                CourseRecord(
                    name="Data Structures",
                    credits=4,
                    department_id=campus.department.id,
                    level_id=campus.level.id,
                ),
            )

    def test_duplicate_code_ignores_case(self, registry: Registry, make_course) -> None:
        make_course("CS101")

        with pytest.raises(ConflictError) as exc_info:
            make_course("cs101")

        assert exc_info.value.error_code == "COURSE_ALREADY_EXISTS"

    def test_level_not_provided(self, make_course) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            make_course(level_id=None)

        assert exc_info.value.error_code == "LEVEL_NOT_PROVIDED"

    def test_department_not_provided(self, make_course) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            make_course(department_id=None)

        assert exc_info.value.error_code == "DEPARTMENT_NOT_PROVIDED"

    def test_unknown_level(self, registry: Registry, make_course) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            make_course(level_id=77)

        assert exc_info.value.error_code == "LEVEL_NOT_FOUND"
        assert registry.courses.list_all() == []

    def test_with_instructors(self, registry: Registry, make_course, make_instructor) -> None:
        instructor = make_instructor()

        course = make_course(instructor_ids=[instructor.id])

        assert course.instructor_ids == [instructor.id]
        assert registry.instructors.get(instructor.id).course_codes == ["CS101"]

    def test_unknown_instructor_rolls_back(self, registry: Registry, make_course) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            make_course(instructor_ids=[123])

        assert exc_info.value.error_code == "INSTRUCTOR_NOT_FOUND"
        assert registry.courses.list_all() == []


@pytest.mark.unit
class TestGetAndUpdateCourse:
    def test_get_ignores_case(self, registry: Registry, make_course) -> None:
        make_course("CS101")

        assert registry.courses.get("cs101").code == "CS101"

    def test_accented_code_is_found(self, registry: Registry, make_course, make_student) -> None:
        make_course("ÉCO101")
        student = make_student()

        assert registry.courses.get("ÉCO101").code == "ÉCO101"
        assert registry.courses.get("éco101").code == "ÉCO101"
        enrollment = registry.enrollments.create(
            EnrollmentRecord(student_id=student.id, course_code="éco101", grade=80.0)
        )
        assert enrollment.course_code == "ÉCO101"

    def test_accented_duplicate_code(self, registry: Registry, make_course) -> None:
        make_course("ÉCO101")

        with pytest.raises(ConflictError) as exc_info:
            make_course("éco101")

        assert exc_info.value.error_code == "COURSE_ALREADY_EXISTS"

    def test_update_replaces_fields(self, registry: Registry, campus, make_course) -> None:
        make_course("CS101")

        updated = registry.courses.update(
            "CS101",
            CourseRecord(
                name="Advanced Algorithms",
                credits=5,
                department_id=campus.department.id,
                level_id=campus.level.id,
            ),
        )

        assert updated.name == "Advanced Algorithms"
        assert updated.credits == 5
        assert updated.code == "CS101"

    def test_update_keeps_existing_instructors(
        self, registry: Registry, campus, make_course, make_instructor
    ) -> None:
        first = make_instructor()
        second = make_instructor(first_name="Grace", last_name="Hopper")
        make_course("CS101", instructor_ids=[first.id])

        updated = registry.courses.update(
            "CS101",
            CourseRecord(
                name="Algorithms",
                credits=3,
                department_id=campus.department.id,
                level_id=campus.level.id,
                instructor_ids=[second.id],
            ),
        )

        assert updated.instructor_ids == sorted([first.id, second.id])

    def test_update_missing(self, registry: Registry, campus) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            registry.courses.update("XX1", CourseRecord(name="x", credits=1))

        assert exc_info.value.error_code == "COURSE_NOT_FOUND"


@pytest.mark.unit
class TestDeleteCourse:
    """Tests for CourseService.delete."""

    def test_delete_detaches_instructors(
        self, registry: Registry, make_course, make_instructor
    ) -> None:
        instructor = make_instructor()
        make_course("CS101", instructor_ids=[instructor.id])

        registry.courses.delete("CS101")

        assert registry.instructors.get(instructor.id).course_codes == []
        with pytest.raises(NotFoundError):
            registry.courses.get("CS101")

    def test_enrollment_blocks(self, registry: Registry, make_course, make_student) -> None:
        make_course("CS101")
        student = make_student()
        registry.enrollments.create(
            EnrollmentRecord(student_id=student.id, course_code="CS101", grade=75.0)
        )

        with pytest.raises(ConflictError) as exc_info:
            registry.courses.delete("CS101")

        assert exc_info.value.error_code == "COURSE_HAS_ENROLLMENTS"
        assert registry.courses.get("CS101").code == "CS101"


@pytest.mark.unit
class TestScopedCourses:
    def test_by_department_and_level(self, registry: Registry, campus, make_course) -> None:
        make_course("CS102")
        make_course("CS101")

        by_department = registry.courses.list_by_department(campus.department.id)
        by_level = registry.courses.list_by_level(campus.level.id)

        assert [c.code for c in by_department] == ["CS101", "CS102"]
        assert [c.code for c in by_level] == ["CS101", "CS102"]
        assert registry.courses.count_by_department(campus.department.id) == 2

    def test_unknown_parent(self, registry: Registry) -> None:
        with pytest.raises(NotFoundError):
            registry.courses.list_by_department(8)

        with pytest.raises(NotFoundError):
            registry.courses.list_by_level(8)
