"""Unit tests for DepartmentService."""

from unittest.mock import patch

import pytest

from university.registry import (
    BadRequestError,
    ConflictError,
    DepartmentRecord,
    FacultyRecord,
    NotFoundError,
)
from university.registry.repositories import DepartmentRepository
from university.services import Registry


@pytest.fixture
def faculty(registry: Registry) -> FacultyRecord:
    return registry.faculties.create(FacultyRecord(name="Engineering"))


@pytest.mark.unit
class TestCreateDepartment:
    """Tests for DepartmentService.create."""

    def test_create(self, registry: Registry, faculty: FacultyRecord) -> None:
        department = registry.departments.create(
            DepartmentRecord(name="CS", faculty_id=faculty.id)
        )

        assert department.id is not None
        assert department.faculty_id == faculty.id

    def test_unknown_faculty(self, registry: Registry) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            registry.departments.create(DepartmentRecord(name="CS", faculty_id=99))

        assert exc_info.value.error_code == "FACULTY_NOT_FOUND"

    def test_faculty_not_provided(self, registry: Registry) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            registry.departments.create(DepartmentRecord(name="CS"))

        assert exc_info.value.error_code == "FACULTY_NOT_PROVIDED"

    def test_accented_duplicate_name(self, registry: Registry, faculty: FacultyRecord) -> None:
        registry.departments.create(DepartmentRecord(name="Études", faculty_id=faculty.id))

        with pytest.raises(ConflictError) as exc_info:
            registry.departments.create(DepartmentRecord(name="Études", faculty_id=faculty.id))

        assert exc_info.value.error_code == "DEPARTMENT_ALREADY_EXISTS"

    def test_name_unique_across_faculties(
        self, registry: Registry, faculty: FacultyRecord
    ) -> None:
        science = registry.faculties.create(FacultyRecord(name="Science"))
        registry.departments.create(DepartmentRecord(name="CS", faculty_id=faculty.id))

        with pytest.raises(ConflictError) as exc_info:
            registry.departments.create(DepartmentRecord(name="cs", faculty_id=science.id))

        assert exc_info.value.error_code == "DEPARTMENT_ALREADY_EXISTS"


@pytest.mark.unit
class TestUpdateDepartment:
    """Tests for DepartmentService.update."""

    def test_rename_keeps_faculty(self, registry: Registry, faculty: FacultyRecord) -> None:
        science = registry.faculties.create(FacultyRecord(name="Science"))
        department = registry.departments.create(
            DepartmentRecord(name="CS", faculty_id=faculty.id)
        )

        updated = registry.departments.update(
            department.id, DepartmentRecord(name="Computing", faculty_id=science.id)
        )

        assert updated.name == "Computing"
        assert updated.faculty_id == faculty.id

    def test_unchanged_name_skips_write(self, registry: Registry, faculty: FacultyRecord) -> None:
        department = registry.departments.create(
            DepartmentRecord(name="CS", faculty_id=faculty.id)
        )

        with patch.object(DepartmentRepository, "save") as save:
            registry.departments.update(department.id, DepartmentRecord(name="CS"))

        save.assert_not_called()

    def test_update_missing(self, registry: Registry) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            registry.departments.update(5, DepartmentRecord(name="CS"))

        assert exc_info.value.error_code == "DEPARTMENT_NOT_FOUND"


@pytest.mark.unit
class TestDeleteDepartment:
    def test_delete_empty(self, registry: Registry, faculty: FacultyRecord) -> None:
        department = registry.departments.create(
            DepartmentRecord(name="CS", faculty_id=faculty.id)
        )

        registry.departments.delete(department.id)

        assert registry.departments.count_by_faculty(faculty.id) == 0

    def test_instructor_blocks(self, registry: Registry, campus, make_instructor) -> None:
        make_instructor()

        with pytest.raises(ConflictError) as exc_info:
            registry.departments.delete(campus.department.id)

        assert exc_info.value.error_code == "DEPARTMENT_HAS_ASSOCIATIONS"

    def test_course_blocks(self, registry: Registry, campus, make_course) -> None:
        make_course()

        with pytest.raises(ConflictError):
            registry.departments.delete(campus.department.id)

        assert registry.departments.get(campus.department.id) == campus.department


@pytest.mark.unit
class TestFacultyScopedDepartments:
    def test_list_and_count(self, registry: Registry, faculty: FacultyRecord) -> None:
        science = registry.faculties.create(FacultyRecord(name="Science"))
        registry.departments.create(DepartmentRecord(name="CS", faculty_id=faculty.id))
        registry.departments.create(DepartmentRecord(name="EE", faculty_id=faculty.id))
        registry.departments.create(DepartmentRecord(name="Math", faculty_id=science.id))

        names = [d.name for d in registry.departments.list_by_faculty(faculty.id)]

        assert names == ["CS", "EE"]
        assert registry.departments.count_by_faculty(science.id) == 1

    def test_unknown_faculty(self, registry: Registry) -> None:
        with pytest.raises(NotFoundError):
            registry.departments.list_by_faculty(9)

        with pytest.raises(NotFoundError):
            registry.departments.count_by_faculty(9)
