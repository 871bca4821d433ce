"""NameChecker - case-insensitive name uniqueness, global or per parent."""

from __future__ import annotations

from typing import TYPE_CHECKING

from university.registry.exceptions import ConflictError

if TYPE_CHECKING:
    from university.registry.repositories import Repositories


class NameChecker:
    """Reject a name that collides with a sibling in the same scope.

    ``exclude_id`` names the entity being renamed so it never collides with itself.
    """

    def __init__(self, repos: Repositories) -> None:
        self._repos = repos

    def assert_faculty_name_unique(self, name: str, exclude_id: int | None = None) -> None:
        if self._repos.faculties.exists_by_name(name, exclude_id=exclude_id):
            raise ConflictError(
                f"Faculty with name '{name}' already exists", "FACULTY_ALREADY_EXISTS"
            )

    def assert_department_name_unique(self, name: str, exclude_id: int | None = None) -> None:
        # Department names are unique across the whole university, not per faculty.
        if self._repos.departments.exists_by_name(name, exclude_id=exclude_id):
            raise ConflictError(
                f"Department with name '{name}' already exists", "DEPARTMENT_ALREADY_EXISTS"
            )

    def assert_level_name_unique(
        self, name: str, faculty_id: int, exclude_id: int | None = None
    ) -> None:
        if self._repos.levels.exists_by_name_and_faculty_id(
            name, faculty_id, exclude_id=exclude_id
        ):
            raise ConflictError(
                f"Level with name '{name}' already exists in faculty {faculty_id}",
                "LEVEL_ALREADY_EXISTS",
            )
