"""Level CRUD endpoints."""

from fastapi import APIRouter, status

from university.api.dependencies import RegistryDep
from university.api.models import (
    CourseResponse,
    LevelRequest,
    LevelResponse,
    course_to_response,
    level_to_response,
)
from university.registry import LevelRecord

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("", response_model=list[LevelResponse])
def list_levels(registry: RegistryDep) -> list[LevelResponse]:
    """List all levels."""
    return [level_to_response(level) for level in registry.levels.list_all()]


@router.post("", response_model=LevelResponse, status_code=status.HTTP_201_CREATED)
def create_level(level: LevelRequest, registry: RegistryDep) -> LevelResponse:
    """Create a level in a faculty."""
    created = registry.levels.create(LevelRecord(name=level.name, faculty_id=level.faculty_id))
    return level_to_response(created)


@router.get("/{level_id}", response_model=LevelResponse)
def get_level(level_id: int, registry: RegistryDep) -> LevelResponse:
    """Get a level by ID."""
    return level_to_response(registry.levels.get(level_id))


@router.put("/{level_id}", response_model=LevelResponse)
def update_level(level_id: int, level: LevelRequest, registry: RegistryDep) -> LevelResponse:
    """Rename a level."""
    return level_to_response(registry.levels.update(level_id, LevelRecord(name=level.name)))


@router.delete("/{level_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_level(level_id: int, registry: RegistryDep) -> None:
    """Delete a level with no students and no courses."""
    registry.levels.delete(level_id)


@router.get("/{level_id}/courses", response_model=list[CourseResponse])
def list_level_courses(level_id: int, registry: RegistryDep) -> list[CourseResponse]:
    return [course_to_response(c) for c in registry.courses.list_by_level(level_id)]
