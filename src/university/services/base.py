"""BaseService - shared plumbing for the domain services."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

from university.registry.exceptions import BadRequestError
from university.registry.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from university.registry.database import Database

V = TypeVar("V")


class BaseService:
    """Base for all domain services.

    Every public operation opens its own unit of work, so the lookups,
    guard checks and writes of one call commit or roll back together.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    @contextmanager
    def _unit_of_work(self) -> Iterator[UnitOfWork]:
        with self._db.transaction() as session:
            yield UnitOfWork(session)


def changed_fields(current: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """Compute the fields an update would actually change.

    A value of None in ``incoming`` means "not provided" and never counts as
    a change.

    Args:
        current: Field values as currently stored
        incoming: Field values from the update request

    Returns:
        Mapping of field name to new value, empty when nothing changes
    """
    return {
        name: value
        for name, value in incoming.items()
        if value is not None and current.get(name) != value
    }


def require(value: V | None, message: str, error_code: str = "FIELD_NOT_PROVIDED") -> V:
    """Return ``value``, or raise BadRequestError if it is None."""
    if value is None:
        raise BadRequestError(message, error_code)
    return value
