"""Custom exceptions for the Registry.

Every error carries a machine-readable ``error_code`` that stays stable across
releases, and an HTTP-style ``status_code`` used by the API layer.
"""

from http import HTTPStatus


class RegistryError(Exception):
    """Base exception for Registry errors."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(error_code={self.error_code!r}, message={self.message!r})>"


class NotFoundError(RegistryError):
    """Referenced entity does not exist."""

    status_code = HTTPStatus.NOT_FOUND


class BadRequestError(RegistryError):
    """Required reference or field is missing or structurally invalid."""

    status_code = HTTPStatus.BAD_REQUEST


class ConflictError(RegistryError):
    """Uniqueness violation, or deletion blocked by dependents."""

    status_code = HTTPStatus.CONFLICT
