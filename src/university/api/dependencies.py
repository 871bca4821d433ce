"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from university.services import Registry

# Global Registry instance (initialized on app startup)
_registry: Registry | None = None


def init_registry(db_path: str = "university.db") -> Registry:
    """Initialize the global Registry instance."""
    global _registry  # noqa: PLW0603
    _registry = Registry(db_path)
    return _registry


def close_registry() -> None:
    """Close the global Registry instance."""
    global _registry  # noqa: PLW0603
    if _registry is not None:
        _registry.close()
        _registry = None


def get_registry() -> Generator[Registry, None, None]:
    """Dependency that provides the Registry instance."""
    if _registry is None:
        raise RuntimeError("Registry not initialized. Call init_registry() first.")
    yield _registry


# Type alias for dependency injection
RegistryDep = Annotated[Registry, Depends(get_registry)]
