"""UnitOfWork - one transaction and the components bound to its session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from university.registry.associations import AssociationMaintainer
from university.registry.guards import DeletionGuard
from university.registry.lookup import Lookup
from university.registry.repositories import Repositories
from university.registry.uniqueness import NameChecker

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class UnitOfWork:
    """Repositories and validators wired for a single session.

    A new UnitOfWork is built for every service call, so no component is
    shared between transactions.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.repos = Repositories(session)
        self.lookup = Lookup(self.repos)
        self.names = NameChecker(self.repos)
        self.associations = AssociationMaintainer(self.lookup)
        self.guard = DeletionGuard(self.repos)
