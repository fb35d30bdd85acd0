"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Lookups (except identifier_in_use) only see users of the acting
    user's tenant when the unit of work has one.

    Methods:
        find_by_id: Retrieve a live user by ID
        find_by_identifier: Retrieve a live user by identity-provider subject
        identifier_in_use: Whether any live user holds an identifier
        list_page: One page of live users plus the total count
        add: Stage a new user
        remove: Stage a user for soft deletion
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found and not soft-deleted, None otherwise.
        """
        ...

    async def find_by_identifier(self, identifier: str) -> User | None:
        """Find user by identity-provider subject.

        Comparison is exact (identifiers are opaque).

        Args:
            identifier: Identity-provider subject.

        Returns:
            User if found and not soft-deleted, None otherwise.
        """
        ...

    async def identifier_in_use(self, identifier: str) -> bool:
        """Whether any live user holds the identifier.

        Ignores the tenant scope: identifiers are unique across tenants.
        """
        ...

    async def list_page(
        self,
        page_number: int,
        page_size: int,
        tenant_id: UUID | None = None,
    ) -> tuple[Iterable[User], int]:
        """List live users ordered by creation.

        Args:
            page_number: 1-based page number.
            page_size: Items per page.
            tenant_id: Restrict to one tenant when given.

        Returns:
            Tuple of (users on the page, total matching users). The page
            may be a one-shot iterable.
        """
        ...

    def add(self, user: User) -> None:
        """Stage a new user for insertion on commit."""
        ...

    async def remove(self, user: User) -> None:
        """Stage a user for soft deletion on commit."""
        ...
