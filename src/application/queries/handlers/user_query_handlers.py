"""User query handlers.

Returns DTOs (not domain entities) to prevent leaking domain to presentation.

Architecture:
- Returns Result[DTO, ApplicationError] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from src.application.dtos.paged_list import PagedList
from src.application.errors import ApplicationError
from src.application.mappers.user_mapper import to_user_dto, to_user_dtos
from src.application.queries.user_queries import (
    GetUser,
    GetUserByIdentifier,
    ListUsers,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols.unit_of_work_protocol import UnitOfWork
from src.schemas.user_schemas import UserDto


class GetUserHandler:
    """Handler for GetUser query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(self, query: GetUser) -> Result[UserDto, ApplicationError]:
        user = await self._uow.users.find_by_id(query.user_id)
        if user is None:
            return Failure(error=ApplicationError.not_found("User", query.user_id))
        return Success(value=to_user_dto(user))


class GetUserByIdentifierHandler:
    """Handler for GetUserByIdentifier query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, query: GetUserByIdentifier
    ) -> Result[UserDto, ApplicationError]:
        user = await self._uow.users.find_by_identifier(query.identifier)
        if user is None:
            return Failure(
                error=ApplicationError.not_found("User", query.identifier)
            )
        return Success(value=to_user_dto(user))


class ListUsersHandler:
    """Handler for ListUsers query.

    Returns:
        Result[PagedList[UserDto], ApplicationError]: always Success; an
            out-of-range page yields an empty item list.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def handle(
        self, query: ListUsers
    ) -> Result[PagedList[UserDto], ApplicationError]:
        users, total = await self._uow.users.list_page(
            query.page_number, query.page_size, tenant_id=query.tenant_id
        )
        return Success(
            value=PagedList(
                items=to_user_dtos(users),
                total_count=total,
                page_number=query.page_number,
                page_size=query.page_size,
            )
        )
