"""Page queries shared by the repositories."""

from collections.abc import Iterable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, Select, Table, func, select
from sqlalchemy.ext.asyncio import AsyncSession

E = TypeVar("E")


async def fetch_page(
    session: AsyncSession,
    entity: type[E],
    table: Table,
    criteria: list[ColumnElement[bool]],
    page_number: int,
    page_size: int,
) -> tuple[Iterable[E], int]:
    """Return one page of live entities and the total live count.

    Entities come back in creation order (created_on, then the
    time-ordered id). The page is read as an unconsumed result: callers map
    it lazily.

    Args:
        session: Session to query.
        entity: Mapped entity class.
        table: The entity's table.
        criteria: Extra WHERE criteria besides "not deleted".
        page_number: 1-based page number. Values below 1 are treated as 1.
        page_size: Items per page. Must be positive.
    """
    where = [table.c.is_deleted.is_(False), *criteria]

    total = await session.scalar(
        select(func.count()).select_from(table).where(*where)
    )

    statement: Select[Any] = (
        select(entity)
        .where(*where)
        .order_by(table.c.created_on, table.c.id)
        .offset((max(page_number, 1) - 1) * page_size)
        .limit(page_size)
    )
    page = await session.scalars(statement)
    return page, total or 0
