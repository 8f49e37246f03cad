"""
Shared storage helpers.

Every entity service builds on these so that get/insert/update/delete behave
the same way across families: lookups return None for a missing id, writes
raise RecordNotFoundError for one, and any SQLAlchemy failure is rolled back
and re-raised as StorageError.
"""

from contextlib import asynccontextmanager
from typing import Any, Optional, TypeVar
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.utils.datetime import now
from database.errors import InvalidChangeError, RecordNotFoundError, StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@asynccontextmanager
async def storage_operation(session: AsyncSession, operation: str, entity: str):
    """Roll back and wrap driver errors raised inside the block."""
    try:
        yield
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error(
            f"Storage failure during {operation} {entity}: {type(exc).__name__}",
            exc_info=True,
        )
        raise StorageError(operation, entity) from exc


async def fetch_by_id(
    session: AsyncSession, model: type[ModelT], record_id: int
) -> Optional[ModelT]:
    async with storage_operation(session, "load", model.__tablename__):
        result = await session.execute(select(model).where(model.id == record_id))
        return result.scalar_one_or_none()


async def insert_record(
    session: AsyncSession, model: type[ModelT], data: dict[str, Any]
) -> ModelT:
    """Insert a row from validated data and return it with server defaults loaded."""
    record = model(**data)
    async with storage_operation(session, "create", model.__tablename__):
        session.add(record)
        await session.commit()
        await session.refresh(record)
    return record


async def update_record(
    session: AsyncSession,
    model: type[ModelT],
    record_id: int,
    changes: dict[str, Any],
) -> ModelT:
    """
    Merge ``changes`` into an existing row.

    Only the given keys are written; updated_at is bumped when the model has
    one. Raises RecordNotFoundError when the id does not exist.
    """
    record = await fetch_by_id(session, model, record_id)
    if record is None:
        raise RecordNotFoundError(model.__name__, record_id)

    for key, value in changes.items():
        if not hasattr(model, key):
            raise ValueError(f"{model.__name__} has no attribute {key!r}")
        setattr(record, key, value)
    if hasattr(model, "updated_at"):
        record.updated_at = now()

    async with storage_operation(session, "update", model.__tablename__):
        await session.commit()
        await session.refresh(record)
    return record


async def delete_record(
    session: AsyncSession, model: type[ModelT], record_id: int
) -> None:
    """Hard delete. Raises RecordNotFoundError when nothing matched."""
    record = await fetch_by_id(session, model, record_id)
    if record is None:
        raise RecordNotFoundError(model.__name__, record_id)

    async with storage_operation(session, "delete", model.__tablename__):
        await session.delete(record)
        await session.commit()


def check_salary_range(record: Any, changes: dict[str, Any]) -> None:
    """
    Reject changes that would store salary_min above salary_max.

    Values missing from ``changes`` are taken from the stored record, so a
    partial update is checked against the range it will actually produce.
    """
    salary_min = changes["salary_min"] if "salary_min" in changes else record.salary_min
    salary_max = changes["salary_max"] if "salary_max" in changes else record.salary_max
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise InvalidChangeError("salaryMin", "salaryMin cannot be greater than salaryMax")
