"""Record data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes a session and a model class and performs a single
statement against that record kind's table.
"""

from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from poster_service.models import Base, utcnow

M = TypeVar("M", bound=Base)


async def insert_record(db: AsyncSession, model: type[M], values: dict[str, Any]) -> M:
    """Insert one record; identity and timestamps are assigned on flush."""
    record = model(**values)
    db.add(record)
    await db.flush()
    return record


async def list_records(db: AsyncSession, model: type[M], **equals: Any) -> list[M]:
    """Return every record of a kind, optionally filtered by field equality."""
    stmt = select(model).filter_by(**equals).order_by(model.created_at, model.id)  # type: ignore[attr-defined]
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_record(db: AsyncSession, model: type[M], record_id: str) -> M | None:
    return await db.get(model, record_id)


async def find_by_field(
    db: AsyncSession,
    model: type[M],
    field: str,
    value: Any,
    exclude_id: str | None = None,
) -> M | None:
    """Return the first record whose ``field`` equals ``value``, skipping ``exclude_id``."""
    stmt = select(model).where(getattr(model, field) == value)
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)  # type: ignore[attr-defined]
    result = await db.execute(stmt.limit(1))
    return result.scalar_one_or_none()


async def update_record(db: AsyncSession, record: M, changes: dict[str, Any]) -> M:
    """Merge ``changes`` into an existing record. Unsupplied fields keep their values."""
    for name, value in changes.items():
        setattr(record, name, value)
    # An update that changes nothing still advances the modification timestamp.
    record.updated_at = utcnow()  # type: ignore[attr-defined]
    await db.flush()
    return record


async def delete_record(db: AsyncSession, record: M) -> M:
    """Delete a record and return it as it was before removal."""
    await db.delete(record)
    await db.flush()
    return record
