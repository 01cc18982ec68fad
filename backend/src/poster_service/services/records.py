"""Record business logic.

Orchestrates validation, uniqueness pre-checks and repository calls for every
record kind. Each operation issues one write (or one read) against the store;
store failures are translated into domain exceptions here so that routers
only ever see ValidationError, ConflictError, NotFoundError or UnexpectedError.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from poster_service.exceptions import ConflictError, NotFoundError, UnexpectedError
from poster_service.logging import get_logger
from poster_service.models import Base
from poster_service.records import RecordSchema
from poster_service.repositories.records import (
    delete_record,
    find_by_field,
    get_record,
    insert_record,
    list_records,
    update_record,
)
from poster_service.validation import validate_create, validate_update

logger = get_logger(__name__)


def _conflict(schema: RecordSchema, name: str, value: Any) -> ConflictError:
    rule = schema.rule(name)
    alias = rule.alias if rule else name
    return ConflictError(f"{schema.title} with {alias} '{value}' already exists.")


@contextmanager
def _store_errors(schema: RecordSchema, values: Mapping[str, Any]) -> Iterator[None]:
    """Translate store failures raised inside the block into domain exceptions.

    A unique-constraint violation that names one of the schema's unique
    fields becomes a ConflictError; this is the authoritative check when two
    writers race past the pre-check. Anything else becomes UnexpectedError.
    """
    try:
        yield
    except IntegrityError as exc:
        message = str(exc.orig).lower()
        for name in schema.unique:
            if name in message and ("unique" in message or "duplicate" in message):
                logger.warning("unique_violation", kind=schema.label, field=name)
                raise _conflict(schema, name, values.get(name)) from exc
        logger.error("integrity_error", kind=schema.label, error=str(exc.orig))
        raise UnexpectedError("Server Error", error=type(exc).__name__) from exc
    except SQLAlchemyError as exc:
        logger.exception("store_error", kind=schema.label)
        raise UnexpectedError("Server Error", error=type(exc).__name__) from exc


async def _ensure_unique(
    db: AsyncSession,
    schema: RecordSchema,
    values: Mapping[str, Any],
    exclude_id: str | None = None,
) -> None:
    for name in schema.unique:
        if name not in values:
            continue
        existing = await find_by_field(db, schema.model, name, values[name], exclude_id)
        if existing is not None:
            raise _conflict(schema, name, values[name])


async def create(db: AsyncSession, schema: RecordSchema, payload: dict[str, Any]) -> Base:
    values = validate_create(schema, payload)
    with _store_errors(schema, values):
        await _ensure_unique(db, schema, values)
        record = await insert_record(db, schema.model, values)
    logger.info("record_created", kind=schema.label, id=record.id)  # type: ignore[attr-defined]
    return record


async def list_all(db: AsyncSession, schema: RecordSchema) -> list[Base]:
    """Return every record of the kind. An empty store is not an error."""
    with _store_errors(schema, {}):
        return await list_records(db, schema.model)


async def list_by_owner(
    db: AsyncSession, schema: RecordSchema, owner_field: str, value: str
) -> list[Base]:
    """Return the records tagged with an owner; raise NotFoundError when there are none."""
    with _store_errors(schema, {}):
        records = await list_records(db, schema.model, **{owner_field: value})
    if not records:
        rule = schema.rule(owner_field)
        alias = rule.alias if rule else owner_field
        raise NotFoundError(f"No {schema.plural_label} found for {alias} '{value}'")
    return records


async def get(db: AsyncSession, schema: RecordSchema, record_id: str) -> Base:
    with _store_errors(schema, {}):
        record = await get_record(db, schema.model, record_id)
    if record is None:
        raise NotFoundError(f"No {schema.label} found with id '{record_id}'")
    return record


async def update(
    db: AsyncSession, schema: RecordSchema, record_id: str, changes: dict[str, Any]
) -> Base:
    """Merge a partial field set into an existing record and return the result.

    Order of checks: field-set validation first (so an empty update is a 400
    even for a missing id), then existence, then uniqueness excluding the
    record itself.
    """
    values = validate_update(schema, changes)
    with _store_errors(schema, values):
        record = await get_record(db, schema.model, record_id)
        if record is None:
            raise NotFoundError(f"No {schema.label} found with id '{record_id}'")
        await _ensure_unique(db, schema, values, exclude_id=record_id)
        record = await update_record(db, record, values)
    logger.info("record_updated", kind=schema.label, id=record_id, fields=sorted(values))
    return record


async def delete(db: AsyncSession, schema: RecordSchema, record_id: str) -> Base:
    """Remove a record and return its prior state."""
    with _store_errors(schema, {}):
        record = await get_record(db, schema.model, record_id)
        if record is None:
            raise NotFoundError(f"No {schema.label} found with id '{record_id}'")
        record = await delete_record(db, record)
    logger.info("record_deleted", kind=schema.label, id=record_id)
    return record
