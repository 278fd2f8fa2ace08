"""Generic document accessor used by every service.

Each function takes a model class and works purely through SQLAlchemy, so
services read as "create a fee" / "find syllabi by subject" rather than as
hand-built statements. Filters are equality matches on column names.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.db.defaults import utcnow
from schoolhub.db.session import Base

ModelT = TypeVar("ModelT", bound=Base)

# Default ordering for list queries: most recently touched first.
NEWEST_FIRST = ("-updated_at",)


def _next_timestamp(previous: Optional[datetime]) -> datetime:
    """A fresh timestamp that is strictly later than ``previous``."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def _order_clauses(model: Type[ModelT], order_by: Sequence[str]):
    clauses = []
    for key in order_by:
        column = getattr(model, key.lstrip("-"))
        clauses.append(column.desc() if key.startswith("-") else column.asc())
    return clauses


def _select(model: Type[ModelT], filters: Optional[Mapping[str, Any]]):
    stmt = select(model)
    for key, value in (filters or {}).items():
        column = getattr(model, key)
        if value is None or isinstance(value, bool):
            stmt = stmt.where(column.is_(value))
        else:
            stmt = stmt.where(column == value)
    return stmt


async def create(db: AsyncSession, model: Type[ModelT], **fields: Any) -> ModelT:
    now = utcnow()
    if hasattr(model, "created_at"):
        fields.setdefault("created_at", now)
    if hasattr(model, "updated_at"):
        fields.setdefault("updated_at", now)
    record = model(**fields)
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def find(
    db: AsyncSession,
    model: Type[ModelT],
    filters: Optional[Mapping[str, Any]] = None,
    order_by: Sequence[str] = NEWEST_FIRST,
    limit: Optional[int] = None,
) -> List[ModelT]:
    stmt = _select(model, filters).order_by(*_order_clauses(model, order_by))
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def find_one(
    db: AsyncSession,
    model: Type[ModelT],
    filters: Mapping[str, Any],
    order_by: Sequence[str] = NEWEST_FIRST,
) -> Optional[ModelT]:
    rows = await find(db, model, filters, order_by=order_by, limit=1)
    return rows[0] if rows else None


async def find_by_id(db: AsyncSession, model: Type[ModelT], record_id: str) -> Optional[ModelT]:
    return await db.get(model, record_id)


async def update_by_id(
    db: AsyncSession,
    model: Type[ModelT],
    record_id: str,
    patch: Dict[str, Any],
) -> Optional[ModelT]:
    """Merge ``patch`` onto the record and re-stamp ``updated_at``.

    Returns ``None`` when no record has ``record_id``.
    """
    record = await db.get(model, record_id)
    if record is None:
        return None
    for key, value in patch.items():
        setattr(record, key, value)
    if hasattr(model, "updated_at"):
        record.updated_at = _next_timestamp(record.updated_at)
    await db.commit()
    await db.refresh(record)
    return record


async def soft_delete_by_id(db: AsyncSession, model: Type[ModelT], record_id: str) -> Optional[ModelT]:
    patch: Dict[str, Any] = {"is_deleted": True}
    if hasattr(model, "is_active"):
        patch["is_active"] = False
    return await update_by_id(db, model, record_id, patch)


async def remove_by_id(db: AsyncSession, model: Type[ModelT], record_id: str) -> bool:
    record = await db.get(model, record_id)
    if record is None:
        return False
    await db.delete(record)
    await db.commit()
    return True
