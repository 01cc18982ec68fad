"""SQLAlchemy models.

One table per record kind. The kinds are unrelated: no foreign keys, no joins.
Every model inherits from Base (so that Alembic's autogenerate can detect it)
and from RecordMixin, which supplies the identity and the two timestamps.
"""

import os
import time
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from poster_service.db.session import Base  # noqa: F401 (re-exported for convenience)


def new_object_id() -> str:
    """Return a 24-char hex identity: 4 bytes of epoch seconds + 8 random bytes."""
    return int(time.time()).to_bytes(4, "big").hex() + os.urandom(8).hex()


def utcnow() -> datetime:
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware timestamp that always reads back as UTC.

    SQLite drops the offset on storage; re-attaching it keeps serialized
    timestamps identical whether a record was just written or reloaded.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class RecordMixin:
    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, onupdate=utcnow
    )


class DashboardImage(RecordMixin, Base):
    __tablename__ = "ra_dashboard_images"

    expert_id: Mapped[str] = mapped_column(Text, index=True)
    imageurl: Mapped[str] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(20))
    name: Mapped[str] = mapped_column(Text)


class ExpertImage(RecordMixin, Base):
    __tablename__ = "expert_images"

    expert_id: Mapped[str] = mapped_column(Text, index=True)
    image_name: Mapped[str] = mapped_column(Text, unique=True)
    web_image_url: Mapped[str] = mapped_column(Text)
    mobile_image_url: Mapped[str] = mapped_column(Text)
    property: Mapped[str] = mapped_column(String(20))
    subheading: Mapped[bool] = mapped_column(Boolean, default=False)


class AdminPoster(RecordMixin, Base):
    __tablename__ = "admin_posters"

    image1url: Mapped[str] = mapped_column(Text)
    image2url: Mapped[str] = mapped_column(Text)
    type: Mapped[int] = mapped_column(Integer)
    name: Mapped[str] = mapped_column(Text)


class Banner(RecordMixin, Base):
    __tablename__ = "banners"

    type: Mapped[str] = mapped_column(String(20))
    imageurl: Mapped[str] = mapped_column(Text)
    name: Mapped[str] = mapped_column(Text)


class Feedback(RecordMixin, Base):
    __tablename__ = "feedback"

    star: Mapped[int] = mapped_column(Integer)
    description: Mapped[str] = mapped_column(Text)
    user_id: Mapped[str] = mapped_column(Text, index=True)
    name: Mapped[str] = mapped_column(Text)
    mobile_number: Mapped[str] = mapped_column(String(10))


class MessageTemplate(RecordMixin, Base):
    __tablename__ = "message_templates"

    raid: Mapped[str | None] = mapped_column(Text, index=True)
    templatename: Mapped[str | None] = mapped_column(Text)
    headingcontent: Mapped[str | None] = mapped_column(Text)
    footercontent: Mapped[str | None] = mapped_column(Text)
    type: Mapped[str | None] = mapped_column(Text)
