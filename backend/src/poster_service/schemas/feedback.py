"""Feedback schemas."""

from poster_service.schemas.base import CamelModel, RecordRead


class FeedbackWrite(CamelModel):
    star: int | None = None
    description: str | None = None
    user_id: str | None = None
    name: str | None = None
    mobile_number: str | None = None


class FeedbackRead(RecordRead):
    star: int
    description: str
    user_id: str
    name: str
    mobile_number: str
