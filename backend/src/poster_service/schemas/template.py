"""Message template schemas. No field is required; every field is nullable."""

from poster_service.schemas.base import CamelModel, RecordRead


class MessageTemplateWrite(CamelModel):
    raid: str | None = None
    templatename: str | None = None
    headingcontent: str | None = None
    footercontent: str | None = None
    type: str | None = None


class MessageTemplateRead(RecordRead):
    raid: str | None = None
    templatename: str | None = None
    headingcontent: str | None = None
    footercontent: str | None = None
    type: str | None = None
