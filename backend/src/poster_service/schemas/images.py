"""Dashboard image and expert image schemas.

Request fields are optional at the parsing layer: presence and enum checks
happen in the validation layer so that they report 400 with the service's own
messages instead of FastAPI's 422.
"""

from poster_service.schemas.base import CamelModel, RecordRead


class DashboardImageWrite(CamelModel):
    expert_id: str | None = None
    imageurl: str | None = None
    type: str | None = None
    name: str | None = None


class DashboardImageRead(RecordRead):
    expert_id: str
    imageurl: str
    type: str
    name: str


class ExpertImageWrite(CamelModel):
    expert_id: str | None = None
    image_name: str | None = None
    web_image_url: str | None = None
    mobile_image_url: str | None = None
    property: str | None = None
    subheading: bool | None = None


class ExpertImageRead(RecordRead):
    expert_id: str
    image_name: str
    web_image_url: str
    mobile_image_url: str
    property: str
    subheading: bool
