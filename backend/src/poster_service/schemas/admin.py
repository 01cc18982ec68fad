"""Admin poster and banner schemas."""

from pydantic import Field

from poster_service.schemas.base import CamelModel, RecordRead


# The camel-case generator would turn image1url into image1Url; pin the wire names.
class AdminPosterWrite(CamelModel):
    image1url: str | None = Field(default=None, alias="image1url")
    image2url: str | None = Field(default=None, alias="image2url")
    type: int | None = None
    name: str | None = None


class AdminPosterRead(RecordRead):
    image1url: str = Field(alias="image1url")
    image2url: str = Field(alias="image2url")
    type: int
    name: str


class BannerWrite(CamelModel):
    type: str | None = None
    imageurl: str | None = None
    name: str | None = None


class BannerRead(RecordRead):
    type: str
    imageurl: str
    name: str
