"""Declarative record schemas.

Each record kind is described once by a RecordSchema: the ORM model that
stores it, the rules on its fields, and the user-facing wording. The schemas
are immutable values; the validation layer applies them as pure functions.
"""

import re
from dataclasses import dataclass, field

from poster_service.db.session import Base
from poster_service.models import (
    AdminPoster,
    Banner,
    DashboardImage,
    ExpertImage,
    Feedback,
    MessageTemplate,
)

IMAGE_TYPES = ("blur", "marketing", "premium")
POSTER_TYPES = (1, 2, 3)
BANNER_TYPES = ("home", "webinar", "course")

MOBILE_NUMBER = re.compile(r"[0-9]{10}")


@dataclass(frozen=True)
class FieldRule:
    """Constraints on a single field.

    ``name`` is the ORM attribute; ``alias`` is the JSON name clients see
    and is what error messages refer to.
    """

    name: str
    alias: str
    required: bool = False
    choices: tuple[object, ...] | None = None
    minimum: int | None = None
    maximum: int | None = None
    pattern: re.Pattern[str] | None = None
    trim: bool = False


@dataclass(frozen=True)
class RecordSchema:
    label: str
    model: type[Base]
    rules: tuple[FieldRule, ...]
    unique: tuple[str, ...] = ()
    missing_message: str = "All required fields must be provided"
    plural: str | None = None
    defaults: dict[str, object] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.label[:1].upper() + self.label[1:]

    @property
    def plural_label(self) -> str:
        return self.plural or f"{self.label}s"

    def rule(self, name: str) -> FieldRule | None:
        for rule in self.rules:
            if rule.name == name:
                return rule
        return None


DASHBOARD_IMAGE = RecordSchema(
    label="image",
    model=DashboardImage,
    rules=(
        FieldRule("expert_id", "expertId", required=True),
        FieldRule("imageurl", "imageurl", required=True),
        FieldRule("type", "type", required=True, choices=IMAGE_TYPES),
        FieldRule("name", "name", required=True),
    ),
)

EXPERT_IMAGE = RecordSchema(
    label="expert image",
    model=ExpertImage,
    rules=(
        FieldRule("expert_id", "expertId", required=True),
        FieldRule("image_name", "imageName", required=True),
        FieldRule("web_image_url", "webImageUrl", required=True),
        FieldRule("mobile_image_url", "mobileImageUrl", required=True),
        FieldRule("property", "property", required=True, choices=IMAGE_TYPES),
        FieldRule("subheading", "subheading"),
    ),
    unique=("image_name",),
    defaults={"subheading": False},
)

ADMIN_POSTER = RecordSchema(
    label="poster",
    model=AdminPoster,
    rules=(
        FieldRule("image1url", "image1url", required=True),
        FieldRule("image2url", "image2url", required=True),
        FieldRule("type", "type", required=True, choices=POSTER_TYPES),
        FieldRule("name", "name", required=True),
    ),
)

BANNER = RecordSchema(
    label="banner",
    model=Banner,
    rules=(
        FieldRule("type", "type", required=True, choices=BANNER_TYPES, trim=True),
        FieldRule("imageurl", "imageurl", required=True, trim=True),
        FieldRule("name", "name", required=True, trim=True),
    ),
    missing_message="All fields are required.",
)

FEEDBACK = RecordSchema(
    label="feedback",
    plural="feedback",
    model=Feedback,
    rules=(
        FieldRule("star", "star", required=True, minimum=1, maximum=5),
        FieldRule("description", "description", required=True),
        FieldRule("user_id", "userId", required=True),
        FieldRule("name", "name", required=True),
        FieldRule("mobile_number", "mobileNumber", required=True, pattern=MOBILE_NUMBER),
    ),
)

MESSAGE_TEMPLATE = RecordSchema(
    label="template",
    model=MessageTemplate,
    rules=(
        FieldRule("raid", "raid"),
        FieldRule("templatename", "templatename"),
        FieldRule("headingcontent", "headingcontent"),
        FieldRule("footercontent", "footercontent"),
        FieldRule("type", "type"),
    ),
)
