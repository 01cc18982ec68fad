"""Unit tests for the validation layer. No database involved."""

import pytest

from poster_service.exceptions import ValidationError
from poster_service.records import (
    ADMIN_POSTER,
    BANNER,
    DASHBOARD_IMAGE,
    EXPERT_IMAGE,
    FEEDBACK,
    MESSAGE_TEMPLATE,
)
from poster_service.validation import validate_create, validate_object_id, validate_update

DASHBOARD_PAYLOAD = {
    "expert_id": "expert-1",
    "imageurl": "http://x/y.png",
    "type": "blur",
    "name": "A",
}


# ---------------------------------------------------------------------------
# Create: required fields
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("missing", ["expert_id", "imageurl", "type", "name"])
def test_create_rejects_missing_required_field(missing: str) -> None:
    payload = {k: v for k, v in DASHBOARD_PAYLOAD.items() if k != missing}

    with pytest.raises(ValidationError) as exc_info:
        validate_create(DASHBOARD_IMAGE, payload)

    assert exc_info.value.message == "All required fields must be provided"


def test_create_treats_empty_string_as_missing() -> None:
    with pytest.raises(ValidationError):
        validate_create(DASHBOARD_IMAGE, {**DASHBOARD_PAYLOAD, "name": ""})


def test_banner_whitespace_only_field_is_missing_after_trim() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_create(BANNER, {"type": "home", "imageurl": "   ", "name": "A"})

    assert exc_info.value.message == "All fields are required."


def test_banner_fields_are_trimmed() -> None:
    cleaned = validate_create(BANNER, {"type": " home ", "imageurl": " http://x ", "name": " A "})

    assert cleaned == {"type": "home", "imageurl": "http://x", "name": "A"}


def test_template_has_no_required_fields() -> None:
    cleaned = validate_create(MESSAGE_TEMPLATE, {})

    assert cleaned == {
        "raid": None,
        "templatename": None,
        "headingcontent": None,
        "footercontent": None,
        "type": None,
    }


# ---------------------------------------------------------------------------
# Create: enums, ranges and formats
# ---------------------------------------------------------------------------
def test_banner_type_outside_enum() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_create(BANNER, {"type": "sidebar", "imageurl": "http://x", "name": "A"})

    assert exc_info.value.message == "Type must be one of: home, webinar, course"


def test_dashboard_image_type_checked_explicitly() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_create(DASHBOARD_IMAGE, {**DASHBOARD_PAYLOAD, "type": "gold"})

    assert exc_info.value.message == "Type must be one of: blur, marketing, premium"


def test_poster_type_must_be_1_2_or_3() -> None:
    payload = {"image1url": "a", "image2url": "b", "type": 4, "name": "P"}

    with pytest.raises(ValidationError) as exc_info:
        validate_create(ADMIN_POSTER, payload)

    assert exc_info.value.message == "Type must be one of: 1, 2, 3"


def test_expert_image_property_checked() -> None:
    payload = {
        "expert_id": "e",
        "image_name": "n",
        "web_image_url": "w",
        "mobile_image_url": "m",
        "property": "hidden",
    }

    with pytest.raises(ValidationError) as exc_info:
        validate_create(EXPERT_IMAGE, payload)

    assert exc_info.value.message.startswith("Property must be one of")


def test_expert_image_subheading_defaults_false() -> None:
    payload = {
        "expert_id": "e",
        "image_name": "n",
        "web_image_url": "w",
        "mobile_image_url": "m",
        "property": "blur",
    }

    assert validate_create(EXPERT_IMAGE, payload)["subheading"] is False


@pytest.mark.parametrize("star", [6, -1])
def test_feedback_star_out_of_range(star: int) -> None:
    payload = {
        "star": star,
        "description": "d",
        "user_id": "u",
        "name": "n",
        "mobile_number": "9876543210",
    }

    with pytest.raises(ValidationError) as exc_info:
        validate_create(FEEDBACK, payload)

    assert exc_info.value.message == "Star must be between 1 and 5"


@pytest.mark.parametrize(
    "number", ["98765", "98765432100", "98765abcde", "9876543210\n", "\n9876543210"]
)
def test_feedback_mobile_number_must_be_ten_digits(number: str) -> None:
    payload = {
        "star": 3,
        "description": "d",
        "user_id": "u",
        "name": "n",
        "mobile_number": number,
    }

    with pytest.raises(ValidationError) as exc_info:
        validate_create(FEEDBACK, payload)

    assert exc_info.value.message == "MobileNumber has an invalid format"


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------
def test_update_rejects_empty_field_set() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_update(ADMIN_POSTER, {})

    assert exc_info.value.message == "No fields provided for update."


def test_update_ignores_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        validate_update(ADMIN_POSTER, {"colour": "red"})


def test_update_validates_only_supplied_fields() -> None:
    assert validate_update(DASHBOARD_IMAGE, {"name": "B"}) == {"name": "B"}


def test_update_cannot_clear_required_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_update(DASHBOARD_IMAGE, {"name": None})

    assert exc_info.value.message == "Name cannot be empty."


def test_update_checks_enum() -> None:
    with pytest.raises(ValidationError):
        validate_update(ADMIN_POSTER, {"type": 9})


def test_update_allows_nulling_optional_template_field() -> None:
    assert validate_update(MESSAGE_TEMPLATE, {"footercontent": None}) == {"footercontent": None}


# ---------------------------------------------------------------------------
# Identity format
# ---------------------------------------------------------------------------
def test_object_id_accepts_24_hex_chars() -> None:
    assert validate_object_id("65f1c2aBcDeF0123456789ab", "banner") == "65f1c2aBcDeF0123456789ab"


@pytest.mark.parametrize(
    "value",
    [
        "zzz",
        "65f1c2abcdef0123456789a",
        "65f1c2abcdef0123456789abc",
        "65f1c2abcdef0123456789ab\n",
    ],
)
def test_object_id_rejects_malformed(value: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_object_id(value, "banner")

    assert exc_info.value.message == "Invalid banner ID format."
