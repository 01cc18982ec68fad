"""Banner endpoints.

Banner identities are checked against the 24-hex format before any store
access, so a malformed id is a 400 rather than a 404.
"""

from fastapi import APIRouter

from poster_service.dependencies import DB
from poster_service.records import BANNER
from poster_service.schemas.admin import BannerRead, BannerWrite
from poster_service.schemas.envelope import Envelope
from poster_service.services import records
from poster_service.validation import validate_object_id

router = APIRouter(prefix="/banner", tags=["banner"])


@router.get("", response_model=Envelope[list[BannerRead]])
async def list_banners(db: DB) -> Envelope[list[BannerRead]]:
    banners = await records.list_all(db, BANNER)
    return Envelope[list[BannerRead]](message="Banners retrieved successfully", data=banners)


@router.get("/{banner_id}", response_model=Envelope[BannerRead])
async def get_banner(db: DB, banner_id: str) -> Envelope[BannerRead]:
    banner = await records.get(db, BANNER, validate_object_id(banner_id, "banner"))
    return Envelope[BannerRead](message="Banner fetched successfully", data=banner)


@router.post("", response_model=Envelope[BannerRead], status_code=201)
async def create_banner(db: DB, body: BannerWrite) -> Envelope[BannerRead]:
    """Create a banner. ``type`` must be one of home, webinar or course."""
    banner = await records.create(db, BANNER, body.model_dump())
    return Envelope[BannerRead](message="Banner created successfully", data=banner)


@router.delete("/{banner_id}", response_model=Envelope[BannerRead])
async def delete_banner(db: DB, banner_id: str) -> Envelope[BannerRead]:
    banner = await records.delete(db, BANNER, validate_object_id(banner_id, "banner"))
    return Envelope[BannerRead](message="Banner deleted successfully", data=banner)
