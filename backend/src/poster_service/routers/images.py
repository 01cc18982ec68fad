"""Dashboard image and expert image endpoints."""

from fastapi import APIRouter

from poster_service.dependencies import DB
from poster_service.records import DASHBOARD_IMAGE, EXPERT_IMAGE
from poster_service.schemas.envelope import Envelope
from poster_service.schemas.images import (
    DashboardImageRead,
    DashboardImageWrite,
    ExpertImageRead,
    ExpertImageWrite,
)
from poster_service.services import records

router = APIRouter(tags=["images"])


@router.post("/ra-dashboard/image", response_model=Envelope[DashboardImageRead], status_code=201)
async def create_dashboard_image(
    db: DB, body: DashboardImageWrite
) -> Envelope[DashboardImageRead]:
    image = await records.create(db, DASHBOARD_IMAGE, body.model_dump())
    return Envelope[DashboardImageRead](message="Image added successfully", data=image)


@router.patch("/ra-dashboard/image/{image_id}", response_model=Envelope[DashboardImageRead])
async def update_dashboard_image(
    db: DB, image_id: str, body: DashboardImageWrite
) -> Envelope[DashboardImageRead]:
    image = await records.update(db, DASHBOARD_IMAGE, image_id, body.model_dump(exclude_unset=True))
    return Envelope[DashboardImageRead](message="Image updated successfully", data=image)


@router.delete("/ra-dashboard/image/{image_id}", response_model=Envelope[DashboardImageRead])
async def delete_dashboard_image(db: DB, image_id: str) -> Envelope[DashboardImageRead]:
    image = await records.delete(db, DASHBOARD_IMAGE, image_id)
    return Envelope[DashboardImageRead](message="Image deleted successfully", data=image)


@router.get("/ra-dashboard/images", response_model=Envelope[list[DashboardImageRead]])
async def list_dashboard_images(db: DB) -> Envelope[list[DashboardImageRead]]:
    images = await records.list_all(db, DASHBOARD_IMAGE)
    return Envelope[list[DashboardImageRead]](message="Images retrieved successfully", data=images)


@router.get("/ra-dashboard/images/{expert_id}", response_model=Envelope[list[DashboardImageRead]])
async def list_dashboard_images_for_expert(
    db: DB, expert_id: str
) -> Envelope[list[DashboardImageRead]]:
    """List one expert's dashboard images; 404 when the expert has none."""
    images = await records.list_by_owner(db, DASHBOARD_IMAGE, "expert_id", expert_id)
    return Envelope[list[DashboardImageRead]](
        message=f"Images for expertId '{expert_id}' fetched successfully", data=images
    )


@router.post("/expert/image", response_model=Envelope[ExpertImageRead], status_code=201)
async def create_expert_image(db: DB, body: ExpertImageWrite) -> Envelope[ExpertImageRead]:
    """Create an expert image. ``imageName`` must not be in use by any other image."""
    image = await records.create(db, EXPERT_IMAGE, body.model_dump())
    return Envelope[ExpertImageRead](message="Expert image added successfully", data=image)


@router.get("/expert/images", response_model=Envelope[list[ExpertImageRead]])
async def list_expert_images(db: DB) -> Envelope[list[ExpertImageRead]]:
    images = await records.list_all(db, EXPERT_IMAGE)
    return Envelope[list[ExpertImageRead]](
        message="Expert images retrieved successfully", data=images
    )


@router.get("/expert/images/{expert_id}", response_model=Envelope[list[ExpertImageRead]])
async def list_expert_images_for_expert(
    db: DB, expert_id: str
) -> Envelope[list[ExpertImageRead]]:
    images = await records.list_by_owner(db, EXPERT_IMAGE, "expert_id", expert_id)
    return Envelope[list[ExpertImageRead]](
        message=f"Expert images for expertId '{expert_id}' fetched successfully", data=images
    )


@router.patch("/expert/image/{image_id}", response_model=Envelope[ExpertImageRead])
async def update_expert_image(
    db: DB, image_id: str, body: ExpertImageWrite
) -> Envelope[ExpertImageRead]:
    """Partially update an expert image; a new ``imageName`` must be free."""
    image = await records.update(db, EXPERT_IMAGE, image_id, body.model_dump(exclude_unset=True))
    return Envelope[ExpertImageRead](message="Expert image updated successfully", data=image)


@router.delete("/expert/image/{image_id}", response_model=Envelope[ExpertImageRead])
async def delete_expert_image(db: DB, image_id: str) -> Envelope[ExpertImageRead]:
    image = await records.delete(db, EXPERT_IMAGE, image_id)
    return Envelope[ExpertImageRead](message="Expert image deleted successfully", data=image)
