"""Admin poster endpoints."""

from fastapi import APIRouter

from poster_service.dependencies import DB
from poster_service.records import ADMIN_POSTER
from poster_service.schemas.admin import AdminPosterRead, AdminPosterWrite
from poster_service.schemas.envelope import Envelope
from poster_service.services import records

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/poster", response_model=Envelope[AdminPosterRead], status_code=201)
async def create_poster(db: DB, body: AdminPosterWrite) -> Envelope[AdminPosterRead]:
    poster = await records.create(db, ADMIN_POSTER, body.model_dump())
    return Envelope[AdminPosterRead](message="Poster added successfully", data=poster)


@router.get("/posters", response_model=Envelope[list[AdminPosterRead]])
async def list_posters(db: DB) -> Envelope[list[AdminPosterRead]]:
    posters = await records.list_all(db, ADMIN_POSTER)
    return Envelope[list[AdminPosterRead]](message="Posters retrieved successfully", data=posters)


@router.patch("/poster/{poster_id}", response_model=Envelope[AdminPosterRead])
async def update_poster(db: DB, poster_id: str, body: AdminPosterWrite) -> Envelope[AdminPosterRead]:
    poster = await records.update(db, ADMIN_POSTER, poster_id, body.model_dump(exclude_unset=True))
    return Envelope[AdminPosterRead](message="Poster updated successfully", data=poster)


@router.delete("/poster/{poster_id}", response_model=Envelope[AdminPosterRead])
async def delete_poster(db: DB, poster_id: str) -> Envelope[AdminPosterRead]:
    poster = await records.delete(db, ADMIN_POSTER, poster_id)
    return Envelope[AdminPosterRead](message="Poster deleted successfully", data=poster)
