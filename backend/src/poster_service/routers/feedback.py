"""Feedback endpoints."""

from fastapi import APIRouter

from poster_service.dependencies import DB
from poster_service.records import FEEDBACK
from poster_service.schemas.envelope import Envelope
from poster_service.schemas.feedback import FeedbackRead, FeedbackWrite
from poster_service.services import records

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=Envelope[FeedbackRead], status_code=201)
async def submit_feedback(db: DB, body: FeedbackWrite) -> Envelope[FeedbackRead]:
    """Store a rating. ``star`` is 1–5 and ``mobileNumber`` exactly 10 digits."""
    feedback = await records.create(db, FEEDBACK, body.model_dump())
    return Envelope[FeedbackRead](message="Feedback submitted successfully", data=feedback)


@router.get("", response_model=Envelope[list[FeedbackRead]])
async def list_feedback(db: DB) -> Envelope[list[FeedbackRead]]:
    feedback = await records.list_all(db, FEEDBACK)
    return Envelope[list[FeedbackRead]](message="Feedback retrieved successfully", data=feedback)


@router.get("/{user_id}", response_model=Envelope[list[FeedbackRead]])
async def list_feedback_for_user(db: DB, user_id: str) -> Envelope[list[FeedbackRead]]:
    feedback = await records.list_by_owner(db, FEEDBACK, "user_id", user_id)
    return Envelope[list[FeedbackRead]](
        message=f"Feedback for userId '{user_id}' fetched successfully", data=feedback
    )


@router.delete("/{feedback_id}", response_model=Envelope[FeedbackRead])
async def delete_feedback(db: DB, feedback_id: str) -> Envelope[FeedbackRead]:
    feedback = await records.delete(db, FEEDBACK, feedback_id)
    return Envelope[FeedbackRead](message="Feedback deleted successfully", data=feedback)
