"""Message template endpoints. Templates are grouped by their ``raid`` owner tag."""

from fastapi import APIRouter

from poster_service.dependencies import DB
from poster_service.records import MESSAGE_TEMPLATE
from poster_service.schemas.envelope import Envelope
from poster_service.schemas.template import MessageTemplateRead, MessageTemplateWrite
from poster_service.services import records

router = APIRouter(prefix="/template", tags=["template"])


@router.get("", response_model=Envelope[list[MessageTemplateRead]])
async def list_templates(db: DB) -> Envelope[list[MessageTemplateRead]]:
    templates = await records.list_all(db, MESSAGE_TEMPLATE)
    return Envelope[list[MessageTemplateRead]](
        message="Templates retrieved successfully", data=templates
    )


@router.get("/{raid}", response_model=Envelope[list[MessageTemplateRead]])
async def list_templates_for_raid(db: DB, raid: str) -> Envelope[list[MessageTemplateRead]]:
    templates = await records.list_by_owner(db, MESSAGE_TEMPLATE, "raid", raid)
    return Envelope[list[MessageTemplateRead]](
        message=f"Templates for raid '{raid}' fetched successfully", data=templates
    )


@router.post("", response_model=Envelope[MessageTemplateRead], status_code=201)
async def create_template(db: DB, body: MessageTemplateWrite) -> Envelope[MessageTemplateRead]:
    template = await records.create(db, MESSAGE_TEMPLATE, body.model_dump())
    return Envelope[MessageTemplateRead](message="Template created successfully", data=template)


@router.patch("/{template_id}", response_model=Envelope[MessageTemplateRead])
async def update_template(
    db: DB, template_id: str, body: MessageTemplateWrite
) -> Envelope[MessageTemplateRead]:
    template = await records.update(
        db, MESSAGE_TEMPLATE, template_id, body.model_dump(exclude_unset=True)
    )
    return Envelope[MessageTemplateRead](message="Template updated successfully", data=template)


@router.delete("/{template_id}", response_model=Envelope[MessageTemplateRead])
async def delete_template(db: DB, template_id: str) -> Envelope[MessageTemplateRead]:
    template = await records.delete(db, MESSAGE_TEMPLATE, template_id)
    return Envelope[MessageTemplateRead](message="Template deleted successfully", data=template)
