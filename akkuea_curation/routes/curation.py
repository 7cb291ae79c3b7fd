"""Curation preview: run moderation on a payload without storing anything."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from akkuea_curation.curation.service import CurationService
from akkuea_curation.curation.types import CurationResult
from akkuea_curation.routes.resources import get_curation_service

router = APIRouter(tags=["curation"])


class CurationPreviewRequest(BaseModel):
    title: str
    content: str
    language: str = ""
    format: str = ""


@router.post("/curation/preview", response_model=CurationResult)
async def preview_curation(
    req: CurationPreviewRequest,
    curation: CurationService = Depends(get_curation_service),
):
    return await curation.curate_content(req.title, req.content, req.language, req.format)
