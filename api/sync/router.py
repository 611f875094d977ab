"""
Sync API endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.raw_json import RawJsonResponse

from . import service

router = APIRouter()


@router.get("/api/sync", response_class=RawJsonResponse)
async def sync(
    current_user_id: str = Depends(auth_dependencies.get_current_user_id),
) -> RawJsonResponse:
    snapshot = await service.get_sync_data(current_user_id)
    return RawJsonResponse(snapshot)
