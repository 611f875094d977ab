"""
Folder loading.
"""

from __future__ import annotations

from pydantic import ValidationError

from core import db, errors

from . import repository, schemas


def _to_folder_response(folder_row: dict) -> schemas.FolderResponse:
    return schemas.FolderResponse(
        id=folder_row["id"],
        name=folder_row["name"],
        revision_date=folder_row.get("updated_at") or folder_row.get("created_at"),
    )


async def load_folders(user_id: str) -> list[schemas.FolderResponse]:
    try:
        rows = await repository.list_folders_for_user(user_id)
    except db.DatabaseError as exc:
        raise errors.Internal(f"folder lookup failed: {exc}") from exc

    try:
        return [_to_folder_response(row) for row in rows]
    except (KeyError, ValidationError) as exc:
        raise errors.Internal(f"malformed folder row user_id={user_id}: {exc}") from exc
