"""
Folder persistence helpers (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_folders_for_user(user_id: str) -> list[dict]:
    # No ORDER BY: callers keep whatever order the table returns.
    return await db.fetch_all(
        """
        SELECT id::text AS id, user_id, name, created_at, updated_at
        FROM folders
        WHERE user_id = $1
        """,
        user_id,
    )
