"""
User persistence helpers (raw SQL).
"""

from __future__ import annotations

from core import db


async def get_user_by_id(user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id::text AS id, name, email, email_verified, master_password_hint,
               culture, key, private_key, security_stamp, avatar_color,
               two_factor_enabled, created_at, updated_at
        FROM users
        WHERE id = $1
        """,
        user_id,
    )
