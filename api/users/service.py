"""
Profile loading.
"""

from __future__ import annotations

from pydantic import ValidationError

from core import db, errors

from . import repository, schemas


def _to_profile(user_row: dict) -> schemas.Profile:
    return schemas.Profile(
        id=user_row["id"],
        name=user_row.get("name"),
        email=user_row.get("email"),
        email_verified=bool(user_row.get("email_verified", False)),
        master_password_hint=user_row.get("master_password_hint"),
        culture=user_row.get("culture") or "en-US",
        two_factor_enabled=bool(user_row.get("two_factor_enabled", False)),
        key=user_row.get("key"),
        private_key=user_row.get("private_key"),
        security_stamp=user_row.get("security_stamp"),
        avatar_color=user_row.get("avatar_color"),
        creation_date=user_row.get("created_at"),
    )


async def load_profile(user_id: str) -> schemas.Profile:
    """
    Load the caller's user row and build its public profile.

    Raises `NotFound` when no user has this id, `Internal` when the query
    fails or the stored row does not fit the profile shape.
    """
    try:
        user_row = await repository.get_user_by_id(user_id)
    except db.DatabaseError as exc:
        raise errors.Internal(f"user lookup failed: {exc}") from exc

    if user_row is None:
        raise errors.NotFound("User not found.")

    try:
        return _to_profile(user_row)
    except (KeyError, ValidationError) as exc:
        raise errors.Internal(f"malformed user row id={user_id}: {exc}") from exc
