"""
Vault-item loading.
"""

from __future__ import annotations

from core.raw_json import RawJson

from . import attachments, repository

USER_CIPHERS_FILTER = "WHERE c.user_id = $1"


async def load_user_ciphers(user_id: str) -> RawJson:
    return await repository.fetch_cipher_json_array_raw(
        attachments.attachments_enabled(),
        USER_CIPHERS_FILTER,
        [user_id],
    )
