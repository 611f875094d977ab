"""
Sync orchestration.

Flow:
1) Load profile, folders and raw ciphers for the user (concurrently by default)
2) Compose the snapshot text

The first failing loader aborts the request; nothing partial is returned.
"""

from __future__ import annotations

import asyncio
import logging

from ciphers import service as ciphers_service
from core import settings
from core.raw_json import RawJson
from folders import schemas as folder_schemas
from folders import service as folders_service
from users import schemas as user_schemas
from users import service as users_service

from . import composer

logger = logging.getLogger(__name__)

Loaded = tuple[user_schemas.Profile, list[folder_schemas.FolderResponse], RawJson]


async def _load_sequential(user_id: str) -> Loaded:
    profile = await users_service.load_profile(user_id)
    folders = await folders_service.load_folders(user_id)
    ciphers = await ciphers_service.load_user_ciphers(user_id)
    return profile, folders, ciphers


async def _load_parallel(user_id: str) -> Loaded:
    try:
        # TaskGroup cancels the remaining loaders as soon as one fails.
        async with asyncio.TaskGroup() as tg:
            profile_task = tg.create_task(users_service.load_profile(user_id))
            folders_task = tg.create_task(folders_service.load_folders(user_id))
            ciphers_task = tg.create_task(ciphers_service.load_user_ciphers(user_id))
    except ExceptionGroup as group:
        raise group.exceptions[0]
    return profile_task.result(), folders_task.result(), ciphers_task.result()


async def get_sync_data(user_id: str) -> RawJson:
    parallel = settings.sync_parallel_fetch()
    if parallel:
        profile, folders, ciphers = await _load_parallel(user_id)
    else:
        profile, folders, ciphers = await _load_sequential(user_id)

    snapshot = composer.compose_sync_response(profile, folders, ciphers)
    logger.info(
        "sync_complete user_id=%s folders=%s ciphers_bytes=%s parallel=%s",
        user_id,
        len(folders),
        len(ciphers),
        parallel,
    )
    return snapshot
