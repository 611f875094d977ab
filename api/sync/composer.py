"""
Sync snapshot assembly.

Profile and folders go through pydantic; ciphers arrive as `RawJson` and
are spliced in untouched. This is the only place where raw vault text
meets structured output, and it trusts the fetcher's well-formedness.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import TypeAdapter

from core import errors
from core.raw_json import RawJson
from folders.schemas import FolderResponse
from users.schemas import Profile

# Features owned by other subsystems; sync always reports them empty.
EMPTY_COLLECTIONS = "[]"
EMPTY_POLICIES = "[]"
EMPTY_SENDS = "[]"
NO_DOMAINS = "null"
SYNC_OBJECT = '"sync"'

SYNC_KEYS = ("profile", "folders", "collections", "policies", "ciphers", "domains", "sends", "object")

_SYNC_TEMPLATE = (
    '{{"profile":{profile},"folders":{folders},"collections":{collections},'
    '"policies":{policies},"ciphers":{ciphers},"domains":{domains},'
    '"sends":{sends},"object":{object}}}'
)

_FOLDER_LIST = TypeAdapter(list[FolderResponse])


def compose_sync_response(
    profile: Profile,
    folders: Sequence[FolderResponse],
    ciphers: RawJson,
) -> RawJson:
    try:
        profile_json = profile.model_dump_json(by_alias=True)
        folders_json = _FOLDER_LIST.dump_json(list(folders), by_alias=True).decode("utf-8")
    except (TypeError, ValueError) as exc:
        raise errors.Internal(f"sync serialization failed: {exc}") from exc

    return RawJson(
        _SYNC_TEMPLATE.format(
            profile=profile_json,
            folders=folders_json,
            collections=EMPTY_COLLECTIONS,
            policies=EMPTY_POLICIES,
            ciphers=ciphers.text,
            domains=NO_DOMAINS,
            sends=EMPTY_SENDS,
            object=SYNC_OBJECT,
        )
    )
