"""
Public user views.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Profile(BaseModel):
    """
    Account profile as sync clients expect it (camelCase on the wire).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str | None = None
    email: str
    email_verified: bool = False
    premium: bool = True
    premium_from_organization: bool = False
    master_password_hint: str | None = None
    culture: str = "en-US"
    two_factor_enabled: bool = False
    key: str | None = None
    private_key: str | None = None
    security_stamp: str | None = None
    organizations: list[dict] = Field(default_factory=list)
    providers: list[dict] = Field(default_factory=list)
    provider_organizations: list[dict] = Field(default_factory=list)
    force_password_reset: bool = False
    avatar_color: str | None = None
    uses_key_connector: bool = False
    creation_date: datetime | None = None
    object: Literal["profile"] = "profile"
