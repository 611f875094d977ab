"""
Attachment feature switch.
"""

from __future__ import annotations

from core import settings


def attachments_enabled() -> bool:
    """
    Whether ciphers embed their attachment metadata.

    Off by default: deployments without attachment storage must not
    advertise files clients cannot download.
    """
    return settings.env_bool("ATTACHMENTS_ENABLED", False)
