"""
Pre-serialized JSON fragments.

`RawJson` marks text that is already valid JSON and must be emitted as-is.
Whoever constructs one vouches for its well-formedness; nothing downstream
parses or re-escapes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi.responses import Response


@dataclass(frozen=True)
class RawJson:
    text: str

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)


EMPTY_ARRAY = RawJson("[]")


class RawJsonResponse(Response):
    """
    Response whose body is a `RawJson` fragment, written without
    going through FastAPI's JSON encoder.
    """

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if isinstance(content, RawJson):
            return content.text.encode("utf-8")
        return super().render(content)
