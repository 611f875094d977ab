"""
Application error kinds.

Loaders and the composer raise these; `main.py` maps them to HTTP
responses shaped like FastAPI's `HTTPException` body: {"detail": "..."}.
"""

from __future__ import annotations


class AppError(Exception):
    status_code = 500
    public_message = "Internal server error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    def detail(self) -> str:
        # Only messages of expected errors are safe to show to clients.
        return self.public_message


class NotFound(AppError):
    status_code = 404
    public_message = "Not found."

    def detail(self) -> str:
        return self.message


class Internal(AppError):
    status_code = 500
