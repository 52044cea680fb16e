"""Exceptions raised while loading records."""

from __future__ import annotations


class FetchFailure(Exception):
    """Raised when the record endpoint cannot be reached or decoded."""

    def __init__(
        self,
        endpoint: str,
        code: str,
        *,
        detail: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code)
        self.endpoint = endpoint
        self.code = code
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        message = f"{self.code} ({self.endpoint})"
        if self.detail:
            message += f": {self.detail}"
        return message
