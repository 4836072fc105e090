"""Result models for synchronous, typed failures."""

from __future__ import annotations

from pydantic import BaseModel


class Error(BaseModel):
    """Error result from operations."""

    message: str

    def __str__(self) -> str:
        return self.message


__all__ = ["Error"]
