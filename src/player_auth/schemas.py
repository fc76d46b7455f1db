"""Pydantic schemas for API responses."""

from pydantic import BaseModel


class CodeResponse(BaseModel):
    """A pending code and the player it belongs to."""

    code: str
    player_id: str


class AuthorizeResponse(BaseModel):
    """Response for the authorize endpoint."""

    player_id: str
    ok: bool


class RemoveResponse(BaseModel):
    """Response for the remove endpoint."""

    removed: int


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
