"""API routes for player-auth."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.engine import Engine

from player_auth.database import get_engine
from player_auth.schemas import (
    AuthorizeResponse,
    CodeResponse,
    ErrorResponse,
    RemoveResponse,
)
from player_auth.services.authorization import AuthorizationService
from player_auth.services.codes import is_valid_code
from player_auth.services.store import CodeStore

router = APIRouter()


def get_service(engine: Annotated[Engine, Depends(get_engine)]) -> AuthorizationService:
    """Build the authorization service over the injected engine."""
    return AuthorizationService(CodeStore(engine))


Service = Annotated[AuthorizationService, Depends(get_service)]


def _require_valid_code(code: str) -> None:
    if not is_valid_code(code):
        raise HTTPException(status_code=400, detail="Malformed auth code")


@router.post(
    "/players/{player_id}/code",
    response_model=CodeResponse,
    responses={503: {"model": ErrorResponse}},
)
def issue_code(player_id: str, service: Service):
    """Issue a code for a player, or return the one they already have."""
    code = service.issue_code(player_id)
    return CodeResponse(code=code, player_id=player_id)


@router.get(
    "/players/{player_id}/code",
    response_model=CodeResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_auth_code(player_id: str, service: Service):
    """Get the pending code of a player."""
    code = service.get_auth_code(player_id)
    if code is None:
        raise HTTPException(status_code=404, detail="No pending code for player")
    return CodeResponse(code=code, player_id=player_id)


@router.get("/codes", response_model=list[CodeResponse])
def list_codes(service: Service):
    """List all pending codes."""
    return [
        CodeResponse(code=c.auth_code, player_id=c.player_id)
        for c in service.get_all_auth_codes()
    ]


@router.get(
    "/codes/{code}/player",
    response_model=CodeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_player_id(code: str, service: Service):
    """Get the player a code is bound to."""
    _require_valid_code(code)
    player_id = service.get_player_id(code)
    if player_id is None:
        raise HTTPException(status_code=404, detail="Unknown auth code")
    return CodeResponse(code=code, player_id=player_id)


@router.post("/codes/{code}/authorize", response_model=AuthorizeResponse)
def authorize(code: str, service: Service):
    """Redeem a code. Unknown codes answer ok=false rather than an error."""
    if not is_valid_code(code):
        return AuthorizeResponse(player_id="", ok=False)
    result = service.authorize(code)
    return AuthorizeResponse(player_id=result.player_id, ok=result.ok)


@router.delete(
    "/codes/{code}",
    response_model=RemoveResponse,
    responses={400: {"model": ErrorResponse}},
)
def remove_code(code: str, service: Service):
    """Remove a code without redeeming it."""
    _require_valid_code(code)
    return RemoveResponse(removed=service.remove_code(code))
