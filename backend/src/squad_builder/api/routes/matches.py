"""REST endpoints that package final teams into match records.

Nothing is stored here; the returned records are handed to the persistence
layer by the client.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from squad_builder.api.schemas import (
    PlayerIn,
    TeamIn,
    serialize_match,
    serialize_player,
)
from squad_builder.exceptions import TeamNotFoundError
from squad_builder.models.match import MatchType
from squad_builder.services.match_service import apply_match_result, build_match

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


class CreateMatchRequest(BaseModel):
    teams: list[TeamIn]
    name: str | None = None
    winner_id: str | None = None
    is_public: bool = False
    match_type: MatchType | None = None
    created_by: str | None = None


class MatchResultRequest(BaseModel):
    players: list[PlayerIn]
    teams: list[TeamIn]
    winner_id: str | None = None


@router.post("", status_code=201)
async def create_match(body: CreateMatchRequest):
    """Build a match record from finalized teams."""
    try:
        match = build_match(
            [t.to_team() for t in body.teams],
            name=body.name,
            winner_id=body.winner_id,
            is_public=body.is_public,
            match_type=body.match_type,
            created_by=body.created_by,
        )
    except TeamNotFoundError as e:
        logger.warning(f"Match creation rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return serialize_match(match)


@router.post("/result")
async def record_result(body: MatchResultRequest):
    """Return the roster with wins and matches played updated."""
    try:
        match = build_match([t.to_team() for t in body.teams], winner_id=body.winner_id)
    except TeamNotFoundError as e:
        logger.warning(f"Match result rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    players = apply_match_result([p.to_player() for p in body.players], match)
    return {"players": [serialize_player(p) for p in players]}
