"""REST endpoints for team generation and balance scoring."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, model_validator

from squad_builder.api.schemas import PlayerIn, TeamIn, serialize_teams
from squad_builder.config import settings
from squad_builder.exceptions import InsufficientPlayersError, PlayerNotFoundError
from squad_builder.services.team_balancer import (
    classify_balance,
    generate_teams,
    get_balance,
    select_players,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


class GenerateTeamsRequest(BaseModel):
    players: list[PlayerIn]
    num_teams: int = Field(default=settings.default_num_teams, ge=1)
    # Subset of ``players`` to use; all players when omitted
    player_ids: list[str] | None = None

    @model_validator(mode="after")
    def check_team_limit(self):
        if self.num_teams > settings.max_teams:
            raise ValueError(f"num_teams may not exceed {settings.max_teams}")
        return self


class BalanceRequest(BaseModel):
    teams: list[TeamIn]


@router.post("/generate")
async def create_teams(body: GenerateTeamsRequest):
    """Generate balanced teams from a player pool."""
    pool = [p.to_player() for p in body.players]
    try:
        if body.player_ids is not None:
            pool = select_players(pool, body.player_ids)
        teams = generate_teams(pool, body.num_teams)
    except PlayerNotFoundError as e:
        logger.warning(f"Team generation rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except InsufficientPlayersError as e:
        logger.warning(f"Team generation rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return serialize_teams(teams)


@router.post("/balance")
async def score_balance(body: BalanceRequest):
    """Balance spread and rating for an existing team set."""
    teams = [t.to_team() for t in body.teams]
    balance = get_balance(teams)
    return {"balance": balance, "rating": classify_balance(balance).value}
