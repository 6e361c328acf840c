"""REST endpoints for interactive team editing sessions."""

import logging
import threading
import time
import uuid
from typing import Callable

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from squad_builder.api.schemas import TeamIn, serialize_teams
from squad_builder.config import settings
from squad_builder.exceptions import (
    EditorSessionError,
    InvalidTeamSetError,
    PlayerNotFoundError,
    PositionOutOfRangeError,
    TeamNotFoundError,
)
from squad_builder.models.session import EditorSession
from squad_builder.models.team import Team
from squad_builder.services.composition_editor import CompositionEditor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/editor", tags=["editor"])

# In-memory session storage with thread-safe access
_sessions: dict[str, EditorSession] = {}
_sessions_lock = threading.Lock()
_session_locks: dict[str, threading.Lock] = {}
_cleanup_lock = threading.Lock()
_last_cleanup = 0.0


def _is_session_expired(session: EditorSession, now: float) -> bool:
    return (now - session.last_access) >= settings.session_ttl_seconds


def _touch_session(session: EditorSession, now: float) -> None:
    session.last_access = now


def _prune_expired_sessions(now: float | None = None) -> None:
    """Remove expired sessions opportunistically."""
    global _last_cleanup
    now = now or time.time()
    if now - _last_cleanup < settings.session_cleanup_interval_seconds:
        return

    with _cleanup_lock:
        if now - _last_cleanup < settings.session_cleanup_interval_seconds:
            return

        expired: list[str] = []
        with _sessions_lock:
            for session_id, session in _sessions.items():
                lock = _session_locks.get(session_id)
                if lock and lock.locked():
                    continue
                if _is_session_expired(session, now):
                    expired.append(session_id)

            for session_id in expired:
                _sessions.pop(session_id, None)
                _session_locks.pop(session_id, None)

        if expired:
            logger.info(f"Pruned {len(expired)} expired editor sessions")
        _last_cleanup = now


def _get_session_with_lock(session_id: str) -> tuple[EditorSession, threading.Lock]:
    """Fetch session and its lock, creating the lock if needed."""
    _prune_expired_sessions()
    with _sessions_lock:
        session = _sessions.get(session_id)
        if not session:
            raise HTTPException(status_code=404, detail="Session not found")
        lock = _session_locks.get(session_id)
        if lock is None:
            lock = threading.Lock()
            _session_locks[session_id] = lock

    return session, lock


def _remove_session(session_id: str) -> None:
    with _sessions_lock:
        _sessions.pop(session_id, None)
        _session_locks.pop(session_id, None)


def _apply(
    session_id: str,
    operation: Callable[[CompositionEditor], list[Team]],
    mutating: bool = True,
) -> dict:
    """Run one editor operation under the session lock."""
    session, lock = _get_session_with_lock(session_id)
    with lock:
        now = time.time()
        if _is_session_expired(session, now):
            raise HTTPException(status_code=404, detail="Session expired")
        _touch_session(session, now)

        try:
            teams = operation(session.editor)
        except (PlayerNotFoundError, TeamNotFoundError) as e:
            logger.warning(f"Editor session {session_id}: {e}")
            raise HTTPException(status_code=404, detail=str(e))
        except PositionOutOfRangeError as e:
            logger.warning(f"Editor session {session_id}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except EditorSessionError:
            raise HTTPException(status_code=404, detail="Session closed")

        if mutating:
            session.operation_count += 1
        return _session_payload(session, teams)


def _session_payload(session: EditorSession, teams: list[Team]) -> dict:
    return {
        "session_id": session.session_id,
        "operation_count": session.operation_count,
        **serialize_teams(teams),
    }


class OpenSessionRequest(BaseModel):
    teams: list[TeamIn] = Field(min_length=1)


class MoveRequest(BaseModel):
    player_id: str
    from_team_id: str
    to_team_id: str


class SwapRequest(BaseModel):
    player_a_id: str
    team_a_id: str
    player_b_id: str
    team_b_id: str


class ReorderRequest(BaseModel):
    team_id: str
    from_index: int
    to_index: int


class RenameRequest(BaseModel):
    team_id: str
    name: str


@router.post("/sessions", status_code=201)
async def open_session(body: OpenSessionRequest):
    """Start editing a team set."""
    _prune_expired_sessions()
    session_id = f"edit_{uuid.uuid4().hex[:12]}"
    try:
        editor = CompositionEditor([t.to_team() for t in body.teams])
    except InvalidTeamSetError as e:
        logger.warning(f"Editor session rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    session = EditorSession(session_id=session_id, editor=editor)

    with _sessions_lock:
        _sessions[session_id] = session
        _session_locks[session_id] = threading.Lock()

    logger.info(f"Opened editor session {session_id} with {len(body.teams)} teams")
    return _session_payload(session, editor.teams)


@router.get("/sessions/{session_id}")
async def get_session(session_id: str):
    """Current working copy of a session."""
    return _apply(session_id, lambda editor: editor.teams, mutating=False)


@router.post("/sessions/{session_id}/move")
async def move_player(session_id: str, body: MoveRequest):
    """Move a player to another team."""
    return _apply(
        session_id,
        lambda editor: editor.move_player(body.player_id, body.from_team_id, body.to_team_id),
    )


@router.post("/sessions/{session_id}/swap")
async def swap_players(session_id: str, body: SwapRequest):
    """Swap two players between teams."""
    return _apply(
        session_id,
        lambda editor: editor.swap_players(
            body.player_a_id, body.team_a_id, body.player_b_id, body.team_b_id
        ),
    )


@router.post("/sessions/{session_id}/reorder")
async def reorder_player(session_id: str, body: ReorderRequest):
    """Change a player's slot within a team."""
    return _apply(
        session_id,
        lambda editor: editor.reorder_within_team(body.team_id, body.from_index, body.to_index),
    )


@router.post("/sessions/{session_id}/rename")
async def rename_team(session_id: str, body: RenameRequest):
    """Rename a team."""
    return _apply(session_id, lambda editor: editor.rename_team(body.team_id, body.name))


@router.post("/sessions/{session_id}/reset")
async def reset_session(session_id: str):
    """Discard all edits made in this session."""
    return _apply(session_id, lambda editor: editor.reset())


@router.post("/sessions/{session_id}/commit")
async def commit_session(session_id: str):
    """Finish editing and return the final teams."""
    session, lock = _get_session_with_lock(session_id)
    with lock:
        try:
            teams = session.editor.commit()
        except EditorSessionError:
            raise HTTPException(status_code=404, detail="Session closed")
        payload = _session_payload(session, teams)
    _remove_session(session_id)
    logger.info(f"Committed editor session {session_id} after {session.operation_count} operations")
    return payload


@router.delete("/sessions/{session_id}", status_code=204)
async def discard_session(session_id: str):
    """Abandon a session without keeping its edits."""
    session, lock = _get_session_with_lock(session_id)
    with lock:
        if session.editor.is_open:
            session.editor.discard()
    _remove_session(session_id)
    return Response(status_code=204)
