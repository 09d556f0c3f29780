"""
Session Manager - Holds running games as serialized snapshots.

LIFECYCLE:
1. A game is created -> its initial state is stored under a new game id
2. Every accepted input stores the resulting state as the latest snapshot
3. Callers always get a fresh GameState rebuilt from the latest snapshot,
   so nothing they do to it leaks back into the store
4. Ending a session drops every snapshot it held

PERSISTENCE RULES:
- In-memory only; the CLI writes snapshots to disk itself
- Snapshots are GameState.to_json(include_private=True)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import time
import uuid

from ..engine_core.state import GameState


@dataclass
class Session:
    """
    One game and its history.

    snapshots[0] is the initial state and snapshots[-1] the current one.
    """
    game_id: str
    created_at: float
    snapshots: list[dict[str, Any]] = field(default_factory=list)

    @property
    def latest(self) -> dict[str, Any]:
        return self.snapshots[-1]

    @property
    def num_snapshots(self) -> int:
        return len(self.snapshots)

    def game_state(self) -> GameState:
        """Fresh GameState for the latest snapshot."""
        return GameState.from_json(self.latest)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from initial game states
    - Record each new state as a snapshot
    - Forget sessions when asked
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, game_state: GameState, game_id: str | None = None) -> Session:
        session = Session(
            game_id=game_id or str(uuid.uuid4()),
            created_at=time.time(),
            snapshots=[game_state.to_json(include_private=True)],
        )
        self._sessions[session.game_id] = session
        return session

    def restore_session(self, game_id: str, snapshot: dict[str, Any]) -> Session:
        """Load a snapshot saved elsewhere (e.g. on disk) as a one-entry session."""
        # Round-trip once so a malformed snapshot fails here, not on first use
        game_state = GameState.from_json(snapshot)
        return self.create_session(game_state, game_id=game_id)

    def get_session(self, game_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(game_id)

    def record_state(self, game_id: str, game_state: GameState) -> Session:
        session = self._sessions.get(game_id)
        if session is None:
            raise KeyError(game_id)
        session.snapshots.append(game_state.to_json(include_private=True))
        return session

    def end_session(self, game_id: str) -> bool:
        """Drop a session. Returns False if it did not exist."""
        return self._sessions.pop(game_id, None) is not None

    def list_sessions(self) -> list[str]:
        return list(self._sessions)
