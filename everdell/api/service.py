"""
Game Service - Business logic layer between callers and the engine.

The service:
1. Validates incoming payloads with the pydantic schemas
2. Creates games and stores them in the SessionManager
3. Applies inputs through GameState.next
4. Turns engine errors into GameResult failures with stable error codes

This layer is transport-agnostic; the CLI is its only caller today.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import logging

from pydantic import BaseModel, ValidationError

from ..engine_core.errors import EverdellError
from ..engine_core.state import GameOptions, GameState
from ..games.base.setup import setup_everdell_game
from ..session import Session, SessionManager
from .schemas import (
    CreateGameRequest,
    ErrorCode,
    ErrorResponse,
    GameInputModel,
    GameStateResponse,
    InputListResponse,
    PlayerScore,
    ScoreResponse,
)


logger = logging.getLogger(__name__)


def _error_code(error: EverdellError) -> ErrorCode:
    try:
        return ErrorCode(error.error_code)
    except ValueError:
        return ErrorCode.INVARIANT_VIOLATION


@dataclass
class GameResult:
    """Outcome of a service call: either data or an error."""
    success: bool
    data: BaseModel | None = None
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def ok(cls, data: BaseModel | None = None) -> GameResult:
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str, error_code: ErrorCode) -> GameResult:
        return cls(success=False, error=message, error_code=error_code)

    def to_error_response(self) -> ErrorResponse | None:
        if self.success:
            return None
        return ErrorResponse(error=self.error or "", error_code=self.error_code)


@dataclass
class GameService:
    """
    Entry point for running games.

    Usage:
        service = GameService()
        result = service.create_game({"player_names": ["Ann", "Bo"]})
        game_id = result.data.game_id

        inputs = service.get_possible_inputs(game_id).data.inputs
        result = service.apply_input(game_id, inputs[0])
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self, request: CreateGameRequest | dict[str, Any]) -> GameResult:
        try:
            if not isinstance(request, CreateGameRequest):
                request = CreateGameRequest.model_validate(request)
            options = GameOptions(
                realtime_points=request.realtime_points,
                num_forest_locations=request.num_forest_locations,
                num_special_events=request.num_special_events,
            )
            game_state = setup_everdell_game(
                request.player_names,
                shuffle_deck=request.shuffle_deck,
                random_seed=request.seed,
                options=options,
            )
        except ValidationError as e:
            return self._validation_failure("create_game", e)
        except (EverdellError, ValueError) as e:
            logger.warning("create_game failed: %s", e)
            return GameResult.failure(str(e), ErrorCode.INVALID_INPUT)

        session = self.session_manager.create_session(game_state)
        return GameResult.ok(self._state_response(session.game_id, game_state, include_private=True))

    def get_state(self, game_id: str, include_private: bool = False) -> GameResult:
        session = self.session_manager.get_session(game_id)
        if session is None:
            return self._not_found(game_id)
        return GameResult.ok(self._state_response(game_id, session.game_state(), include_private))

    def get_possible_inputs(self, game_id: str) -> GameResult:
        session = self.session_manager.get_session(game_id)
        if session is None:
            return self._not_found(game_id)
        game_state = session.game_state()
        return GameResult.ok(InputListResponse(
            game_id=game_id,
            active_player_id=game_state.active_player_id,
            inputs=[
                GameInputModel.from_game_input(gi)
                for gi in game_state.get_possible_game_inputs()
            ],
        ))

    def apply_input(
        self,
        game_id: str,
        game_input: GameInputModel | dict[str, Any],
        include_private: bool = False,
    ) -> GameResult:
        session = self.session_manager.get_session(game_id)
        if session is None:
            return self._not_found(game_id)
        try:
            if not isinstance(game_input, GameInputModel):
                game_input = GameInputModel.model_validate(game_input)
            next_state = session.game_state().next(game_input.to_game_input())
        except ValidationError as e:
            return self._validation_failure("apply_input", e)
        except EverdellError as e:
            logger.warning("apply_input failed for game %s: %s", game_id, e)
            return GameResult.failure(str(e), _error_code(e))

        self.session_manager.record_state(game_id, next_state)
        return GameResult.ok(self._state_response(game_id, next_state, include_private))

    def get_scores(self, game_id: str) -> GameResult:
        session = self.session_manager.get_session(game_id)
        if session is None:
            return self._not_found(game_id)
        game_state = session.game_state()
        scores = game_state.get_scores()
        winner_ids = {p.player_id for p in game_state.get_winners()}
        return GameResult.ok(ScoreResponse(
            game_id=game_id,
            is_game_over=game_state.is_game_over(),
            scores=[
                PlayerScore(
                    player_id=p.player_id,
                    name=p.name,
                    points=scores[p.player_id],
                    is_winner=p.player_id in winner_ids,
                )
                for p in game_state.players
            ],
        ))

    def delete_game(self, game_id: str) -> GameResult:
        if not self.session_manager.end_session(game_id):
            return self._not_found(game_id)
        return GameResult.ok()

    # =========================================================================
    # Snapshots
    # =========================================================================

    def load_game(self, game_id: str, snapshot: dict[str, Any]) -> Session:
        return self.session_manager.restore_session(game_id, snapshot)

    def export_game(self, game_id: str) -> dict[str, Any] | None:
        session = self.session_manager.get_session(game_id)
        return None if session is None else session.latest

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _state_response(game_id: str, game_state: GameState, include_private: bool) -> GameStateResponse:
        return GameStateResponse(
            game_id=game_id,
            game_state_id=game_state.game_state_id,
            active_player_id=game_state.active_player_id,
            is_game_over=game_state.is_game_over(),
            pending_input_count=len(game_state.pending_game_inputs),
            state=game_state.to_json(include_private),
        )

    @staticmethod
    def _not_found(game_id: str) -> GameResult:
        logger.warning("game not found: %s", game_id)
        return GameResult.failure(f"Game not found: {game_id}", ErrorCode.GAME_NOT_FOUND)

    @staticmethod
    def _validation_failure(operation: str, error: ValidationError) -> GameResult:
        logger.warning("%s rejected payload: %s", operation, error)
        return GameResult.failure(str(error), ErrorCode.VALIDATION_ERROR)
