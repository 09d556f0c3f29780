"""
API Module - Validated entry points into the engine.

Callers:
1. Create games from a CreateGameRequest
2. List the inputs the active player may submit
3. Apply inputs and read back state and scores

Errors come back as GameResult failures carrying an ErrorCode.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    GameInputModel,
    # Responses
    ErrorResponse,
    GameStateResponse,
    InputListResponse,
    PlayerScore,
    ScoreResponse,
    # Enums
    ErrorCode,
)
from .service import GameResult, GameService

__all__ = [
    # Requests
    "CreateGameRequest",
    "GameInputModel",
    # Responses
    "ErrorResponse",
    "GameStateResponse",
    "InputListResponse",
    "PlayerScore",
    "ScoreResponse",
    # Enums
    "ErrorCode",
    # Service
    "GameResult",
    "GameService",
]
