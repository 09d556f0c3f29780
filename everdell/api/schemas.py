"""
Pydantic Schemas - Validated request/response models at the engine boundary.

JSON arriving from outside (CLI files, stdin, any future transport) is
validated here before it is turned into engine objects. The engine core
itself never imports pydantic.

Error Codes:
- ILLEGAL_ACTION: The input is well formed but not allowed right now
- INVALID_INPUT: The input is malformed, mismatched or out of range
- OVERPAY: A payment spends more than the card costs
- INVARIANT_VIOLATION: The engine was driven into an impossible state
- GAME_NOT_FOUND: Game id does not exist
- VALIDATION_ERROR: Payload failed schema validation
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.game_input import GameInput
from ..engine_core.types import (
    CardName,
    EventName,
    GameInputType,
    LocationName,
    ResourceType,
)


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    ILLEGAL_ACTION = "ILLEGAL_ACTION"
    INVALID_INPUT = "INVALID_INPUT"
    OVERPAY = "OVERPAY"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Game Input
# =============================================================================

class GameInputModel(BaseModel):
    """
    Permissive mirror of GameInput.

    Enum-valued fields are checked against the catalogs. Nested structures
    (payment options, played cards, the player's answer) are passed through
    and checked by the engine when the input is applied.
    """
    input_type: GameInputType

    card: Optional[CardName] = None
    from_meadow: Optional[bool] = None
    payment_options: Optional[dict[str, Any]] = None
    card_owner_id: Optional[str] = None
    location: Optional[LocationName] = None
    event: Optional[EventName] = None

    prev_input_type: Optional[GameInputType] = None
    prev_input: Optional[dict[str, Any]] = None
    card_context: Optional[CardName] = None
    location_context: Optional[LocationName] = None
    event_context: Optional[EventName] = None
    played_card_context: Optional[dict[str, Any]] = None

    card_options: Optional[list[CardName]] = None
    card_options_unfiltered: Optional[list[CardName]] = None
    played_card_options: Optional[list[dict[str, Any]]] = None
    player_options: Optional[list[str]] = None
    location_options: Optional[list[LocationName]] = None
    worker_options: Optional[list[dict[str, Any]]] = None
    options: Optional[list[str]] = None
    min_to_select: Optional[int] = Field(None, ge=0)
    max_to_select: Optional[int] = Field(None, ge=0)
    must_select_one: Optional[bool] = None
    to_spend: Optional[bool] = None
    specific_resource: Optional[ResourceType] = None
    exclude_resource: Optional[ResourceType] = None
    card_to_buy: Optional[CardName] = None

    client_options: dict[str, Any] = Field(
        default_factory=dict, description="The player's answer to a prompt"
    )

    model_config = {"extra": "forbid"}

    def to_game_input(self) -> GameInput:
        return GameInput.from_json(self.model_dump(mode="json", exclude_unset=True))

    @classmethod
    def from_game_input(cls, game_input: GameInput) -> "GameInputModel":
        return cls.model_validate(game_input.to_json())


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(BaseModel):
    """Request to create a new game."""
    player_names: list[str] = Field(
        ..., min_length=2, max_length=4, description="Player names in turn order"
    )
    shuffle_deck: bool = Field(True, description="Shuffle the deck before dealing")
    seed: Optional[int] = Field(None, description="Seed for reproducible games")
    realtime_points: bool = Field(False, description="Include live scores in state JSON")
    num_forest_locations: Optional[int] = Field(
        None, ge=0, le=11, description="Defaults to 3 for 2 players, else 4"
    )
    num_special_events: int = Field(4, ge=0, le=16)


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Serialized game state plus the fields callers usually want first."""
    game_id: str
    game_state_id: int
    active_player_id: str
    is_game_over: bool = False
    pending_input_count: int = 0
    state: dict[str, Any] = Field(default_factory=dict)
    api_version: str = "v1"


class PlayerScore(BaseModel):
    """Points for one player."""
    player_id: str
    name: str
    points: int
    is_winner: bool = False

    model_config = {"from_attributes": True}


class ScoreResponse(BaseModel):
    """Scores for every player in a game."""
    game_id: str
    is_game_over: bool
    scores: list[PlayerScore] = Field(default_factory=list)
    api_version: str = "v1"


class InputListResponse(BaseModel):
    """Inputs the active player may submit."""
    game_id: str
    active_player_id: str
    inputs: list[GameInputModel] = Field(default_factory=list)
    api_version: str = "v1"
