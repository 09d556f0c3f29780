"""
Engine Core - Deterministic Everdell state management and effect resolution.

The engine is the runtime that:
1. Builds the initial GameState for a set of players
2. Validates and applies GameInputs via GameState.next
3. Parks multi-step choices as pending inputs
4. Generates the legal inputs for the active player
5. Scores cities, resources and claimed events on demand
"""

from .card_stack import CardStack
from .errors import (
    EverdellError,
    IllegalActionError,
    InvalidInputError,
    InvariantError,
    OverpayError,
)
from .game_input import GameInput, PaymentOptions, PlayedCard, PlayedEvent, WorkerPlacement
from .player import Player, create_player
from .state import GameOptions, GameState
from .types import (
    CardName,
    CardType,
    EventName,
    EventType,
    GameInputType,
    LocationName,
    LocationOccupancy,
    LocationType,
    PlayerStatus,
    ResourceType,
    Season,
)

__all__ = [
    "CardStack",
    "EverdellError",
    "IllegalActionError",
    "InvalidInputError",
    "InvariantError",
    "OverpayError",
    "GameInput",
    "PaymentOptions",
    "PlayedCard",
    "PlayedEvent",
    "WorkerPlacement",
    "Player",
    "create_player",
    "GameOptions",
    "GameState",
    "CardName",
    "CardType",
    "EventName",
    "EventType",
    "GameInputType",
    "LocationName",
    "LocationOccupancy",
    "LocationType",
    "PlayerStatus",
    "ResourceType",
    "Season",
]
