"""
Everdell Game Setup - Builds the pieces of a fresh base game.

This module handles:
- Deck composition (128 cards, published copy counts)
- The location map: basic spaces, haven and journeys always; a random
  draw of forest locations sized by player count
- The event map: the 4 basic events plus a random draw of special events
- A one-call setup that creates the players and the initial GameState

Randomness always comes from a caller supplied random.Random so a seeded
game is reproducible.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING

from ...engine_core.card_stack import CardStack
from ...engine_core.types import CardName, EventName, EventType, LocationName, LocationType
from .cards import CARD_REGISTRY
from .events import Event
from .locations import Location

if TYPE_CHECKING:
    from ...engine_core.state import GameOptions, GameState


# Copies in the deck, for cards that don't follow the unique=2 / common=3 rule
CARD_COUNT_OVERRIDES: dict[CardName, int] = {
    CardName.FARM: 8,
    CardName.HUSBAND: 4,
    CardName.WIFE: 4,
    CardName.CLOCK_TOWER: 3,
    CardName.CRANE: 3,
    CardName.FAIRGROUNDS: 3,
    CardName.HISTORIAN: 3,
    CardName.INNKEEPER: 3,
    CardName.SHOPKEEPER: 3,
}

DEFAULT_NUM_SPECIAL_EVENTS = 4


def num_copies(card_name: CardName) -> int:
    if card_name in CARD_COUNT_OVERRIDES:
        return CARD_COUNT_OVERRIDES[card_name]
    return 2 if CARD_REGISTRY[card_name].is_unique else 3


def initial_deck() -> CardStack:
    """Unshuffled deck holding every copy of every card."""
    cards: list[CardName] = []
    for card_name in CARD_REGISTRY:
        cards.extend([card_name] * num_copies(card_name))
    return CardStack(name="Deck", cards=cards)


def default_num_forest_locations(num_players: int) -> int:
    return 3 if num_players == 2 else 4


def initial_locations_map(
    num_players: int,
    rng: random.Random,
    options: GameOptions | None = None,
) -> dict[LocationName, list[str]]:
    """Every location in play, mapped to an empty list of worker owners."""
    num_forest = None if options is None else options.num_forest_locations
    if num_forest is None:
        num_forest = default_num_forest_locations(num_players)

    forest_locations = Location.by_type(LocationType.FOREST)
    if num_forest > len(forest_locations):
        raise ValueError(f"Only {len(forest_locations)} forest locations available")

    in_play = (
        Location.by_type(LocationType.BASIC)
        + Location.by_type(LocationType.HAVEN)
        + Location.by_type(LocationType.JOURNEY)
        + rng.sample(forest_locations, num_forest)
    )
    return {location_name: [] for location_name in in_play}


def initial_events_map(
    rng: random.Random,
    options: GameOptions | None = None,
) -> dict[EventName, str | None]:
    """Basic events plus a random selection of special events, all unclaimed."""
    num_special = DEFAULT_NUM_SPECIAL_EVENTS if options is None else options.num_special_events
    special_events = Event.by_type(EventType.SPECIAL)
    if num_special > len(special_events):
        raise ValueError(f"Only {len(special_events)} special events available")

    in_play = Event.by_type(EventType.BASIC) + rng.sample(special_events, num_special)
    return {event_name: None for event_name in in_play}


def setup_everdell_game(
    player_names: list[str],
    shuffle_deck: bool = True,
    random_seed: int | None = None,
    options: GameOptions | None = None,
) -> GameState:
    """
    Set up a new base game.

    Args:
        player_names: One name per player, in turn order
        shuffle_deck: Shuffle the deck before dealing
        random_seed: Seed for deterministic shuffling and draws
        options: Game options (forest size, special events, ...)

    Returns:
        Initial GameState ready for the first player's turn
    """
    from ...engine_core.player import create_player
    from ...engine_core.state import GameState

    players = [create_player(name) for name in player_names]
    return GameState.initial_game_state(
        players,
        shuffle_deck=shuffle_deck,
        seed=random_seed,
        options=options,
    )
