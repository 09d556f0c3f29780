"""
Base Game Locations - Basic spaces, the haven, journeys and the forest.

Location structure:
- Fixed gains (resources_to_gain, num_cards_to_draw) applied on arrival
- An occupancy policy (EXCLUSIVE / EXCLUSIVE_FOUR / UNLIMITED)
- Optional play_inner for choices, driven by continuations that carry
  location_context
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...engine_core.errors import IllegalActionError, InvalidInputError
from ...engine_core.game_input import GameInput, PaymentOptions, PlayedCard
from ...engine_core.play_helpers import (
    CanPlayCheckFn,
    PlayFn,
    gain_wild_resources,
    get_selected_cards,
    get_selected_location,
    select_wild_resources_input,
)
from ...engine_core.resources import ResourceMap
from ...engine_core.types import (
    CardName,
    GameInputType,
    LocationName,
    LocationOccupancy,
    LocationType,
    ResourceType,
    Season,
)

if TYPE_CHECKING:
    from ...engine_core.state import GameState


TWIG = ResourceType.TWIG
RESIN = ResourceType.RESIN
PEBBLE = ResourceType.PEBBLE
BERRY = ResourceType.BERRY
VP = ResourceType.VP


@dataclass(frozen=True)
class Location:
    """A worker placement space."""
    name: LocationName
    location_type: LocationType
    occupancy: LocationOccupancy
    resources_to_gain: ResourceMap = field(default_factory=dict)
    num_cards_to_draw: int = 0
    play_inner: PlayFn | None = None
    can_play_check_inner: CanPlayCheckFn | None = None

    def can_play(self, state: GameState, game_input: GameInput) -> bool:
        return self.can_play_check(state, game_input) is None

    def can_play_check(self, state: GameState, game_input: GameInput) -> str | None:
        if self.name not in state.locations_map:
            return f"{self.name.value} is not part of this game"
        if state.get_active_player().num_available_workers <= 0:
            return "No more workers to place"
        workers = state.locations_map[self.name]
        if self.occupancy == LocationOccupancy.EXCLUSIVE:
            if len(workers) != 0:
                return f"{self.name.value} is already occupied"
        elif self.occupancy == LocationOccupancy.EXCLUSIVE_FOUR:
            if len(workers) >= (1 if len(state.players) < 4 else 2):
                return f"{self.name.value} is already occupied"
        if self.can_play_check_inner:
            return self.can_play_check_inner(state, game_input)
        return None

    def play(self, state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        if game_input.input_type == GameInputType.PLACE_WORKER:
            error = self.can_play_check(state, game_input)
            if error:
                raise IllegalActionError(error)
            self.trigger(state, game_input)
        elif self.play_inner:
            self.play_inner(state, game_input, None)

    def trigger(self, state: GameState, game_input: GameInput) -> None:
        """
        Apply the location's effect without any occupancy check.

        Used for a normal visit and for copies (LOOKOUT, CLOCK_TOWER and the
        forest copy space).
        """
        player = state.get_active_player()
        if self.resources_to_gain:
            player.gain_resources(self.resources_to_gain)
        if self.num_cards_to_draw:
            player.draw_cards(state, self.num_cards_to_draw)
        if self.play_inner:
            self.play_inner(state, game_input, None)

    @staticmethod
    def from_name(name: LocationName) -> Location:
        return LOCATION_REGISTRY[LocationName(name)]

    @staticmethod
    def by_type(location_type: LocationType) -> list[LocationName]:
        return [
            name for name, location in LOCATION_REGISTRY.items()
            if location.location_type == location_type
        ]

    @staticmethod
    def all_names() -> list[LocationName]:
        return list(LOCATION_REGISTRY)


# ============================================================================
# Shared pieces
# ============================================================================

def _is_answer(game_input: GameInput, input_type: GameInputType, location_name: LocationName) -> bool:
    return game_input.input_type == input_type and game_input.location_context == location_name


def _discard_prompt(
    game_input: GameInput,
    location_name: LocationName,
    min_to_select: int,
    max_to_select: int,
) -> GameInput:
    return GameInput(
        input_type=GameInputType.DISCARD_CARDS,
        prev_input_type=game_input.input_type,
        location_context=location_name,
        min_to_select=min_to_select,
        max_to_select=max_to_select,
        client_options={"cards_to_discard": []},
    )


def play_discard_for_wild_factory(
    location_name: LocationName,
    max_cards: int | None,
    cards_per_resource: int,
) -> PlayFn:
    """Discard cards from hand, then gain one resource per cards_per_resource discarded."""
    def play(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        player = state.get_active_player()
        if _is_answer(game_input, GameInputType.DISCARD_CARDS, location_name):
            cards_to_discard = get_selected_cards(game_input, key="cards_to_discard")
            player.discard_cards_from_hand(state, cards_to_discard)
            num_resources = len(cards_to_discard) // cards_per_resource
            if num_resources:
                state.pending_game_inputs.append(
                    select_wild_resources_input(game_input, num_resources, location_context=location_name)
                )
        elif _is_answer(game_input, GameInputType.SELECT_RESOURCES, location_name):
            gain_wild_resources(state, game_input)
        elif player.cards_in_hand:
            upper = player.num_cards_in_hand if max_cards is None else min(max_cards, player.num_cards_in_hand)
            state.pending_game_inputs.append(_discard_prompt(game_input, location_name, 0, upper))
    return play


def play_gain_wild_factory(location_name: LocationName, num_resources: int) -> PlayFn:
    def play(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        if _is_answer(game_input, GameInputType.SELECT_RESOURCES, location_name):
            gain_wild_resources(state, game_input)
        else:
            state.pending_game_inputs.append(
                select_wild_resources_input(game_input, num_resources, location_context=location_name)
            )
    return play


def play_journey_factory(location_name: LocationName, num_points: int) -> PlayFn:
    def play(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        player = state.get_active_player()
        if _is_answer(game_input, GameInputType.DISCARD_CARDS, location_name):
            cards_to_discard = get_selected_cards(game_input, key="cards_to_discard")
            player.discard_cards_from_hand(state, cards_to_discard)
            player.gain_resources({VP: num_points})
            state.add_game_log(f"{player.name} went on a journey for {num_points} VP")
        else:
            state.pending_game_inputs.append(
                _discard_prompt(game_input, location_name, num_points, num_points)
            )
    return play


def can_play_journey_factory(num_points: int) -> CanPlayCheckFn:
    def can_play_check(state: GameState, game_input: GameInput) -> str | None:
        player = state.get_active_player()
        if player.current_season != Season.AUTUMN:
            return "Can only go on a journey in AUTUMN"
        if player.num_cards_in_hand < num_points:
            return "Insufficient cards for journey"
        return None
    return can_play_check


def _basic(name: LocationName, occupancy: LocationOccupancy, resources: ResourceMap, num_cards: int = 0) -> Location:
    return Location(
        name=name,
        location_type=LocationType.BASIC,
        occupancy=occupancy,
        resources_to_gain=resources,
        num_cards_to_draw=num_cards,
    )


def _forest(name: LocationName, resources: ResourceMap | None = None, num_cards: int = 0, **hooks) -> Location:
    return Location(
        name=name,
        location_type=LocationType.FOREST,
        occupancy=LocationOccupancy.EXCLUSIVE_FOUR,
        resources_to_gain=resources or {},
        num_cards_to_draw=num_cards,
        **hooks,
    )


def _journey(name: LocationName, occupancy: LocationOccupancy, num_points: int) -> Location:
    return Location(
        name=name,
        location_type=LocationType.JOURNEY,
        occupancy=occupancy,
        play_inner=play_journey_factory(name, num_points),
        can_play_check_inner=can_play_journey_factory(num_points),
    )


# ============================================================================
# Basic locations
# ============================================================================

BASIC_ONE_BERRY = _basic(LocationName.BASIC_ONE_BERRY, LocationOccupancy.UNLIMITED, {BERRY: 1})
BASIC_ONE_BERRY_AND_ONE_CARD = _basic(
    LocationName.BASIC_ONE_BERRY_AND_ONE_CARD, LocationOccupancy.EXCLUSIVE, {BERRY: 1}, 1
)
BASIC_ONE_RESIN_AND_ONE_CARD = _basic(
    LocationName.BASIC_ONE_RESIN_AND_ONE_CARD, LocationOccupancy.UNLIMITED, {RESIN: 1}, 1
)
BASIC_ONE_STONE = _basic(LocationName.BASIC_ONE_STONE, LocationOccupancy.EXCLUSIVE, {PEBBLE: 1})
BASIC_THREE_TWIGS = _basic(LocationName.BASIC_THREE_TWIGS, LocationOccupancy.EXCLUSIVE, {TWIG: 3})
BASIC_TWO_CARDS_AND_ONE_VP = _basic(
    LocationName.BASIC_TWO_CARDS_AND_ONE_VP, LocationOccupancy.UNLIMITED, {VP: 1}, 2
)
BASIC_TWO_RESIN = _basic(LocationName.BASIC_TWO_RESIN, LocationOccupancy.EXCLUSIVE, {RESIN: 2})
BASIC_TWO_TWIGS_AND_ONE_CARD = _basic(
    LocationName.BASIC_TWO_TWIGS_AND_ONE_CARD, LocationOccupancy.UNLIMITED, {TWIG: 2}, 1
)


# ============================================================================
# Haven and journeys
# ============================================================================

# Discard any number of cards, 1 resource for every 2
HAVEN = Location(
    name=LocationName.HAVEN,
    location_type=LocationType.HAVEN,
    occupancy=LocationOccupancy.UNLIMITED,
    play_inner=play_discard_for_wild_factory(LocationName.HAVEN, None, 2),
)

JOURNEY_FIVE = _journey(LocationName.JOURNEY_FIVE, LocationOccupancy.EXCLUSIVE, 5)
JOURNEY_FOUR = _journey(LocationName.JOURNEY_FOUR, LocationOccupancy.EXCLUSIVE, 4)
JOURNEY_THREE = _journey(LocationName.JOURNEY_THREE, LocationOccupancy.EXCLUSIVE, 3)
JOURNEY_TWO = _journey(LocationName.JOURNEY_TWO, LocationOccupancy.UNLIMITED, 2)


# ============================================================================
# Forest locations
# ============================================================================

FOREST_TWO_BERRY_ONE_CARD = _forest(LocationName.FOREST_TWO_BERRY_ONE_CARD, {BERRY: 2}, 1)
FOREST_ONE_PEBBLE_THREE_CARD = _forest(LocationName.FOREST_ONE_PEBBLE_THREE_CARD, {PEBBLE: 1}, 3)
FOREST_ONE_TWIG_RESIN_BERRY = _forest(
    LocationName.FOREST_ONE_TWIG_RESIN_BERRY, {TWIG: 1, RESIN: 1, BERRY: 1}
)
FOREST_THREE_BERRY = _forest(LocationName.FOREST_THREE_BERRY, {BERRY: 3})
FOREST_TWO_RESIN_ONE_TWIG = _forest(LocationName.FOREST_TWO_RESIN_ONE_TWIG, {TWIG: 1, RESIN: 2})

FOREST_TWO_WILD = _forest(
    LocationName.FOREST_TWO_WILD,
    play_inner=play_gain_wild_factory(LocationName.FOREST_TWO_WILD, 2),
)

FOREST_TWO_CARDS_ONE_WILD = _forest(
    LocationName.FOREST_TWO_CARDS_ONE_WILD,
    num_cards=2,
    play_inner=play_gain_wild_factory(LocationName.FOREST_TWO_CARDS_ONE_WILD, 1),
)

FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD = _forest(
    LocationName.FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD,
    play_inner=play_discard_for_wild_factory(
        LocationName.FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD, 3, 1
    ),
)


def _play_discard_then_draw(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = LocationName.FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.DISCARD_CARDS, name):
        cards_to_discard = get_selected_cards(game_input, key="cards_to_discard")
        player.discard_cards_from_hand(state, cards_to_discard)
        player.draw_cards(state, 2 * len(cards_to_discard))
    elif player.cards_in_hand:
        state.pending_game_inputs.append(
            _discard_prompt(game_input, name, 0, player.num_cards_in_hand)
        )


FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD = _forest(
    LocationName.FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD,
    play_inner=_play_discard_then_draw,
)


def _play_copy_basic(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = LocationName.FOREST_COPY_BASIC_ONE_CARD
    if _is_answer(game_input, GameInputType.SELECT_LOCATION, name):
        location_name = get_selected_location(game_input)
        Location.from_name(location_name).trigger(state, GameInput.place_worker(location_name))
    else:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_LOCATION,
            prev_input_type=game_input.input_type,
            location_context=name,
            location_options=Location.by_type(LocationType.BASIC),
            must_select_one=True,
            client_options={"selected_location": None},
        ))


FOREST_COPY_BASIC_ONE_CARD = _forest(
    LocationName.FOREST_COPY_BASIC_ONE_CARD,
    num_cards=1,
    play_inner=_play_copy_basic,
)


def _play_draw_two_meadow(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    from .cards import Card, can_buy_with_wild_discount, pay_with_wild_discount, play_card_for_free

    name = LocationName.FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_CARDS, name):
        selected = get_selected_cards(game_input)
        for card_name in selected:
            state.remove_card_from_meadow(card_name)
            player.add_card_to_hand(state, card_name)
        state.replenish_meadow()
        playable = [
            c for c in dict.fromkeys(selected)
            if c in player.cards_in_hand
            and Card.from_name(c).can_play_ignoring_cost_and_source_check(
                state, GameInput.play_card(c)
            ) is None
            and can_buy_with_wild_discount(player, c, 1)
        ]
        if playable:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_PAYMENT_FOR_CARD,
                prev_input_type=game_input.input_type,
                location_context=name,
                card_options=playable,
                payment_options=PaymentOptions(),
                client_options={"card": None, "payment_options": {"resources": {}}},
            ))
    elif _is_answer(game_input, GameInputType.SELECT_PAYMENT_FOR_CARD, name):
        card_name = game_input.client_options.get("card")
        if card_name is None:
            return
        card_name = _card_from_options(game_input, card_name)
        paying_input = game_input._copy_with(card_to_buy=card_name)
        pay_with_wild_discount(state, paying_input, num_wild=1)
        player.remove_card_from_hand(card_name)
        play_card_for_free(state, card_name)
    else:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            location_context=name,
            card_options=list(state.meadow_cards),
            min_to_select=2,
            max_to_select=2,
            client_options={"selected_cards": []},
        ))


def _card_from_options(game_input: GameInput, raw: str) -> CardName:
    try:
        card_name = CardName(raw)
    except ValueError:
        raise InvalidInputError(f"Unknown card: {raw}") from None
    if card_name not in (game_input.card_options or []):
        raise InvalidInputError(f"Selected card is not a valid option: {card_name.value}")
    return card_name


FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS = _forest(
    LocationName.FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS,
    play_inner=_play_draw_two_meadow,
)


# ============================================================================
# Location Collection
# ============================================================================

BASE_GAME_LOCATIONS: list[Location] = [
    BASIC_ONE_BERRY,
    BASIC_ONE_BERRY_AND_ONE_CARD,
    BASIC_ONE_RESIN_AND_ONE_CARD,
    BASIC_ONE_STONE,
    BASIC_THREE_TWIGS,
    BASIC_TWO_CARDS_AND_ONE_VP,
    BASIC_TWO_RESIN,
    BASIC_TWO_TWIGS_AND_ONE_CARD,
    HAVEN,
    JOURNEY_FIVE,
    JOURNEY_FOUR,
    JOURNEY_THREE,
    JOURNEY_TWO,
    FOREST_TWO_BERRY_ONE_CARD,
    FOREST_TWO_WILD,
    FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD,
    FOREST_COPY_BASIC_ONE_CARD,
    FOREST_ONE_PEBBLE_THREE_CARD,
    FOREST_ONE_TWIG_RESIN_BERRY,
    FOREST_THREE_BERRY,
    FOREST_TWO_RESIN_ONE_TWIG,
    FOREST_TWO_CARDS_ONE_WILD,
    FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD,
    FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS,
]

LOCATION_REGISTRY: dict[LocationName, Location] = {
    location.name: location for location in BASE_GAME_LOCATIONS
}
