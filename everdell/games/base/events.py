"""
Base Game Events - The 4 basic events and 16 special events.

Basic events need a number of cards of one color in the city. Special
events need two named cards and may carry an effect when claimed and/or
end-game scoring. Anything an event keeps (VP, resources, cards) is stored
on the claiming player's PlayedEvent entry.
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...engine_core.errors import IllegalActionError, InvalidInputError
from ...engine_core.game_input import GameInput, PlayedCard, PlayedEvent
from ...engine_core.play_helpers import (
    CanPlayCheckFn,
    PlayFn,
    PointsFn,
    gain_wild_resources,
    get_selected_cards,
    get_selected_played_cards,
    get_selected_player_id,
    get_selected_resources,
    get_selected_worker_placement,
    play_spend_resource_to_get_vp_factory,
    select_wild_resources_input,
    store_vp_on_event,
)
from ...engine_core.resources import format_resources, sum_resources
from ...engine_core.types import (
    CardName,
    CardType,
    EventName,
    EventType,
    GameInputType,
    ResourceType,
)

if TYPE_CHECKING:
    from ...engine_core.state import GameState


@dataclass(frozen=True)
class Event:
    """An event tile."""
    name: EventName
    event_type: EventType
    base_vp: int
    required_cards: tuple[CardName, ...] = ()
    required_card_types: dict[CardType, int] = field(default_factory=dict)
    play_inner: PlayFn | None = None
    can_play_check_inner: CanPlayCheckFn | None = None
    points_inner: PointsFn | None = None

    def can_play(self, state: GameState, game_input: GameInput) -> bool:
        return self.can_play_check(state, game_input) is None

    def can_play_check(self, state: GameState, game_input: GameInput) -> str | None:
        if self.name not in state.events_map:
            return f"Event {self.name.value} is not part of the current game"
        player = state.get_active_player()
        if game_input.input_type == GameInputType.CLAIM_EVENT:
            claimed_by = state.events_map[self.name]
            if claimed_by is not None:
                return f"Event {self.name.value} is already claimed"
            if player.num_available_workers <= 0:
                return "No more workers to place"
            for card_name in self.required_cards:
                if not player.has_card_in_city(card_name):
                    return f"Need to have played {card_name.value} to claim event {self.name.value}"
            for card_type, count in self.required_card_types.items():
                num_cards = player.get_num_card_type(card_type)
                if num_cards < count:
                    return (
                        f"Need at least {count} {card_type.value} cards to claim event."
                        f" Got: {num_cards}"
                    )
        if self.can_play_check_inner:
            return self.can_play_check_inner(state, game_input)
        return None

    def play(self, state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        if game_input.input_type == GameInputType.CLAIM_EVENT:
            error = self.can_play_check(state, game_input)
            if error:
                raise IllegalActionError(error)
            state.get_active_player().place_worker_on_event(self.name)
        if self.play_inner:
            self.play_inner(state, game_input, None)

    def new_played_event(self) -> PlayedEvent:
        if self.name in CARD_STORING_EVENTS:
            return PlayedEvent(stored_cards=[])
        if self.name in RESOURCE_STORING_EVENTS:
            return PlayedEvent(stored_resources={})
        return PlayedEvent()

    def get_points(self, state: GameState, player_id: str) -> int:
        points = self.base_vp
        event_info = state.get_player(player_id).claimed_events.get(self.name)
        if event_info is not None and event_info.stored_resources:
            points += event_info.stored_resources.get(ResourceType.VP, 0)
        if self.points_inner:
            points += self.points_inner(state, player_id, None)
        return points

    @staticmethod
    def from_name(name: EventName) -> Event:
        return EVENT_REGISTRY[EventName(name)]

    @staticmethod
    def by_type(event_type: EventType) -> list[EventName]:
        return [name for name, event in EVENT_REGISTRY.items() if event.event_type == event_type]


# ============================================================================
# Shared pieces
# ============================================================================

def _is_answer(game_input: GameInput, input_type: GameInputType, event_name: EventName) -> bool:
    return game_input.input_type == input_type and game_input.event_context == event_name


def _event_info(state: GameState, player_id: str, event_name: EventName) -> PlayedEvent | None:
    return state.get_player(player_id).claimed_events.get(event_name)


def _active_event_info(state: GameState, event_name: EventName) -> PlayedEvent:
    event_info = state.get_active_player().claimed_events.get(event_name)
    if event_info is None:
        raise InvalidInputError(f"Cannot find event info for {event_name.value}")
    return event_info


def _opponent_ids(state: GameState) -> list[str]:
    active_id = state.get_active_player().player_id
    return [p.player_id for p in state.players if p.player_id != active_id]


def points_per_stored_card_factory(event_name: EventName, vp_per_card: int) -> PointsFn:
    def points(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
        event_info = _event_info(state, player_id, event_name)
        if event_info is None:
            return 0
        return vp_per_card * len(event_info.stored_cards or [])
    return points


def points_per_worker_factory(card_name: CardName) -> PointsFn:
    """3 VP per worker sitting on one of the player's own destination cards."""
    def points(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
        player = state.get_player(player_id)
        return 3 * sum(len(pc.workers or []) for pc in player.get_played_cards(card_name))
    return points


# ============================================================================
# Basic events
# ============================================================================

def _basic(name: EventName, card_type: CardType, count: int) -> Event:
    return Event(
        name=name,
        event_type=EventType.BASIC,
        base_vp=3,
        required_card_types={card_type: count},
    )


BASIC_FOUR_PRODUCTION_TAGS = _basic(EventName.BASIC_FOUR_PRODUCTION_TAGS, CardType.PRODUCTION, 4)
BASIC_THREE_DESTINATION = _basic(EventName.BASIC_THREE_DESTINATION, CardType.DESTINATION, 3)
BASIC_THREE_GOVERNANCE = _basic(EventName.BASIC_THREE_GOVERNANCE, CardType.GOVERNANCE, 3)
BASIC_THREE_TRAVELER = _basic(EventName.BASIC_THREE_TRAVELER, CardType.TRAVELER, 3)


# ============================================================================
# Special events
# ============================================================================

MARKETING_PLAN_MAX_RESOURCES = 3


def _marketing_player_prompt(state: GameState, game_input: GameInput, remaining: int) -> GameInput:
    # max_to_select carries how many resources may still be given away
    return GameInput(
        input_type=GameInputType.SELECT_PLAYER,
        prev_input_type=game_input.input_type,
        player_options=_opponent_ids(state),
        event_context=EventName.SPECIAL_A_BRILLIANT_MARKETING_PLAN,
        max_to_select=remaining,
        must_select_one=False,
        client_options={"selected_player": None},
    )


def _play_marketing_plan(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_A_BRILLIANT_MARKETING_PLAN
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        if player.get_num_resources() > 0:
            state.pending_game_inputs.append(
                _marketing_player_prompt(state, game_input, MARKETING_PLAN_MAX_RESOURCES)
            )
    elif _is_answer(game_input, GameInputType.SELECT_PLAYER, name):
        # No player selected means the donations are over
        if get_selected_player_id(game_input) is None:
            return
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_RESOURCES,
            prev_input_type=game_input.input_type,
            prev_input=game_input._copy_with(prev_input=None),
            event_context=name,
            to_spend=True,
            min_to_select=0,
            max_to_select=game_input.max_to_select,
            client_options={"resources": {}},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_RESOURCES, name):
        resources = get_selected_resources(game_input)
        target = state.get_player(game_input.prev_input.client_options["selected_player"])
        num_resources = sum_resources(resources)
        player.spend_resources(resources)
        target.gain_resources(resources)
        store_vp_on_event(state, name, 2 * num_resources)
        state.add_game_log(
            f"{player.name} gave {format_resources(resources)} to {target.name}"
            f" for {2 * num_resources} VP"
        )
        remaining = (game_input.max_to_select or 0) - num_resources
        if num_resources and remaining > 0 and player.get_num_resources() > 0:
            state.pending_game_inputs.append(_marketing_player_prompt(state, game_input, remaining))


SPECIAL_A_BRILLIANT_MARKETING_PLAN = Event(
    name=EventName.SPECIAL_A_BRILLIANT_MARKETING_PLAN,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.SHOPKEEPER, CardName.POST_OFFICE),
    play_inner=_play_marketing_plan,
)


def _play_wee_run_city(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_A_WEE_RUN_CITY
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        options = [w for w in player.get_recallable_workers() if w.event != name]
        if options:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_WORKER_PLACEMENT,
                prev_input_type=game_input.input_type,
                event_context=name,
                worker_options=deepcopy(options),
                must_select_one=False,
                client_options={"selected_option": None},
            ))
    elif _is_answer(game_input, GameInputType.SELECT_WORKER_PLACEMENT, name):
        placement = get_selected_worker_placement(game_input)
        if placement is not None:
            player.recall_worker(state, placement)
            state.add_game_log(f"{player.name} recalled a worker")


SPECIAL_A_WEE_RUN_CITY = Event(
    name=EventName.SPECIAL_A_WEE_RUN_CITY,
    event_type=EventType.SPECIAL,
    base_vp=4,
    required_cards=(CardName.CHIP_SWEEP, CardName.CLOCK_TOWER),
    play_inner=_play_wee_run_city,
)

SPECIAL_AN_EVENING_OF_FIREWORKS = Event(
    name=EventName.SPECIAL_AN_EVENING_OF_FIREWORKS,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.LOOKOUT, CardName.MINER_MOLE),
    play_inner=play_spend_resource_to_get_vp_factory(
        ResourceType.TWIG,
        max_to_spend=3,
        vp_per_resource=2,
        event_name=EventName.SPECIAL_AN_EVENING_OF_FIREWORKS,
    ),
)


def _play_ancient_scrolls(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_ANCIENT_SCROLLS_DISCOVERED
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        revealed = [state.draw_card() for _ in range(5)]
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            event_context=name,
            card_options=revealed,
            min_to_select=0,
            max_to_select=5,
            client_options={"selected_cards": []},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_CARDS, name):
        selected = get_selected_cards(game_input)
        remaining = list(game_input.card_options or [])
        for card_name in selected:
            player.add_card_to_hand(state, card_name)
            remaining.remove(card_name)
        event_info = _active_event_info(state, name)
        event_info.stored_cards = (event_info.stored_cards or []) + remaining
        state.add_game_log(
            f"{player.name} kept {len(selected)} cards and placed {len(remaining)} beneath {name.value}"
        )


SPECIAL_ANCIENT_SCROLLS_DISCOVERED = Event(
    name=EventName.SPECIAL_ANCIENT_SCROLLS_DISCOVERED,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.HISTORIAN, CardName.RUINS),
    play_inner=_play_ancient_scrolls,
    points_inner=points_per_stored_card_factory(EventName.SPECIAL_ANCIENT_SCROLLS_DISCOVERED, 1),
)


def _play_capture_acorn_thieves(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        critters = player.get_played_critters()
        if critters:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_PLAYED_CARDS,
                prev_input_type=game_input.input_type,
                event_context=name,
                played_card_options=[deepcopy(pc) for pc in critters],
                min_to_select=0,
                max_to_select=2,
                client_options={"selected_cards": []},
            ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYED_CARDS, name):
        event_info = _active_event_info(state, name)
        for selected in get_selected_played_cards(game_input):
            player.remove_card_from_city(state, selected, add_to_discard_pile=False)
            event_info.stored_cards = (event_info.stored_cards or []) + [selected.card_name]
        state.add_game_log(
            f"{player.name} placed {len(event_info.stored_cards or [])} critters beneath {name.value}"
        )


SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES = Event(
    name=EventName.SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.COURTHOUSE, CardName.RANGER),
    play_inner=_play_capture_acorn_thieves,
    points_inner=points_per_stored_card_factory(EventName.SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES, 3),
)


def _can_claim_croak_wart_cure(state: GameState, game_input: GameInput) -> str | None:
    if game_input.input_type != GameInputType.CLAIM_EVENT:
        return None
    num_berries = state.get_active_player().get_num_resources_by_type(ResourceType.BERRY)
    if num_berries < 2:
        return f"Need to have at least 2 BERRY to claim event. Got: {num_berries}"
    return None


def _play_croak_wart_cure(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_CROAK_WART_CURE
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        player.spend_resources({ResourceType.BERRY: 2})
        city = list(player.iter_played_cards())
        num_to_discard = min(2, len(city))
        if num_to_discard:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_PLAYED_CARDS,
                prev_input_type=game_input.input_type,
                event_context=name,
                played_card_options=[deepcopy(pc) for pc in city],
                min_to_select=num_to_discard,
                max_to_select=num_to_discard,
                client_options={"selected_cards": []},
            ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYED_CARDS, name):
        for selected in get_selected_played_cards(game_input):
            player.remove_card_from_city(state, selected)
            state.add_game_log(f"{player.name} discarded {selected.card_name.value} from their city")


SPECIAL_CROAK_WART_CURE = Event(
    name=EventName.SPECIAL_CROAK_WART_CURE,
    event_type=EventType.SPECIAL,
    base_vp=6,
    required_cards=(CardName.UNDERTAKER, CardName.BARGE_TOAD),
    play_inner=_play_croak_wart_cure,
    can_play_check_inner=_can_claim_croak_wart_cure,
)


def _points_flying_doctor(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    return 3 * sum(p.get_num_husband_wife_pairs() for p in state.players)


SPECIAL_FLYING_DOCTOR_SERVICE = Event(
    name=EventName.SPECIAL_FLYING_DOCTOR_SERVICE,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.DOCTOR, CardName.POSTAL_PIGEON),
    points_inner=_points_flying_doctor,
)


def _play_graduation(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    from .cards import Card

    name = EventName.SPECIAL_GRADUATION_OF_SCHOLARS
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        critters = [c for c in player.cards_in_hand if Card.from_name(c).is_critter]
        if critters:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_CARDS,
                prev_input_type=game_input.input_type,
                event_context=name,
                card_options=critters,
                min_to_select=0,
                max_to_select=3,
                client_options={"selected_cards": []},
            ))
    elif _is_answer(game_input, GameInputType.SELECT_CARDS, name):
        selected = get_selected_cards(game_input)
        event_info = _active_event_info(state, name)
        for card_name in selected:
            player.remove_card_from_hand(card_name)
        event_info.stored_cards = (event_info.stored_cards or []) + selected
        state.add_game_log(f"{player.name} placed {len(selected)} critters beneath {name.value}")


SPECIAL_GRADUATION_OF_SCHOLARS = Event(
    name=EventName.SPECIAL_GRADUATION_OF_SCHOLARS,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.TEACHER, CardName.UNIVERSITY),
    play_inner=_play_graduation,
    points_inner=points_per_stored_card_factory(EventName.SPECIAL_GRADUATION_OF_SCHOLARS, 2),
)


def _points_ministering(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    player = state.get_player(player_id)
    return 3 * sum(len(pc.paired_cards or []) for pc in player.get_played_cards(CardName.DUNGEON))


SPECIAL_MINISTERING_TO_MISCREANTS = Event(
    name=EventName.SPECIAL_MINISTERING_TO_MISCREANTS,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.MONK, CardName.DUNGEON),
    points_inner=_points_ministering,
)

SPECIAL_PATH_OF_THE_PILGRIMS = Event(
    name=EventName.SPECIAL_PATH_OF_THE_PILGRIMS,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.MONASTERY, CardName.WANDERER),
    points_inner=points_per_worker_factory(CardName.MONASTERY),
)

SPECIAL_PERFORMER_IN_RESIDENCE = Event(
    name=EventName.SPECIAL_PERFORMER_IN_RESIDENCE,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.INN, CardName.BARD),
    play_inner=play_spend_resource_to_get_vp_factory(
        ResourceType.BERRY,
        max_to_spend=3,
        vp_per_resource=2,
        event_name=EventName.SPECIAL_PERFORMER_IN_RESIDENCE,
    ),
)


def _vp_on_chapel(state: GameState, player_id: str) -> int:
    player = state.get_player(player_id)
    return sum(
        (pc.resources or {}).get(ResourceType.VP, 0) for pc in player.get_played_cards(CardName.CHAPEL)
    )


def _play_pristine_chapel(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_PRISTINE_CHAPEL_CEILING
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        num_vp = _vp_on_chapel(state, player.player_id)
        player.draw_cards(state, num_vp)
        if num_vp:
            state.pending_game_inputs.append(
                select_wild_resources_input(game_input, num_vp, event_context=name)
            )
    elif _is_answer(game_input, GameInputType.SELECT_RESOURCES, name):
        gain_wild_resources(state, game_input)


def _points_pristine_chapel(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    return 2 * _vp_on_chapel(state, player_id)


SPECIAL_PRISTINE_CHAPEL_CEILING = Event(
    name=EventName.SPECIAL_PRISTINE_CHAPEL_CEILING,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.WOODCARVER, CardName.CHAPEL),
    play_inner=_play_pristine_chapel,
    points_inner=_points_pristine_chapel,
)

SPECIAL_REMEMBERING_THE_FALLEN = Event(
    name=EventName.SPECIAL_REMEMBERING_THE_FALLEN,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.CEMETARY, CardName.SHEPHERD),
    points_inner=points_per_worker_factory(CardName.CEMETARY),
)


def _play_tax_relief(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    from .cards import activate_production

    if game_input.input_type == GameInputType.CLAIM_EVENT:
        activate_production(state, game_input)


SPECIAL_TAX_RELIEF = Event(
    name=EventName.SPECIAL_TAX_RELIEF,
    event_type=EventType.SPECIAL,
    base_vp=3,
    required_cards=(CardName.JUDGE, CardName.QUEEN),
    play_inner=_play_tax_relief,
)

SPECIAL_THE_EVERDELL_GAMES = Event(
    name=EventName.SPECIAL_THE_EVERDELL_GAMES,
    event_type=EventType.SPECIAL,
    base_vp=9,
    required_card_types={card_type: 2 for card_type in CardType},
)

# Stored goods are worth their VP value at the end of the game
UNDER_NEW_MANAGEMENT_VALUES = {
    ResourceType.TWIG: 1,
    ResourceType.BERRY: 1,
    ResourceType.RESIN: 2,
    ResourceType.PEBBLE: 2,
}


def _play_under_new_management(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    name = EventName.SPECIAL_UNDER_NEW_MANAGEMENT
    player = state.get_active_player()
    if game_input.input_type == GameInputType.CLAIM_EVENT:
        if player.get_num_resources() > 0:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_RESOURCES,
                prev_input_type=game_input.input_type,
                event_context=name,
                to_spend=True,
                min_to_select=0,
                max_to_select=3,
                client_options={"resources": {}},
            ))
    elif _is_answer(game_input, GameInputType.SELECT_RESOURCES, name):
        resources = get_selected_resources(game_input)
        player.spend_resources(resources)
        event_info = _active_event_info(state, name)
        stored = dict(event_info.stored_resources or {})
        for resource_type, count in resources.items():
            stored[resource_type] = stored.get(resource_type, 0) + count
        event_info.stored_resources = stored
        state.add_game_log(f"{player.name} placed {format_resources(resources)} on {name.value}")


def _points_under_new_management(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    event_info = _event_info(state, player_id, EventName.SPECIAL_UNDER_NEW_MANAGEMENT)
    if event_info is None or not event_info.stored_resources:
        return 0
    return sum(
        UNDER_NEW_MANAGEMENT_VALUES.get(resource_type, 0) * count
        for resource_type, count in event_info.stored_resources.items()
    )


SPECIAL_UNDER_NEW_MANAGEMENT = Event(
    name=EventName.SPECIAL_UNDER_NEW_MANAGEMENT,
    event_type=EventType.SPECIAL,
    base_vp=0,
    required_cards=(CardName.PEDDLER, CardName.GENERAL_STORE),
    play_inner=_play_under_new_management,
    points_inner=_points_under_new_management,
)


# ============================================================================
# Event Collection
# ============================================================================

CARD_STORING_EVENTS = (
    EventName.SPECIAL_ANCIENT_SCROLLS_DISCOVERED,
    EventName.SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES,
    EventName.SPECIAL_GRADUATION_OF_SCHOLARS,
)

RESOURCE_STORING_EVENTS = (
    EventName.SPECIAL_A_BRILLIANT_MARKETING_PLAN,
    EventName.SPECIAL_AN_EVENING_OF_FIREWORKS,
    EventName.SPECIAL_PERFORMER_IN_RESIDENCE,
    EventName.SPECIAL_UNDER_NEW_MANAGEMENT,
)

BASE_GAME_EVENTS: list[Event] = [
    BASIC_FOUR_PRODUCTION_TAGS,
    BASIC_THREE_DESTINATION,
    BASIC_THREE_GOVERNANCE,
    BASIC_THREE_TRAVELER,
    SPECIAL_GRADUATION_OF_SCHOLARS,
    SPECIAL_A_BRILLIANT_MARKETING_PLAN,
    SPECIAL_PERFORMER_IN_RESIDENCE,
    SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES,
    SPECIAL_MINISTERING_TO_MISCREANTS,
    SPECIAL_CROAK_WART_CURE,
    SPECIAL_AN_EVENING_OF_FIREWORKS,
    SPECIAL_A_WEE_RUN_CITY,
    SPECIAL_TAX_RELIEF,
    SPECIAL_UNDER_NEW_MANAGEMENT,
    SPECIAL_ANCIENT_SCROLLS_DISCOVERED,
    SPECIAL_FLYING_DOCTOR_SERVICE,
    SPECIAL_PATH_OF_THE_PILGRIMS,
    SPECIAL_REMEMBERING_THE_FALLEN,
    SPECIAL_PRISTINE_CHAPEL_CEILING,
    SPECIAL_THE_EVERDELL_GAMES,
]

EVENT_REGISTRY: dict[EventName, Event] = {event.name: event for event in BASE_GAME_EVENTS}
