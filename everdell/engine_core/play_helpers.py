"""
Play helpers - Effect factories and answer parsing shared by the catalogs.

Every effect hook has the signature

    hook(state, game_input, played_card) -> None

where played_card is the city copy the effect belongs to (None for
locations, events and cards outside a city). Multi-step effects read the
player's answer from game_input.client_options through the parsers below,
which raise InvalidInputError on anything outside the offered options.
"""

from __future__ import annotations
from collections import Counter
from typing import TYPE_CHECKING, Any, Callable, Optional

from .errors import InvalidInputError
from .game_input import GameInput, PlayedCard, WorkerPlacement
from .resources import GOODS, ResourceMap, format_resources, parse_resources, sum_resources
from .types import CardName, EventName, GameInputType, LocationName, ResourceType

if TYPE_CHECKING:
    from .state import GameState


PlayFn = Callable[["GameState", GameInput, Optional[PlayedCard]], None]
CanPlayCheckFn = Callable[["GameState", GameInput], Optional[str]]
PointsFn = Callable[["GameState", str, Optional[PlayedCard]], int]


# ============================================================================
# Effect factories
# ============================================================================

def play_gain_resource_factory(
    resources: ResourceMap | None = None,
    num_cards_to_draw: int = 0,
) -> PlayFn:
    """Effect that hands the active player fixed resources and cards."""
    def play(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        player = state.get_active_player()
        if resources:
            player.gain_resources(resources)
        if num_cards_to_draw:
            player.draw_cards(state, num_cards_to_draw)
    return play


def play_spend_resource_to_get_vp_factory(
    resource_type: ResourceType,
    max_to_spend: int,
    vp_per_resource: int = 1,
    card_name: CardName | None = None,
    event_name: EventName | None = None,
) -> PlayFn:
    """
    Two-stage effect: offer SELECT_RESOURCES of one type, then convert.

    Cards turn the spent resources into VP tokens. Events store the VP on
    themselves so it shows up with the event.
    """
    def is_answer(game_input: GameInput) -> bool:
        if game_input.input_type != GameInputType.SELECT_RESOURCES:
            return False
        if card_name is not None:
            return game_input.card_context == card_name
        return game_input.event_context == event_name

    def play(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        player = state.get_active_player()
        if not is_answer(game_input):
            if player.get_num_resources_by_type(resource_type) == 0:
                return
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_RESOURCES,
                prev_input_type=game_input.input_type,
                card_context=card_name,
                event_context=event_name,
                to_spend=True,
                specific_resource=resource_type,
                min_to_select=0,
                max_to_select=max_to_spend,
                client_options={"resources": {}},
            ))
            return

        selected = get_selected_resources(game_input)
        extra = {rt for rt, count in selected.items() if count and rt != resource_type}
        if extra:
            raise InvalidInputError(f"Can only spend {resource_type.value}")
        num_to_spend = selected.get(resource_type, 0)
        if num_to_spend > max_to_spend:
            raise InvalidInputError(f"Too many resources, max: {max_to_spend}, got: {num_to_spend}")
        if num_to_spend == 0:
            return
        player.spend_resources({resource_type: num_to_spend})
        vp = num_to_spend * vp_per_resource
        if event_name is not None:
            store_vp_on_event(state, event_name, vp)
        else:
            player.gain_resources({ResourceType.VP: vp})
        state.add_game_log(
            f"{player.name} spent {num_to_spend} {resource_type.value} for {vp} VP"
        )
    return play


def points_per_rarity_factory(is_critter: bool, is_unique: bool) -> PointsFn:
    """Scoring that counts city cards of one kind (common/unique critters/constructions)."""
    def points(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
        from ..games.base.cards import Card

        player = state.get_player(player_id)
        total = 0
        for pc in player.iter_played_cards():
            card = Card.from_name(pc.card_name)
            if card.is_critter == is_critter and card.is_unique == is_unique:
                total += 1
        return total
    return points


def store_vp_on_event(state: GameState, event_name: EventName, vp: int) -> None:
    player = state.get_active_player()
    event_info = player.claimed_events.get(event_name)
    if event_info is None:
        raise InvalidInputError(f"Cannot find event info for {event_name.value}")
    stored = dict(event_info.stored_resources or {})
    stored[ResourceType.VP] = stored.get(ResourceType.VP, 0) + vp
    event_info.stored_resources = stored


# ============================================================================
# Answer parsing
# ============================================================================

def validate_selection_count(
    num_selected: int,
    min_to_select: int | None,
    max_to_select: int | None,
    label: str = "cards",
) -> None:
    if max_to_select is not None and num_selected > max_to_select:
        raise InvalidInputError(f"Selected too many {label}")
    if min_to_select is not None and num_selected < min_to_select:
        raise InvalidInputError(f"Selected too few {label}")


def _check_subset(selected: list[Any], options: list[Any], label: str) -> None:
    available = Counter(options)
    for item, count in Counter(selected).items():
        if available[item] < count:
            raise InvalidInputError(f"Selected {label} is not a valid option: {item}")


def get_selected_cards(game_input: GameInput, key: str = "selected_cards") -> list[CardName]:
    """
    Cards chosen from game_input.card_options.

    Respects min_to_select / max_to_select and treats the options as a
    multiset, so two copies can only be chosen when two are offered.
    """
    raw = game_input.client_options.get(key)
    if raw is None:
        raw = []
    if not isinstance(raw, list):
        raise InvalidInputError(f"Invalid input: {key} must be a list")
    try:
        selected = [CardName(c) for c in raw]
    except ValueError:
        raise InvalidInputError(f"Invalid card in {key}") from None
    validate_selection_count(len(selected), game_input.min_to_select, game_input.max_to_select)
    if game_input.card_options is not None:
        _check_subset(selected, game_input.card_options, "card")
    return selected


def get_selected_played_cards(game_input: GameInput) -> list[PlayedCard]:
    raw = game_input.client_options.get("selected_cards") or []
    selected = [PlayedCard.coerce(pc) for pc in raw]
    validate_selection_count(len(selected), game_input.min_to_select, game_input.max_to_select)
    options = game_input.played_card_options or []
    remaining = list(options)
    for played_card in selected:
        if played_card not in remaining:
            raise InvalidInputError(
                f"Selected card is not a valid option: {played_card.card_name.value}"
            )
        remaining.remove(played_card)
    return selected


def get_selected_player_id(game_input: GameInput) -> str | None:
    selected = game_input.client_options.get("selected_player")
    if selected is None:
        if game_input.must_select_one:
            raise InvalidInputError("Must select a player")
        return None
    if game_input.player_options is not None and selected not in game_input.player_options:
        raise InvalidInputError("Selected player is invalid")
    return selected


def get_selected_resources(game_input: GameInput) -> ResourceMap:
    """Resources chosen in a SELECT_RESOURCES answer, checked against its limits."""
    resources = parse_resources(game_input.client_options.get("resources"), allow_vp=False)
    if game_input.specific_resource is not None:
        for resource_type, count in resources.items():
            if count and resource_type != game_input.specific_resource:
                raise InvalidInputError(f"Can only select {game_input.specific_resource.value}")
    if game_input.exclude_resource is not None and resources.get(game_input.exclude_resource):
        raise InvalidInputError(f"Cannot select {game_input.exclude_resource.value}")
    validate_selection_count(
        sum_resources(resources),
        game_input.min_to_select,
        game_input.max_to_select,
        "resources",
    )
    return resources


def get_selected_location(game_input: GameInput) -> LocationName | None:
    selected = game_input.client_options.get("selected_location")
    if selected is None:
        if game_input.must_select_one:
            raise InvalidInputError("Must select a location")
        return None
    try:
        location = LocationName(selected)
    except ValueError:
        raise InvalidInputError(f"Unknown location: {selected}") from None
    if game_input.location_options is not None and location not in game_input.location_options:
        raise InvalidInputError(f"Selected location is not a valid option: {location.value}")
    return location


def get_selected_worker_placement(game_input: GameInput) -> WorkerPlacement | None:
    selected = game_input.client_options.get("selected_option")
    if selected is None:
        if game_input.must_select_one:
            raise InvalidInputError("Must select a worker")
        return None
    placement = WorkerPlacement.coerce(selected)
    if game_input.worker_options is not None and placement not in game_input.worker_options:
        raise InvalidInputError("Selected worker is not a valid option")
    return placement


def get_selected_option(game_input: GameInput) -> str:
    selected = game_input.client_options.get("selected_option")
    if selected is None or (game_input.options is not None and selected not in game_input.options):
        raise InvalidInputError(f"Invalid option: {selected}")
    return selected


def gain_wild_resources(state: GameState, game_input: GameInput) -> ResourceMap:
    """Answer to a 'gain any N resources' prompt: no VP, exact amount."""
    resources = get_selected_resources(game_input)
    for resource_type in resources:
        if resource_type not in GOODS:
            raise InvalidInputError(f"Cannot gain {resource_type.value}")
    player = state.get_active_player()
    player.gain_resources(resources)
    state.add_game_log(f"{player.name} gained {format_resources(resources)}")
    return resources


def select_wild_resources_input(
    game_input: GameInput,
    num_resources: int,
    **context: Any,
) -> GameInput:
    """Build the SELECT_RESOURCES prompt for gaining num_resources of any good."""
    return GameInput(
        input_type=GameInputType.SELECT_RESOURCES,
        prev_input_type=game_input.input_type,
        min_to_select=num_resources,
        max_to_select=num_resources,
        client_options={"resources": {}},
        **context,
    )
