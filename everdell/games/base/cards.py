"""
Base Game Cards - The 48 cards of the base game.

Card structure:
- Static rules data (cost, base VP, color, unique/common, critter/construction)
- The associated card (a critter lives in its construction for free)
- Up to three hooks:
    play_inner   fires when the card enters a city, on every production
                 activation (PRODUCTION cards), when a worker visits it
                 (destinations) and for every continuation it pushed
    can_play_check_inner / can_visit_check_inner
                 extra requirements, returning an error message or None
    points_inner end-game points on top of base VP

Hooks are module-level functions defined just above the card they belong
to. Multi-step effects push one GameInput per stage and recognise their own
answers by input_type plus card_context.
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...engine_core.errors import IllegalActionError, InvalidInputError
from ...engine_core.game_input import GameInput, PaymentOptions, PlayedCard
from ...engine_core.play_helpers import (
    CanPlayCheckFn,
    PlayFn,
    PointsFn,
    gain_wild_resources,
    get_selected_cards,
    get_selected_location,
    get_selected_option,
    get_selected_played_cards,
    get_selected_player_id,
    get_selected_resources,
    get_selected_worker_placement,
    play_gain_resource_factory,
    play_spend_resource_to_get_vp_factory,
    points_per_rarity_factory,
    select_wild_resources_input,
)
from ...engine_core.resources import (
    ResourceMap,
    format_resources,
    parse_resources,
    sum_resources,
)
from ...engine_core.types import (
    CardName,
    CardType,
    EventType,
    GameInputType,
    LocationType,
    ResourceType,
)

if TYPE_CHECKING:
    from ...engine_core.player import Player
    from ...engine_core.state import GameState


TWIG = ResourceType.TWIG
RESIN = ResourceType.RESIN
PEBBLE = ResourceType.PEBBLE
BERRY = ResourceType.BERRY
VP = ResourceType.VP


@dataclass(frozen=True)
class Card:
    """
    Static definition of a card plus its effect hooks.

    Holds no per-game state: everything that changes lives on the
    PlayedCard entries in a player's city.
    """
    name: CardName
    card_type: CardType
    base_cost: ResourceMap
    base_vp: int
    is_unique: bool
    is_construction: bool
    associated_card: CardName | None

    is_open_destination: bool = False
    max_workers: int = 1
    stored_resources: ResourceMap | None = None  # initial resources kept on the card
    holds_cards: bool = False

    play_inner: PlayFn | None = None
    can_play_check_inner: CanPlayCheckFn | None = None
    can_visit_check_inner: CanPlayCheckFn | None = None
    points_inner: PointsFn | None = None

    @property
    def is_critter(self) -> bool:
        return not self.is_construction

    @property
    def can_take_worker(self) -> bool:
        return self.card_type == CardType.DESTINATION or self.name == CardName.STOREHOUSE

    def new_played_card(self, card_owner_id: str) -> PlayedCard:
        """Fresh city entry for this card."""
        played_card = PlayedCard(card_name=self.name, card_owner_id=card_owner_id)
        if self.is_construction:
            played_card.used_for_critter = False
        if self.can_take_worker:
            played_card.workers = []
            played_card.max_workers = self.max_workers
        if self.stored_resources is not None:
            played_card.resources = dict(self.stored_resources)
        if self.holds_cards:
            played_card.paired_cards = []
        return played_card

    # ------------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------------

    def can_play(self, state: GameState, game_input: GameInput) -> bool:
        return self.can_play_check(state, game_input) is None

    def can_play_check(self, state: GameState, game_input: GameInput) -> str | None:
        """Why this card can't be played / visited right now, or None."""
        if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
            return self.can_visit_check(state, game_input)
        if game_input.input_type != GameInputType.PLAY_CARD:
            return f"Unexpected input type: {game_input.input_type.value}"

        player = state.get_active_player()
        if game_input.from_meadow:
            if self.name not in state.meadow_cards:
                return f"{self.name.value} is not in the meadow"
        elif self.name not in player.cards_in_hand:
            return f"{self.name.value} is not in your hand"

        error = self.can_play_ignoring_cost_and_source_check(state, game_input)
        if error:
            return error
        if not player.can_afford_card(self.name, bool(game_input.from_meadow)):
            return f"Unable to afford {self.name.value}"
        return None

    def can_play_ignoring_cost_and_source_check(
        self, state: GameState, game_input: GameInput
    ) -> str | None:
        player = state.get_active_player()
        # Space is checked before payment, so a card given up as payment never frees it
        # The fool moves into someone else's city
        if self.name != CardName.FOOL and not player.can_add_to_city(self.name):
            if self.is_unique and player.has_card_in_city(self.name):
                return f"Cannot add more than one {self.name.value} to your city"
            return "Not enough space in city"
        if self.can_play_check_inner:
            return self.can_play_check_inner(state, game_input)
        return None

    def can_visit_check(self, state: GameState, game_input: GameInput) -> str | None:
        if not self.can_take_worker:
            return f"{self.name.value} is not a destination"
        player = state.get_active_player()
        owner = state.get_player(game_input.card_owner_id or player.player_id)
        if not player.can_place_worker_on_card(self.name, owner):
            return f"Cannot place worker on {self.name.value}"
        if self.can_visit_check_inner:
            return self.can_visit_check_inner(state, game_input)
        return None

    # ------------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------------

    def play(self, state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
        """Entry point used by GameState for inputs that concern this card."""
        if game_input.input_type == GameInputType.PLAY_CARD:
            error = self.can_play_ignoring_cost_and_source_check(state, game_input)
            if error:
                raise IllegalActionError(error)
            self.enter_city(state, game_input)
        elif self.play_inner:
            self.play_inner(state, game_input, played_card)

    def enter_city(self, state: GameState, game_input: GameInput) -> PlayedCard | None:
        """Put the card into the active player's city and fire its effects."""
        player = state.get_active_player()
        played_card = None
        if self.name != CardName.FOOL:
            played_card = player.add_to_city(self.name)
        state.add_game_log(f"{player.name} played {self.name.value}")
        if self.play_inner and self.card_type != CardType.DESTINATION:
            self.play_inner(state, game_input, played_card)
        if played_card is not None:
            activate_city_triggers(state, self)
        return played_card

    def activate(self, state: GameState, game_input: GameInput, played_card: PlayedCard) -> None:
        """Production activation (season change, TAX_RELIEF, copies)."""
        if self.card_type == CardType.PRODUCTION and self.play_inner:
            self.play_inner(state, game_input, played_card)

    def get_points(self, state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
        points = self.base_vp
        if self.points_inner:
            points += self.points_inner(state, player_id, played_card)
        return points

    # ------------------------------------------------------------------------
    # Registry access
    # ------------------------------------------------------------------------

    @staticmethod
    def from_name(name: CardName) -> Card:
        return CARD_REGISTRY[CardName(name)]

    @staticmethod
    def all_names() -> list[CardName]:
        return list(CARD_REGISTRY)

    @staticmethod
    def by_type(card_type: CardType) -> list[CardName]:
        return [name for name, card in CARD_REGISTRY.items() if card.card_type == card_type]


# ============================================================================
# Shared effect plumbing
# ============================================================================

def _is_answer(game_input: GameInput, input_type: GameInputType, card_name: CardName) -> bool:
    return game_input.input_type == input_type and game_input.card_context == card_name


def _opponent_ids(state: GameState) -> list[str]:
    active_id = state.get_active_player().player_id
    return [p.player_id for p in state.players if p.player_id != active_id]


def _snapshot(played_cards: list[PlayedCard]) -> list[PlayedCard]:
    return [deepcopy(pc) for pc in played_cards]


def _unique(card_names: list[CardName]) -> list[CardName]:
    seen: list[CardName] = []
    for card_name in card_names:
        if card_name not in seen:
            seen.append(card_name)
    return seen


def _find_live_played_card(state: GameState, played_card: PlayedCard) -> PlayedCard:
    return state.get_player(played_card.card_owner_id).find_played_card(played_card)


def _can_play_for_free(state: GameState, card_name: CardName) -> bool:
    card = Card.from_name(card_name)
    return card.can_play_ignoring_cost_and_source_check(state, GameInput.play_card(card_name)) is None


def play_card_for_free(state: GameState, card_name: CardName) -> None:
    """
    Play a card without paying for it.

    The caller has already taken the card out of wherever it was (hand,
    meadow, deck, discard pile).
    """
    card = Card.from_name(card_name)
    free_input = GameInput.play_card(card_name)
    error = card.can_play_ignoring_cost_and_source_check(state, free_input)
    if error:
        raise IllegalActionError(error)
    card.enter_city(state, free_input)


def pay_with_wild_discount(state: GameState, game_input: GameInput, num_wild: int) -> ResourceMap:
    """Charge a SELECT_PAYMENT_FOR_CARD answer where num_wild resources are waived."""
    if game_input.card_to_buy is None:
        raise InvalidInputError("Invalid input: no card to buy")
    payment = game_input.client_options.get("payment_options") or {}
    resources = parse_resources(payment.get("resources"), allow_vp=False)
    player = state.get_active_player()
    for resource_type, count in resources.items():
        if player.get_num_resources_by_type(resource_type) < count:
            raise InvalidInputError(f"Can't spend {count} {resource_type.value}")
    card = Card.from_name(game_input.card_to_buy)
    if not player.is_paid_resources_valid(resources, card.base_cost, "ANY", num_wild=num_wild):
        raise InvalidInputError("Insufficient resources")
    player.spend_resources(resources)
    return resources


def can_buy_with_wild_discount(player: Player, card_name: CardName, num_wild: int) -> bool:
    card = Card.from_name(card_name)
    return player.is_paid_resources_valid(
        player.resources, card.base_cost, "ANY", error_if_overpay=False, num_wild=num_wild
    )


def activate_city_triggers(state: GameState, card: Card) -> None:
    """Governance cards that react to another card joining the city."""
    player = state.get_active_player()
    if player.has_card_in_city(CardName.HISTORIAN) and card.name != CardName.HISTORIAN:
        player.draw_cards(state, 1)
    if (
        player.has_card_in_city(CardName.SHOPKEEPER)
        and card.is_critter
        and card.name != CardName.SHOPKEEPER
    ):
        player.gain_resources({BERRY: 1})
    if (
        player.has_card_in_city(CardName.COURTHOUSE)
        and card.is_construction
        and card.name != CardName.COURTHOUSE
    ):
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_RESOURCES,
            prev_input_type=GameInputType.PLAY_CARD,
            card_context=CardName.COURTHOUSE,
            exclude_resource=BERRY,
            min_to_select=1,
            max_to_select=1,
            client_options={"resources": {}},
        ))


def activate_production(state: GameState, game_input: GameInput) -> None:
    """Fire every production card in the active player's city."""
    player = state.get_active_player()
    for played_card in list(player.get_played_cards_by_type(CardType.PRODUCTION)):
        Card.from_name(played_card.card_name).activate(state, game_input, played_card)


def push_clock_tower_prompt(state: GameState, game_input: GameInput) -> None:
    """Offer the clock tower's location activation while preparing for a season."""
    from .locations import Location

    player = state.get_active_player()
    if not player.has_card_in_city(CardName.CLOCK_TOWER):
        return
    clock_tower = player.get_first_played_card(CardName.CLOCK_TOWER)
    if not (clock_tower.resources or {}).get(VP):
        return
    location_options = []
    for placement in player.placed_workers:
        if placement.location is None or placement.location in location_options:
            continue
        if Location.from_name(placement.location).location_type in (LocationType.BASIC, LocationType.FOREST):
            location_options.append(placement.location)
    if not location_options:
        return
    state.pending_game_inputs.append(GameInput(
        input_type=GameInputType.SELECT_LOCATION,
        prev_input_type=game_input.input_type,
        card_context=CardName.CLOCK_TOWER,
        played_card_context=deepcopy(clock_tower),
        location_options=location_options,
        must_select_one=False,
        client_options={"selected_location": None},
    ))


def _offer_revealed_cards(
    state: GameState,
    game_input: GameInput,
    revealed: list[CardName],
    card_name: CardName,
    max_vp: int | None,
    must_select_one: bool,
) -> None:
    playable = [
        c for c in revealed
        if (max_vp is None or Card.from_name(c).base_vp <= max_vp) and _can_play_for_free(state, c)
    ]
    if not playable:
        for revealed_card in revealed:
            state.discard_pile.add_to_stack(revealed_card)
        state.add_game_log(f"None of the revealed cards could be played with {card_name.value}")
        return
    state.pending_game_inputs.append(GameInput(
        input_type=GameInputType.SELECT_CARDS,
        prev_input_type=game_input.input_type,
        card_context=card_name,
        card_options=playable,
        card_options_unfiltered=list(revealed),
        min_to_select=1 if must_select_one else 0,
        max_to_select=1,
        client_options={"selected_cards": []},
    ))


def _resolve_revealed_cards(state: GameState, game_input: GameInput) -> None:
    selected = get_selected_cards(game_input)
    remaining = list(game_input.card_options_unfiltered or [])
    for card_name in selected:
        remaining.remove(card_name)
    for card_name in remaining:
        state.discard_pile.add_to_stack(card_name)
    for card_name in selected:
        play_card_for_free(state, card_name)


# ============================================================================
# Cards
# ============================================================================

def _points_architect(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    player = state.get_player(player_id)
    return min(
        player.get_num_resources_by_type(RESIN) + player.get_num_resources_by_type(PEBBLE),
        6,
    )


ARCHITECT = Card(
    name=CardName.ARCHITECT,
    card_type=CardType.PROSPERITY,
    base_cost={BERRY: 4},
    base_vp=2,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.CRANE,
    points_inner=_points_architect,
)


def _play_bard(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.DISCARD_CARDS, CardName.BARD):
        cards_to_discard = get_selected_cards(game_input, key="cards_to_discard")
        player.discard_cards_from_hand(state, cards_to_discard)
        player.gain_resources({VP: len(cards_to_discard)})
        state.add_game_log(f"{player.name} discarded {len(cards_to_discard)} cards to gain VP")
    elif game_input.input_type == GameInputType.PLAY_CARD and player.cards_in_hand:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.DISCARD_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.BARD,
            min_to_select=0,
            max_to_select=5,
            client_options={"cards_to_discard": []},
        ))


BARD = Card(
    name=CardName.BARD,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 3},
    base_vp=0,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.THEATRE,
    play_inner=_play_bard,
)


def _play_barge_toad(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    num_farms = len(player.get_played_cards(CardName.FARM))
    if num_farms:
        player.gain_resources({TWIG: 2 * num_farms})


BARGE_TOAD = Card(
    name=CardName.BARGE_TOAD,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.TWIG_BARGE,
    play_inner=_play_barge_toad,
)

# 1 point per common construction
CASTLE = Card(
    name=CardName.CASTLE,
    card_type=CardType.PROSPERITY,
    base_cost={TWIG: 2, RESIN: 3, PEBBLE: 3},
    base_vp=4,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.KING,
    points_inner=points_per_rarity_factory(is_critter=False, is_unique=False),
)

CEMETARY_DECK = "Deck"
CEMETARY_DISCARD_PILE = "Discard Pile"


def _play_cemetary(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        options = [CEMETARY_DECK]
        if not state.discard_pile.is_empty:
            options.append(CEMETARY_DISCARD_PILE)
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_OPTION_GENERIC,
            prev_input_type=game_input.input_type,
            card_context=CardName.CEMETARY,
            options=options,
            client_options={"selected_option": None},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_OPTION_GENERIC, CardName.CEMETARY):
        source = get_selected_option(game_input)
        revealed = []
        for _ in range(4):
            if source == CEMETARY_DECK:
                revealed.append(state.draw_card())
            elif not state.discard_pile.is_empty:
                revealed.append(state.discard_pile.draw())
        _offer_revealed_cards(state, game_input, revealed, CardName.CEMETARY, None, must_select_one=True)
    elif _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.CEMETARY):
        _resolve_revealed_cards(state, game_input)


CEMETARY = Card(
    name=CardName.CEMETARY,
    card_type=CardType.DESTINATION,
    base_cost={PEBBLE: 2},
    base_vp=0,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.UNDERTAKER,
    play_inner=_play_cemetary,
)


def _play_chapel(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if game_input.input_type != GameInputType.VISIT_DESTINATION_CARD or played_card is None:
        return
    player = state.get_active_player()
    resources = dict(played_card.resources or {})
    resources[VP] = resources.get(VP, 0) + 1
    played_card.resources = resources
    player.draw_cards(state, 2 * resources[VP])


CHAPEL = Card(
    name=CardName.CHAPEL,
    card_type=CardType.DESTINATION,
    base_cost={TWIG: 2, RESIN: 1, PEBBLE: 1},
    base_vp=2,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.SHEPHERD,
    stored_resources={VP: 0},
    play_inner=_play_chapel,
)


def _play_chip_sweep(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_PLAYED_CARDS, CardName.CHIP_SWEEP):
        for selected in get_selected_played_cards(game_input):
            target = _find_live_played_card(state, selected)
            Card.from_name(target.card_name).activate(state, game_input, target)
        return
    options = [
        pc for pc in player.get_played_cards_by_type(CardType.PRODUCTION)
        if pc.card_name != CardName.CHIP_SWEEP
    ]
    if options:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYED_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.CHIP_SWEEP,
            played_card_options=_snapshot(options),
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))


CHIP_SWEEP = Card(
    name=CardName.CHIP_SWEEP,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 3},
    base_vp=2,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.RESIN_REFINERY,
    play_inner=_play_chip_sweep,
)


def _play_clock_tower(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    from .locations import Location

    if not _is_answer(game_input, GameInputType.SELECT_LOCATION, CardName.CLOCK_TOWER):
        return
    location_name = get_selected_location(game_input)
    if location_name is None or played_card is None:
        return
    stored_vp = (played_card.resources or {}).get(VP, 0)
    if stored_vp < 1:
        raise IllegalActionError("No VP left on CLOCK_TOWER")
    played_card.resources = {**(played_card.resources or {}), VP: stored_vp - 1}
    player = state.get_active_player()
    state.add_game_log(f"{player.name} used CLOCK_TOWER to activate {location_name.value}")
    Location.from_name(location_name).trigger(state, GameInput.place_worker(location_name))


CLOCK_TOWER = Card(
    name=CardName.CLOCK_TOWER,
    card_type=CardType.GOVERNANCE,
    base_cost={TWIG: 3, PEBBLE: 1},
    base_vp=0,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.HISTORIAN,
    stored_resources={VP: 3},
    play_inner=_play_clock_tower,
)


def _play_courthouse(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if _is_answer(game_input, GameInputType.SELECT_RESOURCES, CardName.COURTHOUSE):
        gain_wild_resources(state, game_input)


COURTHOUSE = Card(
    name=CardName.COURTHOUSE,
    card_type=CardType.GOVERNANCE,
    base_cost={TWIG: 1, RESIN: 1, PEBBLE: 2},
    base_vp=2,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.JUDGE,
    play_inner=_play_courthouse,
)

# Discount handled by Player.validate_payment_options
CRANE = Card(
    name=CardName.CRANE,
    card_type=CardType.GOVERNANCE,
    base_cost={PEBBLE: 1},
    base_vp=1,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.ARCHITECT,
)

DOCTOR = Card(
    name=CardName.DOCTOR,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 4},
    base_vp=4,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.UNIVERSITY,
    play_inner=play_spend_resource_to_get_vp_factory(BERRY, max_to_spend=3, card_name=CardName.DOCTOR),
)

DUNGEON = Card(
    name=CardName.DUNGEON,
    card_type=CardType.GOVERNANCE,
    base_cost={RESIN: 1, PEBBLE: 2},
    base_vp=0,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.RANGER,
    holds_cards=True,
)


def _points_evertree(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    return state.get_player(player_id).get_num_card_type(CardType.PROSPERITY)


EVERTREE = Card(
    name=CardName.EVERTREE,
    card_type=CardType.PROSPERITY,
    base_cost={TWIG: 3, RESIN: 3, PEBBLE: 3},
    base_vp=5,
    is_unique=True,
    is_construction=True,
    associated_card=None,
    points_inner=_points_evertree,
)

FAIRGROUNDS = Card(
    name=CardName.FAIRGROUNDS,
    card_type=CardType.PRODUCTION,
    base_cost={TWIG: 1, RESIN: 2, PEBBLE: 1},
    base_vp=3,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.FOOL,
    play_inner=play_gain_resource_factory(num_cards_to_draw=2),
)

FARM = Card(
    name=CardName.FARM,
    card_type=CardType.PRODUCTION,
    base_cost={TWIG: 2, RESIN: 1},
    base_vp=1,
    is_unique=False,
    is_construction=True,
    associated_card=None,
    play_inner=play_gain_resource_factory({BERRY: 1}),
)


def _fool_targets(state: GameState) -> list[str]:
    active_id = state.get_active_player().player_id
    return [
        p.player_id for p in state.players
        if p.player_id != active_id and p.can_add_to_city(CardName.FOOL)
    ]


def _can_play_fool(state: GameState, game_input: GameInput) -> str | None:
    if not _fool_targets(state):
        return "No opponent has room for the FOOL"
    return None


def _play_fool(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if _is_answer(game_input, GameInputType.SELECT_PLAYER, CardName.FOOL):
        target = state.get_player(get_selected_player_id(game_input))
        target.add_to_city(CardName.FOOL)
        state.add_game_log(f"{state.get_active_player().name} placed the FOOL in {target.name}'s city")
    elif game_input.input_type == GameInputType.PLAY_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYER,
            prev_input_type=game_input.input_type,
            card_context=CardName.FOOL,
            player_options=_fool_targets(state),
            must_select_one=True,
            client_options={"selected_player": None},
        ))


FOOL = Card(
    name=CardName.FOOL,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 3},
    base_vp=-2,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.FAIRGROUNDS,
    play_inner=_play_fool,
    can_play_check_inner=_can_play_fool,
)


def _play_general_store(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    player.gain_resources({BERRY: 2 if player.has_card_in_city(CardName.FARM) else 1})


GENERAL_STORE = Card(
    name=CardName.GENERAL_STORE,
    card_type=CardType.PRODUCTION,
    base_cost={RESIN: 1, PEBBLE: 1},
    base_vp=1,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.SHOPKEEPER,
    play_inner=_play_general_store,
)

# Draws a card whenever another card joins the city
HISTORIAN = Card(
    name=CardName.HISTORIAN,
    card_type=CardType.GOVERNANCE,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.CLOCK_TOWER,
)


def _pair_index(owner: Player, card_name: CardName, played_card: PlayedCard) -> int:
    copies = owner.get_played_cards(card_name)
    for idx, candidate in enumerate(copies):
        if candidate is played_card:
            return idx
    return copies.index(played_card) if played_card in copies else len(copies)


def _play_husband(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if _is_answer(game_input, GameInputType.SELECT_RESOURCES, CardName.HUSBAND):
        gain_wild_resources(state, game_input)
        return
    if played_card is None:
        return
    owner = state.get_player(played_card.card_owner_id)
    is_paired = _pair_index(owner, CardName.HUSBAND, played_card) < len(owner.get_played_cards(CardName.WIFE))
    if is_paired and owner.has_card_in_city(CardName.FARM):
        state.pending_game_inputs.append(
            select_wild_resources_input(game_input, 1, card_context=CardName.HUSBAND)
        )


HUSBAND = Card(
    name=CardName.HUSBAND,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 2},
    base_vp=2,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.FARM,
    play_inner=_play_husband,
)


def _inn_options(state: GameState) -> list[CardName]:
    player = state.get_active_player()
    return [
        c for c in _unique(state.meadow_cards)
        if _can_play_for_free(state, c) and can_buy_with_wild_discount(player, c, 3)
    ]


def _can_visit_inn(state: GameState, game_input: GameInput) -> str | None:
    if not _inn_options(state):
        return "No meadow card can be played with the INN"
    return None


def _play_inn(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.INN,
            card_options=_inn_options(state),
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.INN):
        card_name = get_selected_cards(game_input)[0]
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PAYMENT_FOR_CARD,
            prev_input_type=game_input.input_type,
            card_context=CardName.INN,
            card_to_buy=card_name,
            payment_options=PaymentOptions(card_to_use=CardName.INN),
            client_options={"payment_options": {"resources": {}}},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_PAYMENT_FOR_CARD, CardName.INN):
        pay_with_wild_discount(state, game_input, num_wild=3)
        state.remove_card_from_meadow(game_input.card_to_buy)
        state.replenish_meadow()
        play_card_for_free(state, game_input.card_to_buy)


INN = Card(
    name=CardName.INN,
    card_type=CardType.DESTINATION,
    base_cost={TWIG: 2, RESIN: 1},
    base_vp=2,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.INNKEEPER,
    is_open_destination=True,
    play_inner=_play_inn,
    can_visit_check_inner=_can_visit_inn,
)

# Leaves the city to take 3 berries off a critter
INNKEEPER = Card(
    name=CardName.INNKEEPER,
    card_type=CardType.GOVERNANCE,
    base_cost={BERRY: 1},
    base_vp=1,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.INN,
)

# Swap one resource for another when paying
JUDGE = Card(
    name=CardName.JUDGE,
    card_type=CardType.GOVERNANCE,
    base_cost={BERRY: 3},
    base_vp=2,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.COURTHOUSE,
)


def _points_king(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    from .events import Event

    points = 0
    for event_name in state.get_player(player_id).claimed_events:
        points += 2 if Event.from_name(event_name).event_type == EventType.SPECIAL else 1
    return points


KING = Card(
    name=CardName.KING,
    card_type=CardType.PROSPERITY,
    base_cost={BERRY: 6},
    base_vp=4,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.CASTLE,
    points_inner=_points_king,
)


def _play_lookout(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    from .locations import Location

    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_LOCATION,
            prev_input_type=game_input.input_type,
            card_context=CardName.LOOKOUT,
            location_options=[
                name for name in state.locations_map
                if Location.from_name(name).location_type in (LocationType.BASIC, LocationType.FOREST)
            ],
            must_select_one=True,
            client_options={"selected_location": None},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_LOCATION, CardName.LOOKOUT):
        location_name = get_selected_location(game_input)
        state.add_game_log(f"{state.get_active_player().name} copied {location_name.value} with LOOKOUT")
        Location.from_name(location_name).trigger(state, GameInput.place_worker(location_name))


LOOKOUT = Card(
    name=CardName.LOOKOUT,
    card_type=CardType.DESTINATION,
    base_cost={TWIG: 1, RESIN: 1, PEBBLE: 1},
    base_vp=2,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.WANDERER,
    play_inner=_play_lookout,
)

MINE = Card(
    name=CardName.MINE,
    card_type=CardType.PRODUCTION,
    base_cost={TWIG: 1, RESIN: 1, PEBBLE: 1},
    base_vp=2,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.MINER_MOLE,
    play_inner=play_gain_resource_factory({PEBBLE: 1}),
)

# Production cards a miner mole may not copy
MINER_MOLE_EXCLUDED = (CardName.MINER_MOLE, CardName.CHIP_SWEEP, CardName.STOREHOUSE)


def _play_miner_mole(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_PLAYED_CARDS, CardName.MINER_MOLE):
        for selected in get_selected_played_cards(game_input):
            target = _find_live_played_card(state, selected)
            Card.from_name(target.card_name).activate(state, game_input, target)
        return
    options = []
    for opponent in state.players:
        if opponent.player_id == player.player_id:
            continue
        options.extend(
            pc for pc in opponent.get_played_cards_by_type(CardType.PRODUCTION)
            if pc.card_name not in MINER_MOLE_EXCLUDED
        )
    if options:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYED_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.MINER_MOLE,
            played_card_options=_snapshot(options),
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))


MINER_MOLE = Card(
    name=CardName.MINER_MOLE,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 3},
    base_vp=1,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.MINE,
    play_inner=_play_miner_mole,
)


def _can_visit_monastery(state: GameState, game_input: GameInput) -> str | None:
    if state.get_active_player().get_num_resources() < 2:
        return "Need at least 2 resources to visit the MONASTERY"
    return None


def _play_monastery(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_RESOURCES,
            prev_input_type=game_input.input_type,
            card_context=CardName.MONASTERY,
            to_spend=True,
            min_to_select=2,
            max_to_select=2,
            client_options={"resources": {}},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_RESOURCES, CardName.MONASTERY):
        resources = get_selected_resources(game_input)
        for resource_type, count in resources.items():
            if player.get_num_resources_by_type(resource_type) < count:
                raise InvalidInputError(f"Insufficient {resource_type.value}")
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYER,
            prev_input_type=game_input.input_type,
            prev_input=game_input,
            card_context=CardName.MONASTERY,
            player_options=_opponent_ids(state),
            must_select_one=True,
            client_options={"selected_player": None},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYER, CardName.MONASTERY):
        target = state.get_player(get_selected_player_id(game_input))
        resources = parse_resources(game_input.prev_input.client_options.get("resources"), allow_vp=False)
        player.spend_resources(resources)
        target.gain_resources(resources)
        player.gain_resources({VP: 4})
        state.add_game_log(f"{player.name} gave {format_resources(resources)} to {target.name} at the MONASTERY")


MONASTERY = Card(
    name=CardName.MONASTERY,
    card_type=CardType.DESTINATION,
    base_cost={TWIG: 1, RESIN: 1, PEBBLE: 1},
    base_vp=1,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.MONK,
    play_inner=_play_monastery,
    can_visit_check_inner=_can_visit_monastery,
)


def _play_monk(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_RESOURCES, CardName.MONK):
        num_berries = get_selected_resources(game_input).get(BERRY, 0)
        if num_berries == 0:
            return
        if player.get_num_resources_by_type(BERRY) < num_berries:
            raise InvalidInputError("Insufficient BERRY")
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYER,
            prev_input_type=game_input.input_type,
            prev_input=game_input,
            card_context=CardName.MONK,
            player_options=_opponent_ids(state),
            must_select_one=True,
            client_options={"selected_player": None},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYER, CardName.MONK):
        target = state.get_player(get_selected_player_id(game_input))
        num_berries = parse_resources(game_input.prev_input.client_options.get("resources")).get(BERRY, 0)
        player.spend_resources({BERRY: num_berries})
        target.gain_resources({BERRY: num_berries})
        player.gain_resources({VP: 2 * num_berries})
        state.add_game_log(f"{player.name} gave {num_berries} BERRY to {target.name} with MONK")
    elif player.get_num_resources_by_type(BERRY) > 0:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_RESOURCES,
            prev_input_type=game_input.input_type,
            card_context=CardName.MONK,
            to_spend=True,
            specific_resource=BERRY,
            min_to_select=0,
            max_to_select=2,
            client_options={"resources": {}},
        ))


MONK = Card(
    name=CardName.MONK,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 1},
    base_vp=0,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.MONASTERY,
    play_inner=_play_monk,
)

# 1 point per unique construction
PALACE = Card(
    name=CardName.PALACE,
    card_type=CardType.PROSPERITY,
    base_cost={TWIG: 2, RESIN: 3, PEBBLE: 3},
    base_vp=4,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.QUEEN,
    points_inner=points_per_rarity_factory(is_critter=False, is_unique=True),
)


def _play_peddler(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_RESOURCES, CardName.PEDDLER):
        if not game_input.to_spend:
            gain_wild_resources(state, game_input)
            return
        resources = get_selected_resources(game_input)
        num_resources = sum_resources(resources)
        if num_resources == 0:
            return
        player.spend_resources(resources)
        state.pending_game_inputs.append(
            select_wild_resources_input(
                game_input, num_resources, card_context=CardName.PEDDLER, prev_input=game_input
            )
        )
    elif player.get_num_resources() > 0:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_RESOURCES,
            prev_input_type=game_input.input_type,
            card_context=CardName.PEDDLER,
            to_spend=True,
            min_to_select=0,
            max_to_select=2,
            client_options={"resources": {}},
        ))


PEDDLER = Card(
    name=CardName.PEDDLER,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.RUINS,
    play_inner=_play_peddler,
)


def _can_visit_post_office(state: GameState, game_input: GameInput) -> str | None:
    if state.get_active_player().num_cards_in_hand < 2:
        return "Need at least 2 cards in hand to visit the POST_OFFICE"
    return None


def _play_post_office(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYER,
            prev_input_type=game_input.input_type,
            card_context=CardName.POST_OFFICE,
            player_options=_opponent_ids(state),
            must_select_one=True,
            client_options={"selected_player": None},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYER, CardName.POST_OFFICE):
        get_selected_player_id(game_input)
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            prev_input=game_input,
            card_context=CardName.POST_OFFICE,
            card_options=list(player.cards_in_hand),
            min_to_select=2,
            max_to_select=2,
            client_options={"selected_cards": []},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.POST_OFFICE):
        cards_to_give = get_selected_cards(game_input)
        target = state.get_player(game_input.prev_input.client_options.get("selected_player"))
        for card_name in cards_to_give:
            player.remove_card_from_hand(card_name)
            target.add_card_to_hand(state, card_name)
        state.add_game_log(f"{player.name} gave 2 cards to {target.name}")
        if player.cards_in_hand:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.DISCARD_CARDS,
                prev_input_type=game_input.input_type,
                card_context=CardName.POST_OFFICE,
                min_to_select=0,
                max_to_select=len(player.cards_in_hand),
                client_options={"cards_to_discard": []},
            ))
        else:
            player.draw_max_cards(state)
    elif _is_answer(game_input, GameInputType.DISCARD_CARDS, CardName.POST_OFFICE):
        player.discard_cards_from_hand(state, get_selected_cards(game_input, key="cards_to_discard"))
        player.draw_max_cards(state)


POST_OFFICE = Card(
    name=CardName.POST_OFFICE,
    card_type=CardType.DESTINATION,
    base_cost={TWIG: 1, RESIN: 2},
    base_vp=2,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.POSTAL_PIGEON,
    is_open_destination=True,
    play_inner=_play_post_office,
    can_visit_check_inner=_can_visit_post_office,
)


def _play_postal_pigeon(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    if _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.POSTAL_PIGEON):
        _resolve_revealed_cards(state, game_input)
    elif game_input.input_type == GameInputType.PLAY_CARD:
        revealed = [state.draw_card(), state.draw_card()]
        _offer_revealed_cards(state, game_input, revealed, CardName.POSTAL_PIGEON, 3, must_select_one=False)


POSTAL_PIGEON = Card(
    name=CardName.POSTAL_PIGEON,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 2},
    base_vp=0,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.POST_OFFICE,
    play_inner=_play_postal_pigeon,
)


def _queen_options(state: GameState) -> list[CardName]:
    player = state.get_active_player()
    return [
        c for c in _unique(player.cards_in_hand + state.meadow_cards)
        if Card.from_name(c).base_vp <= 3 and _can_play_for_free(state, c)
    ]


def _can_visit_queen(state: GameState, game_input: GameInput) -> str | None:
    if not _queen_options(state):
        return "No card worth 3 VP or less can be played"
    return None


def _play_queen(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.QUEEN,
            card_options=_queen_options(state),
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.QUEEN):
        card_name = get_selected_cards(game_input)[0]
        if card_name in player.cards_in_hand:
            player.remove_card_from_hand(card_name)
        else:
            state.remove_card_from_meadow(card_name)
            state.replenish_meadow()
        play_card_for_free(state, card_name)


QUEEN = Card(
    name=CardName.QUEEN,
    card_type=CardType.DESTINATION,
    base_cost={BERRY: 5},
    base_vp=4,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.PALACE,
    play_inner=_play_queen,
    can_visit_check_inner=_can_visit_queen,
)


def _play_ranger(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_WORKER_PLACEMENT, CardName.RANGER):
        placement = get_selected_worker_placement(game_input)
        if game_input.prev_input_type == GameInputType.PLAY_CARD:
            player.recall_worker(state, placement)
            options = [p for p in state.get_possible_worker_placements() if p != placement]
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_WORKER_PLACEMENT,
                prev_input_type=game_input.input_type,
                prev_input=game_input,
                card_context=CardName.RANGER,
                worker_options=options,
                must_select_one=True,
                client_options={"selected_option": None},
            ))
        else:
            state.place_worker(placement)
    elif game_input.input_type == GameInputType.PLAY_CARD:
        options = [w for w in player.get_recallable_workers() if w.event is None]
        if options:
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_WORKER_PLACEMENT,
                prev_input_type=game_input.input_type,
                card_context=CardName.RANGER,
                worker_options=deepcopy(options),
                must_select_one=True,
                client_options={"selected_option": None},
            ))


RANGER = Card(
    name=CardName.RANGER,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.DUNGEON,
    play_inner=_play_ranger,
)

RESIN_REFINERY = Card(
    name=CardName.RESIN_REFINERY,
    card_type=CardType.PRODUCTION,
    base_cost={RESIN: 1, PEBBLE: 1},
    base_vp=1,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.CHIP_SWEEP,
    play_inner=play_gain_resource_factory({RESIN: 1}),
)


def _ruins_options(player: Player) -> list[PlayedCard]:
    return [pc for pc in player.get_played_constructions() if pc.card_name != CardName.RUINS]


def _can_play_ruins(state: GameState, game_input: GameInput) -> str | None:
    if not _ruins_options(state.get_active_player()):
        return "Need a construction in your city to play RUINS"
    return None


def _play_ruins(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_PLAYED_CARDS, CardName.RUINS):
        for selected in get_selected_played_cards(game_input):
            player.remove_card_from_city(state, selected)
            player.gain_resources(Card.from_name(selected.card_name).base_cost)
            state.add_game_log(f"{player.name} ruined {selected.card_name.value}")
        player.draw_cards(state, 2)
    elif game_input.input_type == GameInputType.PLAY_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYED_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.RUINS,
            played_card_options=_snapshot(_ruins_options(player)),
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))


RUINS = Card(
    name=CardName.RUINS,
    card_type=CardType.TRAVELER,
    base_cost={},
    base_vp=0,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.PEDDLER,
    play_inner=_play_ruins,
    can_play_check_inner=_can_play_ruins,
)

# 1 point per common critter
SCHOOL = Card(
    name=CardName.SCHOOL,
    card_type=CardType.PROSPERITY,
    base_cost={TWIG: 2, RESIN: 2},
    base_vp=2,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.TEACHER,
    points_inner=points_per_rarity_factory(is_critter=True, is_unique=False),
)


def _play_shepherd(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_PLAYER, CardName.SHEPHERD):
        target = state.get_player(get_selected_player_id(game_input))
        paid = game_input.prev_input.payment_options.resources
        target.gain_resources(paid)
        state.add_game_log(f"{player.name} paid {format_resources(paid)} to {target.name} for SHEPHERD")
    elif game_input.input_type == GameInputType.PLAY_CARD:
        vp_on_chapel = sum(
            (pc.resources or {}).get(VP, 0) for pc in player.get_played_cards(CardName.CHAPEL)
        )
        player.gain_resources({BERRY: 3, VP: vp_on_chapel})
        paid = game_input.payment_options.resources if game_input.payment_options else {}
        if sum_resources(paid):
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_PLAYER,
                prev_input_type=game_input.input_type,
                prev_input=game_input,
                card_context=CardName.SHEPHERD,
                player_options=_opponent_ids(state),
                must_select_one=True,
                client_options={"selected_player": None},
            ))


SHEPHERD = Card(
    name=CardName.SHEPHERD,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 3},
    base_vp=1,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.CHAPEL,
    play_inner=_play_shepherd,
)

# Gains a berry whenever a critter joins the city
SHOPKEEPER = Card(
    name=CardName.SHOPKEEPER,
    card_type=CardType.GOVERNANCE,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.GENERAL_STORE,
)

STOREHOUSE_OPTIONS: dict[str, tuple[ResourceType, int]] = {
    "3 TWIG": (TWIG, 3),
    "2 RESIN": (RESIN, 2),
    "1 PEBBLE": (PEBBLE, 1),
    "2 BERRY": (BERRY, 2),
}


def _play_storehouse(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        if played_card is not None and played_card.resources:
            player.gain_resources(played_card.resources)
            state.add_game_log(
                f"{player.name} took {format_resources(played_card.resources)} from STOREHOUSE"
            )
            played_card.resources = {}
    elif _is_answer(game_input, GameInputType.SELECT_OPTION_GENERIC, CardName.STOREHOUSE):
        resource_type, count = STOREHOUSE_OPTIONS[get_selected_option(game_input)]
        if played_card is None:
            raise InvalidInputError("Unable to find STOREHOUSE")
        stored = dict(played_card.resources or {})
        stored[resource_type] = stored.get(resource_type, 0) + count
        played_card.resources = stored
    elif played_card is not None:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_OPTION_GENERIC,
            prev_input_type=game_input.input_type,
            card_context=CardName.STOREHOUSE,
            played_card_context=deepcopy(played_card),
            options=list(STOREHOUSE_OPTIONS),
            client_options={"selected_option": None},
        ))


STOREHOUSE = Card(
    name=CardName.STOREHOUSE,
    card_type=CardType.PRODUCTION,
    base_cost={TWIG: 1, RESIN: 1, PEBBLE: 1},
    base_vp=2,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.WOODCARVER,
    stored_resources={},
    play_inner=_play_storehouse,
)


def _play_teacher(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.TEACHER):
        card_to_keep = get_selected_cards(game_input)[0]
        player.add_card_to_hand(state, card_to_keep)
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYER,
            prev_input_type=game_input.input_type,
            prev_input=game_input,
            card_context=CardName.TEACHER,
            player_options=_opponent_ids(state),
            must_select_one=True,
            client_options={"selected_player": None},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYER, CardName.TEACHER):
        target = state.get_player(get_selected_player_id(game_input))
        prev_input = game_input.prev_input
        remaining = list(prev_input.card_options or [])
        remaining.remove(CardName(prev_input.client_options["selected_cards"][0]))
        for card_name in remaining:
            target.add_card_to_hand(state, card_name)
        state.add_game_log(f"{player.name} gave a card to {target.name} with TEACHER")
    else:
        drawn = [state.draw_card(), state.draw_card()]
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.TEACHER,
            card_options=drawn,
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))


TEACHER = Card(
    name=CardName.TEACHER,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 2},
    base_vp=2,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.SCHOOL,
    play_inner=_play_teacher,
)

# 1 point per unique critter
THEATRE = Card(
    name=CardName.THEATRE,
    card_type=CardType.PROSPERITY,
    base_cost={TWIG: 3, RESIN: 1, PEBBLE: 1},
    base_vp=3,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.BARD,
    points_inner=points_per_rarity_factory(is_critter=True, is_unique=True),
)

TWIG_BARGE = Card(
    name=CardName.TWIG_BARGE,
    card_type=CardType.PRODUCTION,
    base_cost={TWIG: 1, PEBBLE: 1},
    base_vp=1,
    is_unique=False,
    is_construction=True,
    associated_card=CardName.BARGE_TOAD,
    play_inner=play_gain_resource_factory({TWIG: 2}),
)


def _play_undertaker(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if _is_answer(game_input, GameInputType.SELECT_CARDS, CardName.UNDERTAKER):
        selected = get_selected_cards(game_input)
        if game_input.prev_input_type == GameInputType.PLAY_CARD:
            for card_name in selected:
                state.remove_card_from_meadow(card_name)
                state.discard_pile.add_to_stack(card_name)
            state.replenish_meadow()
            state.pending_game_inputs.append(GameInput(
                input_type=GameInputType.SELECT_CARDS,
                prev_input_type=game_input.input_type,
                card_context=CardName.UNDERTAKER,
                card_options=list(state.meadow_cards),
                min_to_select=1,
                max_to_select=1,
                client_options={"selected_cards": []},
            ))
        else:
            for card_name in selected:
                state.remove_card_from_meadow(card_name)
                player.add_card_to_hand(state, card_name)
            state.replenish_meadow()
    elif game_input.input_type == GameInputType.PLAY_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.UNDERTAKER,
            card_options=list(state.meadow_cards),
            min_to_select=3,
            max_to_select=3,
            client_options={"selected_cards": []},
        ))


UNDERTAKER = Card(
    name=CardName.UNDERTAKER,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=True,
    is_construction=False,
    associated_card=CardName.CEMETARY,
    play_inner=_play_undertaker,
)


def _university_options(player: Player) -> list[PlayedCard]:
    return [pc for pc in player.iter_played_cards() if pc.card_name != CardName.UNIVERSITY]


def _can_visit_university(state: GameState, game_input: GameInput) -> str | None:
    if not _university_options(state.get_active_player()):
        return "No card in your city to discard"
    return None


def _play_university(state: GameState, game_input: GameInput, played_card: PlayedCard | None = None) -> None:
    player = state.get_active_player()
    if game_input.input_type == GameInputType.VISIT_DESTINATION_CARD:
        state.pending_game_inputs.append(GameInput(
            input_type=GameInputType.SELECT_PLAYED_CARDS,
            prev_input_type=game_input.input_type,
            card_context=CardName.UNIVERSITY,
            played_card_options=_snapshot(_university_options(player)),
            min_to_select=1,
            max_to_select=1,
            client_options={"selected_cards": []},
        ))
    elif _is_answer(game_input, GameInputType.SELECT_PLAYED_CARDS, CardName.UNIVERSITY):
        get_selected_played_cards(game_input)
        state.pending_game_inputs.append(
            select_wild_resources_input(
                game_input, 1, card_context=CardName.UNIVERSITY, prev_input=game_input
            )
        )
    elif _is_answer(game_input, GameInputType.SELECT_RESOURCES, CardName.UNIVERSITY):
        gain_wild_resources(state, game_input)
        for selected in game_input.prev_input.client_options.get("selected_cards") or []:
            target = PlayedCard.coerce(selected)
            player.remove_card_from_city(state, target)
            player.gain_resources(Card.from_name(target.card_name).base_cost)
            state.add_game_log(f"{player.name} discarded {target.card_name.value} at the UNIVERSITY")
        player.gain_resources({VP: 1})


UNIVERSITY = Card(
    name=CardName.UNIVERSITY,
    card_type=CardType.DESTINATION,
    base_cost={RESIN: 1, PEBBLE: 2},
    base_vp=3,
    is_unique=True,
    is_construction=True,
    associated_card=CardName.DOCTOR,
    play_inner=_play_university,
    can_visit_check_inner=_can_visit_university,
)

# Does not take up a space in the city
WANDERER = Card(
    name=CardName.WANDERER,
    card_type=CardType.TRAVELER,
    base_cost={BERRY: 2},
    base_vp=1,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.LOOKOUT,
    play_inner=play_gain_resource_factory(num_cards_to_draw=3),
)


def _points_wife(state: GameState, player_id: str, played_card: PlayedCard | None = None) -> int:
    if played_card is None:
        return 0
    player = state.get_player(player_id)
    is_paired = _pair_index(player, CardName.WIFE, played_card) < len(player.get_played_cards(CardName.HUSBAND))
    return 3 if is_paired else 0


WIFE = Card(
    name=CardName.WIFE,
    card_type=CardType.PROSPERITY,
    base_cost={BERRY: 2},
    base_vp=2,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.FARM,
    points_inner=_points_wife,
)

WOODCARVER = Card(
    name=CardName.WOODCARVER,
    card_type=CardType.PRODUCTION,
    base_cost={BERRY: 2},
    base_vp=2,
    is_unique=False,
    is_construction=False,
    associated_card=CardName.STOREHOUSE,
    play_inner=play_spend_resource_to_get_vp_factory(TWIG, max_to_spend=3, card_name=CardName.WOODCARVER),
)


# ============================================================================
# Card Collection
# ============================================================================

BASE_GAME_CARDS: list[Card] = [
    ARCHITECT, BARD, BARGE_TOAD, CASTLE, CEMETARY, CHAPEL, CHIP_SWEEP,
    CLOCK_TOWER, COURTHOUSE, CRANE, DOCTOR, DUNGEON, EVERTREE, FAIRGROUNDS,
    FARM, FOOL, GENERAL_STORE, HISTORIAN, HUSBAND, INN, INNKEEPER, JUDGE,
    KING, LOOKOUT, MINE, MINER_MOLE, MONASTERY, MONK, PALACE, PEDDLER,
    POST_OFFICE, POSTAL_PIGEON, QUEEN, RANGER, RESIN_REFINERY, RUINS,
    SCHOOL, SHEPHERD, SHOPKEEPER, STOREHOUSE, TEACHER, THEATRE, TWIG_BARGE,
    UNDERTAKER, UNIVERSITY, WANDERER, WIFE, WOODCARVER,
]

CARD_REGISTRY: dict[CardName, Card] = {card.name: card for card in BASE_GAME_CARDS}
