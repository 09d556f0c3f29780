"""
Player - One participant's hand, city, resources and workers.

Design principles:
- Plain mutable dataclass: GameState clones before any transition, so the
  effect hooks are free to mutate players in place
- Card rules data is looked up in the card registry, never copied here
- Helpers raise engine errors; they never return silent failure flags
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator
import uuid

from .errors import IllegalActionError, InvalidInputError, InvariantError, OverpayError
from .game_input import GameInput, PlayedCard, PlayedEvent, WorkerPlacement
from .resources import (
    GOODS,
    ResourceMap,
    empty_resources,
    resources_from_json,
    resources_to_json,
    sum_resources,
)
from .types import (
    CardName,
    CardType,
    EventName,
    LocationName,
    MAX_CITY_SIZE,
    MAX_HAND_SIZE,
    PlayerStatus,
    ResourceType,
    Season,
    STARTING_WORKERS,
)

if TYPE_CHECKING:
    from ..games.base.cards import Card
    from .state import GameState


# Workers placed on these cards stay there for the rest of the game
PERMANENT_WORKER_CARDS = (CardName.CEMETARY, CardName.MONASTERY)

# Workers gained when leaving each season
SEASON_WORKERS = {
    Season.WINTER: 1,
    Season.SPRING: 1,
    Season.SUMMER: 2,
}

NEXT_SEASON = {
    Season.WINTER: Season.SPRING,
    Season.SPRING: Season.SUMMER,
    Season.SUMMER: Season.AUTUMN,
}


def _card(card_name: CardName) -> Card:
    from ..games.base.cards import Card
    return Card.from_name(card_name)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Player:
    """
    State for a single player.

    played_cards maps a card name to every copy of it in the city, in the
    order they were played. placed_workers records where each worker went
    so it can be recalled exactly.
    """
    name: str
    player_id: str = field(default_factory=_new_id)
    player_secret: str = field(default_factory=_new_id)
    cards_in_hand: list[CardName] = field(default_factory=list)
    played_cards: dict[CardName, list[PlayedCard]] = field(default_factory=dict)
    resources: ResourceMap = field(default_factory=empty_resources)
    current_season: Season = Season.WINTER
    num_workers: int = STARTING_WORKERS
    placed_workers: list[WorkerPlacement] = field(default_factory=list)
    claimed_events: dict[EventName, PlayedEvent] = field(default_factory=dict)
    player_status: PlayerStatus = PlayerStatus.DURING_SEASON

    # ------------------------------------------------------------------------
    # Hand
    # ------------------------------------------------------------------------

    @property
    def num_cards_in_hand(self) -> int:
        return len(self.cards_in_hand)

    @property
    def hand_space(self) -> int:
        return max(0, MAX_HAND_SIZE - len(self.cards_in_hand))

    def draw_cards(self, state: GameState, count: int) -> None:
        for _ in range(count):
            self.add_card_to_hand(state, state.draw_card())

    def draw_max_cards(self, state: GameState) -> None:
        self.draw_cards(state, self.hand_space)

    def add_card_to_hand(self, state: GameState, card_name: CardName) -> None:
        """Cards drawn past the hand limit go straight to the discard pile."""
        if len(self.cards_in_hand) < MAX_HAND_SIZE:
            self.cards_in_hand.append(card_name)
        else:
            state.discard_pile.add_to_stack(card_name)

    def remove_card_from_hand(self, card_name: CardName) -> None:
        if card_name not in self.cards_in_hand:
            raise InvalidInputError(f"Unable to discard {card_name.value}")
        self.cards_in_hand.remove(card_name)

    def discard_cards_from_hand(self, state: GameState, card_names: list[CardName]) -> None:
        # Validate the whole list before touching the hand
        remaining = list(self.cards_in_hand)
        for card_name in card_names:
            if card_name not in remaining:
                raise InvalidInputError(f"Unable to discard {CardName(card_name).value}")
            remaining.remove(card_name)
        for card_name in card_names:
            self.remove_card_from_hand(CardName(card_name))
            state.discard_pile.add_to_stack(CardName(card_name))

    # ------------------------------------------------------------------------
    # City
    # ------------------------------------------------------------------------

    def iter_played_cards(self) -> Iterator[PlayedCard]:
        for played in self.played_cards.values():
            yield from played

    def get_played_cards(self, card_name: CardName) -> list[PlayedCard]:
        return self.played_cards.get(card_name, [])

    def get_first_played_card(self, card_name: CardName) -> PlayedCard:
        played = self.get_played_cards(card_name)
        if not played:
            raise InvalidInputError(f"Unable to find {card_name.value} in city")
        return played[0]

    def find_played_card(self, played_card: PlayedCard) -> PlayedCard:
        """Locate the live city entry equal to a (serialized) played card."""
        for candidate in self.get_played_cards(played_card.card_name):
            if candidate == played_card:
                return candidate
        raise InvalidInputError(f"Selected card is not in city: {played_card.card_name.value}")

    def has_card_in_city(self, card_name: CardName) -> bool:
        return len(self.get_played_cards(card_name)) != 0

    def get_num_cards_in_city(self) -> int:
        return sum(len(played) for played in self.played_cards.values())

    def get_num_card_type(self, card_type: CardType) -> int:
        return sum(1 for pc in self.iter_played_cards() if _card(pc.card_name).card_type == card_type)

    def get_played_cards_by_type(self, card_type: CardType) -> list[PlayedCard]:
        return [pc for pc in self.iter_played_cards() if _card(pc.card_name).card_type == card_type]

    def get_played_critters(self) -> list[PlayedCard]:
        return [pc for pc in self.iter_played_cards() if _card(pc.card_name).is_critter]

    def get_played_constructions(self) -> list[PlayedCard]:
        return [pc for pc in self.iter_played_cards() if _card(pc.card_name).is_construction]

    def get_num_husband_wife_pairs(self) -> int:
        return min(
            len(self.get_played_cards(CardName.HUSBAND)),
            len(self.get_played_cards(CardName.WIFE)),
        )

    def get_num_occupied_spaces(self) -> int:
        occupied = sum(
            1 for pc in self.iter_played_cards() if pc.card_name != CardName.WANDERER
        )
        # Each husband/wife pair shares one space
        return occupied - self.get_num_husband_wife_pairs()

    def can_add_to_city(self, card_name: CardName) -> bool:
        card = _card(card_name)
        if card.is_unique and self.has_card_in_city(card_name):
            return False
        if card_name in (CardName.WANDERER, CardName.RUINS):
            return True
        # A new husband or wife can move in with an unpaired partner
        num_husbands = len(self.get_played_cards(CardName.HUSBAND))
        num_wives = len(self.get_played_cards(CardName.WIFE))
        if card_name == CardName.HUSBAND and num_wives > num_husbands:
            return True
        if card_name == CardName.WIFE and num_husbands > num_wives:
            return True
        return self.get_num_occupied_spaces() < MAX_CITY_SIZE

    def add_to_city(self, card_name: CardName) -> PlayedCard:
        if not self.can_add_to_city(card_name):
            raise IllegalActionError(f"Unable to add {card_name.value} to city")
        played_card = _card(card_name).new_played_card(self.player_id)
        self.played_cards.setdefault(card_name, []).append(played_card)
        self._unlock_destination_slots()
        return played_card

    def _unlock_destination_slots(self) -> None:
        # Undertaker opens a second cemetery plot, Monk a second monastery cell
        for holder, unlocker in (
            (CardName.CEMETARY, CardName.UNDERTAKER),
            (CardName.MONASTERY, CardName.MONK),
        ):
            if self.has_card_in_city(unlocker):
                for played_card in self.get_played_cards(holder):
                    played_card.max_workers = 2

    def remove_card_from_city(
        self,
        state: GameState,
        played_card: PlayedCard | CardName,
        add_to_discard_pile: bool = True,
    ) -> list[CardName]:
        """
        Remove one copy of a card from the city.

        Returns the removed cards, including anything the card was holding
        (prisoners in the dungeon).
        """
        if isinstance(played_card, PlayedCard):
            target = self.find_played_card(played_card)
        else:
            played = self.get_played_cards(played_card)
            if not played:
                raise InvalidInputError(f"Unable to remove {played_card.value}")
            target = played[-1]

        played = self.played_cards[target.card_name]
        for idx, candidate in enumerate(played):
            if candidate is target:
                del played[idx]
                break
        if not played:
            del self.played_cards[target.card_name]
        if _card(target.card_name).is_critter:
            self._release_occupied_construction(target.card_name)

        removed_cards = [target.card_name] + list(target.paired_cards or [])
        if add_to_discard_pile:
            for card_name in removed_cards:
                state.discard_pile.add_to_stack(card_name)
        return removed_cards

    def _release_occupied_construction(self, critter_name: CardName) -> None:
        # Keep no more occupied constructions than critters left to live in them
        construction = _card(critter_name).associated_card
        if construction is None:
            return
        occupied = [pc for pc in self.get_played_cards(construction) if pc.used_for_critter]
        num_residents = sum(
            1 for pc in self.iter_played_cards()
            if _card(pc.card_name).is_critter
            and _card(pc.card_name).associated_card == construction
        )
        if len(occupied) > num_residents:
            occupied[-1].used_for_critter = False

    def has_unused_by_critter_construction(self, card_name: CardName) -> bool:
        if not _card(card_name).is_construction:
            return False
        return any(not pc.used_for_critter for pc in self.get_played_cards(card_name))

    def use_construction_to_play_critter(self, card_name: CardName) -> None:
        if not _card(card_name).is_construction:
            raise InvalidInputError("Can only occupy construction")
        for played_card in self.get_played_cards(card_name):
            if not played_card.used_for_critter:
                played_card.used_for_critter = True
                return
        raise InvalidInputError(f"No unoccupied {card_name.value} found")

    def can_invoke_dungeon(self) -> bool:
        if not self.has_card_in_city(CardName.DUNGEON):
            return False
        dungeon = self.get_first_played_card(CardName.DUNGEON)
        num_dungeoned = len(dungeon.paired_cards or [])
        max_dungeoned = 2 if self.has_card_in_city(CardName.RANGER) else 1

        # Need a critter other than the ranger to put in a cell
        if not any(pc.card_name != CardName.RANGER for pc in self.get_played_critters()):
            return False
        return num_dungeoned < max_dungeoned

    # ------------------------------------------------------------------------
    # Destinations
    # ------------------------------------------------------------------------

    def get_all_destination_cards(self) -> list[PlayedCard]:
        return [pc for pc in self.iter_played_cards() if _card(pc.card_name).can_take_worker]

    def has_space_on_destination_card(self, card_name: CardName) -> bool:
        return self.get_played_card_with_space(card_name) is not None

    def get_played_card_with_space(self, card_name: CardName) -> PlayedCard | None:
        for played_card in self.get_played_cards(card_name):
            if len(played_card.workers or []) < (played_card.max_workers or 1):
                return played_card
        return None

    def get_available_closed_destination_cards(self) -> list[CardName]:
        names = []
        for pc in self.get_all_destination_cards():
            card = _card(pc.card_name)
            if not card.is_open_destination and self.has_space_on_destination_card(pc.card_name):
                if pc.card_name not in names:
                    names.append(pc.card_name)
        return names

    def get_available_open_destination_cards(self) -> list[CardName]:
        names = []
        for pc in self.get_all_destination_cards():
            card = _card(pc.card_name)
            if card.is_open_destination and self.has_space_on_destination_card(pc.card_name):
                if pc.card_name not in names:
                    names.append(pc.card_name)
        return names

    def can_place_worker_on_card(self, card_name: CardName, city_owner: Player | None = None) -> bool:
        if self.num_available_workers <= 0:
            return False
        city_owner = city_owner or self
        if not city_owner.has_card_in_city(card_name):
            return False
        if city_owner.player_id != self.player_id and not _card(card_name).is_open_destination:
            return False
        return city_owner.has_space_on_destination_card(card_name)

    # ------------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------------

    @property
    def num_available_workers(self) -> int:
        return self.num_workers - len(self.placed_workers)

    def _place_worker(self, placement: WorkerPlacement) -> None:
        if self.num_available_workers <= 0:
            raise IllegalActionError("Cannot place worker")
        self.placed_workers.append(placement)

    def place_worker_on_location(self, location: LocationName) -> None:
        self._place_worker(WorkerPlacement(location=location))

    def place_worker_on_event(self, event: EventName) -> None:
        from ..games.base.events import Event

        self._place_worker(WorkerPlacement(event=event))
        self.claimed_events[event] = Event.from_name(event).new_played_event()

    def place_worker_on_card(self, card_name: CardName, city_owner: Player | None = None) -> PlayedCard:
        if not self.can_place_worker_on_card(card_name, city_owner):
            raise IllegalActionError(f"Cannot place worker on {card_name.value}")
        city_owner = city_owner or self
        played_card = city_owner.get_played_card_with_space(card_name)
        if played_card is None:
            raise InvariantError(f"No space on {card_name.value}")
        self._place_worker(WorkerPlacement(card=card_name, card_owner_id=city_owner.player_id))
        played_card.workers = (played_card.workers or []) + [self.player_id]
        return played_card

    def get_recallable_workers(self) -> list[WorkerPlacement]:
        return [
            placement for placement in self.placed_workers
            if placement.card not in PERMANENT_WORKER_CARDS
        ]

    def recall_worker(self, state: GameState, placement: WorkerPlacement) -> None:
        """Take back a single worker, clearing it from wherever it sits."""
        for idx, candidate in enumerate(self.placed_workers):
            if candidate == placement:
                del self.placed_workers[idx]
                break
        else:
            raise InvalidInputError("Worker is not placed there")

        if placement.location is not None:
            workers = state.locations_map.get(placement.location)
            if workers is None:
                raise InvariantError(f"Couldn't find location {placement.location.value}")
            if self.player_id not in workers:
                raise InvariantError(f"Couldn't find worker at location: {placement.location.value}")
            workers.remove(self.player_id)
        elif placement.card is not None:
            city_owner = state.get_player(placement.card_owner_id)
            # The card may have left the city (university, ruins) since
            for played_card in city_owner.get_played_cards(placement.card):
                if played_card.workers and self.player_id in played_card.workers:
                    played_card.workers.remove(self.player_id)
                    break
        # Claimed events keep their worker marker in events_map

    def recall_workers(self, state: GameState) -> None:
        if self.num_available_workers != 0:
            raise InvariantError("Still have available workers")
        for placement in self.get_recallable_workers():
            self.recall_worker(state, placement)

    # ------------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------------

    def get_num_resources(self) -> int:
        return sum(self.resources.get(rt, 0) for rt in GOODS)

    def get_num_resources_by_type(self, resource_type: ResourceType) -> int:
        return self.resources.get(ResourceType(resource_type), 0)

    def gain_resources(self, resources: ResourceMap) -> None:
        for resource_type, count in resources.items():
            if count:
                resource_type = ResourceType(resource_type)
                self.resources[resource_type] = self.resources.get(resource_type, 0) + count

    def spend_resources(self, resources: ResourceMap) -> None:
        # Check everything first so a failed spend leaves the player untouched
        for resource_type, count in resources.items():
            if count and self.get_num_resources_by_type(resource_type) < count:
                raise InvalidInputError(f"Insufficient {ResourceType(resource_type).value}")
        for resource_type, count in resources.items():
            if count:
                self.resources[ResourceType(resource_type)] -= count

    # ------------------------------------------------------------------------
    # Paying for cards
    # ------------------------------------------------------------------------

    def can_afford_card(self, card_name: CardName, is_meadow_card: bool) -> bool:
        card = _card(card_name)

        # Critters move into their construction for free
        if card.is_critter:
            if self.has_unused_by_critter_construction(CardName.EVERTREE):
                return True
            if card.associated_card and self.has_unused_by_critter_construction(card.associated_card):
                return True

        # Queen plays anything worth 3 VP or less
        if card.base_vp <= 3 and self.can_place_worker_on_card(CardName.QUEEN):
            return True

        # Innkeeper takes 3 berries off a critter
        if (
            card.base_cost.get(ResourceType.BERRY)
            and card.is_critter
            and self.has_card_in_city(CardName.INNKEEPER)
            and self.is_paid_resources_valid(
                self.resources, card.base_cost, ResourceType.BERRY, error_if_overpay=False
            )
        ):
            return True

        wild_discount = (
            self.can_invoke_dungeon()
            or (is_meadow_card and self.can_place_worker_on_card(CardName.INN))
            or (card.is_construction and self.has_card_in_city(CardName.CRANE))
        )
        return self.is_paid_resources_valid(
            self.resources,
            card.base_cost,
            "ANY" if wild_discount else None,
            error_if_overpay=False,
        )

    def is_paid_resources_valid(
        self,
        paid_resources: ResourceMap,
        card_cost: ResourceMap,
        discount: ResourceType | str | None = None,
        error_if_overpay: bool = True,
        num_wild: int = 3,
    ) -> bool:
        """
        Check a payment against a card cost.

        Discounts are exclusive: BERRY takes 3 berries off the cost, "ANY"
        lets up to num_wild resources of any type go unpaid. A JUDGE lets
        one resource be swapped for another when no discount applies.
        Paying more than needed raises OverpayError when error_if_overpay.
        """
        need_to_pay = {rt: card_cost.get(rt, 0) for rt in GOODS}
        paying_with = {rt: paid_resources.get(rt, 0) for rt in GOODS}
        outstanding_owed = {rt: 0 for rt in GOODS}

        need_to_pay_sum = sum_resources(need_to_pay)
        paying_with_sum = sum_resources(paying_with)

        if discount == ResourceType.BERRY:
            need_to_pay[ResourceType.BERRY] = max(0, need_to_pay[ResourceType.BERRY] - 3)

        for resource_type, count in need_to_pay.items():
            if count <= paying_with[resource_type]:
                paying_with[resource_type] -= count
            else:
                outstanding_owed[resource_type] += count - paying_with[resource_type]
                paying_with[resource_type] = 0

        outstanding_owed_sum = sum_resources(outstanding_owed)
        paying_with_remainder_sum = sum_resources(paying_with)

        if discount == "ANY" and outstanding_owed_sum <= num_wild:
            if (
                error_if_overpay
                and paying_with_sum != 0
                and paying_with_sum + num_wild > need_to_pay_sum
            ):
                raise OverpayError("Cannot overpay for cards")
            return True

        # The judge only works when no other discount is in effect
        if not discount and self.has_card_in_city(CardName.JUDGE):
            if outstanding_owed_sum == 1 and paying_with_remainder_sum >= 1:
                if error_if_overpay and paying_with_remainder_sum != 1:
                    raise OverpayError("Cannot overpay for cards")
                return True

        if outstanding_owed_sum == 0 and paying_with_remainder_sum != 0 and error_if_overpay:
            raise OverpayError("Cannot overpay for cards")
        return outstanding_owed_sum == 0

    def _occupiable_construction_for(self, card: Card) -> CardName | None:
        if not card.is_critter:
            return None
        if card.associated_card and self.has_unused_by_critter_construction(card.associated_card):
            return card.associated_card
        if self.has_unused_by_critter_construction(CardName.EVERTREE):
            return CardName.EVERTREE
        return None

    def validate_payment_options(self, game_input: GameInput) -> str | None:
        """
        Check the payment attached to a PLAY_CARD input.

        Returns an error message, or None when the payment is acceptable.
        Overpaying raises OverpayError instead.
        """
        payment_options = game_input.payment_options
        if payment_options is None or payment_options.resources is None:
            return "Invalid input"
        payment_resources = payment_options.resources

        for resource_type, count in payment_resources.items():
            if count < 0:
                return f"Can't spend {count} {ResourceType(resource_type).value}"
            if self.get_num_resources_by_type(resource_type) < count:
                return f"Can't spend {count} {ResourceType(resource_type).value}"

        card_to_play = _card(game_input.card)

        if payment_options.card_to_dungeon:
            to_dungeon = payment_options.card_to_dungeon
            if not self.can_invoke_dungeon():
                return "Invalid payment_options: cannot use dungeon"
            if not _card(to_dungeon).is_critter:
                return "Invalid payment_options: can only dungeon critter"
            if to_dungeon == CardName.RANGER:
                return "Invalid payment_options: cannot dungeon the RANGER"
            if not self.has_card_in_city(to_dungeon):
                return f"Invalid payment_options: {to_dungeon.value} is not in your city"
            if not self.is_paid_resources_valid(payment_resources, card_to_play.base_cost, "ANY"):
                return "Insufficient resources"
            return None

        if payment_options.card_to_use:
            card_to_use = payment_options.card_to_use
            if not self.has_card_in_city(card_to_use):
                return f"Invalid payment_options: cannot use {card_to_use.value}"
            if card_to_use == CardName.CRANE:
                if not card_to_play.is_construction:
                    return f"Invalid payment_options: Cannot use Crane on {card_to_play.name.value}"
                if not self.is_paid_resources_valid(payment_resources, card_to_play.base_cost, "ANY"):
                    return "Insufficient resources"
                return None
            if card_to_use == CardName.QUEEN:
                if card_to_play.base_vp > 3:
                    return f"Invalid payment_options: Cannot use Queen to play {card_to_play.name.value}"
                if not self.can_place_worker_on_card(CardName.QUEEN):
                    return "Invalid payment_options: no space on QUEEN"
                if sum_resources(payment_resources) != 0:
                    raise OverpayError("Cannot overpay for cards")
                return None
            if card_to_use == CardName.INN:
                if not game_input.from_meadow:
                    return "Invalid payment_options: Cannot use Inn on non-meadow card"
                if not self.can_place_worker_on_card(CardName.INN):
                    return "Invalid payment_options: no space on INN"
                if not self.is_paid_resources_valid(payment_resources, card_to_play.base_cost, "ANY"):
                    return "Insufficient resources"
                return None
            if card_to_use == CardName.INNKEEPER:
                if not card_to_play.is_critter:
                    return f"Invalid payment_options: Cannot use Innkeeper on {card_to_play.name.value}"
                if not self.is_paid_resources_valid(
                    payment_resources, card_to_play.base_cost, ResourceType.BERRY
                ):
                    return "Insufficient resources"
                return None
            return f"Unexpected card: {card_to_use.value}"

        # Free critter through its construction
        if (
            sum_resources(payment_resources) == 0
            and sum_resources(card_to_play.base_cost) != 0
            and self._occupiable_construction_for(card_to_play) is not None
        ):
            return None

        if not self.is_paid_resources_valid(payment_resources, card_to_play.base_cost):
            return "Insufficient resources"
        return None

    def pay_for_card(self, state: GameState, game_input: GameInput) -> None:
        payment_options = game_input.payment_options
        if payment_options is None or payment_options.resources is None:
            raise InvalidInputError("Invalid input")

        card_to_play = _card(game_input.card)
        self.spend_resources(payment_options.resources)

        if payment_options.card_to_dungeon:
            dungeon = self.get_first_played_card(CardName.DUNGEON)
            self.remove_card_from_city(state, payment_options.card_to_dungeon, add_to_discard_pile=False)
            dungeon.paired_cards = (dungeon.paired_cards or []) + [payment_options.card_to_dungeon]
        elif payment_options.card_to_use:
            card_to_use = payment_options.card_to_use
            if card_to_use in (CardName.CRANE, CardName.INNKEEPER):
                self.remove_card_from_city(state, card_to_use)
            elif card_to_use in (CardName.QUEEN, CardName.INN):
                self.place_worker_on_card(card_to_use)
            else:
                raise InvalidInputError(f"Unexpected card: {card_to_use.value}")
        elif (
            sum_resources(payment_options.resources) == 0
            and sum_resources(card_to_play.base_cost) != 0
        ):
            construction = self._occupiable_construction_for(card_to_play)
            if construction is None:
                raise InvalidInputError("Insufficient resources")
            self.use_construction_to_play_critter(construction)

    # ------------------------------------------------------------------------
    # Seasons
    # ------------------------------------------------------------------------

    def next_season(self) -> Season:
        """Advance to the next season and take on its new workers."""
        if self.current_season not in NEXT_SEASON:
            raise IllegalActionError("No season after AUTUMN")
        self.num_workers += SEASON_WORKERS[self.current_season]
        self.current_season = NEXT_SEASON[self.current_season]
        return self.current_season

    # ------------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------------

    def get_points(self, state: GameState) -> int:
        from ..games.base.events import Event

        points = self.get_num_resources_by_type(ResourceType.VP)
        for played_card in self.iter_played_cards():
            points += _card(played_card.card_name).get_points(state, self.player_id, played_card)
            points += (played_card.resources or {}).get(ResourceType.VP, 0)
        for event_name in self.claimed_events:
            points += Event.from_name(event_name).get_points(state, self.player_id)
        return points

    # ------------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------------

    def to_json(self, include_private: bool) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "player_id": self.player_id,
            "num_cards_in_hand": len(self.cards_in_hand),
            "cards_in_hand": [],
            "played_cards": {
                card_name.value: [pc.to_json() for pc in played]
                for card_name, played in self.played_cards.items()
            },
            "resources": resources_to_json(self.resources),
            "current_season": self.current_season.value,
            "num_workers": self.num_workers,
            "placed_workers": [w.to_json() for w in self.placed_workers],
            "claimed_events": {
                event_name.value: info.to_json()
                for event_name, info in self.claimed_events.items()
            },
            "player_status": self.player_status.value,
        }
        if include_private:
            data["player_secret"] = self.player_secret
            data["cards_in_hand"] = [c.value for c in self.cards_in_hand]
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Player:
        kwargs: dict[str, Any] = {}
        if data.get("player_secret"):
            kwargs["player_secret"] = data["player_secret"]
        resources = empty_resources()
        resources.update(resources_from_json(data.get("resources")))
        return cls(
            name=data["name"],
            player_id=data["player_id"],
            cards_in_hand=[CardName(c) for c in data.get("cards_in_hand", [])],
            played_cards={
                CardName(card_name): [PlayedCard.from_json(pc) for pc in played]
                for card_name, played in data.get("played_cards", {}).items()
            },
            resources=resources,
            current_season=Season(data.get("current_season", Season.WINTER.value)),
            num_workers=data.get("num_workers", STARTING_WORKERS),
            placed_workers=[WorkerPlacement.from_json(w) for w in data.get("placed_workers", [])],
            claimed_events={
                EventName(event_name): PlayedEvent.from_json(info)
                for event_name, info in data.get("claimed_events", {}).items()
            },
            player_status=PlayerStatus(data.get("player_status", PlayerStatus.DURING_SEASON.value)),
            **kwargs,
        )


def create_player(name: str) -> Player:
    return Player(name=name)
