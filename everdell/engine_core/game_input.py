"""
Game Input - The decisions players submit, plus the value objects they carry.

Inputs represent:
1. Top-level actions (play a card, place a worker, visit a card, claim an event)
2. Season actions (prepare for season, end game)
3. Continuations of a multi-step effect (select cards, select a player, ...)

A continuation is created by an effect hook and parked in
GameState.pending_game_inputs. The player answers by echoing it back with
client_options filled in. Everything here serializes to plain JSON so a
half-finished turn survives being stored between requests.
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .resources import ResourceMap, resources_from_json, resources_to_json
from .types import (
    CardName,
    EventName,
    GameInputType,
    LocationName,
    MULTI_STEP_INPUT_TYPES,
    ResourceType,
)


# ============================================================================
# Value objects
# ============================================================================

@dataclass
class PlayedCard:
    """
    One copy of a card sitting in a player's city.

    Only the fields a card needs are set: constructions track
    used_for_critter, destinations track workers, storing cards track
    resources, the dungeon tracks paired_cards.
    """
    card_name: CardName
    card_owner_id: str
    used_for_critter: bool | None = None
    workers: list[str] | None = None
    max_workers: int | None = None
    resources: ResourceMap | None = None
    paired_cards: list[CardName] | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "card_name": self.card_name.value,
            "card_owner_id": self.card_owner_id,
        }
        if self.used_for_critter is not None:
            data["used_for_critter"] = self.used_for_critter
        if self.workers is not None:
            data["workers"] = list(self.workers)
        if self.max_workers is not None:
            data["max_workers"] = self.max_workers
        if self.resources is not None:
            data["resources"] = resources_to_json(self.resources)
        if self.paired_cards is not None:
            data["paired_cards"] = [c.value for c in self.paired_cards]
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PlayedCard:
        return cls(
            card_name=CardName(data["card_name"]),
            card_owner_id=data["card_owner_id"],
            used_for_critter=data.get("used_for_critter"),
            workers=list(data["workers"]) if "workers" in data else None,
            max_workers=data.get("max_workers"),
            resources=resources_from_json(data["resources"]) if "resources" in data else None,
            paired_cards=(
                [CardName(c) for c in data["paired_cards"]] if "paired_cards" in data else None
            ),
        )

    @classmethod
    def coerce(cls, value: PlayedCard | dict[str, Any]) -> PlayedCard:
        """Accept either a PlayedCard or its JSON form (as sent by clients)."""
        if isinstance(value, PlayedCard):
            return value
        return cls.from_json(value)


@dataclass
class PlayedEvent:
    """What a claimed event is holding."""
    stored_resources: ResourceMap | None = None
    stored_cards: list[CardName] | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.stored_resources is not None:
            data["stored_resources"] = resources_to_json(self.stored_resources)
        if self.stored_cards is not None:
            data["stored_cards"] = [c.value for c in self.stored_cards]
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PlayedEvent:
        return cls(
            stored_resources=(
                resources_from_json(data["stored_resources"])
                if "stored_resources" in data else None
            ),
            stored_cards=(
                [CardName(c) for c in data["stored_cards"]] if "stored_cards" in data else None
            ),
        )


@dataclass
class WorkerPlacement:
    """Where a worker went. Exactly one of location / event / card is set."""
    location: LocationName | None = None
    event: EventName | None = None
    card: CardName | None = None
    card_owner_id: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.location is not None:
            data["location"] = self.location.value
        if self.event is not None:
            data["event"] = self.event.value
        if self.card is not None:
            data["card"] = self.card.value
            data["card_owner_id"] = self.card_owner_id
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> WorkerPlacement:
        return cls(
            location=LocationName(data["location"]) if data.get("location") else None,
            event=EventName(data["event"]) if data.get("event") else None,
            card=CardName(data["card"]) if data.get("card") else None,
            card_owner_id=data.get("card_owner_id"),
        )

    @classmethod
    def coerce(cls, value: WorkerPlacement | dict[str, Any]) -> WorkerPlacement:
        if isinstance(value, WorkerPlacement):
            return value
        return cls.from_json(value)


@dataclass
class PaymentOptions:
    """
    How a card is being paid for.

    card_to_use names a city card granting a discount (CRANE, INNKEEPER,
    QUEEN, INN). card_to_dungeon names a critter to lock in the DUNGEON.
    """
    resources: ResourceMap = field(default_factory=dict)
    card_to_use: CardName | None = None
    card_to_dungeon: CardName | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"resources": resources_to_json(self.resources)}
        if self.card_to_use is not None:
            data["card_to_use"] = self.card_to_use.value
        if self.card_to_dungeon is not None:
            data["card_to_dungeon"] = self.card_to_dungeon.value
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PaymentOptions:
        return cls(
            resources=resources_from_json(data.get("resources")),
            card_to_use=CardName(data["card_to_use"]) if data.get("card_to_use") else None,
            card_to_dungeon=(
                CardName(data["card_to_dungeon"]) if data.get("card_to_dungeon") else None
            ),
        )


# ============================================================================
# GameInput
# ============================================================================

@dataclass
class GameInput:
    """
    A single decision.

    Top-level inputs set the target field for their type (card, location,
    event). Continuations set prev_input_type, one context field naming who
    resolves them, and whichever option fields their stage offers. The
    player's answer always goes in client_options.
    """
    input_type: GameInputType

    # Top-level targets
    card: CardName | None = None
    from_meadow: bool | None = None
    payment_options: PaymentOptions | None = None
    card_owner_id: str | None = None
    location: LocationName | None = None
    event: EventName | None = None

    # Continuation bookkeeping
    prev_input_type: GameInputType | None = None
    prev_input: GameInput | None = None
    card_context: CardName | None = None
    location_context: LocationName | None = None
    event_context: EventName | None = None
    played_card_context: PlayedCard | None = None

    # Offered options
    card_options: list[CardName] | None = None
    card_options_unfiltered: list[CardName] | None = None
    played_card_options: list[PlayedCard] | None = None
    player_options: list[str] | None = None
    location_options: list[LocationName] | None = None
    worker_options: list[WorkerPlacement] | None = None
    options: list[str] | None = None
    min_to_select: int | None = None
    max_to_select: int | None = None
    must_select_one: bool | None = None
    to_spend: bool | None = None
    specific_resource: ResourceType | None = None
    exclude_resource: ResourceType | None = None
    card_to_buy: CardName | None = None

    # The player's answer
    client_options: dict[str, Any] = field(default_factory=dict)

    @property
    def is_multi_step(self) -> bool:
        return self.input_type in MULTI_STEP_INPUT_TYPES

    @property
    def context_label(self) -> str:
        """Name of whatever will resolve this input."""
        for context in (self.card_context, self.location_context, self.event_context):
            if context is not None:
                return context.value
        return self.input_type.value

    # ------------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------------

    @classmethod
    def play_card(
        cls,
        card: CardName,
        from_meadow: bool = False,
        resources: ResourceMap | None = None,
        card_to_use: CardName | None = None,
        card_to_dungeon: CardName | None = None,
    ) -> GameInput:
        """Factory for playing a card from hand or meadow."""
        return cls(
            input_type=GameInputType.PLAY_CARD,
            card=card,
            from_meadow=from_meadow,
            payment_options=PaymentOptions(
                resources=dict(resources or {}),
                card_to_use=card_to_use,
                card_to_dungeon=card_to_dungeon,
            ),
        )

    @classmethod
    def place_worker(cls, location: LocationName) -> GameInput:
        """Factory for placing a worker on a location."""
        return cls(input_type=GameInputType.PLACE_WORKER, location=location)

    @classmethod
    def visit_destination_card(cls, card: CardName, card_owner_id: str) -> GameInput:
        """Factory for placing a worker on a destination card."""
        return cls(
            input_type=GameInputType.VISIT_DESTINATION_CARD,
            card=card,
            card_owner_id=card_owner_id,
        )

    @classmethod
    def claim_event(cls, event: EventName) -> GameInput:
        """Factory for claiming an event."""
        return cls(input_type=GameInputType.CLAIM_EVENT, event=event)

    @classmethod
    def prepare_for_season(cls) -> GameInput:
        return cls(input_type=GameInputType.PREPARE_FOR_SEASON)

    @classmethod
    def game_end(cls) -> GameInput:
        return cls(input_type=GameInputType.GAME_END)

    def with_client_options(self, **client_options: Any) -> GameInput:
        """Return a copy of this input answered with the given options."""
        answered = deepcopy(self)
        answered.client_options = {**answered.client_options, **client_options}
        return answered

    def _copy_with(self, **kwargs: Any) -> GameInput:
        return replace(deepcopy(self), **kwargs)

    # ------------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------------

    def matches(self, other: GameInput) -> bool:
        """Structural equality ignoring the top-level client_options."""
        mine = self.to_json()
        theirs = other.to_json()
        mine.pop("client_options", None)
        theirs.pop("client_options", None)
        return mine == theirs

    # ------------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"input_type": self.input_type.value}
        for key in (
            "card", "card_owner_id", "location", "event",
            "prev_input_type", "card_context", "location_context", "event_context",
            "specific_resource", "exclude_resource", "card_to_buy",
        ):
            value = getattr(self, key)
            if value is not None:
                data[key] = value.value if hasattr(value, "value") else value
        for key in ("from_meadow", "min_to_select", "max_to_select", "must_select_one", "to_spend"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.payment_options is not None:
            data["payment_options"] = self.payment_options.to_json()
        if self.prev_input is not None:
            data["prev_input"] = self.prev_input.to_json()
        if self.played_card_context is not None:
            data["played_card_context"] = self.played_card_context.to_json()
        if self.card_options is not None:
            data["card_options"] = [c.value for c in self.card_options]
        if self.card_options_unfiltered is not None:
            data["card_options_unfiltered"] = [c.value for c in self.card_options_unfiltered]
        if self.played_card_options is not None:
            data["played_card_options"] = [c.to_json() for c in self.played_card_options]
        if self.player_options is not None:
            data["player_options"] = list(self.player_options)
        if self.location_options is not None:
            data["location_options"] = [loc.value for loc in self.location_options]
        if self.worker_options is not None:
            data["worker_options"] = [w.to_json() for w in self.worker_options]
        if self.options is not None:
            data["options"] = list(self.options)
        data["client_options"] = _plain(self.client_options)
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GameInput:
        def _opt(key: str, enum_cls: Any) -> Any:
            value = data.get(key)
            return enum_cls(value) if value is not None else None

        return cls(
            input_type=GameInputType(data["input_type"]),
            card=_opt("card", CardName),
            from_meadow=data.get("from_meadow"),
            payment_options=(
                PaymentOptions.from_json(data["payment_options"])
                if data.get("payment_options") is not None else None
            ),
            card_owner_id=data.get("card_owner_id"),
            location=_opt("location", LocationName),
            event=_opt("event", EventName),
            prev_input_type=_opt("prev_input_type", GameInputType),
            prev_input=(
                cls.from_json(data["prev_input"]) if data.get("prev_input") is not None else None
            ),
            card_context=_opt("card_context", CardName),
            location_context=_opt("location_context", LocationName),
            event_context=_opt("event_context", EventName),
            played_card_context=(
                PlayedCard.from_json(data["played_card_context"])
                if data.get("played_card_context") is not None else None
            ),
            card_options=(
                [CardName(c) for c in data["card_options"]]
                if data.get("card_options") is not None else None
            ),
            card_options_unfiltered=(
                [CardName(c) for c in data["card_options_unfiltered"]]
                if data.get("card_options_unfiltered") is not None else None
            ),
            played_card_options=(
                [PlayedCard.from_json(c) for c in data["played_card_options"]]
                if data.get("played_card_options") is not None else None
            ),
            player_options=(
                list(data["player_options"]) if data.get("player_options") is not None else None
            ),
            location_options=(
                [LocationName(loc) for loc in data["location_options"]]
                if data.get("location_options") is not None else None
            ),
            worker_options=(
                [WorkerPlacement.from_json(w) for w in data["worker_options"]]
                if data.get("worker_options") is not None else None
            ),
            options=list(data["options"]) if data.get("options") is not None else None,
            min_to_select=data.get("min_to_select"),
            max_to_select=data.get("max_to_select"),
            must_select_one=data.get("must_select_one"),
            to_spend=data.get("to_spend"),
            specific_resource=_opt("specific_resource", ResourceType),
            exclude_resource=_opt("exclude_resource", ResourceType),
            card_to_buy=_opt("card_to_buy", CardName),
            client_options=deepcopy(data.get("client_options") or {}),
        )


def _plain(value: Any) -> Any:
    """Convert client_options contents (value objects, enums) to plain JSON."""
    if isinstance(value, (PlayedCard, WorkerPlacement, PaymentOptions, GameInput)):
        return value.to_json()
    if isinstance(value, dict):
        return {_plain_key(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


def _plain_key(key: Any) -> Any:
    return key.value if isinstance(key, Enum) else key
