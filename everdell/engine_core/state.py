"""
Game State - The orchestrator of a single Everdell game.

Design principles:
- next() never mutates the receiver: it clones through the serialized form,
  applies the input to the clone and returns it
- A turn is a chain of inputs: effects park continuations in
  pending_game_inputs, and the active player only advances once that queue
  is empty
- Serializable: to_json(include_private=True) is the full-fidelity snapshot
  used for storage and cloning
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable
import logging
import random

from .card_stack import CardStack
from .errors import IllegalActionError, InvalidInputError, InvariantError
from .game_input import GameInput, PlayedCard, WorkerPlacement
from .play_helpers import get_selected_cards
from .player import Player
from .types import (
    CardName,
    EventName,
    GameInputType,
    LocationName,
    MEADOW_SIZE,
    PlayerStatus,
    ResourceType,
    Season,
)


logger = logging.getLogger(__name__)

STARTING_HAND_SIZE = 5


@dataclass
class GameOptions:
    """Per-game settings, serialized with the state."""
    realtime_points: bool = False
    num_forest_locations: int | None = None  # None: 3 for 2 players, else 4
    num_special_events: int = 4
    seed: int | None = None

    def to_json(self) -> dict[str, Any]:
        return {
            "realtime_points": self.realtime_points,
            "num_forest_locations": self.num_forest_locations,
            "num_special_events": self.num_special_events,
            "seed": self.seed,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any] | None) -> GameOptions:
        data = data or {}
        return cls(
            realtime_points=data.get("realtime_points", False),
            num_forest_locations=data.get("num_forest_locations"),
            num_special_events=data.get("num_special_events", 4),
            seed=data.get("seed"),
        )


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    locations_map lists the ids of the players with a worker on each
    location in play. events_map holds the claiming player id, or None
    while an event is unclaimed.
    """
    game_state_id: int
    active_player_id: str
    players: list[Player]
    meadow_cards: list[CardName] = field(default_factory=list)
    deck: CardStack = field(default_factory=lambda: CardStack(name="Deck"))
    discard_pile: CardStack = field(default_factory=lambda: CardStack(name="Discard Pile"))
    locations_map: dict[LocationName, list[str]] = field(default_factory=dict)
    events_map: dict[EventName, str | None] = field(default_factory=dict)
    pending_game_inputs: list[GameInput] = field(default_factory=list)
    game_log: list[dict[str, str]] = field(default_factory=list)
    game_options: GameOptions = field(default_factory=GameOptions)

    # ========================================================================
    # Transitions
    # ========================================================================

    def next(self, game_input: GameInput) -> GameState:
        """
        Apply one input and return the resulting state.

        Raises an EverdellError when the input is not legal. The receiver is
        left untouched either way.
        """
        if self.is_game_over():
            raise IllegalActionError("Game is over")

        next_state = self.clone()
        next_state.game_state_id += 1
        logger.debug(
            "game state %d: applying %s for %s",
            self.game_state_id,
            game_input.input_type.value,
            self.active_player_id,
        )

        if game_input.is_multi_step:
            next_state._handle_multi_step(game_input)
        else:
            if next_state.pending_game_inputs:
                raise InvalidInputError(
                    f"Must resolve {next_state.pending_game_inputs[0].context_label} first"
                )
            handler = next_state._get_handler(game_input.input_type)
            handler(game_input)

        player = next_state.get_active_player()
        if (
            player.player_status == PlayerStatus.PREPARING_FOR_SEASON
            and not next_state.pending_game_inputs
        ):
            next_state._finish_season_change()

        if not next_state.pending_game_inputs:
            next_state._next_player()
        return next_state

    def _get_handler(self, input_type: GameInputType) -> Callable[[GameInput], None]:
        handlers = {
            GameInputType.PLAY_CARD: self.handle_play_card,
            GameInputType.PLACE_WORKER: self.handle_place_worker,
            GameInputType.VISIT_DESTINATION_CARD: self.handle_visit_destination_card,
            GameInputType.CLAIM_EVENT: self.handle_claim_event,
            GameInputType.PREPARE_FOR_SEASON: self.handle_prepare_for_season,
            GameInputType.GAME_END: self.handle_game_end,
        }
        handler = handlers.get(input_type)
        if handler is None:
            raise InvariantError(f"No handler for input type: {input_type.value}")
        return handler

    # ------------------------------------------------------------------------
    # Top-level inputs
    # ------------------------------------------------------------------------

    def handle_play_card(self, game_input: GameInput) -> None:
        from ..games.base.cards import Card

        if game_input.card is None:
            raise InvalidInputError("Invalid input: no card to play")
        card = Card.from_name(game_input.card)
        player = self.get_active_player()

        error = card.can_play_check(self, game_input)
        if error:
            raise IllegalActionError(error)
        payment_error = player.validate_payment_options(game_input)
        if payment_error:
            raise InvalidInputError(payment_error)

        player.pay_for_card(self, game_input)
        if game_input.from_meadow:
            self.remove_card_from_meadow(card.name)
            self.replenish_meadow()
        else:
            player.remove_card_from_hand(card.name)
        card.play(self, game_input)

    def handle_place_worker(self, game_input: GameInput) -> None:
        from ..games.base.locations import Location

        if game_input.location is None:
            raise InvalidInputError("Invalid input: no location")
        location = Location.from_name(game_input.location)
        player = self.get_active_player()

        location.play(self, game_input)
        player.place_worker_on_location(location.name)
        self.locations_map[location.name].append(player.player_id)
        self.add_game_log(f"{player.name} placed a worker on {location.name.value}")

    def handle_visit_destination_card(self, game_input: GameInput) -> None:
        from ..games.base.cards import Card

        if game_input.card is None:
            raise InvalidInputError("Invalid input: no card to visit")
        card = Card.from_name(game_input.card)
        player = self.get_active_player()
        owner = self.get_player(game_input.card_owner_id or player.player_id)

        error = card.can_play_check(self, game_input)
        if error:
            raise IllegalActionError(error)
        played_card = player.place_worker_on_card(card.name, owner)
        self.add_game_log(f"{player.name} placed a worker on {owner.name}'s {card.name.value}")

        # Visiting someone else's open destination pays its owner
        if owner.player_id != player.player_id:
            owner.gain_resources({ResourceType.VP: 1})
        card.play(self, game_input, played_card)

    def handle_claim_event(self, game_input: GameInput) -> None:
        from ..games.base.events import Event

        if game_input.event is None:
            raise InvalidInputError("Invalid input: no event")
        event = Event.from_name(game_input.event)
        player = self.get_active_player()

        event.play(self, game_input)
        self.events_map[event.name] = player.player_id
        self.add_game_log(f"{player.name} claimed {event.name.value}")

    def handle_prepare_for_season(self, game_input: GameInput) -> None:
        from ..games.base.cards import push_clock_tower_prompt

        player = self.get_active_player()
        if player.current_season == Season.AUTUMN:
            raise IllegalActionError("No season after AUTUMN")
        if player.num_available_workers > 0:
            raise IllegalActionError("Cannot prepare for season with workers left to place")

        player.player_status = PlayerStatus.PREPARING_FOR_SEASON
        push_clock_tower_prompt(self, game_input)

    def handle_game_end(self, game_input: GameInput) -> None:
        player = self.get_active_player()
        if player.current_season != Season.AUTUMN:
            raise IllegalActionError("Can only end the game in AUTUMN")
        player.player_status = PlayerStatus.GAME_ENDED
        self.add_game_log(f"{player.name} took the game end action")
        logger.info("player %s ended their game", player.player_id)

    # ------------------------------------------------------------------------
    # Continuations
    # ------------------------------------------------------------------------

    def _handle_multi_step(self, game_input: GameInput) -> None:
        from ..games.base.cards import Card
        from ..games.base.events import Event
        from ..games.base.locations import Location

        for idx, pending in enumerate(self.pending_game_inputs):
            if pending.matches(game_input):
                del self.pending_game_inputs[idx]
                break
        else:
            raise InvalidInputError(
                f"Invalid multi-step input: no pending {game_input.input_type.value} matches"
            )

        if game_input.card_context is not None:
            played_card = None
            if game_input.played_card_context is not None:
                played_card = self._resolve_played_card(game_input.played_card_context)
            Card.from_name(game_input.card_context).play(self, game_input, played_card)
        elif game_input.location_context is not None:
            Location.from_name(game_input.location_context).play(self, game_input)
        elif game_input.event_context is not None:
            Event.from_name(game_input.event_context).play(self, game_input)
        elif (
            game_input.input_type == GameInputType.SELECT_CARDS
            and game_input.prev_input_type == GameInputType.PREPARE_FOR_SEASON
        ):
            self._handle_meadow_draft(game_input)
        else:
            raise InvalidInputError(f"Unhandled multi-step input: {game_input.input_type.value}")

    def _resolve_played_card(self, played_card: PlayedCard) -> PlayedCard:
        owner = self.get_player(played_card.card_owner_id)
        for candidate in owner.get_played_cards(played_card.card_name):
            if candidate == played_card:
                return candidate
        # The card may have changed since the prompt was created
        return owner.get_first_played_card(played_card.card_name)

    def _handle_meadow_draft(self, game_input: GameInput) -> None:
        player = self.get_active_player()
        selected = get_selected_cards(game_input)
        for card_name in selected:
            self.remove_card_from_meadow(card_name)
            player.add_card_to_hand(self, card_name)
        self.replenish_meadow()
        self.add_game_log(f"{player.name} selected {len(selected)} cards from the meadow")

    # ------------------------------------------------------------------------
    # Seasons and turn order
    # ------------------------------------------------------------------------

    def _finish_season_change(self) -> None:
        from ..games.base.cards import activate_production

        player = self.get_active_player()
        player.recall_workers(self)
        prev_season = player.current_season
        season = player.next_season()
        player.player_status = PlayerStatus.DURING_SEASON
        self.add_game_log(f"{player.name} prepared for {season.value}")
        logger.info("player %s moved from %s to %s", player.player_id, prev_season.value, season.value)

        if prev_season in (Season.WINTER, Season.SUMMER):
            activate_production(self, GameInput.prepare_for_season())
        elif prev_season == Season.SPRING:
            num_to_select = min(2, player.hand_space)
            if num_to_select:
                self.pending_game_inputs.append(GameInput(
                    input_type=GameInputType.SELECT_CARDS,
                    prev_input_type=GameInputType.PREPARE_FOR_SEASON,
                    card_options=list(self.meadow_cards),
                    min_to_select=num_to_select,
                    max_to_select=num_to_select,
                    client_options={"selected_cards": []},
                ))

    def _next_player(self) -> None:
        ids = [p.player_id for p in self.players]
        idx = ids.index(self.active_player_id)
        for offset in range(1, len(self.players) + 1):
            candidate = self.players[(idx + offset) % len(self.players)]
            if candidate.player_status != PlayerStatus.GAME_ENDED:
                self.active_player_id = candidate.player_id
                return

    def is_game_over(self) -> bool:
        return all(p.player_status == PlayerStatus.GAME_ENDED for p in self.players)

    # ========================================================================
    # Legal moves
    # ========================================================================

    def get_possible_game_inputs(self) -> list[GameInput]:
        """Everything the active player may submit right now."""
        from ..games.base.cards import Card

        if self.is_game_over():
            return []
        if self.pending_game_inputs:
            return [GameInput.from_json(gi.to_json()) for gi in self.pending_game_inputs]

        player = self.get_active_player()
        inputs: list[GameInput] = []
        if player.num_available_workers > 0:
            inputs.extend(self._placement_input(p) for p in self.get_possible_worker_placements())
        elif player.current_season != Season.AUTUMN:
            inputs.append(GameInput.prepare_for_season())

        for card_name in dict.fromkeys(self.meadow_cards):
            game_input = GameInput.play_card(card_name, from_meadow=True)
            if Card.from_name(card_name).can_play(self, game_input):
                inputs.append(game_input)
        for card_name in dict.fromkeys(player.cards_in_hand):
            game_input = GameInput.play_card(card_name)
            if Card.from_name(card_name).can_play(self, game_input):
                inputs.append(game_input)

        if player.current_season == Season.AUTUMN:
            inputs.append(GameInput.game_end())
        return inputs

    def get_possible_worker_placements(self) -> list[WorkerPlacement]:
        """Locations, destination cards and events the active player could send a worker to."""
        from ..games.base.cards import Card
        from ..games.base.events import Event
        from ..games.base.locations import Location

        player = self.get_active_player()
        placements: list[WorkerPlacement] = []
        for location_name in self.locations_map:
            if Location.from_name(location_name).can_play(self, GameInput.place_worker(location_name)):
                placements.append(WorkerPlacement(location=location_name))

        for owner in self.players:
            if owner.player_id == player.player_id:
                card_names = (
                    owner.get_available_closed_destination_cards()
                    + owner.get_available_open_destination_cards()
                )
            else:
                card_names = owner.get_available_open_destination_cards()
            for card_name in card_names:
                game_input = GameInput.visit_destination_card(card_name, owner.player_id)
                if Card.from_name(card_name).can_play(self, game_input):
                    placements.append(WorkerPlacement(card=card_name, card_owner_id=owner.player_id))

        for event_name in self.events_map:
            if Event.from_name(event_name).can_play(self, GameInput.claim_event(event_name)):
                placements.append(WorkerPlacement(event=event_name))
        return placements

    @staticmethod
    def _placement_input(placement: WorkerPlacement) -> GameInput:
        if placement.location is not None:
            return GameInput.place_worker(placement.location)
        if placement.event is not None:
            return GameInput.claim_event(placement.event)
        return GameInput.visit_destination_card(placement.card, placement.card_owner_id)

    def place_worker(self, placement: WorkerPlacement) -> None:
        """Send a worker somewhere as if it were a fresh top-level input."""
        game_input = self._placement_input(placement)
        self._get_handler(game_input.input_type)(game_input)

    # ========================================================================
    # Shared piles
    # ========================================================================

    def _rng(self, label: str) -> random.Random | None:
        if self.game_options.seed is None:
            return None
        return random.Random(f"{self.game_options.seed}:{self.game_state_id}:{label}")

    def draw_card(self) -> CardName:
        """Top card of the deck, reshuffling the discard pile in when it runs out."""
        if self.deck.is_empty:
            if self.discard_pile.is_empty:
                raise InvariantError("No more cards to draw")
            self.deck.cards = self.discard_pile.take_all()
            self.deck.shuffle(self._rng("reshuffle"))
            self.add_game_log("Shuffled the discard pile into the deck")
        return self.deck.draw()

    def replenish_meadow(self) -> None:
        while len(self.meadow_cards) < MEADOW_SIZE:
            self.meadow_cards.append(self.draw_card())

    def remove_card_from_meadow(self, card_name: CardName) -> None:
        if card_name not in self.meadow_cards:
            raise InvalidInputError(f"Unable to find {CardName(card_name).value} in the meadow")
        self.meadow_cards.remove(card_name)

    def add_game_log(self, entry: str) -> None:
        self.game_log.append({"entry": entry})

    # ========================================================================
    # Players and scoring
    # ========================================================================

    def get_player(self, player_id: str) -> Player:
        for player in self.players:
            if player.player_id == player_id:
                return player
        raise InvariantError(f"Unable to find player: {player_id}")

    def get_active_player(self) -> Player:
        return self.get_player(self.active_player_id)

    def get_scores(self) -> dict[str, int]:
        return {player.player_id: player.get_points(self) for player in self.players}

    def get_winners(self) -> list[Player]:
        scores = self.get_scores()
        best = max(scores.values())
        return [p for p in self.players if scores[p.player_id] == best]

    # ========================================================================
    # Serialization
    # ========================================================================

    def clone(self) -> GameState:
        return GameState.from_json(self.to_json(include_private=True))

    def to_json(self, include_private: bool) -> dict[str, Any]:
        data: dict[str, Any] = {
            "game_state_id": self.game_state_id,
            "active_player_id": self.active_player_id,
            "players": [p.to_json(include_private) for p in self.players],
            "meadow_cards": [c.value for c in self.meadow_cards],
            "deck": self.deck.to_json(include_private),
            "discard_pile": self.discard_pile.to_json(include_private),
            "locations_map": {k.value: list(v) for k, v in self.locations_map.items()},
            "events_map": {k.value: v for k, v in self.events_map.items()},
            "pending_game_inputs": [gi.to_json() for gi in self.pending_game_inputs],
            "game_log": [dict(entry) for entry in self.game_log],
            "game_options": self.game_options.to_json(),
        }
        if self.game_options.realtime_points:
            data["points"] = self.get_scores()
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> GameState:
        return cls(
            game_state_id=data["game_state_id"],
            active_player_id=data["active_player_id"],
            players=[Player.from_json(p) for p in data["players"]],
            meadow_cards=[CardName(c) for c in data.get("meadow_cards", [])],
            deck=CardStack.from_json(data["deck"]),
            discard_pile=CardStack.from_json(data["discard_pile"]),
            locations_map={
                LocationName(k): list(v) for k, v in data.get("locations_map", {}).items()
            },
            events_map={EventName(k): v for k, v in data.get("events_map", {}).items()},
            pending_game_inputs=[
                GameInput.from_json(gi) for gi in data.get("pending_game_inputs", [])
            ],
            game_log=[dict(entry) for entry in data.get("game_log", [])],
            game_options=GameOptions.from_json(data.get("game_options")),
        )

    # ========================================================================
    # Setup
    # ========================================================================

    @classmethod
    def initial_game_state(
        cls,
        players: list[Player],
        shuffle_deck: bool = True,
        seed: int | None = None,
        options: GameOptions | None = None,
    ) -> GameState:
        """
        Build a fresh game.

        Player i starts with 5 + i cards. The meadow is filled after the
        hands are dealt.
        """
        from ..games.base.setup import initial_deck, initial_events_map, initial_locations_map

        if len(players) < 2:
            raise ValueError("Unable to create a game with less than 2 players")

        options = GameOptions.from_json(options.to_json()) if options else GameOptions()
        if seed is not None:
            options.seed = seed
        rng = random.Random(options.seed)

        deck = initial_deck()
        if shuffle_deck:
            deck.shuffle(rng)

        state = cls(
            game_state_id=1,
            active_player_id=players[0].player_id,
            players=players,
            deck=deck,
            locations_map=initial_locations_map(len(players), rng, options),
            events_map=initial_events_map(rng, options),
            game_options=options,
        )
        for idx, player in enumerate(players):
            player.draw_cards(state, STARTING_HAND_SIZE + idx)
        state.replenish_meadow()

        state.add_game_log(f"Game created with {len(players)} players")
        logger.info("created game with %d players (seed=%s)", len(players), options.seed)
        return state
