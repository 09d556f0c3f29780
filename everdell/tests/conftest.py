"""
Pytest fixtures for Everdell tests.
"""

import pytest

from ..engine_core.game_input import GameInput
from ..engine_core.player import create_player
from ..engine_core.state import GameState
from ..games.base.cards import Card
from ..games.base.events import EVENT_REGISTRY
from ..games.base.locations import LOCATION_REGISTRY


@pytest.fixture
def fresh_game_state() -> GameState:
    """A freshly dealt 2-player game, exactly as setup leaves it."""
    players = [create_player("Player 1"), create_player("Player 2")]
    return GameState.initial_game_state(players, shuffle_deck=True, seed=7)


@pytest.fixture
def game_state(fresh_game_state: GameState) -> GameState:
    """
    2-player game with every location and event in play and empty hands.

    Tests add exactly the cards and resources they need.
    """
    state = fresh_game_state
    state.locations_map = {name: [] for name in LOCATION_REGISTRY}
    state.events_map = {name: None for name in EVENT_REGISTRY}
    for player in state.players:
        player.cards_in_hand = []
    return state


@pytest.fixture
def player_ids(game_state: GameState) -> tuple[str, str]:
    """(active player id, opponent id)."""
    return game_state.players[0].player_id, game_state.players[1].player_id


@pytest.fixture
def play_card():
    """Put a card in the active player's hand with its cost, then play it."""
    def _play(state: GameState, card_name, resources=None, **payment) -> GameState:
        player = state.get_active_player()
        player.cards_in_hand.append(card_name)
        if resources is None:
            resources = Card.from_name(card_name).base_cost
        player.gain_resources(resources)
        return state.next(GameInput.play_card(card_name, resources=resources, **payment))
    return _play


@pytest.fixture
def answer():
    """Answer the first pending input with the given client options."""
    def _answer(state: GameState, **client_options) -> GameState:
        assert state.pending_game_inputs, "nothing to answer"
        pending = state.pending_game_inputs[0]
        return state.next(pending.with_client_options(**client_options))
    return _answer
