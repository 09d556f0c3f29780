"""
Tests for the API layer.

Tests:
- GameService methods
- Request/response validation
- Session lifecycle and snapshots
- Error codes
"""

import pytest
from pydantic import ValidationError

from ..api import (
    CreateGameRequest,
    ErrorCode,
    GameInputModel,
    GameService,
)
from ..engine_core.game_input import GameInput
from ..engine_core.types import CardName, GameInputType, LocationName


PLACE_ON_BERRY = {"input_type": "PLACE_WORKER", "location": "BASIC_ONE_BERRY"}
PLACE_ON_STONE = {"input_type": "PLACE_WORKER", "location": "BASIC_ONE_STONE"}


@pytest.fixture
def service():
    """A fresh service with no games."""
    return GameService()


@pytest.fixture
def game_id(service):
    """Id of a seeded 2-player game."""
    result = service.create_game({"player_names": ["Ann", "Bo"], "seed": 3})
    assert result.success
    return result.data.game_id


class TestCreateGame:
    """Tests for GameService.create_game."""

    def test_create(self, service):
        """Creating a game returns its initial private state."""
        result = service.create_game(CreateGameRequest(player_names=["Ann", "Bo"], seed=3))

        assert result.success
        data = result.data
        assert data.game_state_id == 1
        assert data.pending_input_count == 0
        assert [p["name"] for p in data.state["players"]] == ["Ann", "Bo"]
        assert len(data.state["players"][0]["cards_in_hand"]) == 5
        assert data.active_player_id == data.state["players"][0]["player_id"]

    def test_too_few_players(self, service):
        """A single player is rejected by the schema."""
        result = service.create_game({"player_names": ["Solo"]})

        assert not result.success
        assert result.error_code == ErrorCode.VALIDATION_ERROR
        assert result.to_error_response().error_code == ErrorCode.VALIDATION_ERROR

    def test_same_seed_same_game(self, service):
        """Seeded games deal identical hands."""
        first = service.create_game({"player_names": ["Ann", "Bo"], "seed": 11})
        second = service.create_game({"player_names": ["Ann", "Bo"], "seed": 11})

        assert first.data.game_id != second.data.game_id
        assert (
            first.data.state["players"][0]["cards_in_hand"]
            == second.data.state["players"][0]["cards_in_hand"]
        )
        assert first.data.state["meadow_cards"] == second.data.state["meadow_cards"]


class TestApplyInput:
    """Tests for GameService.apply_input."""

    def test_place_worker(self, service, game_id):
        """A valid input advances the game and records a snapshot."""
        before = service.get_state(game_id).data

        result = service.apply_input(game_id, PLACE_ON_BERRY)

        assert result.success
        assert result.data.game_state_id == 2
        assert result.data.active_player_id != before.active_player_id
        assert service.session_manager.get_session(game_id).num_snapshots == 2

    def test_illegal_action(self, service, game_id):
        """Engine errors come back with their error code and leave the game alone."""
        assert service.apply_input(game_id, PLACE_ON_STONE).success

        result = service.apply_input(game_id, PLACE_ON_STONE)

        assert not result.success
        assert result.error_code == ErrorCode.ILLEGAL_ACTION
        assert "already occupied" in result.error
        assert service.get_state(game_id).data.game_state_id == 2

    def test_unknown_input_type(self, service, game_id):
        """Payloads that fail the schema are validation errors."""
        result = service.apply_input(game_id, {"input_type": "TAKE_EVERYTHING"})

        assert not result.success
        assert result.error_code == ErrorCode.VALIDATION_ERROR

    def test_unknown_field(self, service, game_id):
        """Extra fields are rejected."""
        result = service.apply_input(game_id, {**PLACE_ON_BERRY, "cheat": True})

        assert result.error_code == ErrorCode.VALIDATION_ERROR

    def test_unmatched_continuation(self, service, game_id):
        """Answering a prompt that was never asked is an invalid input."""
        result = service.apply_input(game_id, {
            "input_type": "SELECT_CARDS",
            "card_context": "TEACHER",
            "client_options": {"selected_cards": ["FARM"]},
        })

        assert result.error_code == ErrorCode.INVALID_INPUT

    def test_missing_game(self, service):
        result = service.apply_input("missing", PLACE_ON_BERRY)

        assert result.error_code == ErrorCode.GAME_NOT_FOUND


class TestQueries:
    """Tests for read-only service calls."""

    def test_get_state_hides_hands(self, service, game_id):
        """Public state does not show hands."""
        state = service.get_state(game_id).data.state

        assert all(p["cards_in_hand"] == [] for p in state["players"])
        assert state["players"][0]["num_cards_in_hand"] == 5

    def test_possible_inputs(self, service, game_id):
        """The active player may place a worker on any open basic location."""
        result = service.get_possible_inputs(game_id)

        assert result.success
        placements = [
            model.location for model in result.data.inputs
            if model.input_type == GameInputType.PLACE_WORKER
        ]
        assert LocationName.BASIC_ONE_BERRY in placements
        assert LocationName.BASIC_ONE_STONE in placements

    def test_scores(self, service, game_id):
        result = service.get_scores(game_id)

        assert result.success
        assert result.data.is_game_over is False
        assert [score.name for score in result.data.scores] == ["Ann", "Bo"]
        assert all(score.points == 0 for score in result.data.scores)

    def test_missing_game(self, service):
        assert service.get_state("missing").error_code == ErrorCode.GAME_NOT_FOUND
        assert service.get_possible_inputs("missing").error_code == ErrorCode.GAME_NOT_FOUND
        assert service.get_scores("missing").error_code == ErrorCode.GAME_NOT_FOUND


class TestSessions:
    """Tests for deleting, exporting and loading games."""

    def test_delete(self, service, game_id):
        assert service.delete_game(game_id).success
        assert service.get_state(game_id).error_code == ErrorCode.GAME_NOT_FOUND
        assert service.delete_game(game_id).error_code == ErrorCode.GAME_NOT_FOUND

    def test_export_and_load(self, service, game_id):
        """A snapshot exported from one service can continue in another."""
        service.apply_input(game_id, PLACE_ON_BERRY)
        snapshot = service.export_game(game_id)

        other = GameService()
        other.load_game(game_id, snapshot)

        assert other.get_state(game_id).data.game_state_id == 2
        assert other.apply_input(game_id, PLACE_ON_BERRY).data.game_state_id == 3

    def test_session_returns_fresh_state(self, service, game_id):
        """Mutating a returned GameState does not touch the stored snapshot."""
        session = service.session_manager.get_session(game_id)
        game_state = session.game_state()
        game_state.players[0].cards_in_hand.clear()

        assert len(session.game_state().players[0].cards_in_hand) == 5


class TestGameInputModel:
    """Tests for the GameInput schema."""

    def test_round_trip(self):
        """Engine inputs survive conversion to the schema and back."""
        game_input = GameInput.play_card(CardName.FARM, resources={})

        model = GameInputModel.from_game_input(game_input)

        assert model.input_type == GameInputType.PLAY_CARD
        assert model.to_game_input() == game_input

    def test_negative_selection_count(self):
        with pytest.raises(ValidationError):
            GameInputModel(input_type=GameInputType.SELECT_CARDS, max_to_select=-1)

    def test_create_request_limits(self):
        with pytest.raises(ValidationError):
            CreateGameRequest(player_names=["A", "B", "C", "D", "E"])
        with pytest.raises(ValidationError):
            CreateGameRequest(player_names=["A", "B"], num_special_events=17)
