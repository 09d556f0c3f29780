"""
Tests for worker placement locations.

Tests:
- Basic locations and their occupancy
- Haven and journeys
- Forest locations, including the ones that prompt for choices
"""

import pytest

from ..engine_core.errors import IllegalActionError, InvalidInputError
from ..engine_core.game_input import GameInput
from ..engine_core.types import (
    CardName,
    GameInputType,
    LocationName,
    LocationType,
    ResourceType,
    Season,
)
from ..games.base.locations import LOCATION_REGISTRY, Location

TWIG = ResourceType.TWIG
RESIN = ResourceType.RESIN
PEBBLE = ResourceType.PEBBLE
BERRY = ResourceType.BERRY
VP = ResourceType.VP


def _place(state, location_name):
    return state.next(GameInput.place_worker(location_name))


class TestRegistry:
    """Tests for the location catalog."""

    def test_all_locations_registered(self):
        assert set(LOCATION_REGISTRY) == set(LocationName)

    def test_by_type(self):
        assert len(Location.by_type(LocationType.BASIC)) == 8
        assert len(Location.by_type(LocationType.JOURNEY)) == 4
        assert len(Location.by_type(LocationType.FOREST)) == 11
        assert Location.by_type(LocationType.HAVEN) == [LocationName.HAVEN]


class TestBasicLocations:
    """Fixed-gain spaces."""

    @pytest.mark.parametrize("location_name,resources,num_cards", [
        (LocationName.BASIC_ONE_BERRY, {BERRY: 1}, 0),
        (LocationName.BASIC_ONE_BERRY_AND_ONE_CARD, {BERRY: 1}, 1),
        (LocationName.BASIC_ONE_RESIN_AND_ONE_CARD, {RESIN: 1}, 1),
        (LocationName.BASIC_ONE_STONE, {PEBBLE: 1}, 0),
        (LocationName.BASIC_THREE_TWIGS, {TWIG: 3}, 0),
        (LocationName.BASIC_TWO_CARDS_AND_ONE_VP, {VP: 1}, 2),
        (LocationName.BASIC_TWO_RESIN, {RESIN: 2}, 0),
        (LocationName.BASIC_TWO_TWIGS_AND_ONE_CARD, {TWIG: 2}, 1),
    ])
    def test_gain(self, game_state, player_ids, location_name, resources, num_cards):
        pid, _ = player_ids
        state = _place(game_state, location_name)
        player = state.get_player(pid)

        for resource_type, count in resources.items():
            assert player.get_num_resources_by_type(resource_type) == count
        assert len(player.cards_in_hand) == num_cards
        assert state.locations_map[location_name] == [pid]

    def test_exclusive_location_closes(self, game_state):
        state = _place(game_state, LocationName.BASIC_TWO_RESIN)

        with pytest.raises(IllegalActionError, match="already occupied"):
            _place(state, LocationName.BASIC_TWO_RESIN)


class TestHaven:
    """Discard two cards for each resource."""

    def test_discard_for_resources(self, game_state, player_ids, answer):
        pid, _ = player_ids
        game_state.get_player(pid).cards_in_hand = [
            CardName.FARM, CardName.MINE, CardName.WIFE, CardName.KING,
        ]

        state = _place(game_state, LocationName.HAVEN)
        assert state.pending_game_inputs[0].max_to_select == 4

        state = answer(state, cards_to_discard=["FARM", "MINE", "WIFE", "KING"])
        assert state.pending_game_inputs[0].max_to_select == 2

        state = answer(state, resources={"TWIG": 1, "BERRY": 1})
        player = state.get_player(pid)
        assert player.cards_in_hand == []
        assert player.get_num_resources_by_type(TWIG) == 1
        assert player.get_num_resources_by_type(BERRY) == 1
        assert state.discard_pile.num_cards == 4

    def test_single_card_gains_nothing(self, game_state, player_ids, answer):
        pid, _ = player_ids
        game_state.get_player(pid).cards_in_hand = [CardName.FARM]

        state = _place(game_state, LocationName.HAVEN)
        state = answer(state, cards_to_discard=["FARM"])

        assert state.pending_game_inputs == []
        assert state.get_player(pid).get_num_resources() == 0

    def test_empty_hand_asks_nothing(self, game_state):
        state = _place(game_state, LocationName.HAVEN)
        assert state.pending_game_inputs == []


class TestJourneys:
    """Journeys need AUTUMN and enough cards."""

    def test_only_in_autumn(self, game_state, player_ids):
        pid, _ = player_ids
        game_state.get_player(pid).cards_in_hand = [CardName.FARM] * 5

        with pytest.raises(IllegalActionError, match="Can only go on a journey in AUTUMN"):
            _place(game_state, LocationName.JOURNEY_FIVE)

    def test_needs_enough_cards(self, game_state, player_ids):
        pid, _ = player_ids
        player = game_state.get_player(pid)
        player.current_season = Season.AUTUMN
        player.cards_in_hand = [CardName.FARM] * 4

        with pytest.raises(IllegalActionError, match="Insufficient cards for journey"):
            _place(game_state, LocationName.JOURNEY_FIVE)

    def test_journey_five(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = game_state.get_player(pid)
        player.current_season = Season.AUTUMN
        player.cards_in_hand = [CardName.FARM] * 5

        state = _place(game_state, LocationName.JOURNEY_FIVE)
        pending = state.pending_game_inputs[0]
        assert pending.input_type == GameInputType.DISCARD_CARDS
        assert pending.min_to_select == pending.max_to_select == 5

        with pytest.raises(InvalidInputError, match="too few"):
            answer(state, cards_to_discard=["FARM"] * 4)

        state = answer(state, cards_to_discard=["FARM"] * 5)
        player = state.get_player(pid)
        assert player.get_num_resources_by_type(VP) == 5
        assert player.cards_in_hand == []


class TestForestLocations:
    """Forest spaces."""

    def test_one_worker_per_forest_space_with_two_players(self, game_state):
        state = _place(game_state, LocationName.FOREST_THREE_BERRY)

        with pytest.raises(IllegalActionError, match="already occupied"):
            _place(state, LocationName.FOREST_THREE_BERRY)

    def test_fixed_gain(self, game_state, player_ids):
        pid, _ = player_ids
        state = _place(game_state, LocationName.FOREST_ONE_PEBBLE_THREE_CARD)
        player = state.get_player(pid)

        assert player.get_num_resources_by_type(PEBBLE) == 1
        assert len(player.cards_in_hand) == 3

    def test_two_wild(self, game_state, player_ids, answer):
        pid, _ = player_ids
        state = _place(game_state, LocationName.FOREST_TWO_WILD)

        with pytest.raises(InvalidInputError, match="too few resources"):
            answer(state, resources={"TWIG": 1})

        state = answer(state, resources={"PEBBLE": 2})
        assert state.get_player(pid).get_num_resources_by_type(PEBBLE) == 2

    def test_boolean_counts_rejected(self, game_state, answer):
        state = _place(game_state, LocationName.FOREST_TWO_WILD)

        with pytest.raises(InvalidInputError, match="Invalid count for PEBBLE"):
            answer(state, resources={"PEBBLE": True, "TWIG": True})

    def test_two_cards_one_wild(self, game_state, player_ids, answer):
        pid, _ = player_ids
        state = _place(game_state, LocationName.FOREST_TWO_CARDS_ONE_WILD)
        assert len(state.get_player(pid).cards_in_hand) == 2

        state = answer(state, resources={"RESIN": 1})
        assert state.get_player(pid).get_num_resources_by_type(RESIN) == 1

    def test_copy_basic_location(self, game_state, player_ids, answer):
        pid, _ = player_ids
        state = _place(game_state, LocationName.FOREST_COPY_BASIC_ONE_CARD)
        assert len(state.get_player(pid).cards_in_hand) == 1
        assert LocationName.BASIC_TWO_RESIN in state.pending_game_inputs[0].location_options

        state = answer(state, selected_location="BASIC_TWO_RESIN")
        assert state.get_player(pid).get_num_resources_by_type(RESIN) == 2
        assert state.locations_map[LocationName.BASIC_TWO_RESIN] == []

    def test_copy_rejects_forest_location(self, game_state, answer):
        state = _place(game_state, LocationName.FOREST_COPY_BASIC_ONE_CARD)

        with pytest.raises(InvalidInputError, match="not a valid option"):
            answer(state, selected_location="FOREST_THREE_BERRY")

    def test_discard_any_then_draw_two_per_card(self, game_state, player_ids, answer):
        pid, _ = player_ids
        game_state.get_player(pid).cards_in_hand = [CardName.FARM, CardName.MINE]

        state = _place(game_state, LocationName.FOREST_DISCARD_ANY_THEN_DRAW_TWO_PER_CARD)
        state = answer(state, cards_to_discard=["FARM", "MINE"])

        assert len(state.get_player(pid).cards_in_hand) == 4

    def test_discard_up_to_three_for_wild(self, game_state, player_ids, answer):
        pid, _ = player_ids
        game_state.get_player(pid).cards_in_hand = [
            CardName.FARM, CardName.MINE, CardName.WIFE, CardName.KING,
        ]
        location_name = LocationName.FOREST_DISCARD_UP_TO_THREE_CARDS_TO_GAIN_WILD_PER_CARD

        state = _place(game_state, location_name)
        assert state.pending_game_inputs[0].max_to_select == 3

        state = answer(state, cards_to_discard=["FARM", "MINE", "WIFE"])
        state = answer(state, resources={"PEBBLE": 3})
        player = state.get_player(pid)
        assert player.get_num_resources_by_type(PEBBLE) == 3
        assert player.cards_in_hand == [CardName.KING]

    def test_draw_two_meadow_play_one_for_one_less(self, game_state, player_ids, answer):
        pid, _ = player_ids
        game_state.get_player(pid).gain_resources({TWIG: 2})
        game_state.meadow_cards = [
            CardName.FARM, CardName.MINE, CardName.KING, CardName.QUEEN,
            CardName.CASTLE, CardName.PALACE, CardName.WIFE, CardName.HUSBAND,
        ]

        state = _place(game_state, LocationName.FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS)
        state = answer(state, selected_cards=["FARM", "MINE"])
        assert len(state.meadow_cards) == 8

        pending = state.pending_game_inputs[0]
        assert pending.input_type == GameInputType.SELECT_PAYMENT_FOR_CARD
        assert pending.card_options == [CardName.FARM]

        state = answer(state, card="FARM", payment_options={"resources": {"TWIG": 2}})
        player = state.get_player(pid)
        assert player.has_card_in_city(CardName.FARM)
        assert player.cards_in_hand == [CardName.MINE]
        assert player.get_num_resources_by_type(TWIG) == 0
        assert player.get_num_resources_by_type(BERRY) == 1

    def test_draw_two_meadow_may_skip_playing(self, game_state, player_ids, answer):
        pid, _ = player_ids
        game_state.get_player(pid).gain_resources({TWIG: 2})
        game_state.meadow_cards = [
            CardName.FARM, CardName.MINE, CardName.KING, CardName.QUEEN,
            CardName.CASTLE, CardName.PALACE, CardName.WIFE, CardName.HUSBAND,
        ]

        state = _place(game_state, LocationName.FOREST_DRAW_TWO_MEADOW_PLAY_ONE_FOR_ONE_LESS)
        state = answer(state, selected_cards=["FARM", "MINE"])
        state = answer(state, card=None)

        player = state.get_player(pid)
        assert sorted(player.cards_in_hand) == sorted([CardName.FARM, CardName.MINE])
        assert player.get_num_resources_by_type(TWIG) == 2
