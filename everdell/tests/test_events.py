"""
Tests for claiming basic and special events.
"""

import pytest

from ..engine_core.errors import IllegalActionError
from ..engine_core.game_input import GameInput, WorkerPlacement
from ..engine_core.types import (
    CardName,
    EventName,
    EventType,
    GameInputType,
    LocationName,
    ResourceType,
)
from ..games.base.events import EVENT_REGISTRY, Event

TWIG = ResourceType.TWIG
PEBBLE = ResourceType.PEBBLE
BERRY = ResourceType.BERRY
VP = ResourceType.VP


def _city(state, player_id, *card_names):
    player = state.get_player(player_id)
    for card_name in card_names:
        player.add_to_city(card_name)
    return player


def _claim(state, event_name):
    return state.next(GameInput.claim_event(event_name))


def _event_points(state, player_id, event_name):
    return Event.from_name(event_name).get_points(state, player_id)


class TestRegistry:
    """Tests for the event catalog."""

    def test_counts(self):
        assert len(EVENT_REGISTRY) == 20
        assert len(Event.by_type(EventType.BASIC)) == 4
        assert len(Event.by_type(EventType.SPECIAL)) == 16


class TestBasicEvents:
    """Basic events need cards of one color."""

    def test_claim(self, game_state, player_ids):
        pid, opponent_id = player_ids
        _city(game_state, pid, CardName.WANDERER, CardName.WANDERER, CardName.WANDERER)

        state = _claim(game_state, EventName.BASIC_THREE_TRAVELER)
        player = state.get_player(pid)

        assert state.events_map[EventName.BASIC_THREE_TRAVELER] == pid
        assert EventName.BASIC_THREE_TRAVELER in player.claimed_events
        assert WorkerPlacement(event=EventName.BASIC_THREE_TRAVELER) in player.placed_workers
        assert _event_points(state, pid, EventName.BASIC_THREE_TRAVELER) == 3
        assert state.active_player_id == opponent_id

    def test_not_enough_cards(self, game_state, player_ids):
        pid, _ = player_ids
        _city(game_state, pid, CardName.WANDERER, CardName.WANDERER)

        with pytest.raises(IllegalActionError, match="Need at least 3 TRAVELER cards"):
            _claim(game_state, EventName.BASIC_THREE_TRAVELER)

    def test_already_claimed(self, game_state, player_ids):
        pid, opponent_id = player_ids
        _city(game_state, pid, CardName.WANDERER, CardName.WANDERER, CardName.WANDERER)
        _city(game_state, opponent_id, CardName.WANDERER, CardName.WANDERER, CardName.WANDERER)

        state = _claim(game_state, EventName.BASIC_THREE_TRAVELER)

        with pytest.raises(IllegalActionError, match="already claimed"):
            _claim(state, EventName.BASIC_THREE_TRAVELER)

    def test_event_not_in_game(self, game_state, player_ids):
        pid, _ = player_ids
        _city(game_state, pid, CardName.WANDERER, CardName.WANDERER, CardName.WANDERER)
        del game_state.events_map[EventName.BASIC_THREE_TRAVELER]

        with pytest.raises(IllegalActionError, match="not part of the current game"):
            _claim(game_state, EventName.BASIC_THREE_TRAVELER)


class TestSpecialEvents:
    """Special events need two named cards, some prompt for more."""

    def test_missing_required_card(self, game_state, player_ids):
        pid, _ = player_ids
        _city(game_state, pid, CardName.POST_OFFICE)

        with pytest.raises(
            IllegalActionError,
            match="Need to have played SHOPKEEPER to claim event SPECIAL_A_BRILLIANT_MARKETING_PLAN",
        ):
            _claim(game_state, EventName.SPECIAL_A_BRILLIANT_MARKETING_PLAN)

    def test_everdell_games_needs_every_color(self, game_state):
        with pytest.raises(IllegalActionError, match="Need at least 2"):
            _claim(game_state, EventName.SPECIAL_THE_EVERDELL_GAMES)

    def test_marketing_plan(self, game_state, player_ids, answer):
        pid, opponent_id = player_ids
        player = _city(game_state, pid, CardName.SHOPKEEPER, CardName.POST_OFFICE)
        player.gain_resources({BERRY: 2, TWIG: 1})
        name = EventName.SPECIAL_A_BRILLIANT_MARKETING_PLAN

        state = _claim(game_state, name)
        assert state.pending_game_inputs[0].player_options == [opponent_id]

        state = answer(state, selected_player=opponent_id)
        assert state.pending_game_inputs[0].input_type == GameInputType.SELECT_RESOURCES

        state = answer(state, resources={"BERRY": 2})
        assert state.get_player(opponent_id).get_num_resources_by_type(BERRY) == 2
        assert state.pending_game_inputs[0].max_to_select == 1

        state = answer(state, selected_player=None)
        assert state.pending_game_inputs == []
        assert _event_points(state, pid, name) == 4
        assert state.get_player(pid).get_num_resources_by_type(TWIG) == 1

    def test_wee_run_city_recalls_worker(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.CHIP_SWEEP, CardName.CLOCK_TOWER)
        player.place_worker_on_location(LocationName.BASIC_ONE_BERRY)
        game_state.locations_map[LocationName.BASIC_ONE_BERRY].append(pid)
        name = EventName.SPECIAL_A_WEE_RUN_CITY

        state = _claim(game_state, name)
        options = state.pending_game_inputs[0].worker_options
        assert options == [WorkerPlacement(location=LocationName.BASIC_ONE_BERRY)]

        state = answer(state, selected_option=options[0].to_json())
        player = state.get_player(pid)
        assert player.placed_workers == [WorkerPlacement(event=name)]
        assert player.num_available_workers == 1
        assert state.locations_map[LocationName.BASIC_ONE_BERRY] == []
        assert _event_points(state, pid, name) == 4

    def test_evening_of_fireworks(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.LOOKOUT, CardName.MINER_MOLE)
        player.gain_resources({TWIG: 4})
        name = EventName.SPECIAL_AN_EVENING_OF_FIREWORKS

        state = _claim(game_state, name)
        assert state.pending_game_inputs[0].specific_resource == TWIG

        state = answer(state, resources={"TWIG": 3})
        assert state.get_player(pid).get_num_resources_by_type(TWIG) == 1
        assert _event_points(state, pid, name) == 6

    def test_ancient_scrolls(self, game_state, player_ids, answer):
        pid, _ = player_ids
        _city(game_state, pid, CardName.HISTORIAN, CardName.RUINS)
        game_state.deck.cards.extend([
            CardName.WIFE, CardName.KING, CardName.QUEEN, CardName.MINE, CardName.FARM,
        ])
        name = EventName.SPECIAL_ANCIENT_SCROLLS_DISCOVERED

        state = _claim(game_state, name)
        assert state.pending_game_inputs[0].card_options == [
            CardName.FARM, CardName.MINE, CardName.QUEEN, CardName.KING, CardName.WIFE,
        ]

        state = answer(state, selected_cards=["FARM", "MINE"])
        player = state.get_player(pid)
        assert player.cards_in_hand == [CardName.FARM, CardName.MINE]
        assert player.claimed_events[name].stored_cards == [
            CardName.QUEEN, CardName.KING, CardName.WIFE,
        ]
        assert _event_points(state, pid, name) == 3

    def test_capture_of_the_acorn_thieves(self, game_state, player_ids, answer):
        pid, _ = player_ids
        _city(game_state, pid, CardName.COURTHOUSE, CardName.RANGER, CardName.WIFE, CardName.HUSBAND)
        name = EventName.SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES

        state = _claim(game_state, name)
        options = state.pending_game_inputs[0].played_card_options
        assert [pc.card_name for pc in options] == [CardName.RANGER, CardName.WIFE, CardName.HUSBAND]

        state = answer(state, selected_cards=[
            pc for pc in options if pc.card_name in (CardName.WIFE, CardName.HUSBAND)
        ])
        player = state.get_player(pid)
        assert not player.has_card_in_city(CardName.WIFE)
        assert not player.has_card_in_city(CardName.HUSBAND)
        assert state.discard_pile.cards == []
        assert _event_points(state, pid, name) == 6

    def test_capture_of_the_acorn_thieves_frees_construction(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.COURTHOUSE, CardName.RANGER, CardName.FARM, CardName.HUSBAND)
        player.use_construction_to_play_critter(CardName.FARM)
        name = EventName.SPECIAL_CAPTURE_OF_THE_ACORN_THIEVES

        state = _claim(game_state, name)
        options = state.pending_game_inputs[0].played_card_options
        state = answer(state, selected_cards=[pc for pc in options if pc.card_name == CardName.HUSBAND])
        player = state.get_player(pid)

        assert not player.has_card_in_city(CardName.HUSBAND)
        assert player.get_first_played_card(CardName.FARM).used_for_critter is False

    def test_croak_wart_cure(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.UNDERTAKER, CardName.BARGE_TOAD)
        player.gain_resources({BERRY: 2})
        name = EventName.SPECIAL_CROAK_WART_CURE

        state = _claim(game_state, name)
        assert state.get_player(pid).get_num_resources_by_type(BERRY) == 0

        state = answer(state, selected_cards=state.pending_game_inputs[0].played_card_options)
        player = state.get_player(pid)
        assert list(player.iter_played_cards()) == []
        assert state.discard_pile.num_cards == 2
        assert _event_points(state, pid, name) == 6

    def test_croak_wart_cure_needs_berries(self, game_state, player_ids):
        pid, _ = player_ids
        _city(game_state, pid, CardName.UNDERTAKER, CardName.BARGE_TOAD)

        with pytest.raises(IllegalActionError, match="at least 2 BERRY"):
            _claim(game_state, EventName.SPECIAL_CROAK_WART_CURE)

    def test_flying_doctor_counts_every_city(self, game_state, player_ids):
        pid, opponent_id = player_ids
        _city(game_state, pid, CardName.DOCTOR, CardName.POSTAL_PIGEON, CardName.HUSBAND, CardName.WIFE)
        _city(game_state, opponent_id, CardName.HUSBAND, CardName.WIFE, CardName.WIFE)
        name = EventName.SPECIAL_FLYING_DOCTOR_SERVICE

        state = _claim(game_state, name)

        assert state.pending_game_inputs == []
        assert _event_points(state, pid, name) == 6

    def test_graduation_of_scholars(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.TEACHER, CardName.UNIVERSITY)
        player.cards_in_hand = [CardName.WIFE, CardName.HUSBAND, CardName.FARM]
        name = EventName.SPECIAL_GRADUATION_OF_SCHOLARS

        state = _claim(game_state, name)
        assert state.pending_game_inputs[0].card_options == [CardName.WIFE, CardName.HUSBAND]

        state = answer(state, selected_cards=["WIFE", "HUSBAND"])
        assert state.get_player(pid).cards_in_hand == [CardName.FARM]
        assert _event_points(state, pid, name) == 4

    def test_ministering_to_miscreants(self, game_state, player_ids):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.MONK, CardName.DUNGEON)
        player.get_first_played_card(CardName.DUNGEON).paired_cards = [CardName.WIFE]
        name = EventName.SPECIAL_MINISTERING_TO_MISCREANTS

        state = _claim(game_state, name)
        assert _event_points(state, pid, name) == 3

    def test_path_of_the_pilgrims(self, game_state, player_ids):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.MONASTERY, CardName.WANDERER)
        player.get_first_played_card(CardName.MONASTERY).workers = [pid]
        name = EventName.SPECIAL_PATH_OF_THE_PILGRIMS

        state = _claim(game_state, name)
        assert _event_points(state, pid, name) == 3

    def test_remembering_the_fallen(self, game_state, player_ids):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.CEMETARY, CardName.SHEPHERD)
        player.get_first_played_card(CardName.CEMETARY).workers = [pid]
        name = EventName.SPECIAL_REMEMBERING_THE_FALLEN

        state = _claim(game_state, name)
        assert _event_points(state, pid, name) == 3

    def test_performer_in_residence(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.INN, CardName.BARD)
        player.gain_resources({BERRY: 3})
        name = EventName.SPECIAL_PERFORMER_IN_RESIDENCE

        state = _claim(game_state, name)
        state = answer(state, resources={"BERRY": 3})

        assert state.get_player(pid).get_num_resources_by_type(BERRY) == 0
        assert _event_points(state, pid, name) == 6

    def test_pristine_chapel_ceiling(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.WOODCARVER, CardName.CHAPEL)
        player.get_first_played_card(CardName.CHAPEL).resources = {VP: 2}
        name = EventName.SPECIAL_PRISTINE_CHAPEL_CEILING

        state = _claim(game_state, name)
        assert len(state.get_player(pid).cards_in_hand) == 2
        assert state.pending_game_inputs[0].max_to_select == 2

        state = answer(state, resources={"TWIG": 2})
        assert state.get_player(pid).get_num_resources_by_type(TWIG) == 2
        assert _event_points(state, pid, name) == 4

    def test_tax_relief_runs_production(self, game_state, player_ids):
        pid, _ = player_ids
        _city(game_state, pid, CardName.JUDGE, CardName.QUEEN, CardName.FARM)
        name = EventName.SPECIAL_TAX_RELIEF

        state = _claim(game_state, name)

        assert state.get_player(pid).get_num_resources_by_type(BERRY) == 1
        assert _event_points(state, pid, name) == 3

    def test_under_new_management(self, game_state, player_ids, answer):
        pid, _ = player_ids
        player = _city(game_state, pid, CardName.PEDDLER, CardName.GENERAL_STORE)
        player.gain_resources({PEBBLE: 2, TWIG: 1})
        name = EventName.SPECIAL_UNDER_NEW_MANAGEMENT

        state = _claim(game_state, name)
        state = answer(state, resources={"PEBBLE": 2, "TWIG": 1})

        player = state.get_player(pid)
        assert player.get_num_resources() == 0
        assert player.claimed_events[name].stored_resources == {PEBBLE: 2, TWIG: 1}
        assert _event_points(state, pid, name) == 5
