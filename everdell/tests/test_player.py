"""
Tests for Player bookkeeping.

Tests:
- City capacity and unique cards
- Hand limit
- Resource spending
- Payment validation and discounts
- Worker recall and season advance
"""

import pytest

from ..engine_core.errors import (
    IllegalActionError,
    InvalidInputError,
    InvariantError,
    OverpayError,
)
from ..engine_core.game_input import GameInput
from ..engine_core.player import Player, create_player
from ..engine_core.resources import parse_resources
from ..engine_core.types import CardName, ResourceType, Season

TWIG = ResourceType.TWIG
RESIN = ResourceType.RESIN
PEBBLE = ResourceType.PEBBLE
BERRY = ResourceType.BERRY


@pytest.fixture
def player():
    return create_player("Tester")


class TestCity:
    """Tests for adding cards to a city."""

    def test_fifteen_spaces(self, player):
        for _ in range(15):
            player.add_to_city(CardName.FARM)

        assert not player.can_add_to_city(CardName.FARM)
        with pytest.raises(IllegalActionError, match="Unable to add FARM"):
            player.add_to_city(CardName.FARM)

    def test_wanderer_and_ruins_ignore_full_city(self, player):
        for _ in range(15):
            player.add_to_city(CardName.FARM)

        assert player.can_add_to_city(CardName.WANDERER)
        assert player.can_add_to_city(CardName.RUINS)
        player.add_to_city(CardName.WANDERER)
        assert player.get_num_occupied_spaces() == 15

    def test_husband_and_wife_share_a_space(self, player):
        for _ in range(14):
            player.add_to_city(CardName.FARM)
        player.add_to_city(CardName.HUSBAND)

        assert player.get_num_occupied_spaces() == 15
        assert player.can_add_to_city(CardName.WIFE)
        assert not player.can_add_to_city(CardName.HUSBAND)

        player.add_to_city(CardName.WIFE)
        assert player.get_num_occupied_spaces() == 15

    def test_unique_cards(self, player):
        player.add_to_city(CardName.KING)

        assert not player.can_add_to_city(CardName.KING)
        assert player.can_add_to_city(CardName.QUEEN)

    def test_find_played_card(self, player):
        played = player.add_to_city(CardName.CHAPEL)
        snapshot = type(played).from_json(played.to_json())

        assert player.find_played_card(snapshot) is played

        snapshot.resources = {ResourceType.VP: 4}
        with pytest.raises(InvalidInputError, match="not in city"):
            player.find_played_card(snapshot)

    def test_removing_critter_frees_its_construction(self, game_state, player_ids):
        pid, _ = player_ids
        player = game_state.get_player(pid)
        farm = player.add_to_city(CardName.FARM)
        player.add_to_city(CardName.HUSBAND)
        player.use_construction_to_play_critter(CardName.FARM)

        player.remove_card_from_city(game_state, CardName.HUSBAND)

        assert farm.used_for_critter is False
        assert player.has_unused_by_critter_construction(CardName.FARM)

    def test_construction_stays_occupied_while_a_resident_remains(self, game_state, player_ids):
        pid, _ = player_ids
        player = game_state.get_player(pid)
        farm = player.add_to_city(CardName.FARM)
        player.add_to_city(CardName.HUSBAND)
        player.add_to_city(CardName.WIFE)
        player.use_construction_to_play_critter(CardName.FARM)

        player.remove_card_from_city(game_state, CardName.HUSBAND)

        assert farm.used_for_critter is True


class TestHand:
    """Tests for drawing and discarding."""

    def test_hand_limit_overflows_to_discard(self, game_state, player_ids):
        pid, _ = player_ids
        player = game_state.get_player(pid)
        player.cards_in_hand = [CardName.FARM] * 8

        player.add_card_to_hand(game_state, CardName.KING)

        assert len(player.cards_in_hand) == 8
        assert game_state.discard_pile.cards == [CardName.KING]

    def test_discard_requires_cards(self, game_state, player_ids):
        pid, _ = player_ids
        player = game_state.get_player(pid)
        player.cards_in_hand = [CardName.FARM]

        with pytest.raises(InvalidInputError, match="Unable to discard MINE"):
            player.discard_cards_from_hand(game_state, [CardName.FARM, CardName.MINE])
        assert player.cards_in_hand == [CardName.FARM]


class TestResources:
    """Tests for spending and gaining resources."""

    def test_spend(self, player):
        player.gain_resources({TWIG: 3, BERRY: 1})
        player.spend_resources({TWIG: 2})

        assert player.get_num_resources_by_type(TWIG) == 1
        assert player.get_num_resources() == 2

    def test_insufficient_leaves_player_untouched(self, player):
        player.gain_resources({TWIG: 3})

        with pytest.raises(InvalidInputError, match="Insufficient PEBBLE"):
            player.spend_resources({TWIG: 1, PEBBLE: 1})
        assert player.get_num_resources_by_type(TWIG) == 3

    def test_parse_resources(self):
        assert parse_resources({"TWIG": 2, "BERRY": 0, "RESIN": None}) == {TWIG: 2}

        with pytest.raises(InvalidInputError, match="Invalid count for TWIG"):
            parse_resources({"TWIG": True})
        with pytest.raises(InvalidInputError, match="Invalid count for BERRY"):
            parse_resources({"BERRY": -1})
        with pytest.raises(InvalidInputError, match="Cannot select VP"):
            parse_resources({"VP": 1}, allow_vp=False)


class TestPayment:
    """Tests for is_paid_resources_valid and validate_payment_options."""

    def test_exact_payment(self, player):
        assert player.is_paid_resources_valid({TWIG: 2, RESIN: 1}, {TWIG: 2, RESIN: 1})

    def test_short_payment(self, player):
        assert not player.is_paid_resources_valid({TWIG: 2}, {TWIG: 2, RESIN: 1})

    def test_overpay_raises(self, player):
        with pytest.raises(OverpayError, match="Cannot overpay"):
            player.is_paid_resources_valid({TWIG: 3, RESIN: 1}, {TWIG: 2, RESIN: 1})

    def test_overpay_allowed_for_affordability(self, player):
        assert player.is_paid_resources_valid(
            {TWIG: 3, RESIN: 1}, {TWIG: 2, RESIN: 1}, error_if_overpay=False
        )

    def test_berry_discount(self, player):
        assert player.is_paid_resources_valid({BERRY: 1}, {BERRY: 4}, BERRY)
        assert player.is_paid_resources_valid({}, {BERRY: 2}, BERRY)
        assert not player.is_paid_resources_valid({}, {BERRY: 4}, BERRY)

    def test_any_discount(self, player):
        cost = {TWIG: 2, RESIN: 3, PEBBLE: 3}
        assert player.is_paid_resources_valid({TWIG: 2, RESIN: 3}, cost, "ANY")
        assert not player.is_paid_resources_valid({TWIG: 2, RESIN: 2}, cost, "ANY")

    def test_any_discount_rejects_overpay(self, player):
        with pytest.raises(OverpayError):
            player.is_paid_resources_valid({TWIG: 2, RESIN: 1}, {TWIG: 2, RESIN: 1}, "ANY")

    def test_judge_swaps_one_resource(self, player):
        player.add_to_city(CardName.JUDGE)

        assert player.is_paid_resources_valid({TWIG: 2, PEBBLE: 1}, {TWIG: 2, RESIN: 1})
        assert not player.is_paid_resources_valid({TWIG: 1, PEBBLE: 1}, {TWIG: 2, RESIN: 1})

    def test_judge_without_card(self, player):
        assert not player.is_paid_resources_valid({TWIG: 2, PEBBLE: 1}, {TWIG: 2, RESIN: 1})

    def test_validate_reports_unowned_resources(self, player):
        game_input = GameInput.play_card(CardName.FARM, resources={TWIG: 2, RESIN: 1})

        assert player.validate_payment_options(game_input) == "Can't spend 2 TWIG"

    def test_free_critter_through_construction(self, player):
        player.add_to_city(CardName.FARM)
        game_input = GameInput.play_card(CardName.WIFE, resources={})

        assert player.can_afford_card(CardName.WIFE, is_meadow_card=False)
        assert player.validate_payment_options(game_input) is None

    def test_crane_only_for_constructions(self, player):
        player.add_to_city(CardName.CRANE)

        error = player.validate_payment_options(
            GameInput.play_card(CardName.WIFE, resources={}, card_to_use=CardName.CRANE)
        )
        assert error == "Invalid payment_options: Cannot use Crane on WIFE"

    def test_card_to_use_must_be_in_city(self, player):
        error = player.validate_payment_options(
            GameInput.play_card(CardName.FARM, resources={}, card_to_use=CardName.CRANE)
        )
        assert error == "Invalid payment_options: cannot use CRANE"


class TestWorkers:
    """Tests for worker recall and seasons."""

    def test_recall_with_workers_available(self, game_state, player_ids):
        pid, _ = player_ids
        with pytest.raises(InvariantError, match="Still have available workers"):
            game_state.get_player(pid).recall_workers(game_state)

    def test_cemetary_worker_stays(self, game_state, player_ids):
        from ..engine_core.game_input import WorkerPlacement
        from ..engine_core.types import LocationName

        pid, _ = player_ids
        player = game_state.get_player(pid)
        player.add_to_city(CardName.CEMETARY)
        player.place_worker_on_card(CardName.CEMETARY)
        player.place_worker_on_location(LocationName.BASIC_ONE_BERRY)
        game_state.locations_map[LocationName.BASIC_ONE_BERRY].append(pid)

        player.recall_workers(game_state)

        assert player.placed_workers == [WorkerPlacement(card=CardName.CEMETARY, card_owner_id=pid)]
        assert player.get_first_played_card(CardName.CEMETARY).workers == [pid]

    def test_next_season(self):
        player = Player(name="Seasons")
        assert player.next_season() == Season.SPRING
        assert player.num_workers == 3
        assert player.next_season() == Season.SUMMER
        assert player.num_workers == 4
        assert player.next_season() == Season.AUTUMN
        assert player.num_workers == 6

        with pytest.raises(IllegalActionError, match="No season after AUTUMN"):
            player.next_season()


class TestPlayerSerialization:
    """Tests for Player.to_json / from_json."""

    def test_round_trip(self, player):
        player.cards_in_hand = [CardName.FARM, CardName.KING]
        player.add_to_city(CardName.CHAPEL)
        player.gain_resources({TWIG: 2, ResourceType.VP: 1})

        restored = Player.from_json(player.to_json(include_private=True))

        assert restored == player

    def test_public_view(self, player):
        player.cards_in_hand = [CardName.FARM]
        data = player.to_json(include_private=False)

        assert data["cards_in_hand"] == []
        assert data["num_cards_in_hand"] == 1
        assert "player_secret" not in data
