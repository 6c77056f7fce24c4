"""
Legality, turn order and card token parsing.
"""

import pytest

from bhabhi_engine.cards import format_hand, parse_card, rank_value
from bhabhi_engine.errors import (
    INVALID_CARD, MUST_FOLLOW_SUIT, NO_ACTIVE_GAME, NOT_IN_HAND, NOT_SEATED, NOT_YOUR_TURN, GameError
)
from bhabhi_engine.engine import play_card
from bhabhi_engine.models import Card, Game, Phase
from bhabhi_engine.turns import advance_turn
from bhabhi_engine.validate import is_legal_play, validate_play

from helpers import cards, make_game


@pytest.mark.parametrize("token,expected", [
    ("QS", "QS"),
    ("qs", "QS"),
    ("10H", "10H"),
    ("10h", "10H"),
    ("TH", "10H"),
    ("td", "10D"),
    ("q h", "QH"),
    ("10-h", "10H"),
    ("aC", "AC"),
    ("2d", "2D"),
])
def test_parse_card(token, expected):
    assert str(parse_card(token)) == expected


@pytest.mark.parametrize("token", ["", "S", "1H", "11H", "QX", "ZZ", "JOKER", "QQS", "10", None])
def test_parse_card_rejects_malformed(token):
    with pytest.raises(GameError) as exc_info:
        parse_card(token)
    assert exc_info.value.code == INVALID_CARD


def test_rank_value_order():
    assert rank_value("2") == 0
    assert rank_value("10") == 8
    assert rank_value("A") == 12
    assert rank_value("K") > rank_value("Q") > rank_value("J") > rank_value("10")


def test_card_rejects_bad_values():
    with pytest.raises(ValueError):
        Card("1", "S")


def test_format_hand():
    assert format_hand(cards("AS 2C 10H 3C")) == "2C 3C 10H AS"
    assert format_hand([]) == "(empty)"


def test_leader_may_play_anything():
    game = make_game("2C 5H", "3C 4H")
    assert is_legal_play(game, 0, parse_card("5H")).valid


def test_must_follow_suit():
    """Holding the lead suit forces a follow."""
    game = make_game("2C", "3C 4H")
    game.lead_suit = "C"

    result = is_legal_play(game, 1, parse_card("4H"))
    assert not result.valid
    assert result.error_code == MUST_FOLLOW_SUIT
    assert "Clubs" in result.error_message

    assert is_legal_play(game, 1, parse_card("3C")).valid


def test_off_suit_allowed_once_lead_suit_gone():
    game = make_game("2C", "3C 4H")
    game.lead_suit = "C"
    game.players[1].hand.remove(parse_card("3C"))
    assert is_legal_play(game, 1, parse_card("4H")).valid


def test_not_in_hand():
    game = make_game("2C", "3C")
    result = is_legal_play(game, 0, parse_card("AS"))
    assert not result.valid
    assert result.error_code == NOT_IN_HAND


def test_turn_checked_before_legality():
    game = make_game("2C", "3C 4H")
    result = validate_play(game, 1, parse_card("AS"))
    assert result.error_code == NOT_YOUR_TURN


def test_validate_requires_playing_phase():
    game = make_game("2C", "3C")
    game.phase = Phase.LOBBY
    assert validate_play(game, 0, parse_card("2C")).error_code == NO_ACTIVE_GAME


def test_play_card_outside_round_uses_validation():
    """Phase and seat are rejected by validate_play, with nobody mentioned."""
    game = make_game("2C", "3C")
    game.phase = Phase.LOBBY
    result = play_card(game, game.players[0].player_id, parse_card("2C"))
    assert result.error_code == NO_ACTIVE_GAME
    assert result.error_message.startswith("No active Bhabhi round")
    assert result.mentions == []

    game = Game(room_id="room")
    assert play_card(game, "alice@s.whatsapp.net", parse_card("2C")).error_code == NO_ACTIVE_GAME

    game = make_game("2C", "3C")
    result = play_card(game, "mallory@s.whatsapp.net", parse_card("2C"))
    assert result.error_code == NOT_SEATED
    assert result.mentions == []


def test_rejected_play_changes_nothing():
    game = make_game("2C 3D", "3C 4H", turn_index=1)
    game.lead_suit = "D"
    before = (list(game.players[1].hand), list(game.trick), game.turn_index, game.version)

    result = play_card(game, game.players[0].player_id, parse_card("2C"))
    assert result.error_code == NOT_YOUR_TURN
    assert result.mentions == [game.players[1].player_id]
    assert (list(game.players[1].hand), list(game.trick), game.turn_index, game.version) == before


def test_advance_turn_skips_empty_seats():
    """4 seats with seat 2 empty: from seat 1 the turn goes to seat 3."""
    game = make_game("2C", "3C", "", "4C")
    assert advance_turn(game, 1) == 3


def test_advance_turn_wraps():
    game = make_game("2C", "3C", "4C")
    assert advance_turn(game, 2) == 0


def test_advance_turn_wraps_past_empty():
    game = make_game("", "3C", "4C", "")
    assert advance_turn(game, 2) == 1


def test_advance_turn_no_other_holder():
    game = make_game("2C", "", "")
    assert advance_turn(game, 0) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
