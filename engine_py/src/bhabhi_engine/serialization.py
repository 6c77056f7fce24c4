"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, List, Optional

from .cards import format_card, format_hand, sort_hand
from .models import Game, Phase, TrickEntry


def sanitize_state(game: Game, viewer_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Sanitize game state for sending out of the engine.

    Args:
        game: Game to sanitize
        viewer_id: ID of the player viewing the state (to show their cards)

    Returns:
        Sanitized state dictionary safe for JSON transmission
    """
    sanitized = {
        "room_id": game.room_id,
        "version": game.version,
        "phase": game.phase.value,
        "turn": game.players[game.turn_index].player_id if game.phase == Phase.PLAYING else None,
        "dealer": game.players[game.dealer_index].player_id if game.dealer_index is not None else None,
        "lead_suit": game.lead_suit,
        "trick": serialize_trick(game, game.trick),
        "completed_tricks": len(game.discard),
        "log": list(game.game_log),
        "players": [],
    }

    for seat_index, seat in enumerate(game.players):
        sanitized_player = {
            "id": seat.player_id,
            "name": seat.name,
            "seat": seat_index,
            "hand_count": seat.hand_count,
        }

        # Show full hand only to the viewer
        if seat.player_id == viewer_id:
            sanitized_player["hand"] = [format_card(c) for c in sort_hand(seat.hand)]

        sanitized["players"].append(sanitized_player)

    return sanitized


def serialize_trick(game: Game, entries: List[TrickEntry]) -> List[Dict[str, Any]]:
    return [
        {"seat": entry.seat_index, "player": game.players[entry.seat_index].player_id,
         "card": format_card(entry.card)}
        for entry in entries
    ]


def format_trick_line(game: Game, entries: List[TrickEntry]) -> str:
    """Compact table line, e.g. "@alice:7D  @bob:AD"."""
    if not entries:
        return "No cards on table."
    parts = [f"@{game.players[e.seat_index].name}:{format_card(e.card)}" for e in entries]
    return "  ".join(parts)


def format_player_list(game: Game) -> str:
    if not game.players:
        return "(none)"
    return ", ".join(f"@{p.name}" for p in game.players)


def format_deal_counts(game: Game) -> str:
    lines = []
    for i, seat in enumerate(game.players):
        dealer = "(Dealer) " if i == game.dealer_index else ""
        leader = "➡️ " if game.phase == Phase.PLAYING and i == game.turn_index else ""
        lines.append(f"{dealer}{leader}@{seat.name}: {seat.hand_count}")
    return "\n".join(lines)


def format_status(game: Game) -> str:
    lines = [
        "Game: Bhabhi",
        f"Phase: {game.phase.value}",
        f"Players: {format_player_list(game)}",
    ]
    if game.phase == Phase.PLAYING:
        counts = ", ".join(f"{p.name}: {p.hand_count}" for p in game.players)
        lines.append(f"Cards: {counts}")
        lines.append(f"Table: {format_trick_line(game, game.trick)}")
        lines.append(f"Turn: @{game.players[game.turn_index].name}")
    else:
        lines.append('Commands: "!join", then host "!bdeal".')
    return "\n".join(lines)


def hand_text(game: Game, seat_index: int) -> str:
    return format_hand(game.players[seat_index].hand)
