"""Bhabhi game engine: lobby, deal, play and round lifecycle."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .cards import format_card, parse_card
from .constants import MAX_NAME_LENGTH
from .errors import (
    ALREADY_JOINED, GAME_EXISTS, INSUFFICIENT_PLAYERS, NO_ACTIVE_GAME,
    NO_ACTIVE_LOBBY, NOT_SEATED, NOT_YOUR_TURN, ROOM_FULL, WRONG_PHASE, GameError, raise_error
)
from .models import Card, Game, Phase, Seat, TrickEntry
from .rules import RuleConfig, default_rules
from .shuffle import build_deck, deal_cards, leader_after, pick_dealer, shuffle_deck
from .store import GameStore, InMemoryGameStore
from .tricks import TrickOutcome, resolve_trick, trick_complete
from .turns import advance_turn
from .validate import NO_ROUND_MESSAGE, validate_play

logger = logging.getLogger(__name__)


ALLOWED_TRANSITIONS: Dict[Phase, Set[Phase]] = {
    Phase.LOBBY: {Phase.DEALING, Phase.ENDED},
    Phase.DEALING: {Phase.PLAYING, Phase.ENDED},
    Phase.PLAYING: {Phase.ENDED},
    Phase.ENDED: set(),
}


@dataclass
class RoundSummary:
    """Outcome of a finished round. The seat left holding cards loses."""
    holder_index: Optional[int] = None
    holder_name: Optional[str] = None
    holder_player_id: Optional[str] = None
    holder_card_count: int = 0

    @property
    def all_hands_empty(self) -> bool:
        return self.holder_index is None

    def describe(self) -> str:
        if self.all_hands_empty:
            return "All hands empty."
        return f"Last with cards: @{self.holder_name} ({self.holder_card_count})"


@dataclass
class ActionResult:
    """Result of a game command."""
    success: bool
    state: Optional[Game] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    detail: str = ""
    mentions: List[str] = field(default_factory=list)
    # Deal
    dealer_index: Optional[int] = None
    leader_index: Optional[int] = None
    # Play
    card: Optional[Card] = None
    table: List[TrickEntry] = field(default_factory=list)
    trick: Optional[TrickOutcome] = None
    next_turn: Optional[int] = None
    round_summary: Optional[RoundSummary] = None
    # Show hand
    hand: List[Card] = field(default_factory=list)

    @property
    def round_over(self) -> bool:
        return self.round_summary is not None

    @classmethod
    def ok(cls, state: Optional[Game], detail: str = "", **kwargs) -> 'ActionResult':
        return cls(success=True, state=state, detail=detail, **kwargs)

    @classmethod
    def fail(cls, error_code: str, error_message: str, state: Optional[Game] = None,
             mentions: Optional[List[str]] = None) -> 'ActionResult':
        return cls(
            success=False,
            state=state,
            error_code=error_code,
            error_message=error_message,
            detail=error_message,
            mentions=mentions or []
        )


def _transition(game: Game, target: Phase):
    if target not in ALLOWED_TRANSITIONS[game.phase]:
        raise_error(WRONG_PHASE, f"Cannot go from {game.phase.value} to {target.value}")
    game.phase = target


def _short_name(name: Optional[str], player_id: str) -> str:
    if name and name.strip():
        return name.strip()[:MAX_NAME_LENGTH]
    return player_id.split('@')[0] or 'player'


def new_game(room_id: str) -> Game:
    """Create a game in the lobby phase."""
    return Game(room_id=room_id)


def join_game(game: Game, player_id: str, name: Optional[str] = None,
              rules: RuleConfig = default_rules) -> ActionResult:
    """Seat a player. Only allowed in the lobby; joining twice is a no-op."""
    if game.phase != Phase.LOBBY:
        return ActionResult.fail(NO_ACTIVE_LOBBY, 'No Bhabhi lobby here. Start one with "!bhabhi new".', game)

    if game.seat_index(player_id) >= 0:
        return ActionResult.fail(ALREADY_JOINED, "You are already in.", game)

    if len(game.players) >= rules.max_players:
        return ActionResult.fail(ROOM_FULL, f"Game is full ({rules.max_players} players).", game)

    seat = Seat(player_id=player_id, name=_short_name(name, player_id))
    game.players.append(seat)
    game.version += 1
    logger.info(f"Room {game.room_id}: {seat.name} ({player_id}) joined, {len(game.players)} seated")

    return ActionResult.ok(
        game,
        f"{seat.name} joined",
        mentions=[p.player_id for p in game.players]
    )


def deal_game(game: Game, rules: RuleConfig = default_rules, seed: Optional[int] = None) -> ActionResult:
    """
    Shuffle and deal the full deck, pick the dealer and hand the lead to the
    seat after them. Either the whole deal happens or nothing changes.
    """
    if game.phase != Phase.LOBBY:
        return ActionResult.fail(WRONG_PHASE, f"Cannot deal now (phase = {game.phase.value}).", game)

    if len(game.players) < rules.min_players:
        return ActionResult.fail(
            INSUFFICIENT_PLAYERS,
            f'Need at least {rules.min_players} players to deal. Ask friends to "!join".',
            game
        )

    if seed is None:
        seed = rules.seed

    _transition(game, Phase.DEALING)

    deck = shuffle_deck(build_deck(), seed)
    deal_cards(deck, game.players)

    dealer = pick_dealer(len(game.players), seed)
    leader = leader_after(dealer, len(game.players))

    game.dealer_index = dealer
    game.turn_index = leader
    game.lead_suit = None
    game.trick = []
    game.trick_participants = []
    game.discard = []
    _transition(game, Phase.PLAYING)
    game.version += 1

    counts = ", ".join(f"{p.name}: {p.hand_count}" for p in game.players)
    game.log(f"Dealt {len(game.players)} players ({counts}). Dealer: {game.players[dealer].name}")
    logger.info(f"Room {game.room_id}: dealt to {len(game.players)} players, dealer seat {dealer}, leader seat {leader}")

    return ActionResult.ok(
        game,
        f"Dealt {len(game.players)} players",
        mentions=[p.player_id for p in game.players],
        dealer_index=dealer,
        leader_index=leader,
        next_turn=leader
    )


def _finish_round(game: Game) -> RoundSummary:
    holders = game.active_seats()
    summary = RoundSummary()
    if holders:
        seat = game.players[holders[0]]
        summary = RoundSummary(
            holder_index=holders[0],
            holder_name=seat.name,
            holder_player_id=seat.player_id,
            holder_card_count=seat.hand_count
        )
    _transition(game, Phase.ENDED)
    game.log(f"Round over. {summary.describe()}")
    logger.info(f"Room {game.room_id}: round over. {summary.describe()}")
    return summary


def play_card(game: Game, player_id: str, card: Card) -> ActionResult:
    """
    Play one card for player_id.

    Everything is validated before the game is touched. When the trick is
    complete it is resolved and the round-end check runs.
    """
    seat_index = game.seat_index(player_id)
    validation = validate_play(game, seat_index, card)
    if not validation.valid:
        mentions = []
        if validation.error_code == NOT_YOUR_TURN:
            mentions = [game.players[game.turn_index].player_id]
        return ActionResult.fail(validation.error_code, validation.error_message, game, mentions)

    seat = game.players[seat_index]

    if not game.trick:
        game.lead_suit = card.suit
        game.trick_participants = game.active_seats()

    seat.hand.remove(card)
    game.trick.append(TrickEntry(seat_index, card))
    game.version += 1
    game.log(f"{seat.name} played {format_card(card)}")
    table = list(game.trick)

    result = ActionResult.ok(
        game,
        f"{seat.name} played {format_card(card)}",
        mentions=[seat.player_id],
        card=card,
        table=table
    )

    if not trick_complete(game):
        game.turn_index = advance_turn(game, seat_index)
        result.next_turn = game.turn_index
        return result

    outcome = resolve_trick(game)
    result.trick = outcome
    if outcome.winning_card is not None:
        winner = game.players[outcome.winner_index]
        game.log(f"Trick won by {winner.name} with {format_card(outcome.winning_card)}")
        logger.info(f"Room {game.room_id}: trick won by seat {outcome.winner_index} with {outcome.winning_card}")

    if len(game.active_seats()) <= 1:
        result.round_summary = _finish_round(game)
        return result

    # A winner who just played their last card has got away; the lead passes on
    if not game.players[game.turn_index].hand:
        game.turn_index = advance_turn(game, game.turn_index)

    result.next_turn = game.turn_index
    return result


def end_game(game: Game) -> ActionResult:
    """Force the game to end from any phase."""
    if game.phase != Phase.ENDED:
        _transition(game, Phase.ENDED)
    game.version += 1
    game.log("Game ended.")
    return ActionResult.ok(game, "Game ended.")


class BhabhiEngine:
    """Command surface used by the chat router. Holds one game per room."""

    def __init__(self, store: Optional[GameStore] = None, rules: RuleConfig = default_rules):
        self.store = store if store is not None else InMemoryGameStore()
        self.rules = rules

    def get_game(self, room_id: str) -> Optional[Game]:
        return self.store.get(room_id)

    def create_lobby(self, room_id: str) -> ActionResult:
        existing = self.store.get(room_id)
        if existing is not None and existing.phase != Phase.ENDED:
            return ActionResult.fail(
                GAME_EXISTS,
                'A Bhabhi game already exists in this chat. Type "!bhabhi end" to end it, '
                'or "!bhabhi status" to view it.',
                existing
            )
        game = new_game(room_id)
        self.store.set(room_id, game)
        logger.info(f"Room {room_id}: lobby created")
        return ActionResult.ok(game, "Bhabhi lobby created!")

    def join(self, room_id: str, player_id: str, name: Optional[str] = None) -> ActionResult:
        game = self.store.get(room_id)
        if game is None:
            return ActionResult.fail(NO_ACTIVE_LOBBY, 'No Bhabhi lobby here. Start one with "!bhabhi new".')
        return join_game(game, player_id, name, self.rules)

    def deal(self, room_id: str, seed: Optional[int] = None) -> ActionResult:
        game = self.store.get(room_id)
        if game is None:
            return ActionResult.fail(NO_ACTIVE_LOBBY, 'No Bhabhi game here. Start with "!bhabhi new".')
        try:
            return deal_game(game, self.rules, seed)
        except GameError as e:
            logger.error(f"Room {room_id}: deal failed: {e}")
            return ActionResult.fail(e.code, e.message, game)

    def show_hand(self, room_id: str, player_id: str) -> ActionResult:
        game = self.store.get(room_id)
        if game is None:
            return ActionResult.fail(NO_ACTIVE_GAME, "No Bhabhi game here.")
        seat_index = game.seat_index(player_id)
        if seat_index < 0:
            return ActionResult.fail(NOT_SEATED, 'You are not seated in this game. Use "!join" in lobby.', game)
        seat = game.players[seat_index]
        return ActionResult.ok(game, f"{seat.name} has {seat.hand_count} cards", hand=list(seat.hand),
                               mentions=[seat.player_id])

    def play(self, room_id: str, player_id: str, card_token: str) -> ActionResult:
        game = self.store.get(room_id)
        if game is None:
            return ActionResult.fail(NO_ACTIVE_GAME, NO_ROUND_MESSAGE)
        try:
            card = parse_card(card_token)
        except GameError as e:
            return ActionResult.fail(e.code, e.message, game)

        result = play_card(game, player_id, card)
        if result.round_over:
            self.store.delete(room_id)
        return result

    def status(self, room_id: str) -> ActionResult:
        game = self.store.get(room_id)
        if game is None:
            return ActionResult.fail(NO_ACTIVE_GAME, "No Bhabhi game in this chat.")
        return ActionResult.ok(
            game,
            f"Phase: {game.phase.value}",
            mentions=[p.player_id for p in game.players],
            next_turn=game.turn_index if game.phase == Phase.PLAYING else None
        )

    def end(self, room_id: str) -> ActionResult:
        game = self.store.get(room_id)
        if game is None:
            return ActionResult.fail(NO_ACTIVE_GAME, "No Bhabhi game to end.")
        result = end_game(game)
        self.store.delete(room_id)
        logger.info(f"Room {room_id}: game ended by command")
        return result
