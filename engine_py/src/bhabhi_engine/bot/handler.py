"""
Routes chat messages to the game engine and renders results as chat messages.
"""

import logging
from typing import Optional

from ..engine import ActionResult, BhabhiEngine
from ..errors import (
    DIRECT_MESSAGE_FAILED, INTERNAL_ERROR, MUST_FOLLOW_SUIT, NOT_IN_HAND, TransportError
)
from ..models import Game, Seat
from ..serialization import (
    format_deal_counts, format_player_list, format_status, format_trick_line, hand_text
)
from .commands import Command, CommandType, get_help_text, parse_command
from .events import InboundMessage, room_message
from .identity import ChatIdentityResolver, IdentityResolver
from .transport import Transport

logger = logging.getLogger(__name__)


class GameCommandHandler:
    """Handles one inbound chat message at a time."""

    def __init__(self, engine: BhabhiEngine, transport: Transport,
                 resolver: Optional[IdentityResolver] = None):
        self.engine = engine
        self.transport = transport
        self.resolver = resolver if resolver is not None else ChatIdentityResolver()
        self.prefix = engine.rules.command_prefix

    async def handle(self, message: InboundMessage) -> bool:
        """
        Handle a message. Returns False if the text is not a game command,
        so an outer router can try its own commands.
        """
        command = parse_command(message.text, self.prefix)
        if command is None:
            return False

        try:
            await self._dispatch(command, message)
        except Exception:
            logger.exception(f"[{INTERNAL_ERROR}] Error handling {command.type.value} in room {message.room_id}")
            await self.transport.send_to_room(message.room_id, "Something went wrong handling that command.")
        return True

    async def _dispatch(self, command: Command, message: InboundMessage):
        room_id = message.room_id

        if command.type == CommandType.HELP:
            await self.transport.send_to_room(room_id, get_help_text(self.prefix))
        elif command.type == CommandType.NEW:
            await self.handle_new(room_id)
        elif command.type == CommandType.STATUS:
            await self.handle_status(room_id)
        elif command.type == CommandType.END:
            await self.handle_end(room_id)
        elif command.type == CommandType.DEAL:
            await self.handle_deal(room_id)
        else:
            player_id = self.resolver.resolve(message)
            if not player_id:
                await self.transport.send_to_room(
                    room_id, f'Could not detect who you are. Try sending "{self.prefix}{command.type.value}" again.'
                )
                return
            if command.type == CommandType.JOIN:
                await self.handle_join(room_id, player_id, message.push_name)
            elif command.type == CommandType.HAND:
                await self.handle_hand(room_id, player_id)
            elif command.type == CommandType.PLAY:
                await self.handle_play(room_id, player_id, command.arg)
            else:
                raise ValueError(f"Unhandled command: {command.type}")

    async def _reply_error(self, room_id: str, result: ActionResult):
        text = result.error_message
        if result.error_code in (NOT_IN_HAND, MUST_FOLLOW_SUIT):
            text = f"Illegal move: {text}"
        await self.transport.send_to_room(room_id, text, result.mentions)

    async def handle_new(self, room_id: str):
        result = self.engine.create_lobby(room_id)
        if not result.success:
            await self._reply_error(room_id, result)
            return
        await self.transport.send_to_room(
            room_id,
            f'🃏 Bhabhi lobby created!\nPlayers: (none)\n'
            f'Join with "{self.prefix}join". When ready, host can type "{self.prefix}bdeal" to deal.'
        )

    async def handle_join(self, room_id: str, player_id: str, name: Optional[str]):
        result = self.engine.join(room_id, player_id, name)
        if not result.success:
            await self._reply_error(room_id, result)
            return
        game = result.state
        await self.transport.send_to_room(
            room_id,
            f'Joined! Current players: {format_player_list(game)}\n'
            f'Host can type "{self.prefix}bdeal" when ready.',
            result.mentions
        )

    async def handle_status(self, room_id: str):
        result = self.engine.status(room_id)
        if not result.success:
            await self._reply_error(room_id, result)
            return
        await self.transport.send_to_room(room_id, format_status(result.state), result.mentions)

    async def handle_end(self, room_id: str):
        result = self.engine.end(room_id)
        if not result.success:
            await self._reply_error(room_id, result)
            return
        await self.transport.send_to_room(room_id, "Game ended.")

    async def handle_deal(self, room_id: str):
        result = self.engine.deal(room_id)
        if not result.success:
            await self._reply_error(room_id, result)
            return
        game = result.state

        if self.engine.rules.dm_hands_on_deal:
            # One at a time to stay gentle on rate limits
            for seat_index, seat in enumerate(game.players):
                await self._dm_hand_after_deal(room_id, game, seat_index, seat)

        leader = game.players[result.leader_index]
        await self.transport.send_to_room(
            room_id,
            f"🃏 Dealt {len(game.players)} players.\n{format_deal_counts(game)}\n\nTurn: @{leader.name}",
            result.mentions
        )

    async def _send_hand(self, room_id: str, seat: Seat, text: str, failure_text: str) -> bool:
        """
        DM a hand. The room gets `failure_text` if the DM fails, either
        right away or later through the bridge. Returns True only once the
        DM is known to be delivered.
        """
        fallback = room_message(room_id, failure_text, [seat.player_id])
        try:
            return await self.transport.send_direct(seat.player_id, text, fallback)
        except TransportError as e:
            logger.error(f"[{DIRECT_MESSAGE_FAILED}] room {room_id}, player {seat.player_id}: {e}")
            await self.transport.send_to_room(room_id, fallback.text, fallback.mentions)
            return False

    async def _dm_hand_after_deal(self, room_id: str, game: Game, seat_index: int, seat: Seat):
        delivered = await self._send_hand(
            room_id,
            seat,
            f"Your Bhabhi hand:\n{hand_text(game, seat_index)}\n\n(Play happens in the group.)",
            f'⚠️ Could not DM @{seat.name}. Please type "{self.prefix}hand" and I\'ll DM your cards.'
        )
        if delivered:
            await self.transport.send_to_room(
                room_id,
                f'✅ DM sent to @{seat.name}. If you don\'t see it, send me "{self.prefix}hand".',
                [seat.player_id]
            )

    async def handle_hand(self, room_id: str, player_id: str):
        result = self.engine.show_hand(room_id, player_id)
        if not result.success:
            await self._reply_error(room_id, result)
            return
        game = result.state
        seat_index = game.seat_index(player_id)
        seat = game.players[seat_index]
        await self._send_hand(
            room_id,
            seat,
            f"Your hand:\n{hand_text(game, seat_index)}",
            f'⚠️ Could not DM @{seat.name}. Make sure I can message you, '
            f'then send "{self.prefix}hand" again.'
        )

    async def handle_play(self, room_id: str, player_id: str, card_token: Optional[str]):
        if not card_token:
            p = self.prefix
            await self.transport.send_to_room(
                room_id, f"Usage: {p}play <card>   e.g., {p}play 7D or {p}play 10H or {p}play QS"
            )
            return

        result = self.engine.play(room_id, player_id, card_token)
        if not result.success:
            await self._reply_error(room_id, result)
            return

        game = result.state
        seat = game.players[result.table[-1].seat_index]
        await self.transport.send_to_room(
            room_id,
            f"@{seat.name} played {result.card}\nTable: {format_trick_line(game, result.table)}",
            [seat.player_id]
        )

        if result.trick is not None and result.trick.winning_card is not None:
            winner = game.players[result.trick.winner_index]
            await self.transport.send_to_room(
                room_id,
                f"Trick won by @{winner.name} with {result.trick.winning_card}",
                [winner.player_id]
            )

        if result.round_over:
            summary = result.round_summary
            mentions = [summary.holder_player_id] if summary.holder_player_id else []
            await self.transport.send_to_room(
                room_id,
                f'Round over. {summary.describe()}\nType "{self.prefix}bhabhi new" for a new lobby.',
                mentions
            )
            return

        next_seat = game.players[result.next_turn]
        await self.transport.send_to_room(room_id, f"Turn: @{next_seat.name}", [next_seat.player_id])
