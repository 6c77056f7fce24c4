"""
Per-room game registry.
"""

from typing import Dict, Optional, Protocol

from .models import Game


class GameStore(Protocol):
    """Keyed store holding at most one game per chat room."""

    def get(self, room_id: str) -> Optional[Game]: ...

    def set(self, room_id: str, game: Game) -> None: ...

    def delete(self, room_id: str) -> None: ...

    def __len__(self) -> int: ...


class InMemoryGameStore:
    """Game store backed by a dict. State is lost when the process exits."""

    def __init__(self):
        self._games: Dict[str, Game] = {}

    def get(self, room_id: str) -> Optional[Game]:
        return self._games.get(room_id)

    def set(self, room_id: str, game: Game) -> None:
        self._games[room_id] = game

    def delete(self, room_id: str) -> None:
        self._games.pop(room_id, None)

    def __len__(self) -> int:
        return len(self._games)
