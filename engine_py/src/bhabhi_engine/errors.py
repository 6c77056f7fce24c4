# engine_py/src/bhabhi_engine/errors.py

class GameError(Exception):
    """Base exception for game-related errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class TransportError(Exception):
    """Raised by a transport when a message could not be delivered."""


# Specific error codes
NO_ACTIVE_LOBBY = "NO_ACTIVE_LOBBY"
NO_ACTIVE_GAME = "NO_ACTIVE_GAME"
GAME_EXISTS = "GAME_EXISTS"
ALREADY_JOINED = "ALREADY_JOINED"
INSUFFICIENT_PLAYERS = "INSUFFICIENT_PLAYERS"
ROOM_FULL = "ROOM_FULL"
WRONG_PHASE = "WRONG_PHASE"
INVALID_CARD = "INVALID_CARD"
NOT_SEATED = "NOT_SEATED"
NOT_YOUR_TURN = "NOT_YOUR_TURN"
NOT_IN_HAND = "NOT_IN_HAND"
MUST_FOLLOW_SUIT = "MUST_FOLLOW_SUIT"
DIRECT_MESSAGE_FAILED = "DIRECT_MESSAGE_FAILED"
INTERNAL_ERROR = "INTERNAL_ERROR"

# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise GameError(code, message)
