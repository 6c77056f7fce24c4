"""FastAPI gateway for the Bhabhi chat bot"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException

from .bot.events import GatewayResponse, InboundMessage
from .bot.handler import GameCommandHandler
from .bot.identity import ChatIdentityResolver
from .bot.transport import QueueTransport
from .engine import BhabhiEngine
from .serialization import sanitize_state

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def create_app(engine: Optional[BhabhiEngine] = None, bot_id: Optional[str] = None) -> FastAPI:
    """
    Build the gateway app.

    A transport bridge POSTs every chat message to /messages and delivers
    the returned messages on the real chat connection.
    """
    app = FastAPI(title="Bhabhi Chat Game API", version="1.0.0")
    app.state.engine = engine if engine is not None else BhabhiEngine()
    app.state.resolver = ChatIdentityResolver(bot_id or os.getenv("BOT_ID"))

    @app.get("/")
    async def root():
        return {"message": "Bhabhi Chat Game API", "version": "1.0.0"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "rooms": len(app.state.engine.store)}

    @app.post("/messages", response_model=GatewayResponse)
    async def receive_message(message: InboundMessage):
        transport = QueueTransport()
        handler = GameCommandHandler(app.state.engine, transport, app.state.resolver)
        handled = await handler.handle(message)
        return GatewayResponse(handled=handled, messages=transport.drain())

    @app.get("/games/{room_id}")
    async def get_game(room_id: str, viewer: Optional[str] = None):
        game = app.state.engine.get_game(room_id)
        if game is None:
            raise HTTPException(status_code=404, detail="No game in this room")
        return sanitize_state(game, viewer)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
