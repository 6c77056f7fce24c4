#!/usr/bin/env python3
"""Startup script for the Bhabhi chat game gateway"""

import os
import uvicorn


def main():
    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"🚀 Starting Bhabhi gateway on {host}:{port}")
    print(f"📍 Health check available at: http://{host}:{port}/health")
    print(f"📨 Message endpoint: http://{host}:{port}/messages")

    uvicorn.run(
        "bhabhi_engine.main:app",
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "false").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )

if __name__ == "__main__":
    main()
