"""Standalone launcher for the FastAPI application.

Allows running `python -m server.web` to start the development server
without relying on `uvicorn` CLI being installed globally.
"""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "server.web.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        reload=os.getenv("RELOAD", "0") != "0",
    )


if __name__ == "__main__":
    main()
