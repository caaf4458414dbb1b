"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the data file path and server settings.
This keeps the rest of the codebase decoupled from direct env access.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Persistence
    TODOS_FILE = os.getenv("TODO_DATA_FILE", os.path.abspath(os.path.join(os.getcwd(), "todos.json")))

    # Server
    HOST = os.getenv("TODO_HOST", "127.0.0.1")
    PORT = int(os.getenv("TODO_PORT", "5000"))
    LOG_LEVEL = os.getenv("TODO_LOG_LEVEL", "INFO")

    # Comma separated; "*" allows any origin
    CORS_ORIGINS = os.getenv("TODO_CORS_ORIGINS", "*")


def cors_origins(cfg: Config = Config):
    """Return the CORS origins setting in the shape flask-cors expects."""
    raw = (cfg.CORS_ORIGINS or "*").strip()
    if raw == "*":
        return "*"
    return [o.strip() for o in raw.split(",") if o.strip()]
