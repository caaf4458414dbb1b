"""Development entrypoint for running the todo API locally.

Usage:
- FLASK_APP=todo_backend.main:app flask run --reload
- python -m todo_backend.main
- todo-backend
"""

from __future__ import annotations

import logging

from todo_backend import create_app
from todo_backend.config import Config

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


def main() -> None:
    logging.info(f"Server running on port {Config.PORT}")
    # Simple built-in server for quick smoke testing
    app.run(host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    main()
