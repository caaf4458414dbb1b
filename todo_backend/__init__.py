"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, attach the todo store, and register route blueprints.
"""

from __future__ import annotations

import logging
from typing import Optional, Type

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from todo_backend.config import Config, cors_origins
from todo_backend.routes.todos import todos_bp
from todo_backend.schemas import error
from todo_backend.services.todo_store import JsonFileTodoStore, TodoStore


def create_app(store: Optional[TodoStore] = None, config: Type[Config] = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config)

    if store is None:
        store = JsonFileTodoStore(config.TODOS_FILE)
    store.ensure()
    app.extensions["todo_store"] = store

    # Permissive cross-origin access, including preflight for PUT/DELETE
    CORS(
        app,
        resources={r"/*": {"origins": cors_origins(config)}},
        supports_credentials=False,
        send_wildcard=True,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    app.register_blueprint(todos_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify(error(e.description or e.name)), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logging.exception("Unhandled error while serving request")
        return jsonify(error("Internal server error")), 500

    return app
