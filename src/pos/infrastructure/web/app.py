"""Flask application factory for the HTTP gateway.

Maps the error taxonomy onto status codes, always with an
``{"error": message}`` body:

- ValidationError      -> 400
- EntityNotFoundError  -> 404
- StorageError         -> 500
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from pos.domain.exceptions import EntityNotFoundError, StorageError, ValidationError
from pos.domain.repository.document_repository import DocumentRepository
from pos.infrastructure.bootstrap import document_repository
from pos.infrastructure.web.routes import api

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 5_000_000

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(repository: DocumentRepository | None = None) -> Flask:
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_BODY_BYTES
    if repository is None:
        repository = document_repository()
    app.config["DOCUMENT_REPOSITORY"] = repository
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    app.register_blueprint(api)
    _register_error_handlers(app)

    @app.after_request
    def add_cors_headers(response):
        response.headers.update(_CORS_HEADERS)
        return response

    return app


def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(ValidationError)
    def on_validation_error(exc: ValidationError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(EntityNotFoundError)
    def on_not_found(exc: EntityNotFoundError):
        return jsonify({"error": str(exc)}), 404

    @app.errorhandler(StorageError)
    def on_storage_error(exc: StorageError):
        logger.error("Record store failure: %s", exc)
        return jsonify({"error": str(exc)}), 500

    @app.errorhandler(HTTPException)
    def on_http_error(exc: HTTPException):
        messages = {404: "not found", 413: "payload too large"}
        message = messages.get(exc.code, exc.description)
        return jsonify({"error": message}), exc.code
