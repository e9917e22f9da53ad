"""CLI command that runs the HTTP gateway."""

from __future__ import annotations

import logging

import click

from pos.domain.exceptions import StorageError
from pos.infrastructure.bootstrap import document_repository
from pos.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", type=int, envvar="PORT", default=3000, show_default=True)
@click.option("--debug", is_flag=True, help="Enable the Flask debugger and reloader.")
@click.pass_obj
def serve(obj: dict, host: str, port: int, debug: bool) -> None:
    """Serve the REST API."""
    try:
        repository = document_repository(obj["data_dir"])
    except StorageError as exc:
        raise click.ClickException(str(exc))

    app = create_app(repository)
    logger.info("Record store: %s", repository.file_path)
    logger.info("POS server running on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug, threaded=True)
