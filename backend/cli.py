"""Command-line entry point: run the server or provision users."""

import logging

import click
import uvicorn

from api.users.repositories import users_repository
from config import database_url_for, load_settings
from database import prepare_schema
from main import create_app
from state import AppState
from tokens import is_canonical_uuid

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option("--db", "db_path", default=None, help="SQLite file or database URL (default ./db.sqlite)")
@click.option("--bind", "-b", default=None, help="host:port to listen on (default 127.0.0.1:8080)")
@click.option("--store", "-s", "store_dir", default=None, help="Directory for stored blobs (default ./store)")
@click.option("--max-file-size", "-m", type=int, default=None, help="Maximum upload size in MB (default 10)")
@click.option("--log-level", default="INFO", show_default=True)
@click.pass_context
def main(ctx, db_path, bind, store_dir, max_file_size, log_level):
    """Token-gated ephemeral file sharing."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    ctx.obj = load_settings(
        database_url=database_url_for(db_path) if db_path else None,
        bind=bind,
        store_dir=store_dir,
        max_file_size_mb=max_file_size,
    )
    if ctx.invoked_subcommand is None:
        settings = ctx.obj
        app = create_app(settings)
        logger.info("Listening on http://%s", settings.bind)
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
        logger.info("Server exited")


@main.command("add-user")
@click.argument("identifier")
@click.option("--disabled", is_flag=True, help="Provision the user as disabled")
@click.pass_obj
def add_user(settings, identifier, disabled):
    """Provision an uploader identified by IDENTIFIER (a UUID)."""
    if not is_canonical_uuid(identifier):
        raise click.BadParameter("must be a canonical UUID", param_hint="IDENTIFIER")
    state = AppState.from_settings(settings)
    prepare_schema(state.engine)
    users_repository.create(state.sessions, identifier, enabled=not disabled)
    click.echo(f"added {identifier}{' (disabled)' if disabled else ''}")


if __name__ == "__main__":
    main()
