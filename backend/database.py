"""Database configuration and session management."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

logger = logging.getLogger(__name__)

BACKEND_DIR = Path(__file__).parent


class Base(DeclarativeBase):
    pass


def make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, echo=False)


def make_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    import orm  # noqa: F401  registers every model on Base.metadata

    Base.metadata.create_all(bind=engine)


def run_migrations(engine: Engine) -> None:
    """Upgrade the schema to the latest Alembic revision."""
    alembic_cfg = Config(str(BACKEND_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(BACKEND_DIR / "db_migrations"))
    # configparser interpolation treats "%" as special
    url = engine.url.render_as_string(hide_password=False).replace("%", "%%")
    alembic_cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(alembic_cfg, "head")


def prepare_schema(engine: Engine) -> None:
    try:
        run_migrations(engine)
    except Exception:
        logger.warning("Migration failed, creating tables directly", exc_info=True)
        init_db(engine)
