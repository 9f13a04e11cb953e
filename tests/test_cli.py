import uuid

from click.testing import CliRunner

from api.users.repositories import users_repository
from cli import main
from config import Settings
from state import AppState


def test_add_user(tmp_path):
    identifier = str(uuid.uuid4())
    db = tmp_path / "cli.sqlite"
    store = tmp_path / "store"

    result = CliRunner().invoke(
        main, ["--db", str(db), "--store", str(store), "add-user", identifier]
    )

    assert result.exit_code == 0, result.output
    state = AppState.from_settings(
        Settings(database_url=f"sqlite:///{db}", store_dir=store)
    )
    assert users_repository.is_enabled(state.sessions, identifier) is True
    state.engine.dispose()


def test_add_user_rejects_bad_identifier(tmp_path):
    result = CliRunner().invoke(
        main, ["--db", str(tmp_path / "cli.sqlite"), "--store", str(tmp_path), "add-user", "bob"]
    )
    assert result.exit_code != 0
    assert "canonical UUID" in result.output
