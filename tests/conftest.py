import uuid

import pytest
from fastapi.testclient import TestClient

from api.users.repositories import users_repository
from config import Settings
from main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'db.sqlite'}",
        store_dir=tmp_path / "store",
        max_file_size_mb=1,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.share.engine.dispose()


@pytest.fixture
def state(app):
    return app.state.share


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def user(state):
    """An enabled, provisioned uploader."""
    identifier = str(uuid.uuid4())
    users_repository.create(state.sessions, identifier)
    return identifier


@pytest.fixture
def upload(client, user):
    def _upload(content=b"hello world", filename="a.txt", identity=user, **params):
        headers = {} if identity is None else {"user-uuid": identity}
        return client.post(
            "/upload",
            params=params,
            headers=headers,
            files={"file": (filename, content, "application/octet-stream")},
        )

    return _upload
