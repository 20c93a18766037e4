from __future__ import annotations

from pathlib import Path

import pytest

from authserver.core.service import AuthService
from authserver.core.store import CredentialStore, InMemoryCredentialStore, SqlCredentialStore
from authserver.database import create_db_engine, create_session_factory, init_db


def _sql_store(tmp_path: Path) -> SqlCredentialStore:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'auth.sqlite3'}")
    init_db(engine)
    return SqlCredentialStore(create_session_factory(engine))


@pytest.fixture(params=["sql", "memory"])
def store(request, tmp_path: Path) -> CredentialStore:
    if request.param == "sql":
        return _sql_store(tmp_path)
    return InMemoryCredentialStore()


@pytest.fixture()
def sql_store(tmp_path: Path) -> SqlCredentialStore:
    return _sql_store(tmp_path)


@pytest.fixture()
def service(store: CredentialStore) -> AuthService:
    return AuthService(store)
