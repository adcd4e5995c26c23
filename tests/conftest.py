# tests/conftest.py

from __future__ import annotations

import pytest

from taskboard.app import create_app

from .fakes import FakeDatabase


@pytest.fixture()
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture()
def app(db: FakeDatabase, tmp_path):
    """
    App wired to the in-memory collection and a throwaway frontend directory.
    """
    (tmp_path / "index.html").write_text("<html>entry</html>", encoding="utf-8")
    (tmp_path / "style.css").write_text("body {}", encoding="utf-8")
    return create_app({"TESTING": True, "FRONTEND_DIR": str(tmp_path)}, db=db)


@pytest.fixture()
def client(app):
    return app.test_client()
