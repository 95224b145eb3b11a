from sqlalchemy import inspect

from chatrelay.core import config
from chatrelay.infra.postgres import build_engine, test_connection as check_connection
from chatrelay.init_db import reset_db


def test_database_url_prefers_explicit_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///relay.db")

    assert config._database_url() == "sqlite:///relay.db"


def test_database_url_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_USER", "relay")
    monkeypatch.setenv("DB_PASS", "secret")
    monkeypatch.setenv("DB_HOST", "db")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "chats")

    assert config._database_url() == "postgresql://relay:secret@db:6543/chats"


def test_reset_db_creates_both_tables(engine, capsys):
    tables = reset_db(bind=engine)

    assert set(tables) == {"users", "chats"}
    columns = {c["name"] for c in inspect(engine).get_columns("chats")}
    assert {"id", "user_id", "message", "reply", "created_at"} <= columns
    assert "Created tables" in capsys.readouterr().out


def test_connection_check_on_sqlite():
    assert check_connection(bind=build_engine("sqlite://")) is True
