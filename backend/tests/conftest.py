"""Pytest configuration for test suite."""

import os

# Settings are read at import time; point the app at SQLite before it loads
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("STREAM_API_KEY", "test-key")
os.environ.setdefault("STREAM_API_SECRET", "test-secret")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chatrelay.api.deps import get_completion_service, get_identity_service
from chatrelay.clients.stream_client import IdentityService
from chatrelay.infra.postgres import get_db, init_db
from chatrelay.main import app
from chatrelay.models.base import Base


class FakeChannel:
    def __init__(self, client, channel_type, channel_id, data):
        self.client = client
        self.channel_type = channel_type
        self.id = channel_id
        self.data = data

    def create(self, user_id):
        self.client.created_channels.append((self.channel_type, self.id, user_id))
        return {"channel": {"id": self.id, **self.data}}

    def send_message(self, message, user_id):
        if self.client.fail_send:
            raise RuntimeError("messaging service unavailable")
        self.client.sent.append((self.id, message["text"], user_id))
        return {"message": {"text": message["text"], "user": {"id": user_id}}}


class FakeStreamClient:
    """In-memory stand-in for stream_chat.StreamChat."""

    def __init__(self):
        self.users = {}
        self.queries = []
        self.upserts = []
        self.created_channels = []
        self.sent = []
        self.fail_send = False

    def query_users(self, filter_conditions, sort=None, **options):
        self.queries.append(filter_conditions)
        wanted = filter_conditions["id"]
        if isinstance(wanted, dict):
            wanted = wanted["$eq"]
        user = self.users.get(wanted)
        return {"users": [user] if user else []}

    def upsert_user(self, user):
        self.upserts.append(user)
        self.users[user["id"]] = user
        return {"users": {user["id"]: user}}

    def channel(self, channel_type, channel_id=None, data=None):
        return FakeChannel(self, channel_type, channel_id, data or {})


class FakeCompletionService:
    def __init__(self, reply="Hi there!"):
        self.reply = reply
        self.prompts = []
        self.error = None

    def complete(self, message):
        self.prompts.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def stream_client():
    return FakeStreamClient()


@pytest.fixture
def identity(stream_client):
    return IdentityService(stream_client)


@pytest.fixture
def completion():
    return FakeCompletionService()


@pytest.fixture
def client(session_factory, identity, completion):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_service] = lambda: identity
    app.dependency_overrides[get_completion_service] = lambda: completion
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
