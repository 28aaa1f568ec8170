import os
import sys
import time

# Settings are read at import time; pin the test environment first
os.environ["APP_ENV"] = "testing"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret-for-flatmate-service-tokens")

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

import jwt
import pytest
from fastapi.testclient import TestClient

from flatmate.application.commands.chat import SendMessageHandler
from flatmate.application.services import ConversationLocks, SearchParameterExtractor
from flatmate.config.settings import Config, TestingConfig
from flatmate.domain.entities.listing import Listing
from flatmate.domain.exceptions import ExternalServiceError
from flatmate.domain.ports.llm_client import LLMClient
from flatmate.domain.result import Err, Ok
from flatmate.domain.services.intent_classifier import IntentClassifier
from flatmate.domain.value_objects.listing_id import ListingId
from flatmate.fastapi_app import create_fastapi_app
from flatmate.infrastructure.persistence.memory import (
    InMemoryAppointmentRepository,
    InMemoryConversationRepository,
    InMemoryDatabase,
    InMemoryListingRepository,
    InMemoryMessageRepository,
)
from flatmate.setup.ioc import create_container


class FakeLLMClient(LLMClient):
    """Scripted LLM. `extraction=None` makes complete_json fail."""

    def __init__(self, reply="Happy to help with your search!", extraction=None, fail=False):
        self.reply = reply
        self.extraction = extraction
        self.fail = fail
        self.complete_calls = []
        self.complete_max_tokens = []
        self.json_calls = []

    async def complete(self, messages, max_tokens=None):
        self.complete_calls.append(list(messages))
        self.complete_max_tokens.append(max_tokens)
        if self.fail:
            return Err(ExternalServiceError("fake", "provider down"))
        return Ok(self.reply)

    async def complete_json(self, prompt):
        self.json_calls.append(prompt)
        if self.fail or self.extraction is None:
            return Err(ExternalServiceError("fake", "provider down"))
        return Ok(self.extraction)


def make_listing(**overrides) -> Listing:
    data = {
        "id": ListingId.generate(),
        "title": "Test flat",
        "description": "A flat used in tests",
        "price": 1000,
        "location": "Berlin Mitte",
        "bedrooms": 2,
        "bathrooms": 1,
        "contact_info": "test@flatmate.example",
    }
    data.update(overrides)
    return Listing(**data)


def service_token(user_id="user-1", tier=None, **claims):
    now = int(time.time())
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + 300,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    if tier:
        payload["tier"] = tier
    payload.update(claims)
    return jwt.encode(payload, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


@pytest.fixture()
def fake_llm():
    return FakeLLMClient()


@pytest.fixture()
def database():
    db = InMemoryDatabase()
    for listing in (
        make_listing(title="Mitte two-bed", location="Berlin Mitte", price=1100, bedrooms=2),
        make_listing(title="Kreuzberg studio", location="Berlin Kreuzberg", price=850, bedrooms=1),
        make_listing(title="Munich family flat", location="Munich Sendling", price=1800, bedrooms=3),
    ):
        db.listings[listing.id.value] = listing
    return db


@pytest.fixture()
def repos(database):
    return {
        "conversations": InMemoryConversationRepository(database),
        "messages": InMemoryMessageRepository(database),
        "listings": InMemoryListingRepository(database),
        "appointments": InMemoryAppointmentRepository(database),
    }


@pytest.fixture()
def make_handler(repos):
    """Build a SendMessageHandler around the in-memory repositories."""

    def _make(llm_client, locks=None):
        return SendMessageHandler(
            conv_repo=repos["conversations"],
            msg_repo=repos["messages"],
            listing_repo=repos["listings"],
            llm_client=llm_client,
            classifier=IntentClassifier(),
            extractor=SearchParameterExtractor(llm_client),
            locks=locks or ConversationLocks(),
        )

    return _make


@pytest.fixture()
def app(fake_llm, database):
    """FastAPI app wired to the in-memory database and the fake LLM."""
    container = create_container(TestingConfig, llm_client=fake_llm, database=database)
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers with valid JWT token."""
    return {"Authorization": f"Bearer {service_token()}"}


@pytest.fixture()
def other_auth_headers():
    """A second user, for ownership checks."""
    return {"Authorization": f"Bearer {service_token(user_id='user-2')}"}
