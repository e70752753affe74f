"""Shared fixtures: an app per test with a fake generation service."""

import random

import pytest
import requests
from fastapi.testclient import TestClient

from student_records_api.app.core.config import Settings
from student_records_api.app.main import create_app
from student_records_api.app.services.student_service import StudentStore
from student_records_api.app.services.summary_service import SummaryService


class FakeResponse:
    def __init__(self, status_code=200, json_body=None, text=None):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text if text is not None else ""

    def json(self):
        if self._json_body is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records posted requests and answers with a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(200, {"summary": "A great student."})
        self.error = error
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def test_settings():
    return Settings(
        summary_endpoint="http://generator.test/api",
        model_name="test-model",
        summary_timeout=5,
        id_min=0,
        id_max=999,
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def store(test_settings):
    return StudentStore(test_settings.id_min, test_settings.id_max, rng=random.Random(1234))


@pytest.fixture
def summary_service(test_settings, fake_session):
    return SummaryService(
        base_url=test_settings.summary_endpoint,
        model_name=test_settings.model_name,
        timeout=test_settings.summary_timeout,
        session=fake_session,
    )


@pytest.fixture
def client(test_settings, store, summary_service):
    app = create_app(test_settings, store=store, summary_service=summary_service)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice():
    return {"name": "Alice", "age": 21, "email": "a@x.com"}
