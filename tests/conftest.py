import pytest
from fastapi.testclient import TestClient

from er_triage.main import app
from er_triage.modules.patients.router import get_store
from tests.fakes import FakePatientStore


@pytest.fixture
def store() -> FakePatientStore:
    return FakePatientStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_store, None)
