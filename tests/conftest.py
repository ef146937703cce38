import pytest

from fastapi.testclient import TestClient

from certificate_service.core.security import get_api_key
from certificate_service.main import app

API_KEY = "test_api_key_123"


@pytest.fixture
def client():
    app.dependency_overrides[get_api_key] = lambda: API_KEY
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def payload():
    return {
        "apiKey": API_KEY,
        "personalInfo": {
            "name": "Juan Pérez",
            "dni": "20123456789",
        },
        "biometricProof": {
            "provider": "renaper",
            "verificationId": "bio-0001",
        },
        "publicKey": "0x04a1b2c3d4e5f6",
    }
