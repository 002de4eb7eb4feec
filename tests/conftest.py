import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import app


@pytest.fixture(scope="session")
def client():
    """Shared TestClient for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def override_clients():
    """Swap the outbound service clients used by the routes."""
    from combofinder.dependencies import get_card_client, get_combo_client

    def _override(card_client=None, combo_client=None):
        if card_client is not None:
            app.dependency_overrides[get_card_client] = lambda: card_client
        if combo_client is not None:
            app.dependency_overrides[get_combo_client] = lambda: combo_client

    yield _override
    app.dependency_overrides.clear()
