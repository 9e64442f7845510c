# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI. A API e stateless: nenhum banco a preparar."""
    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from erp.infrastructure.config import get_settings
    get_settings.cache_clear()

    from erp.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
