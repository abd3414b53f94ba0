"""
Configuración de tests y fixtures compartidos.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from razorpay_backend.adapters import MockAdapter, get_order_provider
from razorpay_backend.config import Settings, get_settings
from razorpay_backend.main import app, settings as app_settings


TEST_KEY_ID = "rzp_test_key"
TEST_KEY_SECRET = "s3cr3t"
TEST_WEBHOOK_SECRET = "whsec_test123"
TEST_PDF_BASE_URL = "https://cdn.example.com/pdfs"


@pytest.fixture
def test_settings() -> Settings:
    """Settings de testing, independientes del entorno y de .env."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="development",
        RAZORPAY_KEY_ID=TEST_KEY_ID,
        RAZORPAY_KEY_SECRET=TEST_KEY_SECRET,
        WEBHOOK_SECRET=TEST_WEBHOOK_SECRET,
        PDF_BASE_URL=TEST_PDF_BASE_URL,
        PAYMENT_PROVIDER="mock",
    )


@pytest.fixture
def mock_adapter(test_settings: Settings) -> MockAdapter:
    """Proveedor mock firmando con los secrets de testing."""
    return MockAdapter(
        key_secret=test_settings.RAZORPAY_KEY_SECRET,
        webhook_secret=test_settings.WEBHOOK_SECRET,
    )


@pytest.fixture
def api_prefix() -> str:
    """Prefijo con el que la app monta las rutas de Razorpay."""
    return app_settings.API_PREFIX


@pytest_asyncio.fixture(scope="function")
async def client(
    test_settings: Settings,
    mock_adapter: MockAdapter,
) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP para tests de API."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_order_provider] = lambda: mock_adapter

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_order_data():
    """Datos de ejemplo para crear una orden."""
    return {
        "amount": 499.99,
        "currency": "INR",
        "receipt": "rcpt_test_001",
        "notes": {"product": "ebook", "quantity": 1},
    }
