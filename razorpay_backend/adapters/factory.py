"""
Factory para obtener el proveedor de órdenes correcto.
Implementa el patrón Factory para instanciar adapters.
"""

from functools import lru_cache

import structlog

from razorpay_backend.adapters.base import OrderProvider
from razorpay_backend.adapters.mock_adapter import MockAdapter
from razorpay_backend.adapters.razorpay_adapter import RazorpayAdapter
from razorpay_backend.config import Settings, get_settings


logger = structlog.get_logger(__name__)


def create_order_provider(settings: Settings) -> OrderProvider:
    """
    Construye el proveedor de órdenes indicado en la configuración.

    Args:
        settings: Configuración del servicio

    Returns:
        Instancia del OrderProvider configurado

    Raises:
        ValueError: Si el proveedor no está soportado
    """
    provider_name = settings.PAYMENT_PROVIDER.lower()

    if provider_name == "razorpay":
        provider: OrderProvider = RazorpayAdapter.from_settings(settings)
    elif provider_name == "mock":
        provider = MockAdapter(
            key_secret=settings.RAZORPAY_KEY_SECRET,
            webhook_secret=settings.WEBHOOK_SECRET,
        )
    else:
        raise ValueError(
            f"Payment provider '{provider_name}' not supported. "
            "Available: ['razorpay', 'mock']"
        )

    logger.info("Order provider initialized", provider=provider_name)

    return provider


@lru_cache()
def get_order_provider() -> OrderProvider:
    """
    Retorna el proveedor de órdenes configurado.

    La instancia es cacheada para reutilización entre requests.
    """
    return create_order_provider(get_settings())
