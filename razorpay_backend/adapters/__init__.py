"""
Adapters para el servicio de órdenes de la pasarela.
Implementación del patrón Adapter para abstraer Razorpay.
"""

from razorpay_backend.adapters.base import OrderOptions, OrderProvider
from razorpay_backend.adapters.factory import create_order_provider, get_order_provider
from razorpay_backend.adapters.mock_adapter import MockAdapter
from razorpay_backend.adapters.razorpay_adapter import RazorpayAdapter

__all__ = [
    "OrderOptions",
    "OrderProvider",
    "RazorpayAdapter",
    "MockAdapter",
    "create_order_provider",
    "get_order_provider",
]
