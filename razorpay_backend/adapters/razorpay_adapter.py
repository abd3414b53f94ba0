"""
Adapter para Razorpay.
Implementa OrderProvider usando el SDK oficial de Razorpay.
"""

from typing import Any

import razorpay
import structlog
from starlette.concurrency import run_in_threadpool

from razorpay_backend.adapters.base import OrderOptions, OrderProvider
from razorpay_backend.config import Settings
from razorpay_backend.utils.exceptions import PaymentProviderError


logger = structlog.get_logger(__name__)


class RazorpayAdapter(OrderProvider):
    """
    Adapter para la API de órdenes de Razorpay.

    Las credenciales se reciben al construir el adapter; el cliente
    es de solo lectura y se comparte entre requests.
    """

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        client: Any | None = None,
    ):
        """
        Inicializa el adapter de Razorpay.

        Args:
            key_id: Razorpay key id
            key_secret: Razorpay key secret
            client: Cliente ya construido (tests)
        """
        self._key_id = key_id
        self._client = client or razorpay.Client(auth=(key_id, key_secret))

        logger.info("RazorpayAdapter initialized", key_id_configured=bool(key_id))

    @classmethod
    def from_settings(cls, settings: Settings) -> "RazorpayAdapter":
        return cls(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
        )

    @property
    def provider_name(self) -> str:
        return "razorpay"

    async def create_order(self, options: OrderOptions) -> dict[str, Any]:
        """Crea una orden con client.order.create."""
        try:
            # El SDK es síncrono (requests): no bloquear el event loop
            order = await run_in_threadpool(
                self._client.order.create,
                data=options.to_dict(),
            )
        except Exception as e:
            logger.error(
                "Razorpay order creation failed",
                error=str(e),
                receipt=options.receipt,
            )
            raise PaymentProviderError(self.provider_name, str(e)) from e

        logger.info(
            "Razorpay order created",
            order_id=order.get("id"),
            amount=options.amount,
            currency=options.currency,
        )
        return order
