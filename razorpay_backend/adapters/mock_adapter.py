"""
Mock Adapter para desarrollo y testing.
Simula la API de órdenes de Razorpay sin credenciales reales.
"""

import json
import time
from typing import Any
from uuid import uuid4

import structlog

from razorpay_backend.adapters.base import OrderOptions, OrderProvider
from razorpay_backend.utils.hmac_utils import generate_payment_signature, generate_signature


logger = structlog.get_logger(__name__)


class MockAdapter(OrderProvider):
    """
    Adapter mock para desarrollo y testing.

    - Crea órdenes con el mismo formato que Razorpay
    - Simula el callback del checkout con una firma válida
    - Firma payloads de webhook como lo haría Razorpay

    Útil para desarrollo local sin necesidad de credenciales reales.
    """

    def __init__(
        self,
        key_secret: str = "",
        webhook_secret: str = "",
        fail_with: Exception | None = None,
    ):
        """
        Inicializa el adapter mock.

        Args:
            key_secret: Secret con el que se firman los pagos simulados
            webhook_secret: Secret con el que se firman los webhooks simulados
            fail_with: Excepción a lanzar en create_order (para testing)
        """
        self._key_secret = key_secret
        self._webhook_secret = webhook_secret
        self._fail_with = fail_with
        self._orders: dict[str, dict[str, Any]] = {}
        logger.info("MockAdapter initialized")

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def orders(self) -> dict[str, dict[str, Any]]:
        """Órdenes creadas por esta instancia, indexadas por id."""
        return self._orders

    def _generate_mock_id(self, prefix: str) -> str:
        """Genera un ID mock similar al formato de Razorpay."""
        return f"{prefix}_{uuid4().hex[:14]}"

    async def create_order(self, options: OrderOptions) -> dict[str, Any]:
        """Crea una orden mock."""
        if self._fail_with is not None:
            raise self._fail_with

        order_id = self._generate_mock_id("order")
        order = {
            "id": order_id,
            "entity": "order",
            "amount": options.amount,
            "amount_paid": 0,
            "amount_due": options.amount,
            "currency": options.currency,
            "receipt": options.receipt,
            "status": "created",
            "attempts": 0,
            "notes": dict(options.notes),
            "created_at": int(time.time()),
        }
        self._orders[order_id] = order

        logger.info("Mock order created", order_id=order_id, amount=options.amount)

        return order

    def simulate_payment(self, order_id: str) -> dict[str, str]:
        """
        Simula el callback del checkout para una orden.

        Returns:
            Campos que el frontend enviaría a /verify
        """
        payment_id = self._generate_mock_id("pay")
        signature = generate_payment_signature(order_id, payment_id, self._key_secret)

        return {
            "razorpay_order_id": order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": signature,
        }

    def build_webhook(self, event: str, order_id: str | None = None) -> tuple[bytes, str]:
        """
        Construye un webhook firmado.

        Returns:
            Tupla de (body crudo, valor del header x-razorpay-signature)
        """
        payload = {
            "entity": "event",
            "event": event,
            "contains": ["payment"],
            "payload": {
                "payment": {
                    "entity": {
                        "id": self._generate_mock_id("pay"),
                        "order_id": order_id,
                    },
                },
            },
            "created_at": int(time.time()),
        }
        body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        return body, generate_signature(body, self._webhook_secret)

    def clear_orders(self) -> None:
        """Limpia las órdenes en memoria."""
        self._orders.clear()
