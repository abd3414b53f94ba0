"""
Servicio principal de pagos.
Crea órdenes en la pasarela y verifica las confirmaciones del checkout.
"""

import time
from typing import Any

import structlog
from pydantic import ValidationError

from razorpay_backend.adapters.base import OrderOptions, OrderProvider
from razorpay_backend.config import DEFAULT_PDF_BASE_URL, Settings
from razorpay_backend.schemas import (
    AMOUNT_REQUIRED_MESSAGE,
    OrderCreateRequest,
    PaymentVerificationRequest,
)
from razorpay_backend.services.results import ClientError, ServerError, ServiceResult, Success
from razorpay_backend.utils.amounts import to_minor_units
from razorpay_backend.utils.exceptions import InvalidRequestError, PaymentProviderError
from razorpay_backend.utils.hmac_utils import verify_payment_signature


logger = structlog.get_logger(__name__)

MISSING_VERIFICATION_FIELDS_MESSAGE = "Missing payment verification fields"
INVALID_ORDER_REQUEST_MESSAGE = "Invalid order request"


class PaymentService:
    """
    Servicio para creación y verificación de pagos.

    No guarda estado entre requests: la configuración y el proveedor
    se reciben al construirlo y son de solo lectura.
    """

    def __init__(self, settings: Settings, provider: OrderProvider):
        self._settings = settings
        self._provider = provider

    @property
    def provider(self) -> OrderProvider:
        return self._provider

    def _parse_order_request(self, data: Any) -> OrderCreateRequest:
        if not isinstance(data, dict):
            data = {}
        try:
            return OrderCreateRequest.model_validate(data)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.warning("Invalid order request", fields=fields)
            if "amount" in fields:
                raise InvalidRequestError(AMOUNT_REQUIRED_MESSAGE) from e
            raise InvalidRequestError(INVALID_ORDER_REQUEST_MESSAGE) from e

    async def create_order(self, data: Any) -> ServiceResult:
        """
        Crea una orden en la pasarela.

        1. Valida el monto (número en rupias)
        2. Convierte a paise y completa receipt/notes por defecto
        3. Llama al proveedor y devuelve la orden sin modificar

        Args:
            data: Body JSON decodificado del request

        Returns:
            Success con {success, order}, ClientError o ServerError
        """
        try:
            request = self._parse_order_request(data)
        except InvalidRequestError as e:
            logger.info("Order request rejected", code=e.code)
            return ClientError({"error": e.message})

        try:
            options = OrderOptions(
                amount=to_minor_units(request.amount),
                currency=request.currency,
                receipt=request.receipt or f"rcpt_{int(time.time() * 1000)}",
                notes=request.notes or {},
            )
            order = await self.provider.create_order(options)
        except PaymentProviderError as e:
            logger.error(
                "create-order error",
                provider=e.provider,
                code=e.code,
                error=e.message,
                exc_info=True,
            )
            return ServerError({"success": False, "error": "Could not create order"})
        except Exception as e:
            logger.error(
                "create-order error",
                provider=self.provider.provider_name,
                error=str(e),
                exc_info=True,
            )
            return ServerError({"success": False, "error": "Could not create order"})

        return Success({"success": True, "order": order})

    def verify_payment(self, data: Any) -> ServiceResult:
        """
        Verifica la firma devuelta por el checkout.

        La firma esperada es HMAC-SHA256("<order_id>|<payment_id>")
        con el key secret de la API (no el secret de webhooks).

        Args:
            data: Body JSON decodificado del request

        Returns:
            Success con la URL de descarga, ClientError o ServerError
        """
        try:
            request = PaymentVerificationRequest.model_validate(data if isinstance(data, dict) else {})
        except ValidationError:
            logger.warning("Missing payment verification fields")
            return ClientError({"error": MISSING_VERIFICATION_FIELDS_MESSAGE})

        secret = self._settings.RAZORPAY_KEY_SECRET
        if not secret:
            logger.warning("RAZORPAY_KEY_SECRET not set; payment signature cannot be verified securely.")

        try:
            is_valid = verify_payment_signature(
                request.razorpay_order_id,
                request.razorpay_payment_id,
                request.razorpay_signature,
                secret,
            )
        except Exception as e:
            logger.error("verify error", error=str(e), exc_info=True)
            return ServerError({"success": False, "error": "Verification failed"})

        if not is_valid:
            logger.warning(
                "Payment signature mismatch",
                order_id=request.razorpay_order_id,
                payment_id=request.razorpay_payment_id,
            )
            return ClientError({"success": False, "error": "Invalid signature"})

        logger.info(
            "Payment verified",
            order_id=request.razorpay_order_id,
            payment_id=request.razorpay_payment_id,
        )

        return Success({
            "success": True,
            "message": "Payment verified",
            "pdfUrl": self.build_pdf_url(request.razorpay_order_id),
        })

    def build_pdf_url(self, order_id: str) -> str:
        """URL de descarga determinista para una orden pagada."""
        base = self._settings.PDF_BASE_URL
        if not base:
            return f"{DEFAULT_PDF_BASE_URL}/{order_id}.pdf"
        return f"{base.removesuffix('/')}/{order_id}.pdf"
