"""
Servicio para webhooks entrantes de Razorpay.
Verifica la firma sobre el body crudo y registra el evento.
"""

import json

import structlog

from razorpay_backend.config import Settings
from razorpay_backend.services.results import ClientError, ServerError, ServiceResult, Success
from razorpay_backend.utils.exceptions import WebhookVerificationError
from razorpay_backend.utils.hmac_utils import verify_signature


logger = structlog.get_logger(__name__)


class WebhookService:
    """
    Servicio para webhooks de Razorpay.

    - Verifica la firma x-razorpay-signature sobre los bytes recibidos
    - Solo después de verificar decodifica el JSON
    - Registra el tipo de evento (no hay despacho de eventos)
    """

    def __init__(self, settings: Settings):
        self._secret = settings.WEBHOOK_SECRET

    def _verify(self, payload: bytes, signature: str | None) -> None:
        """
        Verifica la firma del webhook.

        Raises:
            WebhookVerificationError: Si la firma no coincide
        """
        if not self._secret:
            logger.warning("WEBHOOK_SECRET not set; webhook signature cannot be verified securely.")

        if not verify_signature(payload, signature, self._secret):
            raise WebhookVerificationError("Invalid signature")

    def process_webhook(self, payload: bytes, signature: str | None) -> ServiceResult:
        """
        Procesa un webhook de Razorpay.

        Args:
            payload: Cuerpo crudo del request, sin re-serializar
            signature: Header x-razorpay-signature (puede faltar)

        Returns:
            Success con {ok: true}, ClientError si la firma no coincide
            o ServerError si el procesamiento falla
        """
        try:
            self._verify(payload, signature)
        except WebhookVerificationError as e:
            logger.warning("Webhook signature mismatch", code=e.code, error=e.message, payload_length=len(payload))
            return ClientError({"ok": False, "error": "Invalid signature"})
        except Exception as e:
            logger.error("webhook error", error=str(e), exc_info=True)
            return ServerError({"ok": False})

        try:
            event_data = json.loads(payload)
        except (ValueError, RecursionError) as e:
            logger.error("webhook error", error=str(e), exc_info=True)
            return ServerError({"ok": False})

        event_type = event_data.get("event") if isinstance(event_data, dict) else None

        logger.info("Verified webhook event", event_type=event_type)

        return Success({"ok": True})
