"""
Servicios de negocio del backend de pagos.
"""

from razorpay_backend.services.payment_service import PaymentService
from razorpay_backend.services.results import ClientError, ServerError, ServiceResult, Success
from razorpay_backend.services.webhook_service import WebhookService

__all__ = [
    "PaymentService",
    "WebhookService",
    # Resultados
    "ClientError",
    "ServerError",
    "ServiceResult",
    "Success",
]
