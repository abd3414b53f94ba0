"""
Schemas Pydantic para validación de requests y responses.
"""

from razorpay_backend.schemas.common import BaseSchema, HealthResponse
from razorpay_backend.schemas.order import AMOUNT_REQUIRED_MESSAGE, OrderCreateRequest
from razorpay_backend.schemas.verification import PaymentVerificationRequest

__all__ = [
    # Common
    "BaseSchema",
    "HealthResponse",
    # Order
    "AMOUNT_REQUIRED_MESSAGE",
    "OrderCreateRequest",
    # Verification
    "PaymentVerificationRequest",
]
