"""
Schemas para verificación de pagos del checkout.
"""

from pydantic import Field, StrictStr

from razorpay_backend.schemas.common import BaseSchema


class PaymentVerificationRequest(BaseSchema):
    """Campos que el checkout de Razorpay entrega al frontend."""

    razorpay_order_id: StrictStr = Field(..., min_length=1)
    razorpay_payment_id: StrictStr = Field(..., min_length=1)
    razorpay_signature: StrictStr = Field(..., min_length=1)
