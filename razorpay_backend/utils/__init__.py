"""
Utilidades del backend de pagos.
"""

from razorpay_backend.utils.amounts import to_minor_units
from razorpay_backend.utils.hmac_utils import (
    build_payment_message,
    generate_payment_signature,
    generate_signature,
    verify_payment_signature,
    verify_signature,
)

__all__ = [
    # HMAC
    "build_payment_message",
    "generate_payment_signature",
    "generate_signature",
    "verify_payment_signature",
    "verify_signature",
    # Montos
    "to_minor_units",
]
