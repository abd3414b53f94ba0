"""
Rutas/Endpoints del backend de pagos.
"""

from razorpay_backend.routes.payments import router as payments_router

__all__ = [
    "payments_router",
]
