"""
Schemas para creación de órdenes.
"""

import math

from pydantic import Field, StrictFloat, StrictInt, StrictStr, field_validator

from razorpay_backend.schemas.common import BaseSchema


# Mensaje devuelto cuando falta el monto o no es numérico
AMOUNT_REQUIRED_MESSAGE = "amount (number, in rupees) is required"


class OrderCreateRequest(BaseSchema):
    """
    Request para crear una orden.

    El monto se recibe en rupias (unidad mayor); la conversión a
    paise se hace en el servicio.
    """

    # Strict: "10" o true no son montos válidos
    amount: StrictInt | StrictFloat = Field(..., description="Monto en rupias")
    currency: StrictStr = Field("INR", min_length=1)
    receipt: StrictStr | None = None
    notes: dict[str, StrictStr | StrictInt | StrictFloat] | None = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        """El monto debe ser finito y mayor que cero."""
        if not math.isfinite(v) or v <= 0:
            raise ValueError("amount must be a positive number")
        return v
