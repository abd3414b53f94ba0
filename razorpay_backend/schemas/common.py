"""
Schemas comunes y base para reutilización.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Schema base con configuración común."""

    # Sin str_strip_whitespace: los ids firmados deben llegar intactos
    model_config = ConfigDict(
        populate_by_name=True,
    )


class HealthResponse(BaseModel):
    """Respuesta del endpoint raíz."""

    status: str = "OK"
    message: str
