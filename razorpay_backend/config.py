"""
Configuración del backend de pagos Razorpay.
Carga variables de entorno y define los settings del servicio.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


# URL usada cuando no se configura PDF_BASE_URL
DEFAULT_PDF_BASE_URL = "https://example.com/downloads"


class Settings(BaseSettings):
    """Configuración principal del servicio (inmutable)."""

    # Aplicación
    APP_NAME: str = "Razorpay Payment Backend"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    PORT: int = 3000
    API_PREFIX: str = "/api/razorpay"
    CORS_ORIGINS: list[str] = ["*"]

    # Razorpay (sin valores por defecto para secretos)
    RAZORPAY_KEY_ID: str = ""
    RAZORPAY_KEY_SECRET: str = ""
    WEBHOOK_SECRET: str = ""

    # Proveedor de órdenes activo: "razorpay" o "mock"
    PAYMENT_PROVIDER: Literal["razorpay", "mock"] = "razorpay"

    # Base para las URLs de descarga generadas tras verificar un pago
    PDF_BASE_URL: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        frozen = True

    @property
    def credentials_configured(self) -> bool:
        return bool(self.RAZORPAY_KEY_ID and self.RAZORPAY_KEY_SECRET)


@lru_cache()
def get_settings() -> Settings:
    """Retorna instancia cacheada de settings."""
    return Settings()
