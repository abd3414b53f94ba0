"""
Razorpay Payment Backend
FastAPI application entry point.
"""

import logging
import uuid
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from razorpay_backend.config import Settings, get_settings
from razorpay_backend.routes import payments_router
from razorpay_backend.schemas import HealthResponse


settings = get_settings()

logging.basicConfig(format="%(message)s", level=logging.INFO)

# Configurar logging estructurado
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if settings.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=settings.ENVIRONMENT == "production",
)

logger = structlog.get_logger(__name__)


def warn_if_unconfigured(settings: Settings) -> None:
    """Avisa (sin abortar) si faltan las credenciales de Razorpay."""
    if not settings.credentials_configured:
        logger.warning(
            "RAZORPAY_KEY_ID or RAZORPAY_KEY_SECRET not set in env. "
            "Create .env or set them in the deployment environment."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestión del ciclo de vida de la aplicación."""
    # Startup
    logger.info(
        "Starting Razorpay backend",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        payment_provider=settings.PAYMENT_PROVIDER,
    )
    warn_if_unconfigured(settings)

    yield

    # Shutdown
    logger.info("Shutting down Razorpay backend")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Backend de pagos Razorpay: órdenes, verificación de firmas y webhooks",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Añade request_id a cada petición para trazabilidad."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

    # Bind request_id al logger
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Último recurso: nunca exponer detalles internos al cliente."""
    logger.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


@app.get("/", tags=["Health"], response_model=HealthResponse)
async def root():
    """Root endpoint."""
    return HealthResponse(message="Razorpay backend running")


@app.get("/health", tags=["Health"])
async def health_check(current: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": current.ENVIRONMENT,
        "payment_provider": current.PAYMENT_PROVIDER,
        "credentials_configured": current.credentials_configured,
    }


# Incluir routers
app.include_router(payments_router, prefix=settings.API_PREFIX, tags=["Razorpay"])


def run() -> None:
    """Arranca el servidor en el puerto configurado."""
    uvicorn.run("razorpay_backend.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
