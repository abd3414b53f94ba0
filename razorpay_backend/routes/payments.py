"""
Endpoints de Razorpay: creación de órdenes, verificación y webhooks.
"""

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse

from razorpay_backend.adapters import OrderProvider, get_order_provider
from razorpay_backend.config import Settings, get_settings
from razorpay_backend.services import PaymentService, ServiceResult, WebhookService


logger = structlog.get_logger(__name__)

router = APIRouter()


def get_payment_service(
    settings: Settings = Depends(get_settings),
    provider: OrderProvider = Depends(get_order_provider),
) -> PaymentService:
    """Dependency para obtener PaymentService."""
    return PaymentService(settings, provider)


def get_webhook_service(
    settings: Settings = Depends(get_settings),
) -> WebhookService:
    """Dependency para obtener WebhookService."""
    return WebhookService(settings)


def to_response(result: ServiceResult) -> JSONResponse:
    """Traduce un resultado del servicio a la respuesta HTTP."""
    return JSONResponse(status_code=result.status_code, content=result.body)


async def read_json_body(request: Request) -> Any:
    """Body JSON del request; un body vacío o inválido se trata como ausente."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.post(
    "/create-order",
    status_code=status.HTTP_200_OK,
    summary="Crear una orden de pago",
    description="""
    Crea una orden en Razorpay.

    - Body: `{amount, currency?, receipt?, notes?}` con `amount` en rupias
    - El monto se envía a Razorpay en paise
    - La orden devuelta por Razorpay se retorna sin modificar
    """,
)
async def create_order(
    request: Request,
    service: PaymentService = Depends(get_payment_service),
):
    """Crea una orden de pago."""
    data = await read_json_body(request)
    result = await service.create_order(data)
    return to_response(result)


@router.post(
    "/verify",
    status_code=status.HTTP_200_OK,
    summary="Verificar un pago del checkout",
    description="""
    Verifica la firma devuelta por el checkout de Razorpay.

    - Body: `{razorpay_order_id, razorpay_payment_id, razorpay_signature}`
    - Si la firma es válida retorna la URL de descarga del PDF
    """,
)
async def verify_payment(
    request: Request,
    service: PaymentService = Depends(get_payment_service),
):
    """Verifica un pago."""
    data = await read_json_body(request)
    return to_response(service.verify_payment(data))


@router.post(
    "/webhook",
    status_code=status.HTTP_200_OK,
    summary="Webhook de Razorpay",
    description="""
    Endpoint para recibir webhooks de Razorpay.

    - Valida la firma del header `x-razorpay-signature` sobre el body crudo
    - El JSON se decodifica solo después de verificar la firma

    **Importante**: Este endpoint debe ser configurado en el dashboard de Razorpay.
    """,
)
async def razorpay_webhook(
    request: Request,
    x_razorpay_signature: Annotated[str | None, Header(alias="x-razorpay-signature")] = None,
    service: WebhookService = Depends(get_webhook_service),
):
    """Procesa un webhook de Razorpay."""
    # Leer body crudo para validar firma
    payload = await request.body()
    return to_response(service.process_webhook(payload, x_razorpay_signature))
