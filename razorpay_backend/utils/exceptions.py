"""
Excepciones personalizadas del backend de pagos.
"""


class PaymentServiceError(Exception):
    """Error base del servicio de pagos."""

    def __init__(self, message: str, code: str = "PAYMENT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidRequestError(PaymentServiceError):
    """El request del cliente es inválido o incompleto."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
        )


class PaymentProviderError(PaymentServiceError):
    """Error del proveedor de pago externo."""

    def __init__(self, provider: str, message: str):
        super().__init__(
            message=f"Payment provider error ({provider}): {message}",
            code="PROVIDER_ERROR",
        )
        self.provider = provider


class WebhookVerificationError(PaymentServiceError):
    """Error de verificación de webhook."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Webhook verification failed: {message}",
            code="WEBHOOK_VERIFICATION_FAILED",
        )
