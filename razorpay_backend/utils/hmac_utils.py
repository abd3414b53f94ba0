"""
Utilidades para firmas HMAC-SHA256.
Usadas para verificar confirmaciones de pago y webhooks de Razorpay.
"""

import hashlib
import hmac

import structlog


logger = structlog.get_logger(__name__)


def _secret_bytes(secret: str | bytes | None) -> bytes:
    if secret is None:
        return b""
    if isinstance(secret, bytes):
        return secret
    return secret.encode("utf-8")


def generate_signature(payload: bytes, secret: str | bytes | None) -> str:
    """
    Genera una firma HMAC-SHA256 para un payload.

    Args:
        payload: Datos a firmar (bytes)
        secret: Clave secreta (str se codifica en UTF-8)

    Returns:
        Firma hexadecimal en minúsculas
    """
    return hmac.new(
        _secret_bytes(secret),
        payload,
        hashlib.sha256,
    ).hexdigest()


def verify_signature(
    payload: bytes,
    signature: str | None,
    secret: str | bytes | None,
) -> bool:
    """
    Verifica una firma HMAC-SHA256 en tiempo constante.

    Nunca lanza excepción por una firma mal formada: cualquier valor
    que no coincida exactamente con el digest hexadecimal retorna False.

    Args:
        payload: Datos firmados (bytes)
        signature: Firma hexadecimal recibida
        secret: Clave secreta

    Returns:
        True si la firma es válida
    """
    if not isinstance(signature, str):
        logger.debug("Signature missing or not a string", received_type=type(signature).__name__)
        return False

    expected = generate_signature(payload, secret)

    # compare_digest sobre bytes acepta cualquier contenido (no solo ASCII)
    return hmac.compare_digest(
        expected.encode("ascii"),
        signature.encode("utf-8", errors="surrogatepass"),
    )


def build_payment_message(order_id: str, payment_id: str) -> bytes:
    """
    Construye el mensaje canónico firmado por Razorpay tras el checkout.

    Formato: "<order_id>|<payment_id>" sin escapar ninguno de los dos.
    """
    return f"{order_id}|{payment_id}".encode("utf-8", errors="surrogatepass")


def generate_payment_signature(order_id: str, payment_id: str, secret: str | bytes | None) -> str:
    """Firma que Razorpay entrega al cliente para un par orden/pago."""
    return generate_signature(build_payment_message(order_id, payment_id), secret)


def verify_payment_signature(
    order_id: str,
    payment_id: str,
    signature: str | None,
    secret: str | bytes | None,
) -> bool:
    """Verifica la firma de una confirmación de pago del checkout."""
    return verify_signature(build_payment_message(order_id, payment_id), signature, secret)
