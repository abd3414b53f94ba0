"""
Interfaz base abstracta para proveedores de órdenes de pago.
Define el contrato que todos los adapters deben implementar.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OrderOptions:
    """
    Opciones normalizadas para crear una orden en el proveedor.

    El monto ya viene en la unidad menor (paise para INR).
    """

    amount: int
    currency: str
    receipt: str
    notes: dict[str, Any] = field(default_factory=dict)
    payment_capture: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Payload tal como lo espera la API de órdenes de Razorpay."""
        return {
            "amount": self.amount,
            "currency": self.currency,
            "receipt": self.receipt,
            "payment_capture": self.payment_capture,
            "notes": dict(self.notes),
        }


class OrderProvider(ABC):
    """
    Interfaz abstracta para el servicio de órdenes de la pasarela.

    El resultado de create_order es opaco: se devuelve al cliente
    sin modificaciones.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nombre del proveedor (ej: 'razorpay', 'mock')."""
        pass

    @abstractmethod
    async def create_order(self, options: OrderOptions) -> dict[str, Any]:
        """
        Crea una orden en el proveedor.

        Args:
            options: Opciones de la orden (monto en unidad menor)

        Returns:
            Objeto de orden tal como lo devuelve el proveedor

        Raises:
            PaymentProviderError: Si la llamada al proveedor falla
        """
        pass
