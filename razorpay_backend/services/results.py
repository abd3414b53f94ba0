"""
Resultados tipados de los servicios.

Los servicios no lanzan excepciones para resultados esperados: devuelven
uno de estos valores y la capa HTTP los traduce a códigos de estado.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Operación completada."""

    body: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass(frozen=True)
class ClientError:
    """Input faltante o inválido, o firma que no coincide."""

    body: dict[str, Any] = field(default_factory=dict)
    status_code: int = 400


@dataclass(frozen=True)
class ServerError:
    """Fallo inesperado (proveedor, cálculo de firma, etc.)."""

    body: dict[str, Any] = field(default_factory=dict)
    status_code: int = 500


ServiceResult = Union[Success, ClientError, ServerError]
