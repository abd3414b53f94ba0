"""
Conversión de montos entre unidad mayor (rupias) y unidad menor (paise).
"""

from decimal import ROUND_HALF_UP, Context, Decimal

# Paise por rupia
MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: int | float | Decimal) -> int:
    """
    Convierte un monto en unidad mayor a unidad menor.

    Se parte de la representación decimal del número (str) para que
    10.005 se trate como 10.005 y no como 10.00499999...; el redondeo
    es half away from zero: 10.005 -> 1001, 0.125 -> 13.

    Args:
        amount: Monto en rupias

    Returns:
        Monto entero en paise
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    # Precisión suficiente para la parte entera completa (1e300 incluido)
    context = Context(prec=max(28, value.adjusted() + 5), rounding=ROUND_HALF_UP)
    minor = context.multiply(value, MINOR_UNITS_PER_MAJOR)
    return int(minor.quantize(Decimal("1"), context=context))
