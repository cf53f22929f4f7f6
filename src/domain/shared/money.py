"""
Utilidades para manejo de montos monetarios.

Todos los saldos del dominio (apertura, cierre, saldo de QuickBooks) son
`Decimal`. Con float, 100.00 - 100.02 = -0.01999999999999602 y la
comparación contra la tolerancia de 0.01 deja de ser confiable.

Los montos llegan de tres fuentes:
- Texto seleccionado en el PDF: "$1,234,567.89", "KES 1,234.56".
- Registros JSON del almacén: números (float/int) o strings.
- Argumentos del CLI: strings.
"""

import re
from decimal import Decimal, InvalidOperation

# Mismo patrón que se usa al seleccionar texto en el visor del PDF:
# el primer número (con comas y punto opcional) es el monto.
_AMOUNT_PATTERN = re.compile(r"\$?\s*[\d,]+\.?\d*")

_CURRENCY_TOKENS = re.compile(r"(?i)\b(?:KES|KSHS?|K\.SHS?|USD|EUR|GBP)\b|\$")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convierte un valor numérico cualquiera a Decimal.

    Los float se convierten vía str() para no heredar el error binario:
    Decimal(100.005) = 100.00499999999999545... pero
    Decimal(str(100.005)) = 100.005.

    Raises:
        ValueError: Si el valor no es numérico.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Un booleano no es un monto: {value}")
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    return parse_money(value)


def parse_money(text: str) -> Decimal:
    """Convierte un texto con formato monetario a Decimal.

    Formatos aceptados:
    - Con símbolo o código: "$1,234.56", "KES 1,234.56", "Ksh 1,234.56"
    - Sin símbolo: "1,234.56", "1234.56"
    - Negativo: "-1,234.56"
    - Negativo contable: "(1,234.56)"

    Raises:
        ValueError: Si el texto no se puede convertir a un monto válido.

    Ejemplos:
        >>> parse_money("KES 1,234.56")
        Decimal('1234.56')
        >>> parse_money("(500.00)")
        Decimal('-500.00')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_money espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    cleaned = _CURRENCY_TOKENS.sub("", text.strip())
    cleaned = cleaned.replace(" ", "").replace(",", "")

    negative = cleaned.startswith("(") and cleaned.endswith(")")
    if negative:
        cleaned = cleaned[1:-1]

    if not cleaned or cleaned == "-":
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    try:
        result = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")

    return -result if negative else result


def parse_money_safe(text: str | None) -> Decimal:
    """Versión "segura" de parse_money que retorna Decimal("0") ante errores.

    Se usa para campos opcionales de la extracción (saldo de apertura
    vacío, "-", "N/A"). NO usarla para el saldo de cierre que se concilia.
    """
    if not text or text.strip() in ("", "-", "N/A", "n/a"):
        return Decimal("0")

    try:
        return parse_money(text)
    except ValueError:
        return Decimal("0")


def find_first_amount(text: str | None) -> tuple[Decimal, int] | None:
    """Primer monto de un texto libre junto con su posición en el texto.

    La posición sirve para buscar la fecha más cercana al monto.
    """
    if not text:
        return None

    for match in _AMOUNT_PATTERN.finditer(text):
        candidate = match.group(0).replace("$", "").replace(",", "").strip()
        if not candidate or not any(ch.isdigit() for ch in candidate):
            continue
        try:
            return Decimal(candidate), match.start()
        except InvalidOperation:
            continue
    return None


def format_money(amount: Decimal, currency: str | None = None) -> str:
    """Formatea un Decimal como string monetario legible.

    Ejemplos:
        >>> format_money(Decimal("1234567.891"), "KES")
        'KES 1,234,567.89'
        >>> format_money(Decimal("-0.02"))
        '-0.02'
    """
    amount = amount.quantize(Decimal("0.01"))
    if amount < 0:
        text = f"-{abs(amount):,.2f}"
    else:
        text = f"{amount:,.2f}"
    return f"{currency} {text}" if currency else text
