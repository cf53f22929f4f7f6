"""
Normalización de códigos de moneda.

Las monedas llegan como las escribe el banco o la extracción:
"KSH", "Kenya Shillings", "K.SHS", "US DOLLARS", "Euro". Para comparar
la moneda de la extracción contra la moneda registrada de la cuenta y
para formatear montos, primero se normalizan a código ISO.
"""

DEFAULT_CURRENCY = "USD"

_CURRENCY_MAP: dict[str, str] = {
    # --- Euro ---
    "EURO": "EUR",
    "EUROS": "EUR",
    # --- Dólar ---
    "US DOLLAR": "USD",
    "US DOLLARS": "USD",
    "USDOLLAR": "USD",
    # --- Libra ---
    "POUND": "GBP",
    "POUNDS": "GBP",
    "STERLING": "GBP",
    # --- Chelín keniano ---
    "KENYA SHILLING": "KES",
    "KENYA SHILLINGS": "KES",
    "KENYAN SHILLING": "KES",
    "KENYAN SHILLINGS": "KES",
    "KSH": "KES",
    "K.SH": "KES",
    "KSHS": "KES",
    "K.SHS": "KES",
    "SH": "KES",
    "KES": "KES",
}


def normalize_currency_code(code: str | None) -> str:
    """Convierte una moneda escrita de cualquier forma a su código ISO.

    Si no está en el mapa se devuelve en mayúsculas tal cual (ya es un
    código ISO en la mayoría de los casos). Vacío o None → USD.

    Ejemplos:
        >>> normalize_currency_code("Kenya Shillings")
        'KES'
        >>> normalize_currency_code("chf")
        'CHF'
        >>> normalize_currency_code(None)
        'USD'
    """
    if not code or not code.strip():
        return DEFAULT_CURRENCY

    upper_code = " ".join(code.upper().split())
    return _CURRENCY_MAP.get(upper_code, upper_code)
