"""
Servicio de dominio: Validación de una extracción contra la cuenta registrada.

Antes de aceptar los datos leídos de un PDF se comparan con la cuenta
bancaria a la que se subió el documento. Cada discrepancia se reporta con
un mensaje fijo; la interfaz decide si pide confirmación o rechaza.

Reglas (todas las comparaciones de texto son sin mayúsculas/minúsculas):
- Empresa: si la cuenta tiene empresa, el nombre extraído debe contenerla.
- Banco: el nombre extraído debe contener el de la cuenta. Se ignora si
  la extracción no encontró el banco ("Not Available").
- Cuenta: uno de los dos números debe contener al otro (los PDFs suelen
  mostrar el número enmascarado o con prefijos de sucursal).
- Moneda: iguales después de normalize_currency_code.
- Periodo: el mes del ciclo debe caer dentro del periodo extraído.
"""

from src.domain.models.statement import BankAccount, StatementExtraction, ValidationResult
from src.domain.services.period_resolver import parse_period
from src.domain.shared.currency import normalize_currency_code

COMPANY_MISMATCH = "Company name mismatch"
BANK_MISMATCH = "Bank name mismatch"
ACCOUNT_MISMATCH = "Account number mismatch"
CURRENCY_MISMATCH = "Currency mismatch"
PERIOD_MISMATCH = "Statement period mismatch"

# Valores que devuelve la extracción cuando no encontró el banco
_UNAVAILABLE_BANK_NAMES = frozenset({"Not Available", "Not available in text"})


def is_period_contained(statement_period: str | None, month: int, year: int) -> bool:
    """Indica si el mes (0-11) y año caen dentro del texto de periodo.

    Si el texto no se puede interpretar, no contiene nada.
    """
    period = parse_period(statement_period)
    return period is not None and period.contains(month, year)


def validate_extraction(
    extraction: StatementExtraction,
    account: BankAccount,
    cycle_month: int,
    cycle_year: int,
) -> ValidationResult:
    """Compara la extracción con la cuenta y devuelve las discrepancias."""
    mismatches: list[str] = []

    if account.company_name:
        extracted = (extraction.company_name or "").lower()
        if account.company_name.lower() not in extracted:
            mismatches.append(COMPANY_MISMATCH)

    bank_name = extraction.bank_name
    if bank_name and bank_name not in _UNAVAILABLE_BANK_NAMES:
        if account.bank_name.lower() not in bank_name.lower():
            mismatches.append(BANK_MISMATCH)

    if account.account_number and extraction.account_number:
        if (
            account.account_number not in extraction.account_number
            and extraction.account_number not in account.account_number
        ):
            mismatches.append(ACCOUNT_MISMATCH)

    if extraction.currency and account.currency:
        if normalize_currency_code(extraction.currency) != normalize_currency_code(account.currency):
            mismatches.append(CURRENCY_MISMATCH)

    if extraction.statement_period:
        if not is_period_contained(extraction.statement_period, cycle_month, cycle_year):
            mismatches.append(PERIOD_MISMATCH)

    return ValidationResult(mismatches=tuple(mismatches))
