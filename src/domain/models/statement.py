"""
Modelos de dominio: Cuenta bancaria, extracción y registro de estado de cuenta.

StatementRecord es la fila del almacén de estados de cuenta por ciclo
(un registro por cuenta y mes de ciclo). Su parte `extraction` guarda
lo que se leyó del documento: banco, cuenta, moneda, texto del periodo,
saldos globales y la lista de saldos mensuales.

Decisiones de diseño:
- Los saldos mensuales viajan como tupla de MonthlyBalance (inmutable).
  Para editarlos se usa BalanceLedger y se reconstruye la extracción.
- Los campos opcionales son explícitos (None), no claves ausentes.
- Las claves del JSON que el modelo no conoce (`status`, otras columnas del
  documento, `bank_currency`...) se guardan en `extra` y se vuelven a
  escribir tal cual. No participan en la igualdad.
- Los montos se escriben como string (str de Decimal) para no perder
  centavos al pasar por float.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

from src.domain.models.monthly_balance import MonthlyBalance
from src.domain.shared.money import to_decimal


def _optional_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    return to_decimal(value)


def _amount_or_none(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


def _unknown_keys(data: dict[str, Any], known: set[str]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k not in known}


_EXTRACTION_KEYS = {
    "bank_name",
    "account_number",
    "currency",
    "statement_period",
    "company_name",
    "opening_balance",
    "closing_balance",
    "monthly_balances",
}

_RECORD_KEYS = {
    "id",
    "bank_id",
    "statement_month",
    "statement_year",
    "quickbooks_balance",
    "statement_extractions",
    "statement_document",
}


@dataclass(frozen=True)
class BankAccount:
    """Cuenta bancaria registrada de una empresa."""

    id: int
    bank_name: str
    account_number: str
    """Se guarda como string: puede tener ceros iniciales o guiones."""

    currency: str
    company_id: int | None = None
    company_name: str = ""

    def __post_init__(self) -> None:
        if not self.bank_name:
            raise ValueError("El nombre del banco no puede estar vacío")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BankAccount":
        return cls(
            id=int(data["id"]),
            bank_name=data.get("bank_name") or "",
            account_number=str(data.get("account_number") or ""),
            currency=data.get("bank_currency") or data.get("currency") or "",
            company_id=data.get("company_id"),
            company_name=data.get("company_name") or "",
        )


@dataclass(frozen=True)
class StatementExtraction:
    """Datos leídos de un estado de cuenta (automática o manualmente)."""

    bank_name: str | None = None
    account_number: str | None = None
    currency: str | None = None
    statement_period: str | None = None
    company_name: str | None = None
    opening_balance: Decimal | None = None
    closing_balance: Decimal | None = None
    monthly_balances: tuple[MonthlyBalance, ...] = ()

    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    """Claves desconocidas de la extracción (p. ej. `bank_currency`)."""

    def with_balances(self, balances: list[MonthlyBalance]) -> "StatementExtraction":
        return replace(self, monthly_balances=tuple(balances))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "bank_name": self.bank_name,
                "account_number": self.account_number,
                "currency": self.currency,
                "statement_period": self.statement_period,
                "company_name": self.company_name,
                "opening_balance": _amount_or_none(self.opening_balance),
                "closing_balance": _amount_or_none(self.closing_balance),
                "monthly_balances": [b.to_dict() for b in self.monthly_balances],
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "StatementExtraction":
        data = data or {}
        return cls(
            bank_name=data.get("bank_name"),
            account_number=data.get("account_number"),
            currency=data.get("currency"),
            statement_period=data.get("statement_period"),
            company_name=data.get("company_name"),
            opening_balance=_optional_decimal(data.get("opening_balance")),
            closing_balance=_optional_decimal(data.get("closing_balance")),
            monthly_balances=tuple(
                MonthlyBalance.from_dict(item) for item in data.get("monthly_balances") or []
            ),
            extra=_unknown_keys(data, _EXTRACTION_KEYS),
        )


@dataclass(frozen=True)
class StatementRecord:
    """Registro de un estado de cuenta para una cuenta y un mes de ciclo."""

    id: str
    bank_id: int

    statement_month: int
    """Mes del ciclo, 0-11 (misma convención que MonthlyBalance)."""

    statement_year: int

    quickbooks_balance: Decimal | None = None
    """Saldo registrado en contabilidad para el mes del ciclo."""

    extraction: StatementExtraction = field(default_factory=StatementExtraction)

    pdf_path: str | None = None
    """Ruta del PDF del estado de cuenta en el almacén de documentos."""

    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    """Columnas del registro que el modelo no usa (p. ej. `status`)."""

    document_extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    """Otras claves de `statement_document` (p. ej. `statement_excel`)."""

    def __post_init__(self) -> None:
        if not 0 <= self.statement_month <= 11:
            raise ValueError(f"Mes de ciclo fuera de rango: {self.statement_month}. Debe ser 0-11.")

    def with_balances(self, balances: list[MonthlyBalance]) -> "StatementRecord":
        return replace(self, extraction=self.extraction.with_balances(balances))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.id,
                "bank_id": self.bank_id,
                "statement_month": self.statement_month,
                "statement_year": self.statement_year,
                "quickbooks_balance": _amount_or_none(self.quickbooks_balance),
                "statement_extractions": self.extraction.to_dict(),
                "statement_document": {**self.document_extra, "statement_pdf": self.pdf_path},
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StatementRecord":
        document = data.get("statement_document") or {}
        return cls(
            id=str(data["id"]),
            bank_id=int(data["bank_id"]),
            statement_month=int(data["statement_month"]),
            statement_year=int(data["statement_year"]),
            quickbooks_balance=_optional_decimal(data.get("quickbooks_balance")),
            extraction=StatementExtraction.from_dict(data.get("statement_extractions")),
            pdf_path=document.get("statement_pdf"),
            extra=_unknown_keys(data, _RECORD_KEYS),
            document_extra=_unknown_keys(document, {"statement_pdf"}),
        )


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de validar una extracción contra la cuenta registrada."""

    mismatches: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.mismatches
