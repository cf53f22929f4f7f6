"""
Modelo de dominio: Resultado de la conciliación de un saldo.

La conciliación compara el saldo de cierre de un mes (leído del estado de
cuenta) contra el saldo que registra la contabilidad (QuickBooks).
Ambos montos deben estar en la misma moneda; normalizar la moneda es
responsabilidad de quien llama.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.domain.models.detected_period import DetectedPeriod
from src.domain.models.monthly_balance import MonthlyBalance
from src.domain.models.period import CalendarMonth, ParsedPeriod
from src.domain.models.statement import StatementRecord, ValidationResult


class ReconciliationStatus(str, Enum):
    RECONCILED = "reconciled"
    DIFFERENCE = "difference"

    @property
    def label(self) -> str:
        """Texto que se muestra en pantalla y en el reporte."""
        return "Reconciled" if self is ReconciliationStatus.RECONCILED else "Difference"


@dataclass(frozen=True)
class ReconciliationResult:
    """Resultado de comparar saldo del estado de cuenta vs saldo externo."""

    status: ReconciliationStatus

    delta: Decimal
    """statement_balance - external_balance, con signo."""

    statement_balance: Decimal
    external_balance: Decimal

    @property
    def is_reconciled(self) -> bool:
        return self.status is ReconciliationStatus.RECONCILED


@dataclass(frozen=True)
class ReconciliationReport:
    """Todo lo que produjo el procesamiento de un estado de cuenta.

    Lo PRODUCE StatementReconciler y lo CONSUME el ReportWriter.
    """

    record: StatementRecord
    """Registro con los saldos mensuales ya completados."""

    selected_month: CalendarMonth
    """Mes que se concilia (normalmente el mes del ciclo)."""

    period: ParsedPeriod | None = None
    """Periodo interpretado del texto; None si no se pudo interpretar."""

    detected_periods: tuple[DetectedPeriod, ...] = ()
    months_added: int = 0
    """Saldos vacíos que se agregaron para completar el periodo."""

    result: ReconciliationResult | None = None
    """None si falta el saldo externo o el saldo de cierre del mes."""

    validation: ValidationResult | None = None
    """None si no hay cuenta registrada contra la cual validar."""

    pages: int = 0
    source_file: str = ""

    @property
    def balances(self) -> tuple[MonthlyBalance, ...]:
        return self.record.extraction.monthly_balances
