"""
Modelos de dominio del proyecto conciliacion-estados.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import ParsedPeriod, MonthlyBalance, ReconciliationResult
"""

from src.domain.models.detected_period import BalanceSelection, DetectedPeriod
from src.domain.models.monthly_balance import HighlightCoordinates, MonthlyBalance
from src.domain.models.page_text import PageText
from src.domain.models.period import CalendarMonth, ParsedPeriod
from src.domain.models.reconciliation import (
    ReconciliationReport,
    ReconciliationResult,
    ReconciliationStatus,
)
from src.domain.models.statement import (
    BankAccount,
    StatementExtraction,
    StatementRecord,
    ValidationResult,
)
from src.domain.models.word_info import WordInfo

__all__ = [
    "BalanceSelection",
    "BankAccount",
    "CalendarMonth",
    "DetectedPeriod",
    "HighlightCoordinates",
    "MonthlyBalance",
    "PageText",
    "ParsedPeriod",
    "ReconciliationReport",
    "ReconciliationResult",
    "ReconciliationStatus",
    "StatementExtraction",
    "StatementRecord",
    "ValidationResult",
    "WordInfo",
]
