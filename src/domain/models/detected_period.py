"""
Modelos de dominio: Periodo detectado en el PDF y selección de un monto.

DetectedPeriod: al recorrer las páginas del PDF se busca la fecha más
reciente de cada página. Eso indica en qué página termina cada mes
dentro de un estado de cuenta de varios meses, y permite saltar de un
mes a otro al capturar los saldos.

BalanceSelection: el monto que el usuario seleccionó en una página,
candidato a saldo de cierre de un mes.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.period import CalendarMonth


@dataclass(frozen=True)
class DetectedPeriod:
    """Un mes cuya última fecha aparece en una página del PDF."""

    month: int
    """Índice del mes, 0-11."""

    year: int

    page: int
    """Primera página (1-indexed) donde apareció una fecha de este mes
    como la más reciente."""

    last_date: str | None = None
    """Texto de la fecha más reciente vista para este mes."""

    @property
    def calendar_month(self) -> CalendarMonth:
        return CalendarMonth(month=self.month, year=self.year)


@dataclass(frozen=True)
class BalanceSelection:
    """Monto seleccionado en el PDF para asignarlo como saldo de cierre."""

    value: Decimal
    text: str
    """Texto completo seleccionado, del cual se tomó el monto."""

    page: int
    x: float
    y: float
    date: str | None = None
    """Fecha cercana a la selección (DD/MM/YYYY) o la de cierre por defecto."""
