"""
Modelos de dominio: Periodo parseado y mes calendario.

Un ParsedPeriod es el resultado de interpretar el texto libre del periodo
de un estado de cuenta ("January - July 2024", "01/01/2024 - 31/03/2024").
No se persiste: se recalcula cada vez que cambia el texto.

Convención de meses: 0-based (0 = enero, 11 = diciembre).
"""

from dataclasses import dataclass

from src.domain.shared.date_parser import last_day_of_month
from src.domain.shared.month_map import month_name


def _validate_month(field_name: str, value: int) -> None:
    if not 0 <= value <= 11:
        raise ValueError(f"{field_name} fuera de rango: {value}. Debe ser 0-11.")


@dataclass(frozen=True)
class CalendarMonth:
    """Un mes calendario concreto (mes 0-11 + año).

    Para ordenar cronológicamente usar `key`, no los campos.
    """

    month: int
    """Índice del mes, 0-11."""

    year: int

    def __post_init__(self) -> None:
        _validate_month("month", self.month)

    @property
    def key(self) -> tuple[int, int]:
        """Clave cronológica (year, month). Es la clave de BalanceLedger."""
        return (self.year, self.month)

    @property
    def label(self) -> str:
        """Ejemplo: 'January 2024'."""
        return f"{month_name(self.month)} {self.year}"

    @property
    def month_year(self) -> str:
        """Ejemplo: '2024-01'. Mismo formato que los ciclos de estado de cuenta."""
        return f"{self.year:04d}-{self.month + 1:02d}"

    @property
    def last_day(self) -> int:
        return last_day_of_month(self.month, self.year)

    def next(self) -> "CalendarMonth":
        """El mes siguiente; diciembre pasa a enero del año siguiente."""
        if self.month >= 11:
            return CalendarMonth(month=0, year=self.year + 1)
        return CalendarMonth(month=self.month + 1, year=self.year)


@dataclass(frozen=True)
class ParsedPeriod:
    """Rango de meses que cubre un estado de cuenta, ambos extremos incluidos.

    Invariante: (start_year, start_month) <= (end_year, end_month).
    Si el texto no se puede interpretar, no existe ParsedPeriod (None).
    """

    start_month: int
    start_year: int
    end_month: int
    end_year: int

    def __post_init__(self) -> None:
        _validate_month("start_month", self.start_month)
        _validate_month("end_month", self.end_month)
        if (self.start_year, self.start_month) > (self.end_year, self.end_month):
            raise ValueError(
                f"El inicio del periodo ({self.start_year}-{self.start_month + 1:02d}) "
                f"es posterior al fin ({self.end_year}-{self.end_month + 1:02d})"
            )

    @classmethod
    def single(cls, month: int, year: int) -> "ParsedPeriod":
        """Periodo de un solo mes."""
        return cls(start_month=month, start_year=year, end_month=month, end_year=year)

    @property
    def start(self) -> CalendarMonth:
        return CalendarMonth(month=self.start_month, year=self.start_year)

    @property
    def end(self) -> CalendarMonth:
        return CalendarMonth(month=self.end_month, year=self.end_year)

    @property
    def month_count(self) -> int:
        """Cantidad de meses del rango, incluyendo ambos extremos."""
        return (self.end_year - self.start_year) * 12 + (self.end_month - self.start_month) + 1

    def contains(self, month: int, year: int) -> bool:
        return (self.start_year, self.start_month) <= (year, month) <= (self.end_year, self.end_month)

    @property
    def label(self) -> str:
        if self.start == self.end:
            return self.start.label
        return f"{self.start.label} - {self.end.label}"
