"""
Adaptador de entrada: Patrón de rango de fechas numéricas.

Formato: "DD/MM/YYYY - DD/MM/YYYY". Es el que imprimen la mayoría de los
bancos en el encabezado ("Statement period 01/01/2024 - 31/01/2024").

Variantes aceptadas:
- Separador de fecha: '/', '.', '-'  → "01.01.2024", "01-01-2024"
- Guion del rango: '-', '–' (en-dash), '—' (em-dash)

El día se captura pero NO se valida (31/02/2024 se acepta): para armar
el rango de meses solo importan mes y año.

Si el texto coincide pero el mes es 00 o 13+, o el inicio es posterior al
fin, se lanza PeriodoFueraDeRangoError: el texto es claramente un rango de
fechas y ningún otro patrón debe reinterpretarlo.
"""

import re

from src.domain.exceptions import PeriodoFueraDeRangoError
from src.domain.models.period import ParsedPeriod
from src.domain.ports.period_pattern import PeriodPattern
from src.domain.shared.text_cleaner import RANGE_DASHES

_DATE = r"(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{4})"
_NUMERIC_RANGE = re.compile(_DATE + r"\s*[" + RANGE_DASHES + r"]\s*" + _DATE)


class NumericDateRangePattern(PeriodPattern):
    """DD/MM/YYYY - DD/MM/YYYY → meses 0-based (mes - 1)."""

    @property
    def name(self) -> str:
        return "numeric-date-range"

    def match(self, text: str) -> ParsedPeriod | None:
        m = _NUMERIC_RANGE.search(text)
        if not m:
            return None

        # Grupos: 1=día inicio, 2=mes inicio, 3=año inicio, 4-6 igual para el fin
        try:
            start_month = int(m.group(2)) - 1
            start_year = int(m.group(3))
            end_month = int(m.group(5)) - 1
            end_year = int(m.group(6))
        except ValueError:
            return None

        try:
            return ParsedPeriod(
                start_month=start_month,
                start_year=start_year,
                end_month=end_month,
                end_year=end_year,
            )
        except ValueError as e:
            raise PeriodoFueraDeRangoError(m.group(0), str(e))
