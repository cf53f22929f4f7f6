"""
Adaptadores de entrada: Patrones de periodo con nombre de mes.

Tres formas, que se prueban en este orden (después del rango numérico):

1. Mismo año:     "January - July 2024", "Jan – Mar 2024"
2. Entre años:    "November 2023 - February 2024"
3. Un solo mes:   "January 2024", "SEPT 2023"

El orden importa. "Nov 2023 - Feb 2024" NO coincide con el patrón de
mismo año (entre "Nov" y el guion está el año), así que cae al de entre
años. Y el de un solo mes va al final porque coincidiría con el primer
"<Mes> <Año>" de cualquier rango.

Los nombres se resuelven con month_index (prefijo de 3 letras). Un
nombre que no resuelve (-1) descarta la coincidencia de ese patrón y se
prueba el siguiente. Si los nombres resuelven pero el rango está al revés
("December - January 2024") se lanza PeriodoFueraDeRangoError y ya no se
prueba ningún otro patrón.
"""

import re

from src.domain.exceptions import PeriodoFueraDeRangoError
from src.domain.models.period import ParsedPeriod
from src.domain.ports.period_pattern import PeriodPattern
from src.domain.shared.month_map import month_index
from src.domain.shared.text_cleaner import RANGE_DASHES

_DASH = r"\s*[" + RANGE_DASHES + r"]\s*"
_MONTH = r"([A-Za-z]+)"
_YEAR = r"(\d{4})"

_SAME_YEAR = re.compile(_MONTH + _DASH + _MONTH + r"\s+" + _YEAR)
_CROSS_YEAR = re.compile(_MONTH + r"\s+" + _YEAR + _DASH + _MONTH + r"\s+" + _YEAR)
_SINGLE = re.compile(_MONTH + r"\s+" + _YEAR)


def _build_period(
    text: str, start_name: str, start_year: str, end_name: str, end_year: str
) -> ParsedPeriod | None:
    """Arma el periodo, o None si algún nombre de mes no se reconoce.

    Raises:
        PeriodoFueraDeRangoError: Si el inicio es posterior al fin.
    """
    start_month = month_index(start_name)
    end_month = month_index(end_name)
    if start_month < 0 or end_month < 0:
        return None

    try:
        return ParsedPeriod(
            start_month=start_month,
            start_year=int(start_year),
            end_month=end_month,
            end_year=int(end_year),
        )
    except ValueError as e:
        raise PeriodoFueraDeRangoError(text, str(e))


class SameYearMonthRangePattern(PeriodPattern):
    """<Mes> - <Mes> <Año>."""

    @property
    def name(self) -> str:
        return "same-year-month-range"

    def match(self, text: str) -> ParsedPeriod | None:
        m = _SAME_YEAR.search(text)
        if not m:
            return None
        start_name, end_name, year = m.groups()
        return _build_period(m.group(0), start_name, year, end_name, year)


class CrossYearMonthRangePattern(PeriodPattern):
    """<Mes> <Año> - <Mes> <Año>."""

    @property
    def name(self) -> str:
        return "cross-year-month-range"

    def match(self, text: str) -> ParsedPeriod | None:
        m = _CROSS_YEAR.search(text)
        if not m:
            return None
        start_name, start_year, end_name, end_year = m.groups()
        return _build_period(m.group(0), start_name, start_year, end_name, end_year)


class SingleMonthPattern(PeriodPattern):
    """<Mes> <Año> → inicio y fin son el mismo mes."""

    @property
    def name(self) -> str:
        return "single-month"

    def match(self, text: str) -> ParsedPeriod | None:
        m = _SINGLE.search(text)
        if not m:
            return None
        month_text, year = m.groups()
        return _build_period(m.group(0), month_text, year, month_text, year)
