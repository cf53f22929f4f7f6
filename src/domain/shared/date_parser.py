"""
Búsqueda de fechas DD/MM/YYYY en texto de estados de cuenta.

Los estados de cuenta de los bancos con los que trabajamos imprimen las
fechas de movimientos como DD/MM/YYYY (también con '-' o '.'). Este módulo
las localiza en texto libre: páginas completas (para detectar en qué
página termina cada mes) o fragmentos seleccionados (para asignar la
fecha de cierre a un saldo).
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date

DATE_PATTERN = re.compile(r"(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})")


@dataclass(frozen=True)
class FoundDate:
    """Una fecha encontrada en el texto, con su posición."""

    text: str
    value: date
    start: int


def find_dates(text: str) -> list[FoundDate]:
    """Encuentra todas las fechas DD/MM/YYYY válidas de un texto.

    Las fechas imposibles (31/02/2024, 10/13/2024) se descartan en
    silencio: en el texto de un PDF suelen ser números de referencia
    que casualmente tienen forma de fecha.
    """
    found: list[FoundDate] = []
    for match in DATE_PATTERN.finditer(text or ""):
        day, month, year = (int(g) for g in match.groups())
        try:
            value = date(year, month, day)
        except ValueError:
            continue
        found.append(FoundDate(text=match.group(0), value=value, start=match.start()))
    return found


def latest_date(text: str) -> FoundDate | None:
    """La fecha más reciente del texto, o None si no hay ninguna.

    En empate gana la primera aparición.
    """
    dates = find_dates(text)
    if not dates:
        return None
    return max(dates, key=lambda d: d.value)


def find_nearby_date(text: str, position: int, window: int = 100) -> str | None:
    """Busca la primera fecha en una ventana de ±window caracteres.

    Devuelve el texto de la fecha tal como aparece (no normalizado)
    porque así se guarda en closing_date.
    """
    if not text:
        return None
    start = max(0, position - window)
    end = min(len(text), position + window)
    match = DATE_PATTERN.search(text[start:end])
    return match.group(0) if match else None


def last_day_of_month(month: int, year: int) -> int:
    """Último día del mes. `month` es 0-based (0 = enero)."""
    return calendar.monthrange(year, month + 1)[1]


def default_closing_date(month: int, year: int) -> str:
    """Fecha de cierre por defecto de un mes: su último día en DD/MM/YYYY.

    Ejemplo:
        >>> default_closing_date(1, 2024)
        '29/02/2024'
    """
    return f"{last_day_of_month(month, year):02d}/{month + 1:02d}/{year:04d}"
