"""
Resolución de nombres de meses a índices.

Los periodos de los estados de cuenta llegan escritos a mano o
pre-llenados por la extracción del documento: "January - July 2024",
"Jan 2024", "SEPTEMBER 2023", "sept 2023". La única regla que se aplica
es la de prefijo: se toman las 3 primeras letras en minúsculas y se
buscan en la lista fija jan..dec.

Convención: el índice es 0-based (0 = enero, 11 = diciembre) en todo el
dominio. Solo los textos para personas (DD/MM/YYYY, YYYY-MM) usan 1-12.
"""

import calendar

# Orden fijo: la posición en la tupla ES el índice del mes.
MONTH_PREFIXES: tuple[str, ...] = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)

MONTH_NAMES: tuple[str, ...] = tuple(calendar.month_name[1:])


def month_index(month_name: str | None) -> int:
    """Convierte un nombre de mes a su índice 0-11 por prefijo de 3 letras.

    Nombres de menos de 3 letras o que no empiezan con un prefijo
    conocido devuelven -1 (no se lanza excepción: el parser de periodos
    usa -1 para descartar la coincidencia y probar el siguiente patrón).

    Ejemplos:
        >>> month_index("January")
        0
        >>> month_index("DEC")
        11
        >>> month_index("Ju")
        -1
    """
    if not month_name:
        return -1
    prefix = month_name.strip().lower()[:3]
    if len(prefix) < 3:
        return -1
    try:
        return MONTH_PREFIXES.index(prefix)
    except ValueError:
        return -1


def month_name(month: int) -> str:
    """Nombre completo en inglés de un índice 0-11. Ejemplo: 0 → 'January'."""
    if not 0 <= month <= 11:
        raise ValueError(f"Índice de mes fuera de rango: {month}. Debe ser 0-11.")
    return MONTH_NAMES[month]
