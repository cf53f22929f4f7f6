"""
Servicio de dominio: Detección de meses en las páginas del PDF y
selección de montos.

Un estado de cuenta de enero a julio no dice en qué página termina cada
mes. Se infiere buscando la fecha más reciente de cada página: si la
última fecha de la página 3 es 31/01/2024, la página 3 pertenece a enero.

La selección de montos toma el texto que el usuario marcó (o las palabras
cercanas a un punto de la página) y saca el primer número como candidato
a saldo de cierre.
"""

from src.domain.models.detected_period import BalanceSelection, DetectedPeriod
from src.domain.models.page_text import PageText
from src.domain.shared.date_parser import find_nearby_date, latest_date
from src.domain.shared.money import find_first_amount


def detect_periods(pages: list[PageText]) -> list[DetectedPeriod]:
    """Detecta qué mes termina en cada página.

    Reglas:
    - Por cada página se toma la fecha válida más reciente.
    - Si ese mes/año ya se vio en una página anterior, se conserva la
      primera página y solo se actualiza last_date.
    - El resultado queda en orden de primera aparición.
    - Páginas sin fechas válidas no aportan nada.
    """
    detected: dict[tuple[int, int], DetectedPeriod] = {}

    for page in pages:
        found = latest_date(page.text)
        if found is None:
            continue

        key = (found.value.month - 1, found.value.year)
        previous = detected.get(key)
        detected[key] = DetectedPeriod(
            month=key[0],
            year=key[1],
            page=previous.page if previous else page.page_num,
            last_date=found.text,
        )

    return list(detected.values())


def extract_selection(
    text: str,
    page: int,
    x: float,
    y: float,
    default_date: str | None = None,
) -> BalanceSelection | None:
    """Convierte el texto seleccionado en un candidato a saldo.

    Args:
        text: Texto seleccionado (puede incluir etiquetas y fechas).
        page: Página de la selección (1-indexed).
        x, y: Punto de la selección en la página.
        default_date: Fecha a usar si no hay ninguna cerca del monto.

    Returns:
        BalanceSelection con el primer monto del texto, o None si el
        texto no contiene ningún número.
    """
    found = find_first_amount(text)
    if found is None:
        return None

    value, position = found
    date = find_nearby_date(text, position) or default_date
    return BalanceSelection(value=value, text=text, page=page, x=x, y=y, date=date)


def select_at_position(
    page: PageText,
    x: float,
    y: float,
    default_date: str | None = None,
    radius: float = 50.0,
) -> BalanceSelection | None:
    """Igual que extract_selection, pero arma el texto con las palabras
    de la página cercanas al punto (x, y).

    Solo funciona con extractores que entregan coordenadas (pdfplumber).
    """
    if not page.has_words:
        return None
    words = page.words_near(x, y, radius)
    if not words:
        return None
    text = " ".join(w.text for w in words)
    return extract_selection(text, page.page_num, x, y, default_date)
