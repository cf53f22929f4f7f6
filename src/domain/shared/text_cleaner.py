"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto extraído de PDFs y el
texto de periodo que escribe el usuario, antes de aplicar los regex.

Estas funciones NO tienen lógica de negocio. Solo operan sobre strings.
"""

import re

# Guion, en-dash y em-dash: los tres aparecen en periodos reales.
RANGE_DASHES = "-–—"


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs/saltos por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  January   -  July\\t2024 ")
        'January - July 2024'
    """
    return re.sub(r"\s+", " ", text).strip()


def remove_non_printable(text: str) -> str:
    """Elimina caracteres de control excepto \\n, \\r, \\t.

    El texto de PDFs escaneados (OCR) a veces trae caracteres invisibles
    que rompen los regex de fechas.
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_pdf_text(text: str) -> str:
    """Limpieza estándar del texto crudo de una página de PDF.

    NO aplica clean_whitespace porque eso eliminaría los \\n que se usan
    para ubicar fechas y montos línea por línea.
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    return text


def normalize_period_text(text: str | None) -> str:
    """Prepara un texto de periodo para los patrones.

    Colapsa espacios y quita el espacio no separable que algunos PDFs
    insertan entre el mes y el año. No toca los guiones: los patrones
    aceptan '-', '–' y '—' directamente.
    """
    if not text:
        return ""
    return clean_whitespace(remove_non_printable(text.replace("\u00a0", " ")))
