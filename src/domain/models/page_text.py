"""
Modelo de dominio: Texto extraído de una página.

Puente entre los adaptadores de extracción de texto (pdfplumber, OCR) y
los servicios que buscan fechas y montos en el documento.

¿Por qué no pasar un string crudo? Porque:
1. La detección de periodos necesita saber en qué página termina cada mes.
2. La selección de montos necesita las coordenadas de cada palabra para
   encontrar el texto que está cerca del punto donde se hizo clic.
"""

from dataclasses import dataclass, field

from src.domain.models.word_info import WordInfo


@dataclass(frozen=True)
class PageText:
    """Texto extraído de una página individual de un documento.

    El campo `words` es opcional. Si el TextExtractor no lo llena
    (OcrExtractor), queda como lista vacía y la selección por posición
    no está disponible para esa página.
    """

    page_num: int
    """Número de página (1-indexed)."""

    text: str

    words: list[WordInfo] = field(default_factory=list)
    """Palabras con sus coordenadas. Vacía si el extractor no las produce."""

    @property
    def has_words(self) -> bool:
        return len(self.words) > 0

    @property
    def is_empty(self) -> bool:
        """Indica si la página no tiene texto útil."""
        return not self.text.strip()

    def words_near(self, x: float, y: float, radius: float = 50.0) -> list[WordInfo]:
        """Palabras cuyo centro está a menos de `radius` puntos del punto (x, y)
        en ambos ejes, en orden de lectura (arriba-abajo, izquierda-derecha)."""
        near = [w for w in self.words if abs(w.center_x - x) < radius and abs(w.center_y - y) < radius]
        return sorted(near, key=lambda w: (round(w.top), w.x0))
