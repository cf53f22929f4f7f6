"""
Modelo de dominio: Palabra con coordenadas de posición.

pdfplumber.extract_words() devuelve diccionarios con el texto y la caja
de cada palabra. WordInfo es nuestra versión tipada e inmutable.

Se usa para resolver "qué monto hay donde el usuario hizo clic" y para
construir el rectángulo resaltado de un saldo.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WordInfo:
    """Una palabra individual extraída de un PDF con sus coordenadas.

    Sistema de coordenadas de pdfplumber:
    - Origen (0, 0) en la esquina SUPERIOR IZQUIERDA de la página.
    - X crece hacia la derecha, Y (top/bottom) crece hacia abajo.
    - Unidades en puntos PDF (1 punto = 1/72 pulgada).
    """

    text: str
    x0: float
    x1: float
    top: float
    bottom: float

    @property
    def center_x(self) -> float:
        return (self.x0 + self.x1) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2
