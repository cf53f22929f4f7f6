"""
Puerto de entrada: Extractor de texto.

Define el contrato para extraer el texto de un estado de cuenta en PDF,
separado por páginas:

    TextExtractor (interfaz)
    ├── PdfplumberExtractor     → PDFs nativos (texto embebido + palabras)
    └── OcrExtractor            → PDFs escaneados (pytesseract)

¿Por qué es una Abstract Base Class (ABC)?
Porque queremos que Python lance un error si alguien crea un adaptador
que no implementa todos los métodos.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.page_text import PageText


class TextExtractor(ABC):
    """Interfaz para extraer texto de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        StatementReconciler prueba los extractores en orden de prioridad
        y usa los que devuelvan True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto del archivo, una PageText por página.

        Raises:
            ExtractionError: Si falla la extracción (archivo corrupto,
                            contraseña, librería no disponible).
            FormatoInvalidoError: Si el archivo no existe o no es PDF.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Ejemplo: 'pdfplumber', 'ocr-tesseract'."""
        ...
