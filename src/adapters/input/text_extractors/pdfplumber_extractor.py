"""
Adaptador de entrada: Extractor de texto usando pdfplumber.

Lee estados de cuenta en PDF con texto embebido. Por cada página produce:
- el texto plano, donde se buscan las fechas que indican en qué página
  termina cada mes;
- las palabras con coordenadas, para convertir un clic en la página en
  un monto seleccionado (select_at_position).

Si mañana se cambia de librería (por ejemplo a PyMuPDF), solo cambia
este archivo: los servicios reciben PageText.
"""

from pathlib import Path

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.models.page_text import PageText
from src.domain.models.word_info import WordInfo
from src.domain.ports.text_extractor import TextExtractor
from src.domain.shared.text_cleaner import clean_pdf_text

# Import lazy: el proyecto se puede importar (y probar) sin pdfplumber.
try:
    import pdfplumber
    from pdfminer.pdfparser import PDFSyntaxError
except ImportError:
    pdfplumber = None  # type: ignore[assignment]
    PDFSyntaxError = None  # type: ignore[assignment,misc]


class PdfplumberExtractor(TextExtractor):
    """Extrae texto y palabras de PDFs nativos."""

    def __init__(self, include_words: bool = True) -> None:
        """
        Args:
            include_words: Si False, no se extraen coordenadas. Basta
                          para detectar periodos y es más rápido.
        """
        self._include_words = include_words

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Una PageText por página; las páginas sin texto van con text="".

        Raises:
            ExtractionError: PDF corrupto, protegido o sin páginas.
            FormatoInvalidoError: El archivo no existe o no es PDF.
        """
        if pdfplumber is None:
            raise ExtractionError(
                str(file_path),
                "pdfplumber no está instalado. Instalar con: pip install pdfplumber",
            )
        _check_pdf_path(file_path)

        try:
            with pdfplumber.open(file_path) as pdf:
                if not pdf.pages:
                    raise ExtractionError(str(file_path), "El PDF no tiene páginas")
                return [self._read_page(num, page) for num, page in enumerate(pdf.pages, start=1)]
        except ExtractionError:
            raise
        except PDFSyntaxError as e:
            raise ExtractionError(str(file_path), f"PDF corrupto o inválido: {e}")
        except Exception as e:
            message = str(e).lower()
            if "password" in message or "encrypt" in message:
                raise ExtractionError(str(file_path), "El PDF está protegido con contraseña")
            raise ExtractionError(str(file_path), str(e))

    def _read_page(self, page_num: int, page) -> PageText:
        text = clean_pdf_text(page.extract_text() or "")
        words: list[WordInfo] = []
        if self._include_words:
            words = [
                WordInfo(
                    text=w["text"],
                    x0=float(w["x0"]),
                    x1=float(w["x1"]),
                    top=float(w["top"]),
                    bottom=float(w["bottom"]),
                )
                for w in page.extract_words() or []
            ]
        return PageText(page_num=page_num, text=text, words=words)


def _check_pdf_path(file_path: Path) -> None:
    if not file_path.exists():
        raise FormatoInvalidoError(str(file_path), "PDF", "El archivo no existe")
    if file_path.suffix.lower() != ".pdf":
        raise FormatoInvalidoError(str(file_path), "PDF", f"Extensión inesperada: {file_path.suffix}")
