"""
Adaptador de entrada: Extractor de texto por OCR (pytesseract + pdf2image).

Respaldo para estados de cuenta escaneados, donde pdfplumber devuelve
páginas vacías. StatementReconciler lo usa solo para las páginas que el
extractor nativo no pudo leer.

1. pdf2image convierte cada página a imagen (300 DPI).
2. pytesseract lee el texto de cada imagen.
3. El texto se envuelve en PageText, sin coordenadas.

Requiere los binarios del sistema Tesseract y poppler-utils.
"""

import platform
from pathlib import Path

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.models.page_text import PageText
from src.domain.ports.text_extractor import TextExtractor
from src.domain.shared.text_cleaner import clean_pdf_text

try:
    import pytesseract
except ImportError:
    pytesseract = None  # type: ignore[assignment]

try:
    from pdf2image import convert_from_path
except ImportError:
    convert_from_path = None  # type: ignore[assignment]

# En Windows Tesseract no queda en el PATH
_TESSERACT_WINDOWS_PATHS = [
    Path.home() / "AppData/Local/Programs/Tesseract-OCR/tesseract.exe",
    Path(r"C:\Program Files\Tesseract-OCR\tesseract.exe"),
    Path(r"C:\Program Files (x86)\Tesseract-OCR\tesseract.exe"),
]


def _configure_tesseract_cmd() -> None:
    if pytesseract is None or platform.system() != "Windows":
        return
    for path in _TESSERACT_WINDOWS_PATHS:
        if path.exists():
            pytesseract.pytesseract.tesseract_cmd = str(path)
            return


class OcrExtractor(TextExtractor):
    """Extrae texto de PDFs escaneados con Tesseract.

    No produce WordInfo: en páginas leídas por OCR la selección de montos
    por posición no está disponible y hay que capturar el saldo a mano.
    """

    def __init__(self, dpi: int = 300, lang: str = "eng") -> None:
        """
        Args:
            dpi: Resolución de la conversión PDF → imagen. Con menos de
                 300 los montos pequeños se leen mal.
            lang: Idiomas de Tesseract ("eng", "eng+spa", ...). Los
                  estados de cuenta de nuestros bancos están en inglés.
        """
        self._dpi = dpi
        self._lang = lang
        _configure_tesseract_cmd()

    @property
    def name(self) -> str:
        return "ocr-tesseract"

    def can_handle(self, file_path: Path) -> bool:
        # Misma extensión que PdfplumberExtractor; el orden de la lista decide.
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Una PageText por página, con el texto reconocido.

        Si el OCR de una página falla, esa página queda vacía y se sigue
        con las demás.

        Raises:
            ExtractionError: Faltan librerías o falla la conversión a imagen.
            FormatoInvalidoError: El archivo no existe o no es PDF.
        """
        if pytesseract is None:
            raise ExtractionError(
                str(file_path), "pytesseract no está instalado. Instalar con: pip install pytesseract"
            )
        if convert_from_path is None:
            raise ExtractionError(
                str(file_path), "pdf2image no está instalado. Instalar con: pip install pdf2image"
            )
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "PDF", "El archivo no existe")
        if file_path.suffix.lower() != ".pdf":
            raise FormatoInvalidoError(str(file_path), "PDF", f"Extensión inesperada: {file_path.suffix}")

        try:
            images = convert_from_path(str(file_path), dpi=self._dpi)
        except Exception as e:
            raise ExtractionError(str(file_path), f"Error al convertir PDF a imágenes: {e}")

        if not images:
            raise ExtractionError(str(file_path), "pdf2image no produjo ninguna imagen")

        try:
            lang = self._resolve_lang()
            return [self._read_image(num, image, lang) for num, image in enumerate(images, start=1)]
        except pytesseract.TesseractNotFoundError as e:
            raise ExtractionError(str(file_path), f"Tesseract no está instalado: {e}")

    @staticmethod
    def _read_image(page_num: int, image, lang: str) -> PageText:
        try:
            raw_text = pytesseract.image_to_string(image, lang=lang)
        except pytesseract.TesseractError:
            raw_text = ""
        return PageText(page_num=page_num, text=clean_pdf_text(raw_text))

    def _resolve_lang(self) -> str:
        """Usa los idiomas pedidos si están instalados; si no, 'eng'."""
        try:
            available = pytesseract.get_languages()
        except pytesseract.TesseractError:
            return self._lang

        requested = self._lang.split("+")
        if all(lang in available for lang in requested):
            return self._lang
        return "eng"
