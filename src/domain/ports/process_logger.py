"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento de un
estado de cuenta, desde la interpretación del periodo hasta la
conciliación del saldo.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "No se pudo interpretar el periodo" (no "WARNING: regex sin match")
- "Se agregaron 7 meses vacíos" (no "INFO: append x7")

En producción se imprime a consola; en tests se acumula en memoria y se
hacen asserts sobre los eventos.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.period import CalendarMonth, ParsedPeriod
from src.domain.models.reconciliation import ReconciliationResult


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos y extracción ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo (o un extractor) fue descartado."""
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        ...

    @abstractmethod
    def log_extraction_complete(self, file_path: Path, num_pages: int, num_periods: int) -> None:
        """Registra el fin de la extracción.

        Args:
            num_pages: Páginas con texto.
            num_periods: Meses detectados en el texto del PDF.
        """
        ...

    # --- Periodo y saldos ---

    @abstractmethod
    def log_period_parsed(self, text: str, period: ParsedPeriod, pattern_name: str) -> None:
        ...

    @abstractmethod
    def log_period_unparsed(self, text: str | None) -> None:
        """Registra que el texto del periodo no coincide con ningún patrón.

        No es un error: el procesamiento sigue sin sintetizar meses.
        """
        ...

    @abstractmethod
    def log_months_synthesized(self, months: list[CalendarMonth], added: int) -> None:
        """Registra los meses del periodo y cuántos saldos vacíos se agregaron."""
        ...

    @abstractmethod
    def log_validation(self, record_id: str, mismatches: tuple[str, ...]) -> None:
        """Registra el resultado de validar la extracción contra la cuenta.

        Una tupla vacía significa que todo coincide.
        """
        ...

    # --- Conciliación ---

    @abstractmethod
    def log_reconciliation(self, month: CalendarMonth, result: ReconciliationResult) -> None:
        ...

    @abstractmethod
    def log_reconciliation_skipped(self, month: CalendarMonth, reason: str) -> None:
        ...

    @abstractmethod
    def log_error(self, source: Path | str, error: Exception) -> None:
        """Registra un error recuperable durante el procesamiento."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            {
                'archivos_recibidos': int,
                'periodos_interpretados': int,
                'periodos_no_interpretados': int,
                'meses_agregados': int,
                'extracciones_con_discrepancias': int,
                'conciliados': int,
                'con_diferencia': int,
                'errores': list[dict],  # [{origen, error}]
            }
        """
        ...
