"""
Puerto de salida: Escritor del reporte de conciliación.

El dominio produce un ReconciliationReport; quien implemente este puerto
decide el formato (hoy Excel). Ningún cambio en el dominio si mañana el
reporte va a CSV o a una API.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.reconciliation import ReconciliationReport


class ReportWriter(ABC):
    """Interfaz para escribir reportes de conciliación."""

    @abstractmethod
    def write(self, report: ReconciliationReport, output_path: Path) -> Path:
        """Escribe el reporte de un estado de cuenta.

        Args:
            report: Resultado del procesamiento de un estado de cuenta.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...
