"""
Adaptador de salida: Logger a consola.

Implementación de ProcessLogger que imprime cada evento a stdout con un
formato uniforme y al final un resumen de la ejecución.

Útil para:
- Ejecución manual desde terminal (conciliar-estado).
- Revisar qué patrón interpretó un periodo y cuántos meses se agregaron.
"""

from pathlib import Path

from src.domain.models.period import CalendarMonth, ParsedPeriod
from src.domain.models.reconciliation import ReconciliationResult
from src.domain.ports.process_logger import ProcessLogger
from src.domain.shared.money import format_money


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._periodos_interpretados: int = 0
        self._periodos_no_interpretados: int = 0
        self._meses_agregados: int = 0
        self._con_discrepancias: int = 0
        self._conciliados: int = 0
        self._con_diferencia: int = 0
        self._errores: list[dict] = []

    # --- Archivos y extracción ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        print(f"  🔍 Extrayendo texto ({extractor_name}): {file_path.name}")

    def log_extraction_complete(self, file_path: Path, num_pages: int, num_periods: int) -> None:
        print(f"  ✅ Texto extraído: {file_path.name}, {num_pages} páginas, {num_periods} meses detectados")

    # --- Periodo y saldos ---

    def log_period_parsed(self, text: str, period: ParsedPeriod, pattern_name: str) -> None:
        self._periodos_interpretados += 1
        print(f"  🗓️  Periodo '{text}' → {period.label} ({pattern_name})")

    def log_period_unparsed(self, text: str | None) -> None:
        self._periodos_no_interpretados += 1
        print(f"  ⚠️  Periodo no reconocido: '{text or ''}'")

    def log_months_synthesized(self, months: list[CalendarMonth], added: int) -> None:
        self._meses_agregados += added
        print(f"  ➕ {len(months)} meses en el periodo, {added} saldos vacíos agregados")

    def log_validation(self, record_id: str, mismatches: tuple[str, ...]) -> None:
        if not mismatches:
            print(f"  ✅ Extracción de {record_id} coincide con la cuenta registrada")
            return
        self._con_discrepancias += 1
        print(f"  ⚠️  Discrepancias en {record_id}: {', '.join(mismatches)}")

    # --- Conciliación ---

    def log_reconciliation(self, month: CalendarMonth, result: ReconciliationResult) -> None:
        if result.is_reconciled:
            self._conciliados += 1
            icono = "✅"
        else:
            self._con_diferencia += 1
            icono = "❌"
        print(
            f"  {icono} {month.label}: estado de cuenta {format_money(result.statement_balance)}"
            f" vs contabilidad {format_money(result.external_balance)},"
            f" diferencia {format_money(result.delta)} ({result.status.label})"
        )

    def log_reconciliation_skipped(self, month: CalendarMonth, reason: str) -> None:
        print(f"  ⏭️  {month.label} sin conciliar: {reason}")

    def log_error(self, source: Path | str, error: Exception) -> None:
        name = source.name if isinstance(source, Path) else str(source)
        self._errores.append({"origen": name, "error": str(error)})
        print(f"  ❌ Error: {name}: {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "periodos_interpretados": self._periodos_interpretados,
            "periodos_no_interpretados": self._periodos_no_interpretados,
            "meses_agregados": self._meses_agregados,
            "extracciones_con_discrepancias": self._con_discrepancias,
            "conciliados": self._conciliados,
            "con_diferencia": self._con_diferencia,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE CONCILIACIÓN")
        print("=" * 60)
        print(f"  Archivos recibidos:         {self._archivos_recibidos}")
        print(f"  Periodos interpretados:     {self._periodos_interpretados}")
        print(f"  Periodos no interpretados:  {self._periodos_no_interpretados}")
        print(f"  Meses agregados:            {self._meses_agregados}")
        print(f"  Con discrepancias:          {self._con_discrepancias}")
        print(f"  Conciliados:                {self._conciliados}")
        print(f"  Con diferencia:             {self._con_diferencia}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['origen']}: {err['error']}")

        print("=" * 60)
