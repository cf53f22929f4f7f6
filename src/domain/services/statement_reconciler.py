"""
Servicio de dominio: Conciliación de un estado de cuenta.

Orquesta el flujo completo para un registro del almacén:
1. Lee el texto del PDF (TextExtractor, con respaldo OCR).
2. Detecta en qué página termina cada mes (detect_periods).
3. Interpreta el texto del periodo y completa los saldos mensuales
   en un BalanceLedger (un saldo por mes, sin duplicados).
4. Valida la extracción contra la cuenta registrada (si existe).
5. Concilia el saldo de cierre del mes elegido contra el saldo de
   contabilidad del registro.
6. Guarda el registro actualizado y devuelve un ReconciliationReport.

¿Por qué no poner esta lógica en el CLI?
Porque "dado un estado de cuenta, decir si cuadra con contabilidad" es
una regla del negocio. El CLI solo decide QUÉ registro procesar y DÓNDE
guardar el reporte.
"""

from collections.abc import Sequence
from pathlib import Path

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.models.page_text import PageText
from src.domain.models.period import CalendarMonth
from src.domain.models.reconciliation import ReconciliationReport
from src.domain.models.statement import StatementRecord
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.statement_repository import StatementRepository
from src.domain.ports.text_extractor import TextExtractor
from src.domain.services.balance_ledger import BalanceLedger
from src.domain.services.period_detector import (
    detect_periods,
    extract_selection,
    select_at_position,
)
from src.domain.services.period_resolver import (
    StatementPeriodResolver,
    enumerate_months,
    reconcile,
)
from src.domain.services.statement_validator import validate_extraction
from src.domain.shared.date_parser import default_closing_date
from src.infrastructure.registry import PeriodPatternRegistry


class StatementReconciler:
    """Procesa un registro de estado de cuenta y produce su conciliación.

    Recibe sus dependencias por constructor. No sabe qué extractores ni
    qué almacén concreto se usan, solo conoce los puertos.
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        repository: StatementRepository,
        logger: ProcessLogger,
        registry: PeriodPatternRegistry | None = None,
    ) -> None:
        """
        Args:
            text_extractors: Extractores en orden de prioridad. Si el
                            primero no saca texto se prueba el siguiente.
            repository: Almacén de registros de estado de cuenta.
            logger: Bitácora de procesamiento.
            registry: Patrones de periodo. Por defecto los estándar.
        """
        self._extractors = text_extractors
        self._repository = repository
        self._logger = logger
        self._resolver = StatementPeriodResolver(logger, registry)

    def reconcile_record(
        self,
        record_id: str,
        file_path: Path | None = None,
        selected_month: CalendarMonth | None = None,
    ) -> ReconciliationReport:
        """Busca el registro en el almacén, lo procesa y guarda el resultado.

        Raises:
            RepositoryError: Si el registro no existe.
        """
        record = self._repository.get(record_id)
        report = self.process(record, file_path, selected_month)
        self._repository.save(report.record)
        return report

    def process(
        self,
        record: StatementRecord,
        file_path: Path | None = None,
        selected_month: CalendarMonth | None = None,
    ) -> ReconciliationReport:
        """Procesa un registro sin tocar el almacén.

        Args:
            record: Registro con la extracción y el saldo de contabilidad.
            file_path: PDF a leer. Si es None se usa record.pdf_path; si
                      tampoco hay, no se detectan páginas.
            selected_month: Mes a conciliar. Por defecto, el mes del ciclo.
        """
        pdf = file_path or (Path(record.pdf_path) if record.pdf_path else None)
        pages: list[PageText] = []
        if pdf is not None:
            pages = self.extract_pages(pdf) or []

        detected = detect_periods(pages)
        if pdf is not None and pages:
            self._logger.log_extraction_complete(pdf, len(pages), len(detected))

        # Periodo → meses → saldos completos
        ledger = BalanceLedger(record.extraction.monthly_balances)
        period = self._resolver.parse(record.extraction.statement_period)
        months_added = 0
        if period is not None:
            months = enumerate_months(period)
            months_added = ledger.ensure_months(months)
            self._logger.log_months_synthesized(months, months_added)

        validation = None
        account = self._repository.find_account(record.bank_id)
        if account is not None:
            validation = validate_extraction(
                record.extraction, account, record.statement_month, record.statement_year
            )
            self._logger.log_validation(record.id, validation.mismatches)

        month = selected_month or self._cycle_month(record)
        result = None
        closing = ledger.closing_balance_for(month.month, month.year)

        if record.quickbooks_balance is None:
            self._logger.log_reconciliation_skipped(month, "sin saldo de contabilidad")
        elif closing is None:
            self._logger.log_reconciliation_skipped(month, "sin saldo de cierre para el mes")
        else:
            result = reconcile(closing, record.quickbooks_balance)
            self._logger.log_reconciliation(month, result)

        return ReconciliationReport(
            record=record.with_balances(ledger.to_list()),
            selected_month=month,
            period=period,
            detected_periods=tuple(detected),
            months_added=months_added,
            result=result,
            validation=validation,
            pages=len(pages),
            source_file=pdf.name if pdf is not None else "",
        )

    def select_closing_balance(
        self,
        record: StatementRecord,
        selected_text: str,
        page: int,
        x: float = 0.0,
        y: float = 0.0,
        month: CalendarMonth | None = None,
    ) -> StatementRecord:
        """Asigna el primer monto de `selected_text` como saldo de cierre.

        Si el texto no trae fecha, se usa el último día del mes. Si no trae
        ningún monto, el registro se devuelve sin cambios.
        """
        month = month or self._cycle_month(record)
        selection = extract_selection(
            selected_text, page, x, y, default_closing_date(month.month, month.year)
        )
        if selection is None:
            self._logger.log_error(record.id, ValueError(f"Sin monto en la selección: '{selected_text}'"))
            return record

        ledger = BalanceLedger(record.extraction.monthly_balances)
        ledger.apply_selection(selection, month.month, month.year)
        return record.with_balances(ledger.to_list())

    def select_closing_balance_at(
        self,
        record: StatementRecord,
        page: int,
        x: float,
        y: float,
        file_path: Path | None = None,
        month: CalendarMonth | None = None,
    ) -> StatementRecord:
        """Como select_closing_balance, pero el texto son las palabras del
        PDF cercanas al punto (x, y) de la página.

        Necesita un extractor con coordenadas (pdfplumber). Si la página no
        existe o no hay un monto cerca, el registro se devuelve sin cambios.
        """
        month = month or self._cycle_month(record)
        pdf = file_path or (Path(record.pdf_path) if record.pdf_path else None)
        pages = self.extract_pages(pdf) if pdf is not None else None

        target = next((p for p in pages or [] if p.page_num == page), None)
        selection = None
        if target is not None:
            selection = select_at_position(
                target, x, y, default_closing_date(month.month, month.year)
            )
        if selection is None:
            self._logger.log_error(
                record.id, ValueError(f"Sin monto cerca de ({x}, {y}) en la página {page}")
            )
            return record

        ledger = BalanceLedger(record.extraction.monthly_balances)
        ledger.apply_selection(selection, month.month, month.year)
        return record.with_balances(ledger.to_list())

    def verify_month(
        self,
        record: StatementRecord,
        verified_by: str,
        month: CalendarMonth | None = None,
    ) -> StatementRecord:
        """Marca como verificado el saldo del mes.

        Raises:
            SaldoNoEncontradoError: Si el mes no tiene saldo.
        """
        month = month or self._cycle_month(record)
        ledger = BalanceLedger(record.extraction.monthly_balances)
        ledger.verify(month.month, month.year, verified_by)
        return record.with_balances(ledger.to_list())

    @staticmethod
    def _cycle_month(record: StatementRecord) -> CalendarMonth:
        return CalendarMonth(month=record.statement_month, year=record.statement_year)

    def extract_pages(self, file_path: Path) -> list[PageText] | None:
        """Extrae el texto del PDF probando los extractores en orden.

        - Todas las páginas con texto → se usa ese resultado.
        - Algunas vacías (PDF con páginas escaneadas) → el siguiente
          extractor rellena solo las páginas vacías.
        - Todas vacías → se prueba el siguiente extractor.

        pdfplumber va primero porque su texto es exacto y rápido; OCR
        solo se usa para lo que pdfplumber no pudo leer.

        Returns:
            Lista de PageText, o None si ningún extractor sacó texto.
        """
        self._logger.log_file_received(file_path, file_path.suffix)
        compatibles = [e for e in self._extractors if e.can_handle(file_path)]

        if not compatibles:
            self._logger.log_file_skipped(
                file_path, f"Ningún extractor puede manejar '{file_path.suffix}'"
            )
            return None

        partial: list[PageText] | None = None

        for extractor in compatibles:
            self._logger.log_extraction_start(file_path, extractor.name)

            try:
                pages = extractor.extract(file_path)
            except (ExtractionError, FormatoInvalidoError) as e:
                self._logger.log_error(file_path, e)
                continue

            if partial is not None and pages:
                partial = self._fill_empty_pages(partial, pages)
                if not any(p.is_empty for p in partial):
                    return partial
                continue

            if pages and not any(p.is_empty for p in pages):
                return pages

            if pages and not all(p.is_empty for p in pages):
                empty = sum(1 for p in pages if p.is_empty)
                partial = pages
                self._logger.log_file_skipped(
                    file_path,
                    f"{empty}/{len(pages)} páginas sin texto con {extractor.name}, "
                    f"se intenta el siguiente extractor en esas páginas",
                )
                continue

            self._logger.log_file_skipped(
                file_path, f"Sin texto con {extractor.name}, se intenta el siguiente"
            )

        if partial is not None and not all(p.is_empty for p in partial):
            return partial

        self._logger.log_file_skipped(file_path, "PDF sin texto extraíble (ni nativo ni OCR)")
        return None

    @staticmethod
    def _fill_empty_pages(primary: list[PageText], secondary: list[PageText]) -> list[PageText]:
        """Rellena las páginas vacías de `primary` con las de `secondary`.

        Las páginas con texto de `primary` se conservan aunque `secondary`
        también tenga texto. Mismo largo que `primary`.
        """
        merged: list[PageText] = []
        for i, page in enumerate(primary):
            if page.is_empty and i < len(secondary) and not secondary[i].is_empty:
                merged.append(secondary[i])
            else:
                merged.append(page)
        return merged
