"""
Punto de entrada CLI: conciliar-estado.

Uso:
    # Conciliar el mes del ciclo de un registro del almacén
    conciliar-estado estados.json stmt-2024-07

    # Leer el PDF para detectar en qué página termina cada mes
    conciliar-estado estados.json stmt-2024-07 --pdf /ruta/estado.pdf -o /ruta/salida

    # Corregir el periodo y el saldo de contabilidad antes de conciliar
    conciliar-estado estados.json stmt-2024-07 --periodo "January - July 2024" --saldo-externo 1250.00

    # Capturar el saldo de cierre desde el texto seleccionado y verificarlo
    conciliar-estado estados.json stmt-2024-07 --seleccion "Closing balance 1,250.00" --pagina 3 --verificar ana

    # Tomar el saldo de cierre de las palabras cercanas a un punto de la página
    conciliar-estado estados.json stmt-2024-07 --pdf estado.pdf --pagina 3 --punto 420 615

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (PdfplumberExtractor, JsonStatementRepository,
  ExcelReportWriter, ConsoleLogger).
- Las inyecta en el StatementReconciler.
- Ejecuta el procesamiento.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from src.adapters.input.text_extractors.ocr_extractor import OcrExtractor
from src.adapters.input.text_extractors.pdfplumber_extractor import PdfplumberExtractor
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.repositories.json_repository import JsonStatementRepository
from src.adapters.output.writers.excel_writer import ExcelReportWriter
from src.domain.exceptions import ConciliacionBaseError
from src.domain.models.period import CalendarMonth
from src.domain.services.period_resolver import parse_period_strict
from src.domain.services.statement_reconciler import StatementReconciler
from src.domain.shared.money import parse_money
from src.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()

    text_extractors = [PdfplumberExtractor(include_words=True)]
    if not args.sin_ocr:
        text_extractors.append(OcrExtractor())

    registry = create_default_registry()
    repository = JsonStatementRepository(Path(args.almacen))
    report_writer = ExcelReportWriter()

    reconciler = StatementReconciler(
        text_extractors=text_extractors,
        repository=repository,
        logger=logger,
        registry=registry,
    )

    print("=" * 60)
    print("CONCILIACIÓN DE ESTADO DE CUENTA")
    print("=" * 60)
    print(f"  Almacén:   {args.almacen}")
    print(f"  Registro:  {args.registro}")
    print(f"  Patrones de periodo: {', '.join(registry.available_patterns)}")
    print()

    try:
        record = repository.get(args.registro)

        if args.periodo is not None:
            parse_period_strict(args.periodo, registry)
            record = replace(record, extraction=replace(record.extraction, statement_period=args.periodo))
        if args.saldo_externo is not None:
            record = replace(record, quickbooks_balance=parse_money(args.saldo_externo))

        month = _selected_month(args, record.statement_month, record.statement_year)

        pdf_path = Path(args.pdf) if args.pdf else None
        x, y = args.punto or (0.0, 0.0)

        if args.seleccion is not None:
            record = reconciler.select_closing_balance(
                record, args.seleccion, args.pagina, x, y, month=month
            )
        elif args.punto is not None:
            record = reconciler.select_closing_balance_at(
                record, args.pagina, x, y, pdf_path, month=month
            )
        if args.verificar is not None:
            record = reconciler.verify_month(record, args.verificar, month=month)

        report = reconciler.process(record, pdf_path, month)
        repository.save(report.record)

        output_dir = Path(args.output_dir) if args.output_dir else Path(args.almacen).parent
        output_file = output_dir / f"conciliacion_{record.id}_{month.month_year}.xlsx"
        output_file = report_writer.write(report, output_file)
        print(f"\n📁 Excel generado: {output_file}")

    except (ConciliacionBaseError, ValueError) as e:
        logger.log_error(args.registro, e)
        logger.print_summary()
        sys.exit(1)

    # --- Resumen final ---
    logger.print_summary()


def _selected_month(args: argparse.Namespace, cycle_month: int, cycle_year: int) -> CalendarMonth:
    """Mes a conciliar. --mes es 1-12 como lo escribe una persona."""
    if args.mes is None and args.anio is None:
        return CalendarMonth(month=cycle_month, year=cycle_year)
    month = args.mes - 1 if args.mes is not None else cycle_month
    year = args.anio if args.anio is not None else cycle_year
    return CalendarMonth(month=month, year=year)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Conciliación de saldos mensuales de estados de cuenta bancarios",
        epilog="Ejemplo: conciliar-estado estados.json stmt-2024-07 --pdf estado.pdf",
    )

    parser.add_argument("almacen", help="Archivo JSON con los registros de estados de cuenta")
    parser.add_argument("registro", help="Id del registro a conciliar")

    parser.add_argument("--pdf", help="PDF del estado de cuenta. Por defecto, el del registro.")
    parser.add_argument(
        "--mes",
        type=int,
        choices=range(1, 13),
        metavar="1-12",
        help="Mes a conciliar. Por defecto, el mes del ciclo del registro.",
    )
    parser.add_argument("--anio", type=int, help="Año del mes a conciliar.")
    parser.add_argument("--periodo", help='Texto del periodo, ej. "January - July 2024".')
    parser.add_argument("--saldo-externo", dest="saldo_externo", help="Saldo de contabilidad.")
    parser.add_argument("--seleccion", help="Texto seleccionado del PDF con el saldo de cierre.")
    parser.add_argument("--pagina", type=int, default=1, help="Página de la selección (default: 1).")
    parser.add_argument(
        "--punto",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Punto de la selección en la página. Sin --seleccion, se toma el monto más cercano del PDF.",
    )
    parser.add_argument("--verificar", metavar="USUARIO", help="Marca el saldo del mes como verificado.")
    parser.add_argument(
        "--sin-ocr",
        dest="sin_ocr",
        action="store_true",
        help="No intentar OCR si el PDF no tiene texto.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida del Excel. Por defecto, el del almacén.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
