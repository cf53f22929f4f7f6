"""
Adaptador de salida: Reporte de conciliación en Excel.

Genera un archivo con 2 hojas:
- "Saldos mensuales": un renglón por mes del estado de cuenta, con saldo
  de apertura, cierre, página, fecha de cierre y verificación.
- "Conciliacion": el mes conciliado, saldo del estado de cuenta, saldo de
  contabilidad, diferencia, estatus y discrepancias de la validación.

Se usa pandas para armar las tablas y xlsxwriter para el formato de
montos y columnas de texto.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.reconciliation import ReconciliationReport
from src.domain.ports.report_writer import ReportWriter

BALANCES_SHEET = "Saldos mensuales"
RECONCILIATION_SHEET = "Conciliacion"

BALANCE_COLUMNS = [
    "Mes",
    "Periodo",
    "Saldo apertura",
    "Saldo cierre",
    "Página",
    "Fecha cierre",
    "Verificado",
    "Verificado por",
]

RECONCILIATION_COLUMNS = [
    "Mes",
    "Cuenta",
    "Moneda",
    "Saldo estado de cuenta",
    "Saldo contabilidad",
    "Diferencia",
    "Estatus",
    "Discrepancias",
    "Archivo",
]


class ExcelReportWriter(ReportWriter):
    """Escribe un ReconciliationReport a .xlsx."""

    def write(self, report: ReconciliationReport, output_path: Path) -> Path:
        """Si output_path no termina en .xlsx se le agrega la extensión."""
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(report, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    @staticmethod
    def balances_frame(report: ReconciliationReport) -> pd.DataFrame:
        """Tabla de saldos mensuales en orden cronológico."""
        balances = sorted(report.balances, key=lambda b: b.key)
        rows = [
            {
                "Mes": b.calendar_month.label,
                "Periodo": b.calendar_month.month_year,
                "Saldo apertura": float(b.opening_balance),
                "Saldo cierre": float(b.closing_balance),
                "Página": b.statement_page,
                "Fecha cierre": b.closing_date or "",
                "Verificado": "Sí" if b.is_verified else "No",
                "Verificado por": b.verified_by or "",
            }
            for b in balances
        ]
        return pd.DataFrame(rows, columns=BALANCE_COLUMNS)

    @staticmethod
    def reconciliation_frame(report: ReconciliationReport) -> pd.DataFrame:
        """Un solo renglón. Sin resultado, los montos quedan vacíos y el
        estatus es "Sin conciliar"."""
        extraction = report.record.extraction
        result = report.result
        row = {
            "Mes": report.selected_month.label,
            "Cuenta": extraction.account_number or "",
            "Moneda": extraction.currency or "",
            "Saldo estado de cuenta": float(result.statement_balance) if result else None,
            "Saldo contabilidad": float(result.external_balance) if result else None,
            "Diferencia": float(result.delta) if result else None,
            "Estatus": result.status.label if result else "Sin conciliar",
            "Discrepancias": "; ".join(report.validation.mismatches) if report.validation else "",
            "Archivo": report.source_file,
        }
        return pd.DataFrame([row], columns=RECONCILIATION_COLUMNS)

    def _escribir_excel(self, report: ReconciliationReport, output_path: Path) -> None:
        df_saldos = self.balances_frame(report)
        df_conciliacion = self.reconciliation_frame(report)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_saldos.to_excel(writer, index=False, sheet_name=BALANCES_SHEET)
            df_conciliacion.to_excel(writer, index=False, sheet_name=RECONCILIATION_SHEET)

            workbook = writer.book
            ws_saldos = writer.sheets[BALANCES_SHEET]
            ws_conciliacion = writer.sheets[RECONCILIATION_SHEET]

            # Texto: conserva ceros iniciales del número de cuenta
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_saldos.set_column("A:A", 18)  # Mes
            ws_saldos.set_column("B:B", 10)  # Periodo
            ws_saldos.set_column("C:D", 18, money_format)  # Saldos
            ws_saldos.set_column("E:E", 8)  # Página
            ws_saldos.set_column("F:F", 12)  # Fecha cierre
            ws_saldos.set_column("G:H", 14)  # Verificación

            ws_conciliacion.set_column("A:A", 18)  # Mes
            ws_conciliacion.set_column("B:B", 20, text_format)  # Cuenta
            ws_conciliacion.set_column("C:C", 8)  # Moneda
            ws_conciliacion.set_column("D:F", 22, money_format)  # Montos
            ws_conciliacion.set_column("G:G", 14)  # Estatus
            ws_conciliacion.set_column("H:H", 40)  # Discrepancias
            ws_conciliacion.set_column("I:I", 30)  # Archivo
