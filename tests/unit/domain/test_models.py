"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas, inmutabilidad y la
forma JSON de los registros funcionan correctamente. Estos tests son la
"especificación ejecutable" del modelo de datos.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.models import (
    BankAccount,
    CalendarMonth,
    HighlightCoordinates,
    MonthlyBalance,
    PageText,
    ParsedPeriod,
    StatementExtraction,
    StatementRecord,
    ValidationResult,
    WordInfo,
)


class TestCalendarMonth:
    def test_propiedades(self):
        month = CalendarMonth(month=1, year=2024)
        assert month.key == (2024, 1)
        assert month.label == "February 2024"
        assert month.month_year == "2024-02"
        assert month.last_day == 29

    def test_next_cruza_anio(self):
        assert CalendarMonth(11, 2023).next() == CalendarMonth(0, 2024)
        assert CalendarMonth(4, 2024).next() == CalendarMonth(5, 2024)

    @pytest.mark.parametrize("mes", [-1, 12])
    def test_mes_fuera_de_rango(self, mes):
        with pytest.raises(ValueError, match="0-11"):
            CalendarMonth(month=mes, year=2024)


class TestParsedPeriod:
    def test_single(self):
        period = ParsedPeriod.single(3, 2024)
        assert period.start == period.end == CalendarMonth(3, 2024)
        assert period.month_count == 1
        assert period.label == "April 2024"

    def test_label_rango(self):
        assert ParsedPeriod(10, 2023, 1, 2024).label == "November 2023 - February 2024"

    def test_inicio_posterior_al_fin(self):
        with pytest.raises(ValueError, match="posterior"):
            ParsedPeriod(5, 2024, 4, 2024)

    def test_mes_invalido(self):
        with pytest.raises(ValueError):
            ParsedPeriod(0, 2024, 12, 2024)

    def test_contains(self):
        period = ParsedPeriod(10, 2023, 1, 2024)
        assert period.contains(11, 2023)
        assert period.contains(0, 2024)
        assert not period.contains(9, 2023)
        assert not period.contains(2, 2024)

    def test_inmutable(self):
        period = ParsedPeriod.single(0, 2024)
        with pytest.raises(FrozenInstanceError):
            period.start_month = 3


class TestMonthlyBalance:
    def test_placeholder(self):
        balance = MonthlyBalance.placeholder(6, 2024)
        assert balance.opening_balance == Decimal("0")
        assert balance.closing_balance == Decimal("0")
        assert balance.statement_page == 1
        assert balance.closing_date is None
        assert balance.highlight_coordinates is None
        assert not balance.is_verified

    def test_convierte_montos_a_decimal(self):
        balance = MonthlyBalance(month=0, year=2024, opening_balance=10.5, closing_balance="1,000.25")
        assert balance.opening_balance == Decimal("10.5")
        assert balance.closing_balance == Decimal("1000.25")

    def test_pagina_invalida(self):
        with pytest.raises(ValueError, match="statement_page"):
            MonthlyBalance(month=0, year=2024, statement_page=0)

    def test_edited_reinicia_verificacion(self):
        balance = MonthlyBalance(month=0, year=2024).verified("ana", datetime(2024, 2, 1))

        edited = balance.edited(closing_balance=Decimal("5"))

        assert edited.closing_balance == Decimal("5")
        assert not edited.is_verified
        assert edited.verified_by is None
        assert edited.verified_at is None
        assert balance.is_verified

    def test_edited_no_cambia_clave(self):
        with pytest.raises(ValueError):
            MonthlyBalance(month=0, year=2024).edited(year=2025)

    def test_to_dict(self):
        balance = MonthlyBalance(
            month=2,
            year=2024,
            opening_balance=Decimal("100.00"),
            closing_balance=Decimal("250.50"),
            statement_page=2,
            closing_date="31/03/2024",
            highlight_coordinates=HighlightCoordinates(1, 2, 3, 4, 2),
        )

        data = balance.to_dict()

        assert data["month"] == 2
        assert data["closing_balance"] == "250.50"
        assert data["opening_balance"] == "100.00"
        assert data["highlight_coordinates"] == {"x1": 1, "y1": 2, "x2": 3, "y2": 4, "page": 2}
        assert data["is_verified"] is False

    def test_from_dict_montos_nulos_y_campos_extra(self):
        data = {
            "month": 4,
            "year": 2024,
            "opening_balance": None,
            "closing_balance": 1500,
            "statement_page": None,
            "notes": "revisar",
        }

        balance = MonthlyBalance.from_dict(data)

        assert balance.opening_balance == Decimal("0")
        assert balance.closing_balance == Decimal("1500")
        assert balance.statement_page == 1
        assert balance.extra == {"notes": "revisar"}
        assert balance.to_dict()["notes"] == "revisar"


class TestStatementRecord:
    def _record_dict(self):
        return {
            "id": "stmt-1",
            "bank_id": 7,
            "statement_month": 6,
            "statement_year": 2024,
            "quickbooks_balance": 1250.0,
            "statement_extractions": {
                "bank_name": "Equity Bank",
                "account_number": "0123",
                "currency": "KES",
                "statement_period": "January - July 2024",
                "closing_balance": "1,250.00",
                "monthly_balances": [{"month": 6, "year": 2024, "closing_balance": 1250.0}],
            },
            "statement_document": {"statement_pdf": "docs/stmt-1.pdf"},
        }

    def test_from_dict(self):
        record = StatementRecord.from_dict(self._record_dict())

        assert record.id == "stmt-1"
        assert record.quickbooks_balance == Decimal("1250.0")
        assert record.extraction.closing_balance == Decimal("1250.00")
        assert record.extraction.opening_balance is None
        assert record.extraction.monthly_balances[0].closing_balance == Decimal("1250.0")
        assert record.pdf_path == "docs/stmt-1.pdf"

    def test_ida_y_vuelta_conserva_forma(self):
        record = StatementRecord.from_dict(self._record_dict())
        assert StatementRecord.from_dict(record.to_dict()) == record

    def test_montos_como_string_exacto(self):
        data = StatementRecord.from_dict(self._record_dict()).to_dict()

        assert data["quickbooks_balance"] == "1250.0"
        assert data["statement_extractions"]["closing_balance"] == "1250.00"
        assert data["statement_extractions"]["opening_balance"] is None

    def test_conserva_claves_desconocidas(self):
        raw = self._record_dict()
        raw["status"] = "pending"
        raw["statement_document"]["statement_excel"] = "docs/stmt-1.xlsx"
        raw["statement_extractions"]["bank_currency"] = "KES"

        record = StatementRecord.from_dict(raw)
        data = record.with_balances([]).to_dict()

        assert record.extra == {"status": "pending"}
        assert record.document_extra == {"statement_excel": "docs/stmt-1.xlsx"}
        assert data["status"] == "pending"
        assert data["statement_document"] == {
            "statement_excel": "docs/stmt-1.xlsx",
            "statement_pdf": "docs/stmt-1.pdf",
        }
        assert data["statement_extractions"]["bank_currency"] == "KES"

    def test_claves_desconocidas_no_cuentan_en_igualdad(self):
        raw = self._record_dict()
        raw["status"] = "pending"
        assert StatementRecord.from_dict(raw) == StatementRecord.from_dict(self._record_dict())

    def test_mes_de_ciclo_invalido(self):
        with pytest.raises(ValueError, match="0-11"):
            StatementRecord(id="x", bank_id=1, statement_month=12, statement_year=2024)

    def test_with_balances(self):
        record = StatementRecord(id="x", bank_id=1, statement_month=0, statement_year=2024)

        updated = record.with_balances([MonthlyBalance.placeholder(0, 2024)])

        assert len(updated.extraction.monthly_balances) == 1
        assert record.extraction.monthly_balances == ()


class TestBankAccount:
    def test_from_dict_bank_currency(self):
        account = BankAccount.from_dict(
            {"id": "3", "bank_name": "KCB", "account_number": 1234, "bank_currency": "KES"}
        )
        assert account.id == 3
        assert account.account_number == "1234"
        assert account.currency == "KES"

    def test_banco_vacio(self):
        with pytest.raises(ValueError):
            BankAccount(id=1, bank_name="", account_number="1", currency="USD")


class TestOtrosModelos:
    def test_validation_result(self):
        assert ValidationResult().is_valid
        assert not ValidationResult(mismatches=("Currency mismatch",)).is_valid

    def test_statement_extraction_vacia(self):
        extraction = StatementExtraction.from_dict(None)
        assert extraction.monthly_balances == ()
        assert extraction.to_dict()["closing_balance"] is None

    def test_page_text_words_near_en_orden_de_lectura(self):
        words = [
            WordInfo(text="b", x0=20, x1=30, top=10, bottom=20),
            WordInfo(text="a", x0=0, x1=10, top=10, bottom=20),
            WordInfo(text="c", x0=0, x1=10, top=30, bottom=40),
            WordInfo(text="lejos", x0=500, x1=510, top=10, bottom=20),
        ]
        page = PageText(page_num=1, text="a b c", words=words)

        assert [w.text for w in page.words_near(10, 20)] == ["a", "b", "c"]

    def test_page_text_vacia(self):
        assert PageText(page_num=1, text="  \n ").is_empty
        assert not PageText(page_num=1, text="x").has_words
