"""
Tests para src.domain.services.period_resolver

Cubre el flujo completo texto → periodo → meses → saldos → conciliación
con los periodos reales que llegan en los estados de cuenta:
- "01/01/2024 - 31/01/2024"        → encabezado numérico del banco
- "January - July 2024"            → estado de cuenta de varios meses
- "November 2023 - February 2024"  → periodo que cruza de año
- "January 2024"                   → un solo mes
"""

from decimal import Decimal

import pytest

from src.domain.exceptions import PeriodoInvalidoError
from src.domain.models.monthly_balance import MonthlyBalance
from src.domain.models.period import CalendarMonth, ParsedPeriod
from src.domain.models.reconciliation import ReconciliationStatus
from src.domain.services.period_resolver import (
    StatementPeriodResolver,
    enumerate_months,
    month_range,
    parse_period,
    parse_period_strict,
    reconcile,
    synthesize_balances,
)


class TestParsePeriodNumerico:
    """Rango DD/MM/YYYY - DD/MM/YYYY."""

    @pytest.mark.parametrize(
        "texto",
        [
            "01/03/2024 - 31/05/2024",
            "01.03.2024 - 31.05.2024",
            "01-03-2024 - 31-05-2024",
            "01/03/2024 – 31/05/2024",
            "01/03/2024 — 31/05/2024",
            "01/03/2024-31/05/2024",
            "Statement period: 01/03/2024 - 31/05/2024",
        ],
    )
    def test_separadores_y_guiones(self, texto):
        assert parse_period(texto) == ParsedPeriod(2, 2024, 4, 2024)

    def test_mes_menos_uno(self):
        period = parse_period("01/01/2024 - 31/01/2024")
        assert period == ParsedPeriod(0, 2024, 0, 2024)

    def test_diciembre_a_enero(self):
        period = parse_period("01/12/2023 - 31/01/2024")
        assert period == ParsedPeriod(11, 2023, 0, 2024)

    def test_dia_no_se_valida(self):
        """31 de febrero se acepta: solo importan mes y año."""
        assert parse_period("31/02/2024 - 31/02/2024") == ParsedPeriod(1, 2024, 1, 2024)

    def test_mes_13_se_descarta(self):
        assert parse_period("01/13/2024 - 31/13/2024") is None

    def test_rango_invertido_se_descarta(self):
        assert parse_period("01/05/2024 - 31/03/2024") is None


class TestParsePeriodNombres:
    """Rangos con nombres de mes."""

    def test_mismo_anio(self):
        assert parse_period("January - July 2024") == ParsedPeriod(0, 2024, 6, 2024)

    def test_mismo_anio_abreviado(self):
        assert parse_period("Jan – Mar 2024") == ParsedPeriod(0, 2024, 2, 2024)

    def test_mismo_anio_mayusculas(self):
        assert parse_period("FEBRUARY - APRIL 2023") == ParsedPeriod(1, 2023, 3, 2023)

    def test_entre_anios(self):
        period = parse_period("November 2023 - February 2024")
        assert period == ParsedPeriod(10, 2023, 1, 2024)

    def test_entre_anios_em_dash(self):
        assert parse_period("Dec 2023—Jan 2024") == ParsedPeriod(11, 2023, 0, 2024)

    @pytest.mark.parametrize(
        "texto,mes,anio",
        [
            ("January 2024", 0, 2024),
            ("jan 2024", 0, 2024),
            ("SEPT 2023", 8, 2023),
            ("December 1999", 11, 1999),
        ],
    )
    def test_un_solo_mes(self, texto, mes, anio):
        period = parse_period(texto)
        assert period.start_month == period.end_month == mes
        assert period.start_year == period.end_year == anio

    def test_espacio_no_separable(self):
        assert parse_period("July\u00a02024") == ParsedPeriod(6, 2024, 6, 2024)

    def test_nombre_desconocido_cae_al_siguiente_patron(self):
        """'Foo - July 2024' no es un rango válido, pero 'July 2024' sí."""
        assert parse_period("Foo - July 2024") == ParsedPeriod(6, 2024, 6, 2024)

    @pytest.mark.parametrize("texto", ["December - January 2024", "Dec 2024 - Jan 2024"])
    def test_rango_de_nombres_invertido_no_cae_a_un_solo_mes(self, texto):
        assert parse_period(texto) is None

    def test_strict_rango_invertido(self):
        with pytest.raises(PeriodoInvalidoError, match="December - January 2024"):
            parse_period_strict("December - January 2024")


class TestParsePeriodSinResultado:
    @pytest.mark.parametrize(
        "texto",
        ["", "   ", None, "sin periodo", "2024", "Ju 2024", "Q1 2024", "13/2024"],
    )
    def test_devuelve_none(self, texto):
        assert parse_period(texto) is None

    def test_strict_lanza_error(self):
        with pytest.raises(PeriodoInvalidoError, match="no reconocido"):
            parse_period_strict("sin periodo")

    def test_strict_devuelve_periodo(self):
        assert parse_period_strict("March 2024") == ParsedPeriod.single(2, 2024)


class TestEnumerateMonths:
    def test_un_mes(self):
        months = enumerate_months(ParsedPeriod.single(4, 2024))
        assert months == [CalendarMonth(4, 2024)]

    def test_anio_completo(self):
        months = enumerate_months(ParsedPeriod(0, 2024, 11, 2024))
        assert len(months) == 12
        assert [m.month for m in months] == list(range(12))
        assert all(m.year == 2024 for m in months)

    def test_cruce_de_anio(self):
        months = enumerate_months(ParsedPeriod(10, 2023, 1, 2024))
        assert [(m.month, m.year) for m in months] == [
            (10, 2023),
            (11, 2023),
            (0, 2024),
            (1, 2024),
        ]

    def test_largo_igual_a_month_count(self):
        period = ParsedPeriod(5, 2022, 2, 2024)
        assert len(enumerate_months(period)) == period.month_count == 22

    def test_inicio_posterior_da_lista_vacia(self):
        assert month_range(6, 2024, 0, 2024) == []


class TestSynthesizeBalances:
    def test_lista_vacia_genera_placeholders(self):
        months = enumerate_months(parse_period("January - July 2024"))
        balances = synthesize_balances(months, [])

        assert len(balances) == 7
        assert [(b.month, b.year) for b in balances] == [(m, 2024) for m in range(7)]
        for b in balances:
            assert b.opening_balance == Decimal("0")
            assert b.closing_balance == Decimal("0")
            assert b.statement_page == 1
            assert b.closing_date is None
            assert b.highlight_coordinates is None
            assert b.is_verified is False
            assert b.verified_by is None
            assert b.verified_at is None

    def test_no_sobrescribe_existentes(self):
        existente = MonthlyBalance(
            month=2,
            year=2024,
            closing_balance=Decimal("1250.00"),
            statement_page=3,
            is_verified=True,
            verified_by="ana",
        )
        months = enumerate_months(ParsedPeriod(0, 2024, 3, 2024))

        balances = synthesize_balances(months, [existente])

        assert balances[0] is existente
        assert len(balances) == 4
        marzo = [b for b in balances if b.month == 2]
        assert marzo == [existente]
        assert marzo[0].closing_balance == Decimal("1250.00")

    def test_conserva_orden_y_meses_fuera_de_rango(self):
        fuera = MonthlyBalance(month=11, year=2020, closing_balance=Decimal("5"))
        months = enumerate_months(ParsedPeriod.single(0, 2024))

        balances = synthesize_balances(months, [fuera])

        assert balances == [fuera, MonthlyBalance.placeholder(0, 2024)]

    def test_idempotente(self):
        months = enumerate_months(ParsedPeriod(10, 2023, 1, 2024))
        inicial = [MonthlyBalance(month=0, year=2024, closing_balance=Decimal("99.99"))]

        primera = synthesize_balances(months, inicial)
        segunda = synthesize_balances(months, primera)

        assert segunda == primera
        assert len(segunda) == 4

    def test_no_modifica_la_lista_de_entrada(self):
        existentes: list[MonthlyBalance] = []
        synthesize_balances([CalendarMonth(0, 2024)], existentes)
        assert existentes == []


class TestReconcile:
    def test_dentro_de_tolerancia(self):
        result = reconcile(Decimal("100.00"), Decimal("100.005"))
        assert result.status is ReconciliationStatus.RECONCILED
        assert result.is_reconciled

    def test_diferencia(self):
        result = reconcile(Decimal("100.00"), Decimal("100.02"))
        assert result.status is ReconciliationStatus.DIFFERENCE
        assert result.delta == Decimal("-0.02")

    def test_exactamente_un_centavo_concilia(self):
        assert reconcile("100.01", "100.00").is_reconciled
        assert reconcile("100.00", "100.01").is_reconciled

    def test_delta_con_signo(self):
        assert reconcile("250", "200").delta == Decimal("50")

    def test_acepta_float_sin_error_binario(self):
        result = reconcile(100.0, 100.005)
        assert result.delta == Decimal("-0.005")
        assert result.is_reconciled

    def test_status_label(self):
        assert reconcile("1", "1").status.label == "Reconciled"
        assert reconcile("1", "2").status.label == "Difference"


class FakeLogger:
    """Registra solo los eventos que usa StatementPeriodResolver."""

    def __init__(self):
        self.parsed = []
        self.unparsed = []
        self.synthesized = []

    def log_period_parsed(self, text, period, pattern_name):
        self.parsed.append((text, period, pattern_name))

    def log_period_unparsed(self, text):
        self.unparsed.append(text)

    def log_months_synthesized(self, months, added):
        self.synthesized.append((len(months), added))


class TestStatementPeriodResolver:
    def test_registra_el_patron_que_interpreto(self):
        logger = FakeLogger()
        resolver = StatementPeriodResolver(logger)

        resolver.parse("  November 2023   -   February 2024 ")

        assert logger.parsed == [
            ("November 2023 - February 2024", ParsedPeriod(10, 2023, 1, 2024), "cross-year-month-range")
        ]

    def test_periodo_no_reconocido(self):
        logger = FakeLogger()
        resolver = StatementPeriodResolver(logger)

        period, balances = resolver.resolve("sin periodo", [])

        assert period is None
        assert balances == []
        assert logger.unparsed == ["sin periodo"]
        assert logger.synthesized == []

    def test_resolve_completa_meses(self):
        logger = FakeLogger()
        resolver = StatementPeriodResolver(logger)
        existente = MonthlyBalance(month=1, year=2024, closing_balance=Decimal("10"))

        period, balances = resolver.resolve("January - March 2024", [existente])

        assert period == ParsedPeriod(0, 2024, 2, 2024)
        assert len(balances) == 3
        assert balances[0] is existente
        assert logger.synthesized == [(3, 2)]
