"""
Tests para src.domain.services.statement_validator
"""

import pytest

from src.domain.models.statement import BankAccount, StatementExtraction
from src.domain.services.statement_validator import (
    ACCOUNT_MISMATCH,
    BANK_MISMATCH,
    COMPANY_MISMATCH,
    CURRENCY_MISMATCH,
    PERIOD_MISMATCH,
    is_period_contained,
    validate_extraction,
)


@pytest.fixture
def account():
    return BankAccount(
        id=7,
        bank_name="Equity Bank",
        account_number="0123456789",
        currency="KES",
        company_name="Acme Ltd",
    )


def _extraction(**overrides) -> StatementExtraction:
    data = {
        "bank_name": "EQUITY BANK (KENYA) LIMITED",
        "account_number": "0123456789",
        "currency": "Kenya Shillings",
        "statement_period": "January - July 2024",
        "company_name": "ACME LTD",
    }
    data.update(overrides)
    return StatementExtraction(**data)


class TestValidateExtraction:
    def test_todo_coincide(self, account):
        result = validate_extraction(_extraction(), account, cycle_month=6, cycle_year=2024)

        assert result.is_valid
        assert result.mismatches == ()

    def test_empresa_distinta(self, account):
        result = validate_extraction(_extraction(company_name="Other Co"), account, 0, 2024)
        assert result.mismatches == (COMPANY_MISMATCH,)

    def test_empresa_faltante(self, account):
        result = validate_extraction(_extraction(company_name=None), account, 0, 2024)
        assert COMPANY_MISMATCH in result.mismatches

    def test_banco_distinto(self, account):
        result = validate_extraction(_extraction(bank_name="KCB Bank"), account, 0, 2024)
        assert result.mismatches == (BANK_MISMATCH,)

    @pytest.mark.parametrize("nombre", ["Not Available", "Not available in text", None, ""])
    def test_banco_no_disponible_se_ignora(self, account, nombre):
        result = validate_extraction(_extraction(bank_name=nombre), account, 0, 2024)
        assert BANK_MISMATCH not in result.mismatches

    @pytest.mark.parametrize("numero", ["0123456789", "ACC 0123456789 KES", "456789"])
    def test_cuenta_contenida_en_cualquier_sentido(self, account, numero):
        result = validate_extraction(_extraction(account_number=numero), account, 0, 2024)
        assert ACCOUNT_MISMATCH not in result.mismatches

    def test_cuenta_distinta(self, account):
        result = validate_extraction(_extraction(account_number="999"), account, 0, 2024)
        assert result.mismatches == (ACCOUNT_MISMATCH,)

    def test_moneda_normalizada(self, account):
        result = validate_extraction(_extraction(currency="KSH"), account, 0, 2024)
        assert CURRENCY_MISMATCH not in result.mismatches

    def test_moneda_distinta(self, account):
        result = validate_extraction(_extraction(currency="US Dollars"), account, 0, 2024)
        assert result.mismatches == (CURRENCY_MISMATCH,)

    def test_mes_del_ciclo_fuera_del_periodo(self, account):
        result = validate_extraction(_extraction(), account, cycle_month=8, cycle_year=2024)
        assert result.mismatches == (PERIOD_MISMATCH,)

    def test_periodo_no_reconocido(self, account):
        result = validate_extraction(_extraction(statement_period="sin periodo"), account, 0, 2024)
        assert result.mismatches == (PERIOD_MISMATCH,)

    def test_sin_periodo_no_se_valida(self, account):
        result = validate_extraction(_extraction(statement_period=None), account, 11, 1999)
        assert result.is_valid

    def test_varias_discrepancias_en_orden(self, account):
        extraction = _extraction(company_name="X", bank_name="Y", account_number="555", currency="EUR")

        result = validate_extraction(extraction, account, 0, 2024)

        assert result.mismatches == (
            COMPANY_MISMATCH,
            BANK_MISMATCH,
            ACCOUNT_MISMATCH,
            CURRENCY_MISMATCH,
        )


class TestIsPeriodContained:
    @pytest.mark.parametrize(
        "periodo,mes,anio,esperado",
        [
            ("January - July 2024", 0, 2024, True),
            ("January - July 2024", 6, 2024, True),
            ("January - July 2024", 7, 2024, False),
            ("November 2023 - February 2024", 11, 2023, True),
            ("November 2023 - February 2024", 1, 2024, True),
            ("November 2023 - February 2024", 2, 2024, False),
            ("01/03/2024 - 31/03/2024", 2, 2024, True),
            ("March 2024", 2, 2023, False),
            ("", 0, 2024, False),
            (None, 0, 2024, False),
        ],
    )
    def test_contencion(self, periodo, mes, anio, esperado):
        assert is_period_contained(periodo, mes, anio) is esperado
