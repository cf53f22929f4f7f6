"""
Servicio de dominio: Libro de saldos mensuales de un estado de cuenta.

Todas las formas de modificar los saldos pasan por aquí:
- completar los meses del periodo (ensure_months)
- agregar un mes a mano (add_month)
- asignar un monto seleccionado en el PDF (apply_selection)
- editar montos (update), verificar (verify) y eliminar (remove)

¿Por qué un diccionario por (year, month) en lugar de una lista?
Porque así no pueden existir dos saldos para el mismo mes, sin importar
por qué camino se agregaron. Python mantiene el orden de inserción de
los diccionarios, así que to_list() respeta el orden original.
"""

from collections.abc import Iterable, Iterator
from datetime import datetime
from decimal import Decimal

from src.domain.exceptions import SaldoDuplicadoError, SaldoNoEncontradoError
from src.domain.models.detected_period import BalanceSelection
from src.domain.models.monthly_balance import HighlightCoordinates, MonthlyBalance
from src.domain.models.period import CalendarMonth
from src.domain.services.period_resolver import synthesize_balances

# Caja de resaltado alrededor del punto seleccionado, en puntos del visor
HIGHLIGHT_LEFT = 20
HIGHLIGHT_RIGHT = 150
HIGHLIGHT_HALF_HEIGHT = 10


class BalanceLedger:
    """Saldos mensuales indexados por (year, month)."""

    def __init__(self, balances: Iterable[MonthlyBalance] = ()) -> None:
        self._balances: dict[tuple[int, int], MonthlyBalance] = {}
        for balance in balances:
            # Si el almacén trae duplicados, se queda el primero
            self._balances.setdefault(balance.key, balance)

    def ensure_months(self, months: list[CalendarMonth]) -> int:
        """Agrega un saldo vacío para cada mes que no tenga uno.

        Returns:
            Cuántos meses se agregaron.
        """
        before = len(self._balances)
        for balance in synthesize_balances(months, self.to_list()):
            self._balances.setdefault(balance.key, balance)
        return len(self._balances) - before

    def add_month(self, month: int, year: int) -> MonthlyBalance:
        """Agrega un mes en cero.

        Raises:
            SaldoDuplicadoError: Si ya hay saldo para ese mes.
        """
        if (year, month) in self._balances:
            raise SaldoDuplicadoError(month, year)
        balance = MonthlyBalance.placeholder(month, year)
        self._balances[balance.key] = balance
        return balance

    def apply_selection(self, selection: BalanceSelection, month: int, year: int) -> MonthlyBalance:
        """Asigna el monto seleccionado como saldo de cierre del mes.

        Si el mes no existe se crea. La verificación se reinicia.
        """
        current = self._balances.get((year, month)) or MonthlyBalance.placeholder(month, year)
        coords = HighlightCoordinates(
            x1=selection.x - HIGHLIGHT_LEFT,
            y1=selection.y - HIGHLIGHT_HALF_HEIGHT,
            x2=selection.x + HIGHLIGHT_RIGHT,
            y2=selection.y + HIGHLIGHT_HALF_HEIGHT,
            page=selection.page,
        )
        changes = {
            "closing_balance": selection.value,
            "statement_page": selection.page,
            "highlight_coordinates": coords,
        }
        if selection.date:
            changes["closing_date"] = selection.date

        updated = current.edited(**changes)
        self._balances[updated.key] = updated
        return updated

    def update(self, month: int, year: int, /, **fields) -> MonthlyBalance:
        """Edita campos de un saldo existente. Deja el saldo sin verificar.

        `month` y `year` son solo posicionales: en `fields` se rechazan.
        """
        updated = self._require(month, year).edited(**fields)
        self._balances[updated.key] = updated
        return updated

    def verify(
        self,
        month: int,
        year: int,
        verified_by: str,
        verified_at: datetime | None = None,
    ) -> MonthlyBalance:
        updated = self._require(month, year).verified(verified_by, verified_at)
        self._balances[updated.key] = updated
        return updated

    def remove(self, month: int, year: int) -> MonthlyBalance:
        """Elimina el saldo de un mes y lo devuelve."""
        self._require(month, year)
        return self._balances.pop((year, month))

    def get(self, month: int, year: int) -> MonthlyBalance | None:
        return self._balances.get((year, month))

    def opening_balance_for(self, month: int, year: int) -> Decimal | None:
        balance = self.get(month, year)
        return balance.opening_balance if balance else None

    def closing_balance_for(self, month: int, year: int) -> Decimal | None:
        balance = self.get(month, year)
        return balance.closing_balance if balance else None

    def is_verified(self, month: int, year: int) -> bool:
        balance = self.get(month, year)
        return bool(balance and balance.is_verified)

    def to_list(self) -> list[MonthlyBalance]:
        return list(self._balances.values())

    def _require(self, month: int, year: int) -> MonthlyBalance:
        balance = self._balances.get((year, month))
        if balance is None:
            raise SaldoNoEncontradoError(month, year)
        return balance

    def __len__(self) -> int:
        return len(self._balances)

    def __iter__(self) -> Iterator[MonthlyBalance]:
        return iter(self._balances.values())

    def __contains__(self, key: object) -> bool:
        """Acepta (month, year) o un CalendarMonth."""
        if isinstance(key, CalendarMonth):
            return key.key in self._balances
        if isinstance(key, tuple) and len(key) == 2:
            month, year = key
            return (year, month) in self._balances
        return False
