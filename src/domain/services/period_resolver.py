"""
Servicio de dominio: Resolución del periodo de un estado de cuenta.

Es el núcleo de la captura de saldos para estados de cuenta de varios
meses. A partir del texto libre del periodo:

1. parse_period        → ParsedPeriod (o None si no se entiende)
2. enumerate_months    → [ene 2024, feb 2024, ..., jul 2024]
3. synthesize_balances → un MonthlyBalance por mes; los que faltan se
                         agregan en cero, los existentes NO se tocan
4. reconcile           → saldo de cierre vs saldo de contabilidad

Todo es cálculo puro: sin I/O y sin estado compartido. Si el texto del
periodo o la lista de saldos cambian, se vuelve a ejecutar y el último
resultado reemplaza al anterior.

Convención de meses: 0-based en todo el módulo (0 = enero, 11 = diciembre).
"""

from decimal import Decimal

from src.domain.exceptions import PeriodoInvalidoError
from src.domain.models.monthly_balance import MonthlyBalance
from src.domain.models.period import CalendarMonth, ParsedPeriod
from src.domain.models.reconciliation import ReconciliationResult, ReconciliationStatus
from src.domain.ports.process_logger import ProcessLogger
from src.domain.shared.money import to_decimal
from src.domain.shared.text_cleaner import normalize_period_text
from src.infrastructure.registry import PeriodPatternRegistry, create_default_registry

RECONCILIATION_TOLERANCE = Decimal("0.01")

_default_registry: PeriodPatternRegistry | None = None


def _registry_or_default(registry: PeriodPatternRegistry | None) -> PeriodPatternRegistry:
    global _default_registry
    if registry is not None:
        return registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def parse_period(
    text: str | None,
    registry: PeriodPatternRegistry | None = None,
) -> ParsedPeriod | None:
    """Interpreta el texto del periodo de un estado de cuenta.

    Se prueban los patrones del registro en orden; gana el primero que
    produce un periodo válido.

    Args:
        text: Texto libre. Puede ser vacío o None.
        registry: Patrones a usar. Por defecto, create_default_registry().

    Returns:
        ParsedPeriod, o None si ningún patrón lo reconoce. None no es un
        error: quien llama sigue sin información de periodo.

    Ejemplos:
        >>> parse_period("January - July 2024")
        ParsedPeriod(start_month=0, start_year=2024, end_month=6, end_year=2024)
        >>> parse_period("sin periodo") is None
        True
    """
    normalized = normalize_period_text(text)
    if not normalized:
        return None

    found = _registry_or_default(registry).first_match(normalized)
    return found[0] if found else None


def parse_period_strict(
    text: str | None,
    registry: PeriodPatternRegistry | None = None,
) -> ParsedPeriod:
    """Igual que parse_period pero lanza PeriodoInvalidoError si no se entiende.

    Para el CLI, donde un periodo escrito a mano que no se reconoce sí es
    un error del usuario.
    """
    period = parse_period(text, registry)
    if period is None:
        raise PeriodoInvalidoError(text)
    return period


def month_range(start_month: int, start_year: int, end_month: int, end_year: int) -> list[CalendarMonth]:
    """Meses de inicio a fin, ambos incluidos, avanzando de uno en uno.

    Diciembre (11) pasa a enero (0) del año siguiente. Si el inicio es
    posterior al fin, la lista queda vacía.

    Ejemplo:
        >>> [m.month_year for m in month_range(10, 2023, 1, 2024)]
        ['2023-11', '2023-12', '2024-01', '2024-02']
    """
    months: list[CalendarMonth] = []
    current = CalendarMonth(month=start_month, year=start_year)

    while current.key <= (end_year, end_month):
        months.append(current)
        current = current.next()

    return months


def enumerate_months(period: ParsedPeriod) -> list[CalendarMonth]:
    """Todos los meses de un periodo, en orden cronológico."""
    return month_range(period.start_month, period.start_year, period.end_month, period.end_year)


def synthesize_balances(
    months: list[CalendarMonth],
    existing: list[MonthlyBalance],
) -> list[MonthlyBalance]:
    """Completa la lista de saldos para que cada mes del rango tenga uno.

    - Los saldos existentes se devuelven tal cual y en su orden original,
      aunque tengan montos distintos de cero o no estén en el rango.
    - Cada mes sin saldo recibe un MonthlyBalance.placeholder al final.

    Es idempotente: synthesize_balances(m, synthesize_balances(m, e)) no
    agrega nada nuevo.
    """
    result = list(existing)
    seen = {balance.key for balance in existing}

    for month in months:
        if month.key in seen:
            continue
        result.append(MonthlyBalance.placeholder(month.month, month.year))
        seen.add(month.key)

    return result


def reconcile(
    statement_balance: Decimal | int | float | str,
    external_balance: Decimal | int | float | str,
) -> ReconciliationResult:
    """Compara el saldo del estado de cuenta contra el saldo de contabilidad.

    Conciliado si |statement - external| <= 0.01. No se redondea nada más
    ni se ajusta la tolerancia por moneda.

    Ejemplos:
        >>> reconcile("100.00", "100.005").status.value
        'reconciled'
        >>> reconcile("100.00", "100.02").delta
        Decimal('-0.02')
    """
    statement = to_decimal(statement_balance)
    external = to_decimal(external_balance)
    delta = statement - external

    status = (
        ReconciliationStatus.RECONCILED
        if abs(delta) <= RECONCILIATION_TOLERANCE
        else ReconciliationStatus.DIFFERENCE
    )
    return ReconciliationResult(
        status=status,
        delta=delta,
        statement_balance=statement,
        external_balance=external,
    )


class StatementPeriodResolver:
    """Une los pasos anteriores y deja rastro en la bitácora.

    Recibe sus dependencias por constructor: el registro de patrones y
    el logger. No guarda estado entre llamadas.
    """

    def __init__(
        self,
        logger: ProcessLogger,
        registry: PeriodPatternRegistry | None = None,
    ) -> None:
        self._logger = logger
        self._registry = _registry_or_default(registry)

    def parse(self, text: str | None) -> ParsedPeriod | None:
        """parse_period + evento en la bitácora (interpretado / no interpretado)."""
        normalized = normalize_period_text(text)
        found = self._registry.first_match(normalized) if normalized else None

        if found is None:
            self._logger.log_period_unparsed(text)
            return None

        period, pattern = found
        self._logger.log_period_parsed(normalized, period, pattern.name)
        return period

    def resolve(
        self,
        text: str | None,
        existing: list[MonthlyBalance],
    ) -> tuple[ParsedPeriod | None, list[MonthlyBalance]]:
        """Interpreta el periodo y completa los saldos mensuales.

        Returns:
            (periodo, saldos). Si el periodo no se entiende, los saldos
            se devuelven sin cambios.
        """
        period = self.parse(text)
        if period is None:
            return None, list(existing)

        months = enumerate_months(period)
        balances = synthesize_balances(months, existing)
        self._logger.log_months_synthesized(months, len(balances) - len(existing))
        return period, balances
