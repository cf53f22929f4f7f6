"""
Registro de patrones de periodo disponibles.

Centraliza QUÉ formas de periodo se reconocen y en QUÉ orden se prueban.
Agregar un formato nuevo requiere solo 2 pasos:
1. Crear la clase XxxPattern que implemente PeriodPattern.
2. Registrarla aquí con register() o agregarla a create_default_registry().

A diferencia de un diccionario nombre → instancia, aquí el orden de
registro es parte del contrato: gana el primer patrón que coincide.
"""

from src.domain.exceptions import PeriodoFueraDeRangoError
from src.domain.models.period import ParsedPeriod
from src.domain.ports.period_pattern import PeriodPattern


class PeriodPatternRegistry:
    """Lista ordenada de patrones de periodo."""

    def __init__(self) -> None:
        self._patterns: list[PeriodPattern] = []

    def register(self, pattern: PeriodPattern) -> None:
        """Agrega un patrón al final de la lista (menor prioridad).

        Raises:
            ValueError: Si ya existe un patrón con ese nombre.
        """
        if self.get(pattern.name) is not None:
            raise ValueError(
                f"Ya existe un patrón registrado con el nombre '{pattern.name}'. "
                f"No se puede registrar {type(pattern).__name__}."
            )
        self._patterns.append(pattern)

    def get(self, name: str) -> PeriodPattern | None:
        for pattern in self._patterns:
            if pattern.name == name:
                return pattern
        return None

    def first_match(self, text: str) -> tuple[ParsedPeriod, PeriodPattern] | None:
        """Prueba los patrones en orden y devuelve el primer periodo válido
        junto con el patrón que lo produjo.

        Devuelve None si ningún patrón coincide, o si el primero que
        reconoce el texto encuentra un rango imposible.
        """
        for pattern in self._patterns:
            try:
                period = pattern.match(text)
            except PeriodoFueraDeRangoError:
                return None
            if period is not None:
                return period, pattern
        return None

    @property
    def available_patterns(self) -> list[str]:
        """Nombres de los patrones en orden de prioridad."""
        return [p.name for p in self._patterns]

    def __len__(self) -> int:
        return len(self._patterns)


def create_default_registry() -> PeriodPatternRegistry:
    """Crea un registro con los patrones estándar en su orden de prioridad.

    1. Rango numérico        "01/01/2024 - 31/01/2024"
    2. Rango del mismo año   "January - July 2024"
    3. Rango entre años      "November 2023 - February 2024"
    4. Un solo mes           "January 2024"
    """
    registry = PeriodPatternRegistry()

    # Se importan aquí (no al inicio del archivo) para que el dominio pueda
    # importar este módulo sin arrastrar los adaptadores.

    from src.adapters.input.period_patterns.numeric_range_pattern import (
        NumericDateRangePattern,
    )

    registry.register(NumericDateRangePattern())

    from src.adapters.input.period_patterns.month_name_patterns import (
        CrossYearMonthRangePattern,
        SameYearMonthRangePattern,
        SingleMonthPattern,
    )

    registry.register(SameYearMonthRangePattern())
    registry.register(CrossYearMonthRangePattern())
    registry.register(SingleMonthPattern())

    return registry
