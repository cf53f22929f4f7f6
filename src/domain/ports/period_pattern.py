"""
Puerto: Patrón de periodo de estado de cuenta.

Cada forma de escribir un periodo es una estrategia independiente:

    PeriodPattern (interfaz)
    ├── NumericDateRangePattern     → "01/01/2024 - 31/03/2024"
    ├── SameYearMonthRangePattern   → "January - July 2024"
    ├── CrossYearMonthRangePattern  → "November 2023 - February 2024"
    └── SingleMonthPattern          → "January 2024"

El PeriodPatternRegistry las prueba en orden de registro y gana la
primera que devuelve un ParsedPeriod. Una estrategia cuyo nombre de mes
no se reconoce devuelve None para que se pruebe la siguiente. Si reconoce
el texto pero el rango es imposible (mes 13, inicio posterior al fin)
lanza PeriodoFueraDeRangoError y la búsqueda termina sin periodo.
"""

from abc import ABC, abstractmethod

from src.domain.models.period import ParsedPeriod


class PeriodPattern(ABC):
    """Interfaz para interpretar una forma concreta de periodo."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del patrón. Para la bitácora y para el registro."""
        ...

    @abstractmethod
    def match(self, text: str) -> ParsedPeriod | None:
        """Intenta interpretar el texto con este patrón.

        Args:
            text: Texto del periodo ya normalizado (espacios colapsados).

        Returns:
            ParsedPeriod si el patrón coincide y todos sus componentes son
            válidos. None si el texto no tiene esta forma o un nombre de
            mes no se reconoce.

        Raises:
            PeriodoFueraDeRangoError: El texto tiene esta forma, pero el
                rango es imposible. No se debe probar ningún otro patrón.
        """
        ...
