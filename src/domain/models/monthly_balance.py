"""
Modelo de dominio: Saldo mensual de un estado de cuenta.

Un estado de cuenta puede cubrir varios meses (un solo PDF de enero a
julio). Cada mes del rango tiene su propio MonthlyBalance con el saldo
de apertura y de cierre que se leyó del documento, la página donde
aparece y quién lo verificó.

Decisiones de diseño:
- Montos en `Decimal` (ver src.domain.shared.money).
- frozen=True: editar un saldo produce una instancia nueva. Toda edición
  (edited) deja el saldo como NO verificado; solo `verified` lo marca.
- `to_dict`/`from_dict` respetan la forma JSON de la columna
  `monthly_balances` del almacén, donde las fechas de verificación son ISO
  8601. Los montos se escriben como string (str de Decimal) y al leer se
  aceptan también números.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Any

from src.domain.models.period import CalendarMonth
from src.domain.shared.money import to_decimal


@dataclass(frozen=True)
class HighlightCoordinates:
    """Rectángulo resaltado en una página del PDF, en puntos del visor."""

    x1: float
    y1: float
    x2: float
    y2: float
    page: int

    def to_dict(self) -> dict[str, Any]:
        return {"x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2, "page": self.page}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HighlightCoordinates":
        return cls(
            x1=float(data["x1"]),
            y1=float(data["y1"]),
            x2=float(data["x2"]),
            y2=float(data["y2"]),
            page=int(data["page"]),
        )


@dataclass(frozen=True)
class MonthlyBalance:
    """Saldos de un mes concreto dentro de un estado de cuenta."""

    month: int
    """Índice del mes, 0-11."""

    year: int

    opening_balance: Decimal = Decimal("0")
    closing_balance: Decimal = Decimal("0")

    statement_page: int = 1
    """Página del PDF donde aparece el saldo de cierre (1-indexed)."""

    closing_date: str | None = None
    """Fecha de cierre tal como aparece en el documento (DD/MM/YYYY)."""

    highlight_coordinates: HighlightCoordinates | None = None

    is_verified: bool = False
    verified_by: str | None = None
    verified_at: str | None = None
    """Momento de la verificación en ISO 8601."""

    # No participa en la igualdad: dos saldos con los mismos datos son iguales
    # aunque uno venga del almacén y otro se haya creado en memoria.
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    """Campos desconocidos del JSON original, para no perderlos al guardar."""

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValueError(f"Mes fuera de rango: {self.month}. Debe ser 0-11.")
        if self.statement_page < 1:
            raise ValueError(f"statement_page debe ser >= 1: {self.statement_page}")
        # frozen: la conversión a Decimal se hace con object.__setattr__
        object.__setattr__(self, "opening_balance", to_decimal(self.opening_balance))
        object.__setattr__(self, "closing_balance", to_decimal(self.closing_balance))

    @classmethod
    def placeholder(cls, month: int, year: int) -> "MonthlyBalance":
        """Saldo vacío para un mes del periodo que aún no tiene datos."""
        return cls(month=month, year=year)

    @property
    def key(self) -> tuple[int, int]:
        """Clave única (year, month)."""
        return (self.year, self.month)

    @property
    def calendar_month(self) -> CalendarMonth:
        return CalendarMonth(month=self.month, year=self.year)

    def edited(self, **changes: Any) -> "MonthlyBalance":
        """Devuelve una copia con los cambios y la verificación reiniciada.

        No se puede usar para cambiar el mes/año: eso cambiaría la clave.
        """
        if "month" in changes or "year" in changes:
            raise ValueError("No se puede cambiar el mes/año de un saldo existente")
        reset = {"is_verified": False, "verified_by": None, "verified_at": None}
        return replace(self, **{**changes, **reset})

    def verified(self, by: str, at: datetime | None = None) -> "MonthlyBalance":
        """Devuelve una copia marcada como verificada."""
        moment = at or datetime.now()
        return replace(self, is_verified=True, verified_by=by, verified_at=moment.isoformat())

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "month": self.month,
                "year": self.year,
                "opening_balance": str(self.opening_balance),
                "closing_balance": str(self.closing_balance),
                "statement_page": self.statement_page,
                "closing_date": self.closing_date,
                "highlight_coordinates": (
                    self.highlight_coordinates.to_dict() if self.highlight_coordinates else None
                ),
                "is_verified": self.is_verified,
                "verified_by": self.verified_by,
                "verified_at": self.verified_at,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MonthlyBalance":
        """Construye un saldo desde su forma JSON.

        Los montos nulos se leen como 0, igual que en el formulario.
        """
        known = {
            "month",
            "year",
            "opening_balance",
            "closing_balance",
            "statement_page",
            "closing_date",
            "highlight_coordinates",
            "is_verified",
            "verified_by",
            "verified_at",
        }
        coords = data.get("highlight_coordinates")
        return cls(
            month=int(data["month"]),
            year=int(data["year"]),
            opening_balance=to_decimal(data.get("opening_balance") or 0),
            closing_balance=to_decimal(data.get("closing_balance") or 0),
            statement_page=int(data.get("statement_page") or 1),
            closing_date=data.get("closing_date"),
            highlight_coordinates=HighlightCoordinates.from_dict(coords) if coords else None,
            is_verified=bool(data.get("is_verified", False)),
            verified_by=data.get("verified_by"),
            verified_at=data.get("verified_at"),
            extra={k: v for k, v in data.items() if k not in known},
        )
