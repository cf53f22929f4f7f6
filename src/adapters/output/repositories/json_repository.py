"""
Adaptador de salida: Almacén de estados de cuenta en un archivo JSON.

Guarda todos los registros en un solo documento:

    {"banks": [{"id": 1, "bank_name": ...}, ...],
     "statements": [{"id": "...", "bank_id": 1, ...}, ...]}

Cada registro tiene la misma forma que la fila de la tabla de estados de
cuenta (statement_extractions, statement_document, monthly_balances), así
que un volcado de la base se puede usar directamente.

Se lee el archivo completo en cada operación y se reescribe al guardar.
Suficiente para un CLI que procesa un estado de cuenta a la vez.
"""

import json
from pathlib import Path
from typing import Any

from src.domain.exceptions import RepositoryError
from src.domain.models.statement import BankAccount, StatementRecord
from src.domain.ports.statement_repository import StatementRepository


class JsonStatementRepository(StatementRepository):
    """Registros de estados de cuenta persistidos en un archivo JSON."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def get(self, statement_id: str) -> StatementRecord:
        for record in self._load():
            if record.id == statement_id:
                return record
        raise RepositoryError(str(self._path), f"No existe el registro '{statement_id}'")

    def find_by_period(self, bank_id: int, month: int, year: int) -> StatementRecord | None:
        for record in self._load():
            if (
                record.bank_id == bank_id
                and record.statement_month == month
                and record.statement_year == year
            ):
                return record
        return None

    def save(self, record: StatementRecord) -> StatementRecord:
        records = self._load()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                records[i] = record
                break
        else:
            records.append(record)
        self._dump(records)
        return record

    def delete(self, statement_id: str) -> None:
        records = self._load()
        remaining = [r for r in records if r.id != statement_id]
        if len(remaining) == len(records):
            raise RepositoryError(str(self._path), f"No existe el registro '{statement_id}'")
        self._dump(remaining)

    def find_account(self, bank_id: int) -> BankAccount | None:
        for item in self._read_document().get("banks", []):
            if int(item.get("id", -1)) == bank_id:
                try:
                    return BankAccount.from_dict(item)
                except (KeyError, TypeError, ValueError) as e:
                    raise RepositoryError(str(self._path), f"Cuenta con formato inválido: {e}")
        return None

    def all(self) -> list[StatementRecord]:
        return self._load()

    # =================================================================

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise RepositoryError(str(self._path), f"JSON inválido: {e}")

    def _load(self) -> list[StatementRecord]:
        data = self._read_document()
        try:
            return [StatementRecord.from_dict(item) for item in data.get("statements", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(str(self._path), f"Registro con formato inválido: {e}")

    def _dump(self, records: list[StatementRecord]) -> None:
        # Las demás claves del documento (banks) se conservan
        document = self._read_document()
        document["statements"] = [r.to_dict() for r in records]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(
                    document,
                    f,
                    ensure_ascii=False,
                    indent=2,
                )
        except OSError as e:
            raise RepositoryError(str(self._path), str(e))
