"""
Puerto de salida: Almacén de registros de estados de cuenta.

El dominio no sabe dónde viven los registros (base de datos gestionada,
archivo JSON, memoria en los tests). Solo necesita leer un registro por
id o por (cuenta, mes, año), guardarlo y borrarlo.

Se inyecta explícitamente en StatementReconciler; no hay un cliente
global compartido.
"""

from abc import ABC, abstractmethod

from src.domain.models.statement import BankAccount, StatementRecord


class StatementRepository(ABC):
    """Interfaz para leer y escribir registros de estados de cuenta."""

    @abstractmethod
    def get(self, statement_id: str) -> StatementRecord:
        """Obtiene un registro por id.

        Raises:
            RepositoryError: Si no existe o el almacén falla.
        """
        ...

    @abstractmethod
    def find_by_period(self, bank_id: int, month: int, year: int) -> StatementRecord | None:
        """Busca el registro de una cuenta para un mes de ciclo (mes 0-11)."""
        ...

    @abstractmethod
    def save(self, record: StatementRecord) -> StatementRecord:
        """Inserta o actualiza un registro (por id) y lo devuelve."""
        ...

    @abstractmethod
    def find_account(self, bank_id: int) -> BankAccount | None:
        """Cuenta bancaria registrada contra la que se valida la extracción."""
        ...

    @abstractmethod
    def delete(self, statement_id: str) -> None:
        """Elimina un registro.

        Raises:
            RepositoryError: Si no existe.
        """
        ...
