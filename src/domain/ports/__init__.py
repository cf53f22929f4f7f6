"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import PeriodPattern, StatementRepository, TextExtractor
"""

from src.domain.ports.period_pattern import PeriodPattern
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.report_writer import ReportWriter
from src.domain.ports.statement_repository import StatementRepository
from src.domain.ports.text_extractor import TextExtractor

__all__ = [
    "PeriodPattern",
    "ProcessLogger",
    "ReportWriter",
    "StatementRepository",
    "TextExtractor",
]
