"""Configuração de logging estruturado (JSON).

Uso:
    from nfconta.config.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    logger = get_logger(__name__)
"""

from nfconta.config.logging.config import configure_logging, get_logger
from nfconta.config.logging.filters import CorrelationIdFilter
from nfconta.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
