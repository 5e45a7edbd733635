"""Helpers de logging para chamadas à API NFHub (sem PII, sem token)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(
    method: str,
    path: str,
    status_code: int,
    elapsed_ms: float,
) -> None:
    """Loga requisição concluída; corpo e query params nunca são logados."""
    logger.debug(
        "nfhub_request_completed",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 1),
        },
    )


def log_transport_failure(
    method: str,
    path: str,
    error_type: str,
    status_code: int | None = None,
) -> None:
    logger.warning(
        "nfhub_transport_failure",
        extra={
            "method": method,
            "path": path,
            "error_type": error_type,
            "status_code": status_code,
        },
    )


def log_remote_error(
    operation: str,
    http_code: int,
    error_count: int,
) -> None:
    """Loga erro de negócio retornado pela API (mensagem não é logada)."""
    logger.warning(
        "nfconta_remote_error",
        extra={
            "operation": operation,
            "status_code": http_code,
            "error_count": error_count,
        },
    )
