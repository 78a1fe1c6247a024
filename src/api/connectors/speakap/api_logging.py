"""Helpers de logging para a API Speakap (sem tokens nem corpos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import ApiError

logger = logging.getLogger(__name__)


def log_api_error(
    error: ApiError,
    method: str,
    path: str,
    status_code: int | None = None,
) -> None:
    """Loga erro de chamada sem expor dados sensíveis."""
    extra: dict[str, object] = {
        "method": method,
        "path": path,
        "error_code": error.code,
        "status_code": status_code,
    }
    if error.request_error is not None:
        extra["error_type"] = type(error.request_error).__name__
    logger.warning("speakap_api_error", extra=extra)


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "speakap_api_success",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
