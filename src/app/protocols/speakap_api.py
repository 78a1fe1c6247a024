"""Contrato mínimo da API Speakap consumido pelos serviços do app.

Serviços dependem só deste protocolo; o cliente concreto fica em
api/connectors/speakap e é injetado pelo bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from api.connectors.speakap.models import ApiCallOptions, ApiResult


@runtime_checkable
class SpeakapPosterProtocol(Protocol):
    """Capacidade de POST JSON na API Speakap."""

    async def post(
        self,
        path: str,
        data: Any,
        options: ApiCallOptions | None = None,
    ) -> ApiResult:
        """Envia ``data`` como JSON e retorna (error, result)."""
        ...
