"""Erros de chamadas à API Speakap.

Chamadas à API nunca levantam exceção: toda falha vira um ``ApiError``
dentro do ``ApiResult``. Códigos negativos são sentinelas locais que
distinguem falhas de transporte/parse de erros reportados pela plataforma.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

REQUEST_FAILED_CODE = -1000
REQUEST_FAILED_MESSAGE = "Request Failed"

UNEXPECTED_REPLY_CODE = -1001
UNEXPECTED_REPLY_MESSAGE = "Unexpected Reply"


@dataclass(frozen=True)
class ApiError:
    """Erro de uma chamada à API.

    Atributos:
        code: Código da plataforma, ou sentinela (-1000 transporte, -1001 parse)
        message: Mensagem da plataforma ou sentinela
        description: Corpo bruto recebido (apenas em respostas inesperadas)
        request_error: Exceção de transporte original (apenas em -1000)
        payload: Corpo JSON de erro completo, como recebido
    """

    code: Any
    message: Any
    description: str | None = None
    request_error: BaseException | None = None
    payload: dict[str, Any] | None = None

    @property
    def is_transport_failure(self) -> bool:
        return self.code == REQUEST_FAILED_CODE

    @property
    def is_unexpected_reply(self) -> bool:
        return self.code == UNEXPECTED_REPLY_CODE

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ApiError:
        """Repassa code/message do corpo de erro sem modificação."""
        return cls(
            code=payload.get("code"),
            message=payload.get("message"),
            payload=payload,
        )


def request_failed(exc: BaseException) -> ApiError:
    """Erro sintetizado para falha de transporte (DNS, conexão, timeout)."""
    return ApiError(
        code=REQUEST_FAILED_CODE,
        message=REQUEST_FAILED_MESSAGE,
        request_error=exc,
    )


def unexpected_reply(raw_body: str) -> ApiError:
    """Erro sintetizado para corpo que não pôde ser interpretado como JSON."""
    return ApiError(
        code=UNEXPECTED_REPLY_CODE,
        message=UNEXPECTED_REPLY_MESSAGE,
        description=raw_body,
    )
