"""Modelos de chamada da API Speakap: opções por chamada e resultado."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .api_errors import ApiError


@dataclass(frozen=True)
class ApiCallOptions:
    """Sobrescritas válidas para uma única chamada.

    Atributos:
        accept: MIME type aceito (default: application/vnd.speakap.api-v<versão>+json)
        access_token: Bearer token (default: derivado de App ID e App Secret)
        content_type: MIME type do corpo (default depende do método)
    """

    accept: str | None = None
    access_token: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class ApiResult:
    """Resultado de uma chamada: ``error`` XOR ``result``.

    Um sucesso cujo corpo é o JSON ``null`` tem ambos None; use ``ok``.

    Desempacota como tupla::

        error, result = await api.get("/networks/42/user/7/")
    """

    error: ApiError | None = None
    result: Any = None

    def __post_init__(self) -> None:
        if self.error is not None and self.result is not None:
            raise ValueError("ApiResult não pode ter error e result ao mesmo tempo")

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        return iter((self.error, self.result))
