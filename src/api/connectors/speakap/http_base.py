"""Configuração imutável do cliente da API Speakap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from utils.errors import InvalidConfigError

if TYPE_CHECKING:
    import httpx

DEFAULT_API_VERSION = "1.1"
VALID_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class SpeakapApiConfig:
    """Configuração do cliente, compartilhada (somente leitura) entre chamadas.

    Atributos:
        scheme: "http" ou "https"
        hostname: Host da API (ex: api.speakap.io), opcionalmente com porta
        app_id: App ID (opcional)
        app_secret: App Secret (opcional)
        api_version: Versão da API usada no Accept padrão
        timeout_seconds: Timeout por chamada; None usa o default do httpx
        verify_ssl: Verifica certificado TLS
        transport: Transport httpx alternativo (ex: MockTransport em testes)

    Raises:
        InvalidConfigError: Se scheme não for http/https
    """

    scheme: str
    hostname: str
    app_id: str | None = None
    app_secret: str | None = field(default=None, repr=False)
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float | None = None
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.scheme not in VALID_SCHEMES:
            raise InvalidConfigError("Speakap scheme should be http or https")
        if not self.hostname:
            raise InvalidConfigError("Speakap hostname is required")

    @property
    def access_token(self) -> str | None:
        """Bearer token derivado: ``<app_id>_<app_secret>``."""
        if self.app_id and self.app_secret:
            return f"{self.app_id}_{self.app_secret}"
        return None

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.hostname}"

    @property
    def default_accept(self) -> str:
        return f"application/vnd.speakap.api-v{self.api_version}+json"
