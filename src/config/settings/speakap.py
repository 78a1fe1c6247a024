"""Settings específicas do Speakap.

Credenciais do app e destino da API REST.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Constantes da API Speakap
SPEAKAP_API_HOSTNAME: str = "api.speakap.io"
SPEAKAP_API_VERSION: str = "1.1"


@dataclass(frozen=True)
class SpeakapSettings:
    """Configurações do app Speakap.

    Attributes:
        scheme: Scheme da API (http|https)
        hostname: Host da API REST
        app_id: App ID registrado no Speakap
        app_secret: App Secret (chave do HMAC e parte do bearer token)
        api_version: Versão da API (Accept: application/vnd.speakap.api-v<versão>+json)
        request_timeout_seconds: Timeout por chamada (None = default do httpx)
        verify_ssl: Verificação de certificado TLS
    """

    scheme: str = "https"
    hostname: str = SPEAKAP_API_HOSTNAME

    # Credenciais (carregadas de env ou Secret Manager)
    app_id: str = ""
    app_secret: str = field(default="", repr=False)

    api_version: str = SPEAKAP_API_VERSION
    request_timeout_seconds: float | None = None
    verify_ssl: bool = True

    @property
    def has_credentials(self) -> bool:
        """True se App ID e App Secret estão configurados."""
        return bool(self.app_id and self.app_secret)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Speakap.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.scheme not in ("http", "https"):
            errors.append("SPEAKAP_SCHEME deve ser 'http' ou 'https'")

        if not self.hostname:
            errors.append("SPEAKAP_API_HOSTNAME não configurado")

        if not self.app_id:
            errors.append("SPEAKAP_APP_ID não configurado")

        if not self.app_secret:
            errors.append("SPEAKAP_APP_SECRET não configurado")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("SPEAKAP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_optional_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    return float(raw)


def _load_from_env() -> SpeakapSettings:
    """Carrega SpeakapSettings a partir de variáveis de ambiente."""
    return SpeakapSettings(
        scheme=os.getenv("SPEAKAP_SCHEME", "https").lower(),
        hostname=os.getenv("SPEAKAP_API_HOSTNAME", SPEAKAP_API_HOSTNAME),
        app_id=os.getenv("SPEAKAP_APP_ID", ""),
        app_secret=os.getenv("SPEAKAP_APP_SECRET", ""),
        api_version=os.getenv("SPEAKAP_API_VERSION", SPEAKAP_API_VERSION),
        request_timeout_seconds=_parse_optional_float(
            os.getenv("SPEAKAP_REQUEST_TIMEOUT_SECONDS")
        ),
        verify_ssl=os.getenv("SPEAKAP_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_speakap_settings() -> SpeakapSettings:
    """Retorna instância cacheada de SpeakapSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
