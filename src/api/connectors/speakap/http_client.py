"""Cliente HTTP da API REST do Speakap.

Cada chamada faz exatamente uma requisição e devolve um ``ApiResult``:
- 204: sucesso com ``True`` (corpo ignorado)
- 2xx: sucesso com o JSON do corpo
- demais status: ``ApiError`` com code/message do corpo JSON de erro
- corpo que não é JSON: ``ApiError`` -1001 (Unexpected Reply) com o corpo bruto
- falha de transporte: ``ApiError`` -1000 (Request Failed) com a exceção original

Sem retry e sem seguir redirects: retentativas são responsabilidade do chamador.

Uso:
    api = SpeakapApiClient(
        SpeakapApiConfig(
            scheme="https",
            hostname="api.speakap.io",
            app_id=MY_APP_ID,
            app_secret=MY_APP_SECRET,
        )
    )

    error, result = await api.get(f"/networks/{network_id}/user/{user_id}/")
    error, result = await api.post(
        f"/networks/{network_id}/messages/",
        {"body": "test 123", "messageType": "update"},
    )
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

import httpx

from .api_errors import ApiError, request_failed, unexpected_reply
from .api_logging import log_api_error, log_success
from .encoding import form_encode
from .models import ApiCallOptions, ApiResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import SpeakapSettings

    from .http_base import SpeakapApiConfig

logger: logging.Logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_NO_OPTIONS = ApiCallOptions()


class SpeakapApiClient:
    """Wrapper da API Speakap.

    Stateless além da configuração imutável; seguro para chamadas
    concorrentes. Cada chamada abre o próprio ``httpx.AsyncClient``.
    """

    def __init__(self, config: SpeakapApiConfig) -> None:
        self._config = config

    @property
    def config(self) -> SpeakapApiConfig:
        return self._config

    async def get(self, path: str, options: ApiCallOptions | None = None) -> ApiResult:
        """GET em ``path`` (inclui query string opcional)."""
        return await self.request("GET", path, None, options)

    async def delete(self, path: str, options: ApiCallOptions | None = None) -> ApiResult:
        """DELETE em ``path``."""
        return await self.request("DELETE", path, None, options)

    async def post(
        self,
        path: str,
        data: Any,
        options: ApiCallOptions | None = None,
    ) -> ApiResult:
        """POST com ``data`` serializado como JSON.

        Para actions (endpoints sem barra final) use ``post_action``.
        """
        return await self.request("POST", path, json.dumps(data), options)

    async def put(
        self,
        path: str,
        data: Any,
        options: ApiCallOptions | None = None,
    ) -> ApiResult:
        """PUT com ``data`` serializado como JSON."""
        return await self.request("PUT", path, json.dumps(data), options)

    async def post_action(
        self,
        path: str,
        data: Mapping[str, Any] | None = None,
        options: ApiCallOptions | None = None,
    ) -> ApiResult:
        """POST em uma action com ``data`` form-urlencoded.

        ``data`` None ou vazio envia a requisição sem corpo.
        """
        body = form_encode(data) if data else None
        opts = options or _NO_OPTIONS
        opts = replace(opts, content_type=opts.content_type or FORM_CONTENT_TYPE)
        return await self.request("POST", path, body, opts)

    async def request(
        self,
        method: str,
        path: str,
        body: str | bytes | None = None,
        options: ApiCallOptions | None = None,
    ) -> ApiResult:
        """Executa uma requisição HTTP e normaliza o resultado.

        Args:
            method: Método HTTP (ex: "PUT")
            path: Caminho REST, incluindo query string opcional
            body: Corpo já serializado (None = sem corpo)
            options: Sobrescritas para esta chamada

        Returns:
            ApiResult com error XOR result. Nunca levanta por falha de rede
            ou de parse.
        """
        method = method.upper()
        opts = options or _NO_OPTIONS
        content = body.encode("utf-8") if isinstance(body, str) else body
        headers = self._build_headers(opts, content)
        log_path = path.split("?", 1)[0]

        try:
            response = await self._send(method, path, content or None, headers)
        except httpx.HTTPError as exc:
            error = request_failed(exc)
            log_api_error(error, method, log_path)
            return ApiResult(error=error)

        result = self._process_response(response)
        if result.error is not None:
            log_api_error(result.error, method, log_path, response.status_code)
        else:
            log_success(method, log_path, response.status_code)
        return result

    def _build_headers(self, options: ApiCallOptions, content: bytes | None) -> dict[str, str]:
        """Monta Accept, Authorization e headers de conteúdo."""
        headers = {"Accept": options.accept or self._config.default_accept}

        access_token = options.access_token or self._config.access_token
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        if content:
            content_type = options.content_type or JSON_CONTENT_TYPE
            headers["Content-Type"] = f"{content_type}; charset=utf-8"
            headers["Content-Length"] = str(len(content))
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        content: bytes | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        client_kwargs: dict[str, Any] = {
            "base_url": self._config.base_url,
            "verify": self._config.verify_ssl,
            "transport": self._config.transport,
        }
        if self._config.timeout_seconds is not None:
            client_kwargs["timeout"] = self._config.timeout_seconds

        async with httpx.AsyncClient(**client_kwargs) as client:
            return await client.request(method, path, content=content, headers=headers)

    @staticmethod
    def _process_response(response: httpx.Response) -> ApiResult:
        """Classifica a resposta pelo status code."""
        status_code = response.status_code
        if status_code == 204:
            return ApiResult(result=True)

        raw_body = response.content.decode("utf-8", errors="replace")
        try:
            payload = json.loads(raw_body)
        except json.JSONDecodeError:
            return ApiResult(error=unexpected_reply(raw_body))

        if 200 <= status_code < 300:
            return ApiResult(result=payload)

        if not isinstance(payload, dict):
            return ApiResult(error=unexpected_reply(raw_body))
        return ApiResult(error=ApiError.from_payload(payload))


def create_speakap_api_client(
    settings: SpeakapSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SpeakapApiClient:
    """Factory para criar o cliente a partir das settings.

    Args:
        settings: SpeakapSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)

    Raises:
        InvalidConfigError: Se SPEAKAP_SCHEME for inválido
    """
    # Import local para evitar dependência circular
    from config.settings import get_speakap_settings

    from .http_base import SpeakapApiConfig

    speakap = settings or get_speakap_settings()
    config = SpeakapApiConfig(
        scheme=speakap.scheme,
        hostname=speakap.hostname,
        app_id=speakap.app_id or None,
        app_secret=speakap.app_secret or None,
        api_version=speakap.api_version,
        timeout_seconds=speakap.request_timeout_seconds,
        verify_ssl=speakap.verify_ssl,
        transport=transport,
    )
    logger.debug(
        "speakap_api_client_created",
        extra={"hostname": config.hostname, "api_version": config.api_version},
    )
    return SpeakapApiClient(config)
