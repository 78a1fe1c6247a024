"""Endpoint de entrada do signed request Speakap.

Endpoint:
- POST /speakap/signed-request: o Speakap abre o app com um POST de
  formulário assinado; validamos e devolvemos o contexto autenticado.

Segurança:
- Assinatura HMAC-SHA256 e janela de 60s obrigatórias
- App Secret ausente: 503 (nunca aceita sem verificar)
- Logs apenas com o motivo da rejeição, nunca com a assinatura
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.speakap.signed_request import parse_signed_request
from app.observability import (
    correlation_id_from_headers,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_speakap_settings
from utils.errors import SignatureError

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_form_body(raw_body: bytes) -> dict[str, str]:
    """Decodifica corpo application/x-www-form-urlencoded (última chave vence)."""
    return dict(parse_qsl(raw_body.decode("utf-8", errors="replace"), keep_blank_values=True))


@router.post("/signed-request")
async def receive_signed_request(request: Request) -> JSONResponse:
    """Valida o signed request e responde com o contexto do usuário."""
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        app_secret = get_speakap_settings().app_secret
        if not app_secret:
            logger.error("signed_request_secret_missing")
            return JSONResponse(
                {"error": "app_secret_not_configured"},
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        params = _parse_form_body(await request.body())
        try:
            context = parse_signed_request(params, app_secret)
        except SignatureError as exc:
            logger.warning("signed_request_rejected", extra={"reason": exc.reason})
            return JSONResponse(
                {"error": exc.reason},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except ValueError as exc:
            logger.warning("signed_request_malformed", extra={"reason": str(exc)})
            return JSONResponse(
                {"error": "invalid_payload"},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "signed_request_accepted",
            extra={"network_id": context.network_id, "role": context.role},
        )
        return JSONResponse(context.to_dict())
    finally:
        reset_correlation_id(token)
