"""Verificação de assinatura HMAC-SHA256 do signed request Speakap.

O Speakap envia ao app um POST de formulário com os parâmetros do contexto
(networkEID, userEID, locale, ...), mais ``issuedAt`` e ``signature``.
A assinatura é o HMAC-SHA256 (base64) da string canônica, usando o App
Secret como chave. A validade é de 60 segundos a partir de ``issuedAt``.

Não há nonce store: dentro da janela um signed request capturado pode ser
reapresentado. Risco aceito do protocolo.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from utils.errors import ExpiredSignatureError, InvalidSignatureError

from ..encoding import ISSUED_AT_KEY, SIGNATURE_KEY, canonicalize

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_WINDOW_MS = 60 * 1000

_EPOCH_MS_PATTERN = re.compile(r"^\d+$")


def compute_signature(params: Mapping[str, Any], app_secret: str) -> str:
    """Calcula a assinatura base64 do HMAC-SHA256 da string canônica."""
    payload = canonicalize(params).encode("utf-8")
    digest = hmac.new(app_secret.encode("utf-8"), payload, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def parse_issued_at(value: Any) -> datetime:
    """Converte ``issuedAt`` em instante UTC.

    Aceita epoch em milissegundos (número, ou string só com dígitos) ou
    ISO-8601. Strings com sinal ou fração não são epoch.
    ISO sem fuso é tratado como UTC.

    Raises:
        ExpiredSignatureError: Se o valor não representa um instante válido.
    """
    try:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        if isinstance(value, str):
            text = value.strip()
            if _EPOCH_MS_PATTERN.match(text):
                return datetime.fromtimestamp(int(text) / 1000, tz=UTC)
            parsed = datetime.fromisoformat(text)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=UTC)
            return parsed
    except (ValueError, OverflowError, OSError) as exc:
        raise ExpiredSignatureError("invalid_issued_at") from exc
    raise ExpiredSignatureError("invalid_issued_at")


def validate_signature(
    params: Mapping[str, Any],
    app_secret: str,
    *,
    now: datetime | None = None,
) -> None:
    """Valida assinatura e validade de um signed request.

    Args:
        params: Parâmetros POST recebidos (incluindo signature e issuedAt)
        app_secret: App Secret com o qual os parâmetros foram assinados
        now: Instante de referência (default: agora, UTC)

    Raises:
        InvalidSignatureError: Assinatura ausente ou divergente
        ExpiredSignatureError: issuedAt inválido ou fora da janela de 60s
    """
    provided = params.get(SIGNATURE_KEY)
    if not isinstance(provided, str) or not provided:
        raise InvalidSignatureError("missing_signature")

    computed = compute_signature(params, app_secret)
    # compare_digest exige str ASCII; assinatura não-ASCII nunca confere
    if not provided.isascii() or not hmac.compare_digest(computed, provided):
        raise InvalidSignatureError("signature_mismatch")

    if ISSUED_AT_KEY not in params:
        raise ExpiredSignatureError("invalid_issued_at")
    issued_at = parse_issued_at(params[ISSUED_AT_KEY])

    reference = now or datetime.now(UTC)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=UTC)
    if reference > issued_at + timedelta(milliseconds=SIGNATURE_WINDOW_MS):
        raise ExpiredSignatureError("expired_signature")


def sign_params(
    params: Mapping[str, Any],
    app_secret: str,
    *,
    issued_at: datetime | None = None,
) -> dict[str, Any]:
    """Assina parâmetros como o Speakap faria (útil para testes locais).

    Retorna cópia com ``issuedAt`` (ISO-8601 UTC, milissegundos) e
    ``signature`` calculada sobre o resultado.
    """
    signed = {key: value for key, value in params.items() if key != SIGNATURE_KEY}
    moment = issued_at or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    signed[ISSUED_AT_KEY] = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    signed[SIGNATURE_KEY] = compute_signature(signed, app_secret)
    return signed
