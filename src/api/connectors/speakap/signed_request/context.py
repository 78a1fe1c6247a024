"""Contexto autenticado extraído de um signed request válido."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ..encoding import ISSUED_AT_KEY, build_signed_request_string, param_to_text
from .verify import parse_issued_at, validate_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class SignedRequestContext:
    """Identidade do usuário Speakap que abriu o app.

    Atributos:
        network_id: EID da rede (networkEID)
        user_id: EID do usuário (userEID)
        locale: Locale do usuário (ex: nl-NL)
        role: Papel do usuário na rede (ex: user, admin)
        issued_at: Momento de emissão do signed request
        signed_request: String original, para repassar ao front-end
    """

    network_id: str
    user_id: str
    locale: str | None
    role: str | None
    issued_at: datetime
    signed_request: str

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> SignedRequestContext:
        """Monta o contexto a partir de parâmetros JÁ verificados."""
        return cls(
            network_id=_optional_text(params, "networkEID") or "",
            user_id=_optional_text(params, "userEID") or "",
            locale=_optional_text(params, "locale"),
            role=_optional_text(params, "role"),
            issued_at=parse_issued_at(params[ISSUED_AT_KEY]),
            signed_request=build_signed_request_string(params),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "network_id": self.network_id,
            "user_id": self.user_id,
            "locale": self.locale,
            "role": self.role,
            "issued_at": self.issued_at.isoformat(),
            "signed_request": self.signed_request,
        }


def _optional_text(params: Mapping[str, Any], key: str) -> str | None:
    value = params.get(key)
    if value is None:
        return None
    return param_to_text(value)


def parse_signed_request(
    params: Mapping[str, Any],
    app_secret: str,
    *,
    now: datetime | None = None,
) -> SignedRequestContext:
    """Valida o signed request e retorna o contexto autenticado.

    Raises:
        InvalidSignatureError: Assinatura ausente ou divergente
        ExpiredSignatureError: Fora da janela de validade
    """
    validate_signature(params, app_secret, now=now)
    return SignedRequestContext.from_params(params)
