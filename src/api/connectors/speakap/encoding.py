"""Codificação de parâmetros: signed request e form-urlencoded.

Dois esquemas distintos convivem aqui e NÃO devem ser unificados:

- ``percent_encode``: usado na string canônica do signed request. Escapa
  também ``! ' ( ) *``; precisa bater byte a byte com o lado que assina.
- ``form_encode_value``: codificação de formulário usada por
  ``post_action``. Mantém ``! ' ( ) *`` literais, como o encodeURIComponent
  padrão.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Chaves reservadas do signed request
SIGNATURE_KEY = "signature"
ISSUED_AT_KEY = "issuedAt"

# Sempre fora da string canônica
EXCLUDED_FROM_CANONICAL = frozenset({SIGNATURE_KEY})

# Caracteres que o encodeURIComponent deixa passar além de [A-Za-z0-9_.-~]
_URI_COMPONENT_EXTRA_SAFE = "!'()*"


def param_to_text(value: Any) -> str:
    """Converte valor de parâmetro em texto (semântica de String() do JS)."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), sort_keys=True)
    return str(value)


def percent_encode(value: Any) -> str:
    """Percent-encoding estrito do signed request.

    Apenas ``A-Z a-z 0-9 - _ . ~`` ficam literais; ``! ' ( ) *`` viram
    ``%21 %27 %28 %29 %2A``.
    """
    return quote(param_to_text(value), safe="")


def form_encode_value(value: Any) -> str:
    """Codificação de componente URI padrão (encodeURIComponent)."""
    return quote(param_to_text(value), safe=_URI_COMPONENT_EXTRA_SAFE)


def form_encode(data: Mapping[str, Any]) -> str:
    """Serializa dados como application/x-www-form-urlencoded.

    Pares ``chave=valor`` na ordem de iteração do mapping, unidos por ``&``.
    """
    return "&".join(
        f"{form_encode_value(key)}={form_encode_value(value)}" for key, value in data.items()
    )


def _encode_pairs(pairs: Iterable[tuple[str, Any]]) -> str:
    return "&".join(f"{percent_encode(key)}={percent_encode(value)}" for key, value in pairs)


def _sorted_payload_pairs(params: Mapping[Any, Any]) -> list[tuple[str, Any]]:
    """Pares (chave em texto, valor) ordenados, sem ``signature``."""
    pairs = [
        (param_to_text(key), value)
        for key, value in params.items()
        if key not in EXCLUDED_FROM_CANONICAL
    ]
    if any(not key for key, _ in pairs):
        raise ValueError("empty_parameter_key")
    return sorted(pairs, key=lambda pair: pair[0])


def canonicalize(params: Mapping[str, Any]) -> str:
    """Gera a string canônica usada como entrada do HMAC.

    Pares ordenados por chave (ordem lexicográfica ascendente), sem a chave
    ``signature``.

    Raises:
        ValueError: Se alguma chave for vazia.
    """
    return _encode_pairs(_sorted_payload_pairs(params))


def build_signed_request_string(params: Mapping[str, Any]) -> str:
    """Reconstrói a string do signed request como o cliente a transmitiu.

    Igual a ``canonicalize``, mas com o par ``signature`` (se presente)
    reanexado ao final. Não calcula assinatura nenhuma.
    """
    pairs = _sorted_payload_pairs(params)
    if SIGNATURE_KEY in params:
        pairs.append((SIGNATURE_KEY, params[SIGNATURE_KEY]))
    return _encode_pairs(pairs)
