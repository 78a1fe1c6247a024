"""Exceções do SDK Speakap.

Falhas de configuração e de verificação de signed request são levantadas.
Falhas de chamadas à API nunca são levantadas: viram ``ApiError`` no
``ApiResult`` (ver api/connectors/speakap/api_errors.py).
"""

from __future__ import annotations


class SpeakapError(Exception):
    """Base para erros levantados pelo SDK."""


class InvalidConfigError(SpeakapError, ValueError):
    """Configuração inválida detectada na construção do cliente."""


class SignatureError(SpeakapError, ValueError):
    """Base para falhas de verificação de signed request.

    A mensagem é sempre um motivo curto em snake_case (sem PII), por exemplo
    ``signature_mismatch`` ou ``expired_signature``.
    """

    @property
    def reason(self) -> str:
        return str(self)


class InvalidSignatureError(SignatureError):
    """Assinatura ausente ou diferente da calculada."""


class ExpiredSignatureError(SignatureError):
    """issuedAt ausente, inválido ou fora da janela de validade."""
