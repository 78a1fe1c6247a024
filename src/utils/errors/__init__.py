"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ExpiredSignatureError,
    InvalidConfigError,
    InvalidSignatureError,
    SignatureError,
    SpeakapError,
)

__all__ = [
    "ExpiredSignatureError",
    "InvalidConfigError",
    "InvalidSignatureError",
    "SignatureError",
    "SpeakapError",
]
