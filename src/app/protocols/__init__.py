"""Protocolos e contratos do core da aplicação."""

from .speakap_api import SpeakapPosterProtocol

__all__ = [
    "SpeakapPosterProtocol",
]
