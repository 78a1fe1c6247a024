"""Agregador de settings do app Speakap.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Speakap settings
from config.settings.speakap import (
    SPEAKAP_API_HOSTNAME,
    SPEAKAP_API_VERSION,
    SpeakapSettings,
    get_speakap_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "SPEAKAP_API_HOSTNAME",
    "SPEAKAP_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Speakap
    "SpeakapSettings",
    "get_base_settings",
    "get_speakap_settings",
]
