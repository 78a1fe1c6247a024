"""Notificações de escala para usuários Speakap.

Exemplo de consumidor da API: envia um alerta quando o usuário sai da
escala de uma semana e um update de timeline quando a escala nova está
disponível. Usa apenas ``post`` e devolve o ``ApiResult`` sem alteração.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.connectors.speakap.models import ApiResult
    from app.protocols import SpeakapPosterProtocol

logger = logging.getLogger(__name__)

# Corpos por locale; o Speakap escolhe conforme o idioma do usuário
DELETED_SCHEDULE_BODIES = {
    "de-DE": "Sie sind nicht mehr zum Arbeiten in Woche {week} eingeplant.",
    "en-US": "You are no longer scheduled to work in week {week}.",
    "nl-NL": "Je bent niet meer ingeroosterd voor week {week}.",
}

NEW_SCHEDULE_BODIES = {
    "de-DE": "Ihr Plan für Woche {week} ist verfügbar.",
    "en-US": "Your schedule for week {week} is available.",
    "nl-NL": "Je rooster voor week {week} staat klaar.",
}


def _localize(templates: dict[str, str], week: int | str) -> dict[str, str]:
    return {locale: template.format(week=week) for locale, template in templates.items()}


class ScheduleNotifier:
    """Envia notificações de escala via API Speakap."""

    def __init__(self, speakap_api: SpeakapPosterProtocol) -> None:
        self._api = speakap_api

    async def send_deleted_schedule_notification(
        self,
        network_eid: str,
        user_eid: str,
        week: int | str,
        app_data: Any = None,
    ) -> ApiResult:
        """Alerta o usuário de que não está mais escalado na semana."""
        logger.info(
            "schedule_notification_sending",
            extra={"kind": "deleted", "network_id": network_eid, "week": week},
        )
        return await self._api.post(
            f"/networks/{network_eid}/alerts/",
            {
                "appData": app_data,
                "recipients": [{"type": "user", "EID": user_eid}],
                "localizableBody": _localize(DELETED_SCHEDULE_BODIES, week),
            },
        )

    async def send_new_schedule_notification(
        self,
        network_eid: str,
        user_eid: str,
        week: int | str,
        app_data: Any = None,
    ) -> ApiResult:
        """Publica na timeline do usuário que a escala da semana saiu."""
        logger.info(
            "schedule_notification_sending",
            extra={"kind": "new", "network_id": network_eid, "week": week},
        )
        return await self._api.post(
            f"/networks/{network_eid}/messages/",
            {
                "appData": app_data,
                "messageType": "app_update",
                "recipient": {"type": "user", "EID": user_eid},
                "localizableBody": _localize(NEW_SCHEDULE_BODIES, week),
            },
        )
