"""Serviços de aplicação.

Unidades reutilizáveis que consomem a API Speakap via protocolos.
"""

from app.services.schedule_notifier import ScheduleNotifier

__all__ = [
    "ScheduleNotifier",
]
