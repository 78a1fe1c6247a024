"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e constrói o cliente
da API Speakap e os serviços que dependem dele.

Uso:
    from app.bootstrap import initialize_app, get_speakap_api_client

    initialize_app()
    api = get_speakap_api_client()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_speakap_settings

if TYPE_CHECKING:
    from api.connectors.speakap import SpeakapApiClient
    from app.services import ScheduleNotifier

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging conforme BaseSettings (JSON fora de debug).

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        json_format=not base.debug,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG, texto simples)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
        json_format=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"speakap: {error}" for error in get_speakap_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_speakap_api_client() -> SpeakapApiClient:
    """Obtém o cliente da API Speakap (singleton; config imutável).

    Raises:
        InvalidConfigError: Se SPEAKAP_SCHEME/SPEAKAP_API_HOSTNAME forem inválidos
    """
    from api.connectors.speakap import create_speakap_api_client

    return create_speakap_api_client()


def create_schedule_notifier() -> ScheduleNotifier:
    """Cria ScheduleNotifier ligado ao cliente singleton."""
    from app.services import ScheduleNotifier

    return ScheduleNotifier(get_speakap_api_client())
