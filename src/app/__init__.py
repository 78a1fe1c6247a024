"""App — composição e serviços do app Speakap.

Subpastas:
- bootstrap/: composition root (logging, settings, cliente da API)
- services/: serviços de aplicação (ex: notificações de escala)
- protocols/: contratos consumidos pelos serviços
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
