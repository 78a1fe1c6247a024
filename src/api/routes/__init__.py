"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (signed request, health)
- Validação inicial de request
- Delegação para connectors
- Respostas HTTP apropriadas

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
