"""Connectors — adapters de borda para APIs externas.

Estrutura:
- speakap/: signed request e API REST do Speakap
"""

__all__: list[str] = []
