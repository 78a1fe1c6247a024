"""API — camada de borda com a plataforma Speakap.

Responsabilidades:
- Verificar signed requests recebidos do Speakap
- Chamar a API REST do Speakap
- Expor endpoints HTTP do app (signed request, health)

Subpastas:
- connectors/: adapters de protocolo por plataforma
- routes/: endpoints HTTP (signed request, health)

NÃO PODE conter: persistência de sessão nem regras de negócio do app.
"""
