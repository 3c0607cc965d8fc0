"""Rotas HTTP da API: adapters de entrada por área.

Responsabilidades:
- Definir endpoints HTTP (negócio, health)
- Checagem de campos obrigatórios do request
- Delegação para use_cases e colaboradores via dependências
- Tradução de falhas de provider para respostas HTTP

Estrutura por área:
- routes/payments/: payment intents, Stripe Connect e registros
- routes/onboarding/, routes/profiles/: cadastro de usuários
- routes/jobs/, routes/scheduling/: job requests e agenda
- routes/notifications/, routes/reviews/, routes/push/
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import API_PREFIX, create_api_router

__all__ = ["API_PREFIX", "create_api_router"]
