"""API: camada de borda HTTP do gateway.

Responsabilidades:
- Receber requests do app mobile e validar o formato do body
- Traduzir falhas para respostas JSON uniformes
- Conectores HTTP para APIs externas sem SDK

Subpastas:
- connectors/: clientes HTTP por provider (OneSignal)
- routes/: endpoints HTTP por área (pagamentos, perfis, jobs, push, health)

NÃO PODE conter: regras de negócio (ficam em app/domain e app/use_cases).
"""
