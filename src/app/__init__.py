"""Coração do gateway: casos de uso, regras e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, dependências)
- domain/: regras e tipos de valor (allow-lists, taxas, status, push)
- use_cases/: casos de uso (orquestram sanitizer e colaboradores)
- services/: serviços puros (sanitizer, foto de perfil)
- infra/: implementações concretas de IO (Supabase, Stripe, push)
- protocols/: contratos/interfaces dos colaboradores
- observability/: correlation id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
