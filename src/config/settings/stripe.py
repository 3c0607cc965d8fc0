"""Settings do processador de pagamentos (Stripe).

Sem STRIPE_SECRET_KEY o gateway de pagamentos não é criado e as rotas
de pagamento respondem 503.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_CONNECT_REFRESH_URL = "https://dandee.app/contractor/onboarding/refresh"
DEFAULT_CONNECT_RETURN_URL = "https://dandee.app/contractor/onboarding/complete"


@dataclass(frozen=True)
class StripeSettings:
    """Configurações do Stripe.

    Attributes:
        secret_key: Chave secreta da API (sk_live_/sk_test_)
        default_currency: Moeda usada quando o request não informa
        connect_refresh_url: URL de refresh do onboarding Connect
        connect_return_url: URL de retorno do onboarding Connect
    """

    secret_key: str = ""
    default_currency: str = "usd"
    connect_refresh_url: str = DEFAULT_CONNECT_REFRESH_URL
    connect_return_url: str = DEFAULT_CONNECT_RETURN_URL

    @property
    def enabled(self) -> bool:
        """True quando há chave utilizável (não placeholder)."""
        return bool(self.secret_key) and "placeholder" not in self.secret_key

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Stripe.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.secret_key:
            errors.append("STRIPE_SECRET_KEY não configurado")
        elif "placeholder" in self.secret_key:
            errors.append("STRIPE_SECRET_KEY contém valor placeholder")

        if len(self.default_currency) != 3:
            errors.append("STRIPE_DEFAULT_CURRENCY deve ter 3 letras (ISO 4217)")

        return errors


def _load_stripe_from_env() -> StripeSettings:
    """Carrega StripeSettings de variáveis de ambiente."""
    return StripeSettings(
        secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        default_currency=os.getenv("STRIPE_DEFAULT_CURRENCY", "usd").lower(),
        connect_refresh_url=os.getenv(
            "STRIPE_CONNECT_REFRESH_URL", DEFAULT_CONNECT_REFRESH_URL
        ),
        connect_return_url=os.getenv(
            "STRIPE_CONNECT_RETURN_URL", DEFAULT_CONNECT_RETURN_URL
        ),
    )


@lru_cache(maxsize=1)
def get_stripe_settings() -> StripeSettings:
    """Retorna instância cacheada de StripeSettings."""
    return _load_stripe_from_env()
