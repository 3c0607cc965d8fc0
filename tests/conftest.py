"""Configuração do pytest para o gateway Dandee."""

import sys
from pathlib import Path

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest  # noqa: E402

from config.settings import (  # noqa: E402
    get_apns_settings,
    get_base_settings,
    get_fcm_settings,
    get_onesignal_settings,
    get_push_settings,
    get_stripe_settings,
    get_supabase_settings,
)

_SETTINGS_GETTERS = (
    get_apns_settings,
    get_base_settings,
    get_fcm_settings,
    get_onesignal_settings,
    get_push_settings,
    get_stripe_settings,
    get_supabase_settings,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings são cacheadas por processo; cada teste lê o ambiente de novo."""
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
