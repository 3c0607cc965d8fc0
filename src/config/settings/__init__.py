"""Agregador de settings do gateway.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
    parse_port,
)

# Push settings
from config.settings.push import (
    ONESIGNAL_API_URL,
    ApnsSettings,
    FcmSettings,
    OneSignalSettings,
    PushBackend,
    PushSettings,
    get_apns_settings,
    get_fcm_settings,
    get_onesignal_settings,
    get_push_settings,
)

# Collaborator settings
from config.settings.stripe import StripeSettings, get_stripe_settings
from config.settings.supabase import SupabaseSettings, get_supabase_settings

__all__ = [
    # Constants
    "DEFAULT_PORT",
    "ONESIGNAL_API_URL",
    # Push
    "ApnsSettings",
    # Base
    "BaseSettings",
    "Environment",
    "FcmSettings",
    "OneSignalSettings",
    "PushBackend",
    "PushSettings",
    # Payments
    "StripeSettings",
    # Data store
    "SupabaseSettings",
    "get_apns_settings",
    "get_base_settings",
    "get_fcm_settings",
    "get_onesignal_settings",
    "get_push_settings",
    "get_stripe_settings",
    "get_supabase_settings",
    "parse_port",
]
