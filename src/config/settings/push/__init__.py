"""Agregador de settings de push notification.

Re-exporta as settings de cada canal de entrega e a seleção de backend.
"""

from __future__ import annotations

from config.settings.push.apns import ApnsSettings, get_apns_settings
from config.settings.push.core import PushBackend, PushSettings, get_push_settings
from config.settings.push.fcm import FcmSettings, get_fcm_settings
from config.settings.push.onesignal import (
    ONESIGNAL_API_URL,
    OneSignalSettings,
    get_onesignal_settings,
)

__all__ = [
    "ONESIGNAL_API_URL",
    # APNs
    "ApnsSettings",
    # FCM
    "FcmSettings",
    # OneSignal
    "OneSignalSettings",
    # Backend
    "PushBackend",
    "PushSettings",
    "get_apns_settings",
    "get_fcm_settings",
    "get_onesignal_settings",
    "get_push_settings",
]
