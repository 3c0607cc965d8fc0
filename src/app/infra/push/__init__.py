"""Adapters de push notification (nativo APNs/FCM e OneSignal)."""

from .base import BasePushDispatcher
from .native_dispatcher import NativePushDispatcher
from .onesignal_dispatcher import OneSignalPushDispatcher

__all__ = [
    "BasePushDispatcher",
    "NativePushDispatcher",
    "OneSignalPushDispatcher",
]
