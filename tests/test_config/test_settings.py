"""Testes para config.settings.

Valida defaults, leitura de ambiente e validate() de cada integração.
"""

from __future__ import annotations

import pytest

from config.settings import (
    ApnsSettings,
    BaseSettings,
    OneSignalSettings,
    PushSettings,
    StripeSettings,
    SupabaseSettings,
    get_apns_settings,
    get_base_settings,
    get_push_settings,
    get_stripe_settings,
    get_supabase_settings,
    parse_port,
)


class TestBaseSettings:
    """Testes para BaseSettings e parse_port."""

    def test_default_values(self) -> None:
        settings = BaseSettings()

        assert settings.environment == "development"
        assert settings.port == 8080
        assert settings.is_development is True
        assert settings.validate() == []

    def test_immutable(self) -> None:
        settings = BaseSettings()

        with pytest.raises(AttributeError):
            settings.port = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("3000", 3000), ("8080.0", 8080), ("0", None), ("-1", None), ("abc", None), ("", None), (None, None)],
    )
    def test_parse_port(self, raw: str | None, expected: int | None) -> None:
        assert parse_port(raw) == expected

    def test_env_aliases(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("PORT", "nope")

        settings = get_base_settings()

        assert settings.is_production is True
        assert settings.port == 8080

    def test_port_out_of_range_is_invalid(self) -> None:
        assert BaseSettings(port=70000).validate() == ["PORT fora do intervalo válido: 70000"]


class TestStripeSettings:
    """Testes para StripeSettings."""

    def test_placeholder_key_is_disabled(self) -> None:
        settings = StripeSettings(secret_key="sk_test_placeholder")

        assert settings.enabled is False
        assert "STRIPE_SECRET_KEY contém valor placeholder" in settings.validate()

    def test_env_currency_is_lowercased(self, monkeypatch) -> None:
        monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
        monkeypatch.setenv("STRIPE_DEFAULT_CURRENCY", "USD")

        settings = get_stripe_settings()

        assert settings.enabled is True
        assert settings.default_currency == "usd"
        assert settings.validate() == []


class TestSupabaseSettings:
    """Testes para SupabaseSettings."""

    def test_requires_url_and_key(self) -> None:
        assert SupabaseSettings(url="https://x.supabase.co").enabled is False
        assert SupabaseSettings().validate() == [
            "SUPABASE_URL não configurado",
            "SUPABASE_SERVICE_ROLE_KEY não configurado",
        ]

    def test_legacy_env_names(self, monkeypatch) -> None:
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
        monkeypatch.setenv("VITE_SUPABASE_URL", "https://legacy.supabase.co")
        monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")

        settings = get_supabase_settings()

        assert settings.url == "https://legacy.supabase.co"
        assert settings.service_role_key == "service-key"
        assert settings.profile_photos_bucket == "profile-photos"


class TestPushSettings:
    """Testes das settings de push."""

    def test_default_backend_is_onesignal(self, monkeypatch) -> None:
        monkeypatch.delenv("PUSH_BACKEND", raising=False)

        assert get_push_settings().backend == "onesignal"

    def test_unknown_backend_is_invalid(self) -> None:
        assert PushSettings(backend="pusher").validate()

    def test_onesignal_needs_both_keys(self) -> None:
        assert OneSignalSettings(app_id="app").enabled is False
        assert OneSignalSettings(rest_api_key="key").validate() == ["ONESIGNAL_APP_ID não configurado"]
        assert OneSignalSettings(api_url="https://os.test/api/v1/").notifications_endpoint == (
            "https://os.test/api/v1/notifications"
        )

    def test_apns_partial_credentials_are_invalid(self) -> None:
        settings = ApnsSettings(key_id="K1")

        assert settings.enabled is False
        assert settings.validate() == ["APNS_KEY_PATH, APNS_KEY_ID e APNS_TEAM_ID devem vir juntos"]

    def test_apns_sandbox_switch(self, monkeypatch) -> None:
        monkeypatch.setenv("APNS_PRODUCTION", "false")

        assert get_apns_settings().api_url == "https://api.sandbox.push.apple.com"
        assert ApnsSettings().api_url == "https://api.push.apple.com"
