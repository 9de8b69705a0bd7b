"""Unit tests for application settings."""

from msgvault_config import Settings, get_settings


class TestSettings:
    """Test settings defaults and environment loading."""

    def test_encryption_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("ENCRYPTION_ENABLED", raising=False)
        monkeypatch.delenv("ENCRYPTION_KEY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.encryption_enabled is False
        assert settings.encryption_key is None

    def test_database_url_from_postgres_parts(self):
        settings = Settings(
            _env_file=None,
            postgres_user="chat",
            postgres_password="s3cret",
            postgres_host="db",
            postgres_port=5433,
            postgres_db="messages",
        )

        assert settings.database_url == (
            "postgresql+asyncpg://chat:s3cret@db:5433/messages"
        )

    def test_database_url_override(self):
        settings = Settings(
            _env_file=None,
            database_url_override="sqlite+aiosqlite:///messages.db",
        )

        assert settings.database_url == "sqlite+aiosqlite:///messages.db"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ENCRYPTION_ENABLED", "true")
        monkeypatch.setenv("ENCRYPTION_KEY", "a2V5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.encryption_enabled is True
        assert settings.encryption_key.get_secret_value() == "a2V5"
        assert settings.log_level == "DEBUG"

    def test_key_is_masked(self):
        settings = Settings(_env_file=None, encryption_key="a2V5")

        assert "a2V5" not in repr(settings)
