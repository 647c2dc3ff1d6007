import pytest

from core import config, db


class TestDatabaseUrl:
    def test_missing_url_raises(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(RuntimeError):
            db.database_url()

    def test_sslmode_is_stripped(self, monkeypatch):
        monkeypatch.setenv(
            "DATABASE_URL",
            "postgresql://app:secret@db:5432/company?sslmode=require&application_name=dir",
        )

        assert db.database_url() == "postgresql://app:secret@db:5432/company?application_name=dir"

    def test_plain_url_is_untouched(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "  postgresql://app@db/company  ")

        assert db.database_url() == "postgresql://app@db/company"


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "LOG_LEVEL", "BOOTSTRAP_BLOCKING"):
            monkeypatch.delenv(name, raising=False)

        assert config.port() == 3000
        assert config.host() == "0.0.0.0"
        assert config.log_level() == "INFO"
        assert config.bootstrap_blocking() is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("BOOTSTRAP_BLOCKING", "yes")

        assert config.port() == 8080
        assert config.log_level() == "DEBUG"
        assert config.bootstrap_blocking() is True

    def test_bad_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")

        assert config.port() == 3000


class TestEnvFile:
    def test_env_file_value_reaches_config(self, monkeypatch, tmp_path):
        # setenv first so the delete is undone back to the original state.
        monkeypatch.setenv("PORT", "1")
        monkeypatch.delenv("PORT")
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=4123\n")

        assert config.load_env_file(str(env_file))
        assert config.port() == 4123

    def test_environment_wins_over_env_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "8080")
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=4123\n")

        config.load_env_file(str(env_file))

        assert config.port() == 8080
