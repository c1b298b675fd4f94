import dataclasses
import os
from datetime import timedelta

import pytest

from ledger_backend.config import Settings


def test_secret_is_required_outside_testing():
    with pytest.raises(ValueError):
        Settings.from_env({})


def test_testing_falls_back_to_a_secret():
    settings = Settings.from_env({"TESTING": "true"})
    assert settings.testing
    assert settings.jwt_secret_key


def test_reads_environment():
    settings = Settings.from_env({
        "JWT_SECRET_KEY": "abc",
        "DB_PATH": "/tmp/x.db",
        "JWT_EXPIRES_MINUTES": "5",
        "CORS_ORIGINS": "http://a, http://b,",
        "PROTECT_ALL_TRANSACTION_ROUTES": "yes",
        "PORT": "8080",
        "LOG_LEVEL": "debug",
    })
    assert settings.jwt_secret_key == "abc"
    assert settings.db_path == "/tmp/x.db"
    assert settings.cors_origins == ("http://a", "http://b")
    assert settings.protect_all_transaction_routes is True
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.flask_config()["JWT_ACCESS_TOKEN_EXPIRES"] == timedelta(minutes=5)


def test_zero_lifetime_disables_expiry():
    settings = Settings.from_env({"JWT_SECRET_KEY": "abc", "JWT_EXPIRES_MINUTES": "0"})
    assert settings.flask_config()["JWT_ACCESS_TOKEN_EXPIRES"] is False


def test_settings_are_immutable():
    settings = Settings(jwt_secret_key="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.jwt_secret_key = "changed"


def test_as_dict_hides_secret():
    assert Settings(jwt_secret_key="abc").as_dict()["jwt_secret_key"] == "***"


def test_default_db_path_is_relative_to_working_directory():
    settings = Settings.from_env({"JWT_SECRET_KEY": "abc"})
    assert not os.path.isabs(settings.db_path)
    assert settings.db_path == os.path.join("data", "ledger.db")
