import pytest
from pydantic import ValidationError

from app import create_app
from config.settings import Settings


def test_missing_jwt_secret_fails_fast(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_jwt_secret_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, JWT_SECRET="   ")


def test_app_refuses_to_start_without_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.chdir("/")
    with pytest.raises(ValidationError):
        create_app()


def test_bcrypt_rounds_below_ten_are_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, JWT_SECRET="s", BCRYPT_ROUNDS=4)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("CORS_ORIGINS", " https://app.example.com, http://localhost:5173 ,")
    settings = Settings(_env_file=None)

    assert settings.JWT_SECRET == "from-env"
    assert settings.get_cors_origins() == ["https://app.example.com", "http://localhost:5173"]
    assert settings.BCRYPT_ROUNDS >= 10
