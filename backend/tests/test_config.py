import pytest

from inkwell.config import Settings, validate_settings
from inkwell.core.database import Database
from inkwell.main import create_app
from inkwell.models import User


def make_settings(**overrides):
    values = dict(_env_file=None, database_url="sqlite://", jwt_secret_key="test-secret-key")
    values.update(overrides)
    return Settings(**values)


def test_valid_settings():
    validate_settings(make_settings())


@pytest.mark.parametrize("overrides, message", [
    ({"jwt_secret_key": None}, "JWT_SECRET_KEY is required"),
    ({"jwt_secret_key": ""}, "JWT_SECRET_KEY is required"),
    ({"jwt_expiration_hours": 0}, "JWT_EXPIRATION_HOURS must be positive"),
    ({"password_reset_expiration_minutes": -5}, "PASSWORD_RESET_EXPIRATION_MINUTES must be positive"),
    ({"smtp_host": "smtp.example.com"}, "EMAIL_FROM is required when SMTP_HOST is set"),
])
def test_invalid_settings(overrides, message):
    with pytest.raises(ValueError, match=message):
        validate_settings(make_settings(**overrides))


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
    monkeypatch.setenv("JWT_EXPIRATION_HOURS", "2")
    settings = Settings(_env_file=None)
    assert settings.jwt_secret_key == "from-env"
    assert settings.jwt_expiration_hours == 2


def test_create_app_refuses_missing_secret():
    with pytest.raises(ValueError):
        create_app(make_settings(jwt_secret_key=None))


def test_apps_do_not_share_databases():
    first = create_app(make_settings())
    second = create_app(make_settings())
    try:
        with first.state.database.transaction() as session:
            session.add(User(email="solo@example.com", hashed_password="x", first_name="So", last_name="Lo"))

        with second.state.database.transaction() as session:
            assert session.query(User).count() == 0
        with first.state.database.transaction() as session:
            assert session.query(User).count() == 1
    finally:
        first.state.database.dispose()
        second.state.database.dispose()


def test_database_file_lifecycle(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'inkwell.db'}")
    database.create_all()
    try:
        with database.transaction() as session:
            session.add(User(email="file@example.com", hashed_password="x", first_name="Fi", last_name="Le"))
        with database.transaction() as session:
            assert session.query(User).filter(User.email == "file@example.com").count() == 1
        database.drop_all()
    finally:
        database.dispose()
